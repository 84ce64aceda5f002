# src/hearth/services/calculators/va_refinance.py

from __future__ import annotations

from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.loan import LoanTerms
from hearth.domain.programs import ProgramFeeSpec, compute_fee, final_loan_amount
from hearth.domain.refinance import compare_refinance

from .common import MAX_PRICE, pick, price_field, rate_pct_field, result, term_years_field
from .refinance import NEVER_BREAKS_EVEN
from .va_purchase import VA_TIER_FIELD, VA_TIERS, funding_fee_note


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    """
    VA refinance (IRRRL or cash-out). The funding fee applies to the
    balance plus cash out and is financed into the new loan; break-even is
    measured against that fee.
    """
    balance = inputs["currentBalance"]
    current_rate_pct = inputs["currentRate"]
    new_rate_pct = inputs["newRate"]
    cash_out = inputs.get("cashOutAmount", 0.0)
    remaining_years = int(inputs["remainingTerm"])
    new_years = int(inputs["newTerm"])
    tier = pick(VA_TIERS, inputs.get("vaFundingFeeType", 1), "vaFundingFeeType")

    base_new_loan = balance + cash_out
    fee = compute_fee(base_new_loan, ProgramFeeSpec(program_type="va", va_tier=tier))
    new_loan = final_loan_amount(base_new_loan, fee.upfront)

    cmp = compare_refinance(
        LoanTerms(principal=balance, annual_rate=current_rate_pct / 100, term_months=remaining_years * 12),
        LoanTerms(principal=new_loan, annual_rate=new_rate_pct / 100, term_months=new_years * 12),
        closing_costs=fee.upfront,
    )
    rate_reduction = current_rate_pct - new_rate_pct

    if cmp.never_breaks_even:
        break_even_value, break_even_note = 0.0, NEVER_BREAKS_EVEN
    else:
        break_even_value, break_even_note = cmp.break_even_months, "Months of savings to recover the funding fee"

    return [
        result(
            "New Monthly Payment",
            cmp.new_payment,
            description="Your new monthly principal and interest payment",
            highlight=True,
        ),
        result("Current Monthly Payment", cmp.current_payment, description="Your current monthly principal and interest payment"),
        result(
            "Monthly Savings",
            cmp.monthly_savings,
            description="Amount you save each month"
            if cmp.monthly_savings >= 0
            else "Additional monthly cost (negative savings)",
            highlight=True,
        ),
        result("Break-Even Point", break_even_value, fmt="number", description=break_even_note),
        result("Cash Out Amount", cash_out, description="Cash you receive from the refinance", highlight=cash_out > 0),
        result("VA Funding Fee", fee.upfront, description=funding_fee_note(tier)),
        result("New Loan Amount", new_loan, description="Total new loan amount including cash out and funding fee"),
        result("Current Loan Balance", balance, description="Your current mortgage balance"),
        result(
            "Loan Increase",
            new_loan - balance,
            description="Amount your loan balance will increase (cash out + funding fee)",
        ),
        result(
            "Interest Rate Reduction",
            rate_reduction / 100,
            fmt="percentage",
            description="Reduction in interest rate" if rate_reduction >= 0 else "Increase in interest rate",
        ),
        result(
            "Lifetime Savings",
            cmp.lifetime_savings,
            description=f"Total savings over {new_years} years"
            if cmp.lifetime_savings >= 0
            else f"Additional cost over {new_years} years",
        ),
        result(
            "Total Interest (Current Loan)",
            cmp.current_total_interest,
            description=f"Total interest over remaining {remaining_years} years at current rate",
        ),
        result(
            "Total Interest (New Loan)",
            cmp.new_total_interest,
            description=f"Total interest over {new_years} years at new rate",
        ),
    ]


CONFIG = CalculatorConfig(
    id="va-refinance",
    title="VA Refinance Calculator",
    description="Compare your current loan with a VA streamline or cash-out refinance, funding fee included.",
    inputs=[
        price_field("currentBalance", "Current Loan Balance", "300000"),
        rate_pct_field("currentRate", "Current Interest Rate (%)", None, placeholder="7.0"),
        term_years_field("remainingTerm", "Remaining Term (years)", 30, help_text="Years left on your current mortgage"),
        rate_pct_field("newRate", "New Interest Rate (%)", None, placeholder="6.0"),
        term_years_field("newTerm", "New Loan Term (years)", 30),
        InputField(
            name="cashOutAmount",
            label="Cash Out Amount",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            required=False,
            placeholder="0",
            default_value=0,
            help_text="Equity to take out as cash; 0 for a streamline (IRRRL) refinance",
        ),
        VA_TIER_FIELD,
    ],
    calculate=calculate,
    keywords=("VA refinance calculator", "VA IRRRL", "VA cash-out refinance"),
)
