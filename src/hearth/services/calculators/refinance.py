# src/hearth/services/calculators/refinance.py

from __future__ import annotations

from hearth.adapters.config import config
from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.loan import LoanTerms
from hearth.domain.refinance import compare_refinance

from .common import price_field, rate_pct_field, result, term_years_field

NEVER_BREAKS_EVEN = "Never breaks even with current parameters"


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    balance = inputs["currentBalance"]
    current_rate_pct = inputs["currentRate"]
    new_rate_pct = inputs["newRate"]
    remaining_years = int(inputs["remainingTerm"])
    new_years = int(inputs["newTerm"])
    closing_costs = inputs["closingCosts"]
    rolled = int(inputs.get("rollClosingCosts", 1)) == 1

    new_principal = balance + closing_costs if rolled else balance
    cmp = compare_refinance(
        LoanTerms(principal=balance, annual_rate=current_rate_pct / 100, term_months=remaining_years * 12),
        LoanTerms(principal=new_principal, annual_rate=new_rate_pct / 100, term_months=new_years * 12),
        closing_costs=closing_costs,
    )

    # costs paid at closing come out of pocket instead of through the new loan
    lifetime_savings = cmp.lifetime_savings - (0.0 if rolled else closing_costs)
    rate_reduction = current_rate_pct - new_rate_pct

    if cmp.never_breaks_even:
        break_even = result("Break-Even Point", 0, fmt="number", description=NEVER_BREAKS_EVEN, highlight=True)
    else:
        break_even = result(
            "Break-Even Point",
            cmp.break_even_months,
            fmt="number",
            description="Months to recover closing costs through savings",
            highlight=True,
        )

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
        break_even,
        result(
            "Lifetime Savings",
            lifetime_savings,
            description=f"Total savings over {new_years} years"
            if lifetime_savings >= 0
            else f"Additional cost over {new_years} years",
        ),
        result(
            "Closing Costs",
            closing_costs,
            description="Upfront costs to refinance (rolled into new loan)" if rolled else "Upfront costs to refinance (paid at closing)",
        ),
        result(
            "New Loan Amount",
            new_principal,
            description="Current balance plus closing costs" if rolled else "Current balance",
        ),
        result(
            "Interest Rate Reduction",
            rate_reduction / 100,
            fmt="percentage",
            description="Reduction in interest rate" if rate_reduction >= 0 else "Increase in interest rate",
        ),
        result(
            "Total Interest (Current Loan)",
            cmp.current_total_interest,
            description=f"Total interest over remaining {remaining_years} years",
        ),
        result("Total Interest (New Loan)", cmp.new_total_interest, description=f"Total interest over {new_years} years"),
        result(
            "Lifetime Interest Change",
            cmp.lifetime_interest_delta,
            description="New loan interest minus remaining interest on the current loan",
        ),
    ]


CONFIG = CalculatorConfig(
    id="refinance",
    title="Refinance Calculator",
    description="Compare your current mortgage with a refinanced loan and see your monthly savings and break-even point.",
    inputs=[
        price_field("currentBalance", "Current Loan Balance", "250000", "Remaining principal on your current mortgage"),
        rate_pct_field("currentRate", "Current Interest Rate (%)", None, placeholder="7.5", help_text="Rate on your current mortgage"),
        rate_pct_field("newRate", "New Interest Rate (%)", None, placeholder="6.5", help_text="Rate offered on the new loan"),
        term_years_field("remainingTerm", "Remaining Term (years)", None, placeholder="25", help_text="Years left on your current mortgage"),
        term_years_field("newTerm", "New Loan Term (years)", 30, help_text="Length of the new mortgage in years"),
        InputField(
            name="closingCosts",
            label="Closing Costs",
            type="currency",
            min=0,
            max=100000,
            step=500,
            placeholder=f"{config.DEFAULT_REFI_CLOSING_COSTS:.0f}",
            default_value=config.DEFAULT_REFI_CLOSING_COSTS,
            help_text="Lender and third-party fees to refinance",
        ),
        InputField(
            name="rollClosingCosts",
            label="Closing Costs Paid",
            type="number",
            min=0,
            max=1,
            step=1,
            required=False,
            default_value=1,
            options={0: "At closing", 1: "Rolled into the new loan"},
        ),
    ],
    calculate=calculate,
    keywords=("refinance calculator", "mortgage refinance", "break-even calculator"),
)
