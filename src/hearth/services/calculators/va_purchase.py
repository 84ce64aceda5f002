# src/hearth/services/calculators/va_purchase.py

from __future__ import annotations

from hearth.adapters.config import config
from hearth.domain.amortization import compute_early_payoff
from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.loan import LoanTerms, LumpSumFrequency, PaymentFrequency
from hearth.domain.payment import RecurringCosts, compose
from hearth.domain.programs import (
    VA_FUNDING_FEE_RATES,
    ProgramFeeSpec,
    VATier,
    compute_fee,
    compute_ltv,
    final_loan_amount,
)
from hearth.domain.units import dollar_to_percent

from .common import (
    MAX_PRICE,
    amount_in_dollars,
    amount_mode_field,
    pick,
    price_field,
    rate_pct_field,
    require_down_payment_within,
    result,
    term_years_field,
)

VA_TIERS: dict[int, VATier] = {1: "first-time", 2: "subsequent", 3: "exempt"}
PAYMENT_FREQUENCIES: dict[int, PaymentFrequency] = {1: "monthly", 2: "bi-weekly", 3: "weekly"}
LUMP_SUM_FREQUENCIES: dict[int, LumpSumFrequency] = {1: "one-time", 2: "yearly", 3: "quarterly"}

VA_TIER_FIELD = InputField(
    name="vaFundingFeeType",
    label="VA Funding Fee",
    type="number",
    min=1,
    max=3,
    step=1,
    required=False,
    default_value=1,
    options={1: "First-time use (2.15%)", 2: "Subsequent use (3.3%)", 3: "Exempt (disability)"},
    help_text="Veterans receiving VA disability compensation are exempt",
)


def funding_fee_note(tier: VATier) -> str:
    if tier == "exempt":
        return "VA funding fee waived (exempt)"
    return f"VA funding fee ({VA_FUNDING_FEE_RATES[tier] * 100:.2f}% of loan amount, typically financed into loan)"


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    """
    VA purchase: the funding fee is financed into the loan, there is no
    monthly mortgage insurance, and an optional early-payoff strategy
    (extra payments at a chosen frequency plus lump sums) is compared with
    the plain schedule.
    """
    home_price = inputs["homePrice"]
    down_payment = inputs.get("downPayment", 0.0)
    require_down_payment_within(home_price, down_payment)

    tier = pick(VA_TIERS, inputs.get("vaFundingFeeType", 1), "vaFundingFeeType")
    frequency = pick(PAYMENT_FREQUENCIES, inputs.get("paymentFrequency", 1), "paymentFrequency")
    lump_frequency = pick(LUMP_SUM_FREQUENCIES, inputs.get("lumpSumFrequency", 1), "lumpSumFrequency")

    term_months = int(inputs["loanTerm"]) * 12
    base_loan = home_price - down_payment
    fee = compute_fee(base_loan, ProgramFeeSpec(program_type="va", va_tier=tier))
    loan_amount = final_loan_amount(base_loan, fee.upfront)

    payoff = compute_early_payoff(
        LoanTerms(principal=loan_amount, annual_rate=inputs["interestRate"] / 100, term_months=term_months),
        additional_monthly=inputs.get("additionalPayment", 0.0),
        frequency=frequency,
        lump_sum=inputs.get("lumpSum", 0.0),
        lump_sum_frequency=lump_frequency,
    )

    annual_insurance = amount_in_dollars(inputs, "insurance", "insuranceMode", home_price)
    costs = RecurringCosts(
        monthly_tax=home_price * inputs["propertyTaxRate"] / 100 / 12,
        monthly_insurance=annual_insurance / 12,
        monthly_hoa=inputs.get("hoa", 0.0),
    )
    breakdown = compose(payoff.baseline, fee, costs)

    baseline = payoff.baseline
    accelerated = payoff.accelerated
    total_cost = (
        down_payment
        + loan_amount
        + baseline.total_interest
        + (costs.monthly_tax + costs.monthly_insurance + costs.monthly_hoa) * baseline.actual_term_months
    )

    return [
        result(
            "Total Monthly Payment",
            breakdown.total,
            description="Your total monthly payment including P&I, taxes, insurance, and HOA (no PMI required)",
            highlight=True,
        ),
        result("Principal & Interest", breakdown.principal_interest, description="Monthly principal and interest payment on the loan"),
        result("Property Taxes", breakdown.tax, description="Estimated monthly property tax payment"),
        result("Homeowners Insurance", breakdown.insurance, description="Monthly homeowners insurance payment"),
        result("HOA Fees", breakdown.hoa, description="Monthly homeowners association fees"),
        result(
            "Base Loan Amount",
            base_loan,
            description="The mortgage loan amount before funding fee (home price minus down payment)",
        ),
        result("VA Funding Fee", fee.upfront, description=funding_fee_note(tier)),
        result("Total Loan Amount", loan_amount, description="Total loan amount including VA funding fee"),
        result(
            "Down Payment",
            down_payment,
            description=f"Your down payment ({dollar_to_percent(down_payment, home_price):.1f}% of home price)",
        ),
        result("Total Interest Paid", baseline.total_interest, description=f"Total interest paid over {term_months // 12} years"),
        result(
            "Total Cost",
            total_cost,
            description=f"Total cost including down payment, all payments, taxes, insurance, and HOA over {term_months // 12} years",
        ),
        result(
            "Loan-to-Value Ratio",
            compute_ltv(home_price, base_loan) / 100,
            fmt="percentage",
            description="The ratio of your base loan amount to the home price",
        ),
        result(
            "Payment Per Period",
            payoff.payment_per_period,
            description=f"Principal, interest, and additional payment made {frequency}",
        ),
        result(
            "Interest Savings",
            payoff.interest_savings,
            description="Interest avoided with additional and lump-sum payments",
            highlight=payoff.interest_savings > 0,
        ),
        result(
            "Term Reduction",
            payoff.term_reduction_months,
            fmt="number",
            description="Months cut from the loan by paying extra",
        ),
        result(
            "New Payoff Time",
            accelerated.actual_term_months,
            fmt="number",
            description="Months until payoff with the early payoff strategy",
        ),
    ]


CONFIG = CalculatorConfig(
    id="va-purchase",
    title="VA Purchase Calculator",
    description="Estimate your VA loan payment with the funding fee financed in, and see how extra payments shorten the loan.",
    inputs=[
        price_field("homePrice", "Home Price", "350000", "The purchase price of the home"),
        InputField(
            name="downPayment",
            label="Down Payment",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            placeholder="0",
            default_value=0,
            help_text="VA loans allow 0% down",
        ),
        rate_pct_field("interestRate", "Interest Rate (%)", 6.5, help_text="Current VA mortgage rate"),
        term_years_field("loanTerm", "Loan Term (years)", config.DEFAULT_LOAN_TERM_YEARS),
        VA_TIER_FIELD,
        InputField(
            name="propertyTaxRate",
            label="Property Tax Rate (%)",
            type="percentage",
            min=0,
            max=10,
            step=0.1,
            placeholder=f"{config.DEFAULT_PROPERTY_TAX_RATE_PCT:g}",
            default_value=config.DEFAULT_PROPERTY_TAX_RATE_PCT,
        ),
        amount_mode_field("insuranceMode", "Insurance Entered As"),
        InputField(
            name="insurance",
            label="Annual Insurance",
            type="currency",
            min=0,
            max=100000,
            step=100,
            placeholder=f"{config.DEFAULT_INSURANCE_ANNUAL:.0f}",
            default_value=config.DEFAULT_INSURANCE_ANNUAL,
        ),
        InputField(
            name="hoa",
            label="Monthly HOA Fees",
            type="currency",
            min=0,
            max=10000,
            step=50,
            required=False,
            placeholder="0",
            default_value=0,
        ),
        InputField(
            name="additionalPayment",
            label="Additional Payment",
            type="currency",
            min=0,
            max=100000,
            step=50,
            required=False,
            placeholder="0",
            default_value=0,
            help_text="Extra principal per month; scaled to the payment frequency",
        ),
        InputField(
            name="paymentFrequency",
            label="Payment Frequency",
            type="number",
            min=1,
            max=3,
            step=1,
            required=False,
            default_value=1,
            options={1: "Monthly", 2: "Bi-weekly", 3: "Weekly"},
        ),
        InputField(
            name="lumpSum",
            label="Lump Sum Payment",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=500,
            required=False,
            placeholder="0",
            default_value=0,
        ),
        InputField(
            name="lumpSumFrequency",
            label="Lump Sum Frequency",
            type="number",
            min=1,
            max=3,
            step=1,
            required=False,
            default_value=1,
            options={1: "One-time", 2: "Yearly", 3: "Quarterly"},
        ),
    ],
    calculate=calculate,
    keywords=("VA loan calculator", "VA funding fee calculator", "VA home loan"),
)
