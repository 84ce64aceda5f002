# src/hearth/services/calculators/purchase.py

from __future__ import annotations

from hearth.adapters.config import config
from hearth.domain.amortization import simulate_payoff
from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.payment import RecurringCosts, compose
from hearth.domain.programs import (
    ProgramFeeSpec,
    ProgramType,
    compute_fee,
    compute_ltv,
    final_loan_amount,
    upfront_premium,
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

LOAN_PROGRAMS: dict[int, ProgramType] = {
    0: "conventional",
    1: "fha",
    2: "usda",
    3: "jumbo",
}

_MI_DESCRIPTIONS = {
    "conventional": "Private mortgage insurance (0.5%/yr) while LTV is above 80%",
    "fha": "FHA annual mortgage insurance premium (0.85%/yr)",
    "usda": "USDA annual guarantee fee (0.35%/yr)",
    "jumbo": "Mortgage insurance you entered for this jumbo loan",
}


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    """
    Monthly payment for a purchase: P&I on the financed loan, program
    mortgage insurance, taxes, insurance, HOA and optional extra principal.
    FHA and USDA upfront premiums are financed into the loan.
    """
    home_price = inputs["homePrice"]
    down_payment = amount_in_dollars(inputs, "downPayment", "downPaymentMode", home_price)
    require_down_payment_within(home_price, down_payment)

    program = pick(LOAN_PROGRAMS, inputs.get("loanProgram", 0), "loanProgram")
    rate = inputs["interestRate"] / 100
    term_years = int(inputs["loanTerm"])
    term_months = term_years * 12
    extra = inputs.get("extraPayment", 0.0)

    base_loan = home_price - down_payment
    down_payment_pct = dollar_to_percent(down_payment, home_price)
    fee = compute_fee(
        base_loan,
        ProgramFeeSpec(program_type=program),
        down_payment_pct=down_payment_pct,
        manual_monthly=inputs.get("monthlyMortgageInsurance", 0.0),
    )
    upfront = upfront_premium(base_loan, program)
    loan_amount = final_loan_amount(base_loan, upfront)

    amort = simulate_payoff(loan_amount, rate, term_months, extra)
    baseline = simulate_payoff(loan_amount, rate, term_months) if extra > 0 else amort

    annual_insurance = amount_in_dollars(inputs, "insurance", "insuranceMode", home_price)
    costs = RecurringCosts(
        monthly_tax=home_price * inputs["propertyTaxRate"] / 100 / 12,
        monthly_insurance=annual_insurance / 12,
        monthly_hoa=inputs.get("hoa", 0.0),
    )
    breakdown = compose(amort, fee, costs, extra)

    months = amort.actual_term_months
    recurring = costs.monthly_tax + costs.monthly_insurance + costs.monthly_hoa + fee.monthly_recurring
    total_cost = down_payment + loan_amount + amort.total_interest + recurring * months

    return [
        result(
            "Total Monthly Payment",
            breakdown.total,
            description="Your total monthly payment including P&I, mortgage insurance, taxes, insurance, and HOA",
            highlight=True,
        ),
        result("Principal & Interest", breakdown.principal_interest, description="Monthly principal and interest payment on the loan"),
        result("Property Taxes", breakdown.tax, description="Estimated monthly property tax payment"),
        result("Homeowners Insurance", breakdown.insurance, description="Monthly homeowners insurance payment"),
        result("HOA Fees", breakdown.hoa, description="Monthly homeowners association fees"),
        result("Mortgage Insurance", breakdown.program_fee, description=_MI_DESCRIPTIONS[program]),
        result("Extra Principal", breakdown.extra_payment, description="Additional principal paid every month"),
        result(
            "Loan Amount",
            loan_amount,
            description="Home price minus down payment, plus any financed upfront premium",
        ),
        result(
            "Upfront Mortgage Insurance",
            upfront,
            description="One-time FHA upfront MIP or USDA guarantee fee, financed into the loan",
        ),
        result(
            "Down Payment",
            down_payment,
            description=f"Your down payment ({down_payment_pct:.1f}% of home price)",
        ),
        result("Total Interest Paid", amort.total_interest, description=f"Total interest paid over {months} months"),
        result(
            "Interest Saved",
            baseline.total_interest - amort.total_interest,
            description="Interest avoided by paying extra principal",
        ),
        result(
            "Payoff Time",
            months,
            fmt="number",
            description=f"Months until the loan is paid off ({term_months - months} months early)"
            if months < term_months
            else "Months until the loan is paid off",
        ),
        result(
            "Total Cost",
            total_cost,
            description="Down payment, principal, interest, mortgage insurance, taxes, insurance, and HOA until payoff",
        ),
        result(
            "Loan-to-Value Ratio",
            compute_ltv(home_price, base_loan) / 100,
            fmt="percentage",
            description="The ratio of your base loan amount to the home price",
        ),
    ]


CONFIG = CalculatorConfig(
    id="purchase",
    title="Purchase Calculator",
    description="Estimate your monthly mortgage payment including principal, interest, mortgage insurance, taxes, insurance, and HOA fees.",
    inputs=[
        price_field("homePrice", "Home Price", "350000", "The purchase price of the home"),
        amount_mode_field("downPaymentMode", "Down Payment Entered As"),
        InputField(
            name="downPayment",
            label="Down Payment",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            placeholder="70000",
            help_text="Amount you plan to put down, in dollars or percent of the price",
        ),
        rate_pct_field(
            "interestRate",
            "Interest Rate (%)",
            config.DEFAULT_INTEREST_RATE_PCT,
            help_text="Current mortgage interest rate",
        ),
        term_years_field(
            "loanTerm",
            "Loan Term (years)",
            config.DEFAULT_LOAN_TERM_YEARS,
            help_text="Length of the mortgage in years",
        ),
        InputField(
            name="loanProgram",
            label="Loan Program",
            type="number",
            min=0,
            max=3,
            step=1,
            required=False,
            default_value=0,
            options={0: "Conventional", 1: "FHA", 2: "USDA", 3: "Jumbo"},
            help_text="Determines mortgage insurance and upfront premiums",
        ),
        InputField(
            name="propertyTaxRate",
            label="Property Tax Rate (%)",
            type="percentage",
            min=0,
            max=10,
            step=0.1,
            placeholder=f"{config.DEFAULT_PROPERTY_TAX_RATE_PCT:g}",
            default_value=config.DEFAULT_PROPERTY_TAX_RATE_PCT,
            help_text="Annual property tax as percentage of home price",
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
            help_text="Annual homeowners insurance premium",
        ),
        InputField(
            name="hoa",
            label="Monthly HOA Fees",
            type="currency",
            min=0,
            max=10000,
            step=50,
            placeholder="0",
            default_value=0,
            help_text="Monthly homeowners association fees",
        ),
        InputField(
            name="monthlyMortgageInsurance",
            label="Monthly Mortgage Insurance (Jumbo)",
            type="currency",
            min=0,
            max=10000,
            step=10,
            required=False,
            default_value=0,
            placeholder="0",
            help_text="Only used for jumbo loans, which have no standard estimate",
        ),
        InputField(
            name="extraPayment",
            label="Extra Monthly Principal",
            type="currency",
            min=0,
            max=100000,
            step=50,
            required=False,
            default_value=0,
            placeholder="0",
            help_text="Additional principal paid with every monthly payment",
        ),
    ],
    calculate=calculate,
    keywords=(
        "mortgage calculator",
        "home purchase calculator",
        "monthly payment calculator",
        "PITI calculator",
    ),
)
