# src/hearth/services/calculators/affordability.py

from __future__ import annotations

from hearth.adapters.config import config
from hearth.domain.amortization import compute_monthly_pi, principal_from_payment
from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.programs import compute_ltv

from .common import rate_pct_field, result, share_of, term_years_field


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    """
    Maximum home price from income: the monthly budget is gross monthly
    income times the DTI limit minus existing debts, and the loan is the
    principal that budget amortizes over the term.
    """
    monthly_income = inputs["annualIncome"] / 12
    monthly_debts = inputs["monthlyDebts"]
    down_payment = inputs["downPayment"]
    dti_limit_pct = inputs.get("dtiLimit", config.AFFORDABILITY_DTI_PCT)
    rate = inputs["interestRate"] / 100
    term_months = int(inputs.get("loanTerm", config.DEFAULT_LOAN_TERM_YEARS)) * 12

    max_monthly_payment = max(monthly_income * dti_limit_pct / 100 - monthly_debts, 0.0)
    max_loan = principal_from_payment(max_monthly_payment, rate, term_months)
    max_home_price = max_loan + down_payment
    estimated_payment = compute_monthly_pi(max_loan, rate, term_months)
    dti = share_of(estimated_payment + monthly_debts, monthly_income)

    return [
        result(
            "Maximum Home Price",
            max_home_price,
            description="The maximum home price you can afford based on your income and debts",
            highlight=True,
        ),
        result("Maximum Loan Amount", max_loan, description="The maximum mortgage loan amount you qualify for"),
        result("Down Payment", down_payment, description="Your planned down payment amount"),
        result(
            "Maximum Monthly Payment",
            max_monthly_payment,
            description=f"{dti_limit_pct:g}% of gross monthly income minus existing debts",
        ),
        result(
            "Estimated Monthly Payment",
            estimated_payment,
            description="Estimated principal and interest payment (excludes taxes and insurance)",
        ),
        result(
            "Loan-to-Value Ratio",
            compute_ltv(max_home_price, max_loan) / 100,
            fmt="percentage",
            description="The ratio of your loan amount to the home price",
        ),
        result(
            "Debt-to-Income Ratio",
            dti,
            fmt="percentage",
            description="Your total monthly debt payments as a percentage of gross income",
        ),
    ]


CONFIG = CalculatorConfig(
    id="affordability",
    title="Affordability Calculator",
    description="Calculate your maximum home purchase price based on your income, debts, and down payment.",
    inputs=[
        InputField(
            name="annualIncome",
            label="Annual Gross Income",
            type="currency",
            min=0,
            max=10_000_000,
            step=1000,
            placeholder="80000",
            help_text="Household income before taxes",
        ),
        InputField(
            name="monthlyDebts",
            label="Monthly Debts",
            type="currency",
            min=0,
            max=100000,
            step=50,
            placeholder="500",
            help_text="Car loans, student loans, minimum card payments",
        ),
        InputField(
            name="downPayment",
            label="Down Payment",
            type="currency",
            min=0,
            max=10_000_000,
            step=1000,
            placeholder="20000",
        ),
        rate_pct_field("interestRate", "Interest Rate (%)", config.DEFAULT_INTEREST_RATE_PCT),
        term_years_field("loanTerm", "Loan Term (years)", config.DEFAULT_LOAN_TERM_YEARS),
        InputField(
            name="dtiLimit",
            label="Debt-to-Income Limit (%)",
            type="percentage",
            min=1,
            max=100,
            step=1,
            required=False,
            placeholder=f"{config.AFFORDABILITY_DTI_PCT:g}",
            default_value=config.AFFORDABILITY_DTI_PCT,
            help_text="Most lenders cap total debt at 43% of gross income",
        ),
    ],
    calculate=calculate,
    keywords=("home affordability calculator", "how much house can I afford"),
)
