# src/hearth/services/calculators/dscr.py

from __future__ import annotations

from hearth.adapters.config import config
from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.dscr import DSCRInputs, analyze_dscr, qualification_status
from hearth.domain.programs import compute_ltv
from hearth.domain.units import dollar_to_percent

from .common import MAX_PRICE, price_field, rate_pct_field, require_down_payment_within, result, term_years_field


def _expense_field(name: str, label: str) -> InputField:
    return InputField(
        name=name,
        label=label,
        type="currency",
        min=0,
        max=100000,
        step=25,
        required=False,
        placeholder="0",
        default_value=0,
    )


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    price = inputs["propertyPrice"]
    down_payment = inputs["downPayment"]
    require_down_payment_within(price, down_payment, "property price")

    term_years = int(inputs.get("loanTerm", config.DEFAULT_LOAN_TERM_YEARS))
    a = analyze_dscr(
        DSCRInputs(
            property_price=price,
            down_payment=down_payment,
            annual_rate=inputs["interestRate"] / 100,
            term_months=term_years * 12,
            monthly_rent=inputs["monthlyRent"],
            units=int(inputs.get("units", 1)),
            vacancy_rate=inputs.get("vacancyRate", 0.0) / 100,
            monthly_tax=inputs.get("monthlyTax", 0.0),
            monthly_insurance=inputs.get("monthlyInsurance", 0.0),
            monthly_repairs=inputs.get("monthlyRepairs", 0.0),
            monthly_utilities=inputs.get("monthlyUtilities", 0.0),
            monthly_hoa=inputs.get("monthlyHoa", 0.0),
        )
    )
    status, status_note = qualification_status(
        a.dscr_ratio,
        a.loan_amount,
        excellent=config.DSCR_EXCELLENT,
        good=config.DSCR_GOOD,
        marginal=config.DSCR_MARGINAL,
    )

    if a.monthly_pi > 0:
        dscr_note = f"Debt Service Coverage Ratio ({a.dscr_ratio:.2f})"
    else:
        dscr_note = "No debt service (cash purchase)"

    operating_expenses = a.gross_rent - a.vacancy_loss - a.net_operating_income

    return [
        result("DSCR Ratio", a.dscr_ratio, fmt="number", description=dscr_note, highlight=True),
        result("Qualification Status", 0, fmt="number", description=f"{status}: {status_note}", highlight=True),
        result(
            "Monthly Cash Flow",
            a.monthly_cash_flow,
            description="Positive monthly cash flow"
            if a.monthly_cash_flow >= 0
            else "Negative monthly cash flow (cash drain)",
            highlight=True,
        ),
        result("Annual Cash Flow", a.annual_cash_flow, description="Total cash flow over 12 months"),
        result(
            "Cash-on-Cash Return",
            a.cash_on_cash_return / 100,
            fmt="percentage",
            description="Annual cash flow divided by the down payment",
            highlight=True,
        ),
        result(
            "Cap Rate",
            a.cap_rate / 100,
            fmt="percentage",
            description="Capitalization rate (annual NOI / property price)",
        ),
        result("Gross Monthly Rent", a.gross_rent, description="Monthly rent across all units"),
        result("Vacancy Loss", a.vacancy_loss, description="Rent lost to vacancy each month"),
        result(
            "Monthly Operating Expenses",
            operating_expenses,
            description="Taxes, insurance, repairs, utilities, and HOA",
        ),
        result("Net Operating Income", a.net_operating_income, description="Monthly rent after vacancy and operating expenses"),
        result("Monthly Debt Service (P&I)", a.monthly_pi, description="Monthly principal and interest payment"),
        result(
            "Loan Amount",
            a.loan_amount,
            description=f"Mortgage loan amount ({compute_ltv(price, a.loan_amount):.1f}% LTV)",
        ),
        result(
            "Down Payment",
            down_payment,
            description=f"Your down payment ({dollar_to_percent(down_payment, price):.1f}% of property price)",
        ),
    ]


CONFIG = CalculatorConfig(
    id="dscr",
    title="DSCR Calculator",
    description="Calculate the Debt Service Coverage Ratio for an investment property and see whether its rent covers the mortgage.",
    inputs=[
        price_field("propertyPrice", "Property Price", "300000", "Purchase price of the rental property"),
        InputField(
            name="downPayment",
            label="Down Payment",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            placeholder="60000",
        ),
        rate_pct_field("interestRate", "Interest Rate (%)", 7.5, help_text="Investment property loan rate"),
        term_years_field("loanTerm", "Loan Term (years)", config.DEFAULT_LOAN_TERM_YEARS),
        InputField(
            name="monthlyRent",
            label="Monthly Rent (per unit)",
            type="currency",
            min=0,
            max=100000,
            step=50,
            placeholder="2500",
        ),
        InputField(
            name="units",
            label="Number of Units",
            type="number",
            min=1,
            max=100,
            step=1,
            integer=True,
            required=False,
            placeholder="1",
            default_value=1,
        ),
        InputField(
            name="vacancyRate",
            label="Vacancy Rate (%)",
            type="percentage",
            min=0,
            max=100,
            step=1,
            required=False,
            placeholder="5",
            default_value=0,
            help_text="Share of gross rent expected to be lost to vacancy",
        ),
        _expense_field("monthlyTax", "Monthly Property Tax"),
        _expense_field("monthlyInsurance", "Monthly Insurance"),
        _expense_field("monthlyRepairs", "Monthly Repairs & Maintenance"),
        _expense_field("monthlyUtilities", "Monthly Utilities"),
        _expense_field("monthlyHoa", "Monthly HOA Fees"),
    ],
    calculate=calculate,
    keywords=("DSCR calculator", "investment property loan", "rental property calculator"),
)
