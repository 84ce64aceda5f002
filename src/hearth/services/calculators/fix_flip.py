# src/hearth/services/calculators/fix_flip.py

from __future__ import annotations

from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.fix_flip import FixFlipInputs, analyze_fix_flip

from .common import MAX_PRICE, price_field, rate_pct_field, result

# option code is the number of months
LOAN_LENGTHS = {3: "3 Months", 6: "6 Months", 9: "9 Months", 12: "12 Months", 18: "18 Months", 24: "24 Months"}


def _pct_field(name: str, label: str, default: float, max_pct: float, help_text: str) -> InputField:
    return InputField(
        name=name,
        label=label,
        type="percentage",
        min=0,
        max=max_pct,
        step=0.5,
        required=False,
        placeholder=f"{default:g}",
        default_value=default,
        help_text=help_text,
    )


def _annual_cost_field(name: str, label: str, default: float) -> InputField:
    return InputField(
        name=name,
        label=label,
        type="currency",
        min=0,
        max=1_000_000,
        step=100,
        required=False,
        placeholder=f"{default:g}",
        default_value=default,
    )


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    months = int(inputs.get("loanLength", 6))
    a = analyze_fix_flip(
        FixFlipInputs(
            purchase_price=inputs["purchasePrice"],
            renovation_cost=inputs.get("renovationCost", 0.0),
            after_repair_value=inputs["afterRepairValue"],
            loan_months=months,
            annual_property_taxes=inputs.get("annualPropertyTaxes", 0.0),
            annual_insurance=inputs.get("annualInsurance", 0.0),
            purchase_ltv=inputs.get("purchasePriceLTV", 80.0) / 100,
            annual_rate=inputs["interestRate"] / 100,
            origination_fee_rate=inputs.get("originationFee", 2.0) / 100,
            closing_cost_rate=inputs.get("otherClosingCosts", 3.0) / 100,
            cost_to_sell_rate=inputs.get("costToSell", 5.0) / 100,
        )
    )

    return [
        result(
            "Net Profit",
            a.net_profit,
            description="After-repair value minus purchase, renovation, financing, holding and selling costs",
            highlight=True,
        ),
        result(
            "Return on Investment",
            a.return_on_investment,
            fmt="percentage",
            description="Net profit as a share of the cash you bring to the deal",
            highlight=True,
        ),
        result(
            "Cash Needed",
            a.cash_needed,
            description="Down payment plus renovation and closing costs",
        ),
        result(
            "Loan-to-After-Repair-Value",
            a.loan_to_arv,
            fmt="percentage",
            description="Loan amount as a share of the after-repair value",
        ),
        result("Loan Amount", a.loan_amount, description="Purchase price times the purchase LTV"),
        result("Down Payment", a.down_payment),
        result(
            "Monthly Interest Payment",
            a.monthly_interest,
            description="Interest-only payment on the loan",
        ),
        result(
            "Total Interest",
            a.total_interest,
            description=f"Interest over {months} months",
        ),
        result("Origination Fee", a.origination_fee),
        result("Other Closing Costs", a.other_closing_costs),
        result("Closing Costs", a.closing_costs, description="Origination fee plus other closing costs"),
        result(
            "Carrying Costs",
            a.carrying_costs,
            description="Property taxes and insurance while you hold the property",
        ),
        result("Cost to Sell", a.cost_to_sell, description="Agent commissions and seller closing costs"),
        result("Total Costs", a.total_costs),
    ]


CONFIG = CalculatorConfig(
    id="fix-flip",
    title="Fix & Flip Calculator",
    description="Calculate potential returns on fix and flip investment properties.",
    inputs=[
        price_field("purchasePrice", "Purchase Price", "500000"),
        InputField(
            name="renovationCost",
            label="Renovation Cost",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            required=False,
            placeholder="75000",
            default_value=0,
        ),
        InputField(
            name="afterRepairValue",
            label="After Repair Value",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            placeholder="750000",
            help_text="Expected sale price once the work is done",
        ),
        InputField(
            name="loanLength",
            label="Length of Loan",
            type="number",
            min=3,
            max=24,
            step=1,
            required=False,
            default_value=6,
            options=LOAN_LENGTHS,
        ),
        _annual_cost_field("annualPropertyTaxes", "Annual Property Taxes", 4000),
        _annual_cost_field("annualInsurance", "Annual Insurance", 3000),
        _pct_field("purchasePriceLTV", "Purchase Price LTV (%)", 80, 100, "Share of the purchase price the lender finances"),
        rate_pct_field("interestRate", "Interest Rate (%)", 10.0),
        _pct_field("originationFee", "Origination Fee (%)", 2, 10, "Points charged on the loan amount"),
        _pct_field("otherClosingCosts", "Other Closing Costs (%)", 3, 10, "Share of the purchase price"),
        _pct_field("costToSell", "Cost to Sell (%)", 5, 15, "Commissions and seller costs, share of the after-repair value"),
    ],
    calculate=calculate,
    keywords=("fix and flip", "flip calculator", "real estate investment"),
)
