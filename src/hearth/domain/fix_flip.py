from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


class FixFlipInputs(BaseModel):
    purchase_price: float = Field(..., ge=0)
    renovation_cost: float = Field(0.0, ge=0)
    after_repair_value: float = Field(..., ge=0)
    loan_months: int = Field(6, gt=0, description="holding period; the loan is interest-only")

    annual_property_taxes: float = Field(0.0, ge=0)
    annual_insurance: float = Field(0.0, ge=0)

    # fractions, e.g. 0.80 / 0.10
    purchase_ltv: float = Field(0.80, ge=0, le=1)
    annual_rate: float = Field(0.10, ge=0)
    origination_fee_rate: float = Field(0.02, ge=0, description="share of the loan amount")
    closing_cost_rate: float = Field(0.03, ge=0, description="share of the purchase price")
    cost_to_sell_rate: float = Field(0.05, ge=0, description="share of the after-repair value")


@dataclass(frozen=True)
class FixFlipResult:
    loan_amount: float
    down_payment: float
    monthly_interest: float
    total_interest: float
    origination_fee: float
    other_closing_costs: float
    carrying_costs: float        # taxes + insurance over the holding period
    cost_to_sell: float
    total_costs: float
    net_profit: float
    cash_needed: float           # down payment + renovation + closing costs
    return_on_investment: float  # fraction of cash_needed
    loan_to_arv: float           # fraction

    @property
    def closing_costs(self) -> float:
        return self.origination_fee + self.other_closing_costs


def analyze_fix_flip(inputs: FixFlipInputs) -> FixFlipResult:
    """
    Profit on a short hold financed with an interest-only loan on the
    purchase price.

    Renovation is paid in cash. ROI is net profit over the cash the investor
    brings (down payment, renovation, closing costs) and is 0.0 when no cash
    is needed; loan-to-ARV is 0.0 when the ARV is 0.
    """
    loan_amount = inputs.purchase_price * inputs.purchase_ltv
    down_payment = inputs.purchase_price - loan_amount

    monthly_interest = loan_amount * inputs.annual_rate / 12
    total_interest = monthly_interest * inputs.loan_months

    origination_fee = loan_amount * inputs.origination_fee_rate
    other_closing = inputs.purchase_price * inputs.closing_cost_rate
    cost_to_sell = inputs.after_repair_value * inputs.cost_to_sell_rate
    carrying = (inputs.annual_property_taxes + inputs.annual_insurance) / 12 * inputs.loan_months

    closing = origination_fee + other_closing
    total_costs = (
        inputs.purchase_price
        + inputs.renovation_cost
        + total_interest
        + closing
        + carrying
        + cost_to_sell
    )
    net_profit = inputs.after_repair_value - total_costs
    cash_needed = down_payment + inputs.renovation_cost + closing

    roi = net_profit / cash_needed if cash_needed > 0 else 0.0
    loan_to_arv = loan_amount / inputs.after_repair_value if inputs.after_repair_value > 0 else 0.0

    return FixFlipResult(
        loan_amount=loan_amount,
        down_payment=down_payment,
        monthly_interest=monthly_interest,
        total_interest=total_interest,
        origination_fee=origination_fee,
        other_closing_costs=other_closing,
        carrying_costs=carrying,
        cost_to_sell=cost_to_sell,
        total_costs=total_costs,
        net_profit=net_profit,
        cash_needed=cash_needed,
        return_on_investment=roi,
        loan_to_arv=loan_to_arv,
    )
