from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from hearth.domain.amortization import compute_monthly_pi

# Reported DSCR for a cash purchase with positive NOI (no debt service to divide by).
NO_DEBT_SERVICE_DSCR = 999.0


class DSCRInputs(BaseModel):
    property_price: float = Field(..., ge=0)
    down_payment: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0, description="fraction, e.g. 0.075")
    term_months: int = Field(360, gt=0)

    monthly_rent: float = Field(..., ge=0, description="rent per unit")
    units: int = Field(1, ge=1)
    vacancy_rate: float = Field(0.0, ge=0, le=1, description="share of gross rent lost to vacancy")

    monthly_tax: float = Field(0.0, ge=0)
    monthly_insurance: float = Field(0.0, ge=0)
    monthly_repairs: float = Field(0.0, ge=0)
    monthly_utilities: float = Field(0.0, ge=0)
    monthly_hoa: float = Field(0.0, ge=0)


@dataclass(frozen=True)
class DSCRResult:
    net_operating_income: float  # monthly
    dscr_ratio: float            # NOI / monthly P&I
    cap_rate: float              # percent
    cash_on_cash_return: float   # percent, on the down payment
    monthly_cash_flow: float     # NOI - monthly P&I
    gross_rent: float
    vacancy_loss: float
    monthly_pi: float
    loan_amount: float

    @property
    def annual_cash_flow(self) -> float:
        return self.monthly_cash_flow * 12


def net_operating_income(inputs: DSCRInputs) -> tuple[float, float, float]:
    """Monthly (gross rent, vacancy loss, NOI). Operating expenses exclude the mortgage."""
    gross = inputs.monthly_rent * inputs.units
    vacancy_loss = gross * inputs.vacancy_rate
    noi = (
        gross
        - vacancy_loss
        - inputs.monthly_tax
        - inputs.monthly_insurance
        - inputs.monthly_repairs
        - inputs.monthly_utilities
        - inputs.monthly_hoa
    )
    return gross, vacancy_loss, noi


def analyze_dscr(inputs: DSCRInputs) -> DSCRResult:
    """
    Debt service coverage for an investment property.

    The DSCR denominator is monthly principal and interest only, never the
    all-in payment. Every ratio stays finite:
      - no debt service: DSCR is NO_DEBT_SERVICE_DSCR when NOI > 0, else 0.0
      - property price 0: cap rate 0.0
      - down payment 0: cash-on-cash 0.0
    """
    loan_amount = max(inputs.property_price - inputs.down_payment, 0.0)
    monthly_pi = compute_monthly_pi(loan_amount, inputs.annual_rate, inputs.term_months)

    gross, vacancy_loss, noi = net_operating_income(inputs)

    if monthly_pi > 0:
        dscr = noi / monthly_pi
    else:
        dscr = NO_DEBT_SERVICE_DSCR if noi > 0 else 0.0

    cap_rate = 0.0
    if inputs.property_price > 0:
        cap_rate = (noi * 12 / inputs.property_price) * 100

    cash_flow = noi - monthly_pi

    cash_on_cash = 0.0
    if inputs.down_payment > 0:
        cash_on_cash = (cash_flow * 12 / inputs.down_payment) * 100

    return DSCRResult(
        net_operating_income=noi,
        dscr_ratio=dscr,
        cap_rate=cap_rate,
        cash_on_cash_return=cash_on_cash,
        monthly_cash_flow=cash_flow,
        gross_rent=gross,
        vacancy_loss=vacancy_loss,
        monthly_pi=monthly_pi,
        loan_amount=loan_amount,
    )


def qualification_status(
    dscr_ratio: float,
    loan_amount: float,
    *,
    excellent: float = 1.25,
    good: float = 1.0,
    marginal: float = 0.75,
) -> tuple[str, str]:
    if loan_amount <= 0:
        return "Cash Purchase", "No loan required - purchasing with cash"
    if dscr_ratio >= excellent:
        return "Excellent", "Strong DSCR - likely to qualify with favorable terms"
    if dscr_ratio >= good:
        return "Good", "Meets minimum DSCR requirements - should qualify"
    if dscr_ratio >= marginal:
        return "Marginal", "Below minimum DSCR - may need larger down payment or higher rent"
    return "Poor", "DSCR too low - property does not generate sufficient income"
