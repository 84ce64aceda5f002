from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

ProgramType = Literal["conventional", "fha", "va", "usda", "jumbo"]
VATier = Literal["first-time", "subsequent", "exempt"]

# VA funding fee, share of the base loan (one-time)
VA_FUNDING_FEE_RATES: dict[str, float] = {
    "first-time": 0.0215,
    "subsequent": 0.033,
    "exempt": 0.0,
}

FHA_ANNUAL_MIP_RATE = 0.0085      # life-of-loan MIP
USDA_ANNUAL_FEE_RATE = 0.0035
CONVENTIONAL_PMI_RATE = 0.005
PMI_LTV_THRESHOLD_PCT = 80.0      # PMI applies strictly above this LTV

# One-time premiums kept out of compute_fee; see upfront_premium()
FHA_UPFRONT_MIP_RATE = 0.0175
USDA_GUARANTEE_FEE_RATE = 0.01


@dataclass(frozen=True)
class ProgramFeeSpec:
    program_type: ProgramType
    va_tier: Optional[VATier] = None


@dataclass(frozen=True)
class ProgramFee:
    upfront: float            # one-time, usually financed into the loan
    monthly_recurring: float  # added to the monthly payment


def compute_ltv(property_value: float, loan_amount: float) -> float:
    """Loan-to-value as a percent; 0.0 when the property value is 0."""
    if property_value <= 0:
        return 0.0
    return 100.0 * loan_amount / property_value


def compute_fee(
    base_loan_amount: float,
    spec: ProgramFeeSpec,
    *,
    down_payment_pct: float = 0.0,
    manual_monthly: float = 0.0,
) -> ProgramFee:
    """
    Program fee for a base loan amount.

    - VA: upfront funding fee by tier, nothing monthly. A VA spec without a
      tier is treated as first-time use.
    - FHA: monthly MIP at 0.85%/yr of the base loan.
    - USDA: monthly annual fee at 0.35%/yr.
    - Conventional: PMI at 0.5%/yr only when LTV (100 - down_payment_pct)
      is above 80%.
    - Jumbo: no estimate; ``manual_monthly`` is used as given (default 0).
    """
    base = max(float(base_loan_amount), 0.0)
    program = spec.program_type

    if program == "va":
        tier = spec.va_tier or "first-time"
        try:
            rate = VA_FUNDING_FEE_RATES[tier]
        except KeyError as err:
            raise ValueError(f"Unknown VA funding fee tier: {tier}") from err
        return ProgramFee(upfront=base * rate, monthly_recurring=0.0)

    if program == "fha":
        return ProgramFee(upfront=0.0, monthly_recurring=FHA_ANNUAL_MIP_RATE * base / 12)

    if program == "usda":
        return ProgramFee(upfront=0.0, monthly_recurring=USDA_ANNUAL_FEE_RATE * base / 12)

    if program == "conventional":
        ltv = 100.0 - down_payment_pct
        if ltv > PMI_LTV_THRESHOLD_PCT:
            return ProgramFee(upfront=0.0, monthly_recurring=CONVENTIONAL_PMI_RATE * base / 12)
        return ProgramFee(upfront=0.0, monthly_recurring=0.0)

    if program == "jumbo":
        return ProgramFee(upfront=0.0, monthly_recurring=max(float(manual_monthly), 0.0))

    raise ValueError(f"Unknown loan program: {program}")


def upfront_premium(base_loan_amount: float, program_type: ProgramType) -> float:
    """FHA upfront MIP or USDA guarantee fee; 0.0 for every other program."""
    base = max(float(base_loan_amount), 0.0)
    if program_type == "fha":
        return base * FHA_UPFRONT_MIP_RATE
    if program_type == "usda":
        return base * USDA_GUARANTEE_FEE_RATE
    return 0.0


def final_loan_amount(base_loan_amount: float, financed_fee: float) -> float:
    return base_loan_amount + financed_fee
