from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Union

from hearth.domain.loan import AmortizationResult
from hearth.domain.programs import ProgramFee


@dataclass(frozen=True)
class RecurringCosts:
    monthly_tax: float = 0.0
    monthly_insurance: float = 0.0
    monthly_hoa: float = 0.0


@dataclass(frozen=True)
class MonthlyPaymentBreakdown:
    principal_interest: float
    program_fee: float
    tax: float
    insurance: float
    hoa: float
    extra_payment: float
    total: float

    def components(self) -> Dict[str, float]:
        return {
            "principal_interest": self.principal_interest,
            "program_fee": self.program_fee,
            "tax": self.tax,
            "insurance": self.insurance,
            "hoa": self.hoa,
            "extra_payment": self.extra_payment,
        }


def compose(
    amortization: Union[AmortizationResult, float],
    fee: Union[ProgramFee, float],
    recurring_costs: RecurringCosts,
    extra_payment: float = 0.0,
) -> MonthlyPaymentBreakdown:
    """
    Add up one month of housing cost.

    The total is computed with math.fsum, which rounds the exact sum once, so
    it does not depend on the order of the components and adding the extra
    payment moves the total by exactly that amount (up to one rounding).
    """
    if isinstance(amortization, AmortizationResult):
        pi = amortization.monthly_payment
    else:
        pi = float(amortization)

    program_fee = fee.monthly_recurring if isinstance(fee, ProgramFee) else float(fee)

    parts = (
        pi,
        program_fee,
        recurring_costs.monthly_tax,
        recurring_costs.monthly_insurance,
        recurring_costs.monthly_hoa,
        float(extra_payment),
    )

    return MonthlyPaymentBreakdown(
        principal_interest=pi,
        program_fee=program_fee,
        tax=recurring_costs.monthly_tax,
        insurance=recurring_costs.monthly_insurance,
        hoa=recurring_costs.monthly_hoa,
        extra_payment=float(extra_payment),
        total=math.fsum(parts),
    )
