from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hearth.domain.amortization import simulate_terms
from hearth.domain.loan import AmortizationResult, LoanTerms


@dataclass(frozen=True)
class RefinanceComparison:
    current_payment: float              # monthly P&I on the remaining balance
    new_payment: float                  # monthly P&I on the new loan
    monthly_savings: float              # current - new; negative when the refi costs more
    break_even_months: Optional[float]  # None: savings never recoup the closing costs
    lifetime_interest_delta: float      # new total interest - current remaining interest
    current_total_interest: float
    new_total_interest: float
    lifetime_savings: float             # total paid on current - total paid on new
    current: AmortizationResult
    new: AmortizationResult

    @property
    def never_breaks_even(self) -> bool:
        return self.break_even_months is None


def break_even_months(closing_costs: float, monthly_savings: float) -> Optional[float]:
    """Months of savings needed to cover closing costs; None when savings <= 0."""
    if monthly_savings <= 0:
        return None
    return max(float(closing_costs), 0.0) / monthly_savings


def compare_refinance(
    current: LoanTerms,
    new: LoanTerms,
    closing_costs: float = 0.0,
) -> RefinanceComparison:
    """
    Compare the remaining current loan with a proposed replacement.

    ``current`` describes what is left on the existing loan (remaining
    balance, rate, remaining term); ``new`` is the proposed loan, whose
    principal already includes any closing costs rolled into it. Each loan's
    interest is computed over its own term, so the terms may differ.

    A rate increase is a valid scenario: savings go negative and break-even
    is reported as None rather than a negative month count.
    """
    cur = simulate_terms(current)
    nxt = simulate_terms(new)

    savings = cur.monthly_payment - nxt.monthly_payment

    return RefinanceComparison(
        current_payment=cur.monthly_payment,
        new_payment=nxt.monthly_payment,
        monthly_savings=savings,
        break_even_months=break_even_months(closing_costs, savings),
        lifetime_interest_delta=nxt.total_interest - cur.total_interest,
        current_total_interest=cur.total_interest,
        new_total_interest=nxt.total_interest,
        lifetime_savings=(current.principal + cur.total_interest) - (new.principal + nxt.total_interest),
        current=cur,
        new=nxt,
    )
