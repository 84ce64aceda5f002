# src/hearth/domain/amortization.py
from __future__ import annotations

import math
from typing import Iterator

from hearth.adapters.logging_utils import get_logger, with_context
from hearth.domain.loan import (
    AmortizationResult,
    EarlyPayoffResult,
    LoanTerms,
    LumpSumFrequency,
    PaymentFrequency,
    PaymentStep,
)

logger = get_logger(__name__)

# Balances at or below half a cent count as paid off.
PAID_OFF_TOLERANCE = 0.005

# simulate_payoff never runs more than this many times the scheduled term.
ITERATION_CAP_MULTIPLIER = 2

_PERIODS_PER_YEAR: dict[str, int] = {
    "monthly": 12,
    "bi-weekly": 26,
    "weekly": 52,
}


def _annuity_factor(r: float, n: int) -> float:
    """1 - (1+r)^-n, computed without cancellation for tiny r."""
    return -math.expm1(-n * math.log1p(r))


def compute_monthly_pi(principal: float, annual_rate: float, term_months: int) -> float:
    """
    Standard fixed-rate amortization formula:
    M = P * [ r(1+r)^n / ((1+r)^n - 1) ]  =  P * r / (1 - (1+r)^-n)
    P = loan principal
    r = monthly interest rate (annual_rate / 12)
    n = number of payments (months)

    The denominator goes through expm1/log1p so rates near zero keep full
    precision and converge on P / n. A non-positive term has no payment
    schedule and returns 0.0.
    """
    n = int(term_months)
    if n <= 0 or principal <= 0:
        return 0.0

    r = annual_rate / 12.0
    if r == 0:
        return principal / n
    return principal * (r / _annuity_factor(r, n))


def amortization_steps(
    principal: float,
    annual_rate: float,
    term_months: int,
    extra_payment: float = 0.0,
) -> Iterator[PaymentStep]:
    """
    Yield one PaymentStep per month until the loan is paid off.

    Each month:
        interest        = balance * r
        principal_paid  = min(monthly_pi - interest + extra_payment, balance)
        balance        -= principal_paid

    Stops once the balance is at or below PAID_OFF_TOLERANCE, or after
    ITERATION_CAP_MULTIPLIER * term_months months. simulate_payoff and the
    schedule table both walk this generator.
    """
    n = int(term_months)
    if principal <= 0 or n <= 0:
        return

    monthly_pi = compute_monthly_pi(principal, annual_rate, n)
    r = annual_rate / 12.0
    extra = max(float(extra_payment), 0.0)
    cap = ITERATION_CAP_MULTIPLIER * n

    balance = float(principal)
    period = 0
    while balance > PAID_OFF_TOLERANCE and period < cap:
        interest = balance * r
        principal_paid = min(monthly_pi - interest + extra, balance)
        scheduled = min(monthly_pi - interest, principal_paid)
        balance -= principal_paid
        period += 1
        yield PaymentStep(
            period=period,
            interest=interest,
            principal=scheduled,
            extra=principal_paid - scheduled,
            balance=balance,
        )


def simulate_payoff(
    principal: float,
    annual_rate: float,
    term_months: int,
    extra_payment: float = 0.0,
) -> AmortizationResult:
    """
    Walk the loan month by month applying the scheduled payment plus a
    constant extra principal payment (see amortization_steps).

    Hitting the iteration cap means the inputs cannot amortize (e.g. a
    payment that never covers interest); the result comes back with
    converged=False and callers should surface it as invalid input rather
    than a real payoff.
    """
    n = int(term_months)
    monthly_pi = compute_monthly_pi(principal, annual_rate, n)

    if principal <= 0:
        return AmortizationResult(monthly_payment=0.0, total_interest=0.0, actual_term_months=0)
    if n <= 0:
        return AmortizationResult(
            monthly_payment=0.0, total_interest=0.0, actual_term_months=0, converged=False
        )

    balance = float(principal)
    total_interest = 0.0
    months = 0
    for step in amortization_steps(principal, annual_rate, n, extra_payment):
        total_interest += step.interest
        balance = step.balance
        months = step.period

    converged = balance <= PAID_OFF_TOLERANCE
    if not converged:
        logger.warning(
            "payoff simulation hit iteration cap",
            extra=with_context(
                principal=principal,
                annual_rate=annual_rate,
                term_months=n,
                extra_payment=max(float(extra_payment), 0.0),
                remaining_balance=balance,
            ),
        )

    return AmortizationResult(
        monthly_payment=monthly_pi,
        total_interest=total_interest,
        actual_term_months=months,
        converged=converged,
    )


def simulate_terms(terms: LoanTerms) -> AmortizationResult:
    return simulate_payoff(terms.principal, terms.annual_rate, terms.term_months, terms.extra_payment)


def remaining_balance(
    principal: float,
    annual_rate: float,
    term_months: int,
    months_paid: int,
) -> float:
    """Balance left after ``months_paid`` scheduled payments (no extra principal)."""
    n = int(term_months)
    k = int(months_paid)
    if principal <= 0 or n <= 0 or k >= n:
        return 0.0
    if k <= 0:
        return float(principal)

    payment = compute_monthly_pi(principal, annual_rate, n)
    r = annual_rate / 12.0
    if r == 0:
        return max(0.0, principal - payment * k)

    # present value of the payments still owed
    left = n - k
    return max(0.0, payment * (_annuity_factor(r, left) / r))


def principal_from_payment(payment: float, annual_rate: float, term_months: int) -> float:
    """Reverse amortization: largest principal a given monthly P&I can carry."""
    n = int(term_months)
    if n <= 0 or payment <= 0:
        return 0.0
    r = annual_rate / 12.0
    if r == 0:
        return payment * n
    return payment * (_annuity_factor(r, n) / r)


def periods_per_year(frequency: PaymentFrequency) -> int:
    try:
        return _PERIODS_PER_YEAR[frequency]
    except KeyError as err:
        raise ValueError(f"Unknown payment frequency: {frequency}") from err


def adjust_payment_for_frequency(monthly_payment: float, frequency: PaymentFrequency) -> float:
    """Per-period amount that keeps the annual total equal to 12 monthly payments."""
    return monthly_payment * 12 / periods_per_year(frequency)


def lump_sum_per_month(
    amount: float,
    frequency: LumpSumFrequency,
    term_months: int,
) -> float:
    """Spread a recurring or one-time lump sum into a monthly-equivalent extra payment."""
    if amount <= 0:
        return 0.0
    if frequency == "one-time":
        return amount / term_months if term_months > 0 else 0.0
    if frequency == "yearly":
        return amount / 12
    if frequency == "quarterly":
        return amount / 3
    raise ValueError(f"Unknown lump sum frequency: {frequency}")


def compute_early_payoff(
    terms: LoanTerms,
    additional_monthly: float = 0.0,
    frequency: PaymentFrequency = "monthly",
    lump_sum: float = 0.0,
    lump_sum_frequency: LumpSumFrequency = "one-time",
) -> EarlyPayoffResult:
    """
    Compare the plain schedule with one that adds extra principal.

    ``additional_monthly`` is scaled to the payment frequency (the annual
    amount is what counts) and the lump sum is spread into a monthly
    equivalent before both are fed to simulate_payoff as one extra payment.
    """
    baseline = simulate_payoff(terms.principal, terms.annual_rate, terms.term_months, 0.0)

    adjusted_extra = adjust_payment_for_frequency(max(additional_monthly, 0.0), frequency)
    lump_monthly = lump_sum_per_month(lump_sum, lump_sum_frequency, terms.term_months)
    extra = adjusted_extra + lump_monthly

    accelerated = simulate_payoff(terms.principal, terms.annual_rate, terms.term_months, extra)

    return EarlyPayoffResult(
        interest_savings=baseline.total_interest - accelerated.total_interest,
        new_payment_amount=accelerated.monthly_payment + extra,
        term_reduction_months=baseline.actual_term_months - accelerated.actual_term_months,
        payment_per_period=adjust_payment_for_frequency(baseline.monthly_payment, frequency) + adjusted_extra,
        baseline=baseline,
        accelerated=accelerated,
    )
