from dataclasses import dataclass
from typing import Literal

PaymentFrequency = Literal["monthly", "bi-weekly", "weekly"]
LumpSumFrequency = Literal["one-time", "yearly", "quarterly"]


@dataclass(frozen=True)
class LoanTerms:
    principal: float            # amount borrowed
    annual_rate: float          # fraction, e.g. 0.07
    term_months: int            # scheduled number of monthly payments
    extra_payment: float = 0.0  # extra principal paid every month


@dataclass(frozen=True)
class AmortizationResult:
    monthly_payment: float      # scheduled P&I, without extra principal
    total_interest: float
    actual_term_months: int     # months until the balance reaches zero
    converged: bool = True      # False when the 2x term iteration cap was hit


@dataclass(frozen=True)
class EarlyPayoffResult:
    interest_savings: float     # baseline interest minus interest with the strategy
    new_payment_amount: float   # monthly P&I plus the monthly-equivalent extras
    term_reduction_months: int
    payment_per_period: float   # scheduled P&I plus additional, scaled to the frequency
    baseline: AmortizationResult
    accelerated: AmortizationResult


@dataclass(frozen=True)
class PaymentStep:
    period: int
    interest: float
    principal: float            # scheduled part of the principal paid this month
    extra: float                # extra principal actually applied
    balance: float              # balance after the payment
