# src/hearth/domain/rent_vs_buy.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from hearth.domain.amortization import compute_monthly_pi, remaining_balance
from hearth.domain.payment import RecurringCosts, compose

Recommendation = Literal["rent", "buy"]


class RentVsBuyInputs(BaseModel):
    home_price: float = Field(..., ge=0)
    down_payment: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0, description="fraction, e.g. 0.07")
    term_months: int = Field(360, gt=0)
    years: int = Field(..., gt=0, description="holding period in years")

    monthly_rent: float = Field(..., ge=0)
    # growth rates are not sign-constrained: rents and home values can fall
    rent_increase_rate: float = Field(0.03, description="yearly rent escalation, fraction")
    appreciation_rate: float = Field(0.03, description="yearly home appreciation, fraction")

    monthly_tax: float = Field(0.0, ge=0)
    monthly_insurance: float = Field(0.0, ge=0)
    monthly_hoa: float = Field(0.0, ge=0)
    monthly_maintenance: float = Field(0.0, ge=0)

    closing_costs_buy: float = Field(0.0, ge=0)
    sell_closing_cost_rate: float = Field(0.0, ge=0, description="fraction of the sale price")


@dataclass(frozen=True)
class RentVsBuyResult:
    total_rent_cost: float
    total_buy_cost: float
    net_difference: float           # rent - buy; positive means buying is cheaper
    recommendation: Recommendation
    home_value_after: float
    equity_built: float             # appreciation + principal paid down
    principal_paid: float
    monthly_pi: float
    monthly_ownership_cost: float   # P&I + tax + insurance + HOA + maintenance
    closing_costs_sell: float
    break_even_years: int           # 0 when buying already wins or never catches up in-term


@dataclass(frozen=True)
class _BuySide:
    total_cost: float
    home_value_after: float
    equity_built: float
    principal_paid: float
    closing_costs_sell: float


def total_rent_cost(monthly_rent: float, rent_increase_rate: float, years: int) -> float:
    """Sum of 12 months of rent per year, escalating once a year."""
    return sum(monthly_rent * (1 + rent_increase_rate) ** year * 12 for year in range(years))


def recommend(total_rent: float, total_buy: float) -> Recommendation:
    # ties go to renting
    return "buy" if total_rent > total_buy else "rent"


def _buy_side(inputs: RentVsBuyInputs, years: int, monthly_pi: float, monthly_other: float) -> _BuySide:
    loan = max(inputs.home_price - inputs.down_payment, 0.0)
    months = years * 12
    # P&I stops once the loan is paid off; taxes and upkeep do not
    pi_months = min(months, inputs.term_months)

    payments = monthly_pi * pi_months + monthly_other * months
    principal_paid = loan - remaining_balance(loan, inputs.annual_rate, inputs.term_months, months)

    home_value_after = inputs.home_price * (1 + inputs.appreciation_rate) ** years
    equity_built = (home_value_after - inputs.home_price) + principal_paid
    closing_costs_sell = home_value_after * inputs.sell_closing_cost_rate

    total = (
        inputs.down_payment
        + inputs.closing_costs_buy
        + payments
        - equity_built
        + closing_costs_sell
    )
    return _BuySide(
        total_cost=total,
        home_value_after=home_value_after,
        equity_built=equity_built,
        principal_paid=principal_paid,
        closing_costs_sell=closing_costs_sell,
    )


def compare_rent_vs_buy(inputs: RentVsBuyInputs) -> RentVsBuyResult:
    """
    Total cost of renting vs buying over ``inputs.years``.

    Buying cost = down payment + buy closing costs + monthly ownership
    payments - equity built + sell closing costs, where equity built is the
    appreciation on the home plus the principal paid down in the period.
    """
    loan = max(inputs.home_price - inputs.down_payment, 0.0)
    monthly_pi = compute_monthly_pi(loan, inputs.annual_rate, inputs.term_months)

    breakdown = compose(
        monthly_pi,
        0.0,
        RecurringCosts(
            monthly_tax=inputs.monthly_tax,
            monthly_insurance=inputs.monthly_insurance,
            monthly_hoa=inputs.monthly_hoa,
        ),
    )
    monthly_other = breakdown.total - monthly_pi + inputs.monthly_maintenance

    buy = _buy_side(inputs, inputs.years, monthly_pi, monthly_other)
    rent = total_rent_cost(inputs.monthly_rent, inputs.rent_increase_rate, inputs.years)
    recommendation = recommend(rent, buy.total_cost)

    break_even = 0
    if recommendation == "rent":
        term_years = inputs.term_months // 12
        for y in range(inputs.years + 1, term_years + 1):
            later_buy = _buy_side(inputs, y, monthly_pi, monthly_other)
            if total_rent_cost(inputs.monthly_rent, inputs.rent_increase_rate, y) >= later_buy.total_cost:
                break_even = y
                break

    return RentVsBuyResult(
        total_rent_cost=rent,
        total_buy_cost=buy.total_cost,
        net_difference=rent - buy.total_cost,
        recommendation=recommendation,
        home_value_after=buy.home_value_after,
        equity_built=buy.equity_built,
        principal_paid=buy.principal_paid,
        monthly_pi=monthly_pi,
        monthly_ownership_cost=monthly_pi + monthly_other,
        closing_costs_sell=buy.closing_costs_sell,
        break_even_years=break_even,
    )
