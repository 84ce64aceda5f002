# src/hearth/analysis/schedule.py

from __future__ import annotations

from datetime import date
from typing import List, Optional

import numpy as np
import pandas as pd

from hearth.domain.amortization import amortization_steps, periods_per_year
from hearth.domain.loan import PaymentFrequency

SCHEDULE_COLUMNS = [
    "period",
    "payment_date",
    "payment",
    "principal",
    "interest",
    "extra",
    "balance",
]

_DAY_STEPS = {"bi-weekly": "14D", "weekly": "7D"}


def payment_dates(
    first_payment_date: date,
    frequency: PaymentFrequency,
    n: int,
) -> List[date]:
    """
    Due dates for ``n`` payments starting on ``first_payment_date``.

    Monthly steps are calendar months counted from the first date, so a
    schedule starting on the 31st lands on each month's last day instead of
    drifting. Bi-weekly and weekly step by 14 and 7 days.
    """
    periods_per_year(frequency)  # rejects unknown frequencies
    if n <= 0:
        return []

    start = pd.Timestamp(first_payment_date)
    if frequency == "monthly":
        return [(start + pd.DateOffset(months=i)).date() for i in range(n)]

    rng = pd.date_range(start=start, periods=n, freq=_DAY_STEPS[frequency])
    return [ts.date() for ts in rng]


def amortization_schedule(
    principal: float,
    annual_rate: float,
    term_months: int,
    extra_payment: float = 0.0,
    first_payment_date: Optional[date] = None,
) -> pd.DataFrame:
    """
    Month-by-month amortization table.

    Built from the same amortization_steps walk as simulate_payoff, so
    ``len(df)`` equals ``actual_term_months`` and ``df["interest"].sum()``
    equals ``total_interest`` for the same inputs. The last payment is
    shortened to whatever balance is left.
    """
    n = int(term_months)
    if principal <= 0 or n <= 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    rows = [
        {
            "period": step.period,
            "payment": step.interest + step.principal + step.extra,
            "principal": step.principal,
            "interest": step.interest,
            "extra": step.extra,
            "balance": max(step.balance, 0.0),
        }
        for step in amortization_steps(principal, annual_rate, n, extra_payment)
    ]

    df = pd.DataFrame(rows)
    if first_payment_date is not None:
        df["payment_date"] = payment_dates(first_payment_date, "monthly", len(df))
    else:
        df["payment_date"] = None
    return df[SCHEDULE_COLUMNS]


def yearly_summary(schedule: pd.DataFrame) -> pd.DataFrame:
    """Collapse a monthly schedule into loan years (principal includes extra)."""
    if schedule.empty:
        return pd.DataFrame(columns=["year", "principal", "interest", "ending_balance"])

    out = schedule.copy()
    out["year"] = (out["period"].to_numpy(dtype=int) - 1) // 12 + 1
    out["principal_total"] = out["principal"].to_numpy(dtype=float) + out["extra"].to_numpy(dtype=float)

    agg = (
        out.groupby("year")
        .agg(
            principal=("principal_total", "sum"),
            interest=("interest", "sum"),
            ending_balance=("balance", "last"),
        )
        .reset_index()
    )
    agg["ending_balance"] = np.maximum(agg["ending_balance"].to_numpy(dtype=float), 0.0)
    return agg
