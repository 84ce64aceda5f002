import itertools
import random

import pytest

from hypothesis import given, strategies as st

from hearth.domain.amortization import simulate_payoff
from hearth.domain.payment import RecurringCosts, compose
from hearth.domain.programs import ProgramFeeSpec, compute_fee

money = st.floats(min_value=0.0, max_value=50_000.0)


@given(pi=money, fee=money, tax=money, ins=money, hoa=money, extra=money)
def test_total_is_sum_of_components(pi, fee, tax, ins, hoa, extra):
    costs = RecurringCosts(monthly_tax=tax, monthly_insurance=ins, monthly_hoa=hoa)

    with_extra = compose(pi, fee, costs, extra)
    without_extra = compose(pi, fee, costs, 0.0)

    assert with_extra.total == pytest.approx(sum(with_extra.components().values()), abs=0.01)
    assert with_extra.total - without_extra.total == pytest.approx(extra, abs=0.01)


@given(pi=money, fee=money, tax=money, ins=money, hoa=money, extra=money)
def test_component_order_does_not_change_total(pi, fee, tax, ins, hoa, extra):
    b = compose(pi, fee, RecurringCosts(tax, ins, hoa), extra)
    parts = list(b.components().values())

    for perm in itertools.permutations(parts):
        assert sum(perm) == pytest.approx(b.total, abs=0.01)


def test_compose_accepts_engine_results():
    amort = simulate_payoff(270_000.0, 0.065, 360)
    fee = compute_fee(270_000.0, ProgramFeeSpec(program_type="conventional"), down_payment_pct=10.0)
    costs = RecurringCosts(monthly_tax=300.0, monthly_insurance=100.0, monthly_hoa=50.0)

    b = compose(amort, fee, costs, 150.0)

    assert b.principal_interest == pytest.approx(amort.monthly_payment)
    assert b.program_fee == pytest.approx(fee.monthly_recurring)
    assert b.total == pytest.approx(amort.monthly_payment + fee.monthly_recurring + 450.0 + 150.0)


def test_compose_is_deterministic():
    rnd = random.Random(7)
    args = [rnd.uniform(0, 5000) for _ in range(6)]
    costs = RecurringCosts(args[2], args[3], args[4])

    runs = [compose(args[0], args[1], costs, args[5]) for _ in range(3)]
    assert runs[0] == runs[1] == runs[2]
