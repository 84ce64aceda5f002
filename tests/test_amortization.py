import pytest

from hypothesis import given, strategies as st

from hearth.domain import amortization
from hearth.domain.amortization import (
    adjust_payment_for_frequency,
    compute_early_payoff,
    compute_monthly_pi,
    lump_sum_per_month,
    periods_per_year,
    principal_from_payment,
    remaining_balance,
    simulate_payoff,
)
from hearth.domain.loan import LoanTerms


def test_reference_loan_monthly_pi():
    """
    300k home, 60k down, 7% over 30 years.
    """
    assert compute_monthly_pi(240_000.0, 0.07, 360) == pytest.approx(1596.73, abs=0.01)


def test_reference_loan_full_term_interest():
    pi = compute_monthly_pi(240_000.0, 0.07, 360)
    res = simulate_payoff(240_000.0, 0.07, 360)

    assert res.converged
    assert res.actual_term_months == 360
    assert res.monthly_payment == pytest.approx(pi)
    # every payment is the scheduled one, so interest is what's paid beyond principal
    assert res.total_interest == pytest.approx(pi * 360 - 240_000.0, abs=0.01)


def test_extra_payment_cuts_interest_and_term():
    base = simulate_payoff(240_000.0, 0.07, 360, 0.0)
    extra = simulate_payoff(240_000.0, 0.07, 360, 200.0)

    assert extra.total_interest < base.total_interest
    assert extra.actual_term_months < 360
    # the scheduled payment itself does not change
    assert extra.monthly_payment == pytest.approx(base.monthly_payment)


def test_zero_rate_degrades_to_straight_line():
    assert compute_monthly_pi(120_000.0, 0.0, 360) == pytest.approx(120_000.0 / 360)

    res = simulate_payoff(120_000.0, 0.0, 360)
    assert res.total_interest == 0.0
    assert res.actual_term_months == 360


def test_degenerate_inputs_return_sentinels():
    assert compute_monthly_pi(100_000.0, 0.05, 0) == 0.0
    assert compute_monthly_pi(0.0, 0.05, 360) == 0.0

    no_term = simulate_payoff(100_000.0, 0.05, 0)
    assert no_term.actual_term_months == 0
    assert not no_term.converged

    no_loan = simulate_payoff(0.0, 0.05, 360)
    assert no_loan.total_interest == 0.0
    assert no_loan.converged


def test_tiny_rate_keeps_full_term():
    res = simulate_payoff(1000.0, 1.7179e-14, 15)

    assert res.monthly_payment == pytest.approx(1000.0 / 15)
    assert res.actual_term_months == 15
    assert res.converged


@given(
    principal=st.floats(min_value=1_000.0, max_value=2_000_000.0),
    rate=st.one_of(
        st.floats(min_value=1e-15, max_value=1e-6),
        st.floats(min_value=0.0, max_value=0.25),
    ),
    term=st.integers(min_value=1, max_value=480),
)
def test_no_extra_pays_off_in_exactly_the_term(principal, rate, term):
    res = simulate_payoff(principal, rate, term)

    assert res.converged
    assert res.actual_term_months == term


def test_iteration_cap_flags_non_amortizing_loan(monkeypatch):
    # interest-only payment never reduces the balance
    monkeypatch.setattr(amortization, "compute_monthly_pi", lambda p, rate, n: p * rate / 12)

    res = simulate_payoff(100_000.0, 0.06, 120)

    assert not res.converged
    assert res.actual_term_months == 240


@given(
    principal=st.floats(min_value=10_000.0, max_value=1_000_000.0),
    rate=st.floats(min_value=0.0, max_value=0.15),
    term=st.sampled_from([60, 120, 180, 240, 360]),
    extra1=st.floats(min_value=0.0, max_value=2000.0),
    delta=st.floats(min_value=0.01, max_value=2000.0),
)
def test_more_extra_never_costs_more(principal, rate, term, extra1, delta):
    r1 = simulate_payoff(principal, rate, term, extra1)
    r2 = simulate_payoff(principal, rate, term, extra1 + delta)

    assert r2.total_interest <= r1.total_interest + 1e-6
    assert r2.actual_term_months <= r1.actual_term_months


def test_remaining_balance_edges():
    assert remaining_balance(200_000.0, 0.06, 360, 0) == 200_000.0
    assert remaining_balance(200_000.0, 0.06, 360, 360) == 0.0
    assert remaining_balance(200_000.0, 0.06, 360, 400) == 0.0
    assert remaining_balance(36_000.0, 0.0, 360, 120) == pytest.approx(24_000.0)


def test_remaining_balance_matches_month_by_month_walk():
    principal, rate, n = 240_000.0, 0.07, 360
    pi = compute_monthly_pi(principal, rate, n)

    balance = principal
    for _ in range(60):
        balance -= pi - balance * rate / 12

    assert remaining_balance(principal, rate, n, 60) == pytest.approx(balance, abs=0.01)


def test_principal_from_payment_inverts_monthly_pi():
    pi = compute_monthly_pi(240_000.0, 0.07, 360)
    assert principal_from_payment(pi, 0.07, 360) == pytest.approx(240_000.0, abs=0.01)

    assert principal_from_payment(1000.0, 0.0, 360) == pytest.approx(360_000.0)
    assert principal_from_payment(0.0, 0.07, 360) == 0.0
    assert principal_from_payment(1000.0, 0.07, 0) == 0.0


def test_payment_frequency_keeps_annual_total():
    assert periods_per_year("monthly") == 12
    assert periods_per_year("bi-weekly") == 26
    assert periods_per_year("weekly") == 52

    for freq in ("monthly", "bi-weekly", "weekly"):
        per_period = adjust_payment_for_frequency(1500.0, freq)
        assert per_period * periods_per_year(freq) == pytest.approx(1500.0 * 12)

    with pytest.raises(ValueError):
        periods_per_year("daily")


def test_lump_sum_monthly_equivalent():
    assert lump_sum_per_month(36_000.0, "one-time", 360) == pytest.approx(100.0)
    assert lump_sum_per_month(1200.0, "yearly", 360) == pytest.approx(100.0)
    assert lump_sum_per_month(300.0, "quarterly", 360) == pytest.approx(100.0)
    assert lump_sum_per_month(0.0, "yearly", 360) == 0.0

    with pytest.raises(ValueError):
        lump_sum_per_month(100.0, "monthly", 360)


def test_early_payoff_without_extras_changes_nothing():
    res = compute_early_payoff(LoanTerms(principal=240_000.0, annual_rate=0.07, term_months=360))

    assert res.interest_savings == pytest.approx(0.0)
    assert res.term_reduction_months == 0
    assert res.payment_per_period == pytest.approx(res.baseline.monthly_payment)


def test_early_payoff_monthly_extra():
    terms = LoanTerms(principal=240_000.0, annual_rate=0.07, term_months=360)
    res = compute_early_payoff(terms, additional_monthly=200.0)

    direct = simulate_payoff(240_000.0, 0.07, 360, 200.0)
    assert res.accelerated.total_interest == pytest.approx(direct.total_interest)
    assert res.interest_savings > 0
    assert res.term_reduction_months == 360 - direct.actual_term_months
    assert res.new_payment_amount == pytest.approx(res.baseline.monthly_payment + 200.0)


def test_early_payoff_biweekly_scales_extra_per_period():
    terms = LoanTerms(principal=240_000.0, annual_rate=0.07, term_months=360)
    monthly = compute_early_payoff(terms, additional_monthly=200.0, frequency="monthly")
    biweekly = compute_early_payoff(terms, additional_monthly=200.0, frequency="bi-weekly")

    pi = monthly.baseline.monthly_payment
    assert biweekly.payment_per_period == pytest.approx((pi + 200.0) * 12 / 26)
    assert 0 < biweekly.interest_savings < monthly.interest_savings


def test_early_payoff_lump_sum_adds_to_extra():
    terms = LoanTerms(principal=240_000.0, annual_rate=0.07, term_months=360)
    res = compute_early_payoff(terms, lump_sum=1200.0, lump_sum_frequency="yearly")

    direct = simulate_payoff(240_000.0, 0.07, 360, 100.0)
    assert res.accelerated.actual_term_months == direct.actual_term_months
    assert res.interest_savings > 0


def test_steps_match_simulation():
    steps = list(amortization.amortization_steps(150_000.0, 0.065, 180, 120.0))
    res = simulate_payoff(150_000.0, 0.065, 180, 120.0)

    assert len(steps) == res.actual_term_months
    assert sum(s.interest for s in steps) == pytest.approx(res.total_interest)
    assert steps[-1].balance <= amortization.PAID_OFF_TOLERANCE
    assert [s.period for s in steps] == list(range(1, len(steps) + 1))


def test_steps_empty_for_degenerate_loan():
    assert list(amortization.amortization_steps(0.0, 0.05, 360)) == []
    assert list(amortization.amortization_steps(100_000.0, 0.05, 0)) == []
