import pytest

from hearth.domain.rent_vs_buy import RentVsBuyInputs, compare_rent_vs_buy, recommend, total_rent_cost


def _inputs(**overrides):
    base = dict(
        home_price=300_000.0,
        down_payment=60_000.0,
        annual_rate=0.06,
        term_months=360,
        years=1,
        monthly_rent=2000.0,
        rent_increase_rate=0.03,
        appreciation_rate=0.03,
        closing_costs_buy=9000.0,
    )
    base.update(overrides)
    return RentVsBuyInputs(**base)


def test_total_rent_escalates_yearly():
    assert total_rent_cost(1000.0, 0.0, 2) == pytest.approx(24_000.0)
    assert total_rent_cost(1000.0, 0.03, 2) == pytest.approx(12_000.0 + 12_360.0)


def test_ties_go_to_renting():
    assert recommend(100.0, 100.0) == "rent"
    assert recommend(100.01, 100.0) == "buy"


def test_negative_appreciation_is_accepted():
    rvb = compare_rent_vs_buy(_inputs(appreciation_rate=-0.05, years=5))

    assert rvb.home_value_after == pytest.approx(300_000.0 * 0.95**5)
    assert rvb.home_value_after < 300_000.0


def test_buy_cost_formula():
    inp = _inputs(years=5, monthly_tax=250.0, monthly_insurance=100.0, sell_closing_cost_rate=0.06)
    rvb = compare_rent_vs_buy(inp)

    value_after = 300_000.0 * 1.03**5
    expected = (
        60_000.0
        + 9000.0
        + (rvb.monthly_pi + 350.0) * 60
        - ((value_after - 300_000.0) + rvb.principal_paid)
        + value_after * 0.06
    )
    assert rvb.total_buy_cost == pytest.approx(expected)
    assert rvb.net_difference == pytest.approx(rvb.total_rent_cost - rvb.total_buy_cost)
    assert rvb.equity_built == pytest.approx(value_after - 300_000.0 + rvb.principal_paid)


def test_cheap_rent_short_stay_favors_renting_then_breaks_even():
    rvb = compare_rent_vs_buy(_inputs(years=1))

    assert rvb.recommendation == "rent"
    assert rvb.break_even_years == 4

    later = compare_rent_vs_buy(_inputs(years=rvb.break_even_years))
    assert later.recommendation == "buy"


def test_expensive_rent_favors_buying():
    rvb = compare_rent_vs_buy(_inputs(monthly_rent=6000.0, years=7))

    assert rvb.recommendation == "buy"
    assert rvb.break_even_years == 0


def test_payments_stop_after_the_loan_term():
    short = _inputs(term_months=120, years=15, monthly_rent=2500.0)
    rvb = compare_rent_vs_buy(short)

    # the loan is fully repaid inside the holding period
    assert rvb.principal_paid == pytest.approx(240_000.0)
