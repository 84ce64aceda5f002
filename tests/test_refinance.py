import pytest

from hearth.domain.amortization import simulate_payoff
from hearth.domain.loan import LoanTerms
from hearth.domain.refinance import break_even_months, compare_refinance


def test_rate_drop_breaks_even():
    current = LoanTerms(principal=250_000.0, annual_rate=0.075, term_months=300)
    new = LoanTerms(principal=255_000.0, annual_rate=0.065, term_months=360)

    cmp = compare_refinance(current, new, closing_costs=5000.0)

    assert cmp.monthly_savings > 0
    assert cmp.monthly_savings == pytest.approx(cmp.current_payment - cmp.new_payment)
    assert cmp.break_even_months == pytest.approx(5000.0 / cmp.monthly_savings)
    assert not cmp.never_breaks_even


def test_rate_increase_is_valid_and_never_breaks_even():
    current = LoanTerms(principal=250_000.0, annual_rate=0.05, term_months=300)
    new = LoanTerms(principal=250_000.0, annual_rate=0.07, term_months=300)

    cmp = compare_refinance(current, new, closing_costs=3000.0)

    assert cmp.monthly_savings < 0
    assert cmp.break_even_months is None
    assert cmp.never_breaks_even


def test_zero_savings_never_breaks_even():
    assert break_even_months(3000.0, 0.0) is None
    assert break_even_months(3000.0, -10.0) is None
    assert break_even_months(3000.0, 100.0) == pytest.approx(30.0)


def test_interest_delta_uses_each_loans_own_term():
    current = LoanTerms(principal=200_000.0, annual_rate=0.06, term_months=240)
    new = LoanTerms(principal=200_000.0, annual_rate=0.055, term_months=360)

    cmp = compare_refinance(current, new)

    cur = simulate_payoff(200_000.0, 0.06, 240)
    nxt = simulate_payoff(200_000.0, 0.055, 360)
    assert cmp.current_total_interest == pytest.approx(cur.total_interest)
    assert cmp.new_total_interest == pytest.approx(nxt.total_interest)
    assert cmp.lifetime_interest_delta == pytest.approx(nxt.total_interest - cur.total_interest)
    # stretching the term lowers the payment but costs more interest overall
    assert cmp.monthly_savings > 0
    assert cmp.lifetime_interest_delta > 0
