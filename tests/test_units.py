import pytest

from hypothesis import given, strategies as st

from hearth.domain.units import dollar_to_percent, normalize_amount, percent_to_dollar


def test_zero_home_value_returns_zero_not_nan():
    assert dollar_to_percent(1200.0, 0.0) == 0.0
    assert percent_to_dollar(0.5, 0.0) == 0.0


def test_conversions():
    assert dollar_to_percent(60_000.0, 300_000.0) == pytest.approx(20.0)
    assert percent_to_dollar(20.0, 300_000.0) == pytest.approx(60_000.0)


@given(
    base=st.floats(min_value=1.0, max_value=100_000_000.0),
    dollars=st.floats(min_value=0.0, max_value=100_000_000.0),
)
def test_dollar_percent_round_trip(base, dollars):
    pct = dollar_to_percent(dollars, base)
    assert percent_to_dollar(pct, base) == pytest.approx(dollars, abs=0.01)


def test_normalize_amount():
    assert normalize_amount(1500.0, "dollar", 300_000.0) == 1500.0
    assert normalize_amount(0.5, "percent", 300_000.0) == pytest.approx(1500.0)

    with pytest.raises(ValueError):
        normalize_amount(1.0, "basis-points", 300_000.0)
