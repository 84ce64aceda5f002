import pytest

from hypothesis import given, strategies as st

from hearth.domain.fix_flip import FixFlipInputs, analyze_fix_flip


def test_all_cash_flip_has_no_financing_costs():
    a = analyze_fix_flip(
        FixFlipInputs(purchase_price=200_000, renovation_cost=30_000, after_repair_value=300_000, purchase_ltv=0.0)
    )

    assert a.loan_amount == 0.0
    assert a.total_interest == 0.0
    assert a.origination_fee == 0.0
    assert a.down_payment == pytest.approx(200_000.0)


def test_zero_cash_and_zero_arv_ratios_stay_finite():
    a = analyze_fix_flip(
        FixFlipInputs(
            purchase_price=0,
            after_repair_value=0,
            closing_cost_rate=0,
            cost_to_sell_rate=0,
        )
    )

    assert a.cash_needed == 0.0
    assert a.return_on_investment == 0.0
    assert a.loan_to_arv == 0.0


@given(
    price=st.floats(min_value=10_000, max_value=5_000_000),
    reno=st.floats(min_value=0, max_value=500_000),
    arv=st.floats(min_value=0, max_value=8_000_000),
    months=st.sampled_from([3, 6, 9, 12, 18, 24]),
    ltv=st.floats(min_value=0, max_value=1),
)
def test_profit_is_arv_minus_costs(price, reno, arv, months, ltv):
    a = analyze_fix_flip(
        FixFlipInputs(
            purchase_price=price,
            renovation_cost=reno,
            after_repair_value=arv,
            loan_months=months,
            purchase_ltv=ltv,
        )
    )

    assert a.net_profit == pytest.approx(arv - a.total_costs)
    assert a.loan_amount + a.down_payment == pytest.approx(price)
    assert a.total_interest == pytest.approx(a.monthly_interest * months)
