import pytest

from hearth.domain.programs import (
    ProgramFeeSpec,
    compute_fee,
    compute_ltv,
    final_loan_amount,
    upfront_premium,
)


def test_va_first_time_funding_fee_on_200k():
    fee = compute_fee(200_000.0, ProgramFeeSpec(program_type="va", va_tier="first-time"))

    assert fee.upfront == pytest.approx(4300.00, abs=1e-9)
    assert fee.monthly_recurring == 0.0


def test_va_other_tiers():
    subsequent = compute_fee(200_000.0, ProgramFeeSpec(program_type="va", va_tier="subsequent"))
    exempt = compute_fee(200_000.0, ProgramFeeSpec(program_type="va", va_tier="exempt"))

    assert subsequent.upfront == pytest.approx(6600.0)
    assert exempt.upfront == 0.0
    assert exempt.monthly_recurring == 0.0


def test_va_without_tier_is_first_time_use():
    fee = compute_fee(200_000.0, ProgramFeeSpec(program_type="va"))
    assert fee.upfront == pytest.approx(4300.0)


def test_fha_and_usda_monthly_premiums():
    fha = compute_fee(200_000.0, ProgramFeeSpec(program_type="fha"))
    usda = compute_fee(200_000.0, ProgramFeeSpec(program_type="usda"))

    assert fha.monthly_recurring == pytest.approx(0.0085 * 200_000 / 12)
    assert usda.monthly_recurring == pytest.approx(0.0035 * 200_000 / 12)
    assert fha.upfront == 0.0
    assert usda.upfront == 0.0


def test_conventional_pmi_only_above_80_ltv():
    spec = ProgramFeeSpec(program_type="conventional")

    low_down = compute_fee(270_000.0, spec, down_payment_pct=10.0)
    twenty_down = compute_fee(240_000.0, spec, down_payment_pct=20.0)
    just_under = compute_fee(240_030.0, spec, down_payment_pct=19.99)

    assert low_down.monthly_recurring == pytest.approx(0.005 * 270_000 / 12)
    # LTV of exactly 80% does not trigger PMI
    assert twenty_down.monthly_recurring == 0.0
    assert just_under.monthly_recurring > 0.0


def test_jumbo_uses_manual_override_only():
    spec = ProgramFeeSpec(program_type="jumbo")

    assert compute_fee(900_000.0, spec).monthly_recurring == 0.0
    assert compute_fee(900_000.0, spec, manual_monthly=250.0).monthly_recurring == 250.0


def test_unknown_program_raises():
    with pytest.raises(ValueError):
        compute_fee(100_000.0, ProgramFeeSpec(program_type="balloon"))


def test_fee_is_deterministic():
    spec = ProgramFeeSpec(program_type="fha")
    fees = [compute_fee(321_000.0, spec) for _ in range(3)]
    assert fees[0] == fees[1] == fees[2]


def test_upfront_premiums_and_final_loan():
    assert upfront_premium(200_000.0, "fha") == pytest.approx(3500.0)
    assert upfront_premium(200_000.0, "usda") == pytest.approx(2000.0)
    assert upfront_premium(200_000.0, "va") == 0.0
    assert upfront_premium(200_000.0, "conventional") == 0.0

    assert final_loan_amount(200_000.0, 4300.0) == pytest.approx(204_300.0)


def test_ltv_handles_zero_value():
    assert compute_ltv(300_000.0, 240_000.0) == pytest.approx(80.0)
    assert compute_ltv(0.0, 240_000.0) == 0.0
