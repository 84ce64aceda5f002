import pytest
from pydantic import ValidationError

from hearth.adapters.config import AppConfig


def test_defaults():
    cfg = AppConfig()
    assert cfg.DEFAULT_LOAN_TERM_YEARS == 30
    assert cfg.DSCR_EXCELLENT == 1.25
    assert cfg.AFFORDABILITY_DTI_PCT == 43.0


def test_env_overrides_accept_percent_strings(monkeypatch):
    monkeypatch.setenv("HEARTH_DEFAULT_INTEREST_RATE_PCT", "6.25%")
    monkeypatch.setenv("hearth_appreciation_rate_pct", "-2")
    monkeypatch.setenv("HEARTH_RENT_INFLATION_PCT", "-1.5%")

    cfg = AppConfig()

    assert cfg.DEFAULT_INTEREST_RATE_PCT == 6.25
    assert cfg.APPRECIATION_RATE_PCT == -2.0
    assert cfg.RENT_INFLATION_PCT == -1.5


def test_negative_cost_rate_rejected(monkeypatch):
    monkeypatch.setenv("HEARTH_OWNER_TAX_RATE_PCT", "-1")
    with pytest.raises(ValidationError):
        AppConfig()


def test_dscr_threshold_must_be_positive(monkeypatch):
    monkeypatch.setenv("HEARTH_DSCR_GOOD", "0")
    with pytest.raises(ValidationError):
        AppConfig()

