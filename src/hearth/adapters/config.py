# src/hearth/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # Form defaults shared by the loan flavors (percent numbers, as the UI collects them)
    DEFAULT_INTEREST_RATE_PCT: float = Field(default=7.0)
    DEFAULT_LOAN_TERM_YEARS: int = Field(default=30)
    DEFAULT_PROPERTY_TAX_RATE_PCT: float = Field(default=1.2)
    DEFAULT_INSURANCE_ANNUAL: float = Field(default=1200.0)

    # Refinance
    DEFAULT_REFI_CLOSING_COSTS: float = Field(default=5000.0)

    # -----------------------------
    # Rent vs buy cost assumptions
    # -----------------------------
    RENT_INFLATION_PCT: float = Field(default=3.0)
    APPRECIATION_RATE_PCT: float = Field(default=3.0)
    OWNER_TAX_RATE_PCT: float = Field(default=1.2)
    OWNER_INSURANCE_RATE_PCT: float = Field(default=0.5)
    OWNER_MAINTENANCE_RATE_PCT: float = Field(default=1.0)
    BUY_CLOSING_COST_PCT: float = Field(default=3.0)
    SELL_CLOSING_COST_PCT: float = Field(default=0.0)

    # -----------------------------
    # DSCR qualification bands (NOI / monthly P&I)
    # -----------------------------
    DSCR_EXCELLENT: float = Field(default=1.25)
    DSCR_GOOD: float = Field(default=1.0)
    DSCR_MARGINAL: float = Field(default=0.75)

    # Affordability
    AFFORDABILITY_DTI_PCT: float = Field(default=43.0)

    model_config = SettingsConfigDict(
        env_prefix="HEARTH_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "DEFAULT_INTEREST_RATE_PCT",
        "DEFAULT_PROPERTY_TAX_RATE_PCT",
        "OWNER_TAX_RATE_PCT",
        "OWNER_INSURANCE_RATE_PCT",
        "OWNER_MAINTENANCE_RATE_PCT",
        "BUY_CLOSING_COST_PCT",
        "SELL_CLOSING_COST_PCT",
        "AFFORDABILITY_DTI_PCT",
        mode="before",
    )
    @classmethod
    def _to_non_negative_percent(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("rate must be numeric or percent-like") from err
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @field_validator("APPRECIATION_RATE_PCT", "RENT_INFLATION_PCT", mode="before")
    @classmethod
    def _signed_percent(cls, v: Any) -> Any:
        # home values and rents can fall, so no sign check here
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        return float(v)

    @field_validator("DSCR_EXCELLENT", "DSCR_GOOD", "DSCR_MARGINAL", mode="before")
    @classmethod
    def _dscr_positive(cls, v: Any) -> Any:
        f = float(v)
        if f <= 0:
            raise ValueError("DSCR thresholds must be > 0")
        return f

    @field_validator("DEFAULT_LOAN_TERM_YEARS", mode="before")
    @classmethod
    def _term_positive(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("DEFAULT_LOAN_TERM_YEARS must be > 0")
        return n


config = AppConfig()
