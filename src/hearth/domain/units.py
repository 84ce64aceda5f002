from typing import Literal

AmountMode = Literal["dollar", "percent"]


def dollar_to_percent(dollar_amount: float, base: float) -> float:
    """Dollar amount as a percent of ``base``; 0.0 when base is not positive."""
    if base > 0:
        return (dollar_amount / base) * 100
    return 0.0


def percent_to_dollar(percent: float, base: float) -> float:
    """Percent of ``base`` as dollars; 0.0 when base is not positive."""
    if base > 0:
        return (base * percent) / 100
    return 0.0


def normalize_amount(value: float, mode: AmountMode, base: float) -> float:
    """
    Canonical (dollar) form of an input that the UI lets the user enter
    either way, e.g. down payment or annual insurance relative to home value.
    """
    if mode == "dollar":
        return float(value)
    if mode == "percent":
        return percent_to_dollar(value, base)
    raise ValueError(f"Unknown amount mode: {mode}")
