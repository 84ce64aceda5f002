# src/hearth/services/calculators/common.py
"""
Pieces shared by the calculator flavors: field builders for inputs that
appear on several forms, numeric-code maps for enum-like inputs, and a
small constructor for result rows.
"""

from __future__ import annotations

from typing import Any

from hearth.domain.calculator import CalculatorResult, InputField, ResultFormat
from hearth.domain.units import AmountMode, normalize_amount
from hearth.services.validation import InputValidationError

MAX_PRICE = 100_000_000.0
MIN_HOME_PRICE = 1000.0

AMOUNT_MODES: dict[int, AmountMode] = {0: "dollar", 1: "percent"}
AMOUNT_MODE_OPTIONS = {0: "Dollars", 1: "Percent of home price"}


def result(
    label: str,
    value: float,
    fmt: ResultFormat = "currency",
    description: str = "",
    highlight: bool = False,
) -> CalculatorResult:
    return CalculatorResult(
        label=label,
        value=float(value),
        format=fmt,
        highlight=highlight,
        description=description,
    )


def rate_pct_field(
    name: str,
    label: str,
    default: float | None,
    placeholder: str = "",
    help_text: str = "",
) -> InputField:
    return InputField(
        name=name,
        label=label,
        type="percentage",
        min=0,
        max=20,
        step=0.1,
        placeholder=placeholder or (f"{default:g}" if default is not None else ""),
        default_value=default,
        help_text=help_text,
    )


def term_years_field(
    name: str,
    label: str,
    default: int | None,
    placeholder: str = "",
    help_text: str = "",
) -> InputField:
    return InputField(
        name=name,
        label=label,
        type="number",
        min=1,
        max=30,
        step=1,
        integer=True,
        placeholder=placeholder or (str(default) if default is not None else ""),
        default_value=default,
        help_text=help_text,
    )


def price_field(name: str, label: str, placeholder: str, help_text: str = "") -> InputField:
    return InputField(
        name=name,
        label=label,
        type="currency",
        min=MIN_HOME_PRICE,
        max=MAX_PRICE,
        step=1000,
        placeholder=placeholder,
        help_text=help_text,
    )


def amount_mode_field(name: str, label: str) -> InputField:
    return InputField(
        name=name,
        label=label,
        type="number",
        min=0,
        max=1,
        step=1,
        required=False,
        default_value=0,
        options=AMOUNT_MODE_OPTIONS,
    )


def amount_in_dollars(inputs: dict[str, float], value_key: str, mode_key: str, base: float) -> float:
    """Resolve an input the form lets the user enter as dollars or as a percent of ``base``."""
    mode = pick(AMOUNT_MODES, inputs.get(mode_key, 0), mode_key)
    return normalize_amount(inputs.get(value_key, 0.0), mode, base)


def pick(options: dict[int, Any], code: float, field_name: str) -> Any:
    try:
        return options[int(code)]
    except KeyError as err:
        raise InputValidationError({field_name: f"Unknown option code: {code:g}"}) from err


def require_down_payment_within(price: float, down_payment: float, price_label: str = "home price") -> None:
    if down_payment > price:
        raise InputValidationError({"downPayment": f"Down payment cannot exceed {price_label}"})


def share_of(part: float, whole: float) -> float:
    """``part / whole`` as a fraction; 0.0 when ``whole`` is not positive."""
    if whole <= 0:
        return 0.0
    return part / whole
