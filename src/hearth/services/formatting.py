# src/hearth/services/formatting.py

from __future__ import annotations

import math
from typing import Any

from hearth.domain.calculator import CalculatorResult


def format_currency(value: float, decimals: int = 0) -> str:
    """US-dollar display: 1234.56 -> "$1,235", -50 -> "-$50"."""
    if not math.isfinite(value):
        return "N/A"
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """``value`` is a fraction: 0.05 -> "5.00%"."""
    if not math.isfinite(value):
        return "N/A"
    return f"{value * 100:.{decimals}f}%"


def format_number(value: float, decimals: int = 0) -> str:
    if not math.isfinite(value):
        return "N/A"
    return f"{value:,.{decimals}f}"


def format_result(result: CalculatorResult) -> str:
    if result.format == "currency":
        return format_currency(result.value)
    if result.format == "percentage":
        return format_percentage(result.value)
    # ratios like DSCR need the decimals; month counts read fine with them too
    decimals = 0 if float(result.value).is_integer() else 2
    return format_number(result.value, decimals)


def parse_numeric_input(text: Any) -> float | None:
    """
    Lenient parse of what a user typed into a form field.
    Returns None for blank or unparseable text.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    s = str(text).strip().replace(",", "").replace("$", "").replace("%", "")
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None
