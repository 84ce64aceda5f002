# src/hearth/services/validation.py

from __future__ import annotations

from typing import Any

from hearth.domain.calculator import CalculatorConfig, InputField


class InputValidationError(ValueError):
    """
    Raised before a calculator runs when inputs are missing, non-numeric or
    out of range. ``errors`` maps field name to a human-readable message, one
    entry per offending field.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        summary = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(f"Invalid calculator inputs ({summary})")


def _to_num(val: Any, field_name: str) -> float:
    """
    Coerce values like:
      - 250000
      - "250000"
      - "6.5"
      - "6.5%"
      - "$1,200"
    into float. Percent signs are stripped without rescaling; the form
    collects percent numbers, so "6.5%" and 6.5 mean the same thing.
    """
    if isinstance(val, bool):
        raise ValueError(f"Invalid type for {field_name}: {type(val)}")
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        s = val.strip().replace(",", "").replace("$", "")
        if s.endswith("%"):
            s = s[:-1]
        try:
            return float(s)
        except ValueError as err:
            raise ValueError(f"Invalid number for {field_name}: {val!r}") from err
    raise ValueError(f"Invalid type for {field_name}: {type(val)}")


def _is_blank(val: Any) -> bool:
    return val is None or (isinstance(val, str) and not val.strip())


def _check_range(field: InputField, value: float) -> str | None:
    if value != value:  # NaN
        return "must be a number"
    if field.min is not None and value < field.min:
        return f"must be at least {field.min:g}"
    if field.max is not None and value > field.max:
        return f"must be at most {field.max:g}"
    if field.integer and not value.is_integer():
        return "must be a whole number"
    if field.options is not None and (not value.is_integer() or int(value) not in field.options):
        allowed = ", ".join(f"{k}={v}" for k, v in field.options.items())
        return f"must be one of {allowed}"
    return None


def validate_inputs(config: CalculatorConfig, raw: dict[str, Any]) -> dict[str, float]:
    """
    Normalize a raw form payload into the ``dict[str, float]`` a calculator's
    ``calculate`` accepts.

    Responsibilities:
      - Coerce numbers and numeric strings.
      - Fill ``default_value`` for omitted fields that have one.
      - Reject missing required fields and values outside ``min``/``max``.
      - Reject fractional values for whole-number fields.
      - Drop keys the calculator does not declare.

    All problems are collected and raised together as InputValidationError.
    """
    errors: dict[str, str] = {}
    cleaned: dict[str, float] = {}

    for field in config.inputs:
        val = raw.get(field.name)

        if _is_blank(val):
            if field.default_value is not None:
                cleaned[field.name] = float(field.default_value)
            elif field.required:
                errors[field.name] = f"Missing required field: {field.name}"
            continue

        try:
            num = _to_num(val, field.name)
        except ValueError as e:
            errors[field.name] = str(e)
            continue

        problem = _check_range(field, num)
        if problem:
            errors[field.name] = f"{field.label} {problem}"
            continue

        cleaned[field.name] = num

    if errors:
        raise InputValidationError(errors)
    return cleaned
