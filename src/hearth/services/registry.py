# src/hearth/services/registry.py

from __future__ import annotations

from typing import Any

from hearth.adapters.logging_utils import get_logger, with_context
from hearth.domain.calculator import CalculatorConfig, CalculatorResult
from hearth.services.calculators import (
    affordability,
    dscr,
    fix_flip,
    purchase,
    refinance,
    rent_vs_buy,
    va_purchase,
    va_refinance,
)
from hearth.services.validation import validate_inputs

logger = get_logger(__name__)

_CALCULATORS: dict[str, CalculatorConfig] = {
    c.id: c
    for c in (
        purchase.CONFIG,
        refinance.CONFIG,
        rent_vs_buy.CONFIG,
        dscr.CONFIG,
        va_purchase.CONFIG,
        va_refinance.CONFIG,
        affordability.CONFIG,
        fix_flip.CONFIG,
    )
}


class UnknownCalculatorError(KeyError):
    def __init__(self, calculator_id: str):
        self.calculator_id = calculator_id
        super().__init__(calculator_id)

    def __str__(self) -> str:
        return f"Unknown calculator: {self.calculator_id}"


def list_calculators() -> list[CalculatorConfig]:
    return list(_CALCULATORS.values())


def get_calculator(calculator_id: str) -> CalculatorConfig:
    try:
        return _CALCULATORS[calculator_id]
    except KeyError:
        raise UnknownCalculatorError(calculator_id) from None


def run_calculator(
    calculator_id: str,
    raw_inputs: dict[str, Any],
) -> tuple[dict[str, float], list[CalculatorResult]]:
    """
    Validate raw form inputs and run the calculator.

    Returns the cleaned inputs (defaults filled in) together with the
    results, since exports and the API echo both.
    """
    calc = get_calculator(calculator_id)
    inputs = validate_inputs(calc, raw_inputs)
    results = calc.calculate(inputs)

    logger.info(
        "calculator run",
        extra=with_context(calculator_id=calculator_id, inputs=sorted(inputs), results=len(results)),
    )
    return inputs, results
