# src/hearth/services/export.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from hearth.domain.calculator import CalculatorResult
from hearth.services.formatting import format_result

# Labels the payment flavors use for their monthly breakdown rows, with the
# colors the report draws them in.
BREAKDOWN_COLORS: dict[str, str] = {
    "Principal & Interest": "#1f4e79",
    "Property Taxes": "#2e75b6",
    "Homeowners Insurance": "#9dc3e6",
    "HOA Fees": "#f4b183",
    "Mortgage Insurance": "#c55a11",
    "Extra Principal": "#70ad47",
}


class ChartSegment(BaseModel):
    label: str
    value: float
    color: str


class ExportedResult(BaseModel):
    label: str
    value: float
    format: str
    formatted: str
    highlight: bool = False
    description: str = ""


class ExportPayload(BaseModel):
    """Everything a report renderer needs; nothing about how it renders."""

    calculator_id: str
    generated_at: datetime
    inputs: dict[str, float]
    results: list[ExportedResult]
    chart_data: list[ChartSegment] = Field(default_factory=list)


def default_chart_segments(results: list[CalculatorResult]) -> list[ChartSegment]:
    """Monthly breakdown rows with a positive value, in display order."""
    segments = []
    for r in results:
        color = BREAKDOWN_COLORS.get(r.label)
        if color is None or r.format != "currency" or r.value <= 0:
            continue
        segments.append(ChartSegment(label=r.label, value=r.value, color=color))
    return segments


def build_export_payload(
    calculator_id: str,
    inputs: dict[str, float],
    results: list[CalculatorResult],
    chart_segments: list[dict[str, Any]] | None = None,
) -> ExportPayload:
    if chart_segments is None:
        chart = default_chart_segments(results)
    else:
        chart = [ChartSegment(**seg) for seg in chart_segments]

    return ExportPayload(
        calculator_id=calculator_id,
        generated_at=datetime.now(timezone.utc),
        inputs=dict(inputs),
        results=[
            ExportedResult(
                label=r.label,
                value=r.value,
                format=r.format,
                formatted=format_result(r),
                highlight=r.highlight,
                description=r.description,
            )
            for r in results
        ],
        chart_data=chart,
    )
