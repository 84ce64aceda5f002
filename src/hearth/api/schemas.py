# src/hearth/api/schemas.py
from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hearth.domain.calculator import CalculatorResult, InputField


# --------------------------------------------
# Calculator catalog
# --------------------------------------------

class CalculatorSummary(BaseModel):
    id: str
    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)


class CalculatorDetail(CalculatorSummary):
    inputs: list[InputField]


# --------------------------------------------
# Calculate / export
# --------------------------------------------

class CalculateRequest(BaseModel):
    """
    Raw form values keyed by field name. Values may be numbers or strings
    like "6.5%" or "$1,200"; validation coerces them.
    """
    model_config = ConfigDict(extra="forbid")

    inputs: dict[str, Any] = Field(default_factory=dict)


class CalculateResponse(BaseModel):
    calculator_id: str
    inputs: dict[str, float]
    results: list[CalculatorResult]


class ChartSegmentIn(BaseModel):
    label: str
    value: float
    color: str


class ExportRequest(CalculateRequest):
    chart_data: list[ChartSegmentIn] | None = None


# --------------------------------------------
# Amortization schedule
# --------------------------------------------

class ScheduleRequest(BaseModel):
    principal: float = Field(..., gt=0)
    annual_rate_pct: float = Field(..., ge=0, le=100)
    term_years: int = Field(..., gt=0, le=50)
    extra_payment: float = Field(0.0, ge=0)
    first_payment_date: date | None = None
    yearly: bool = False


class ScheduleRow(BaseModel):
    period: int
    payment_date: date | None = None
    payment: float
    principal: float
    interest: float
    extra: float
    balance: float


class YearlyRow(BaseModel):
    year: int
    principal: float
    interest: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    monthly_payment: float
    total_interest: float
    actual_term_months: int
    rows: list[ScheduleRow] = Field(default_factory=list)
    yearly: list[YearlyRow] = Field(default_factory=list)
