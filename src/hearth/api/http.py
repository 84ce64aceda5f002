# src/hearth/api/http.py
from __future__ import annotations

from fastapi import FastAPI, HTTPException

from hearth.adapters.config import config
from hearth.analysis.schedule import amortization_schedule, yearly_summary
from hearth.domain.amortization import simulate_payoff
from hearth.domain.calculator import CalculatorConfig
from hearth.services.export import ExportPayload, build_export_payload
from hearth.services.registry import (
    UnknownCalculatorError,
    get_calculator,
    list_calculators,
    run_calculator,
)
from hearth.services.validation import InputValidationError

from .schemas import (
    CalculateRequest,
    CalculateResponse,
    CalculatorDetail,
    CalculatorSummary,
    ExportRequest,
    ScheduleRequest,
    ScheduleResponse,
    ScheduleRow,
    YearlyRow,
)

app = FastAPI(title="hearth", description="Mortgage calculators")


def _summary(c: CalculatorConfig) -> CalculatorSummary:
    return CalculatorSummary(id=c.id, title=c.title, description=c.description, keywords=list(c.keywords))


def _lookup(calculator_id: str) -> CalculatorConfig:
    try:
        return get_calculator(calculator_id)
    except UnknownCalculatorError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


def _validation_detail(e: InputValidationError) -> dict:
    return {"message": "Invalid calculator inputs", "errors": e.errors}


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "env": config.ENV}


@app.get("/calculators", response_model=list[CalculatorSummary])
def calculators() -> list[CalculatorSummary]:
    return [_summary(c) for c in list_calculators()]


@app.get("/calculators/{calculator_id}", response_model=CalculatorDetail)
def calculator_detail(calculator_id: str) -> CalculatorDetail:
    c = _lookup(calculator_id)
    return CalculatorDetail(**_summary(c).model_dump(), inputs=c.inputs)


@app.post("/calculators/{calculator_id}/calculate", response_model=CalculateResponse)
def calculate(calculator_id: str, payload: CalculateRequest) -> CalculateResponse:
    _lookup(calculator_id)
    try:
        inputs, results = run_calculator(calculator_id, payload.inputs)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=_validation_detail(e)) from e
    return CalculateResponse(calculator_id=calculator_id, inputs=inputs, results=results)


@app.post("/calculators/{calculator_id}/export", response_model=ExportPayload)
def export(calculator_id: str, payload: ExportRequest) -> ExportPayload:
    """
    Inputs, formatted results and chart data for a report. Rendering and
    storage happen downstream.
    """
    _lookup(calculator_id)
    try:
        inputs, results = run_calculator(calculator_id, payload.inputs)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=_validation_detail(e)) from e

    chart = None
    if payload.chart_data is not None:
        chart = [seg.model_dump() for seg in payload.chart_data]
    return build_export_payload(calculator_id, inputs, results, chart_segments=chart)


@app.post("/amortization/schedule", response_model=ScheduleResponse)
def schedule(payload: ScheduleRequest) -> ScheduleResponse:
    rate = payload.annual_rate_pct / 100
    term_months = payload.term_years * 12

    summary = simulate_payoff(payload.principal, rate, term_months, payload.extra_payment)
    if not summary.converged:
        raise HTTPException(status_code=400, detail="Loan does not amortize with these inputs")

    df = amortization_schedule(
        payload.principal,
        rate,
        term_months,
        extra_payment=payload.extra_payment,
        first_payment_date=payload.first_payment_date,
    )

    yearly = []
    if payload.yearly:
        yearly = [YearlyRow(**r) for r in yearly_summary(df).to_dict(orient="records")]

    return ScheduleResponse(
        monthly_payment=summary.monthly_payment,
        total_interest=summary.total_interest,
        actual_term_months=summary.actual_term_months,
        rows=[ScheduleRow(**r) for r in df.to_dict(orient="records")],
        yearly=yearly,
    )
