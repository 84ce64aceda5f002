from __future__ import annotations

import json
from datetime import date
from typing import List, Optional

import typer

from hearth.analysis.schedule import amortization_schedule, yearly_summary
from hearth.services.formatting import format_currency, format_result
from hearth.services.registry import (
    UnknownCalculatorError,
    get_calculator,
    list_calculators,
    run_calculator,
)
from hearth.services.validation import InputValidationError

app = typer.Typer(help="Hearth mortgage calculators (purchase, refinance, DSCR, VA, ...).")


def _parse_sets(pairs: List[str]) -> dict[str, str]:
    raw: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected name=value, got {pair!r}", param_hint="--set")
        raw[name.strip()] = value.strip()
    return raw


@app.command("list")
def list_cmd() -> None:
    """
    List available calculators.
    """
    for c in list_calculators():
        typer.echo(f"{c.id:<15} {c.title}")


@app.command("show")
def show(calculator_id: str = typer.Argument(..., help="Calculator id, e.g. purchase")) -> None:
    """
    Show a calculator's input fields.
    """
    try:
        c = get_calculator(calculator_id)
    except UnknownCalculatorError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{c.title}\n{c.description}\n")
    for f in c.inputs:
        bounds = f"[{f.min:g}..{f.max:g}]" if f.min is not None and f.max is not None else ""
        default = f" default={f.default_value:g}" if f.default_value is not None else ""
        req = "" if f.required else " (optional)"
        typer.echo(f"  {f.name:<26} {f.type:<10} {bounds}{default}{req}")
        if f.options:
            for code, label in f.options.items():
                typer.echo(f"      {code} = {label}")


@app.command("run")
def run(
    calculator_id: str = typer.Argument(..., help="Calculator id, e.g. purchase"),
    set_: List[str] = typer.Option([], "--set", "-s", help="Input as name=value (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """
    Run a calculator with inputs given as --set name=value.
    """
    try:
        inputs, results = run_calculator(calculator_id, _parse_sets(set_))
    except UnknownCalculatorError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except InputValidationError as e:
        for name, msg in e.errors.items():
            typer.echo(f"{name}: {msg}", err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(
            json.dumps(
                {"inputs": inputs, "results": [r.model_dump() for r in results]},
                indent=2,
            )
        )
        return

    for r in results:
        marker = "*" if r.highlight else " "
        typer.echo(f"{marker} {r.label:<34} {format_result(r):>16}  {r.description}")


@app.command("schedule")
def schedule(
    principal: float = typer.Option(..., help="Loan amount"),
    rate: float = typer.Option(..., help="Annual interest rate in percent, e.g. 6.5"),
    years: int = typer.Option(30, help="Loan term in years"),
    extra: float = typer.Option(0.0, help="Extra principal per month"),
    start: Optional[str] = typer.Option(None, help="First payment date (YYYY-MM-DD)"),
    yearly: bool = typer.Option(False, "--yearly", help="Summarize by loan year"),
) -> None:
    """
    Print an amortization schedule.
    """
    first = None
    if start:
        try:
            first = date.fromisoformat(start)
        except ValueError as e:
            raise typer.BadParameter(f"expected YYYY-MM-DD, got {start!r}", param_hint="--start") from e
    df = amortization_schedule(principal, rate / 100, years * 12, extra_payment=extra, first_payment_date=first)

    if yearly:
        df = yearly_summary(df)
        for row in df.itertuples(index=False):
            typer.echo(
                f"{row.year:>3}  principal {format_currency(row.principal):>12}"
                f"  interest {format_currency(row.interest):>12}"
                f"  balance {format_currency(row.ending_balance):>12}"
            )
        return

    typer.echo(df.to_string(index=False, float_format=lambda v: f"{v:,.2f}"))


if __name__ == "__main__":
    app()
