"""CLI for month-of-year queries."""

import logging
from datetime import datetime
from typing import NoReturn

import typer
from pydantic import ValidationError

from calendar_months.core.settings import get_settings
from calendar_months.domain.errors import CalendarError
from calendar_months.domain.month_of_year import MonthOfYear
from calendar_months.domain.resolvers import get_resolver
from calendar_months.schemas import MonthSummary

logger = logging.getLogger(__name__)

app = typer.Typer(help="Month-of-year arithmetic and date adjustment.")
MONTH_ARGUMENT = typer.Argument(..., help="Month number, 1 for January.")


def _month(value: int) -> MonthOfYear:
    try:
        return MonthOfYear.of(value)
    except CalendarError as exc:
        _fail(exc)


def _fail(exc: CalendarError) -> NoReturn:
    logger.warning("calendar_command_failed", extra={"code": exc.code, **exc.details})
    typer.echo(exc.message, err=True)
    raise typer.Exit(code=2)


@app.callback()
def configure() -> None:
    """Configure logging from settings."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid calendar settings: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    logging.basicConfig(level=settings.log_level)


@app.command("info")
def info(
    month: int = MONTH_ARGUMENT,
    locale: str | None = typer.Option(None, help="Locale for month names."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON output."),
) -> None:
    """Describe a month."""
    summary = MonthSummary.from_month(_month(month), locale=locale)
    if as_json:
        typer.echo(summary.model_dump_json())
        return

    typer.echo(f"{summary.text} ({summary.short_text}) = {summary.value}")
    typer.echo(
        f"Quarter: Q{summary.quarter_of_year} "
        f"month {summary.month_of_quarter} of 3"
    )
    typer.echo(f"Days: {summary.min_length_in_days}-{summary.max_length_in_days}")


@app.command("length")
def length(
    month: int = MONTH_ARGUMENT,
    year: int = typer.Option(..., help="ISO year number."),
) -> None:
    """Print the number of days in a month for a year."""
    try:
        days = _month(month).length_in_days(year)
    except CalendarError as exc:
        _fail(exc)
    typer.echo(str(days))


@app.command("shift")
def shift(
    month: int = MONTH_ARGUMENT,
    amount: int = typer.Argument(..., help="Months to add, negative to subtract."),
) -> None:
    """Print the month reached after adding months with wrap-around."""
    typer.echo(_month(month).plus_months(amount).name)


@app.command("adjust")
def adjust(
    value: datetime = typer.Argument(
        ..., formats=["%Y-%m-%d"], help="Date to adjust, YYYY-MM-DD."
    ),
    month: int = MONTH_ARGUMENT,
    resolver: str | None = typer.Option(
        None,
        help="strict, previous-valid, next-valid or part-lenient.",
    ),
) -> None:
    """Print a date moved into another month."""
    resolver_name = resolver or get_settings().default_resolver
    try:
        date_resolver = get_resolver(resolver_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--resolver") from exc

    try:
        adjusted = _month(month).adjust_date(value.date(), date_resolver)
    except CalendarError as exc:
        _fail(exc)
    typer.echo(adjusted.isoformat())


def main() -> None:
    """Run the calendar-months CLI application."""
    app()


if __name__ == "__main__":
    main()
