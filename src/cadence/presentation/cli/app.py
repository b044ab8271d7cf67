"""Cadence CLI application using Typer.

Utilities for inspecting recurrence rules and the effective configuration.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cadence.domain.scheduling.value_objects import RecurrenceRule
from cadence.domain.shared.exceptions import DomainException
from cadence.domain.shared.time import today_utc
from cadence_config import configure_logging, get_settings

app = typer.Typer(
    name="cadence",
    help="Cadence - recurring and scheduled transaction engine CLI",
    no_args_is_help=True,
)
console = Console()


def _parse_date(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Invalid date '{value}', expected YYYY-MM-DD[/red]")
        raise typer.Exit(1) from None


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level",
    ),
) -> None:
    configure_logging(log_level)


@app.command("preview")
def preview(
    unit: str = typer.Option("month", "--unit", "-u", help="day, week, month or year"),
    interval: int = typer.Option(1, "--interval", "-i", help="Units between occurrences"),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        "-s",
        help="Series start (YYYY-MM-DD), defaults to today",
    ),
    count: int = typer.Option(6, "--count", "-n", min=1, max=500),
    until: Optional[str] = typer.Option(
        None,
        "--until",
        help="Last day an occurrence may fall on (YYYY-MM-DD)",
    ),
    include_start_day: bool = typer.Option(
        False,
        "--include-start-day/--no-include-start-day",
        help="Treat the start date as already counted",
    ),
) -> None:
    """Print the upcoming occurrences of a recurrence rule."""
    start_date = _parse_date(start) or today_utc()
    end_date = _parse_date(until)

    try:
        rule = RecurrenceRule(unit=unit, interval=interval)
    except DomainException as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from None

    occurrences = rule.next_occurrences(
        start_date,
        count,
        include_start_day_in_count=include_start_day,
        end_date=end_date,
        anchor_day=start_date.day,
    )

    table = Table(title=f"{rule.display_string} from {start_date.isoformat()}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Weekday")
    for index, occurrence in enumerate(occurrences, start=1):
        table.add_row(str(index), occurrence.isoformat(), occurrence.strftime("%A"))

    console.print(table)
    if len(occurrences) < count:
        console.print("[dim]The series ends before the requested count.[/dim]")


@app.command("config")
def show_config() -> None:
    """Print the effective engine settings."""
    settings = get_settings()

    table = Table(title="Cadence settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
