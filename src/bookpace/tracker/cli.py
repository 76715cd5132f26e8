"""Command-line interface for bookpace.

Built with Typer for commands and Rich for output. Every command reads a
JSON snapshot exported by the reading app and prints what the
calculators make of it.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import get_config
from .deadlines import (
    DeadlineSnapshot,
    SnapshotLoadError,
    find_deadline,
    latest_status,
    load_snapshot,
)
from .formats import format_quantity, reading_estimate, unit_for_format
from .pace import (
    KnownCalculation,
    UrgencyLevel,
    calculate_user_pace,
    compute_deadline_calculations,
    most_urgent,
    progress_for_today,
)
from .stats import (
    audio_deadlines,
    bucket_daily_activity,
    build_daily_goal_summary,
    build_user_activity_days,
    compute_status_aware_totals,
    format_daily_goal_display,
    reading_deadlines,
    status_aware_calculations,
)

# Create the main app
app = typer.Typer(
    name="bookpace",
    help="Reading pace, urgency and daily goals for your deadlines.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()

URGENCY_STYLES = {
    UrgencyLevel.GOOD: "green",
    UrgencyLevel.APPROACHING: "yellow",
    UrgencyLevel.URGENT: "dark_orange",
    UrgencyLevel.OVERDUE: "red",
    UrgencyLevel.IMPOSSIBLE: "bold red",
}


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def _load(snapshot_path: Path) -> DeadlineSnapshot:
    try:
        return load_snapshot(snapshot_path)
    except SnapshotLoadError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _resolve_now(now: Optional[str]) -> datetime:
    """Parse ``--now`` or fall back to the current time in the configured zone."""
    zone = get_config().zone
    if now is None:
        return datetime.now(zone)
    try:
        parsed = datetime.fromisoformat(now)
    except ValueError:
        print_error(f"Invalid --now value: {now}. Use ISO format, e.g. 2025-01-15T09:00")
        raise typer.Exit(1)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    return parsed


def _format_pace(calc: KnownCalculation, format: str) -> str:
    if calc.units_per_day is None:
        return "-"
    return f"{format_daily_goal_display(calc.units_per_day, format)}/day"


# ============================================================================
# Commands
# ============================================================================


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Reading pace, urgency and daily goals for your deadlines."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command()
def calc(
    snapshot_path: Path = typer.Argument(..., help="Snapshot JSON file"),
    now: Optional[str] = typer.Option(None, "--now", "-n", help="Reference time (ISO)"),
) -> None:
    """Show required pace and urgency for every deadline."""
    snapshot = _load(snapshot_path)
    moment = _resolve_now(now)

    if not snapshot.deadlines:
        print_info("No deadlines in snapshot.")
        return

    table = Table(title="Deadlines", show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan", no_wrap=False, max_width=40)
    table.add_column("Status", style="yellow")
    table.add_column("Progress", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Days Left", justify="right")
    table.add_column("Pace", justify="right")
    table.add_column("Urgency")

    levels = []
    for deadline in snapshot.deadlines:
        result = compute_deadline_calculations(deadline, moment)
        levels.append(result.urgency_level)
        title = deadline.title or deadline.id
        status = latest_status(deadline).value

        if not isinstance(result, KnownCalculation):
            table.add_row(title, status, "N/A", "N/A", "N/A", "N/A", "[dim]N/A[/dim]")
            continue

        style = URGENCY_STYLES[result.urgency_level]
        table.add_row(
            title,
            status,
            f"{result.progress_percentage}%",
            format_quantity(deadline.format, result.remaining),
            str(result.days_left),
            _format_pace(result, deadline.format),
            f"[{style}]{result.urgency_label}[/{style}]",
        )

    console.print(table)

    worst = most_urgent(levels)
    if worst is not None:
        style = URGENCY_STYLES[worst]
        console.print(f"Most urgent: [{style}]{worst.value}[/{style}]")


@app.command()
def goals(
    snapshot_path: Path = typer.Argument(..., help="Snapshot JSON file"),
    now: Optional[str] = typer.Option(None, "--now", "-n", help="Reference time (ISO)"),
) -> None:
    """Show today's reading and listening goals."""
    snapshot = _load(snapshot_path)
    moment = _resolve_now(now)

    summary = build_daily_goal_summary(snapshot.deadlines, moment)

    def todays_progress(deadline):
        return progress_for_today(deadline, moment)

    get_calculations = status_aware_calculations(moment)
    active_reading = compute_status_aware_totals(
        reading_deadlines(snapshot.deadlines), get_calculations, todays_progress
    )
    active_audio = compute_status_aware_totals(
        audio_deadlines(snapshot.deadlines), get_calculations, todays_progress
    )

    console.print(Panel(f"[bold]Today's Goals[/bold] ({moment.date().isoformat()})", style="magenta"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("", style="cyan")
    table.add_column("Today's Goal", justify="right")
    table.add_column("Done Today", justify="right")
    table.add_column("Active Only", justify="right")

    table.add_row(
        "Reading",
        summary.reading_display,
        format_daily_goal_display(summary.reading.current, "physical"),
        format_daily_goal_display(active_reading.total, "physical"),
    )
    table.add_row(
        "Listening",
        summary.audio_display,
        format_daily_goal_display(summary.audio.current, "audio"),
        format_daily_goal_display(active_audio.total, "audio"),
    )
    console.print(table)


@app.command()
def activity(
    snapshot_path: Path = typer.Argument(..., help="Snapshot JSON file"),
    deadline_id: str = typer.Argument(..., help="Deadline ID"),
    now: Optional[str] = typer.Option(None, "--now", "-n", help="Reference time (ISO)"),
) -> None:
    """Show how much was read each day for one deadline."""
    snapshot = _load(snapshot_path)
    moment = _resolve_now(now)

    deadline = find_deadline(snapshot, deadline_id)
    if deadline is None:
        print_error(f"Deadline not found: {deadline_id}")
        raise typer.Exit(1)

    buckets = bucket_daily_activity(deadline, moment)
    if not buckets:
        print_info("No reading activity recorded yet.")
        return

    unit = unit_for_format(deadline.format)
    table = Table(title=deadline.title or deadline.id, show_header=True, header_style="bold")
    table.add_column("Date", style="cyan")
    table.add_column(unit.capitalize(), justify="right")

    for day, amount in buckets.items():
        table.add_row(day.isoformat(), f"{amount:g}")

    console.print(table)

    result = compute_deadline_calculations(deadline, moment)
    if isinstance(result, KnownCalculation) and result.remaining > 0:
        print_info(reading_estimate(deadline.format, result.remaining))


@app.command()
def pace(
    snapshot_path: Path = typer.Argument(..., help="Snapshot JSON file"),
    now: Optional[str] = typer.Option(None, "--now", "-n", help="Reference time (ISO)"),
) -> None:
    """Show your average reading and listening pace."""
    snapshot = _load(snapshot_path)
    moment = _resolve_now(now)

    reading = calculate_user_pace(snapshot.deadlines, moment)
    listening = calculate_user_pace(snapshot.deadlines, moment, audio=True)

    for label, data, format in (
        ("Reading", reading, "physical"),
        ("Listening", listening, "audio"),
    ):
        if not data.is_reliable:
            console.print(f"{label}: [dim]not enough recent activity[/dim]")
            continue
        console.print(
            f"{label}: [green]{format_daily_goal_display(data.average_pace, format)}/day[/green] "
            f"[dim]over {data.days_count} active days[/dim]"
        )


@app.command()
def targets(
    snapshot_path: Path = typer.Argument(..., help="Snapshot JSON file"),
    start: str = typer.Argument(..., help="First day (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="Last day (default: start)"),
    now: Optional[str] = typer.Option(None, "--now", "-n", help="Reference time (ISO)"),
) -> None:
    """Show read amounts against the targets in force on past days."""
    snapshot = _load(snapshot_path)
    moment = _resolve_now(now)

    try:
        first = date.fromisoformat(start)
        last = date.fromisoformat(end) if end else first
    except ValueError:
        print_error("Dates must be in YYYY-MM-DD format")
        raise typer.Exit(1)

    if last < first:
        print_error("End date is before start date")
        raise typer.Exit(1)

    table = Table(title="Daily Targets", show_header=True, header_style="bold")
    table.add_column("Date", style="cyan")
    table.add_column("Pages", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Listened", justify="right")
    table.add_column("Target", justify="right")

    for day in build_user_activity_days(snapshot.deadlines, first, last, moment):
        table.add_row(
            day.date.isoformat(),
            format_daily_goal_display(day.pages_read, "physical"),
            format_daily_goal_display(day.target_pages, "physical"),
            format_daily_goal_display(day.minutes_listened, "audio"),
            format_daily_goal_display(day.target_minutes, "audio"),
        )

    console.print(table)


@app.command("config")
def show_config() -> None:
    """Show the effective configuration."""
    config = get_config()

    table = Table(title="Configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Timezone", config.timezone)
    table.add_row("Pages easy / urgent / max", f"{config.pages_easy_pace:g} / {config.pages_urgent_pace:g} / {config.pages_max_pace:g}")
    table.add_row("Audio easy / urgent / max", f"{config.audio_easy_pace:g} / {config.audio_urgent_pace:g} / {config.audio_max_pace:g}")
    table.add_row("Pace window (days)", str(config.pace_window_days))
    console.print(table)

    errors = config.validate()
    for error in errors:
        print_warning(error)
    if errors:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    console.print(f"bookpace version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
