"""Shared CLI utilities."""

import asyncio
from datetime import date
from functools import wraps
from pathlib import Path

import click

from ..db import DocumentStore, get_db_path
from ..errors import StorageError, StorageQuotaError, WorkoutTrackerError
from ..models.document import Document
from ..models.program import Exercise, Workout
from ..services.program_editor import find_exercise_by_name, find_workout_by_name
from ..utils.dates import is_valid_date_key, today_key


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def handle_errors(f):
    """Report workout-tracker errors and exit with status 1."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except StorageQuotaError as e:
            echo_error(str(e))
            echo_info(
                "Export your data with 'workout-tracker export', clear old data, then retry."
            )
        except StorageError as e:
            echo_error(str(e))
            echo_info("Your change was not saved. Please try again.")
        except WorkoutTrackerError as e:
            echo_error(str(e))
        click.get_current_context().exit(1)

    return wrapper


def get_data_dir(ctx: click.Context) -> Path | None:
    """The --data-dir given to the CLI group, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("data_dir")


def get_store(ctx: click.Context) -> DocumentStore:
    """Open the document store for this invocation."""
    return DocumentStore(get_db_path(get_data_dir(ctx)))


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path(get_data_dir(ctx))
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'workout-tracker init' first."
        )
        ctx.exit(1)


def validate_date(ctx, param, value: str | None) -> str:
    """Click callback: default to today, require a real YYYY-MM-DD date."""
    if value is None:
        return today_key()
    value = value.strip()
    if value.lower() == "today":
        return today_key()
    if not is_valid_date_key(value):
        raise click.BadParameter("Use YYYY-MM-DD")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"{value} is not a calendar date")
    return value


def resolve_workout(ctx: click.Context, doc: Document, name: str) -> Workout:
    """Find a workout by id or name, or exit with an error."""
    workout = find_workout_by_name(doc, name)
    if workout is None:
        echo_error(f"Workout '{name}' not found")
        ctx.exit(1)
    return workout


def resolve_exercise(
    ctx: click.Context,
    doc: Document,
    name: str,
    workout: Workout | None = None,
) -> tuple[Workout, Exercise]:
    """Find an exercise by id or (fuzzy) name, or exit with an error."""
    found = find_exercise_by_name(doc, name, workout.id if workout else None)
    if found is None:
        echo_error(f"Exercise '{name}' not found")
        ctx.exit(1)
    return found


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []
    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip())
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
