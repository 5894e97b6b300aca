"""Daily logging commands."""

import re

import click

from ..models.log import BODYWEIGHT, WorkoutSet
from ..services import logbook
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    get_store,
    handle_errors,
    resolve_exercise,
    resolve_workout,
    validate_date,
)
from .prompts import SetEntryPrompt

SET_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:[xX@*]\s*(\S+))?\s*$")


def parse_set(text: str) -> WorkoutSet:
    """Parse '5x185', '8xBW' or '12' (bodyweight) into a set."""
    match = SET_RE.match(text)
    if not match:
        raise click.BadParameter(f"'{text}' is not a set. Use REPSxWEIGHT, e.g. 5x185 or 8xBW")
    reps, weight = match.groups()
    return WorkoutSet(reps=float(reps), weight=weight or BODYWEIGHT)


def _parse_sets(ctx, param, value) -> list[WorkoutSet]:
    return [parse_set(text) for text in value]


@click.group()
@click.pass_context
def log(ctx):
    """Log sets and review what was logged."""
    ensure_initialized(ctx)


@log.command()
@click.option("--date", "-d", "date_key", callback=validate_date, help="Date (YYYY-MM-DD, default today)")
@click.pass_context
@handle_errors
@async_command
async def show(ctx, date_key: str):
    """Show everything logged on a date."""
    doc = await get_store(ctx).load()
    logs = doc.logs_by_date.get(date_key, {})

    click.echo()
    click.echo(click.style(f"Log for {date_key}", bold=True))
    click.echo("=" * 50)

    for workout in doc.program.workouts:
        click.echo()
        tag = " [Baseline]" if workout.is_baseline else ""
        click.echo(click.style(f"{workout.name}{tag}", bold=True))
        if not workout.exercises:
            click.echo("  No exercises yet.")
            continue
        for exercise in workout.exercises:
            entry = logs.get(exercise.id)
            if entry is None:
                click.echo(f"  - {exercise.name}: -")
                continue
            sets_text = logbook.format_sets(entry) or "logged (no sets)"
            click.echo(f"  - {exercise.name}: {sets_text}")
            if entry.notes:
                click.echo(f"      {entry.notes}")

    orphans = [ex_id for ex_id in logs if ex_id not in doc.program.exercise_ids()]
    if orphans:
        click.echo()
        click.echo(click.style("Deleted exercises", bold=True))
        for ex_id in orphans:
            click.echo(f"  - {ex_id}: {logbook.format_sets(logs[ex_id]) or 'logged (no sets)'}")


@log.command()
@click.argument("exercise")
@click.option("--workout", "-w", default=None, help="Workout containing the exercise")
@click.option("--date", "-d", "date_key", callback=validate_date, help="Date (YYYY-MM-DD, default today)")
@click.option(
    "--set",
    "-s",
    "sets",
    multiple=True,
    callback=_parse_sets,
    help="A set as REPSxWEIGHT (e.g. 5x185, 8xBW). Repeatable. Prompts if omitted.",
)
@click.option("--notes", "-n", default=None, help="Free-text notes")
@click.pass_context
@handle_errors
@async_command
async def add(ctx, exercise: str, workout: str | None, date_key: str, sets: list[WorkoutSet], notes: str | None):
    """Log sets for EXERCISE, replacing anything logged that day.

    Without --set, prompts for each set, pre-filled from the most recent
    earlier session.

    Examples:
        workout-tracker log add "Push Ups" -s 20 -s 15

        workout-tracker log add "Incline Bench Press" -s 8x135 -s 6x155 -d 2024-03-15
    """
    store = get_store(ctx)
    doc = await store.load()
    target = resolve_workout(ctx, doc, workout) if workout else None
    w, ex = resolve_exercise(ctx, doc, exercise, target)

    if not sets:
        draft = logbook.open_draft_for(doc, ex.id, date_key)
        collected = await SetEntryPrompt(ex, draft).collect()
        if collected is None:
            echo_info("Cancelled")
            return
        sets, prompted_notes = collected
        if notes is None:
            notes = prompted_notes

    doc = await store.apply(logbook.save_log, date_key, ex.id, sets, notes or "", base=doc)
    entry = doc.get_log(date_key, ex.id)
    summary = logbook.format_sets(entry)
    if summary:
        echo_success(f"Logged {ex.name} on {date_key}: {summary}")
    else:
        echo_warning(f"No sets above zero; {ex.name} marked as logged on {date_key} with no sets")


@log.command()
@click.argument("exercise")
@click.option("--workout", "-w", default=None, help="Workout containing the exercise")
@click.option("--date", "-d", "date_key", callback=validate_date, help="Date (YYYY-MM-DD, default today)")
@click.pass_context
@handle_errors
@async_command
async def delete(ctx, exercise: str, workout: str | None, date_key: str):
    """Delete the log for EXERCISE on a date.

    EXERCISE may also be the id of a deleted exercise.
    """
    store = get_store(ctx)
    doc = await store.load()

    if exercise in doc.logs_by_date.get(date_key, {}):
        exercise_id, label = exercise, exercise
    else:
        target = resolve_workout(ctx, doc, workout) if workout else None
        _, ex = resolve_exercise(ctx, doc, exercise, target)
        exercise_id, label = ex.id, ex.name

    if doc.get_log(date_key, exercise_id) is None:
        echo_info(f"Nothing logged for {label} on {date_key}")
        return

    await store.apply(logbook.delete_log, date_key, exercise_id, base=doc)
    echo_success(f"Deleted log for {label} on {date_key}")


@log.command()
@click.argument("exercise")
@click.option("--workout", "-w", default=None, help="Workout containing the exercise")
@click.option("--limit", "-l", default=10, show_default=True, help="Number of sessions to show")
@click.pass_context
@handle_errors
@async_command
async def history(ctx, exercise: str, workout: str | None, limit: int):
    """Show the most recent sessions for EXERCISE."""
    doc = await get_store(ctx).load()
    target = resolve_workout(ctx, doc, workout) if workout else None
    _, ex = resolve_exercise(ctx, doc, exercise, target)

    dates = logbook.logged_dates(doc, ex.id)
    if not dates:
        echo_info(f"No history for {ex.name}")
        return

    click.echo()
    click.echo(click.style(f"{ex.name} ({ex.unit.label})", bold=True))
    for date_key in reversed(dates[-limit:]):
        entry = doc.get_log(date_key, ex.id)
        line = f"  {date_key}  {logbook.format_sets(entry) or '-'}"
        if entry.notes:
            line += f"  ({entry.notes})"
        click.echo(line)
