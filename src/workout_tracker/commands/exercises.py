"""Exercise management commands."""

import click

from ..models.units import Unit
from ..services import program_editor
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_store,
    handle_errors,
    resolve_exercise,
    resolve_workout,
)

UNIT_CHOICES = [u.value for u in Unit]


@click.group()
@click.pass_context
def exercises(ctx):
    """Manage the exercises within workouts.

    Deleting an exercise keeps its logged history.
    """
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option("--workout", "-w", default=None, help="Only list this workout")
@click.pass_context
@handle_errors
@async_command
async def list_exercises(ctx, workout: str | None):
    """List exercises with their units."""
    doc = await get_store(ctx).load()
    only = resolve_workout(ctx, doc, workout) if workout else None

    headers = ["Workout", "Exercise", "Unit", "Decimals", "ID"]
    rows = []
    for w, ex in doc.program.iter_exercises():
        if only is not None and w.id != only.id:
            continue
        rows.append([w.name, ex.name, ex.unit.label, "yes" if ex.unit.allows_decimal else "no", ex.id])

    if not rows:
        echo_info("No exercises yet. Add one with 'workout-tracker exercises add'")
        return

    click.echo()
    click.echo(format_table(headers, rows))


@exercises.command()
@click.argument("workout")
@click.argument("name")
@click.option("--unit", "-u", type=click.Choice(UNIT_CHOICES), default="reps", help="Logging unit")
@click.option("--abbr", default=None, help="Abbreviation for a custom unit (max 10 chars)")
@click.option("--decimal", is_flag=True, help="Custom unit allows fractional quantities")
@click.pass_context
@handle_errors
@async_command
async def add(ctx, workout: str, name: str, unit: str, abbr: str | None, decimal: bool):
    """Add exercise NAME to WORKOUT."""
    store = get_store(ctx)
    doc = await store.load()
    target = resolve_workout(ctx, doc, workout)
    doc = await store.apply(program_editor.add_exercise, target.id, name, unit, abbr, decimal, base=doc)
    added = doc.program.get_workout(target.id).exercises[-1]
    echo_success(f"Added '{added.name}' ({added.unit.label}) to '{target.name}'")


@exercises.command()
@click.argument("workout")
@click.argument("exercise")
@click.argument("new_name")
@click.pass_context
@handle_errors
@async_command
async def rename(ctx, workout: str, exercise: str, new_name: str):
    """Rename EXERCISE in WORKOUT to NEW_NAME."""
    store = get_store(ctx)
    doc = await store.load()
    w, ex = resolve_exercise(ctx, doc, exercise, resolve_workout(ctx, doc, workout))
    await store.apply(program_editor.rename_exercise, w.id, ex.id, new_name, base=doc)
    echo_success(f"Renamed '{ex.name}' to '{new_name.strip()}'")


@exercises.command()
@click.argument("workout")
@click.argument("exercise")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@handle_errors
@async_command
async def delete(ctx, workout: str, exercise: str, force: bool):
    """Delete EXERCISE from WORKOUT. Past logs are kept."""
    store = get_store(ctx)
    doc = await store.load()
    w, ex = resolve_exercise(ctx, doc, exercise, resolve_workout(ctx, doc, workout))

    if not force:
        click.echo(f"Exercise: {ex.name} ({w.name})")
        if not click.confirm("Delete this exercise? This will NOT delete past logs."):
            echo_info("Cancelled")
            return

    await store.apply(program_editor.delete_exercise, w.id, ex.id, base=doc)
    echo_success(f"Exercise '{ex.name}' deleted")


@exercises.command()
@click.argument("workout")
@click.argument("exercise")
@click.argument("direction", type=click.Choice(["up", "down"]))
@click.pass_context
@handle_errors
@async_command
async def move(ctx, workout: str, exercise: str, direction: str):
    """Move EXERCISE one place up or down within WORKOUT."""
    store = get_store(ctx)
    doc = await store.load()
    w, ex = resolve_exercise(ctx, doc, exercise, resolve_workout(ctx, doc, workout))
    await store.apply(program_editor.reorder_exercise, w.id, ex.id, direction, base=doc)
    echo_success(f"Moved '{ex.name}' {direction}")


@exercises.command()
@click.argument("workout")
@click.argument("exercise")
@click.argument("unit", type=click.Choice(UNIT_CHOICES))
@click.option("--abbr", default=None, help="Abbreviation for a custom unit (max 10 chars)")
@click.option("--decimal", is_flag=True, help="Custom unit allows fractional quantities")
@click.pass_context
@handle_errors
@async_command
async def unit(ctx, workout: str, exercise: str, unit: str, abbr: str | None, decimal: bool):
    """Change the logging unit of EXERCISE."""
    store = get_store(ctx)
    doc = await store.load()
    w, ex = resolve_exercise(ctx, doc, exercise, resolve_workout(ctx, doc, workout))
    doc = await store.apply(program_editor.change_exercise_unit, w.id, ex.id, unit, abbr, decimal, base=doc)
    label = doc.program.get_workout(w.id).get_exercise(ex.id).unit.label
    echo_success(f"'{ex.name}' is now logged in {label}")
