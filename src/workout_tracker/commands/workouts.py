"""Workout management commands."""

import click

from ..services import program_editor
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_store,
    handle_errors,
    resolve_workout,
)


@click.group()
@click.pass_context
def workouts(ctx):
    """Manage workouts.

    The Baseline workout can be renamed and recategorized but never deleted
    or moved.
    """
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.pass_context
@handle_errors
@async_command
async def list_workouts(ctx):
    """List all workouts and their exercises."""
    doc = await get_store(ctx).load()

    headers = ["#", "Name", "Category", "Exercises", "ID"]
    rows = []
    for i, workout in enumerate(doc.program.workouts, start=1):
        names = ", ".join(e.name for e in workout.exercises) or "-"
        rows.append([
            str(i),
            workout.name,
            workout.category,
            names[:40] + "..." if len(names) > 40 else names,
            workout.id,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(rows)} workout(s)")


@workouts.command()
@click.argument("name")
@click.option("--category", "-c", default=None, help="Category label (default: Workout)")
@click.pass_context
@handle_errors
@async_command
async def add(ctx, name: str, category: str | None):
    """Add a workout."""
    doc = await get_store(ctx).apply(program_editor.add_workout, name, category)
    echo_success(f"Added workout '{doc.program.workouts[-1].name}'")


@workouts.command()
@click.argument("workout")
@click.argument("new_name")
@click.pass_context
@handle_errors
@async_command
async def rename(ctx, workout: str, new_name: str):
    """Rename WORKOUT to NEW_NAME."""
    store = get_store(ctx)
    doc = await store.load()
    target = resolve_workout(ctx, doc, workout)
    await store.apply(program_editor.rename_workout, target.id, new_name, base=doc)
    echo_success(f"Renamed '{target.name}' to '{new_name.strip()}'")


@workouts.command()
@click.argument("workout")
@click.argument("category", required=False, default="")
@click.pass_context
@handle_errors
@async_command
async def category(ctx, workout: str, category: str):
    """Set the category of WORKOUT (blank restores the default)."""
    store = get_store(ctx)
    doc = await store.load()
    target = resolve_workout(ctx, doc, workout)
    doc = await store.apply(program_editor.set_workout_category, target.id, category, base=doc)
    echo_success(f"'{target.name}' is now in category '{doc.program.get_workout(target.id).category}'")


@workouts.command()
@click.argument("workout")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@handle_errors
@async_command
async def delete(ctx, workout: str, force: bool):
    """Delete a workout. Past logs are kept."""
    store = get_store(ctx)
    doc = await store.load()
    target = resolve_workout(ctx, doc, workout)

    if not force and not target.is_baseline:
        click.echo(f"Workout: {target.name}")
        if not click.confirm("Delete this workout? This will NOT delete past logs."):
            echo_info("Cancelled")
            return

    await store.apply(program_editor.delete_workout, target.id, base=doc)
    echo_success(f"Workout '{target.name}' deleted")


@workouts.command()
@click.argument("workout")
@click.argument("direction", type=click.Choice(["up", "down"]))
@click.pass_context
@handle_errors
@async_command
async def move(ctx, workout: str, direction: str):
    """Move WORKOUT one place up or down."""
    store = get_store(ctx)
    doc = await store.load()
    target = resolve_workout(ctx, doc, workout)
    await store.apply(program_editor.reorder_workout, target.id, direction, base=doc)
    echo_success(f"Moved '{target.name}' {direction}")
