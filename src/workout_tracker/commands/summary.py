"""Rolling summary command."""

import click

from ..models.log import format_quantity
from ..services.summary import RangePreset, summarize_workout
from .base import (
    async_command,
    ensure_initialized,
    format_table,
    get_store,
    handle_errors,
    resolve_workout,
    validate_date,
)

RANGE_CHOICES = [p.value for p in RangePreset]


@click.command()
@click.option("--range", "-r", "preset", type=click.Choice(RANGE_CHOICES), default="wtd", help="Week, month or year to date")
@click.option("--date", "-d", "date_key", callback=validate_date, help="End date (YYYY-MM-DD, default today)")
@click.option("--workout", "-w", default=None, help="Only summarize this workout")
@click.pass_context
@handle_errors
@async_command
async def summary(ctx, preset: str, date_key: str, workout: str | None):
    """Show totals and max weight per exercise.

    Weeks start on Monday.
    """
    ensure_initialized(ctx)
    doc = await get_store(ctx).load()
    selected = [resolve_workout(ctx, doc, workout)] if workout else doc.program.workouts

    for w in selected:
        date_range, rows = summarize_workout(doc, w.id, preset, date_key)
        click.echo()
        click.echo(click.style(f"{w.name} - {date_range.label} {date_range.start} to {date_range.end}", bold=True))
        if not rows:
            click.echo("  No exercises yet.")
            continue
        table = [
            [
                row.name,
                f"{format_quantity(row.summary.total_quantity)} {row.unit.label}",
                row.summary.format_max_weight(),
            ]
            for row in rows
        ]
        click.echo(format_table(["Exercise", "Total", "Max"], table))
