"""Import command."""

from pathlib import Path

import click

from ..db import import_snapshot
from ..errors import ImportRejectedError
from .base import async_command, echo_error, echo_info, echo_success, get_store, handle_errors


@click.command(name="import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@handle_errors
@async_command
async def import_data(ctx, file: Path, force: bool):
    """Replace all data with an exported JSON file.

    The file must contain program.workouts and logsByDate. Anything else is
    rejected and current data is left untouched.
    """
    try:
        doc = import_snapshot(file.read_bytes())
    except ImportRejectedError as e:
        echo_error(f"Import failed: {e}")
        ctx.exit(1)

    workouts = len(doc.program.workouts)
    days = len(doc.logs_by_date)
    click.echo(f"File contains {workouts} workout(s) and logs on {days} day(s).")

    if not force and not click.confirm("Import will REPLACE your current data. Continue?"):
        echo_info("Cancelled")
        return

    store = get_store(ctx)
    await store.save(doc)
    echo_success("Import complete. Previous data is kept as the backup.")
