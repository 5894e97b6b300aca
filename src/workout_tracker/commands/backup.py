"""Backup slot commands."""

from datetime import datetime

import click

from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    get_store,
    handle_errors,
)


@click.group()
@click.pass_context
def backup(ctx):
    """Inspect or restore the automatic backup.

    Every save keeps the previous version of your data as the backup.
    """
    ensure_initialized(ctx)


@backup.command()
@click.pass_context
@handle_errors
@async_command
async def show(ctx):
    """Describe what the backup contains."""
    doc = await get_store(ctx).load_backup()
    if doc is None:
        echo_info("No backup yet")
        return
    click.echo(f"Workouts: {len(doc.program.workouts)}")
    click.echo(f"Days logged: {len(doc.logs_by_date)}")
    try:
        updated = datetime.fromtimestamp(doc.meta.updated_at / 1000)
    except (OverflowError, OSError, ValueError):
        echo_error(f"Backup has an invalid timestamp ({doc.meta.updated_at})")
        ctx.exit(1)
    click.echo(f"Last updated: {updated:%Y-%m-%d %H:%M}")


@backup.command()
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@handle_errors
@async_command
async def restore(ctx, force: bool):
    """Swap the current data with the backup."""
    store = get_store(ctx)
    if await store.load_backup() is None:
        echo_info("No backup to restore")
        return
    if not force and not click.confirm("Replace current data with the backup?"):
        echo_info("Cancelled")
        return
    await store.restore_backup()
    echo_success("Backup restored. Run 'backup restore' again to undo.")
