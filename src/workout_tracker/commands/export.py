"""Export command."""

from pathlib import Path

import click

from ..db import export_filename, export_snapshot
from .base import async_command, echo_error, echo_success, ensure_initialized, get_store, handle_errors


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=True, path_type=Path),
    default=None,
    help="File or directory to write to (default: ./workout-tracker-export-<date>.json)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print JSON instead of writing a file")
@click.pass_context
@handle_errors
@async_command
async def export(ctx, output: Path | None, to_stdout: bool):
    """Export all data as JSON.

    Examples:
        # Write workout-tracker-export-<today>.json here
        workout-tracker export

        # Write into a backup folder
        workout-tracker export -o ~/backups/
    """
    ensure_initialized(ctx)
    doc = await get_store(ctx).load()
    content = export_snapshot(doc)

    if to_stdout:
        click.echo(content.decode("utf-8"))
        return

    if output is None:
        output = Path(export_filename())
    elif output.is_dir():
        output = output / export_filename()

    try:
        output.write_bytes(content)
    except OSError as e:
        echo_error(f"Could not write {output}: {e.strerror or e}")
        ctx.exit(1)
    echo_success(f"Exported to {output}")
