"""CLI entry point for workout-tracker."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import backup, coach, exercises, export, import_data, init, log, summary, workouts


@click.group()
@click.version_option(version=__version__, prog_name="workout-tracker")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the database (default: ./data next to the project)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_dir: Path | None, verbose: bool):
    """workout-tracker: log sets, reps and weight, and review your training.

    Example usage:

        # Initialize the project
        workout-tracker init

        # Log today's sets
        workout-tracker log add "Push Ups" -s 20 -s 15

        # Week-to-date summary
        workout-tracker summary --range wtd

        # Training balance advice
        workout-tracker coach --range mtd
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(workouts)
main.add_command(exercises)
main.add_command(log)
main.add_command(summary)
main.add_command(coach)
main.add_command(export)
main.add_command(import_data)
main.add_command(backup)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
