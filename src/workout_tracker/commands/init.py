"""Initialize project command."""

import click

from ..db import PRIMARY_KEY, get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_data_dir, get_store, handle_errors


@click.command()
@click.pass_context
@handle_errors
@async_command
async def init(ctx):
    """Initialize the workout-tracker database.

    Creates the data directory and database, and writes the default program
    (Baseline, Workout A and Workout B) if nothing is stored yet.
    """
    db_path = get_db_path(get_data_dir(ctx))
    echo_info(f"Initializing workout-tracker in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    store = get_store(ctx)
    if await store.read_raw(PRIMARY_KEY):
        echo_info("Existing data found; left unchanged")
    else:
        await store.save(await store.load())
        echo_success("Default program created")

    click.echo()
    click.echo("workout-tracker is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  workout-tracker workouts list          # See your program")
    click.echo('  workout-tracker log add "Push Ups"     # Log today\'s sets')
    click.echo("  workout-tracker summary --range wtd    # Week-to-date totals")
