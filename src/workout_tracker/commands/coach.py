"""Training balance coach command."""

import click

from ..services.coach import Severity, analyze
from ..services.summary import RangePreset
from .base import async_command, echo_info, ensure_initialized, format_table, get_store, handle_errors, validate_date

SEVERITY_COLORS = {
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
    Severity.INFO: "green",
}


@click.command()
@click.option(
    "--range",
    "-r",
    "preset",
    type=click.Choice([p.value for p in RangePreset]),
    default="mtd",
    help="Week, month or year to date",
)
@click.option("--date", "-d", "date_key", callback=validate_date, help="End date (YYYY-MM-DD, default today)")
@click.option("--volume", is_flag=True, help="Also show reps per muscle group")
@click.pass_context
@handle_errors
@async_command
async def coach(ctx, preset: str, date_key: str, volume: bool):
    """Check training balance across muscle groups.

    Exercises are grouped by keywords in their names. Logs of deleted
    exercises are not counted.
    """
    ensure_initialized(ctx)
    doc = await get_store(ctx).load()
    report = analyze(doc, preset, date_key)

    click.echo()
    click.echo(click.style(
        f"Coach - {report.date_range.label} {report.date_range.start} to {report.date_range.end}",
        bold=True,
    ))

    if volume and report.volume:
        rows = [
            [group.value.replace("_", " "), f"{reps:g}"]
            for group, reps in sorted(report.volume.items(), key=lambda item: -item[1])
        ]
        click.echo()
        click.echo(format_table(["Muscle group", "Reps"], rows))

    if not report.insights:
        click.echo()
        echo_info("Not enough data yet. Log more sessions for insights.")
        return

    for insight in report.insights:
        click.echo()
        label = click.style(f"[{insight.severity.value.upper()}]", fg=SEVERITY_COLORS[insight.severity])
        click.echo(f"{label} {insight.title}")
        click.echo(f"  {insight.message}")
        if insight.suggestions:
            click.echo(f"  Try: {', '.join(insight.suggestions)}")
