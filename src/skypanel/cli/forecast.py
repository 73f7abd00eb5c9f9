"""CLI command listing planet rise and set times for several days."""

from typing import Optional

import click

from ..ephemeris.forecast import DEFAULT_FORECAST_DAYS, daily_ephemerides, rise_set_table
from ..ephemeris.rise_set import ALWAYS, NEVER
from ..planet import REPORT_PLANETS
from .common import build_observer, observer_options, resolve_date


def format_window(rise: str, set_time: str) -> str:
    """Compact ``HH:MM-HH:MM`` rise-set window, or the all-day state."""
    if rise == ALWAYS:
        return "always up"
    if rise == NEVER:
        return "never up"
    return f"{rise[:5]}-{set_time[:5]}"


@click.command()
@observer_options
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=DEFAULT_FORECAST_DAYS,
    show_default=True,
    help="Number of days to list.",
)
def forecast(
    lat: float, lon: float, tz: float, date_str: Optional[str], days: int
) -> None:
    """Print rise-set windows of the planets for consecutive days.

    Example:

       skypanel forecast --lat 59.91 --lon 10.75 --tz 2 --days 3
    """
    observer = build_observer(lat, lon, tz)
    start = resolve_date(date_str)

    table = rise_set_table(daily_ephemerides(start, observer, days))

    click.echo(f"{'Date':<10}" + "".join(f" │ {p.display_name:<11}" for p in REPORT_PLANETS))
    for day, events in table.items():
        cells = "".join(
            f" │ {format_window(*events[planet]):<11}" for planet in REPORT_PLANETS
        )
        click.echo(f"{day.isoformat()}{cells}")
