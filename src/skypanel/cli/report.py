"""CLI command printing the planet table."""

from typing import Optional

import click

from ..ephemeris import Ephemeris
from .common import build_observer, observer_options, resolve_date


@click.command()
@observer_options
def report(lat: float, lon: float, tz: float, date_str: Optional[str]) -> None:
    """Print RA, Dec, distance and rise/transit/set for the planets.

    Example:

       skypanel report --lat 59.91 --lon 10.75 --tz 2 --date 2024-06-21
    """
    observer = build_observer(lat, lon, tz)
    observation_date = resolve_date(date_str)

    ephemeris = Ephemeris.for_observer(observation_date, observer)
    click.echo(f"{observation_date.isoformat()}  {observer}")
    click.echo(ephemeris.report(), nl=False)
