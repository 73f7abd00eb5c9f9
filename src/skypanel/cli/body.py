"""CLI command describing a single body."""

from typing import Optional

import click

from ..ephemeris import Ephemeris
from ..planet import Planet
from .common import build_observer, observer_options, resolve_date


@click.command()
@click.argument("planet")
@observer_options
def body(
    planet: str, lat: float, lon: float, tz: float, date_str: Optional[str]
) -> None:
    """Show one body's position, horizon events and altitude/azimuth.

    Examples:

       skypanel body mars --lat 59.91 --lon 10.75 --tz 2 --date 2024-06-21

       skypanel body moon --lat -33.9 --lon 18.4 --tz 2
    """
    try:
        planet_enum = Planet.from_name(planet)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="PLANET")

    observer = build_observer(lat, lon, tz)
    observation_date = resolve_date(date_str)

    ephemeris = Ephemeris.for_observer(observation_date, observer)
    position = ephemeris[planet_enum]
    altitude, azimuth = ephemeris.alt_az(planet_enum)
    unit = "Earth radii" if planet_enum == Planet.MOON else "AU"

    click.echo(f"{planet_enum.display_name} {observation_date.isoformat()} {observer}")
    click.echo(f"RA:       {position.ra_hms}  ({position.right_ascension:.4f}°)")
    click.echo(f"Dec:      {position.dec_dms}  ({position.declination:.4f}°)")
    click.echo(f"Distance: {position.distance:.4f} {unit}")
    click.echo(f"Rise:     {position.rise}")
    click.echo(f"Transit:  {position.transit}")
    click.echo(f"Set:      {position.set}")
    click.echo(
        f"Alt/Az at LST {ephemeris.sidereal_time:.4f}h: {altitude:.2f}° / {azimuth:.2f}°"
    )
