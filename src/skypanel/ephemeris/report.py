"""Fixed-width planet table for terminal display."""

from typing import Mapping, Sequence

from ..planet import REPORT_PLANETS, Planet
from .positions import BodyPosition
from .rise_set import ALWAYS, NEVER
from .util import format_distance

HEADER = "Planet  │ RA          │ Dec          │ Dist. │ Rise  │ Trans │ Set   \n"
SEPARATOR = "────────┼─────────────┼──────────────┼───────┼───────┼───────┼────── \n"

# Five-character stand-ins for rise/set states without a clock time
SENTINEL_LABELS = {ALWAYS: "  ∞  ", NEVER: "  -  "}


def _clock(value: str) -> str:
    if value in SENTINEL_LABELS:
        return SENTINEL_LABELS[value]
    # "HH:MM:SS" -> "HH:MM"
    return value[:-3].rjust(5)


def format_row(position: BodyPosition) -> str:
    name = position.planet.display_name.ljust(7)
    ra = position.ra_hms.ljust(11)
    dec = position.dec_dms.ljust(12)
    distance = format_distance(position.distance)[:-2]
    return (
        f"{name} │ {ra} │ {dec} │ {distance} │ "
        f"{_clock(position.rise)} │ {_clock(position.transit)} │ {_clock(position.set)} \n"
    )


def format_report(
    positions: Mapping[Planet, BodyPosition],
    planets: Sequence[Planet] = REPORT_PLANETS,
) -> str:
    """Render the planet table.

    Args:
        positions: Computed positions keyed by body
        planets: Rows to show, in order; mercury to neptune by default

    Returns:
        Header, separator and one line per body, each ending in a newline
    """
    out = HEADER + SEPARATOR
    for planet in planets:
        out += format_row(positions[planet])
    return out
