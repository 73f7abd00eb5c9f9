"""Day-by-day ephemerides for planning observations."""

from datetime import date, timedelta
from typing import Dict, List, Sequence, Tuple

from ..logging import get_logger
from ..observer import Observer
from ..planet import REPORT_PLANETS, Planet
from ..space_time.epoch import DateInput, parse_date
from .ephemeris import Ephemeris

logger = get_logger(__name__)

DEFAULT_FORECAST_DAYS = 10


def daily_ephemerides(
    start: DateInput, observer: Observer, days: int = DEFAULT_FORECAST_DAYS
) -> List[Ephemeris]:
    """One ephemeris per consecutive date, starting at ``start``.

    Raises:
        ValueError: If days is not positive
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    first = parse_date(start)
    logger.info(f"Computing {days} daily ephemerides from {first.isoformat()}")
    return [
        Ephemeris.for_observer(first + timedelta(days=offset), observer)
        for offset in range(days)
    ]


def rise_set_table(
    ephemerides: Sequence[Ephemeris], planets: Sequence[Planet] = REPORT_PLANETS
) -> Dict[date, Dict[Planet, Tuple[str, str]]]:
    """Rise and set times per date and body."""
    return {
        ephemeris.date: {
            planet: (ephemeris[planet].rise, ephemeris[planet].set) for planet in planets
        }
        for ephemeris in ephemerides
    }


def visible_bodies(
    ephemeris: Ephemeris, hour: int, planets: Sequence[Planet] = REPORT_PLANETS
) -> List[Planet]:
    """Bodies above the horizon during a local hour of the ephemeris date."""
    return [planet for planet in planets if ephemeris[planet].is_up_at(hour)]
