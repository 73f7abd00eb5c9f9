"""Rise, transit and set times from the hour angle at the horizon."""

import math
from typing import NamedTuple

from ..logging import get_logger
from ..observer import Observer
from ..space_time.angles import (
    DEGREES_PER_HOUR,
    hms_to_hours,
    normalize_hours,
    to_degrees,
    to_radians,
    to_hms,
)

logger = get_logger(__name__)

# Sentinel results for bodies that stay above or below the horizon all day
ALWAYS = "always"
NEVER = "never"


class RiseTransitSet(NamedTuple):
    rise: str
    transit: str
    set: str


def transit_time(
    right_ascension: float, observer: Observer, sun_mean_longitude: float
) -> float:
    """Local clock time (hours, [0, 24)) at which a body crosses the meridian."""
    return normalize_hours(
        (right_ascension - sun_mean_longitude - observer.longitude) / DEGREES_PER_HOUR
        + 12
        + observer.timezone
    )


def cos_local_hour_angle(declination: float, latitude: float) -> float:
    """Cosine of the hour angle at which a body reaches the horizon.

    Values below -1 mean the body never sets, values above 1 that it never
    rises.
    """
    lat = to_radians(latitude)
    dec = to_radians(declination)
    return (-math.sin(lat) * math.sin(dec)) / (math.cos(lat) * math.cos(dec))


def rise_transit_set(
    right_ascension: float,
    declination: float,
    observer: Observer,
    sun_mean_longitude: float,
) -> RiseTransitSet:
    """Compute local rise, transit and set times for a body.

    Args:
        right_ascension: Topocentric RA in degrees
        declination: Topocentric declination in degrees
        observer: Observer location and timezone
        sun_mean_longitude: Sun's mean longitude in degrees

    Returns:
        ``HH:MM:SS`` strings; rise and set are replaced by ``"always"`` /
        ``"never"`` when the body does not cross the horizon that day
    """
    transit = transit_time(right_ascension, observer, sun_mean_longitude)
    cos_lha = cos_local_hour_angle(declination, observer.latitude)

    if cos_lha < -1:
        logger.debug(f"Body at dec={declination} is circumpolar at lat={observer.latitude}")
        return RiseTransitSet(ALWAYS, to_hms(transit), NEVER)
    if cos_lha > 1:
        logger.debug(f"Body at dec={declination} never rises at lat={observer.latitude}")
        return RiseTransitSet(NEVER, to_hms(transit), ALWAYS)

    lha = to_degrees(math.acos(cos_lha)) / DEGREES_PER_HOUR
    return RiseTransitSet(
        to_hms(normalize_hours(transit - lha)),
        to_hms(transit),
        to_hms(normalize_hours(transit + lha)),
    )


def is_up(rise_time: str, set_time: str, hour: int) -> bool:
    """Whether a body is above the horizon during a local clock hour.

    Only whole hours are compared, so the hours of rising and setting both
    count as visible. Windows that wrap past midnight (set before rise) are
    handled.

    Args:
        rise_time: Rise time string or sentinel
        set_time: Set time string or sentinel
        hour: Local hour, 0-23
    """
    if rise_time == ALWAYS or set_time == NEVER:
        return True
    if rise_time == NEVER or set_time == ALWAYS:
        return False

    rise_hour = int(hms_to_hours(rise_time))
    set_hour = int(hms_to_hours(set_time))
    if set_hour < rise_hour:
        return hour <= set_hour or hour >= rise_hour
    return rise_hour <= hour <= set_hour
