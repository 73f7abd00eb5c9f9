"""Utility functions for ephemeris data formatting."""

from ..space_time.angles import DEGREES_PER_HOUR, split_hms


def format_right_ascension(right_ascension: float) -> str:
    """Format right ascension as hours, minutes and seconds.

    Args:
        right_ascension: Right ascension in degrees (0-360)

    Returns:
        String like ``" 2h 25m  4s"``, each field right-aligned to width 2
    """
    hours, minutes, seconds = split_hms(right_ascension / DEGREES_PER_HOUR)
    return f"{hours:>2}h {minutes:>2}m {seconds:>2}s"


def format_declination(declination: float) -> str:
    """Format declination as degrees, arc minutes and arc seconds.

    Args:
        declination: Declination in degrees (-90 to 90)

    Returns:
        String like ``" 13° 16´ 37˝"``; the sign is kept for declinations
        between -1 and 0 degrees
    """
    degrees, minutes, seconds = split_hms(declination)
    sign = "-" if declination < 0 and degrees == 0 else ""
    return f"{sign + str(degrees):>3}° {minutes:>2}´ {seconds:>2}˝"


def format_distance(distance: float) -> str:
    """Format a distance with two integer and four (truncated) fractional digits.

    Args:
        distance: Distance in astronomical units

    Returns:
        String like ``" 1.7798"``
    """
    whole = int(distance)
    fraction = int(round((distance - whole) * 10000, 6))
    return f"{whole:>2}.{fraction:04d}"
