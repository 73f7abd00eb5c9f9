import math
from typing import Tuple

from ..space_time.angles import DEGREES_PER_HOUR, normalize_degrees, to_degrees, to_radians


def alt_az(
    right_ascension: float, declination: float, latitude: float, sidereal_time: float
) -> Tuple[float, float]:
    """Convert equatorial coordinates to altitude and azimuth.

    Args:
        right_ascension: RA in degrees
        declination: Declination in degrees
        latitude: Observer latitude in degrees
        sidereal_time: Local sidereal time in hours

    Returns:
        Tuple of (altitude, azimuth) in degrees; azimuth is measured from
        north through east in [0, 360)
    """
    hour_angle = to_radians((sidereal_time - right_ascension / DEGREES_PER_HOUR) * DEGREES_PER_HOUR)
    dec = to_radians(declination)
    lat = to_radians(latitude)

    x = math.cos(hour_angle) * math.cos(dec)
    y = math.sin(hour_angle) * math.cos(dec)
    z = math.sin(dec)

    x_horizon = x * math.sin(lat) - z * math.cos(lat)
    z_horizon = x * math.cos(lat) + z * math.sin(lat)

    azimuth = normalize_degrees(to_degrees(math.atan2(y, x_horizon)) + 180)
    altitude = to_degrees(math.asin(max(-1.0, min(1.0, z_horizon))))
    return altitude, azimuth
