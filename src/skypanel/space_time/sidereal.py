from .angles import DEGREES_PER_HOUR, normalize_hours


def greenwich_sidereal_time_0h(sun_mean_longitude: float) -> float:
    """
    Greenwich Mean Sidereal Time at 0h UT from the Sun's mean longitude.

    Parameters:
    sun_mean_longitude (float): Sun's mean longitude (w + M) in degrees.

    Returns:
    float: GMST0 in decimal hours (0 ≤ GMST0 < 24).
    """
    return normalize_hours((sun_mean_longitude + 180) / DEGREES_PER_HOUR)


def local_sidereal_time(sun_mean_longitude: float, longitude: float) -> float:
    """
    Local Mean Sidereal Time at 0h UT for an observer's longitude.

    Parameters:
    sun_mean_longitude (float): Sun's mean longitude in degrees.
    longitude (float): Observer's longitude in degrees.
                       Positive for East of Prime Meridian,
                       Negative for West.

    Returns:
    float: LMST in decimal hours, not wrapped into [0, 24).
    """
    return greenwich_sidereal_time_0h(sun_mean_longitude) + longitude / DEGREES_PER_HOUR
