"""Topocentric positions of the Sun, Moon and planets.

The Sun is always computed first: its geocentric ecliptic coordinates turn the
heliocentric planet positions into geocentric ones, and its mean longitude
fixes the sidereal time and the Moon's elongation. Those scalars travel in a
:class:`SolarContext` passed to every other body's computation.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..logging import get_logger
from ..observer import Observer
from ..planet import Planet
from ..space_time.angles import normalize_degrees, to_degrees, to_radians
from ..space_time.epoch import obliquity
from ..space_time.sidereal import local_sidereal_time
from .elements import orbital_elements
from .kepler import solve_kepler
from .perturbations import MeanAnomalies, lunar_perturbation, planetary_perturbation
from .rise_set import ALWAYS, NEVER, is_up, rise_transit_set
from .util import format_declination, format_right_ascension

logger = get_logger(__name__)

# Equatorial horizontal parallax of the Sun at 1 AU, arc seconds
SOLAR_PARALLAX_ARCSEC = 8.794

COORDINATE_DECIMALS = 4


@dataclass(frozen=True)
class SolarContext:
    """Sun-derived values shared by every other body for one day."""

    day: int
    obliquity: float  # degrees
    mean_anomaly: float  # Ms, degrees
    mean_longitude: float  # Ls, degrees
    x: float  # geocentric ecliptic rectangular coordinates of the Sun, AU
    y: float
    distance: float  # AU
    sidereal_time: float  # local sidereal time at 0h UT, hours


@dataclass(frozen=True)
class BodyPosition:
    """Topocentric position and horizon events of one body for one day."""

    planet: Planet
    right_ascension: float  # degrees, [0, 360)
    declination: float  # degrees
    distance: float  # AU, Earth radii for the Moon
    rise: str
    transit: str
    set: str

    @property
    def ra_hms(self) -> str:
        return format_right_ascension(self.right_ascension)

    @property
    def dec_dms(self) -> str:
        return format_declination(self.declination)

    @property
    def is_circumpolar(self) -> bool:
        return self.rise == ALWAYS

    @property
    def never_rises(self) -> bool:
        return self.rise == NEVER

    def is_up_at(self, hour: int) -> bool:
        """Whether the body is above the horizon during the given local hour."""
        return is_up(self.rise, self.set, hour)


def compute_solar_context(day: int, observer: Observer) -> SolarContext:
    """Compute the Sun's geocentric position scalars for a day number."""
    elements = orbital_elements(Planet.SUN, day)
    e = elements.eccentricity
    eccentric_anomaly = to_radians(solve_kepler(elements.mean_anomaly, e))

    x = math.cos(eccentric_anomaly) - e
    y = math.sin(eccentric_anomaly) * math.sqrt(1 - e * e)
    true_anomaly = to_degrees(math.atan2(y, x))
    distance = math.sqrt(x * x + y * y)
    true_longitude = to_radians(normalize_degrees(true_anomaly + elements.perihelion_argument))

    mean_longitude = normalize_degrees(elements.perihelion_argument + elements.mean_anomaly)
    context = SolarContext(
        day=day,
        obliquity=obliquity(day),
        mean_anomaly=elements.mean_anomaly,
        mean_longitude=mean_longitude,
        x=distance * math.cos(true_longitude),
        y=distance * math.sin(true_longitude),
        distance=distance,
        sidereal_time=local_sidereal_time(mean_longitude, observer.longitude),
    )
    logger.debug(
        f"Solar context for day {day}: Ls={context.mean_longitude:.4f} "
        f"LST={context.sidereal_time:.4f}h"
    )
    return context


def mean_anomalies(day: int) -> MeanAnomalies:
    """Mean anomalies of Jupiter, Saturn and Uranus for the perturbation series."""
    return MeanAnomalies(
        jupiter=orbital_elements(Planet.JUPITER, day).mean_anomaly,
        saturn=orbital_elements(Planet.SATURN, day).mean_anomaly,
        uranus=orbital_elements(Planet.URANUS, day).mean_anomaly,
    )


def ecliptic_to_equatorial(
    x: float, y: float, z: float, obliquity_deg: float
) -> Tuple[float, float, float]:
    """Rotate ecliptic rectangular coordinates into the equatorial frame."""
    ecl = to_radians(obliquity_deg)
    return (
        x,
        y * math.cos(ecl) - z * math.sin(ecl),
        y * math.sin(ecl) + z * math.cos(ecl),
    )


def equatorial_angles(x: float, y: float, z: float) -> Tuple[float, float]:
    """Right ascension in [0, 360) and declination, degrees."""
    right_ascension = normalize_degrees(to_degrees(math.atan2(y, x)))
    declination = to_degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    return right_ascension, declination


def topocentric(
    right_ascension: float,
    declination: float,
    parallax: float,
    observer: Observer,
    sidereal_time: float,
) -> Tuple[float, float]:
    """Correct geocentric RA/Dec for the observer's position on the surface.

    Uses the geocentric latitude and radius of the oblate Earth and the
    auxiliary angle ``g = atan(tan(gclat) / cos(ha))``. Close to ``sin(g) == 0``
    the declination correction loses precision; on the equator, where ``g`` is
    exactly zero, the limiting form of the correction is used.

    Args:
        right_ascension: Geocentric RA in degrees
        declination: Geocentric declination in degrees
        parallax: Horizontal parallax in degrees
        observer: Observer location
        sidereal_time: Local sidereal time in hours

    Returns:
        Tuple of (RA, declination) in degrees
    """
    lat = observer.latitude
    gclat = lat - 0.1924 * math.sin(to_radians(2 * lat))
    rho = 0.99833 + 0.00167 * math.cos(to_radians(2 * lat))
    hour_angle = normalize_degrees(sidereal_time * 15 - right_ascension)
    g = to_degrees(math.atan(math.tan(to_radians(gclat)) / math.cos(to_radians(hour_angle))))

    top_ra = right_ascension - (
        parallax
        * rho
        * math.cos(to_radians(gclat))
        * math.sin(to_radians(hour_angle))
        / math.cos(to_radians(declination))
    )
    if g == 0:
        top_dec = declination - parallax * rho * math.sin(
            to_radians(-declination)
        ) * math.cos(to_radians(hour_angle))
    else:
        top_dec = declination - (
            parallax
            * rho
            * math.sin(to_radians(gclat))
            * math.sin(to_radians(g - declination))
            / math.sin(to_radians(g))
        )
    return top_ra, top_dec


def _finish(
    planet: Planet,
    x: float,
    y: float,
    z: float,
    parallax: float,
    distance: float,
    solar: SolarContext,
    observer: Observer,
) -> BodyPosition:
    """Ecliptic rectangular coordinates to a rounded topocentric BodyPosition."""
    xq, yq, zq = ecliptic_to_equatorial(x, y, z, solar.obliquity)
    ra, dec = equatorial_angles(xq, yq, zq)
    top_ra, top_dec = topocentric(ra, dec, parallax, observer, solar.sidereal_time)

    right_ascension = normalize_degrees(
        round(normalize_degrees(top_ra), COORDINATE_DECIMALS)
    )
    declination = round(top_dec, COORDINATE_DECIMALS)
    rise, transit, set_ = rise_transit_set(
        right_ascension, declination, observer, solar.mean_longitude
    )
    return BodyPosition(
        planet=planet,
        right_ascension=right_ascension,
        declination=declination,
        distance=round(distance, COORDINATE_DECIMALS),
        rise=rise,
        transit=transit,
        set=set_,
    )


def compute_sun_position(solar: SolarContext, observer: Observer) -> BodyPosition:
    parallax = (SOLAR_PARALLAX_ARCSEC / 3600) / solar.distance
    return _finish(Planet.SUN, solar.x, solar.y, 0.0, parallax, solar.distance, solar, observer)


def compute_position(
    planet: Planet, solar: SolarContext, observer: Observer
) -> BodyPosition:
    """Compute a body's topocentric position for the day of the solar context.

    Args:
        planet: Any body other than the Sun
        solar: Sun-derived values for the same day and observer
        observer: Observer location and timezone

    Returns:
        The body's position, rounded to four decimals
    """
    if planet == Planet.SUN:
        return compute_sun_position(solar, observer)

    elements = orbital_elements(planet, solar.day)
    node = elements.ascending_node
    incl = to_radians(elements.inclination)
    a = elements.semi_major_axis
    e = elements.eccentricity

    eccentric_anomaly = to_radians(solve_kepler(elements.mean_anomaly, e))
    x = a * (math.cos(eccentric_anomaly) - e)
    y = a * math.sqrt(1 - e * e) * math.sin(eccentric_anomaly)
    r = math.sqrt(x * x + y * y)
    true_anomaly = normalize_degrees(to_degrees(math.atan2(y, x)))

    # heliocentric (geocentric for the Moon) ecliptic coordinates
    n = to_radians(node)
    vw = to_radians(true_anomaly + elements.perihelion_argument)
    x_ecl = r * (math.cos(n) * math.cos(vw) - math.sin(n) * math.sin(vw) * math.cos(incl))
    y_ecl = r * (math.sin(n) * math.cos(vw) + math.cos(n) * math.sin(vw) * math.cos(incl))
    z_ecl = r * math.sin(vw) * math.sin(incl)

    longitude = normalize_degrees(to_degrees(math.atan2(y_ecl, x_ecl)))
    latitude = to_degrees(math.atan2(z_ecl, math.sqrt(x_ecl * x_ecl + y_ecl * y_ecl)))
    radius = math.sqrt(x_ecl * x_ecl + y_ecl * y_ecl + z_ecl * z_ecl)

    if planet == Planet.MOON:
        correction = lunar_perturbation(
            node,
            elements.perihelion_argument,
            elements.mean_anomaly,
            solar.mean_anomaly,
            solar.mean_longitude,
        )
    else:
        correction = planetary_perturbation(planet, mean_anomalies(solar.day))
    longitude += correction.longitude
    latitude += correction.latitude
    radius += correction.distance

    if planet == Planet.MOON:
        lon = to_radians(longitude)
        lat = to_radians(latitude)
        x_ecl = math.cos(lon) * math.cos(lat)
        y_ecl = math.sin(lon) * math.cos(lat)
        z_ecl = math.sin(lat)
        parallax = to_degrees(math.asin(1 / radius))
        distance = radius
    else:
        x_ecl += solar.x
        y_ecl += solar.y
        parallax = (SOLAR_PARALLAX_ARCSEC / 3600) / radius
        distance = math.sqrt(x_ecl * x_ecl + y_ecl * y_ecl + z_ecl * z_ecl)

    return _finish(planet, x_ecl, y_ecl, z_ecl, parallax, distance, solar, observer)
