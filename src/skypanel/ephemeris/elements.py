"""Low-precision orbital elements for the Sun, Moon and planets.

Each element is a linear function of the day number ``d`` (days since
1999-12-31). The coefficients are those of Paul Schlyter's "How to compute
planetary positions"; the Sun's elements describe the Earth's orbit seen from
the Sun, and the Moon's are geocentric with the semi-major axis in Earth radii.
"""

from dataclasses import dataclass
from typing import Dict, NamedTuple

from ..planet import Planet
from ..space_time.angles import normalize_degrees


class Term(NamedTuple):
    """An element value ``base + rate * d``."""

    base: float
    rate: float = 0.0

    def at(self, day: float) -> float:
        return self.base + self.rate * day


class ElementTerms(NamedTuple):
    ascending_node: Term  # N
    inclination: Term  # i
    perihelion_argument: Term  # w
    semi_major_axis: Term  # a
    eccentricity: Term  # e
    mean_anomaly: Term  # M


ELEMENT_TABLE: Dict[Planet, ElementTerms] = {
    Planet.SUN: ElementTerms(
        ascending_node=Term(0.0),
        inclination=Term(0.0),
        perihelion_argument=Term(282.9404, 4.70935e-5),
        semi_major_axis=Term(1.000000),
        eccentricity=Term(0.016709, -1.151e-9),
        mean_anomaly=Term(356.0470, 0.98555),
    ),
    Planet.MOON: ElementTerms(
        ascending_node=Term(125.1228, -0.0529538083),
        inclination=Term(5.1454),
        perihelion_argument=Term(318.0634, 0.1643573223),
        semi_major_axis=Term(60.2666),
        eccentricity=Term(0.054900),
        mean_anomaly=Term(115.3654, 13.06478),
    ),
    Planet.MERCURY: ElementTerms(
        ascending_node=Term(48.3313, 3.24587e-5),
        inclination=Term(7.0047, 5.00e-8),
        perihelion_argument=Term(29.1241, 1.01444e-5),
        semi_major_axis=Term(0.387098),
        eccentricity=Term(0.205635, 5.59e-10),
        mean_anomaly=Term(168.6562, 4.0923344368),
    ),
    Planet.VENUS: ElementTerms(
        ascending_node=Term(76.6799, 2.46590e-5),
        inclination=Term(3.3946, 2.75e-8),
        perihelion_argument=Term(54.8910, 1.38374e-5),
        semi_major_axis=Term(0.723330),
        eccentricity=Term(0.006773, -1.302e-9),
        mean_anomaly=Term(48.0052, 1.6021302244),
    ),
    Planet.MARS: ElementTerms(
        ascending_node=Term(49.5574, 2.11081e-5),
        inclination=Term(1.8497, -1.78e-8),
        perihelion_argument=Term(286.5016, 2.92961e-5),
        semi_major_axis=Term(1.523688),
        eccentricity=Term(0.093405, 2.516e-9),
        mean_anomaly=Term(18.6021, 0.52398),
    ),
    Planet.JUPITER: ElementTerms(
        ascending_node=Term(100.4542, 2.76854e-5),
        inclination=Term(1.3030, -1.557e-7),
        perihelion_argument=Term(273.8777, 1.64505e-5),
        semi_major_axis=Term(5.20256),
        eccentricity=Term(0.048498, 4.469e-9),
        mean_anomaly=Term(19.8950, 0.083052),
    ),
    Planet.SATURN: ElementTerms(
        ascending_node=Term(113.6634, 2.38980e-5),
        inclination=Term(2.4886, -1.081e-7),
        perihelion_argument=Term(339.3939, 2.97661e-5),
        semi_major_axis=Term(9.55475),
        eccentricity=Term(0.055546, -9.499e-9),
        mean_anomaly=Term(316.9670, 0.03339),
    ),
    Planet.URANUS: ElementTerms(
        ascending_node=Term(74.0005, 1.3978e-5),
        inclination=Term(0.7733, 1.9e-8),
        perihelion_argument=Term(96.6612, 3.0565e-5),
        semi_major_axis=Term(19.18171, -1.55e-8),
        eccentricity=Term(0.047318, 7.45e-9),
        mean_anomaly=Term(142.5905, 0.01168),
    ),
    Planet.NEPTUNE: ElementTerms(
        ascending_node=Term(131.7806, 3.0173e-5),
        inclination=Term(1.7700, -2.55e-7),
        perihelion_argument=Term(272.8461, -6.027e-6),
        semi_major_axis=Term(30.05826, 3.313e-8),
        eccentricity=Term(0.008606, 2.15e-9),
        mean_anomaly=Term(260.2471, 0.005953),
    ),
}


@dataclass(frozen=True)
class OrbitalElements:
    """Orbital elements of one body evaluated at a day number."""

    ascending_node: float  # N, degrees
    inclination: float  # i, degrees
    perihelion_argument: float  # w, degrees in [0, 360)
    semi_major_axis: float  # a, AU (Earth radii for the Moon)
    eccentricity: float  # e
    mean_anomaly: float  # M, degrees in [0, 360)


def orbital_elements(planet: Planet, day: float) -> OrbitalElements:
    """Evaluate a body's elements at the given day number.

    Args:
        planet: The body
        day: Days since 1999-12-31

    Returns:
        The elements, with the argument of perihelion and the mean anomaly
        normalized into [0, 360)
    """
    terms = ELEMENT_TABLE[planet]
    return OrbitalElements(
        ascending_node=terms.ascending_node.at(day),
        inclination=terms.inclination.at(day),
        perihelion_argument=normalize_degrees(terms.perihelion_argument.at(day)),
        semi_major_axis=terms.semi_major_axis.at(day),
        eccentricity=terms.eccentricity.at(day),
        mean_anomaly=normalize_degrees(terms.mean_anomaly.at(day)),
    )
