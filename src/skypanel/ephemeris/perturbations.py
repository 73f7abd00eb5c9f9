"""Periodic perturbation terms for the Moon, Jupiter, Saturn and Uranus.

The series are the truncated empirical terms of the low-precision theory. All
arguments are in degrees; the corrections are added to the body's ecliptic
longitude and latitude (degrees) and to its distance (Earth radii, Moon only).
"""

import math
from typing import NamedTuple

from ..planet import Planet
from ..space_time.angles import normalize_degrees, to_radians


class Perturbation(NamedTuple):
    longitude: float = 0.0
    latitude: float = 0.0
    distance: float = 0.0


class MeanAnomalies(NamedTuple):
    """Mean anomalies (degrees) of the bodies that perturb each other."""

    jupiter: float
    saturn: float
    uranus: float


NO_PERTURBATION = Perturbation()


def _sin(angle: float) -> float:
    return math.sin(to_radians(angle))


def _cos(angle: float) -> float:
    return math.cos(to_radians(angle))


def lunar_perturbation(
    ascending_node: float,
    perihelion_argument: float,
    mean_anomaly: float,
    sun_mean_anomaly: float,
    sun_mean_longitude: float,
) -> Perturbation:
    """Perturbations of the Moon by the Sun.

    Args:
        ascending_node: Moon's N
        perihelion_argument: Moon's w
        mean_anomaly: Moon's M
        sun_mean_anomaly: Sun's Ms
        sun_mean_longitude: Sun's Ls
    """
    mm = mean_anomaly
    ms = sun_mean_anomaly
    mean_longitude = normalize_degrees(ascending_node + perihelion_argument + mean_anomaly)
    elongation = normalize_degrees(mean_longitude - sun_mean_longitude)  # D
    latitude_argument = normalize_degrees(mean_longitude - ascending_node)  # F
    d = elongation
    f = latitude_argument

    longitude = (
        -1.274 * _sin(mm - 2 * d)  # evection
        + 0.658 * _sin(2 * d)  # variation
        - 0.186 * _sin(ms)  # yearly equation
        - 0.059 * _sin(2 * mm - 2 * d)
        - 0.057 * _sin(mm - 2 * d + ms)
        + 0.053 * _sin(mm + 2 * d)
        + 0.046 * _sin(2 * d - ms)
        + 0.041 * _sin(mm - ms)
        - 0.035 * _sin(d)  # parallactic equation
        - 0.031 * _sin(mm + ms)
        - 0.015 * _sin(2 * f - 2 * d)
        + 0.011 * _sin(mm - 4 * d)
    )
    latitude = (
        -0.173 * _sin(f - 2 * d)
        - 0.055 * _sin(mm - f - 2 * d)
        - 0.046 * _sin(mm + f - 2 * d)
        + 0.033 * _sin(f + 2 * d)
        + 0.017 * _sin(2 * mm + f)
    )
    distance = -0.58 * _cos(mm - 2 * d) - 0.46 * _cos(2 * d)
    return Perturbation(longitude, latitude, distance)


def jupiter_perturbation(m_jup: float, m_sat: float) -> Perturbation:
    """Jupiter's longitude terms from the Jupiter/Saturn great inequality."""
    longitude = (
        -0.332 * _sin(2 * m_jup - 5 * m_sat - 67.6)
        - 0.056 * _sin(2 * m_jup - 2 * m_sat + 21)
        + 0.042 * _sin(3 * m_jup - 5 * m_sat + 21)
        - 0.036 * _sin(m_jup - 2 * m_sat)
        + 0.022 * _cos(m_jup - m_sat)
        + 0.023 * _sin(2 * m_jup - 3 * m_sat + 52)
        - 0.016 * _sin(m_jup - 5 * m_sat - 69)
    )
    return Perturbation(longitude=longitude)


def saturn_perturbation(m_jup: float, m_sat: float) -> Perturbation:
    longitude = (
        0.812 * _sin(2 * m_jup - 5 * m_sat - 67.6)
        - 0.229 * _cos(2 * m_jup - 4 * m_sat - 2)
        + 0.119 * _sin(m_jup - 2 * m_sat - 3)
        + 0.046 * _sin(2 * m_jup - 6 * m_sat - 69)
        + 0.014 * _sin(m_jup - 3 * m_sat + 32)
    )
    latitude = -0.020 * _cos(2 * m_jup - 4 * m_sat - 2) + 0.018 * _sin(2 * m_jup - 6 * m_sat - 49)
    return Perturbation(longitude=longitude, latitude=latitude)


def uranus_perturbation(m_jup: float, m_sat: float, m_ura: float) -> Perturbation:
    longitude = (
        0.040 * _sin(m_sat - 2 * m_ura + 6)
        + 0.035 * _sin(m_sat - 3 * m_ura + 33)
        - 0.015 * _sin(m_jup - m_ura + 20)
    )
    return Perturbation(longitude=longitude)


def planetary_perturbation(planet: Planet, anomalies: MeanAnomalies) -> Perturbation:
    """Perturbation of a planet by Jupiter, Saturn and Uranus.

    Mercury, Venus, Mars and Neptune receive none.
    """
    if planet == Planet.JUPITER:
        return jupiter_perturbation(anomalies.jupiter, anomalies.saturn)
    elif planet == Planet.SATURN:
        return saturn_perturbation(anomalies.jupiter, anomalies.saturn)
    elif planet == Planet.URANUS:
        return uranus_perturbation(anomalies.jupiter, anomalies.saturn, anomalies.uranus)
    return NO_PERTURBATION
