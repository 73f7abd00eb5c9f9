"""Iterative solution of Kepler's equation in degrees."""

import math
from typing import Tuple

from ..logging import get_logger
from ..space_time.angles import to_radians

logger = get_logger(__name__)

# Convergence threshold between successive iterates, in degrees
KEPLER_TOLERANCE = 0.0005
# Maximum number of refinement iterations before giving up
MAX_KEPLER_ITERATIONS = 50

_DEGREES_PER_RADIAN = 180 / math.pi


class KeplerConvergenceError(ArithmeticError):
    """Raised when the eccentric anomaly cannot be found."""

    pass


def initial_estimate(mean_anomaly: float, eccentricity: float) -> float:
    """First-order eccentric anomaly ``E0 = M + e sin M (1 + e cos M)`` in degrees."""
    m = to_radians(mean_anomaly)
    return mean_anomaly + _DEGREES_PER_RADIAN * eccentricity * math.sin(m) * (
        1 + eccentricity * math.cos(m)
    )


def kepler_step(estimate: float, mean_anomaly: float, eccentricity: float) -> float:
    """One Newton correction of an eccentric anomaly estimate (degrees)."""
    e_rad = to_radians(estimate)
    return estimate - (
        estimate - _DEGREES_PER_RADIAN * eccentricity * math.sin(e_rad) - mean_anomaly
    ) / (1 - eccentricity * math.cos(e_rad))


def solve_kepler_iterations(
    mean_anomaly: float,
    eccentricity: float,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int = MAX_KEPLER_ITERATIONS,
) -> Tuple[float, int]:
    """Solve Kepler's equation and report how many corrections were needed.

    Args:
        mean_anomaly: Mean anomaly M in degrees
        eccentricity: Orbital eccentricity, 0 <= e < 1
        tolerance: Stop once successive iterates differ by at most this (degrees)
        max_iterations: Upper bound on Newton corrections

    Returns:
        Tuple of (eccentric anomaly in degrees, number of corrections)

    Raises:
        KeplerConvergenceError: If the eccentricity is not elliptical or the
            iteration does not settle within max_iterations
    """
    if not 0 <= eccentricity < 1:
        raise KeplerConvergenceError(
            f"Eccentricity must be in [0, 1) for an elliptical orbit, got {eccentricity}"
        )

    current = initial_estimate(mean_anomaly, eccentricity)
    for iteration in range(1, max_iterations + 1):
        previous = current
        current = kepler_step(previous, mean_anomaly, eccentricity)
        if abs(current - previous) <= tolerance:
            return current, iteration

    raise KeplerConvergenceError(
        f"Kepler iteration did not converge after {max_iterations} steps "
        f"(M={mean_anomaly}, e={eccentricity})"
    )


def solve_kepler(
    mean_anomaly: float,
    eccentricity: float,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int = MAX_KEPLER_ITERATIONS,
) -> float:
    """Eccentric anomaly E (degrees) for mean anomaly M and eccentricity e."""
    eccentric_anomaly, iterations = solve_kepler_iterations(
        mean_anomaly, eccentricity, tolerance, max_iterations
    )
    logger.debug(
        f"Kepler solved M={mean_anomaly:.4f} e={eccentricity:.6f} in {iterations} steps"
    )
    return eccentric_anomaly
