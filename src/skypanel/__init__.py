"""Low-precision ephemeris of the Sun, Moon and planets for a local observer."""

from .planet import Planet, REPORT_PLANETS
from .observer import Observer, InvalidObserverError
from .space_time.epoch import InvalidDateError
from .ephemeris import Ephemeris, BodyPosition, KeplerConvergenceError

__version__ = "0.1.0"

__all__ = [
    "Planet",
    "REPORT_PLANETS",
    "Observer",
    "InvalidObserverError",
    "InvalidDateError",
    "Ephemeris",
    "BodyPosition",
    "KeplerConvergenceError",
]
