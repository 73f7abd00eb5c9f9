from .elements import OrbitalElements, orbital_elements
from .kepler import KeplerConvergenceError, solve_kepler
from .positions import BodyPosition, SolarContext, compute_position, compute_solar_context
from .rise_set import ALWAYS, NEVER, RiseTransitSet, rise_transit_set
from .horizon import alt_az
from .util import format_right_ascension, format_declination, format_distance
from .report import format_report
from .ephemeris import Ephemeris
from .forecast import DEFAULT_FORECAST_DAYS, daily_ephemerides, rise_set_table, visible_bodies

__all__ = [
    "OrbitalElements",
    "orbital_elements",
    "KeplerConvergenceError",
    "solve_kepler",
    "BodyPosition",
    "SolarContext",
    "compute_position",
    "compute_solar_context",
    "ALWAYS",
    "NEVER",
    "RiseTransitSet",
    "rise_transit_set",
    "alt_az",
    "format_right_ascension",
    "format_declination",
    "format_distance",
    "format_report",
    "Ephemeris",
    "DEFAULT_FORECAST_DAYS",
    "daily_ephemerides",
    "rise_set_table",
    "visible_bodies",
]
