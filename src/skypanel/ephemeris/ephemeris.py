from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from ..logging import get_logger
from ..observer import Observer
from ..planet import REPORT_PLANETS, Planet
from ..space_time.epoch import DateInput, day_number, parse_date
from .horizon import alt_az
from .positions import (
    BodyPosition,
    SolarContext,
    compute_position,
    compute_solar_context,
    compute_sun_position,
)
from .report import format_report

logger = get_logger(__name__)


@dataclass(frozen=True)
class Ephemeris:
    """
    Positions of the Sun, Moon and planets for one date and observer.

    Build it with :meth:`compute` or :meth:`for_observer`; everything is
    computed eagerly and the result never changes. A new date or location
    needs a new instance.
    """

    date: date
    observer: Observer
    solar: SolarContext
    positions: Mapping[Planet, BodyPosition]

    @classmethod
    def compute(
        cls,
        observation_date: DateInput,
        latitude: float,
        longitude: float,
        timezone: float = 0,
    ) -> "Ephemeris":
        """Compute all bodies for a date and observer coordinates.

        Args:
            observation_date: ``date``, ``datetime`` or ``YYYY-MM-DD`` string
            latitude: Degrees, positive north
            longitude: Degrees, positive east
            timezone: Hours ahead of UT

        Raises:
            InvalidDateError: If the date is malformed or out of range
            InvalidObserverError: If the coordinates are out of range
        """
        return cls.for_observer(observation_date, Observer(latitude, longitude, timezone))

    @classmethod
    def for_observer(cls, observation_date: DateInput, observer: Observer) -> "Ephemeris":
        parsed = parse_date(observation_date)
        day = day_number(parsed)
        logger.debug(f"Computing ephemeris for {parsed.isoformat()} (day {day}) at {observer}")

        solar = compute_solar_context(day, observer)
        positions: Dict[Planet, BodyPosition] = {
            Planet.SUN: compute_sun_position(solar, observer)
        }
        for planet in Planet:
            if planet != Planet.SUN:
                positions[planet] = compute_position(planet, solar, observer)

        return cls(
            date=parsed,
            observer=observer,
            solar=solar,
            positions=MappingProxyType(positions),
        )

    def __getitem__(self, planet: Planet) -> BodyPosition:
        return self.positions[planet]

    def __iter__(self) -> Iterator[BodyPosition]:
        return iter(self.positions.values())

    @property
    def sun(self) -> BodyPosition:
        return self.positions[Planet.SUN]

    @property
    def moon(self) -> BodyPosition:
        return self.positions[Planet.MOON]

    @property
    def mercury(self) -> BodyPosition:
        return self.positions[Planet.MERCURY]

    @property
    def venus(self) -> BodyPosition:
        return self.positions[Planet.VENUS]

    @property
    def mars(self) -> BodyPosition:
        return self.positions[Planet.MARS]

    @property
    def jupiter(self) -> BodyPosition:
        return self.positions[Planet.JUPITER]

    @property
    def saturn(self) -> BodyPosition:
        return self.positions[Planet.SATURN]

    @property
    def uranus(self) -> BodyPosition:
        return self.positions[Planet.URANUS]

    @property
    def neptune(self) -> BodyPosition:
        return self.positions[Planet.NEPTUNE]

    @property
    def sidereal_time(self) -> float:
        """Local sidereal time at 0h UT in hours."""
        return self.solar.sidereal_time

    def alt_az(
        self, planet: Planet, sidereal_time: Optional[float] = None
    ) -> Tuple[float, float]:
        """Altitude and azimuth of a body, by default at the day's sidereal time."""
        position = self.positions[planet]
        if sidereal_time is None:
            sidereal_time = self.solar.sidereal_time
        return alt_az(
            position.right_ascension,
            position.declination,
            self.observer.latitude,
            sidereal_time,
        )

    @property
    def sun_alt_az(self) -> Tuple[float, float]:
        return self.alt_az(Planet.SUN)

    def report(self, planets: Sequence[Planet] = REPORT_PLANETS) -> str:
        """Fixed-width table of the given bodies (the planets by default)."""
        return format_report(self.positions, planets)
