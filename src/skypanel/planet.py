from enum import Enum
from typing import Tuple


class Planet(Enum):
    """Bodies covered by the ephemeris, with Earth as the observing platform."""

    SUN = "sun"
    MOON = "moon"
    MERCURY = "mercury"
    VENUS = "venus"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "Planet":
        """Look up a body by case-insensitive name.

        Raises:
            ValueError: If the name is not one of the nine bodies
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid planet: {name}")


# Bodies shown in the planet table; the luminaries are left out.
REPORT_PLANETS: Tuple[Planet, ...] = (
    Planet.MERCURY,
    Planet.VENUS,
    Planet.MARS,
    Planet.JUPITER,
    Planet.SATURN,
    Planet.URANUS,
    Planet.NEPTUNE,
)
