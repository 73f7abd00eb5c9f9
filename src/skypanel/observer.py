import math
from dataclasses import dataclass


class InvalidObserverError(ValueError):
    """Raised when observer coordinates are outside their physical range."""

    pass


@dataclass(frozen=True)
class Observer:
    """A location on Earth and its clock offset from UT."""

    latitude: float  # in degrees, positive north
    longitude: float  # in degrees, positive east
    timezone: float = 0.0  # hours ahead of UT

    def __post_init__(self) -> None:
        """Validate the coordinates."""
        for field_name in ("latitude", "longitude", "timezone"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidObserverError(f"{field_name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidObserverError(f"{field_name} must be finite, got {value!r}")
        if not -90 <= self.latitude <= 90:
            raise InvalidObserverError("Latitude must be between -90 and 90 degrees")
        if not -180 <= self.longitude <= 180:
            raise InvalidObserverError("Longitude must be between -180 and 180 degrees")
        if not -12 <= self.timezone <= 14:
            raise InvalidObserverError("Timezone offset must be between -12 and +14 hours")

    def __str__(self) -> str:
        return f"{self.latitude:.4f},{self.longitude:.4f} UTC{self.timezone:+g}"
