"""Angle and clock-time helpers shared by the ephemeris modules."""

import math
from typing import Tuple

DEGREES_PER_HOUR = 15.0


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def normalize_degrees(angle: float) -> float:
    """Normalize an angle to the range [0, 360)."""
    return angle % 360.0


def normalize_hours(hours: float) -> float:
    """Normalize a clock time or hour angle to the range [0, 24)."""
    return hours % 24.0


def split_hms(value: float) -> Tuple[int, int, int]:
    """Split decimal hours (or degrees) into whole units, minutes and seconds.

    The leading unit is truncated toward zero and keeps the sign; minutes and
    seconds are truncated, non-negative parts of the remaining fraction.

    Args:
        value: Decimal hours or degrees

    Returns:
        Tuple of (units, minutes, seconds)
    """
    units = int(value)
    minutes_fraction = abs(value - units) * 60
    minutes = int(minutes_fraction)
    seconds = int((minutes_fraction - minutes) * 60)
    return units, minutes, seconds


def to_hms(value: float) -> str:
    """Format decimal hours as a zero-padded ``HH:MM:SS`` string."""
    hours, minutes, seconds = split_hms(value)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def hms_to_hours(text: str) -> float:
    """Parse an ``HH:MM:SS`` (or ``HH:MM``) string back into decimal hours."""
    parts = [int(part) for part in text.split(":")]
    hours = parts[0]
    minutes = parts[1] if len(parts) > 1 else 0
    seconds = parts[2] if len(parts) > 2 else 0
    return hours + minutes / 60 + seconds / 3600
