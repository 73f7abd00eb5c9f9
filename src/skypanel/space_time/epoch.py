"""Day-number epoch used by the low-precision orbital theory.

The orbital element polynomials take their time argument as a count of days
from 1999-12-31 0h UT, so that 2000-01-01 is day 1. The count is derived from
the Julian Day Number of the calendar date (Meeus, "Astronomical Algorithms").
"""

from datetime import date, datetime
from typing import Union

# JDN of 1999-12-31, the zero point of the day number
EPOCH_JDN = 2451544

# Range of calendar years accepted by the engine
MIN_YEAR = 1583
MAX_YEAR = 3000

# Obliquity of the ecliptic at the epoch and its daily drift, in degrees
OBLIQUITY_AT_EPOCH = 23.4393
OBLIQUITY_RATE = 3.563e-7

DateInput = Union[str, date, datetime]


class InvalidDateError(ValueError):
    """Raised when an observation date is malformed or out of range."""

    pass


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number using Meeus algorithm.

    Args:
        year: Year in Gregorian calendar
        month: Month in Gregorian calendar (1-12)
        day: Day in Gregorian calendar

    Returns:
        Julian Day Number

    Raises:
        InvalidDateError: If date is before 1583 (Gregorian calendar adoption)
    """
    if year < MIN_YEAR:
        raise InvalidDateError(f"Dates before {MIN_YEAR} are not supported")

    # Jan & Feb are months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524


def parse_date(value: DateInput) -> date:
    """Normalize an observation date.

    Args:
        value: A ``date``, a ``datetime`` (its calendar date is used) or an
            ISO ``YYYY-MM-DD`` string

    Returns:
        The calendar date

    Raises:
        InvalidDateError: If the value cannot be read as a date in the
            supported year range
    """
    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = date.fromisoformat(value.strip())
        except ValueError:
            raise InvalidDateError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")
    else:
        raise InvalidDateError(f"Unsupported date type: {type(value).__name__}")

    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        raise InvalidDateError(
            f"Year {parsed.year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}"
        )
    return parsed


def day_number(value: DateInput) -> int:
    """Days since 1999-12-31 for the given calendar date (2000-01-01 is day 1)."""
    parsed = parse_date(value)
    return gregorian_to_jdn(parsed.year, parsed.month, parsed.day) - EPOCH_JDN


def obliquity(day: float) -> float:
    """Obliquity of the ecliptic in degrees for a day number."""
    return OBLIQUITY_AT_EPOCH - OBLIQUITY_RATE * day
