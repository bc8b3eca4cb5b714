"""Proleptic Gregorian calendar arithmetic.

Works for every year in [MIN_YEAR, MAX_YEAR], including year 0 and
negative years, where datetime.date stops at 1..9999. Day counting uses
the days-from-civil / civil-from-days conversion (Howard Hinnant), so
carrying any number of days is O(1).

Python 3.13+. Zero external dependencies.
"""

import calendar

from timelexengine.constants import MAX_YEAR, MIN_YEAR
from timelexengine.enums import FieldKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Unit sizes
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "MONTHS_PER_YEAR",
    # Ranges
    "FIELD_RANGES",
    # Functions
    "days_in_month",
    "max_days_in_month",
    "days_from_civil",
    "civil_from_days",
    "day_of_week",
    "plus_days",
    "plus_months",
]

NANOS_PER_SECOND: int = 1_000_000_000
SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
MONTHS_PER_YEAR: int = 12

# Nominal (month-independent) inclusive range of each field.
FIELD_RANGES: dict[FieldKind, tuple[int, int]] = {
    FieldKind.YEAR: (MIN_YEAR, MAX_YEAR),
    FieldKind.MONTH: (1, 12),
    FieldKind.DAY_OF_MONTH: (1, 31),
    FieldKind.DAY_OF_WEEK: (1, 7),
    FieldKind.HOUR_OF_DAY: (0, 23),
    FieldKind.CLOCK_HOUR_OF_AMPM: (1, 12),
    FieldKind.AMPM_OF_DAY: (0, 1),
    FieldKind.MINUTE_OF_HOUR: (0, 59),
    FieldKind.SECOND_OF_MINUTE: (0, 59),
    FieldKind.NANO_OF_SECOND: (0, NANOS_PER_SECOND - 1),
}

_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# days_from_civil(1970, 1, 1) == 0; 1970-01-01 was a Thursday (ISO 4).
_EPOCH_SHIFT: int = 719_468
_DAYS_PER_ERA: int = 146_097


def days_in_month(year: int, month: int) -> int:
    """Length of a month in a specific year.

    Example:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2022, 9)
        30
    """
    if month == 2 and calendar.isleap(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def max_days_in_month(month: int) -> int:
    """Longest length of a month over all years (February allows 29)."""
    return 29 if month == 2 else _MONTH_LENGTHS[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a valid proleptic Gregorian date."""
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_ERA + doe - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of days_from_civil: (year, month, day)."""
    z = days + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def day_of_week(year: int, month: int, day: int) -> int:
    """ISO day of week (1 = Monday ... 7 = Sunday).

    Example:
        >>> day_of_week(2022, 9, 30)  # Friday
        5
    """
    return (days_from_civil(year, month, day) + 3) % 7 + 1


def plus_days(year: int, month: int, day: int, days: int) -> tuple[int, int, int]:
    """Add days to a date whose day may lie outside the month.

    The month must be valid; day may be any integer, so day 0 is the last
    day of the previous month and day 31 of a 30-day month is the first
    day of the next.

    Example:
        >>> plus_days(2022, 9, 31, 0)
        (2022, 10, 1)
    """
    return civil_from_days(days_from_civil(year, month, 1) + day - 1 + days)


def plus_months(year: int, month: int) -> tuple[int, int]:
    """Fold an out-of-range month into the year.

    Example:
        >>> plus_months(2022, 13)
        (2023, 1)
        >>> plus_months(2022, 0)
        (2021, 12)
    """
    years, month_index = divmod(year * MONTHS_PER_YEAR + month - 1, MONTHS_PER_YEAR)
    return (years, month_index + 1)
