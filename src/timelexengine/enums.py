"""Enumerations for TimeLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FieldKind(StrEnum):
    """Calendar component a pattern field reads or writes.

    StrEnum provides automatic string conversion: str(FieldKind.YEAR) == "year"
    """

    YEAR = "year"
    """Proleptic year: u, y"""

    MONTH = "month"
    """Month of year 1-12: M, L"""

    DAY_OF_MONTH = "day-of-month"
    """Day of month 1-31: d"""

    DAY_OF_WEEK = "day-of-week"
    """ISO day of week, 1 = Monday: E"""

    HOUR_OF_DAY = "hour-of-day"
    """Hour 0-23: H"""

    CLOCK_HOUR_OF_AMPM = "clock-hour-of-ampm"
    """Hour 1-12 on a twelve hour clock: h"""

    AMPM_OF_DAY = "ampm-of-day"
    """0 = AM, 1 = PM: a"""

    MINUTE_OF_HOUR = "minute-of-hour"
    """Minute 0-59: m"""

    SECOND_OF_MINUTE = "second-of-minute"
    """Second 0-59: s"""

    NANO_OF_SECOND = "nano-of-second"
    """Nanosecond 0-999,999,999: n, S"""


class ResolverStyle(StrEnum):
    """Policy converting raw parsed fields into a calendar value.

    StrEnum provides automatic string conversion: str(ResolverStyle.SMART) == "smart"
    """

    STRICT = "strict"
    """Reject any value outside its calendar-correct range."""

    SMART = "smart"
    """Clamp day-of-month to the month length, reject wildly invalid values."""

    LENIENT = "lenient"
    """Carry out-of-range excess into the next larger field."""


class TextStyle(StrEnum):
    """Verbosity of a textual field rendering."""

    SHORT = "short"
    """Abbreviated name: Sep, Mon"""

    FULL = "full"
    """Full name: September, Monday"""


class Presentation(StrEnum):
    """How a field is rendered and read at parse/format time."""

    NUMBER = "number"
    """Decimal digits, zero-padded to the field width."""

    REDUCED_YEAR = "reduced-year"
    """Two-digit year relative to TWO_DIGIT_YEAR_BASE."""

    FRACTION = "fraction"
    """Leading digits of the nanosecond as a fraction of a second."""

    TEXT = "text"
    """Name looked up in the style table."""


__all__ = [
    "FieldKind",
    "Presentation",
    "ResolverStyle",
    "TextStyle",
]
