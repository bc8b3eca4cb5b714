"""Resolved date/time value and the raw field set produced by parsing.

DateTimeValue holds whatever subset of fields a pattern provided: a
date-only, time-only, or combined value. Callers pick the shape they need
through to_date(), to_time() and to_datetime(), which fail with
ResolutionError when required fields are unset.

Python 3.13+.
"""

from dataclasses import dataclass, fields
from datetime import date, datetime, time

from timelexengine.diagnostics import ErrorTemplate, ResolutionError
from timelexengine.enums import FieldKind

from .chronology import FIELD_RANGES, day_of_week, days_in_month, max_days_in_month

__all__ = ["DateTimeValue", "RawFieldSet"]

# Field values decoded by phase 1, keyed by kind. Local to one parse call.
RawFieldSet = dict[FieldKind, int]

_ATTRIBUTE_KINDS: dict[str, FieldKind] = {
    "year": FieldKind.YEAR,
    "month": FieldKind.MONTH,
    "day": FieldKind.DAY_OF_MONTH,
    "hour": FieldKind.HOUR_OF_DAY,
    "minute": FieldKind.MINUTE_OF_HOUR,
    "second": FieldKind.SECOND_OF_MINUTE,
    "nanosecond": FieldKind.NANO_OF_SECOND,
}

_DATE_ATTRIBUTES = ("year", "month", "day")
_TIME_ATTRIBUTES = ("hour", "minute")
_NANOS_PER_MICRO = 1000


@dataclass(frozen=True, slots=True)
class DateTimeValue:
    """Timezone-less date/time with optional fields.

    Attributes:
        year: Proleptic year (year 0 exists)
        month: 1-12
        day: 1-31, valid for the month when month is set
        hour: 0-23
        minute: 0-59
        second: 0-59
        nanosecond: 0-999,999,999

    Example:
        >>> value = DateTimeValue(year=2022, month=9, day=30, hour=12, minute=0, second=0)
        >>> str(value)
        '2022-09-30T12:00:00'
        >>> value.day_of_week
        5
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    nanosecond: int | None = None

    def __post_init__(self) -> None:
        """Validate field ranges.

        Raises:
            ValueError: If a field is outside its nominal range, or the day
                does not exist in the month (in any year when year is unset).
        """
        for attribute, kind in _ATTRIBUTE_KINDS.items():
            value = getattr(self, attribute)
            if value is None:
                continue
            low, high = FIELD_RANGES[kind]
            if not low <= value <= high:
                msg = f"{attribute} must be in {low} - {high}, got {value}"
                raise ValueError(msg)
        if self.month is not None and self.day is not None:
            if self.year is None:
                limit = max_days_in_month(self.month)
                where = f"month {self.month:02d}"
            else:
                limit = days_in_month(self.year, self.month)
                where = f"{self.year:04d}-{self.month:02d}"
            if self.day > limit:
                msg = f"day must be in 1 - {limit} for {where}, got {self.day}"
                raise ValueError(msg)

    def __str__(self) -> str:
        date_part = self._date_text() if self.has_date else None
        time_part = self._time_text() if self.has_time else None
        if date_part and time_part:
            return f"{date_part}T{time_part}"
        if date_part or time_part:
            return date_part or time_part or ""
        present = ", ".join(f"{name}={value}" for name, value in self.as_dict().items())
        return f"DateTimeValue({present})"

    def _date_text(self) -> str:
        sign = "-" if self.year is not None and self.year < 0 else ""
        return f"{sign}{abs(self.year or 0):04d}-{self.month:02d}-{self.day:02d}"

    def _time_text(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}"
        if self.second is not None or self.nanosecond:
            text += f":{self.second or 0:02d}"
        if self.nanosecond:
            text += "." + f"{self.nanosecond:09d}".rstrip("0")
        return text

    def _ymd(self) -> tuple[int, int, int] | None:
        if self.year is None or self.month is None or self.day is None:
            return None
        return (self.year, self.month, self.day)

    @property
    def has_date(self) -> bool:
        """True when year, month and day are all set."""
        return self._ymd() is not None

    @property
    def has_time(self) -> bool:
        """True when hour and minute are set."""
        return all(getattr(self, name) is not None for name in _TIME_ATTRIBUTES)

    @property
    def day_of_week(self) -> int | None:
        """ISO day of week (1 = Monday), or None without a complete date."""
        ymd = self._ymd()
        if ymd is None:
            return None
        return day_of_week(*ymd)

    def get(self, kind: FieldKind) -> int | None:
        """Value stored for a field kind, None if unset or not stored.

        Derived kinds (day of week, clock hour, AM/PM) are computed from
        the stored fields.
        """
        match kind:
            case FieldKind.DAY_OF_WEEK:
                return self.day_of_week
            case FieldKind.CLOCK_HOUR_OF_AMPM:
                return None if self.hour is None else (self.hour % 12 or 12)
            case FieldKind.AMPM_OF_DAY:
                return None if self.hour is None else self.hour // 12
        for attribute, attribute_kind in _ATTRIBUTE_KINDS.items():
            if attribute_kind is kind:
                value: int | None = getattr(self, attribute)
                return value
        return None

    def as_dict(self) -> dict[str, int]:
        """Set fields only, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None
        }

    def _require(self, names: tuple[str, ...], target: str) -> None:
        missing = tuple(str(_ATTRIBUTE_KINDS[n]) for n in names if getattr(self, n) is None)
        if missing:
            raise ResolutionError(ErrorTemplate.field_missing(missing, target))

    def to_date(self) -> date:
        """Convert to datetime.date.

        Raises:
            ResolutionError: If year, month or day is unset, or the year is
                outside 1..9999
        """
        self._require(_DATE_ATTRIBUTES, "date")
        ymd = self._ymd()
        assert ymd is not None  # Type narrowing: _require passed
        year, month, day = ymd
        if not 1 <= year <= 9999:
            raise ResolutionError(ErrorTemplate.year_unsupported(year, "date"))
        return date(year, month, day)

    def to_time(self) -> time:
        """Convert to datetime.time (second and nanosecond default to 0).

        Nanoseconds are truncated to microseconds.

        Raises:
            ResolutionError: If hour or minute is unset
        """
        self._require(_TIME_ATTRIBUTES, "time")
        assert self.hour is not None and self.minute is not None  # Type narrowing: _require passed
        return time(
            self.hour,
            self.minute,
            self.second or 0,
            (self.nanosecond or 0) // _NANOS_PER_MICRO,
        )

    def to_datetime(self) -> datetime:
        """Convert to a naive datetime.datetime.

        Raises:
            ResolutionError: If any date field or hour/minute is unset, or
                the year is outside 1..9999
        """
        self._require(_DATE_ATTRIBUTES + _TIME_ATTRIBUTES, "datetime")
        return datetime.combine(self.to_date(), self.to_time())

    @classmethod
    def from_date(cls, value: date) -> "DateTimeValue":
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def from_time(cls, value: time) -> "DateTimeValue":
        return cls(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            nanosecond=value.microsecond * _NANOS_PER_MICRO,
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateTimeValue":
        """Build from a datetime; tzinfo, if any, is ignored."""
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            nanosecond=value.microsecond * _NANOS_PER_MICRO,
        )
