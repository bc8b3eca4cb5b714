"""Phase 2 of parsing: field resolution under a ResolverStyle.

Takes the RawFieldSet from phase 1 and produces a DateTimeValue. All
calendar semantics live here:

    Style   | Out-of-range values
    --------|----------------------------------------------------------
    STRICT  | Rejected against the calendar-correct range
    SMART   | Nominal ranges enforced; day clamped to the month length;
            | 24:00 read as midnight of the following day
    LENIENT | Excess carried into the next larger field

Rules shared by every style: the hour comes from H, or from h plus a;
disagreeing sources are a ResolutionError; a parsed weekday must match
the resolved date when year, month and day are all present.

Python 3.13+. Zero external dependencies.
"""

import logging

from timelexengine.constants import MAX_YEAR, MIN_YEAR
from timelexengine.diagnostics import ErrorTemplate, ResolutionError
from timelexengine.enums import FieldKind, ResolverStyle

from .chronology import (
    FIELD_RANGES,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    NANOS_PER_SECOND,
    SECONDS_PER_MINUTE,
    days_in_month,
    max_days_in_month,
    plus_days,
    plus_months,
)
from .value_types import DateTimeValue, RawFieldSet

__all__ = ["resolve_fields"]

logger = logging.getLogger(__name__)

# Fields a DateTimeValue stores, in constructor order.
_STORED_KINDS: tuple[FieldKind, ...] = (
    FieldKind.YEAR,
    FieldKind.MONTH,
    FieldKind.DAY_OF_MONTH,
    FieldKind.HOUR_OF_DAY,
    FieldKind.MINUTE_OF_HOUR,
    FieldKind.SECOND_OF_MINUTE,
    FieldKind.NANO_OF_SECOND,
)

_TIME_KINDS: tuple[FieldKind, ...] = (
    FieldKind.HOUR_OF_DAY,
    FieldKind.MINUTE_OF_HOUR,
    FieldKind.SECOND_OF_MINUTE,
    FieldKind.NANO_OF_SECOND,
)

_DATE_KINDS: tuple[FieldKind, ...] = (
    FieldKind.YEAR,
    FieldKind.MONTH,
    FieldKind.DAY_OF_MONTH,
)

# (field, field it carries into, unit size), smallest first.
_TIME_CARRIES: tuple[tuple[FieldKind, FieldKind, int], ...] = (
    (FieldKind.NANO_OF_SECOND, FieldKind.SECOND_OF_MINUTE, NANOS_PER_SECOND),
    (FieldKind.SECOND_OF_MINUTE, FieldKind.MINUTE_OF_HOUR, SECONDS_PER_MINUTE),
    (FieldKind.MINUTE_OF_HOUR, FieldKind.HOUR_OF_DAY, MINUTES_PER_HOUR),
)

_END_OF_DAY_HOUR = 24

_Fields = dict[FieldKind, int | None]


def _check_range(kind: FieldKind, value: int | None, low: int, high: int) -> None:
    if value is not None and not low <= value <= high:
        raise ResolutionError(ErrorTemplate.value_invalid(str(kind), value, low, high))


def _check_nominal(fields: _Fields, kinds: tuple[FieldKind, ...]) -> None:
    for kind in kinds:
        low, high = FIELD_RANGES[kind]
        _check_range(kind, fields[kind], low, high)


def _conflict(kind: FieldKind, first: int, second: int) -> ResolutionError:
    return ResolutionError(ErrorTemplate.resolution_field_conflict(str(kind), first, second))


def _resolve_hour(raw: RawFieldSet, style: ResolverStyle) -> int | None:
    """Combine H, h and a into one hour-of-day value.

    Raises:
        ResolutionError: On disagreeing hour sources, or h without a
            under STRICT
    """
    hour = raw.get(FieldKind.HOUR_OF_DAY)
    clock = raw.get(FieldKind.CLOCK_HOUR_OF_AMPM)
    ampm = raw.get(FieldKind.AMPM_OF_DAY)

    if clock is not None:
        if ampm is None:
            if style is ResolverStyle.STRICT:
                raise ResolutionError(
                    ErrorTemplate.field_missing(
                        (str(FieldKind.AMPM_OF_DAY),), str(FieldKind.HOUR_OF_DAY)
                    )
                )
            logger.debug("Clock hour %d parsed without AM/PM marker; assuming AM", clock)
            ampm = 0
        if style is ResolverStyle.LENIENT:
            from_clock = (0 if clock == 12 else clock) + 12 * ampm
        else:
            low, high = FIELD_RANGES[FieldKind.CLOCK_HOUR_OF_AMPM]
            _check_range(FieldKind.CLOCK_HOUR_OF_AMPM, clock, low, high)
            from_clock = clock % 12 + 12 * ampm
        if hour is not None and hour != from_clock:
            raise _conflict(FieldKind.HOUR_OF_DAY, hour, from_clock)
        return from_clock

    if ampm is not None:
        if hour is None:
            logger.debug("AM/PM marker parsed without an hour; ignoring it")
        elif 0 <= hour < HOURS_PER_DAY and hour // 12 != ampm:
            raise _conflict(FieldKind.AMPM_OF_DAY, ampm, hour // 12)
    return hour


def _resolve_strict(fields: _Fields) -> None:
    _check_nominal(fields, _STORED_KINDS)
    year = fields[FieldKind.YEAR]
    month = fields[FieldKind.MONTH]
    if month is None:
        return
    limit = max_days_in_month(month) if year is None else days_in_month(year, month)
    _check_range(FieldKind.DAY_OF_MONTH, fields[FieldKind.DAY_OF_MONTH], 1, limit)


def _resolve_smart(fields: _Fields) -> None:
    _check_nominal(fields, _DATE_KINDS + _TIME_KINDS[1:])
    hour = fields[FieldKind.HOUR_OF_DAY]
    _check_range(FieldKind.HOUR_OF_DAY, hour, 0, _END_OF_DAY_HOUR)

    year = fields[FieldKind.YEAR]
    month = fields[FieldKind.MONTH]
    day = fields[FieldKind.DAY_OF_MONTH]
    if month is not None and day is not None:
        limit = max_days_in_month(month) if year is None else days_in_month(year, month)
        if day > limit:
            logger.debug("Clamped day %d to %d for month %d", day, limit, month)
            fields[FieldKind.DAY_OF_MONTH] = day = limit

    if hour != _END_OF_DAY_HOUR:
        return
    if any(fields[kind] for kind in _TIME_KINDS[1:]):
        _check_range(FieldKind.HOUR_OF_DAY, hour, 0, HOURS_PER_DAY - 1)
    fields[FieldKind.HOUR_OF_DAY] = 0
    present = [kind for kind in _DATE_KINDS if fields[kind] is not None]
    if not present:
        logger.debug("Read 24:00 as midnight")
        return
    if year is None or month is None or day is None:
        missing = next(kind for kind in _DATE_KINDS if fields[kind] is None)
        raise ResolutionError(
            ErrorTemplate.carry_unsupported(str(FieldKind.HOUR_OF_DAY), str(missing), hour)
        )
    logger.debug("Read 24:00 as midnight of the following day")
    (
        fields[FieldKind.YEAR],
        fields[FieldKind.MONTH],
        fields[FieldKind.DAY_OF_MONTH],
    ) = plus_days(year, month, day, 1)
    _check_range(FieldKind.YEAR, fields[FieldKind.YEAR], MIN_YEAR, MAX_YEAR)


def _carry_time(fields: _Fields) -> int:
    """Normalize time fields, returning the whole days carried out of the hour."""
    for kind, target, size in _TIME_CARRIES:
        value = fields[kind]
        if value is None:
            continue
        carry, fields[kind] = divmod(value, size)
        if not carry:
            continue
        target_value = fields[target]
        if target_value is None:
            raise ResolutionError(ErrorTemplate.carry_unsupported(str(kind), str(target), value))
        logger.debug("Carried %d from %s into %s", carry, kind, target)
        fields[target] = target_value + carry

    hour = fields[FieldKind.HOUR_OF_DAY]
    if hour is None:
        return 0
    days, fields[FieldKind.HOUR_OF_DAY] = divmod(hour, HOURS_PER_DAY)
    if days:
        for kind in _DATE_KINDS:
            if fields[kind] is None:
                raise ResolutionError(
                    ErrorTemplate.carry_unsupported(str(FieldKind.HOUR_OF_DAY), str(kind), hour)
                )
        logger.debug("Carried %d day(s) from hour-of-day", days)
    return days


def _resolve_lenient(fields: _Fields) -> None:
    days = _carry_time(fields)

    year = fields[FieldKind.YEAR]
    month = fields[FieldKind.MONTH]
    day = fields[FieldKind.DAY_OF_MONTH]

    if month is not None and not 1 <= month <= MONTHS_PER_YEAR:
        if year is None:
            raise ResolutionError(
                ErrorTemplate.carry_unsupported(str(FieldKind.MONTH), str(FieldKind.YEAR), month)
            )
        logger.debug("Folded month %d into year %d", month, year)
        year, month = plus_months(year, month)
        fields[FieldKind.YEAR], fields[FieldKind.MONTH] = year, month

    if day is not None:
        if month is None:
            limit, target = FIELD_RANGES[FieldKind.DAY_OF_MONTH][1], FieldKind.MONTH
        elif year is None:
            limit, target = max_days_in_month(month), FieldKind.YEAR
        else:
            limit, target = days_in_month(year, month), FieldKind.YEAR
        if not 1 <= day <= limit or days:
            if year is None or month is None:
                raise ResolutionError(
                    ErrorTemplate.carry_unsupported(str(FieldKind.DAY_OF_MONTH), str(target), day)
                )
            logger.debug("Rolled day %d (+%d) across month lengths", day, days)
            (
                fields[FieldKind.YEAR],
                fields[FieldKind.MONTH],
                fields[FieldKind.DAY_OF_MONTH],
            ) = plus_days(year, month, day, days)

    _check_range(FieldKind.YEAR, fields[FieldKind.YEAR], MIN_YEAR, MAX_YEAR)


def _check_weekday(raw: RawFieldSet, value: DateTimeValue) -> None:
    parsed = raw.get(FieldKind.DAY_OF_WEEK)
    if parsed is None:
        return
    actual = value.day_of_week
    if actual is None:
        logger.debug("Day of week %d parsed without a complete date; not checked", parsed)
        return
    if parsed != actual:
        raise ResolutionError(ErrorTemplate.weekday_mismatch(parsed, actual))


def resolve_fields(raw: RawFieldSet, style: ResolverStyle) -> DateTimeValue:
    """Resolve raw field values into a DateTimeValue (phase 2).

    Fields absent from raw stay unset on the result.

    Args:
        raw: Field values from extract_fields()
        style: Resolution policy

    Returns:
        Resolved value

    Raises:
        ResolutionError: Out-of-range value (STRICT, SMART), conflicting
            hour or weekday (all styles), or carry into an absent field
            (SMART 24:00, LENIENT)

    Example:
        >>> raw = {FieldKind.YEAR: 2022, FieldKind.MONTH: 9, FieldKind.DAY_OF_MONTH: 31}
        >>> str(resolve_fields(raw, ResolverStyle.SMART))
        '2022-09-30'
        >>> str(resolve_fields(raw, ResolverStyle.LENIENT))
        '2022-10-01'
    """
    fields: _Fields = {kind: raw.get(kind) for kind in _STORED_KINDS}
    fields[FieldKind.HOUR_OF_DAY] = _resolve_hour(raw, style)

    match style:
        case ResolverStyle.STRICT:
            _resolve_strict(fields)
        case ResolverStyle.SMART:
            _resolve_smart(fields)
        case ResolverStyle.LENIENT:
            _resolve_lenient(fields)

    value = DateTimeValue(*(fields[kind] for kind in _STORED_KINDS))
    _check_weekday(raw, value)
    return value
