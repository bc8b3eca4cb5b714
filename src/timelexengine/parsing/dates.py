"""Non-raising date/time parsing into Python types.

- Functions NEVER raise engine exceptions - errors are returned in tuple
- pattern=None selects the ISO formatter for the requested type
- resolver_style=None keeps the formatter's own style (STRICT for ISO,
  SMART for pattern strings)

Python 3.13+.
"""

from collections.abc import Callable
from datetime import date, datetime, time

from timelexengine.diagnostics import ErrorTemplate, ParseError, TimeLexError
from timelexengine.enums import ResolverStyle
from timelexengine.runtime.formatter import (
    ISO_LOCAL_DATE,
    ISO_LOCAL_DATE_TIME,
    ISO_LOCAL_TIME,
    DateTimeFormatter,
)
from timelexengine.runtime.value_types import DateTimeValue
from timelexengine.syntax.ast import CompiledPattern

__all__ = [
    "parse_date",
    "parse_datetime",
    "parse_time",
    "resolve_formatter",
]


def resolve_formatter(
    pattern: str | CompiledPattern | None,
    default: DateTimeFormatter,
    resolver_style: ResolverStyle | None,
) -> DateTimeFormatter:
    """Pick the formatter for a non-raising call.

    Raises:
        PatternError: If the pattern string is malformed
    """
    formatter = default if pattern is None else DateTimeFormatter.of_pattern(pattern)
    if resolver_style is not None and resolver_style is not formatter.resolver_style:
        formatter = formatter.with_resolver_style(resolver_style)
    return formatter


def _parse_as[T](
    value: str,
    pattern: str | CompiledPattern | None,
    resolver_style: ResolverStyle | None,
    default: DateTimeFormatter,
    parse_type: str,
    convert: Callable[[DateTimeValue], T],
) -> tuple[T | None, tuple[TimeLexError, ...]]:
    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_type_invalid(  # type: ignore[unreachable]
            type(value).__name__, parse_type
        )
        return (None, (ParseError(diagnostic, input_value=str(value)),))

    try:
        formatter = resolve_formatter(pattern, default, resolver_style)
        return (convert(formatter.parse(value)), ())
    except TimeLexError as error:
        return (None, (error,))


def parse_date(
    value: str,
    pattern: str | CompiledPattern | None = None,
    *,
    resolver_style: ResolverStyle | None = None,
) -> tuple[date | None, tuple[TimeLexError, ...]]:
    """Parse a date string to a date object.

    Args:
        value: Date string
        pattern: Pattern string or compiled pattern (default: ISO "uuuu-MM-dd")
        resolver_style: Override the formatter's resolver style

    Returns:
        Tuple of (result, errors):
        - result: Parsed date object, or None if parsing failed
        - errors: Tuple of TimeLexError (empty tuple on success)

    Examples:
        >>> result, errors = parse_date("1974-11-14")
        >>> result
        datetime.date(1974, 11, 14)
        >>> errors
        ()

        >>> result, errors = parse_date("11/14/1974")
        >>> result is None
        True
        >>> len(errors)
        1

    Thread Safety:
        Thread-safe. Formatters are immutable and shared.
    """
    return _parse_as(value, pattern, resolver_style, ISO_LOCAL_DATE, "date", DateTimeValue.to_date)


def parse_time(
    value: str,
    pattern: str | CompiledPattern | None = None,
    *,
    resolver_style: ResolverStyle | None = None,
) -> tuple[time | None, tuple[TimeLexError, ...]]:
    """Parse a time string to a time object.

    Nanoseconds are truncated to microseconds.

    Examples:
        >>> parse_time("16:21", "HH:mm")
        (datetime.time(16, 21), ())
    """
    return _parse_as(value, pattern, resolver_style, ISO_LOCAL_TIME, "time", DateTimeValue.to_time)


def parse_datetime(
    value: str,
    pattern: str | CompiledPattern | None = None,
    *,
    resolver_style: ResolverStyle | None = None,
) -> tuple[datetime | None, tuple[TimeLexError, ...]]:
    """Parse a date-time string to a naive datetime object.

    Examples:
        >>> result, errors = parse_datetime(
        ...     "09/31/2022 12:00", "MM/dd/uuuu HH:mm", resolver_style=ResolverStyle.LENIENT
        ... )
        >>> result
        datetime.datetime(2022, 10, 1, 12, 0)
    """
    return _parse_as(
        value,
        pattern,
        resolver_style,
        ISO_LOCAL_DATE_TIME,
        "datetime",
        DateTimeValue.to_datetime,
    )
