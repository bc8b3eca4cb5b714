"""Rendering of date/time values through a compiled pattern.

Python 3.13+.
"""

from datetime import date, datetime, time

from timelexengine.diagnostics import ErrorTemplate, FormatError
from timelexengine.enums import Presentation
from timelexengine.syntax.ast import CompiledPattern, Field, Literal

from .names import StyleTable
from .value_types import DateTimeValue

__all__ = ["coerce_value", "format_fields"]


def coerce_value(value: object) -> DateTimeValue:
    """Convert a supported value to DateTimeValue.

    Raises:
        FormatError: If the value is not a DateTimeValue, date, time or datetime
    """
    match value:
        case DateTimeValue():
            return value
        # datetime subclasses date, so it must be matched first
        case datetime():
            return DateTimeValue.from_datetime(value)
        case date():
            return DateTimeValue.from_date(value)
        case time():
            return DateTimeValue.from_time(value)
        case _:
            raise FormatError(ErrorTemplate.format_type_invalid(type(value).__name__))


def _render(field: Field, value: int, styles: StyleTable) -> str:
    match styles.presentation(field):
        case Presentation.TEXT:
            return styles.names_for(field.kind).name_of(value, styles.text_style(field))
        case Presentation.REDUCED_YEAR:
            return f"{value % 100:02d}"
        case Presentation.FRACTION:
            return f"{value:09d}"[: field.width]
        case _:
            digits = f"{abs(value):0{field.width}d}"
            return f"-{digits}" if value < 0 else digits


def format_fields(
    value: DateTimeValue | date | time | datetime,
    pattern: CompiledPattern,
    styles: StyleTable,
) -> str:
    """Render a value with a compiled pattern.

    Numeric fields are zero-padded to the directive width and never
    truncated; fractions print the leading digits of the nanosecond.

    Args:
        value: Value to render
        pattern: Compiled pattern
        styles: Presentation and name configuration

    Returns:
        Rendered text

    Raises:
        FormatError: If a directive needs a field the value does not hold,
            or the value type is unsupported

    Example:
        >>> from timelexengine.syntax import compile_pattern
        >>> from timelexengine.runtime.names import default_style_table
        >>> pattern = compile_pattern("EEE, d MMM uuuu")
        >>> format_fields(date(2022, 9, 30), pattern, default_style_table())
        'Fri, 30 Sep 2022'
    """
    resolved = coerce_value(value)
    parts: list[str] = []
    for directive in pattern.directives:
        if Literal.guard(directive):
            parts.append(directive.text)
            continue
        field_value = resolved.get(directive.kind)
        if field_value is None:
            source = pattern.source or str(pattern)
            raise FormatError(ErrorTemplate.format_field_missing(str(directive.kind), source))
        parts.append(_render(directive, field_value, styles))
    return "".join(parts)
