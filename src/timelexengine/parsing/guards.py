"""Type guard functions for parsing result type narrowing.

All parse_* functions return tuple[result, tuple[TimeLexError, ...]].
Type guards check the result component to narrow types for mypy.

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_valid_date(result)` to just `if is_valid_date(result)`.

Example:
    >>> from timelexengine.parsing import parse_date
    >>> from timelexengine.parsing.guards import is_valid_date
    >>> result, errors = parse_date("2025-01-28")
    >>> if is_valid_date(result):
    ...     # mypy knows result is date
    ...     year = result.year

Python 3.13+ with TypeIs support (PEP 742).
"""

from datetime import date, datetime, time
from typing import TypeIs

__all__ = [
    "is_valid_date",
    "is_valid_datetime",
    "is_valid_time",
]


def is_valid_date(value: date | None) -> TypeIs[date]:
    """Type guard: Check if parsed date is valid (not None).

    Safe to call directly on parse_date() result without checking errors first.

    Args:
        value: Date from parse_date() result tuple (may be None on error)

    Returns:
        True if value is a date object, False otherwise
    """
    return value is not None


def is_valid_time(value: time | None) -> TypeIs[time]:
    """Type guard: Check if parsed time is valid (not None)."""
    return value is not None


def is_valid_datetime(value: datetime | None) -> TypeIs[datetime]:
    """Type guard: Check if parsed datetime is valid (not None).

    Example:
        >>> result, errors = parse_datetime("2025-01-28T14:30:00")
        >>> if is_valid_datetime(result):
        ...     # Type-safe: mypy knows result is datetime
        ...     timestamp = result.timestamp()
    """
    return value is not None
