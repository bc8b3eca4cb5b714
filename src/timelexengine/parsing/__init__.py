"""Non-raising parse and validation API.

- Functions NEVER raise engine exceptions - errors are returned in tuple
- Validation returns a ValidationResult instead of a parsed value

Public API:
    Parsing Functions:
        parse_date - Returns tuple[date | None, tuple[TimeLexError, ...]]
        parse_time - Returns tuple[time | None, tuple[TimeLexError, ...]]
        parse_datetime - Returns tuple[datetime | None, tuple[TimeLexError, ...]]

    Validation:
        validate - Returns ValidationResult (STRICT by default)
        is_valid - Returns bool

    Type Guards:
        is_valid_date - TypeIs guard for date (not None)
        is_valid_time - TypeIs guard for time (not None)
        is_valid_datetime - TypeIs guard for datetime (not None)

Example:
    >>> from timelexengine.parsing import parse_date, is_valid_date
    >>> result, errors = parse_date("14.11.1974", "dd.MM.uuuu")
    >>> if not errors and is_valid_date(result):
    ...     print(result.isoformat())
    1974-11-14

Python 3.13+.
"""

from .dates import parse_date, parse_datetime, parse_time
from .guards import is_valid_date, is_valid_datetime, is_valid_time
from .validator import is_valid, validate

__all__ = [
    # Type guards
    "is_valid_date",
    "is_valid_datetime",
    "is_valid_time",
    # Validation
    "is_valid",
    "validate",
    # Parsing functions
    "parse_date",
    "parse_datetime",
    "parse_time",
]
