"""Input validation on top of parse.

A string is valid for a pattern exactly when parsing it raises nothing.
STRICT is the default style here: a validator that silently clamps or
rolls values would accept "09/31/2022".

Python 3.13+.
"""

from timelexengine.diagnostics import ErrorTemplate, TimeLexError, ValidationResult
from timelexengine.enums import ResolverStyle
from timelexengine.runtime.formatter import ISO_LOCAL_DATE
from timelexengine.syntax.ast import CompiledPattern

from .dates import resolve_formatter

__all__ = ["is_valid", "validate"]


def validate(
    value: str,
    pattern: str | CompiledPattern | None = None,
    *,
    resolver_style: ResolverStyle = ResolverStyle.STRICT,
) -> ValidationResult:
    """Validate a string against a pattern without raising.

    Args:
        value: Candidate input
        pattern: Pattern string or compiled pattern (default: ISO "uuuu-MM-dd")
        resolver_style: Resolution policy (default: STRICT)

    Returns:
        ValidationResult; its errors explain a rejection

    Example:
        >>> validate("1974-11-14").is_valid
        True
        >>> validate("11/14/1974").error_count
        1
    """
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_type_invalid(  # type: ignore[unreachable]
            type(value).__name__, "date"
        )
        return ValidationResult.invalid((diagnostic,))

    try:
        resolve_formatter(pattern, ISO_LOCAL_DATE, resolver_style).parse(value)
    except TimeLexError as error:
        assert error.diagnostic is not None  # Type narrowing: engine errors carry diagnostics
        return ValidationResult.invalid((error.diagnostic,))
    return ValidationResult.valid()


def is_valid(
    value: str,
    pattern: str | CompiledPattern | None = None,
    *,
    resolver_style: ResolverStyle = ResolverStyle.STRICT,
) -> bool:
    """Boolean view of validate()."""
    return validate(value, pattern, resolver_style=resolver_style).is_valid
