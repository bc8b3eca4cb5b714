"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization by engine stage.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PATTERN: Malformed pattern string (compilation)
        PARSE: Input text does not lexically match the pattern (phase 1)
        RESOLUTION: Parsed fields are not a valid calendar value (phase 2)
        FORMAT: Value cannot be rendered with the pattern
    """

    PATTERN = "pattern"
    PARSE = "parse"
    RESOLUTION = "resolution"
    FORMAT = "format"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (compilation)
        2000-2999: Parse errors (lexical field extraction)
        3000-3999: Resolution errors (calendar validation)
        4000-4999: Format errors
    """

    # Pattern errors (1000-1999)
    PATTERN_UNKNOWN_LETTER = 1001
    PATTERN_UNTERMINATED_QUOTE = 1002
    PATTERN_INVALID_WIDTH = 1003
    PATTERN_TOO_LONG = 1004

    # Parse errors (2000-2999)
    PARSE_LITERAL_MISMATCH = 2001
    PARSE_LENGTH_MISMATCH = 2002
    PARSE_FIELD_CONFLICT = 2003
    PARSE_DIGITS_EXPECTED = 2004
    PARSE_TEXT_UNRECOGNIZED = 2005
    PARSE_INPUT_TOO_LONG = 2006
    PARSE_TYPE_INVALID = 2007
    PARSE_SIGN_UNEXPECTED = 2008

    # Resolution errors (3000-3999)
    RESOLUTION_VALUE_INVALID = 3001
    RESOLUTION_FIELD_CONFLICT = 3002
    RESOLUTION_WEEKDAY_MISMATCH = 3003
    RESOLUTION_CARRY_UNSUPPORTED = 3004
    RESOLUTION_FIELD_MISSING = 3005
    RESOLUTION_YEAR_UNSUPPORTED = 3006

    # Format errors (4000-4999)
    FORMAT_FIELD_MISSING = 4001
    FORMAT_TYPE_INVALID = 4002

    @property
    def category(self) -> ErrorCategory:
        """Stage that produces this code, derived from the numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.PATTERN
            case 2:
                return ErrorCategory.PARSE
            case 3:
                return ErrorCategory.RESOLUTION
            case _:
                return ErrorCategory.FORMAT


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Character range inside a pattern or input string.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides enough context (field
    kind, character position) for callers to build validators and
    readable error reports.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Position in the pattern or input (None when not positional)
        hint: Suggestion for fixing the error
        field_kind: Field involved in the error (string form of FieldKind)
        source: Pattern or input text the span points into
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    field_kind: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PARSE_LITERAL_MISMATCH]: Expected '/' at position 1, found '-'
              --> position 1
              = field: month
              = help: Check the separators in the input against the pattern

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
