"""TimeLexEngine exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every error is locally recoverable: none of them indicates corrupted
engine state, so callers may catch and continue.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TimeLexError(Exception):
    """Base exception for all TimeLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TimeLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def position(self) -> int | None:
        """Character offset of the error, when the diagnostic has one."""
        if self.diagnostic is not None and self.diagnostic.span is not None:
            return self.diagnostic.span.start
        return None

    @property
    def field_kind(self) -> str | None:
        """Field involved in the error, when the diagnostic names one."""
        if self.diagnostic is not None:
            return self.diagnostic.field_kind
        return None


class PatternError(TimeLexError):
    """Malformed pattern string.

    Raised only by pattern compilation, never by parse or format.
    """


class ParseError(TimeLexError):
    """Input text does not lexically match the compiled pattern.

    Raised during phase 1 (field extraction), before any resolution.

    Attributes:
        input_value: The text that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
        """
        super().__init__(message)
        self.input_value = input_value


class ResolutionError(TimeLexError):
    """Lexically valid fields that do not form a valid date/time.

    Raised during phase 2 under STRICT or SMART policy, when LENIENT
    cannot carry into an absent field, and when a caller asks a
    DateTimeValue for fields it does not hold.
    """


class FormatError(TimeLexError):
    """A value cannot be rendered with the pattern.

    Raised when a directive needs a field that is unset on the value.
    """
