"""Validation result for parse-based input validation.

A validator wraps parse() and turns any engine error into a structured,
non-raising result. The boolean view is ``ValidationResult.is_valid``.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of validating one input string.

    Attributes:
        errors: Diagnostics explaining why the input is invalid

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[Diagnostic, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were recorded."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of recorded errors."""
        return len(self.errors)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors.

        Returns:
            ValidationResult with an empty error tuple
        """
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[Diagnostic, ...]) -> "ValidationResult":
        """Create an invalid result.

        Args:
            errors: Diagnostics describing the failure

        Returns:
            ValidationResult holding the diagnostics
        """
        return ValidationResult(errors=errors)

    def format(self, *, sanitize: bool = False) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate long messages and omit the input echo.

        Returns:
            Summary line followed by one block per error.
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter(sanitize=sanitize).format_validation_result(self)
