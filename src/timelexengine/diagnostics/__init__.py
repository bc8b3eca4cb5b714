"""Diagnostic system for TimeLexEngine errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    FormatError,
    ParseError,
    PatternError,
    ResolutionError,
    TimeLexError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatError",
    "OutputFormat",
    "ParseError",
    "PatternError",
    "ResolutionError",
    "SourceSpan",
    "TimeLexError",
    "ValidationResult",
]
