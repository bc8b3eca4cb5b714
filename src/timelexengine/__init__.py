"""TimeLexEngine - pattern-driven date/time parsing and formatting.

Compiles date/time pattern strings ("MM/dd/uuuu HH:mm") into immutable
directive sequences, parses text in two phases (lexical field
extraction, then calendar resolution under STRICT, SMART or LENIENT
policy), and formats values back through the same patterns.

Public API:
    DateTimeFormatter - Compiled pattern + resolver style + style table
    DateTimeValue - Timezone-less value with optional fields
    ResolverStyle - STRICT / SMART / LENIENT resolution policy
    compile_pattern - Pattern string to CompiledPattern
    parse_text - Parse text with a pattern in one call
    format_value - Format a value with a pattern in one call
    ISO_LOCAL_DATE, ISO_LOCAL_TIME, ISO_LOCAL_DATE_TIME, BASIC_ISO_DATE -
        Predefined STRICT formatters

Exceptions:
    TimeLexError - Base exception class
    PatternError - Malformed pattern
    ParseError - Text does not match the pattern
    ResolutionError - Fields do not form a valid value
    FormatError - Value cannot be rendered

Submodules:
    timelexengine.syntax - Pattern compiler, directives, serializer
    timelexengine.runtime - Extractor, resolver, printer, style tables
    timelexengine.parsing - Non-raising parse and validation API
    timelexengine.diagnostics - Error types, codes and formatters
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    FormatError,
    ParseError,
    PatternError,
    ResolutionError,
    TimeLexError,
)
from .enums import ResolverStyle
from .runtime import (
    BASIC_ISO_DATE,
    ISO_LOCAL_DATE,
    ISO_LOCAL_DATE_TIME,
    ISO_LOCAL_TIME,
    DateTimeFormatter,
    DateTimeValue,
    StyleTable,
    format_value,
    parse_text,
)
from .syntax import CompiledPattern, compile_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("timelexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BASIC_ISO_DATE",
    "ISO_LOCAL_DATE",
    "ISO_LOCAL_DATE_TIME",
    "ISO_LOCAL_TIME",
    "CompiledPattern",
    "DateTimeFormatter",
    "DateTimeValue",
    "FormatError",
    "ParseError",
    "PatternError",
    "ResolutionError",
    "ResolverStyle",
    "StyleTable",
    "TimeLexError",
    "__version__",
    "compile_pattern",
    "format_value",
    "parse_text",
]
