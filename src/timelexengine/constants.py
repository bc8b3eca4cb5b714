"""Shared constants for TimeLexEngine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for memoized formatters
- Calendar limits: Supported year range and field widths
- Defaults: Name table locale and two-digit year base

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_INPUT_LENGTH",
    "MAX_PATTERN_LENGTH",
    # Cache limits
    "PATTERN_CACHE_SIZE",
    "STYLE_CACHE_SIZE",
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_YEAR_DIGITS",
    "MAX_FRACTION_DIGITS",
    # Defaults
    "DEFAULT_LOCALE",
    "TWO_DIGIT_YEAR_BASE",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum text length accepted by parse().
# Parsing is linear, but unbounded input still costs memory and error context.
MAX_INPUT_LENGTH: int = 1024

# Maximum pattern length accepted by compile_pattern().
MAX_PATTERN_LENGTH: int = 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized DateTimeFormatter instances (keyed by pattern, style, table).
PATTERN_CACHE_SIZE: int = 256

# Maximum memoized StyleTable instances built from CLDR data.
STYLE_CACHE_SIZE: int = 16

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

# Supported proleptic year range (astronomical numbering, year 0 exists).
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Digits needed for the widest year value.
MAX_YEAR_DIGITS: int = 9

# Nanosecond precision.
MAX_FRACTION_DIGITS: int = 9

# ============================================================================
# DEFAULTS
# ============================================================================

# Locale whose CLDR names populate the default StyleTable.
DEFAULT_LOCALE: str = "en"

# Reduced two-digit years map into [TWO_DIGIT_YEAR_BASE, TWO_DIGIT_YEAR_BASE + 99].
TWO_DIGIT_YEAR_BASE: int = 2000
