"""DateTimeFormatter: compiled pattern + resolver style + style table.

The formatter is the unit callers share. It is immutable, so one
instance may parse and format from any number of threads at once; all
working state of a call lives on that call's stack.

    >>> formatter = DateTimeFormatter.of_pattern("MM/dd/uuuu HH:mm")
    >>> str(formatter.parse("09/31/2022 12:00"))
    '2022-09-30T12:00'
    >>> formatter.format(formatter.parse("09/14/2022 08:05"))
    '09/14/2022 08:05'

Python 3.13+.
"""

import functools
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time

from timelexengine.constants import PATTERN_CACHE_SIZE
from timelexengine.enums import ResolverStyle
from timelexengine.syntax.ast import CompiledPattern
from timelexengine.syntax.compiler import compile_pattern

from .extractor import extract_fields
from .names import StyleTable, default_style_table
from .printer import format_fields
from .resolver import resolve_fields
from .value_types import DateTimeValue, RawFieldSet

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "DateTimeFormatter",
    # Predefined formatters
    "ISO_LOCAL_DATE",
    "ISO_LOCAL_TIME",
    "ISO_LOCAL_DATE_TIME",
    "BASIC_ISO_DATE",
    # Functions
    "parse_text",
    "format_value",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DateTimeFormatter:
    """Immutable parser/printer for one pattern.

    Attributes:
        pattern: Compiled pattern
        resolver_style: Policy for out-of-range values (default: SMART)
        styles: Presentation and name configuration; None selects
            default_style_table() on first use

    Example:
        >>> formatter = DateTimeFormatter.of_pattern("uuuu-MM-dd")
        >>> formatter.with_resolver_style(ResolverStyle.STRICT).resolver_style
        <ResolverStyle.STRICT: 'strict'>
    """

    pattern: CompiledPattern
    resolver_style: ResolverStyle = ResolverStyle.SMART
    styles: StyleTable | None = None

    @classmethod
    def of_pattern(
        cls,
        pattern: str | CompiledPattern,
        *,
        resolver_style: ResolverStyle = ResolverStyle.SMART,
        styles: StyleTable | None = None,
    ) -> "DateTimeFormatter":
        """Build a formatter from a pattern string or compiled pattern.

        String patterns are memoized: repeated calls with the same
        arguments return the same formatter without recompiling.

        Raises:
            PatternError: If the pattern string is malformed
        """
        if isinstance(pattern, CompiledPattern):
            return cls(pattern, resolver_style, styles)
        return _cached_formatter(pattern, resolver_style, styles)

    @property
    def style_table(self) -> StyleTable:
        """Style table in effect (the default table when styles is None)."""
        return default_style_table() if self.styles is None else self.styles

    def with_resolver_style(self, resolver_style: ResolverStyle) -> "DateTimeFormatter":
        """Copy with a different resolver style."""
        return replace(self, resolver_style=resolver_style)

    def with_styles(self, styles: StyleTable) -> "DateTimeFormatter":
        """Copy with a different style table."""
        return replace(self, styles=styles)

    def parse_fields(self, text: str) -> RawFieldSet:
        """Run phase 1 only.

        Raises:
            ParseError: If text does not lexically match the pattern
        """
        return extract_fields(text, self.pattern, self.style_table)

    def parse(self, text: str) -> DateTimeValue:
        """Parse text into a resolved value.

        Raises:
            ParseError: If text does not lexically match the pattern
            ResolutionError: If the fields do not form a valid value under
                the resolver style
        """
        return resolve_fields(self.parse_fields(text), self.resolver_style)

    def format(self, value: DateTimeValue | date | time | datetime) -> str:
        """Render a value with this formatter's pattern.

        Raises:
            FormatError: If the pattern needs a field the value lacks
        """
        return format_fields(value, self.pattern, self.style_table)

    def __str__(self) -> str:
        return f"{self.pattern}[{self.resolver_style}]"


@functools.lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _cached_formatter(
    pattern: str, resolver_style: ResolverStyle, styles: StyleTable | None
) -> DateTimeFormatter:
    compiled = compile_pattern(pattern)
    logger.debug("Compiled formatter for pattern %r (%s)", pattern, resolver_style)
    return DateTimeFormatter(compiled, resolver_style, styles)


ISO_LOCAL_DATE = DateTimeFormatter.of_pattern("uuuu-MM-dd", resolver_style=ResolverStyle.STRICT)
ISO_LOCAL_TIME = DateTimeFormatter.of_pattern("HH:mm:ss", resolver_style=ResolverStyle.STRICT)
ISO_LOCAL_DATE_TIME = DateTimeFormatter.of_pattern(
    "uuuu-MM-dd'T'HH:mm:ss", resolver_style=ResolverStyle.STRICT
)
BASIC_ISO_DATE = DateTimeFormatter.of_pattern("uuuuMMdd", resolver_style=ResolverStyle.STRICT)


def parse_text(
    text: str,
    pattern: str | CompiledPattern,
    style: ResolverStyle = ResolverStyle.SMART,
    styles: StyleTable | None = None,
) -> DateTimeValue:
    """Parse text with a pattern in one call.

    Args:
        text: Input text
        pattern: Pattern string or compiled pattern
        style: Resolver style (default: SMART)
        styles: Style table (default: default_style_table())

    Returns:
        Resolved value; fields the pattern does not contain are unset

    Raises:
        PatternError: If the pattern string is malformed
        ParseError: If text does not lexically match the pattern
        ResolutionError: If the fields do not resolve under the style

    Example:
        >>> str(parse_text("09/31/2022 12:00", "MM/dd/uuuu HH:mm", ResolverStyle.LENIENT))
        '2022-10-01T12:00'
    """
    return DateTimeFormatter.of_pattern(pattern, resolver_style=style, styles=styles).parse(text)


def format_value(
    value: DateTimeValue | date | time | datetime,
    pattern: str | CompiledPattern,
    styles: StyleTable | None = None,
) -> str:
    """Render a value with a pattern in one call.

    Raises:
        PatternError: If the pattern string is malformed
        FormatError: If the pattern needs a field the value lacks

    Example:
        >>> format_value(date(2022, 9, 30), "dd MMMMM uuuu")
        '30 September 2022'
    """
    return DateTimeFormatter.of_pattern(pattern, styles=styles).format(value)
