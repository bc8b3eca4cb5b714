"""Name tables and the style table that drives textual fields.

The StyleTable answers two questions for every Field at parse/format time:
which Presentation applies (digits, reduced year, fraction, or text), and
for text, which names and which TextStyle. Width thresholds live here
rather than in the compiler so compilation stays a pure function of the
pattern string.

Default thresholds for the month letter (M/L):
    Width | Presentation | Example
    ------|--------------|--------
    1-2   | Number       | 9, 09
    3-4   | Short text   | Sep
    5+    | Full text    | September

The weekday letter (E) is always text: short below full_text_width,
full from it. cldr_style_table() uses the CLDR convention instead, where
width 4 already selects the full name.

Names come from Babel's CLDR data for DEFAULT_LOCALE. Localized name
tables are not a supported configuration.

Python 3.13+. Uses Babel for CLDR name data.
"""

import functools
import logging
from dataclasses import dataclass, replace

from timelexengine.constants import DEFAULT_LOCALE, STYLE_CACHE_SIZE
from timelexengine.enums import FieldKind, Presentation, TextStyle
from timelexengine.locale_utils import get_babel_locale, normalize_locale
from timelexengine.syntax.ast import Field

__all__ = [
    "NameTable",
    "StyleTable",
    "cldr_style_table",
    "default_style_table",
]

logger = logging.getLogger(__name__)

# Width at which CLDR switches from abbreviated to wide names.
_CLDR_FULL_TEXT_WIDTH: int = 4


@dataclass(frozen=True, slots=True)
class NameTable:
    """Short and full names for consecutive field values.

    Attributes:
        short: Abbreviated names, index 0 = first_value
        full: Full names, same order as short
        first_value: Field value of the first name (1 for months, 0 for AM)
    """

    short: tuple[str, ...]
    full: tuple[str, ...]
    first_value: int = 1

    def __post_init__(self) -> None:
        """Validate table shape.

        Raises:
            ValueError: If the tuples differ in length, are empty, or
                contain empty names.
        """
        if len(self.short) != len(self.full):
            msg = f"short and full names differ in length ({len(self.short)} != {len(self.full)})"
            raise ValueError(msg)
        if not self.short:
            msg = "NameTable must contain at least one name"
            raise ValueError(msg)
        if not all(self.short) or not all(self.full):
            msg = "NameTable names must not be empty"
            raise ValueError(msg)

    @property
    def last_value(self) -> int:
        return self.first_value + len(self.short) - 1

    def names(self, style: TextStyle) -> tuple[str, ...]:
        return self.full if style is TextStyle.FULL else self.short

    def name_of(self, value: int, style: TextStyle) -> str:
        """Name for a field value.

        Raises:
            ValueError: If value is outside the table
        """
        if not self.first_value <= value <= self.last_value:
            msg = f"No name for value {value} (table covers {self.first_value} - {self.last_value})"
            raise ValueError(msg)
        return self.names(style)[value - self.first_value]

    def match(
        self,
        text: str,
        pos: int,
        style: TextStyle,
        *,
        case_insensitive: bool = False,
    ) -> tuple[int, int] | None:
        """Find the longest name starting at pos.

        Args:
            text: Input text
            pos: Offset to match at
            style: Which names to try
            case_insensitive: Compare with str.casefold()

        Returns:
            (field value, matched length), or None if no name matches

        Example:
            >>> table = NameTable(("Jun", "Jul"), ("June", "July"))
            >>> table.match("July 4", 0, TextStyle.FULL)
            (2, 4)
        """
        best: tuple[int, int] | None = None
        for index, name in enumerate(self.names(style)):
            candidate = text[pos : pos + len(name)]
            if candidate == name or (
                case_insensitive and candidate.casefold() == name.casefold()
            ):
                if best is None or len(name) > best[1]:
                    best = (index + self.first_value, len(name))
        return best


@dataclass(frozen=True, slots=True)
class StyleTable:
    """Configuration for field presentation and name lookup.

    Attributes:
        months: Month names, values 1-12
        weekdays: Weekday names, values 1-7 (1 = Monday)
        day_periods: AM/PM markers, values 0-1
        text_width: Month width at which text replaces digits (default: 3)
        full_text_width: Width at which full names replace short names (default: 5)
        case_insensitive: Match names ignoring case when parsing (default: False)

    Example:
        >>> table = default_style_table()
        >>> table.months.name_of(9, TextStyle.SHORT)
        'Sep'
        >>> table.with_text_widths(full_text_width=4).full_text_width
        4
    """

    months: NameTable
    weekdays: NameTable
    day_periods: NameTable
    text_width: int = 3
    full_text_width: int = 5
    case_insensitive: bool = False

    def __post_init__(self) -> None:
        """Validate thresholds at construction time.

        Raises:
            ValueError: If text_width is below 1 or full_text_width is
                below text_width.
        """
        if self.text_width < 1:
            msg = f"text_width must be >= 1, got {self.text_width}"
            raise ValueError(msg)
        if self.full_text_width < self.text_width:
            msg = (
                f"full_text_width ({self.full_text_width}) must be >= "
                f"text_width ({self.text_width})"
            )
            raise ValueError(msg)

    @classmethod
    def from_locale(
        cls,
        locale_code: str = DEFAULT_LOCALE,
        *,
        text_width: int = 3,
        full_text_width: int = 5,
        case_insensitive: bool = False,
    ) -> "StyleTable":
        """Build a style table from Babel CLDR names.

        Results are cached per argument combination.

        Raises:
            babel.core.UnknownLocaleError: If locale is not recognized
        """
        return _cldr_table(
            normalize_locale(locale_code), text_width, full_text_width, case_insensitive
        )

    def with_text_widths(
        self, *, text_width: int | None = None, full_text_width: int | None = None
    ) -> "StyleTable":
        """Copy with different width thresholds."""
        return replace(
            self,
            text_width=self.text_width if text_width is None else text_width,
            full_text_width=self.full_text_width if full_text_width is None else full_text_width,
        )

    def presentation(self, field: Field) -> Presentation:
        """How a field is rendered and read."""
        match field.kind:
            case FieldKind.YEAR:
                return Presentation.REDUCED_YEAR if field.width == 2 else Presentation.NUMBER
            case FieldKind.MONTH:
                return Presentation.TEXT if field.width >= self.text_width else Presentation.NUMBER
            case FieldKind.DAY_OF_WEEK | FieldKind.AMPM_OF_DAY:
                return Presentation.TEXT
            case FieldKind.NANO_OF_SECOND if field.letter == "S":
                return Presentation.FRACTION
            case _:
                return Presentation.NUMBER

    def text_style(self, field: Field) -> TextStyle:
        """Short or full names for a textual field."""
        if field.kind is FieldKind.AMPM_OF_DAY:
            return TextStyle.SHORT
        return TextStyle.FULL if field.width >= self.full_text_width else TextStyle.SHORT

    def names_for(self, kind: FieldKind) -> NameTable:
        """Name table for a textual field kind.

        Raises:
            ValueError: If the kind has no names
        """
        match kind:
            case FieldKind.MONTH:
                return self.months
            case FieldKind.DAY_OF_WEEK:
                return self.weekdays
            case FieldKind.AMPM_OF_DAY:
                return self.day_periods
            case _:
                msg = f"Field kind {kind} has no name table"
                raise ValueError(msg)


@functools.lru_cache(maxsize=STYLE_CACHE_SIZE)
def _cldr_table(
    locale_code: str, text_width: int, full_text_width: int, case_insensitive: bool
) -> StyleTable:
    locale = get_babel_locale(locale_code)
    month_names = locale.months["format"]
    day_names = locale.days["format"]
    periods = locale.day_periods["format"]

    # Babel numbers weekdays 0 = Monday; field values are ISO (1 = Monday).
    months = NameTable(
        short=tuple(month_names["abbreviated"][m] for m in range(1, 13)),
        full=tuple(month_names["wide"][m] for m in range(1, 13)),
    )
    weekdays = NameTable(
        short=tuple(day_names["abbreviated"][d] for d in range(7)),
        full=tuple(day_names["wide"][d] for d in range(7)),
    )
    day_periods = NameTable(
        short=(periods["abbreviated"]["am"], periods["abbreviated"]["pm"]),
        full=(periods["wide"]["am"], periods["wide"]["pm"]),
        first_value=0,
    )
    logger.debug("Built style table from CLDR names for locale: %s", locale_code)
    return StyleTable(
        months=months,
        weekdays=weekdays,
        day_periods=day_periods,
        text_width=text_width,
        full_text_width=full_text_width,
        case_insensitive=case_insensitive,
    )


def default_style_table() -> StyleTable:
    """Style table with default thresholds (short at 3-4, full at 5+)."""
    return StyleTable.from_locale()


def cldr_style_table() -> StyleTable:
    """Style table with CLDR thresholds (short at 3, full at 4+)."""
    return StyleTable.from_locale(full_text_width=_CLDR_FULL_TEXT_WIDTH)
