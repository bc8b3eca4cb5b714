"""Tests for name tables and the style table."""

import pytest

from timelexengine.enums import FieldKind, Presentation, TextStyle
from timelexengine.runtime.names import (
    NameTable,
    StyleTable,
    cldr_style_table,
    default_style_table,
)
from timelexengine.syntax import Field


class TestNameTable:
    """Test NameTable lookup and matching."""

    def test_name_of(self) -> None:
        """Values map to names from first_value."""
        table = NameTable(("AM", "PM"), ("AM", "PM"), first_value=0)
        assert table.name_of(1, TextStyle.SHORT) == "PM"
        assert table.last_value == 1

    def test_name_of_out_of_range(self) -> None:
        """Values outside the table raise ValueError."""
        table = NameTable(("Jan",), ("January",))
        with pytest.raises(ValueError, match="No name for value"):
            table.name_of(2, TextStyle.SHORT)

    def test_match_longest(self) -> None:
        """match() prefers the longest name at the position."""
        table = NameTable(("Ma", "May"), ("Ma", "May"))
        assert table.match("May 1", 0, TextStyle.SHORT) == (2, 3)

    def test_match_at_offset(self) -> None:
        """match() starts at the given position."""
        table = NameTable(("Jun", "Jul"), ("June", "July"))
        assert table.match("4 July", 2, TextStyle.FULL) == (2, 4)
        assert table.match("4 July", 0, TextStyle.FULL) is None

    def test_match_case_insensitive(self) -> None:
        """case_insensitive compares casefolded text."""
        table = NameTable(("Jun",), ("June",))
        assert table.match("JUNE", 0, TextStyle.FULL) is None
        assert table.match("JUNE", 0, TextStyle.FULL, case_insensitive=True) == (1, 4)

    @pytest.mark.parametrize(
        ("short", "full"),
        [((), ()), (("a",), ("a", "b")), (("",), ("x",))],
    )
    def test_invalid_tables(self, short: tuple[str, ...], full: tuple[str, ...]) -> None:
        """Empty, unequal or blank tables are rejected."""
        with pytest.raises(ValueError):
            NameTable(short, full)


class TestStyleTable:
    """Test presentation and text style decisions."""

    def test_cldr_names(self) -> None:
        """Default table carries English CLDR names."""
        table = default_style_table()
        assert table.months.names(TextStyle.FULL)[0] == "January"
        assert table.months.name_of(9, TextStyle.SHORT) == "Sep"
        assert table.weekdays.name_of(1, TextStyle.FULL) == "Monday"
        assert table.weekdays.name_of(7, TextStyle.SHORT) == "Sun"
        assert table.day_periods.name_of(0, TextStyle.SHORT) == "AM"

    @pytest.mark.parametrize(
        ("field", "presentation"),
        [
            (Field(FieldKind.YEAR, 2, "y"), Presentation.REDUCED_YEAR),
            (Field(FieldKind.YEAR, 4, "u"), Presentation.NUMBER),
            (Field(FieldKind.MONTH, 2, "M"), Presentation.NUMBER),
            (Field(FieldKind.MONTH, 3, "M"), Presentation.TEXT),
            (Field(FieldKind.DAY_OF_WEEK, 1, "E"), Presentation.TEXT),
            (Field(FieldKind.AMPM_OF_DAY, 1, "a"), Presentation.TEXT),
            (Field(FieldKind.NANO_OF_SECOND, 3, "S"), Presentation.FRACTION),
            (Field(FieldKind.NANO_OF_SECOND, 3, "n"), Presentation.NUMBER),
        ],
    )
    def test_presentation(self, field: Field, presentation: Presentation) -> None:
        """Presentation depends on kind, letter and width."""
        assert default_style_table().presentation(field) is presentation

    def test_text_style_thresholds(self) -> None:
        """Default thresholds: short below 5, full from 5."""
        table = default_style_table()
        assert table.text_style(Field(FieldKind.MONTH, 4, "M")) is TextStyle.SHORT
        assert table.text_style(Field(FieldKind.MONTH, 5, "M")) is TextStyle.FULL

    def test_cldr_thresholds(self) -> None:
        """CLDR thresholds: full from 4."""
        table = cldr_style_table()
        assert table.full_text_width == 4
        assert table.text_style(Field(FieldKind.DAY_OF_WEEK, 4, "E")) is TextStyle.FULL

    def test_ampm_always_short(self) -> None:
        """The AM/PM marker is always short."""
        table = default_style_table().with_text_widths(full_text_width=1)
        assert table.text_style(Field(FieldKind.AMPM_OF_DAY, 1, "a")) is TextStyle.SHORT

    def test_with_text_widths(self) -> None:
        """Raising text_width makes MMM numeric."""
        table = default_style_table().with_text_widths(text_width=4)
        assert table.presentation(Field(FieldKind.MONTH, 3, "M")) is Presentation.NUMBER

    def test_invalid_thresholds(self) -> None:
        """full_text_width below text_width is rejected."""
        with pytest.raises(ValueError, match="full_text_width"):
            default_style_table().with_text_widths(text_width=4, full_text_width=3)

    def test_names_for_numeric_kind(self) -> None:
        """Numeric kinds have no name table."""
        with pytest.raises(ValueError, match="no name table"):
            default_style_table().names_for(FieldKind.HOUR_OF_DAY)

    def test_from_locale_is_cached(self) -> None:
        """Same arguments return the same table."""
        assert StyleTable.from_locale("en") is StyleTable.from_locale("en")
        assert StyleTable.from_locale() == default_style_table()
