"""Tests for pattern serialization.

Roundtrip property: compile -> serialize -> compile yields equal directives.
"""

from hypothesis import given

from timelexengine.enums import FieldKind
from timelexengine.syntax import CompiledPattern, Field, Literal, compile_pattern, serialize_pattern

from tests.strategies import literal_texts, valid_patterns


class TestSerializePattern:
    """Test serialize_pattern() output."""

    def test_plain_pattern_unchanged(self) -> None:
        """Patterns without quoting serialize byte-identically."""
        assert serialize_pattern(compile_pattern("MM/dd/uuuu HH:mm")) == "MM/dd/uuuu HH:mm"

    def test_letters_in_literal_are_quoted(self) -> None:
        """Literal text with letters is wrapped in quotes."""
        assert serialize_pattern(compile_pattern("uuuu-MM-dd'T'HH")) == "uuuu-MM-dd'T'HH"
        assert serialize_pattern(compile_pattern("HH' h'-mm")) == "HH' h-'mm"

    def test_quote_in_literal_is_doubled(self) -> None:
        """A literal quote serializes as ''."""
        assert serialize_pattern(compile_pattern("HH''mm")) == "HH''mm"

    def test_redundant_quoting_dropped(self) -> None:
        """Quotes around punctuation are not needed."""
        assert serialize_pattern(compile_pattern("'-'dd")) == "-dd"

    def test_str_uses_serializer(self) -> None:
        """str(CompiledPattern) is the serialized pattern."""
        compiled = CompiledPattern((Field(FieldKind.HOUR_OF_DAY, 2, "H"), Literal("h")))
        assert str(compiled) == "HH'h'"


class TestSerializeRoundtrip:
    """Property-based roundtrip tests."""

    @given(valid_patterns())
    def test_roundtrip_valid_patterns(self, pattern: str) -> None:
        """Serialized pattern compiles to the same directives."""
        compiled = compile_pattern(pattern)
        assert compile_pattern(serialize_pattern(compiled)).directives == compiled.directives

    @given(literal_texts())
    def test_roundtrip_any_literal(self, text: str) -> None:
        """Any literal text survives serialization between two fields."""
        compiled = CompiledPattern(
            (
                Field(FieldKind.HOUR_OF_DAY, 2, "H"),
                Literal(text),
                Field(FieldKind.MINUTE_OF_HOUR, 2, "m"),
            )
        )
        assert compile_pattern(serialize_pattern(compiled)).directives == compiled.directives
