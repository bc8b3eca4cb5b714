"""Compiled pattern node definitions.

A pattern compiles to an ordered, immutable sequence of directives.
Includes type guards as static methods (eliminates isinstance noise at
call sites).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeIs

from timelexengine.enums import FieldKind

__all__ = [
    "CompiledPattern",
    "Directive",
    "Field",
    "Literal",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Text that must appear verbatim in parsed input.

    Attributes:
        text: Unescaped literal text (quotes already removed)

    Example:
        Pattern "MM/dd" compiles "/" to Literal(text="/")
    """

    text: str

    def __post_init__(self) -> None:
        """Validate literal invariants."""
        if not self.text:
            msg = "Literal text must not be empty"
            raise ValueError(msg)

    @staticmethod
    def guard(directive: object) -> TypeIs["Literal"]:
        """Type guard for Literal directives."""
        return isinstance(directive, Literal)


@dataclass(frozen=True, slots=True)
class Field:
    """Typed calendar field read from or written to text.

    Attributes:
        kind: Calendar component this field carries
        width: Repetition count of the pattern letter
        letter: Pattern letter as written (keeps 'u' vs 'y', 'n' vs 'S')

    Example:
        Pattern "uuuu" compiles to Field(kind=FieldKind.YEAR, width=4, letter="u")
    """

    kind: FieldKind
    width: int
    letter: str

    def __post_init__(self) -> None:
        """Validate field invariants."""
        if self.width < 1:
            msg = f"Field width must be >= 1, got {self.width}"
            raise ValueError(msg)

    @property
    def symbol(self) -> str:
        """Pattern text for this field (letter repeated width times)."""
        return self.letter * self.width

    @staticmethod
    def guard(directive: object) -> TypeIs["Field"]:
        """Type guard for Field directives."""
        return isinstance(directive, Field)


Directive = Literal | Field


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Ordered, immutable directive sequence built from a pattern string.

    Safe to share between threads: nothing on it ever changes after
    construction, and parse/format keep their working state local.

    Attributes:
        directives: Directives in pattern order
        source: Pattern string the directives were compiled from
    """

    directives: tuple[Directive, ...]
    source: str = ""

    def __iter__(self) -> Iterator[Directive]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self.directives)

    def __str__(self) -> str:
        from .serializer import serialize_pattern  # noqa: PLC0415 - circular

        return serialize_pattern(self)

    @property
    def fields(self) -> tuple[Field, ...]:
        """Field directives in pattern order."""
        return tuple(d for d in self.directives if Field.guard(d))

    @property
    def field_kinds(self) -> frozenset[FieldKind]:
        """Distinct field kinds the pattern reads or writes."""
        return frozenset(f.kind for f in self.fields)
