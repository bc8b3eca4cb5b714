"""Immutable cursor infrastructure for pattern and input scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)

Both the pattern compiler and the phase 1 field extractor walk their
text with this cursor, so positions reported in diagnostics always mean
the same thing: a 0-indexed character offset.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]

_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("2022-09-30", 0)
        >>> cursor.current
        '2'
        >>> cursor.advance(4).current
        '-'
        >>> cursor.pos  # Original unchanged (immutability)
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source substring from current position to end_pos
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Args:
            n: Number of characters to get

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    @property
    def remaining(self) -> int:
        """Number of characters left before EOF."""
        return max(0, len(self.source) - self.pos)

    def run_length(self, char: str) -> int:
        """Count consecutive occurrences of char starting at the cursor.

        Example:
            >>> Cursor("uuuu-MM", 0).run_length("u")
            4
        """
        end = self.pos
        n = len(self.source)
        while end < n and self.source[end] == char:
            end += 1
        return end - self.pos

    def digit_run(self, limit: int) -> int:
        """Count consecutive ASCII digits starting at the cursor, up to limit.

        Only 0-9 count; other Unicode decimal digits are rejected so that
        int() never sees characters the pattern language does not allow.

        Example:
            >>> Cursor("20221014", 0).digit_run(4)
            4
        """
        end = self.pos
        stop = min(len(self.source), self.pos + limit)
        while end < stop and self.source[end] in _ASCII_DIGITS:
            end += 1
        return end - self.pos


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing a decoded value and the new cursor position.

    Type Parameters:
        T: The type of the decoded value

    Example:
        >>> cursor = Cursor("09/30", 0)
        >>> result = ParseResult(9, cursor.advance(2))
        >>> result.value
        9
        >>> result.cursor.current
        '/'
    """

    value: T
    cursor: Cursor
