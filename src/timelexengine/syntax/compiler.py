"""Pattern compiler: pattern string -> CompiledPattern.

Pattern language (subset of the Unicode CLDR date field symbols):
    Letter | Field              | Widths | Example
    -------|--------------------|--------|--------
    u, y   | Year               | 1-9    | 2022, 22 (width 2 = reduced year)
    M, L   | Month              | 1+     | 9, 09, Sep, September
    d      | Day of month       | 1-2    | 30
    E      | Day of week (text) | 1+     | Fri, Friday
    H      | Hour 0-23          | 1-2    | 16
    h      | Clock hour 1-12    | 1-2    | 4
    a      | AM/PM marker       | 1      | PM
    m      | Minute             | 1-2    | 21
    s      | Second             | 1-2    | 05
    n      | Nanosecond         | 1-9    | 500000000
    S      | Fraction of second | 1-9    | 5, 500

Quote escaping:
    - Single quotes delimit literal text: 'T' -> "T"
    - Two consecutive single quotes '' produce a literal single quote,
      inside or outside a quoted section: 'o''clock' -> "o'clock"

Any other ASCII letter outside quotes is an error. Every non-letter
character is literal text. Adjacent literal pieces merge into one
Literal directive.

Compilation is a pure function of the pattern string; how a field is
presented (numeric or text, short or full) is decided at parse/format
time by the StyleTable.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from timelexengine.constants import MAX_FRACTION_DIGITS, MAX_PATTERN_LENGTH, MAX_YEAR_DIGITS
from timelexengine.diagnostics import ErrorTemplate, PatternError
from timelexengine.enums import FieldKind

from .ast import CompiledPattern, Directive, Field, Literal
from .cursor import Cursor, ParseResult

__all__ = ["PATTERN_LETTERS", "compile_pattern"]

_QUOTE = "'"


@dataclass(frozen=True, slots=True)
class _Symbol:
    """Compile-time rules for one pattern letter."""

    kind: FieldKind
    max_width: int | None = None

    @property
    def allowed(self) -> str:
        if self.max_width is None:
            return "1 or more"
        if self.max_width == 1:
            return "1"
        return f"1-{self.max_width}"


_SYMBOLS: dict[str, _Symbol] = {
    "u": _Symbol(FieldKind.YEAR, MAX_YEAR_DIGITS),
    "y": _Symbol(FieldKind.YEAR, MAX_YEAR_DIGITS),
    "M": _Symbol(FieldKind.MONTH),
    "L": _Symbol(FieldKind.MONTH),
    "d": _Symbol(FieldKind.DAY_OF_MONTH, 2),
    "E": _Symbol(FieldKind.DAY_OF_WEEK),
    "H": _Symbol(FieldKind.HOUR_OF_DAY, 2),
    "h": _Symbol(FieldKind.CLOCK_HOUR_OF_AMPM, 2),
    "a": _Symbol(FieldKind.AMPM_OF_DAY, 1),
    "m": _Symbol(FieldKind.MINUTE_OF_HOUR, 2),
    "s": _Symbol(FieldKind.SECOND_OF_MINUTE, 2),
    "n": _Symbol(FieldKind.NANO_OF_SECOND, MAX_FRACTION_DIGITS),
    "S": _Symbol(FieldKind.NANO_OF_SECOND, MAX_FRACTION_DIGITS),
}

PATTERN_LETTERS: frozenset[str] = frozenset(_SYMBOLS)


def _is_ascii_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def _scan_quoted(cursor: Cursor) -> ParseResult[str]:
    """Scan a quoted literal starting at an opening quote.

    Returns:
        Unescaped literal text and the cursor past the closing quote

    Raises:
        PatternError: If the closing quote is missing
    """
    if cursor.peek(1) == _QUOTE:
        return ParseResult(_QUOTE, cursor.advance(2))

    start = cursor.pos
    cursor = cursor.advance()
    chars: list[str] = []
    while not cursor.is_eof:
        if cursor.current == _QUOTE:
            if cursor.peek(1) == _QUOTE:
                chars.append(_QUOTE)
                cursor = cursor.advance(2)
                continue
            return ParseResult("".join(chars), cursor.advance())
        chars.append(cursor.current)
        cursor = cursor.advance()

    raise PatternError(ErrorTemplate.pattern_unterminated_quote(cursor.source, start))


def _scan_field(cursor: Cursor) -> ParseResult[Field]:
    """Scan a maximal run of one pattern letter into a Field.

    Raises:
        PatternError: If the letter is unknown or the run length is invalid
    """
    letter = cursor.current
    symbol = _SYMBOLS.get(letter)
    if symbol is None:
        raise PatternError(
            ErrorTemplate.pattern_unknown_letter(cursor.source, letter, cursor.pos)
        )

    width = cursor.run_length(letter)
    if symbol.max_width is not None and width > symbol.max_width:
        raise PatternError(
            ErrorTemplate.pattern_invalid_width(
                cursor.source, letter, width, cursor.pos, symbol.allowed
            )
        )
    return ParseResult(Field(symbol.kind, width, letter), cursor.advance(width))


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a pattern string into an immutable directive sequence.

    Args:
        pattern: Pattern such as "MM/dd/uuuu HH:mm:ss"

    Returns:
        CompiledPattern holding Literal and Field directives in order

    Raises:
        PatternError: Unknown letter, invalid width, unterminated quote,
            or pattern longer than MAX_PATTERN_LENGTH

    Examples:
        >>> compiled = compile_pattern("uuuu-MM-dd")
        >>> [str(d.kind) if hasattr(d, "kind") else d.text for d in compiled]
        ['year', '-', 'month', '-', 'day-of-month']

        >>> compile_pattern("uuuu-MM-dd'T'HH").directives[5]
        Literal(text='T')
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise PatternError(ErrorTemplate.pattern_too_long(len(pattern), MAX_PATTERN_LENGTH))

    directives: list[Directive] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            directives.append(Literal("".join(literal)))
            literal.clear()

    cursor = Cursor(pattern, 0)
    while not cursor.is_eof:
        char = cursor.current

        if char == _QUOTE:
            quoted = _scan_quoted(cursor)
            if quoted.value:
                literal.append(quoted.value)
            cursor = quoted.cursor
            continue

        if _is_ascii_letter(char):
            field = _scan_field(cursor)
            flush_literal()
            directives.append(field.value)
            cursor = field.cursor
            continue

        literal.append(char)
        cursor = cursor.advance()

    flush_literal()
    return CompiledPattern(directives=tuple(directives), source=pattern)
