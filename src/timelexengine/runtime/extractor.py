"""Phase 1 of parsing: lexical field extraction.

Walks the directive sequence and the input text in lockstep and records
each decoded field value in a RawFieldSet. No calendar rules apply here:
"09/31/2022" extracts month 9, day 31 and year 2022 without complaint;
deciding what day 31 of September means is phase 2's job.

Numeric width rules:
    Presentation  | Width | Digits read
    --------------|-------|------------
    Number        | 1     | 1 .. field maximum (variable)
    Number        | 2+    | exactly width (year and nanosecond: width .. maximum)
    Reduced year  | 2     | exactly 2, mapped to TWO_DIGIT_YEAR_BASE + value
    Fraction      | n     | exactly n, scaled to nanoseconds

Adjacent value parsing: a variable-width field leaves enough digits for
the fixed-width numeric fields directly after it, so "uuuuMMdd" reads
"20221014" as 2022, 10, 14.

Python 3.13+. Zero external dependencies.
"""

from timelexengine.constants import MAX_FRACTION_DIGITS, MAX_INPUT_LENGTH, TWO_DIGIT_YEAR_BASE
from timelexengine.diagnostics import ErrorTemplate, ParseError
from timelexengine.enums import FieldKind, Presentation
from timelexengine.syntax.ast import CompiledPattern, Field, Literal
from timelexengine.syntax.cursor import Cursor, ParseResult

from .names import StyleTable
from .value_types import RawFieldSet

__all__ = ["digit_bounds", "extract_fields"]

# Most digits a variable-width numeric field may consume.
_MAX_DIGITS: dict[FieldKind, int] = {
    FieldKind.YEAR: 9,
    FieldKind.MONTH: 2,
    FieldKind.DAY_OF_MONTH: 2,
    FieldKind.HOUR_OF_DAY: 2,
    FieldKind.CLOCK_HOUR_OF_AMPM: 2,
    FieldKind.MINUTE_OF_HOUR: 2,
    FieldKind.SECOND_OF_MINUTE: 2,
    FieldKind.NANO_OF_SECOND: MAX_FRACTION_DIGITS,
}

_OPEN_ENDED = frozenset({FieldKind.YEAR, FieldKind.NANO_OF_SECOND})
_SIGNS = ("+", "-")


def digit_bounds(field: Field, presentation: Presentation) -> tuple[int, int]:
    """Minimum and maximum digits a numeric field reads.

    Example:
        >>> digit_bounds(Field(FieldKind.YEAR, 4, "u"), Presentation.NUMBER)
        (4, 9)
        >>> digit_bounds(Field(FieldKind.MONTH, 2, "M"), Presentation.NUMBER)
        (2, 2)
    """
    match presentation:
        case Presentation.REDUCED_YEAR:
            return (2, 2)
        case Presentation.FRACTION:
            return (field.width, field.width)
    max_digits = _MAX_DIGITS[field.kind]
    if field.width == 1:
        return (1, max_digits)
    if field.kind in _OPEN_ENDED:
        return (field.width, max(field.width, max_digits))
    return (field.width, field.width)


def _reserved_digits(pattern: CompiledPattern, styles: StyleTable) -> tuple[int, ...]:
    """Digits each directive must leave for the fixed-width fields after it."""
    reserved = [0] * len(pattern.directives)
    following = 0
    for index in range(len(pattern.directives) - 1, -1, -1):
        reserved[index] = following
        directive = pattern.directives[index]
        if not Field.guard(directive):
            following = 0
            continue
        presentation = styles.presentation(directive)
        if presentation is Presentation.TEXT:
            following = 0
            continue
        low, high = digit_bounds(directive, presentation)
        following = following + low if low == high else 0
    return tuple(reserved)


def _read_number(
    cursor: Cursor,
    field: Field,
    presentation: Presentation,
    reserved: int,
) -> ParseResult[int]:
    """Read a numeric field, honoring width bounds and reserved digits.

    A year may carry a leading sign: "-" always, "+" only when the year
    has more digits than the pattern width.

    Raises:
        ParseError: If too few digits are available, or "+" precedes a
            year no wider than the pattern
    """
    sign = 1
    plus_at: int | None = None
    if (
        presentation is Presentation.NUMBER
        and field.kind is FieldKind.YEAR
        and cursor.peek() in _SIGNS
    ):
        if cursor.current == "+":
            plus_at = cursor.pos
        else:
            sign = -1
        cursor = cursor.advance()

    low, high = digit_bounds(field, presentation)
    available = cursor.digit_run(high + reserved)
    take = low if low == high else min(high, available - reserved)
    if take < low or available < take:
        raise ParseError(
            ErrorTemplate.digits_expected(cursor.source, str(field.kind), cursor.pos, low),
            input_value=cursor.source,
        )
    if plus_at is not None and take <= field.width:
        raise ParseError(
            ErrorTemplate.sign_unexpected(cursor.source, str(field.kind), plus_at, field.width),
            input_value=cursor.source,
        )

    digits = int(cursor.slice_ahead(take))
    match presentation:
        case Presentation.REDUCED_YEAR:
            value = TWO_DIGIT_YEAR_BASE + digits
        case Presentation.FRACTION:
            value = digits * 10 ** (MAX_FRACTION_DIGITS - field.width)
        case _:
            value = sign * digits
    return ParseResult(value, cursor.advance(take))


def _read_text(cursor: Cursor, field: Field, styles: StyleTable) -> ParseResult[int]:
    """Read a textual field as the longest matching name.

    Raises:
        ParseError: If no name matches at the cursor
    """
    names = styles.names_for(field.kind)
    found = names.match(
        cursor.source,
        cursor.pos,
        styles.text_style(field),
        case_insensitive=styles.case_insensitive,
    )
    if found is None:
        raise ParseError(
            ErrorTemplate.text_unrecognized(cursor.source, str(field.kind), cursor.pos),
            input_value=cursor.source,
        )
    value, length = found
    return ParseResult(value, cursor.advance(length))


def extract_fields(text: str, pattern: CompiledPattern, styles: StyleTable) -> RawFieldSet:
    """Decode raw field values from text (phase 1).

    Deterministic: the same (text, pattern, styles) always yields the same
    RawFieldSet or the same error.

    Args:
        text: Input text
        pattern: Compiled pattern
        styles: Presentation and name configuration

    Returns:
        Field values keyed by kind

    Raises:
        ParseError: Literal mismatch, length mismatch, field conflict,
            missing digits or names, or input longer than MAX_INPUT_LENGTH

    Example:
        >>> from timelexengine.syntax import compile_pattern
        >>> from timelexengine.runtime.names import default_style_table
        >>> raw = extract_fields("09/31/2022", compile_pattern("MM/dd/uuuu"), default_style_table())
        >>> raw[FieldKind.DAY_OF_MONTH]
        31
    """
    if len(text) > MAX_INPUT_LENGTH:
        raise ParseError(
            ErrorTemplate.input_too_long(len(text), MAX_INPUT_LENGTH),
            input_value=text[:MAX_INPUT_LENGTH],
        )

    raw: RawFieldSet = {}
    reserved = _reserved_digits(pattern, styles)
    cursor = Cursor(text, 0)

    for index, directive in enumerate(pattern.directives):
        if cursor.is_eof:
            raise ParseError(
                ErrorTemplate.length_mismatch(text, cursor.pos, exhausted=True),
                input_value=text,
            )

        if Literal.guard(directive):
            if not text.startswith(directive.text, cursor.pos):
                raise ParseError(
                    ErrorTemplate.literal_mismatch(text, directive.text, cursor.pos),
                    input_value=text,
                )
            cursor = cursor.advance(len(directive.text))
            continue

        start = cursor.pos
        presentation = styles.presentation(directive)
        if presentation is Presentation.TEXT:
            result = _read_text(cursor, directive, styles)
        else:
            result = _read_number(cursor, directive, presentation, reserved[index])

        prior = raw.get(directive.kind)
        if prior is not None and prior != result.value:
            raise ParseError(
                ErrorTemplate.parse_field_conflict(
                    text, str(directive.kind), prior, result.value, start
                ),
                input_value=text,
            )
        raw[directive.kind] = result.value
        cursor = result.cursor

    if not cursor.is_eof:
        raise ParseError(
            ErrorTemplate.length_mismatch(text, cursor.pos, exhausted=False),
            input_value=text,
        )
    return raw
