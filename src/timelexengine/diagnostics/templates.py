"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _show(char: str) -> str:
    """Render a found character for messages, naming end of input."""
    return "end of input" if char == "" else repr(char)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Pattern errors
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_unknown_letter(pattern: str, letter: str, position: int) -> Diagnostic:
        """Unrecognized pattern letter outside a quoted section.

        Args:
            pattern: Pattern being compiled
            letter: The unrecognized letter
            position: Offset of the letter run in the pattern

        Returns:
            Diagnostic for PATTERN_UNKNOWN_LETTER
        """
        msg = f"Unknown pattern letter '{letter}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN_LETTER,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="Quote literal text, e.g. 'T' or 'at'",
            source=pattern,
        )

    @staticmethod
    def pattern_unterminated_quote(pattern: str, position: int) -> Diagnostic:
        """Quoted literal section without a closing quote.

        Args:
            pattern: Pattern being compiled
            position: Offset of the opening quote

        Returns:
            Diagnostic for PATTERN_UNTERMINATED_QUOTE
        """
        msg = f"Unterminated quoted literal starting at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message=msg,
            span=SourceSpan(position, len(pattern)),
            hint="Close the literal with a single quote; write '' for a quote character",
            source=pattern,
        )

    @staticmethod
    def pattern_invalid_width(
        pattern: str,
        letter: str,
        width: int,
        position: int,
        allowed: str,
    ) -> Diagnostic:
        """Letter repeated a number of times the letter does not support.

        Args:
            pattern: Pattern being compiled
            letter: Pattern letter
            width: Run length found
            position: Offset of the letter run
            allowed: Human-readable allowed widths (e.g. "1-2")

        Returns:
            Diagnostic for PATTERN_INVALID_WIDTH
        """
        msg = (
            f"Invalid width {width} for pattern letter '{letter}' at position {position}"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID_WIDTH,
            message=msg,
            span=SourceSpan(position, position + width),
            hint=f"Pattern letter '{letter}' accepts widths {allowed}",
            source=pattern,
        )

    @staticmethod
    def pattern_too_long(length: int, max_length: int) -> Diagnostic:
        """Pattern exceeds MAX_PATTERN_LENGTH.

        Args:
            length: Actual pattern length
            max_length: Configured limit

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        msg = f"Pattern length {length} exceeds maximum of {max_length} characters"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
        )

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def literal_mismatch(text: str, expected: str, position: int) -> Diagnostic:
        """Input does not contain the literal text the pattern requires.

        Args:
            text: Input being parsed
            expected: Literal text required by the pattern
            position: Offset in the input where the literal should start

        Returns:
            Diagnostic for PARSE_LITERAL_MISMATCH
        """
        found = text[position : position + len(expected)]
        msg = f"Literal mismatch at position {position}: expected {expected!r}, found {found!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LITERAL_MISMATCH,
            message=msg,
            span=SourceSpan(position, position + len(found)),
            hint="Check the separators in the input against the pattern",
            source=text,
        )

    @staticmethod
    def length_mismatch(text: str, position: int, *, exhausted: bool) -> Diagnostic:
        """Input ended early, or text remains after the last directive.

        Args:
            text: Input being parsed
            position: Offset where the mismatch was detected
            exhausted: True when input ran out, False when input remains

        Returns:
            Diagnostic for PARSE_LENGTH_MISMATCH
        """
        if exhausted:
            msg = f"Length mismatch: input ended at position {position} before the pattern"
            hint = "The input is shorter than the pattern requires"
        else:
            msg = (
                f"Length mismatch: unparsed text {text[position:]!r} "
                f"remains at position {position}"
            )
            hint = "The input is longer than the pattern allows"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LENGTH_MISMATCH,
            message=msg,
            span=SourceSpan(position, len(text)),
            hint=hint,
            source=text,
        )

    @staticmethod
    def parse_field_conflict(
        text: str, field_kind: str, first: int, second: int, position: int
    ) -> Diagnostic:
        """Two directives decoded different values for the same field.

        Args:
            text: Input being parsed
            field_kind: Conflicting field
            first: Value recorded first
            second: Value decoded later
            position: Offset of the later directive

        Returns:
            Diagnostic for PARSE_FIELD_CONFLICT
        """
        msg = f"Field conflict for {field_kind}: {first} and {second} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FIELD_CONFLICT,
            message=msg,
            span=SourceSpan(position, position),
            field_kind=field_kind,
            source=text,
        )

    @staticmethod
    def digits_expected(text: str, field_kind: str, position: int, min_digits: int) -> Diagnostic:
        """Numeric field did not find enough digits.

        Args:
            text: Input being parsed
            field_kind: Field being read
            position: Offset where digits were expected
            min_digits: Digits the field needs

        Returns:
            Diagnostic for PARSE_DIGITS_EXPECTED
        """
        found = text[position : position + 1]
        msg = (
            f"Expected {min_digits} digit(s) for {field_kind} at position {position}, "
            f"found {_show(found)}"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_DIGITS_EXPECTED,
            message=msg,
            span=SourceSpan(position, position + len(found)),
            hint="Pad numeric fields with zeros to the width of the pattern letters",
            field_kind=field_kind,
            source=text,
        )

    @staticmethod
    def text_unrecognized(text: str, field_kind: str, position: int) -> Diagnostic:
        """Textual field did not match any name in the style table.

        Args:
            text: Input being parsed
            field_kind: Field being read
            position: Offset where a name was expected

        Returns:
            Diagnostic for PARSE_TEXT_UNRECOGNIZED
        """
        msg = f"Unrecognized {field_kind} name at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TEXT_UNRECOGNIZED,
            message=msg,
            span=SourceSpan(position, position),
            hint="Names are matched against the configured style table",
            field_kind=field_kind,
            source=text,
        )

    @staticmethod
    def sign_unexpected(text: str, field_kind: str, position: int, width: int) -> Diagnostic:
        """Plus sign on a value that does not exceed the pattern width.

        Args:
            text: Input being parsed
            field_kind: Field being read
            position: Offset of the sign
            width: Pattern width of the field

        Returns:
            Diagnostic for PARSE_SIGN_UNEXPECTED
        """
        msg = (
            f"Unexpected '+' for {field_kind} at position {position}: "
            f"a plus sign requires more than {width} digit(s)"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_SIGN_UNEXPECTED,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="Drop the '+' unless the year is wider than the pattern",
            field_kind=field_kind,
            source=text,
        )

    @staticmethod
    def input_too_long(length: int, max_length: int) -> Diagnostic:
        """Input exceeds MAX_INPUT_LENGTH.

        Args:
            length: Actual input length
            max_length: Configured limit

        Returns:
            Diagnostic for PARSE_INPUT_TOO_LONG
        """
        msg = f"Input length {length} exceeds maximum of {max_length} characters"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TOO_LONG,
            message=msg,
        )

    @staticmethod
    def parse_type_invalid(type_name: str, parse_type: str) -> Diagnostic:
        """Non-string value handed to a parse function.

        Args:
            type_name: Name of the received type
            parse_type: Kind of parse attempted ('date', 'time', 'datetime')

        Returns:
            Diagnostic for PARSE_TYPE_INVALID
        """
        msg = f"Cannot parse {parse_type}: expected string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TYPE_INVALID,
            message=msg,
        )

    # ------------------------------------------------------------------
    # Resolution errors
    # ------------------------------------------------------------------

    @staticmethod
    def value_invalid(field_kind: str, value: int, low: int, high: int) -> Diagnostic:
        """Field value outside its valid range.

        Args:
            field_kind: Field being resolved
            value: Offending value
            low: Smallest valid value
            high: Largest valid value

        Returns:
            Diagnostic for RESOLUTION_VALUE_INVALID
        """
        msg = f"Invalid field value for {field_kind}: {value} (valid values {low} - {high})"
        return Diagnostic(
            code=DiagnosticCode.RESOLUTION_VALUE_INVALID,
            message=msg,
            hint="Use ResolverStyle.SMART or ResolverStyle.LENIENT to adjust out-of-range values",
            field_kind=field_kind,
        )

    @staticmethod
    def resolution_field_conflict(field_kind: str, first: int, second: int) -> Diagnostic:
        """Two fields imply different values for the same component.

        Args:
            field_kind: Component in conflict
            first: Value from one field
            second: Value implied by another field

        Returns:
            Diagnostic for RESOLUTION_FIELD_CONFLICT
        """
        msg = f"Conflicting values for {field_kind}: {first} and {second}"
        return Diagnostic(
            code=DiagnosticCode.RESOLUTION_FIELD_CONFLICT,
            message=msg,
            field_kind=field_kind,
        )

    @staticmethod
    def weekday_mismatch(parsed: int, actual: int) -> Diagnostic:
        """Parsed weekday disagrees with the resolved date.

        Args:
            parsed: Weekday read from the input (ISO, 1 = Monday)
            actual: Weekday of the resolved date

        Returns:
            Diagnostic for RESOLUTION_WEEKDAY_MISMATCH
        """
        msg = f"Day of week {parsed} does not match the resolved date (day of week {actual})"
        return Diagnostic(
            code=DiagnosticCode.RESOLUTION_WEEKDAY_MISMATCH,
            message=msg,
            field_kind="day-of-week",
        )

    @staticmethod
    def carry_unsupported(field_kind: str, target_kind: str, value: int) -> Diagnostic:
        """Lenient carry needs a larger field that was not parsed.

        Args:
            field_kind: Field holding the excess
            target_kind: Absent field the excess would carry into
            value: Offending value

        Returns:
            Diagnostic for RESOLUTION_CARRY_UNSUPPORTED
        """
        msg = f"Cannot carry {field_kind} value {value} into absent field {target_kind}"
        return Diagnostic(
            code=DiagnosticCode.RESOLUTION_CARRY_UNSUPPORTED,
            message=msg,
            hint=f"Add {target_kind} to the pattern to allow lenient carry",
            field_kind=field_kind,
        )

    @staticmethod
    def field_missing(missing: tuple[str, ...], target: str) -> Diagnostic:
        """Value lacks fields required to build the requested type.

        Args:
            missing: Names of unset fields
            target: Requested type ('date', 'time', 'datetime')

        Returns:
            Diagnostic for RESOLUTION_FIELD_MISSING
        """
        names = ", ".join(missing)
        msg = f"Cannot build {target}: missing field(s) {names}"
        return Diagnostic(
            code=DiagnosticCode.RESOLUTION_FIELD_MISSING,
            message=msg,
            hint=f"Use a pattern that contains every {target} field",
            field_kind=missing[0] if missing else None,
        )

    @staticmethod
    def year_unsupported(year: int, target: str) -> Diagnostic:
        """Year outside what the requested Python type can represent.

        Args:
            year: Resolved year
            target: Requested type ('date', 'datetime')

        Returns:
            Diagnostic for RESOLUTION_YEAR_UNSUPPORTED
        """
        msg = f"Year {year} cannot be represented as a Python {target} (1 - 9999)"
        return Diagnostic(
            code=DiagnosticCode.RESOLUTION_YEAR_UNSUPPORTED,
            message=msg,
            field_kind="year",
        )

    # ------------------------------------------------------------------
    # Format errors
    # ------------------------------------------------------------------

    @staticmethod
    def format_field_missing(field_kind: str, pattern: str) -> Diagnostic:
        """Directive needs a field the value does not hold.

        Args:
            field_kind: Field required by the directive
            pattern: Pattern being formatted

        Returns:
            Diagnostic for FORMAT_FIELD_MISSING
        """
        msg = f"Missing field {field_kind} required by pattern {pattern!r}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_FIELD_MISSING,
            message=msg,
            field_kind=field_kind,
        )

    @staticmethod
    def format_type_invalid(type_name: str) -> Diagnostic:
        """Unsupported value handed to format().

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for FORMAT_TYPE_INVALID
        """
        msg = f"Cannot format value of type {type_name}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_TYPE_INVALID,
            message=msg,
            hint="Pass a DateTimeValue, datetime.date, datetime.time or datetime.datetime",
        )
