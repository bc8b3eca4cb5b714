"""Serialize a CompiledPattern back to pattern syntax.

Useful for:
- Logging and error messages that show the effective pattern
- Property-based testing (roundtrip: compile -> serialize -> compile)

Python 3.13+.
"""

from .ast import CompiledPattern, Field, Literal

__all__ = ["serialize_pattern"]

_QUOTE = "'"


def _needs_quoting(text: str) -> bool:
    return any("a" <= c <= "z" or "A" <= c <= "Z" for c in text)


def _serialize_literal(literal: Literal) -> str:
    """Escape literal text so it compiles back to the same Literal.

    Text containing ASCII letters is wrapped in one quoted section with
    embedded quotes doubled; other text only needs its quotes doubled.
    """
    escaped = literal.text.replace(_QUOTE, _QUOTE * 2)
    if _needs_quoting(literal.text):
        return f"{_QUOTE}{escaped}{_QUOTE}"
    return escaped


def serialize_pattern(pattern: CompiledPattern) -> str:
    """Render a compiled pattern as a pattern string.

    The result compiles to an equal directive sequence. It is not always
    byte-identical to the source pattern: redundant quoting is dropped.

    Args:
        pattern: Compiled pattern

    Returns:
        Pattern string

    Example:
        >>> from timelexengine.syntax import compile_pattern
        >>> serialize_pattern(compile_pattern("uuuu-MM-dd'T'HH:mm"))
        "uuuu-MM-dd'T'HH:mm"
        >>> serialize_pattern(compile_pattern("'-'dd"))
        '-dd'
    """
    parts: list[str] = []
    for directive in pattern.directives:
        if Field.guard(directive):
            parts.append(directive.symbol)
        else:
            parts.append(_serialize_literal(directive))
    return "".join(parts)
