"""Pattern syntax: compile pattern strings to immutable directive sequences.

Public API:
    compile_pattern - Pattern string to CompiledPattern
    serialize_pattern - CompiledPattern back to pattern string
    CompiledPattern, Literal, Field, Directive - Directive node types
    Cursor - Immutable scanner shared with the field extractor

Python 3.13+. Zero external dependencies.
"""

from .ast import CompiledPattern, Directive, Field, Literal
from .compiler import PATTERN_LETTERS, compile_pattern
from .cursor import Cursor, ParseResult
from .serializer import serialize_pattern

__all__ = [
    "PATTERN_LETTERS",
    "CompiledPattern",
    "Cursor",
    "Directive",
    "Field",
    "Literal",
    "ParseResult",
    "compile_pattern",
    "serialize_pattern",
]
