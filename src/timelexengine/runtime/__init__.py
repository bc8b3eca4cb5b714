"""Date/time runtime package.

Two-phase parsing (field extraction, then resolution), value rendering,
calendar arithmetic, name tables, and the DateTimeFormatter API.
Depends on syntax package for pattern compilation.

Python 3.13+.
"""

from .extractor import extract_fields
from .formatter import (
    BASIC_ISO_DATE,
    ISO_LOCAL_DATE,
    ISO_LOCAL_DATE_TIME,
    ISO_LOCAL_TIME,
    DateTimeFormatter,
    format_value,
    parse_text,
)
from .names import NameTable, StyleTable, cldr_style_table, default_style_table
from .printer import format_fields
from .resolver import resolve_fields
from .value_types import DateTimeValue, RawFieldSet

__all__ = [
    "BASIC_ISO_DATE",
    "ISO_LOCAL_DATE",
    "ISO_LOCAL_DATE_TIME",
    "ISO_LOCAL_TIME",
    "DateTimeFormatter",
    "DateTimeValue",
    "NameTable",
    "RawFieldSet",
    "StyleTable",
    "cldr_style_table",
    "default_style_table",
    "extract_fields",
    "format_fields",
    "format_value",
    "parse_text",
    "resolve_fields",
]
