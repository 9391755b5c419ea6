"""Delimiter detection, parsing and serialization of CSV/TSV text."""

from .delimiter import (
    COMMA,
    TAB,
    Delimiter,
    delimiter_for_path,
    detect_delimiter,
    validate_delimiter,
)
from .parser import parse_text
from .serializer import escape_field, serialize_grid, serialize_row

__all__ = [
    "COMMA",
    "TAB",
    "Delimiter",
    "delimiter_for_path",
    "detect_delimiter",
    "escape_field",
    "parse_text",
    "serialize_grid",
    "serialize_row",
    "validate_delimiter",
]
