"""Grid to delimited text, with standard quote escaping."""

from __future__ import annotations

from typing import Iterable, Sequence

from .delimiter import validate_delimiter

QUOTE = '"'
LINE_FEED = "\n"


def escape_field(field: str, delimiter: str) -> str:
    """Quote ``field`` when it holds the delimiter, a quote or a line feed."""

    if delimiter in field or QUOTE in field or LINE_FEED in field:
        return QUOTE + field.replace(QUOTE, QUOTE * 2) + QUOTE
    return field


def serialize_row(row: Sequence[str], delimiter: str) -> str:
    return delimiter.join(escape_field(field, delimiter) for field in row)


def serialize_grid(rows: Iterable[Sequence[str]], delimiter: str) -> str:
    """Render every row followed by a line feed, the last one included."""

    delimiter = validate_delimiter(delimiter)
    return "".join(serialize_row(row, delimiter) + LINE_FEED for row in rows)


__all__ = ["escape_field", "serialize_grid", "serialize_row"]
