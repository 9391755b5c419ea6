"""Single-pass quote-toggling parser for delimited text.

Quote handling is deliberately simple: every ``"`` flips the in-quotes state
and is never emitted. A doubled quote therefore flips twice and disappears,
which means hand-written ``""`` escapes do not survive a parse. The
serializer escapes properly; the two are asymmetric on purpose.
"""

from __future__ import annotations

from typing import List

from csv_engine.grid import Grid, pad_rows

from .delimiter import validate_delimiter

QUOTE = '"'
LINE_FEED = "\n"
CARRIAGE_RETURN = "\r"


def parse_text(text: str, delimiter: str) -> Grid:
    """Parse ``text`` into a rectangular grid of strings."""

    delimiter = validate_delimiter(delimiter)
    rows: Grid = []
    row: List[str] = []
    field: List[str] = []
    in_quotes = False

    for char in text:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif in_quotes:
            field.append(char)
        elif char == delimiter:
            row.append("".join(field))
            field = []
        elif char == LINE_FEED:
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        elif char == CARRIAGE_RETURN:
            continue
        else:
            field.append(char)

    if field or row:
        row.append("".join(field))
        rows.append(row)

    return pad_rows(rows)


__all__ = ["parse_text"]
