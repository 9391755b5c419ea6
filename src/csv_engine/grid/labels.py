"""Spreadsheet-style column labels (A, B, ..., Z, AA, AB, ...)."""

from __future__ import annotations

import re
from functools import lru_cache

from .model import Cell

_CELL_REF = re.compile(r"^\s*([A-Za-z]+)\s*([0-9]+)\s*$")


@lru_cache(maxsize=1024)
def column_label(index: int) -> str:
    """Return the bijective base-26 label for a 0-based column index."""

    if index < 0:
        raise ValueError(f"column index must be >= 0, got {index}")
    label = ""
    num = index
    while num >= 0:
        label = chr(ord("A") + num % 26) + label
        num = num // 26 - 1
    return label


def column_index(label: str) -> int:
    """Inverse of :func:`column_label`; case-insensitive."""

    text = label.strip().upper()
    if not text or not text.isascii() or not text.isalpha():
        raise ValueError(f"invalid column label {label!r}")
    value = 0
    for char in text:
        value = value * 26 + (ord(char) - ord("A") + 1)
    return value - 1


def parse_cell_ref(ref: str) -> Cell:
    """Turn ``"B3"`` into ``(2, 1)``. Row numbers are 1-based like a sheet."""

    match = _CELL_REF.match(ref)
    if match is None:
        raise ValueError(f"invalid cell reference {ref!r}")
    letters, digits = match.groups()
    row = int(digits) - 1
    if row < 0:
        raise ValueError(f"row numbers start at 1, got {ref!r}")
    return row, column_index(letters)


def cell_ref(row: int, col: int) -> str:
    return f"{column_label(col)}{row + 1}"
