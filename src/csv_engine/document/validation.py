"""Validation helpers shared across document services."""

from __future__ import annotations

from typing import Sequence

from csv_engine.grid import Cell, column_count

from .errors import OutOfBoundsError


def ensure_cell(rows: Sequence[Sequence[str]], cell: Cell) -> Cell:
    row, col = cell
    if row < 0 or row >= len(rows):
        raise OutOfBoundsError(f"Row {row} out of range", cell=cell)
    if col < 0 or col >= column_count(rows):
        raise OutOfBoundsError(f"Column {col} out of range", cell=cell)
    return cell
