"""Selected-cell tracking for hosts that navigate the grid."""

from __future__ import annotations

from dataclasses import dataclass

from csv_engine.grid import Cell

from .errors import OutOfBoundsError


@dataclass(slots=True)
class CursorState:
    """Row/column of the selected cell, kept inside the grid bounds."""

    row: int = 0
    col: int = 0

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    def select(self, row: int, col: int, *, rows: int, cols: int) -> Cell:
        if not (0 <= row < rows and 0 <= col < cols):
            raise OutOfBoundsError(
                f"Cannot select ({row}, {col}) in a {rows}x{cols} grid",
                cell=(row, col),
            )
        self.row, self.col = row, col
        return self.cell

    def move(self, row_delta: int, col_delta: int, *, rows: int, cols: int) -> Cell:
        self.row = _clamp(self.row + row_delta, rows)
        self.col = _clamp(self.col + col_delta, cols)
        return self.cell

    def clamp(self, *, rows: int, cols: int) -> Cell:
        return self.move(0, 0, rows=rows, cols=cols)


def _clamp(value: int, size: int) -> int:
    return max(0, min(size - 1, value))
