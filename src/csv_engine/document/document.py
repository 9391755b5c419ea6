"""Core document data structure: live grid, saved checkpoint and identity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from csv_engine.codec import COMMA, Delimiter, validate_delimiter
from csv_engine.grid import Cell, FrozenGrid, Grid, column_count, copy_grid, freeze_grid

from .validation import ensure_cell


@dataclass(slots=True)
class CsvDocument:
    """Owns the live grid and a value copy of the last saved (or loaded) grid.

    ``is_modified`` is always computed by comparing the two grids, so it can
    never drift from the actual content.
    """

    _rows: Grid = field(default_factory=list)
    _checkpoint: Grid = field(default_factory=list)
    identity: Optional[str] = None
    delimiter: Delimiter = COMMA

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[str]],
        *,
        identity: Optional[str] = None,
        delimiter: str = COMMA,
    ) -> "CsvDocument":
        live = copy_grid(rows)
        return cls(
            _rows=live,
            _checkpoint=copy_grid(live),
            identity=identity,
            delimiter=validate_delimiter(delimiter),
        )

    @property
    def is_modified(self) -> bool:
        return self._rows != self._checkpoint

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return column_count(self._rows)

    def snapshot(self) -> FrozenGrid:
        """Return the current grid without exposing internal mutability."""

        return freeze_grid(self._rows)

    def checkpoint(self) -> FrozenGrid:
        return freeze_grid(self._checkpoint)

    def get_cell(self, row: int, col: int) -> str:
        ensure_cell(self._rows, (row, col))
        return self._rows[row][col]

    def set_cell(self, row: int, col: int, value: str) -> None:
        ensure_cell(self._rows, (row, col))
        self._rows[row][col] = value

    def contains(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.row_count and 0 <= col < self.column_count

    def replace_rows(self, rows: Iterable[Sequence[str]]) -> None:
        """Swap the live grid wholesale, leaving the checkpoint alone."""

        self._rows = copy_grid(rows)

    def reset(
        self,
        rows: Iterable[Sequence[str]],
        *,
        identity: Optional[str],
        delimiter: str,
    ) -> None:
        """Install freshly loaded content as both live grid and checkpoint."""

        live = copy_grid(rows)
        checkpoint = copy_grid(live)
        delimiter = validate_delimiter(delimiter)
        self._rows = live
        self._checkpoint = checkpoint
        self.identity = identity
        self.delimiter = delimiter

    def mark_saved(
        self,
        *,
        delimiter: str,
        identity: Optional[str] = None,
        rows: Optional[Iterable[Sequence[str]]] = None,
    ) -> None:
        """Move the checkpoint to ``rows`` (default: the live grid)."""

        self._checkpoint = copy_grid(self._rows if rows is None else rows)
        self.delimiter = validate_delimiter(delimiter)
        if identity is not None:
            self.identity = identity


__all__ = ["CsvDocument"]
