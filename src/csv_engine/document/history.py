"""Two-tier undo history: single cell edits and whole-grid snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from csv_engine.grid import Cell, FrozenGrid, freeze_grid


@dataclass(frozen=True, slots=True)
class CellEdit:
    """Value a cell held before an edit replaced it."""

    row: int
    col: int
    old_value: str

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


@dataclass(frozen=True, slots=True)
class GridSnapshot:
    """Whole grid captured before a reload replaced it."""

    rows: FrozenGrid
    label: str = "reload"


UndoStep = Union[CellEdit, GridSnapshot]


class EditHistory:
    """Independent LIFO stacks; snapshots are always undone first.

    Entries must be pushed before the mutation they reverse is applied so a
    pop restores the exact pre-mutation state.
    """

    def __init__(self) -> None:
        self._cell_edits: List[CellEdit] = []
        self._snapshots: List[GridSnapshot] = []

    def push_cell_edit(self, row: int, col: int, old_value: str) -> CellEdit:
        entry = CellEdit(row=row, col=col, old_value=old_value)
        self._cell_edits.append(entry)
        return entry

    def push_snapshot(
        self, rows: Iterable[Sequence[str]], *, label: str = "reload"
    ) -> GridSnapshot:
        entry = GridSnapshot(rows=freeze_grid(rows), label=label)
        self._snapshots.append(entry)
        return entry

    def can_undo(self) -> bool:
        return bool(self._snapshots or self._cell_edits)

    def peek(self) -> Optional[UndoStep]:
        if self._snapshots:
            return self._snapshots[-1]
        if self._cell_edits:
            return self._cell_edits[-1]
        return None

    def pop(self) -> Optional[UndoStep]:
        if self._snapshots:
            return self._snapshots.pop()
        if self._cell_edits:
            return self._cell_edits.pop()
        return None

    def clear(self) -> None:
        self._cell_edits.clear()
        self._snapshots.clear()

    @property
    def cell_edit_depth(self) -> int:
        return len(self._cell_edits)

    @property
    def snapshot_depth(self) -> int:
        return len(self._snapshots)


__all__ = ["CellEdit", "GridSnapshot", "UndoStep", "EditHistory"]
