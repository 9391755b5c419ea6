"""Grid value helpers shared by the codec and the document layer."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

Grid = List[List[str]]
FrozenGrid = Tuple[Tuple[str, ...], ...]
Cell = Tuple[int, int]  # (row, column)


def copy_grid(rows: Iterable[Sequence[str]]) -> Grid:
    """Return a value copy of ``rows``; no row list is shared with the input."""

    return [list(row) for row in rows]


def freeze_grid(rows: Iterable[Sequence[str]]) -> FrozenGrid:
    return tuple(tuple(row) for row in rows)


def column_count(rows: Sequence[Sequence[str]]) -> int:
    return max((len(row) for row in rows), default=0)


def pad_rows(rows: Grid) -> Grid:
    """Right-pad every row in place with empty cells up to the widest row."""

    width = column_count(rows)
    for row in rows:
        if len(row) < width:
            row.extend([""] * (width - len(row)))
    return rows


def is_rectangular(rows: Sequence[Sequence[str]]) -> bool:
    return len({len(row) for row in rows}) <= 1
