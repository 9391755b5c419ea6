"""Grid value types and column labelling."""

from .labels import cell_ref, column_index, column_label, parse_cell_ref
from .model import (
    Cell,
    FrozenGrid,
    Grid,
    column_count,
    copy_grid,
    freeze_grid,
    is_rectangular,
    pad_rows,
)

__all__ = [
    "Cell",
    "FrozenGrid",
    "Grid",
    "cell_ref",
    "column_count",
    "column_index",
    "column_label",
    "copy_grid",
    "freeze_grid",
    "is_rectangular",
    "pad_rows",
    "parse_cell_ref",
]
