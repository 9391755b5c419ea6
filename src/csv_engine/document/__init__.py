"""Document model, edit history and the controller that drives them."""

from .controller import CellChange, DocumentController, RenderedSave, UndoResult
from .cursor import CursorState
from .document import CsvDocument
from .errors import (
    DecodeError,
    DocumentBusyError,
    DocumentError,
    NoFileError,
    NoTargetError,
    OutOfBoundsError,
    ReadError,
    WriteError,
)
from .history import CellEdit, EditHistory, GridSnapshot, UndoStep
from .validation import ensure_cell

__all__ = [
    "CellChange",
    "CellEdit",
    "CsvDocument",
    "CursorState",
    "DecodeError",
    "DocumentBusyError",
    "DocumentController",
    "DocumentError",
    "EditHistory",
    "GridSnapshot",
    "NoFileError",
    "NoTargetError",
    "OutOfBoundsError",
    "ReadError",
    "RenderedSave",
    "UndoResult",
    "UndoStep",
    "WriteError",
    "ensure_cell",
]
