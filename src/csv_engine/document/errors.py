"""Recoverable errors raised by document operations.

None of these leave a partially mutated document behind; callers report them
and carry on with the previous state.
"""

from __future__ import annotations

from typing import Optional

from csv_engine.grid import Cell


class DocumentError(RuntimeError):
    """Base class for every error the document layer raises."""

    def __init__(self, message: str, *, identity: Optional[str] = None) -> None:
        super().__init__(message)
        self.identity = identity


class DecodeError(DocumentError):
    """Raised when loaded bytes are not valid text in the configured encoding."""


class OutOfBoundsError(DocumentError):
    """Raised when a row/column pair falls outside the current grid."""

    def __init__(self, message: str, *, cell: Cell) -> None:
        super().__init__(message)
        self.cell = cell


class NoFileError(DocumentError):
    """Raised by reload/save when the document has no file identity."""


class NoTargetError(DocumentError):
    """Raised when a save has no identity and no target could be picked."""


class ReadError(DocumentError):
    """Raised when storage fails to read a file."""


class WriteError(DocumentError):
    """Raised when storage fails to write a file."""


class DocumentBusyError(DocumentError):
    """Raised when an I/O operation starts while another is still running."""


__all__ = [
    "DocumentError",
    "DecodeError",
    "OutOfBoundsError",
    "NoFileError",
    "NoTargetError",
    "ReadError",
    "WriteError",
    "DocumentBusyError",
]
