"""High-level document façade combining codec, document, history and collaborators."""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterator, List, Optional, Tuple, Union

from csv_engine.adapters.collaborators import (
    Clipboard,
    FilePicker,
    FileStorage,
    MemoryClipboard,
    Storage,
)
from csv_engine.codec import (
    Delimiter,
    delimiter_for_path,
    detect_delimiter,
    parse_text,
    serialize_grid,
)
from csv_engine.grid import Cell, FrozenGrid, column_label
from csv_engine.runtime.events import (
    CELL_EDITED,
    DOCUMENT_LOADED,
    DOCUMENT_RELOADED,
    DOCUMENT_SAVED,
    HISTORY_UNDO,
    EventBus,
)
from csv_engine.runtime.settings import EngineSettings
from csv_engine.runtime.telemetry import record_event, span

from .cursor import CursorState
from .document import CsvDocument
from .errors import (
    DecodeError,
    DocumentBusyError,
    NoFileError,
    NoTargetError,
    ReadError,
    WriteError,
)
from .history import CellEdit, EditHistory, GridSnapshot

Identity = Union[str, "os.PathLike[str]"]
Content = Union[bytes, bytearray, str]


@dataclass(frozen=True, slots=True)
class CellChange:
    row: int
    col: int
    old_value: str
    new_value: str


@dataclass(frozen=True, slots=True)
class UndoResult:
    """What a call to :meth:`DocumentController.undo` did.

    ``kind`` is ``"snapshot"``, ``"cell"`` or ``"none"``; ``changed`` is false
    for an empty history and for a cell entry that no longer fits the grid.
    """

    kind: str
    changed: bool
    cell: Optional[Cell] = None


@dataclass(frozen=True, slots=True)
class RenderedSave:
    """Bytes ready for storage plus what the checkpoint becomes on success."""

    identity: str
    delimiter: Delimiter
    data: bytes
    rows: FrozenGrid


class DocumentController:
    """Single owner of a :class:`CsvDocument`; every operation goes through here.

    Not thread-safe: callers serialize access, typically from one event loop.
    """

    def __init__(
        self,
        *,
        document: Optional[CsvDocument] = None,
        history: Optional[EditHistory] = None,
        storage: Optional[Storage] = None,
        clipboard: Optional[Clipboard] = None,
        picker: Optional[FilePicker] = None,
        bus: Optional[EventBus] = None,
        settings: Optional[EngineSettings] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.document = document or CsvDocument()
        self.history = history or EditHistory()
        self.cursor = CursorState()
        self.storage: Storage = storage or FileStorage()
        self.clipboard: Clipboard = clipboard or MemoryClipboard()
        self.picker = picker
        self.bus = bus or EventBus()
        self.settings = settings or EngineSettings.from_env()
        self._logger_name = logger_name
        self._io_operation: Optional[str] = None

    # ------------------------------------------------------------------
    # I/O exclusivity
    # ------------------------------------------------------------------
    @property
    def busy(self) -> Optional[str]:
        """Name of the I/O operation in flight, if any."""

        return self._io_operation

    @contextmanager
    def io_guard(self, operation: str) -> Iterator[None]:
        """Reject overlapping load/reload/save work on this document."""

        if self._io_operation is not None:
            raise DocumentBusyError(
                f"Cannot {operation} while {self._io_operation} is in progress",
                identity=self.document.identity,
            )
        self._io_operation = operation
        try:
            yield
        finally:
            self._io_operation = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, data: Content, identity: Optional[Identity] = None) -> FrozenGrid:
        """Replace the document with ``data`` and start a fresh history."""

        with self.io_guard("load"):
            return self.apply_load(data, _normalize(identity))

    def open(self, identity: Identity) -> FrozenGrid:
        target = _normalize(identity)
        with self.io_guard("open"):
            data = self.read(target)
            return self.apply_load(data, target)

    def reload(self, data: Optional[Content] = None) -> FrozenGrid:
        """Re-read the current file; the pre-reload grid stays undoable."""

        with self.io_guard("reload"):
            identity = self.require_identity("reload")
            if data is None:
                data = self.read(identity)
            return self.apply_reload(data)

    def read(self, identity: str) -> bytes:
        try:
            return self.storage.read(identity)
        except OSError as exc:
            record_event(
                "document.read_failed",
                level="error",
                data={"identity": identity, "reason": str(exc)},
                logger_name=self._logger_name,
            )
            raise ReadError(
                f"Failed to read {identity}: {exc}", identity=identity
            ) from exc

    def apply_load(self, data: Content, identity: Optional[str]) -> FrozenGrid:
        with span(
            "document::load",
            logger_name=self._logger_name,
            component="document",
            metadata={"identity": identity or "<memory>"},
        ) as handle:
            delimiter, rows = self._parse(data, identity)
            self.document.reset(rows, identity=identity, delimiter=delimiter)
            self.history.clear()
            self._clamp_cursor()
            handle.add_metadata("rows", self.document.row_count)
            handle.add_metadata("columns", self.document.column_count)
        self.bus.emit(DOCUMENT_LOADED, identity)
        return self.document.snapshot()

    def apply_reload(self, data: Content) -> FrozenGrid:
        identity = self.require_identity("reload")
        with span(
            "document::reload",
            logger_name=self._logger_name,
            component="document",
            metadata={"identity": identity},
        ) as handle:
            delimiter, rows = self._parse(data, identity)
            self.history.push_snapshot(self.document.snapshot(), label="reload")
            self.document.reset(rows, identity=identity, delimiter=delimiter)
            self._clamp_cursor()
            handle.add_metadata("snapshot_depth", self.history.snapshot_depth)
        self.bus.emit(DOCUMENT_LOADED, identity)
        self.bus.emit(DOCUMENT_RELOADED, identity)
        return self.document.snapshot()

    def _parse(
        self, data: Content, identity: Optional[str]
    ) -> Tuple[Delimiter, List[List[str]]]:
        if isinstance(data, str):
            text = data
        else:
            try:
                text = bytes(data).decode(self.settings.encoding)
            except (UnicodeDecodeError, LookupError) as exc:
                raise DecodeError(
                    f"{identity or 'content'} is not valid {self.settings.encoding}"
                    f" text: {exc}",
                    identity=identity,
                ) from exc
        delimiter = detect_delimiter(text)
        return delimiter, parse_text(text, delimiter)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def edit_cell(self, row: int, col: int, value: str) -> bool:
        """Set one cell; returns ``False`` when the value is unchanged."""

        current = self.document.get_cell(row, col)
        if current == value:
            record_event(
                "document.edit_noop",
                level="debug",
                data={"row": row, "col": col},
                logger_name=self._logger_name,
            )
            return False
        with span(
            "document::edit_cell",
            logger_name=self._logger_name,
            component="document",
            metadata={"row": row, "col": col},
        ):
            self.history.push_cell_edit(row, col, current)
            self.document.set_cell(row, col, value)
        self.bus.emit(
            CELL_EDITED,
            CellChange(row=row, col=col, old_value=current, new_value=value),
        )
        return True

    def undo(self) -> UndoResult:
        """Undo the latest reload if any, otherwise the latest cell edit."""

        with span(
            "document::undo",
            logger_name=self._logger_name,
            component="document",
        ) as handle:
            step = self.history.pop()
            if step is None:
                handle.note("empty")
                result = UndoResult(kind="none", changed=False)
            elif isinstance(step, GridSnapshot):
                self.document.replace_rows(step.rows)
                self._clamp_cursor()
                result = UndoResult(kind="snapshot", changed=True)
            else:
                result = self._undo_cell(step)
            handle.add_metadata("kind", result.kind)
        if result.changed:
            self.bus.emit(HISTORY_UNDO, result)
        return result

    def _undo_cell(self, step: CellEdit) -> UndoResult:
        if not self.document.contains(step.cell):
            record_event(
                "document.undo_stale",
                level="warning",
                data={"row": step.row, "col": step.col},
                logger_name=self._logger_name,
            )
            return UndoResult(kind="cell", changed=False, cell=step.cell)
        self.document.set_cell(step.row, step.col, step.old_value)
        return UndoResult(kind="cell", changed=True, cell=step.cell)

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def save(self) -> str:
        """Write to the current file, asking the picker when there is none."""

        identity = self.document.identity
        if identity is None:
            return self.save_as()
        with self.io_guard("save"):
            return self._save_to(identity, rename=False)

    def save_as(self, identity: Optional[Identity] = None) -> str:
        target = _normalize(identity) if identity is not None else self.pick_target()
        with self.io_guard("save_as"):
            return self._save_to(target, rename=True)

    def render(self, identity: str) -> RenderedSave:
        """Serialize the live grid for ``identity`` without touching state."""

        delimiter = delimiter_for_path(
            identity, tab_extensions=self.settings.tab_extensions
        )
        rows = self.document.snapshot()
        text = serialize_grid(rows, delimiter)
        try:
            data = text.encode(self.settings.encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise WriteError(
                f"Cannot encode {identity} as {self.settings.encoding}: {exc}",
                identity=identity,
            ) from exc
        return RenderedSave(identity=identity, delimiter=delimiter, data=data, rows=rows)

    def write(self, identity: str, data: bytes) -> None:
        try:
            self.storage.write(identity, data)
        except OSError as exc:
            record_event(
                "document.write_failed",
                level="error",
                data={"identity": identity, "reason": str(exc)},
                logger_name=self._logger_name,
            )
            raise WriteError(
                f"Failed to write {identity}: {exc}", identity=identity
            ) from exc

    def commit_save(self, rendered: RenderedSave, *, rename: bool) -> str:
        """Move the checkpoint to what was written and adopt its delimiter."""

        self.document.mark_saved(
            delimiter=rendered.delimiter,
            identity=rendered.identity if rename else None,
            rows=rendered.rows,
        )
        self.bus.emit(
            DOCUMENT_SAVED,
            {"identity": rendered.identity, "delimiter": rendered.delimiter},
        )
        return rendered.identity

    def _save_to(self, identity: str, *, rename: bool) -> str:
        with span(
            "document::save_as" if rename else "document::save",
            logger_name=self._logger_name,
            component="document",
            metadata={"identity": identity},
        ) as handle:
            rendered = self.render(identity)
            handle.add_metadata("bytes", len(rendered.data))
            self.write(identity, rendered.data)
            return self.commit_save(rendered, rename=rename)

    def suggested_name(self) -> str:
        if self.document.identity:
            return PurePath(self.document.identity).name
        return self.settings.untitled_name

    def pick_target(self) -> str:
        if self.picker is None:
            raise NoTargetError("No file to save to and no file picker available")
        target = self.picker.choose_save_target(self.suggested_name())
        if not target:
            raise NoTargetError("Save cancelled: no target chosen")
        return _normalize(target)

    def require_identity(self, operation: str) -> str:
        identity = self.document.identity
        if identity is None:
            raise NoFileError(f"Cannot {operation}: the document has no file")
        return identity

    # ------------------------------------------------------------------
    # Navigation, clipboard and display helpers
    # ------------------------------------------------------------------
    def select(self, row: int, col: int) -> Cell:
        return self.cursor.select(
            row, col, rows=self.document.row_count, cols=self.document.column_count
        )

    def move_cursor(self, row_delta: int, col_delta: int) -> Cell:
        return self.cursor.move(
            row_delta,
            col_delta,
            rows=self.document.row_count,
            cols=self.document.column_count,
        )

    def begin_edit(self) -> str:
        """Value of the selected cell, for seeding an inline editor."""

        return self.document.get_cell(*self.cursor.cell)

    def copy_cell(self) -> str:
        value = self.document.get_cell(*self.cursor.cell)
        self.clipboard.set(value)
        return value

    def paste_cell(self) -> bool:
        value = self.clipboard.get()
        if value is None:
            return False
        with span(
            "document::paste_cell",
            logger_name=self._logger_name,
            component="document",
            metadata={"cell": self.cursor.cell},
        ):
            return self.edit_cell(self.cursor.row, self.cursor.col, value)

    def column_labels(self) -> List[str]:
        return [column_label(index) for index in range(self.document.column_count)]

    @property
    def is_modified(self) -> bool:
        return self.document.is_modified

    def _clamp_cursor(self) -> None:
        self.cursor.clamp(
            rows=self.document.row_count, cols=self.document.column_count
        )


def _normalize(identity: Optional[Identity]) -> Optional[str]:
    if identity is None:
        return None
    return os.fspath(identity)


__all__ = ["CellChange", "DocumentController", "RenderedSave", "UndoResult"]
