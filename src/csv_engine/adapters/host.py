"""Host adapter that wires controller events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from csv_engine.grid import Cell, FrozenGrid, cell_ref
from csv_engine.runtime.events import (
    ALL_EVENTS,
    CELL_EDITED,
    DOCUMENT_LOADED,
    DOCUMENT_SAVED,
)

if TYPE_CHECKING:  # pragma: no cover
    from csv_engine.document import DocumentController, DocumentError


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class GridMirror:
    """Host-friendly snapshot describing what the grid view should show.

    ``attributes`` carries display strings for status widgets: ``cell`` is the
    selected cell as a reference like ``B3`` and ``delimiter`` is ``comma`` or
    ``tab``.
    """

    rows: FrozenGrid
    labels: tuple[str, ...]
    cursor: Cell
    modified: bool
    title: str
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class HostHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_grid: Callable[[GridMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class HostAdapter:
    """Bridges a DocumentController to a UI host through :class:`HostHooks`.

    Host actions return ``False`` after surfacing a ``DocumentError`` as a
    status line instead of raising into the host's event loop.
    """

    def __init__(self, controller: "DocumentController", hooks: HostHooks) -> None:
        self.controller = controller
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    def mirror(self) -> GridMirror:
        document = self.controller.document
        name = self.controller.suggested_name()
        cursor = self.controller.cursor.cell
        return GridMirror(
            rows=document.snapshot(),
            labels=tuple(self.controller.column_labels()),
            cursor=cursor,
            modified=document.is_modified,
            title=f"{name}*" if document.is_modified else name,
            attributes={
                "cell": cell_ref(*cursor),
                "delimiter": "tab" if document.delimiter == "\t" else "comma",
            },
        )

    def refresh(self) -> None:
        self.hooks.update_grid(self.mirror())

    # Host actions --------------------------------------------------------
    def open(self, identity: str) -> bool:
        return self._run("open", lambda: self.controller.open(identity))

    def reload(self) -> bool:
        return self._run("reload", self.controller.reload)

    def save(self) -> bool:
        return self._run("save", self.controller.save)

    def save_as(self, identity: Optional[str] = None) -> bool:
        return self._run("save_as", lambda: self.controller.save_as(identity))

    def commit_cell(self, row: int, col: int, value: str) -> bool:
        return self._run("edit", lambda: self.controller.edit_cell(row, col, value))

    def undo(self) -> bool:
        return self._run("undo", self.controller.undo)

    def move(self, row_delta: int, col_delta: int) -> Cell:
        cell = self.controller.move_cursor(row_delta, col_delta)
        self._log_state("move ->", cursor=cell)
        self.refresh()
        return cell

    def copy(self) -> bool:
        return self._run("copy", self.controller.copy_cell)

    def paste(self) -> bool:
        return self._run("paste", self.controller.paste_cell)

    # Internals -----------------------------------------------------------
    def _run(self, action: str, call: Callable[[], object]) -> bool:
        from csv_engine.document import DocumentError

        self._log_state("action ->", action=action)
        try:
            call()
        except DocumentError as exc:
            self._report(action, exc)
            return False
        self.refresh()
        return True

    def _report(self, action: str, exc: "DocumentError") -> None:
        self.hooks.update_status(f"{action} failed: {exc}")
        self._log_state("error <-", action=action, error=type(exc).__name__)

    def _subscribe_events(self) -> None:
        bus = self.controller.bus
        for event in ALL_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        # The change is already committed; hook failures become a status line.
        self._log_state("event ->", event=name, payload=payload)
        try:
            self.hooks.handle_event(name, payload)
        except Exception as exc:
            self.hooks.update_status(f"{name} hook failed: {exc}")
            self._log_state("error <-", event=name, error=type(exc).__name__)
            return
        if name == DOCUMENT_SAVED and isinstance(payload, dict):
            self.hooks.update_status(f"saved {payload.get('identity')}")
        elif name == DOCUMENT_LOADED and isinstance(payload, str):
            self.hooks.update_status(f"loaded {payload}")
        elif name == CELL_EDITED:
            row, col = getattr(payload, "row", None), getattr(payload, "col", None)
            if row is not None and col is not None:
                self.hooks.update_status(f"edited {cell_ref(row, col)}")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts: List[str] = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        document = self.controller.document
        return {
            "identity": document.identity,
            "shape": (document.row_count, document.column_count),
            "cursor": self.controller.cursor.cell,
            "modified": document.is_modified,
            "busy": self.controller.busy,
        }


__all__ = ["GridMirror", "HostAdapter", "HostHooks"]
