"""Event bus used by the controller to notify collaborators."""

from __future__ import annotations

from typing import Callable, Dict

DOCUMENT_LOADED = "document.loaded"
DOCUMENT_RELOADED = "document.reloaded"
DOCUMENT_SAVED = "document.saved"
CELL_EDITED = "cell.edited"
HISTORY_UNDO = "history.undo"

ALL_EVENTS = (
    DOCUMENT_LOADED,
    DOCUMENT_RELOADED,
    DOCUMENT_SAVED,
    CELL_EDITED,
    HISTORY_UNDO,
)

Callback = Callable[[object], None]


class EventBus:
    """Minimal event bus letting collaborators react to document changes.

    Events fire after the controller has committed the change. Callbacks must
    not raise: an exception propagates to whoever called the controller, even
    though the change itself already happened.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callback]] = {}

    def subscribe(self, event: str, callback: Callback) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callback) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "EventBus",
    "ALL_EVENTS",
    "DOCUMENT_LOADED",
    "DOCUMENT_RELOADED",
    "DOCUMENT_SAVED",
    "CELL_EDITED",
    "HISTORY_UNDO",
]
