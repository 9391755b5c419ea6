"""In-memory recent-files list fed by ``document.loaded`` events."""

from __future__ import annotations

from typing import List, Optional

from csv_engine.runtime.events import DOCUMENT_LOADED, EventBus
from csv_engine.runtime.settings import DEFAULT_RECENT_LIMIT


class RecentFiles:
    """Most-recent-first unique identities, capped at ``limit``."""

    def __init__(self, *, limit: int = DEFAULT_RECENT_LIMIT) -> None:
        self.limit = limit
        self._entries: List[str] = []

    def attach(self, bus: EventBus) -> "RecentFiles":
        bus.subscribe(DOCUMENT_LOADED, self._on_loaded)
        return self

    def detach(self, bus: EventBus) -> None:
        bus.unsubscribe(DOCUMENT_LOADED, self._on_loaded)

    def add(self, identity: str) -> None:
        if identity in self._entries:
            self._entries.remove(identity)
        self._entries.insert(0, identity)
        del self._entries[self.limit :]

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def _on_loaded(self, payload: object | None) -> None:
        identity: Optional[str] = payload if isinstance(payload, str) else None
        if identity:
            self.add(identity)


__all__ = ["RecentFiles"]
