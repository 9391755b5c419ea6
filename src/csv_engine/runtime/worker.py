"""Async façade that moves storage I/O off the event-loop thread."""

from __future__ import annotations

import asyncio
import os
from typing import Optional, Union

from csv_engine.document.controller import DocumentController
from csv_engine.grid import FrozenGrid

from .telemetry import get_logger


class AsyncDocumentWorker:
    """Runs reads and writes in a thread; state changes stay on the loop.

    Overlapping load/reload/save calls are rejected with
    ``DocumentBusyError`` by the controller's I/O guard. Edits made while a
    save is being written are kept and leave the document modified.
    """

    def __init__(self, controller: DocumentController) -> None:
        self.controller = controller
        self.logger = get_logger("csv_engine.worker")

    async def open(self, identity: Union[str, "os.PathLike[str]"]) -> FrozenGrid:
        target = os.fspath(identity)
        with self.controller.io_guard("open"):
            data = await asyncio.to_thread(self.controller.read, target)
            return self.controller.apply_load(data, target)

    async def reload(self) -> FrozenGrid:
        with self.controller.io_guard("reload"):
            identity = self.controller.require_identity("reload")
            data = await asyncio.to_thread(self.controller.read, identity)
            return self.controller.apply_reload(data)

    async def save(self) -> str:
        identity = self.controller.document.identity
        return await self._save(identity, rename=identity is None)

    async def save_as(
        self, identity: Optional[Union[str, "os.PathLike[str]"]] = None
    ) -> str:
        target = os.fspath(identity) if identity is not None else None
        return await self._save(target, rename=True)

    async def _save(self, identity: Optional[str], *, rename: bool) -> str:
        if identity is None:
            identity = self.controller.pick_target()
        with self.controller.io_guard("save_as" if rename else "save"):
            rendered = self.controller.render(identity)
            self.logger.debug(f"worker::write {identity} ({len(rendered.data)} bytes)")
            await asyncio.to_thread(self.controller.write, identity, rendered.data)
            return self.controller.commit_save(rendered, rename=rename)


__all__ = ["AsyncDocumentWorker"]
