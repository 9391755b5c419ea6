from __future__ import annotations

import asyncio
import threading
from typing import Dict

import pytest

from csv_engine.document import DocumentBusyError, DocumentController, NoFileError
from csv_engine.runtime.settings import EngineSettings
from csv_engine.runtime.worker import AsyncDocumentWorker


class SlowStorage:
    """Storage whose writes block until the test releases them."""

    def __init__(self, files: Dict[str, bytes]) -> None:
        self.files = dict(files)
        self.release = threading.Event()
        self.read_threads: list[str] = []

    def read(self, identity: str) -> bytes:
        self.read_threads.append(threading.current_thread().name)
        return self.files[identity]

    def write(self, identity: str, data: bytes) -> None:
        self.release.wait(timeout=5)
        self.files[identity] = data


def make_worker(files: Dict[str, bytes]) -> tuple[AsyncDocumentWorker, SlowStorage]:
    storage = SlowStorage(files)
    controller = DocumentController(storage=storage, settings=EngineSettings())
    return AsyncDocumentWorker(controller), storage


def test_open_reads_off_the_loop_thread() -> None:
    worker, storage = make_worker({"f.csv": b"a,b\n"})

    grid = asyncio.run(worker.open("f.csv"))

    assert grid == (("a", "b"),)
    assert storage.read_threads
    assert storage.read_threads[0] != threading.main_thread().name
    assert worker.controller.busy is None


def test_overlapping_io_is_rejected() -> None:
    worker, storage = make_worker({"f.csv": b"x\n"})

    async def scenario() -> None:
        await worker.open("f.csv")
        worker.controller.edit_cell(0, 0, "y")
        save_task = asyncio.create_task(worker.save())
        await asyncio.sleep(0.05)
        assert worker.controller.busy == "save"
        with pytest.raises(DocumentBusyError):
            await worker.reload()
        storage.release.set()
        await save_task

    asyncio.run(scenario())

    assert storage.files["f.csv"] == b"y\n"
    assert worker.controller.is_modified is False
    assert worker.controller.busy is None


def test_edit_during_save_keeps_document_modified() -> None:
    worker, storage = make_worker({"f.csv": b"x\n"})

    async def scenario() -> None:
        await worker.open("f.csv")
        worker.controller.edit_cell(0, 0, "y")
        save_task = asyncio.create_task(worker.save())
        await asyncio.sleep(0.05)
        worker.controller.edit_cell(0, 0, "z")
        storage.release.set()
        await save_task

    asyncio.run(scenario())

    assert storage.files["f.csv"] == b"y\n"
    assert worker.controller.document.checkpoint() == (("y",),)
    assert worker.controller.is_modified is True


def test_reload_and_save_as() -> None:
    worker, storage = make_worker({"f.csv": b"a\n"})
    storage.release.set()

    async def scenario() -> None:
        await worker.open("f.csv")
        worker.controller.edit_cell(0, 0, "b")
        await worker.reload()
        await worker.save_as("g.tsv")

    asyncio.run(scenario())

    assert worker.controller.document.identity == "g.tsv"
    assert storage.files["g.tsv"] == b"a\n"
    assert worker.controller.undo().kind == "snapshot"
    assert worker.controller.document.snapshot() == (("b",),)


def test_reload_without_file() -> None:
    worker, _ = make_worker({})

    with pytest.raises(NoFileError):
        asyncio.run(worker.reload())
