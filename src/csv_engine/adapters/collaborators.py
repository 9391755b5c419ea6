"""Collaborator protocols the controller depends on, plus default implementations."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Protocol


class Storage(Protocol):
    """Reads and writes raw bytes for a path-like identity."""

    def read(self, identity: str) -> bytes:
        ...

    def write(self, identity: str, data: bytes) -> None:
        ...


class Clipboard(Protocol):
    """Host clipboard; ``get`` returns ``None`` when it holds no text."""

    def get(self) -> Optional[str]:
        ...

    def set(self, value: str) -> None:
        ...


class FilePicker(Protocol):
    """Asks the user where to save; ``None`` means the dialog was cancelled."""

    def choose_save_target(self, suggested_name: str) -> Optional[str]:
        ...


class FileStorage:
    """Local filesystem storage with atomic replace-on-write."""

    def read(self, identity: str) -> bytes:
        return Path(identity).read_bytes()

    def write(self, identity: str, data: bytes) -> None:
        target = Path(identity)
        directory = target.parent if str(target.parent) else Path(".")
        mode = _target_mode(target)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.chmod(temp_name, mode)
            os.replace(temp_name, target)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise


def _target_mode(target: Path) -> int:
    """Permission bits the saved file should end up with.

    An existing file keeps its mode; a new one gets ``0o666`` minus the umask,
    as if it had been created with ``open``.
    """

    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class MemoryClipboard:
    """In-process clipboard used when the host does not provide one."""

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> None:
        self._value = value


__all__ = [
    "Storage",
    "Clipboard",
    "FilePicker",
    "FileStorage",
    "MemoryClipboard",
]
