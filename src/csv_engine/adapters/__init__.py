"""Collaborator interfaces and host-facing adapters."""

from .collaborators import (
    Clipboard,
    FilePicker,
    FileStorage,
    MemoryClipboard,
    Storage,
)
from .host import GridMirror, HostAdapter, HostHooks
from .recent import RecentFiles

__all__ = [
    "Clipboard",
    "FilePicker",
    "FileStorage",
    "GridMirror",
    "HostAdapter",
    "HostHooks",
    "MemoryClipboard",
    "RecentFiles",
    "Storage",
]
