"""Delimiter selection: content sniffing on load, file extension on save."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Iterable, Literal

COMMA = ","
TAB = "\t"

Delimiter = Literal[",", "\t"]

DEFAULT_TAB_EXTENSIONS = ("tsv", "tab")


def first_line(text: str) -> str:
    return text.split("\n", 1)[0]


def detect_delimiter(text: str) -> Delimiter:
    """Pick tab when the first line contains one, comma otherwise."""

    return TAB if TAB in first_line(text) else COMMA


def delimiter_for_path(
    path: str | os.PathLike[str],
    *,
    tab_extensions: Iterable[str] = DEFAULT_TAB_EXTENSIONS,
) -> Delimiter:
    """Delimiter used when writing to ``path``, chosen from its extension."""

    extension = PurePath(os.fspath(path)).suffix.lower().lstrip(".")
    wanted = {ext.lower().lstrip(".") for ext in tab_extensions}
    return TAB if extension and extension in wanted else COMMA


def validate_delimiter(delimiter: str) -> Delimiter:
    if delimiter == COMMA:
        return COMMA
    if delimiter == TAB:
        return TAB
    raise ValueError(f"unsupported delimiter {delimiter!r}; expected ',' or tab")


__all__ = [
    "COMMA",
    "DEFAULT_TAB_EXTENSIONS",
    "TAB",
    "Delimiter",
    "delimiter_for_path",
    "detect_delimiter",
    "first_line",
    "validate_delimiter",
]
