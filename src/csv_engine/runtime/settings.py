"""Environment-driven engine settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from csv_engine.codec.delimiter import DEFAULT_TAB_EXTENSIONS

from .telemetry import ENV_PREFIX

DEFAULT_UNTITLED_NAME = "untitled.csv"
DEFAULT_RECENT_LIMIT = 10


def _split_extensions(raw: str) -> tuple[str, ...]:
    values = (item.strip().lower().lstrip(".") for item in raw.split(","))
    return tuple(value for value in values if value)


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Knobs shared by the controller, the adapters and the CLI."""

    encoding: str = "utf-8"
    tab_extensions: tuple[str, ...] = field(default=DEFAULT_TAB_EXTENSIONS)
    untitled_name: str = DEFAULT_UNTITLED_NAME
    recent_limit: int = DEFAULT_RECENT_LIMIT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            value = env.get(f"{ENV_PREFIX}{name}")
            return value.strip() if value is not None and value.strip() else None

        extensions = _split_extensions(read("TAB_EXTENSIONS") or "")
        recent_limit = DEFAULT_RECENT_LIMIT
        raw_limit = read("RECENT_LIMIT")
        if raw_limit is not None:
            try:
                recent_limit = max(0, int(raw_limit))
            except ValueError:
                recent_limit = DEFAULT_RECENT_LIMIT

        return cls(
            encoding=read("ENCODING") or "utf-8",
            tab_extensions=extensions or DEFAULT_TAB_EXTENSIONS,
            untitled_name=read("UNTITLED_NAME") or DEFAULT_UNTITLED_NAME,
            recent_limit=recent_limit,
        )


__all__ = ["EngineSettings", "DEFAULT_TAB_EXTENSIONS", "DEFAULT_UNTITLED_NAME"]
