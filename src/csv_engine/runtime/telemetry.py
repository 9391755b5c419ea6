"""Logging and profiling for the document engine, built on telelog.

``configure(...)`` -- pick a preset or supply a ``telelog.Config``
``get_logger(name)`` -- cached logger sharing the active configuration
``record_event(name, ...)`` -- one structured ``event::<name>`` line
``span(name, ...)`` -- profile a block, tag it with a component and context
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CSV_ENGINE_"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class LogOptions:
    """Logging knobs read from ``CSV_ENGINE_*`` variables."""

    logger: str = "csv_engine"
    level: str = "INFO"
    log_file: str = ""
    console: bool = True
    color: bool = True
    json: bool = False
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "LogOptions":
        buffer_size = None
        if _env_flag("LOG_BUFFERED"):
            raw = _env("LOG_BUFFER_SIZE") or "2048"
            buffer_size = int(raw) if raw.isdigit() else 2048
        return cls(
            logger=_env("LOGGER") or "csv_engine",
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_file=_env("LOG_FILE") or "",
            console=not _env_flag("DISABLE_CONSOLE"),
            color=not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            buffer_size=buffer_size,
        )


def _options_config(options: LogOptions) -> Any:
    config = tl.Config()
    config.with_min_level(options.level)
    config.with_console_output(options.console)
    if options.console:
        config.with_colored_output(options.color)
    if options.json:
        config.with_json_format(True)
    if options.log_file:
        config.with_file_output(options.log_file)
    if options.buffer_size is not None:
        config.with_buffering(True)
        config.with_buffer_size(options.buffer_size)
    return config


def _development() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(True)
    return config


def _production() -> Any:
    config = tl.Config()
    config.with_min_level("INFO")
    config.with_console_output(False)
    config.with_file_output(_env("LOG_FILE") or "csv_engine.log")
    config.with_buffering(True)
    return config


def _performance() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_buffering(True)
    config.with_file_output(_env("LOG_FILE") or "csv_engine-performance.log")
    return config


PRESETS: Dict[str, Callable[[], Any]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active configuration and drop cached loggers.

    With neither argument the configuration comes from the environment.
    ``config`` and ``preset`` are mutually exclusive.
    """

    global _CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        try:
            config = PRESETS[preset.lower()]()
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
    elif config is None:
        config = _options_config(LogOptions.from_env())

    # spans use logger.profile
    config.with_profiling(True)
    _CONFIG = config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    if _CONFIG is None:
        configure()
    logger_name = name or LogOptions.from_env().logger
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach metadata or log progress."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def note(self, message: str) -> None:
        self._log("debug", f"span::{message}")

    def fail(self, reason: str) -> None:
        self._log("error", "span::fail", reason=reason)

    def _log(self, level: str, message: str, **extra: Any) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(extra)
        _emit(self.logger, level, message, payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``; failures are logged then re-raised.

    ``component=True`` tracks the block under its own name, a string tracks it
    under that component. ``metadata`` is pushed as logger context for the
    duration of the block.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    else:
        component_name = component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(context),
    )

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()

__all__ = [
    "LogOptions",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
