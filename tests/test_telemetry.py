from __future__ import annotations

import pytest

from csv_engine.runtime import telemetry


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="production")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("csv_engine.test") is telemetry.get_logger(
        "csv_engine.test"
    )


def test_span_reraises_and_collects_metadata() -> None:
    with telemetry.span("test::ok", component="tests", metadata={"rows": 3}) as handle:
        handle.add_metadata("columns", 2)

    assert handle.metadata == {"rows": "3", "columns": "2"}

    with pytest.raises(KeyError):
        with telemetry.span("test::boom", component=True):
            raise KeyError("missing")


def test_log_options_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("CSV_ENGINE_LOG_BUFFERED", "yes")
    monkeypatch.setenv("CSV_ENGINE_LOG_BUFFER_SIZE", "oops")
    monkeypatch.setenv("CSV_ENGINE_NO_COLOR", "1")

    options = telemetry.LogOptions.from_env()

    assert options.level == "DEBUG"
    assert options.buffer_size == 2048
    assert options.color is False
