"""Top-level pytest configuration for minimediator."""

from __future__ import annotations

from typing import Any

import pytest

from minimediator.config import MediatorSettings
from minimediator.logging import LoggingSettings, MediatorLogger
from minimediator.registry import HandlerRegistry


class RecordingLogger:
    """Logger double capturing (level, message, context) triples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, msg: str, **kwargs: Any) -> None:
        self.records.append((level, msg, kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._record("DEBUG", msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._record("INFO", msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._record("WARNING", msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._record("ERROR", msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._record("CRITICAL", msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        self._record("ERROR", msg, **kwargs)

    def bind(self, **kwargs: Any) -> RecordingLogger:
        return self

    def messages(self, level: str | None = None) -> list[str]:
        return [msg for lvl, msg, _ in self.records if level is None or lvl == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def logging_settings() -> LoggingSettings:
    """Settings routing records to pytest's caplog instead of stdout."""
    return LoggingSettings(level="DEBUG", console_enabled=False, propagate=True)


@pytest.fixture
def quiet_logger(logging_settings: LoggingSettings) -> MediatorLogger:
    return MediatorLogger("minimediator.tests", settings=logging_settings)


@pytest.fixture
def settings() -> MediatorSettings:
    return MediatorSettings()


@pytest.fixture
def registry(settings: MediatorSettings, recording_logger: RecordingLogger) -> HandlerRegistry:
    return HandlerRegistry(settings=settings, logger=recording_logger)
