# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Logger implementation for minimediator.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured keyword context.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import sys
import uuid
from typing import Any

from minimediator.logging.config import LoggingSettings
from minimediator.logging.level import LogLevel
from minimediator.logging.protocols import LoggerProtocol

# Name of the LogRecord attribute carrying structured context
CONTEXT_ATTR = "context"


class MediatorJsonEncoder(json.JSONEncoder):
    """JSON encoder with graceful fallbacks for values found in log context."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if isinstance(obj, type):
            return obj.__name__
        if hasattr(obj, "model_dump"):  # Pydantic v2 models
            return obj.model_dump()
        return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formatter that renders the structured context of a record."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp

        fmt = "%(levelname)s %(name)s | %(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = getattr(record, CONTEXT_ATTR, None) or {}
        if self.json_format:
            return self._format_json(record, context)
        return self._format_text(super().format(record), context)

    def _format_json(self, record: logging.LogRecord, context: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "level": record.levelname,
            "name": record.name,
            **context,
        }
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data, cls=MediatorJsonEncoder, ensure_ascii=False)

    def _format_text(self, message: str, context: dict[str, Any]) -> str:
        if not context:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in context.items())
        # Keep any traceback on the lines after the context
        head, sep, tail = message.partition("\n")
        return f"{head} {ctx_str}{sep}{tail}"

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, type):
            return value.__name__
        if isinstance(value, BaseException):
            return f"{type(value).__name__}({value})"
        try:
            return json.dumps(value, cls=MediatorJsonEncoder)
        except (TypeError, ValueError):
            return str(value)


class MediatorLogger:
    """Default structured logger for minimediator.

    Messages take keyword context (``logger.info("Dispatching request",
    request_type="Ping")``). Context is attached to the emitted record as
    ``record.context`` and rendered by :class:`StructuredFormatter`.
    """

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        *,
        bound_context: dict[str, Any] | None = None,
        configure: bool = True,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            settings: Optional logger settings (loads from environment if None)
            bound_context: Context added to every message from this logger
            configure: Whether to (re)install handlers on the underlying logger
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = dict(bound_context or {})

        if configure:
            self._configure()

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def _configure(self) -> None:
        """Configure the underlying logger from the settings."""
        self._logger.setLevel(LogLevel.parse(self._settings.level))

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
        )

        if self._settings.console_enabled:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = self._settings.propagate

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return

        exc_info = kwargs.pop("exc_info", None)
        context = {**self._bound_context, **kwargs}
        self._logger.log(
            level,
            msg,
            exc_info=exc_info,
            extra={CONTEXT_ATTR: context},
            stacklevel=3,
        )

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, **kwargs)

    def set_level(self, level: LogLevel | str | int) -> None:
        self._logger.setLevel(LogLevel.parse(level))

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Create a logger sharing this one's handlers with extra bound context.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        return MediatorLogger(
            self.name,
            settings=self._settings,
            bound_context={**self._bound_context, **kwargs},
            configure=False,
        )


def get_logger(
    name: str,
    level: LogLevel | None = None,
    settings: LoggingSettings | None = None,
) -> MediatorLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override
        settings: Optional settings (loaded from the environment if None)

    Returns:
        Configured logger instance
    """
    logger = MediatorLogger(name, settings=settings or LoggingSettings.load())

    if level is not None:
        logger.set_level(level)

    return logger
