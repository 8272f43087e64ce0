# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Logging interface definitions for minimediator.

The mediator and the built-in behaviors depend on this protocol only, so any
logger accepting a message plus keyword context can be supplied.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """
    Structured logger interface.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a debug message."""
        ...

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an info message."""
        ...

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a warning message."""
        ...

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an error message."""
        ...

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log a critical message."""
        ...

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an error message with the active exception's traceback."""
        ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger that adds ``kwargs`` to every message."""
        ...
