# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Cooperative cancellation signal threaded through send and publish.

The mediator never checks the token itself; handlers and behaviors decide
when to look at it.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import ClassVar

from minimediator.logging import get_logger
from minimediator.mediator.errors import OperationCancelledError

logger = get_logger(__name__)


def _run(callback: Callable[[], object]) -> None:
    """Run one cancellation callback; a failure is logged, never raised."""
    try:
        callback()
    except Exception as exc:
        logger.exception(
            "Cancellation callback failed",
            callback=getattr(callback, "__qualname__", repr(callback)),
            error=str(exc),
        )


class CancellationTokenSource:
    """Owns a cancellation signal and hands out its read-only token."""

    def __init__(self) -> None:
        self._cancelled = False
        self._callbacks: list[Callable[[], object]] = []
        self._lock = threading.Lock()
        self.token = CancellationToken(self)

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Request cancellation and run registered callbacks once, in order."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._callbacks = self._callbacks, []

        for callback in callbacks:
            _run(callback)

    def _register(self, callback: Callable[[], object]) -> None:
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return
        _run(callback)


class CancellationToken:
    """Read-only view of a :class:`CancellationTokenSource`.

    ``CancellationToken.NONE`` is never cancelled.
    """

    NONE: ClassVar[CancellationToken]

    __slots__ = ("_source",)

    def __init__(self, source: CancellationTokenSource | None = None) -> None:
        self._source = source

    @property
    def can_be_cancelled(self) -> bool:
        return self._source is not None

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source is not None and self._source.is_cancellation_requested

    def throw_if_cancellation_requested(self) -> None:
        """Raise :class:`OperationCancelledError` if cancellation was requested."""
        if self.is_cancellation_requested:
            raise OperationCancelledError()

    def register(self, callback: Callable[[], object]) -> None:
        """Run ``callback`` on cancellation, or immediately if already cancelled.

        A failing callback is logged and never raised, whenever it runs.
        """
        if self._source is not None:
            self._source._register(callback)

    def __repr__(self) -> str:
        if self._source is None:
            return "CancellationToken.NONE"
        return f"CancellationToken(cancelled={self.is_cancellation_requested})"


CancellationToken.NONE = CancellationToken()
