# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Protocol definitions for the mediator surface.

Callers that only send requests can depend on :class:`SenderProtocol`,
callers that only publish on :class:`PublisherProtocol`.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from minimediator.contracts import Notification, Request
    from minimediator.mediator.cancellation import CancellationToken

TResponse = TypeVar("TResponse")


@runtime_checkable
class SenderProtocol(Protocol):
    """Routes a request to its single handler through the behavior pipeline."""

    def send(
        self,
        request: Request[TResponse],
        cancellation_token: CancellationToken | None = None,
    ) -> Awaitable[TResponse]: ...


@runtime_checkable
class PublisherProtocol(Protocol):
    """Broadcasts a notification to every handler and waits for all of them."""

    def publish(
        self,
        notification: Notification,
        cancellation_token: CancellationToken | None = None,
    ) -> Awaitable[None]: ...


@runtime_checkable
class MediatorProtocol(SenderProtocol, PublisherProtocol, Protocol):
    """Both halves of the mediator."""
