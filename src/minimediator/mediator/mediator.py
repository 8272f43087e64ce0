# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
In-process mediator.

``send`` routes a request to its single handler through the behavior
pipeline; ``publish`` fans a notification out to every handler and waits for
all of them.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, TypeVar

from minimediator.contracts import Notification, Request
from minimediator.logging import LoggerProtocol, get_logger
from minimediator.mediator.cancellation import CancellationToken
from minimediator.mediator.errors import (
    HandlerNotFoundError,
    InvalidRequestError,
    NotificationPublishError,
)
from minimediator.mediator.pipeline import build_pipeline
from minimediator.registry.introspection import contract_for

if TYPE_CHECKING:
    from minimediator.registry.protocols import HandlerProviderProtocol

TResponse = TypeVar("TResponse")


class Mediator:
    """
    Dispatches requests and notifications to the handlers a provider supplies.

    The mediator keeps no state between calls besides the provider and its
    logger, so one instance can serve any number of concurrent callers.

    Args:
        provider: Lookup of handlers and behaviors, populated before use
        logger: Logger for dispatch diagnostics
    """

    def __init__(
        self,
        provider: HandlerProviderProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._provider = provider
        self._logger = logger or get_logger(__name__)

    @property
    def provider(self) -> HandlerProviderProtocol:
        return self._provider

    def send(
        self,
        request: Request[TResponse],
        cancellation_token: CancellationToken | None = None,
    ) -> Awaitable[TResponse]:
        """
        Send a request to its handler through every applicable behavior.

        The argument is checked before anything is scheduled, so an invalid
        request raises at call time rather than when awaited.

        Args:
            request: The request to dispatch
            cancellation_token: Passed unchanged to each behavior and the handler

        Returns:
            An awaitable resolving to the handler's (or a short-circuiting
            behavior's) response

        Raises:
            InvalidRequestError: If ``request`` is None or not a Request
            HandlerNotFoundError: When awaited, if no handler is registered
        """
        if not isinstance(request, Request):
            raise InvalidRequestError("request", request, Request)
        if cancellation_token is None:
            cancellation_token = CancellationToken.NONE
        return self._send(request, cancellation_token)

    def publish(
        self,
        notification: Notification,
        cancellation_token: CancellationToken | None = None,
    ) -> Awaitable[None]:
        """
        Publish a notification to every registered handler.

        Handlers run concurrently and the returned awaitable completes only
        once all of them have finished. Having no handlers is not an error.

        Raises:
            InvalidRequestError: If ``notification`` is None or not a Notification
            NotificationPublishError: When awaited, if any handler failed
        """
        if not isinstance(notification, Notification):
            raise InvalidRequestError("notification", notification, Notification)
        if cancellation_token is None:
            cancellation_token = CancellationToken.NONE
        return self._publish(notification, cancellation_token)

    async def _send(
        self, request: Request[TResponse], cancellation_token: CancellationToken
    ) -> TResponse:
        request_type = type(request)
        contract = contract_for(request_type)

        handler = self._provider.get_handler(contract)
        if handler is None:
            self._logger.error(
                "No handler registered for request",
                request_type=request_type.__name__,
            )
            raise HandlerNotFoundError(*contract)

        behaviors = self._provider.get_behaviors(contract)
        self._logger.debug(
            "Dispatching request",
            request_type=request_type.__name__,
            handler=type(handler).__name__,
            behaviors=len(behaviors),
        )

        pipeline = build_pipeline(request, cancellation_token, handler, behaviors)
        return await pipeline()

    async def _publish(
        self, notification: Notification, cancellation_token: CancellationToken
    ) -> None:
        notification_type = type(notification)
        handlers = self._provider.get_notification_handlers(notification_type)

        if not handlers:
            self._logger.debug(
                "No handlers found for notification",
                notification_type=notification_type.__name__,
            )
            return

        self._logger.debug(
            "Publishing notification",
            notification_type=notification_type.__name__,
            handlers=len(handlers),
        )

        results = await asyncio.gather(
            *(
                _run_notification_handler(handler, notification, cancellation_token)
                for handler in handlers
            ),
            return_exceptions=True,
        )

        errors: list[BaseException] = []
        for handler, result in zip(handlers, results):
            if isinstance(result, BaseException):
                self._logger.error(
                    "Error in notification handler",
                    notification_type=notification_type.__name__,
                    handler=type(handler).__name__,
                    error=str(result),
                    error_type=type(result).__name__,
                )
                errors.append(result)

        if errors:
            raise NotificationPublishError(notification_type, errors)


async def _run_notification_handler(
    handler: Any, notification: Notification, cancellation_token: CancellationToken
) -> None:
    await handler.handle(notification, cancellation_token)
