# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Contract definitions for minimediator.

A request declares its response type through its generic base::

    @dataclass(frozen=True)
    class GetUser(Request[User]):
        user_id: int

    class GetUserHandler(RequestHandler[GetUser, User]):
        async def handle(self, request: GetUser, cancellation_token: CancellationToken) -> User:
            ...

The generic arguments are the type tags the registry and the mediator use to
route a request; no other runtime introspection takes place.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Protocol, TypeVar, final, runtime_checkable

if TYPE_CHECKING:
    from minimediator.mediator.cancellation import CancellationToken

TResponse = TypeVar("TResponse")
TRequest = TypeVar("TRequest", bound="Request[Any]")
TNotification = TypeVar("TNotification", bound="Notification")

# Continuation handed to a behavior: the rest of the chain for one send call.
RequestHandlerDelegate = Callable[[], Awaitable[TResponse]]


class Request(Generic[TResponse]):
    """Base class for requests expecting exactly one response of type ``TResponse``."""


class Notification:
    """Base class for notifications broadcast to any number of handlers."""


@runtime_checkable
class RequestHandler(Protocol[TRequest, TResponse]):
    """Handles one request type and produces its response."""

    async def handle(
        self, request: TRequest, cancellation_token: CancellationToken
    ) -> TResponse: ...


@runtime_checkable
class NotificationHandler(Protocol[TNotification]):
    """Performs a side effect for one notification type."""

    async def handle(
        self, notification: TNotification, cancellation_token: CancellationToken
    ) -> None: ...


@runtime_checkable
class PipelineBehavior(Protocol[TRequest, TResponse]):
    """
    Wraps handler execution for a send call.

    A behavior may inspect or replace the request data it sees, decide whether
    to await ``next_``, and inspect or replace the response. Not awaiting
    ``next_`` short-circuits every inner behavior and the handler.
    """

    async def handle(
        self,
        request: TRequest,
        cancellation_token: CancellationToken,
        next_: RequestHandlerDelegate[TResponse],
    ) -> TResponse: ...


@final
class Unit:
    """Sentinel response for requests without a meaningful value.

    ``Unit()`` always returns the same instance, also available as ``Unit.VALUE``.
    """

    __slots__ = ()

    VALUE: ClassVar[Unit]
    _instance: ClassVar[Unit | None] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "Unit"

    def __reduce__(self) -> tuple[type[Unit], tuple[()]]:
        return (Unit, ())


Unit.VALUE = Unit()
