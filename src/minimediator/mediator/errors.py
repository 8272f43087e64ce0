# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Mediator-specific errors.

Handler and behavior failures raised during a send call are never wrapped;
the errors below are the only ones the mediator itself produces.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from minimediator.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, MediatorError

MEDIATOR = ErrorCategory.get_or_create("MEDIATOR")
INVALID_REQUEST: Final = ErrorCode.get_or_create("INVALID_REQUEST", MEDIATOR)
HANDLER_NOT_FOUND: Final = ErrorCode.get_or_create("HANDLER_NOT_FOUND", MEDIATOR)
NOTIFICATION_PUBLISH_FAILED: Final = ErrorCode.get_or_create(
    "NOTIFICATION_PUBLISH_FAILED", MEDIATOR
)
OPERATION_CANCELLED: Final = ErrorCode.get_or_create("OPERATION_CANCELLED", MEDIATOR)


def describe_type(tp: Any) -> str:
    """Readable name of a contract type argument."""
    if isinstance(tp, type):
        return tp.__name__
    return getattr(tp, "_name", None) or repr(tp)


class InvalidRequestError(MediatorError):
    """Raised when send or publish receives a missing or wrongly typed message."""

    def __init__(self, argument: str, value: Any, expected: type, **kwargs: Any) -> None:
        actual = "None" if value is None else type(value).__name__
        super().__init__(
            f"Argument '{argument}' must be a {expected.__name__} instance, got {actual}",
            code=INVALID_REQUEST,
            argument=argument,
            expected=expected.__name__,
            actual=actual,
            **kwargs,
        )
        self.argument = argument


class HandlerNotFoundError(MediatorError):
    """Raised when no request handler is registered for a contract."""

    def __init__(self, request_type: type, response_type: Any, **kwargs: Any) -> None:
        contract = f"RequestHandler[{describe_type(request_type)}, {describe_type(response_type)}]"
        super().__init__(
            f"No {contract} registered",
            code=HANDLER_NOT_FOUND,
            contract=contract,
            **kwargs,
        )
        self.request_type = request_type
        self.response_type = response_type
        self.contract = contract


class NotificationPublishError(MediatorError):
    """
    Raised after every handler of a notification finished and at least one failed.

    ``errors`` holds each handler failure in handler order; ``__cause__`` is
    the first of them.
    """

    def __init__(
        self,
        notification_type: type,
        errors: Sequence[BaseException],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{len(errors)} handler(s) failed for notification {notification_type.__name__}",
            code=NOTIFICATION_PUBLISH_FAILED,
            notification_type=notification_type.__name__,
            failure_count=len(errors),
            **kwargs,
        )
        self.notification_type = notification_type
        self.errors: list[BaseException] = list(errors)
        if self.errors:
            self.__cause__ = self.errors[0]


class OperationCancelledError(MediatorError):
    """Raised by a cancellation token whose cancellation was requested."""

    def __init__(self, message: str = "The operation was cancelled", **kwargs: Any) -> None:
        super().__init__(
            message,
            code=OPERATION_CANCELLED,
            severity=ErrorSeverity.WARNING,
            **kwargs,
        )
