# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Registry-specific errors.

These are raised while the application populates the registry at startup,
never during dispatch.
"""

from __future__ import annotations

from typing import Any, Final

from minimediator.errors.base import ErrorCategory, ErrorCode, MediatorError

REGISTRY = ErrorCategory.get_or_create("REGISTRY")
DUPLICATE_HANDLER: Final = ErrorCode.get_or_create("DUPLICATE_HANDLER", REGISTRY)
INVALID_REGISTRATION: Final = ErrorCode.get_or_create("INVALID_REGISTRATION", REGISTRY)
REGISTRY_FROZEN: Final = ErrorCode.get_or_create("REGISTRY_FROZEN", REGISTRY)


def implementation_name(implementation: Any) -> str:
    if isinstance(implementation, type):
        return implementation.__qualname__
    if hasattr(implementation, "handle"):
        return type(implementation).__qualname__
    return getattr(implementation, "__qualname__", repr(implementation))


class DuplicateHandlerError(MediatorError):
    """Raised when a second request handler is registered for one request type."""

    def __init__(
        self, request_type: type, existing: Any, duplicate: Any, **kwargs: Any
    ) -> None:
        super().__init__(
            f"A request handler for {request_type.__name__} is already registered "
            f"({implementation_name(existing)}); refusing {implementation_name(duplicate)}",
            code=DUPLICATE_HANDLER,
            request_type=request_type.__name__,
            existing=implementation_name(existing),
            duplicate=implementation_name(duplicate),
            **kwargs,
        )
        self.request_type = request_type


class InvalidRegistrationError(MediatorError):
    """Raised when an implementation's contract cannot be determined or is inconsistent."""

    def __init__(self, message: str, implementation: Any, **kwargs: Any) -> None:
        super().__init__(
            message,
            code=INVALID_REGISTRATION,
            implementation=implementation_name(implementation),
            **kwargs,
        )


class RegistryFrozenError(MediatorError):
    """Raised when registering into a registry that has been frozen."""

    def __init__(self, implementation: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Registry is frozen; cannot register {implementation_name(implementation)}",
            code=REGISTRY_FROZEN,
            implementation=implementation_name(implementation),
            **kwargs,
        )
