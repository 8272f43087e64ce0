# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Lookup capability the mediator consumes.

Any object providing these three methods can stand in for
:class:`~minimediator.registry.registry.HandlerRegistry`, for instance an
adapter over an application's own dependency injection container.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# (request type, response type)
ContractKey = tuple[type, Any]


@runtime_checkable
class HandlerProviderProtocol(Protocol):
    """Read-only lookup of handlers and behaviors by contract."""

    def get_handler(self, contract: ContractKey) -> Any | None:
        """Return the single handler for ``contract``, or None when none is registered."""
        ...

    def get_behaviors(self, contract: ContractKey) -> list[Any]:
        """Return every behavior applying to ``contract``, in registration order."""
        ...

    def get_notification_handlers(self, notification_type: type) -> list[Any]:
        """Return every handler registered for ``notification_type``."""
        ...
