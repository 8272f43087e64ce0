# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Startup helper wiring a registry and a mediator in one call.

Behaviors are registered in the order given, which is the order they wrap
every handler::

    mediator = add_minimediator(
        LoggingBehavior(),
        ValidationBehavior([CreateUserValidator()]),
        CreateUserHandler,
        UserCreatedMailer,
    )
"""

from __future__ import annotations

from typing import Any

from minimediator.config import MediatorSettings
from minimediator.logging import LoggerProtocol, get_logger
from minimediator.mediator import Mediator
from minimediator.registry import HandlerRegistry


def add_minimediator(
    *implementations: Any,
    registry: HandlerRegistry | None = None,
    settings: MediatorSettings | None = None,
    logger: LoggerProtocol | None = None,
) -> Mediator:
    """
    Register implementations, freeze the registry and build a mediator.

    Args:
        *implementations: Handler and behavior classes, instances or both
        registry: Registry to extend; a new one is created if None
        settings: Settings for a newly created registry
        logger: Logger for the registry and the mediator

    Returns:
        A mediator reading from the frozen registry

    Raises:
        InvalidRegistrationError: If an implementation declares no contract
        DuplicateHandlerError: If two handlers target the same request type
    """
    logger = logger or get_logger("minimediator")
    if registry is None:
        registry = HandlerRegistry(settings=settings, logger=logger)

    registry.register(*implementations).freeze()
    logger.debug("Mediator configured", implementations=len(implementations))
    return Mediator(registry, logger=logger)
