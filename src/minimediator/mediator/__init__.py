# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Dispatch engine: the mediator, its pipeline builder and cancellation signal.
"""

from minimediator.mediator.cancellation import CancellationToken, CancellationTokenSource
from minimediator.mediator.errors import (
    HandlerNotFoundError,
    InvalidRequestError,
    NotificationPublishError,
    OperationCancelledError,
)
from minimediator.mediator.mediator import Mediator
from minimediator.mediator.pipeline import build_pipeline
from minimediator.mediator.protocols import (
    MediatorProtocol,
    PublisherProtocol,
    SenderProtocol,
)

__all__ = [
    # Protocols
    "MediatorProtocol",
    "PublisherProtocol",
    "SenderProtocol",
    # Core components
    "Mediator",
    "build_pipeline",
    # Cancellation
    "CancellationToken",
    "CancellationTokenSource",
    # Errors
    "HandlerNotFoundError",
    "InvalidRequestError",
    "NotificationPublishError",
    "OperationCancelledError",
]
