# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
minimediator: in-process request/response and notification dispatch with
composable pipeline behaviors.
"""

from minimediator.behaviors import (
    CacheableRequest,
    CachingBehavior,
    LoggingBehavior,
    RequestValidationError,
    RequestValidator,
    ValidationBehavior,
    ValidationFailure,
)
from minimediator.config import MediatorSettings
from minimediator.contracts import (
    Notification,
    NotificationHandler,
    PipelineBehavior,
    Request,
    RequestHandler,
    RequestHandlerDelegate,
    Unit,
)
from minimediator.errors import ErrorCategory, ErrorCode, ErrorSeverity, MediatorError
from minimediator.mediator import (
    CancellationToken,
    CancellationTokenSource,
    HandlerNotFoundError,
    InvalidRequestError,
    Mediator,
    MediatorProtocol,
    NotificationPublishError,
    OperationCancelledError,
    PublisherProtocol,
    SenderProtocol,
    build_pipeline,
)
from minimediator.registration import add_minimediator
from minimediator.registry import (
    DuplicateHandlerError,
    HandlerProviderProtocol,
    HandlerRegistry,
    InvalidRegistrationError,
    RegistryFrozenError,
)

__all__ = [
    # Contracts
    "Notification",
    "NotificationHandler",
    "PipelineBehavior",
    "Request",
    "RequestHandler",
    "RequestHandlerDelegate",
    "Unit",
    # Mediator
    "Mediator",
    "MediatorProtocol",
    "PublisherProtocol",
    "SenderProtocol",
    "build_pipeline",
    "add_minimediator",
    # Cancellation
    "CancellationToken",
    "CancellationTokenSource",
    # Registry
    "HandlerProviderProtocol",
    "HandlerRegistry",
    # Behaviors
    "CacheableRequest",
    "CachingBehavior",
    "LoggingBehavior",
    "RequestValidator",
    "ValidationBehavior",
    "ValidationFailure",
    # Configuration
    "MediatorSettings",
    # Errors
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "MediatorError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "InvalidRegistrationError",
    "InvalidRequestError",
    "NotificationPublishError",
    "OperationCancelledError",
    "RegistryFrozenError",
    "RequestValidationError",
]
