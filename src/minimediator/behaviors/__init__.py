# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Built-in pipeline behaviors.

All of them are open behaviors: registered without a request type they wrap
every request.
"""

from minimediator.behaviors.caching import CacheableRequest, CachingBehavior
from minimediator.behaviors.errors import RequestValidationError, ValidationFailure
from minimediator.behaviors.logging_behavior import LoggingBehavior
from minimediator.behaviors.validation import RequestValidator, ValidationBehavior

__all__ = [
    "CacheableRequest",
    "CachingBehavior",
    "LoggingBehavior",
    "RequestValidationError",
    "RequestValidator",
    "ValidationBehavior",
    "ValidationFailure",
]
