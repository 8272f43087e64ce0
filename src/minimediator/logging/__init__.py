# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator

"""
Structured logging for minimediator.
"""

from __future__ import annotations

from minimediator.logging.config import LoggingSettings
from minimediator.logging.level import LogLevel
from minimediator.logging.logger import (
    MediatorJsonEncoder,
    MediatorLogger,
    StructuredFormatter,
    get_logger,
)
from minimediator.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "LogLevel",
    # Implementation
    "MediatorLogger",
    "MediatorJsonEncoder",
    "StructuredFormatter",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
