# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator

"""
Error handling foundation for minimediator.
"""

from __future__ import annotations

from minimediator.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    MediatorError,
)
from minimediator.errors.registry import ErrorRegistry, registry

__all__ = [
    # Error categories and codes
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    # Base error
    "MediatorError",
    # Registry
    "ErrorRegistry",
    "registry",
]
