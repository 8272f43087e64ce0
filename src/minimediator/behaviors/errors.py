# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""Errors raised by the built-in pipeline behaviors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

from minimediator.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, MediatorError

VALIDATION = ErrorCategory.get_or_create("VALIDATION")
REQUEST_VALIDATION_FAILED: Final = ErrorCode.get_or_create(
    "REQUEST_VALIDATION_FAILED", VALIDATION
)


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """One problem found with a request; ``field`` is None for request-level rules."""

    field: str | None
    message: str

    def __str__(self) -> str:
        return self.message if self.field is None else f"{self.field}: {self.message}"


class RequestValidationError(MediatorError):
    """Raised by ValidationBehavior when a request fails validation."""

    def __init__(
        self,
        request_type: type,
        failures: Sequence[ValidationFailure],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{request_type.__name__} failed validation: "
            + "; ".join(str(f) for f in failures),
            code=REQUEST_VALIDATION_FAILED,
            severity=ErrorSeverity.WARNING,
            request_type=request_type.__name__,
            failures=[str(f) for f in failures],
            **kwargs,
        )
        self.request_type = request_type
        self.failures: list[ValidationFailure] = list(failures)
