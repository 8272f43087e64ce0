# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Request validation behavior.

Validators declare the request type they check through their generic base::

    class CreateUserValidator(RequestValidator[CreateUser]):
        def validate(self, request: CreateUser) -> list[ValidationFailure]:
            if not request.email:
                return [ValidationFailure("email", "must not be empty")]
            return []

Requests that are pydantic models are additionally re-validated, which
catches instances built with ``model_construct`` or mutated after creation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar, get_args, get_origin

import pydantic

from minimediator.behaviors.errors import RequestValidationError, ValidationFailure
from minimediator.contracts import PipelineBehavior, Request, RequestHandlerDelegate
from minimediator.registry.introspection import generic_bases

if TYPE_CHECKING:
    from minimediator.mediator.cancellation import CancellationToken

TRequest = TypeVar("TRequest", bound=Request[Any])
TResponse = TypeVar("TResponse")


class RequestValidator(ABC, Generic[TRequest]):
    """Checks one request type; subclasses implement :meth:`validate`."""

    def request_type(self) -> type | None:
        """The request type declared via ``RequestValidator[R]``, if any."""
        for base in generic_bases(type(self)):
            if get_origin(base) is RequestValidator:
                args = get_args(base)
                if args and isinstance(args[0], type):
                    return args[0]
        return None

    def can_validate(self, request: Any) -> bool:
        request_type = self.request_type()
        return request_type is None or isinstance(request, request_type)

    @abstractmethod
    def validate(self, request: TRequest) -> Iterable[ValidationFailure]:
        """Return every problem found with ``request``; empty when it is valid."""


def pydantic_failures(request: pydantic.BaseModel) -> list[ValidationFailure]:
    """Re-validate a pydantic model request and translate its errors.

    The dump uses aliases and leaves out computed fields so that it is valid
    input for the model again.
    """
    try:
        type(request).model_validate(request.model_dump(by_alias=True, round_trip=True))
    except pydantic.ValidationError as exc:
        return [
            ValidationFailure(
                ".".join(str(part) for part in error["loc"]) or None,
                error["msg"],
            )
            for error in exc.errors()
        ]
    return []


class ValidationBehavior(PipelineBehavior[TRequest, TResponse]):
    """
    Rejects invalid requests before they reach the handler.

    Every applicable validator runs and all failures are reported together;
    on any failure the rest of the pipeline is skipped.
    """

    def __init__(self, validators: Iterable[RequestValidator[Any]] = ()) -> None:
        self.validators = list(validators)

    async def handle(
        self,
        request: TRequest,
        cancellation_token: CancellationToken,
        next_: RequestHandlerDelegate[TResponse],
    ) -> TResponse:
        failures: list[ValidationFailure] = []

        if isinstance(request, pydantic.BaseModel):
            failures.extend(pydantic_failures(request))

        for validator in self.validators:
            if validator.can_validate(request):
                failures.extend(validator.validate(request))

        if failures:
            raise RequestValidationError(type(request), failures)

        return await next_()
