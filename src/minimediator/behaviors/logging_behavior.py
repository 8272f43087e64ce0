# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""Request logging and timing behavior."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, TypeVar

from minimediator.config import MediatorSettings
from minimediator.contracts import PipelineBehavior, Request, RequestHandlerDelegate
from minimediator.logging import LoggerProtocol, get_logger

if TYPE_CHECKING:
    from minimediator.mediator.cancellation import CancellationToken

TRequest = TypeVar("TRequest", bound=Request[Any])
TResponse = TypeVar("TResponse")


class LoggingBehavior(PipelineBehavior[TRequest, TResponse]):
    """
    Logs every request passing through the pipeline with its elapsed time.

    Requests slower than ``slow_request_threshold_ms`` are logged as warnings.
    Failures are logged and re-raised unchanged.
    """

    def __init__(
        self,
        logger: LoggerProtocol | None = None,
        settings: MediatorSettings | None = None,
    ) -> None:
        self.logger = logger or get_logger(__name__)
        self.settings = settings or MediatorSettings.load()

    async def handle(
        self,
        request: TRequest,
        cancellation_token: CancellationToken,
        next_: RequestHandlerDelegate[TResponse],
    ) -> TResponse:
        request_type = type(request).__name__
        self.logger.info("Handling request", request_type=request_type)

        start = time.perf_counter()
        try:
            response = await next_()
        except Exception as e:
            self.logger.error(
                "Request failed",
                request_type=request_type,
                elapsed_ms=_elapsed_ms(start),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        elapsed_ms = _elapsed_ms(start)
        if elapsed_ms > self.settings.slow_request_threshold_ms:
            self.logger.warning(
                "Slow request",
                request_type=request_type,
                elapsed_ms=elapsed_ms,
                threshold_ms=self.settings.slow_request_threshold_ms,
            )
        else:
            self.logger.info(
                "Handled request", request_type=request_type, elapsed_ms=elapsed_ms
            )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 3)
