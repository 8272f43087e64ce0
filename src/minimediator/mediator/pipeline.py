# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Behavior chain assembly for a single send call.

The first-registered behavior ends up outermost: it runs first on the way in
and last on the way out.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from minimediator.contracts import (
        PipelineBehavior,
        RequestHandler,
        RequestHandlerDelegate,
    )
    from minimediator.mediator.cancellation import CancellationToken

TResponse = TypeVar("TResponse")


def build_pipeline(
    request: Any,
    cancellation_token: CancellationToken,
    handler: RequestHandler[Any, TResponse],
    behaviors: Sequence[PipelineBehavior[Any, TResponse]] = (),
) -> RequestHandlerDelegate[TResponse]:
    """
    Compose the behaviors around the handler into one zero-argument callable.

    Args:
        request: The request every step receives
        cancellation_token: Passed unchanged to every behavior and the handler
        handler: The terminal handler
        behaviors: Behaviors in registration order

    Returns:
        A callable that runs the whole chain when awaited; with no behaviors
        it is the bare handler invocation
    """
    pipeline: RequestHandlerDelegate[TResponse] = partial(
        handler.handle, request, cancellation_token
    )

    # Wrap from the last-registered behavior outwards
    for behavior in reversed(behaviors):
        pipeline = partial(behavior.handle, request, cancellation_token, pipeline)

    return pipeline
