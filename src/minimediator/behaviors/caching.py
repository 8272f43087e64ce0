# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Response caching behavior.

Only requests deriving from :class:`CacheableRequest` are cached. Register
the behavior as an instance so the cache outlives a single send call.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, TypeVar

from minimediator.config import MediatorSettings
from minimediator.contracts import PipelineBehavior, Request, RequestHandlerDelegate
from minimediator.logging import LoggerProtocol, get_logger

if TYPE_CHECKING:
    from minimediator.mediator.cancellation import CancellationToken

TRequest = TypeVar("TRequest", bound=Request[Any])
TResponse = TypeVar("TResponse")


class CacheableRequest:
    """Mixin marking a request whose response may be cached.

    The default key is the request itself, which suits frozen dataclasses.
    """

    def cache_key(self) -> Hashable:
        return self


class CachingBehavior(PipelineBehavior[TRequest, TResponse]):
    """
    Answers repeated cacheable requests from an in-memory LRU cache.

    A hit short-circuits the pipeline. Failures are never cached.
    """

    def __init__(
        self,
        settings: MediatorSettings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        settings = settings or MediatorSettings.load()
        self.ttl_seconds = settings.cache_ttl_seconds
        self.max_size = settings.cache_max_size
        self.logger = logger or get_logger(__name__)
        # Use OrderedDict for LRU eviction
        self._store: OrderedDict[Hashable, tuple[Any, float | None]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def size(self) -> int:
        return len(self._store)

    async def handle(
        self,
        request: TRequest,
        cancellation_token: CancellationToken,
        next_: RequestHandlerDelegate[TResponse],
    ) -> TResponse:
        if not isinstance(request, CacheableRequest):
            return await next_()

        key = (type(request), request.cache_key())
        entry = self._store.get(key)
        if entry is not None:
            value, expiry = entry
            if expiry is None or time.monotonic() < expiry:
                self._store.move_to_end(key)
                self.hits += 1
                self.logger.debug("Cache hit", request_type=type(request).__name__)
                return value
            del self._store[key]

        self.misses += 1
        response = await next_()
        self._set(key, response)
        return response

    def _set(self, key: Hashable, value: Any) -> None:
        expiry = time.monotonic() + self.ttl_seconds if self.ttl_seconds else None
        self._store.pop(key, None)
        self._store[key] = (value, expiry)

        # Remove the least recently used item once over capacity
        if len(self._store) > self.max_size:
            self._store.popitem(last=False)

    def invalidate(self, request: CacheableRequest) -> bool:
        """Drop the cached response for ``request``; return whether one existed."""
        return self._store.pop((type(request), request.cache_key()), None) is not None

    def clear(self) -> None:
        self._store.clear()
