"""Tests for notification fan-out through Mediator.publish."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass

import pytest

from minimediator.contracts import Notification, NotificationHandler
from minimediator.mediator import (
    CancellationTokenSource,
    InvalidRequestError,
    Mediator,
    NotificationPublishError,
)
from minimediator.registry import HandlerRegistry


@dataclass(frozen=True)
class OrderPlaced(Notification):
    order_id: int


@dataclass(frozen=True)
class OrderShipped(Notification):
    order_id: int


class Recorder(NotificationHandler[OrderPlaced]):
    """Handler instance recording every notification it sees."""

    def __init__(self, name: str, delay: float = 0.0, error: Exception | None = None) -> None:
        self.name = name
        self.delay = delay
        self.error = error
        self.received: list[OrderPlaced] = []
        self.finished = False

    async def handle(self, notification, cancellation_token) -> None:
        self.received.append(notification)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        self.finished = True


class ShippedRecorder(NotificationHandler[OrderShipped]):
    received: list[OrderShipped] = []

    async def handle(self, notification, cancellation_token) -> None:
        ShippedRecorder.received.append(notification)


def build_mediator(registry: HandlerRegistry, *handlers, logger=None) -> Mediator:
    for handler in handlers:
        registry.add_notification_handler(handler)
    return Mediator(registry.freeze(), logger=logger)


class TestPublishDelivery:
    @pytest.mark.asyncio
    async def test_no_handlers_is_a_noop(self, registry: HandlerRegistry, recording_logger) -> None:
        mediator = build_mediator(registry, logger=recording_logger)

        assert await mediator.publish(OrderPlaced(1)) is None
        assert "No handlers found for notification" in recording_logger.messages("DEBUG")

    @pytest.mark.asyncio
    async def test_each_handler_runs_once(self, registry: HandlerRegistry) -> None:
        handlers = [Recorder("a"), Recorder("b"), Recorder("c")]
        mediator = build_mediator(registry, *handlers)
        notification = OrderPlaced(7)

        await mediator.publish(notification)

        assert all(h.received == [notification] for h in handlers)

    @pytest.mark.asyncio
    async def test_other_notification_types_are_not_delivered(
        self, registry: HandlerRegistry
    ) -> None:
        ShippedRecorder.received = []
        placed = Recorder("placed")
        mediator = build_mediator(registry, placed, ShippedRecorder)

        await mediator.publish(OrderShipped(3))

        assert placed.received == []
        assert ShippedRecorder.received == [OrderShipped(3)]

    @pytest.mark.asyncio
    async def test_token_is_passed_to_handlers(self, registry: HandlerRegistry) -> None:
        seen = []

        class TokenRecorder(NotificationHandler[OrderPlaced]):
            async def handle(self, notification, cancellation_token) -> None:
                seen.append(cancellation_token)

        mediator = build_mediator(registry, TokenRecorder(), TokenRecorder())
        token = CancellationTokenSource().token

        await mediator.publish(OrderPlaced(1), token)

        assert seen == [token, token]


class TestPublishJoin:
    @pytest.mark.asyncio
    async def test_completes_when_slowest_handler_finishes(
        self, registry: HandlerRegistry
    ) -> None:
        """Handlers run concurrently; publish waits for all of them."""
        handlers = [Recorder("fast", 0.1), Recorder("mid", 0.2), Recorder("slow", 0.3)]
        mediator = build_mediator(registry, *handlers)

        start = time.perf_counter()
        await mediator.publish(OrderPlaced(1))
        elapsed = time.perf_counter() - start

        assert all(h.finished for h in handlers)
        assert 0.29 <= elapsed < 0.55


class TestPublishFailures:
    @pytest.mark.asyncio
    async def test_single_failure_is_reported_after_all_handlers(
        self, registry: HandlerRegistry
    ) -> None:
        failure = RuntimeError("mailer down")
        ok_before = Recorder("before")
        failing = Recorder("failing", error=failure)
        slow_after = Recorder("after", delay=0.05)
        mediator = build_mediator(registry, ok_before, failing, slow_after)

        with pytest.raises(NotificationPublishError) as exc_info:
            await mediator.publish(OrderPlaced(1))

        assert ok_before.finished
        assert slow_after.finished
        assert exc_info.value.errors == [failure]
        assert exc_info.value.__cause__ is failure
        assert exc_info.value.notification_type is OrderPlaced
        assert exc_info.value.context["failure_count"] == 1

    @pytest.mark.asyncio
    async def test_every_failure_is_collected_in_handler_order(
        self, registry: HandlerRegistry, recording_logger
    ) -> None:
        first = ValueError("first")
        second = KeyError("second")
        mediator = build_mediator(
            registry,
            Recorder("a", delay=0.05, error=first),
            Recorder("b"),
            Recorder("c", error=second),
            logger=recording_logger,
        )

        with pytest.raises(NotificationPublishError) as exc_info:
            await mediator.publish(OrderPlaced(1))

        assert exc_info.value.errors == [first, second]
        assert exc_info.value.__cause__ is first
        assert "2 handler(s) failed for notification OrderPlaced" in str(exc_info.value)
        assert recording_logger.messages("ERROR").count("Error in notification handler") == 2


class TestPublishArgumentValidation:
    def test_none_notification_raises_immediately(self, registry: HandlerRegistry) -> None:
        mediator = build_mediator(registry)

        with pytest.raises(InvalidRequestError) as exc_info:
            mediator.publish(None)  # type: ignore[arg-type]

        assert exc_info.value.argument == "notification"

    def test_non_notification_raises_immediately(self, registry: HandlerRegistry) -> None:
        mediator = build_mediator(registry)

        with pytest.raises(InvalidRequestError):
            mediator.publish(object())  # type: ignore[arg-type]
