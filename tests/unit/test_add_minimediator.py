"""Tests for the add_minimediator startup helper and the public API."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

import minimediator
from minimediator import (
    CacheableRequest,
    CachingBehavior,
    DuplicateHandlerError,
    InvalidRegistrationError,
    LoggingBehavior,
    Mediator,
    MediatorProtocol,
    MediatorSettings,
    Notification,
    NotificationHandler,
    RegistryFrozenError,
    Request,
    RequestHandler,
    RequestValidationError,
    RequestValidator,
    ValidationBehavior,
    ValidationFailure,
    add_minimediator,
)
from minimediator.registry import HandlerRegistry


@dataclass(frozen=True)
class Quote(CacheableRequest, Request[float]):
    symbol: str


@dataclass(frozen=True)
class Quoted(Notification):
    symbol: str


class QuoteHandler(RequestHandler[Quote, float]):
    calls = 0

    async def handle(self, request: Quote, cancellation_token) -> float:
        QuoteHandler.calls += 1
        return 42.0


class DuplicateQuoteHandler(RequestHandler[Quote, float]):
    async def handle(self, request: Quote, cancellation_token) -> float:
        return 0.0


class KnownSymbol(RequestValidator[Quote]):
    def validate(self, request: Quote) -> list[ValidationFailure]:
        if request.symbol != "ACME":
            return [ValidationFailure("symbol", "unknown symbol")]
        return []


class QuoteAudit(NotificationHandler[Quoted]):
    seen: list[Quoted] = []

    async def handle(self, notification: Quoted, cancellation_token) -> None:
        QuoteAudit.seen.append(notification)


class TestAddMinimediator:
    def test_returns_mediator_over_frozen_registry(self, recording_logger) -> None:
        mediator = add_minimediator(QuoteHandler, logger=recording_logger)

        assert isinstance(mediator, Mediator)
        assert isinstance(mediator, MediatorProtocol)
        assert mediator.provider.is_frozen
        assert "Mediator configured" in recording_logger.messages("DEBUG")

    def test_extends_existing_registry(self, registry: HandlerRegistry, recording_logger) -> None:
        registry.register(QuoteAudit)

        mediator = add_minimediator(QuoteHandler, registry=registry, logger=recording_logger)

        assert mediator.provider is registry
        with pytest.raises(RegistryFrozenError):
            registry.register(DuplicateQuoteHandler)

    def test_duplicate_handlers_are_rejected(self, recording_logger) -> None:
        with pytest.raises(DuplicateHandlerError):
            add_minimediator(QuoteHandler, DuplicateQuoteHandler, logger=recording_logger)

    def test_implementation_without_contract_is_rejected(self, recording_logger) -> None:
        with pytest.raises(InvalidRegistrationError):
            add_minimediator(Quote, logger=recording_logger)

    @pytest.mark.asyncio
    async def test_end_to_end_with_built_in_behaviors(self, recording_logger) -> None:
        QuoteHandler.calls = 0
        QuoteAudit.seen = []
        settings = MediatorSettings()
        mediator = add_minimediator(
            LoggingBehavior(logger=recording_logger, settings=settings),
            ValidationBehavior([KnownSymbol()]),
            CachingBehavior(settings=settings, logger=recording_logger),
            QuoteHandler,
            QuoteAudit,
            settings=settings,
            logger=recording_logger,
        )

        assert await mediator.send(Quote("ACME")) == 42.0
        assert await mediator.send(Quote("ACME")) == 42.0
        assert QuoteHandler.calls == 1

        with pytest.raises(RequestValidationError):
            await mediator.send(Quote("NOPE"))
        assert "Request failed" in recording_logger.messages("ERROR")

        await mediator.publish(Quoted("ACME"))
        assert QuoteAudit.seen == [Quoted("ACME")]


class TestPublicApi:
    def test_all_names_are_exported(self) -> None:
        for name in minimediator.__all__:
            assert hasattr(minimediator, name), name
