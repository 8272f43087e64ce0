"""Tests for contract discovery from generic bases."""

from __future__ import annotations

from typing import Any, TypeVar

from minimediator.contracts import (
    Notification,
    NotificationHandler,
    PipelineBehavior,
    Request,
    RequestHandler,
)
from minimediator.registry.introspection import (
    ContractKind,
    DeclaredContract,
    contract_for,
    declared_contracts,
    response_type_of,
)

T = TypeVar("T")
TRequest = TypeVar("TRequest", bound=Request[Any])


class Count(Request[int]):
    pass


class RecountAll(Count):
    """Inherits its response type from Count."""


class Untyped(Request):  # type: ignore[type-arg]
    pass


class Pending(Request[T]):
    pass


class Counted(Notification):
    pass


class CountHandler(RequestHandler[Count, int]):
    async def handle(self, request, cancellation_token):
        return 1


class SubclassedCountHandler(CountHandler):
    pass


class CountedHandler(NotificationHandler[Counted]):
    async def handle(self, notification, cancellation_token):
        return None


class AnyBehavior(PipelineBehavior[TRequest, T]):
    async def handle(self, request, cancellation_token, next_):
        return await next_()


class CountBehavior(PipelineBehavior[Count, int]):
    async def handle(self, request, cancellation_token, next_):
        return await next_()


class CountAndNotify(CountHandler, NotificationHandler[Counted]):
    async def handle(self, message, cancellation_token):
        return None


class TestResponseType:
    def test_declared_response_type(self) -> None:
        assert response_type_of(Count) is int

    def test_inherited_response_type(self) -> None:
        assert response_type_of(RecountAll) is int

    def test_unparameterized_request_is_any(self) -> None:
        assert response_type_of(Untyped) is Any

    def test_type_variable_response_is_any(self) -> None:
        assert response_type_of(Pending) is Any

    def test_contract_key(self) -> None:
        assert contract_for(Count) == (Count, int)


class TestDeclaredContracts:
    def test_request_handler(self) -> None:
        assert declared_contracts(CountHandler) == [
            DeclaredContract(ContractKind.REQUEST_HANDLER, Count, int)
        ]

    def test_contract_is_inherited(self) -> None:
        assert declared_contracts(SubclassedCountHandler) == declared_contracts(CountHandler)

    def test_notification_handler(self) -> None:
        assert declared_contracts(CountedHandler) == [
            DeclaredContract(ContractKind.NOTIFICATION_HANDLER, Counted)
        ]

    def test_open_behavior_has_no_message_type(self) -> None:
        assert declared_contracts(AnyBehavior) == [
            DeclaredContract(ContractKind.PIPELINE_BEHAVIOR, None)
        ]

    def test_closed_behavior(self) -> None:
        assert declared_contracts(CountBehavior) == [
            DeclaredContract(ContractKind.PIPELINE_BEHAVIOR, Count, int)
        ]

    def test_several_contracts_in_mro_order(self) -> None:
        assert declared_contracts(CountAndNotify) == [
            DeclaredContract(ContractKind.NOTIFICATION_HANDLER, Counted),
            DeclaredContract(ContractKind.REQUEST_HANDLER, Count, int),
        ]

    def test_plain_class_declares_nothing(self) -> None:
        assert declared_contracts(Count) == []
