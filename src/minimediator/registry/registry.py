# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Explicit handler and behavior registry.

Implementations are registered one by one at startup, then the registry is
frozen and only read from. An implementation can be given as:

- a class, instantiated without arguments on every lookup;
- an instance, returned as-is on every lookup;
- a zero-argument factory, called on every lookup (the message type must
  then be passed explicitly since a factory declares no contract).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

from minimediator.config import MediatorSettings
from minimediator.contracts import Notification, Request
from minimediator.logging import LoggerProtocol, get_logger
from minimediator.registry.errors import (
    DuplicateHandlerError,
    InvalidRegistrationError,
    RegistryFrozenError,
    implementation_name,
)
from minimediator.registry.introspection import (
    ContractKind,
    DeclaredContract,
    declared_contracts,
    response_type_of,
)
from minimediator.registry.protocols import ContractKey


@dataclass(frozen=True, slots=True)
class Registration:
    """One registered implementation and how to obtain an instance of it."""

    implementation: Any
    factory: Callable[[], Any]
    kind: ContractKind
    message_type: type | None = None
    response_type: Any = Any

    def resolve(self) -> Any:
        return self.factory()

    def applies_to(self, contract: ContractKey) -> bool:
        """Whether a behavior registration wraps handlers of ``contract``.

        Unbound (None / ``Any``) sides of the registration match anything.
        """
        request_type, response_type = contract
        if self.message_type is not None and self.message_type is not request_type:
            return False
        return self.response_type is Any or self.response_type == response_type


def _factory_for(implementation: Any) -> Callable[[], Any]:
    if isinstance(implementation, type):
        return implementation
    if hasattr(implementation, "handle"):
        return lambda: implementation
    if callable(implementation):
        return implementation
    raise InvalidRegistrationError(
        "Implementation must be a class, a handler instance or a zero-argument factory",
        implementation,
    )


def _is_factory(implementation: Any) -> bool:
    return not isinstance(implementation, type) and not hasattr(implementation, "handle")


def _declared(implementation: Any) -> list[DeclaredContract]:
    if _is_factory(implementation):
        return []
    cls = implementation if isinstance(implementation, type) else type(implementation)
    return declared_contracts(cls)


class HandlerRegistry:
    """
    Records request handlers, notification handlers and pipeline behaviors.

    Exactly one request handler may exist per request type. Notification
    handlers and behaviors accumulate; behaviors keep their registration
    order, which is the order they wrap a handler in (first registered is
    outermost).
    """

    def __init__(
        self,
        settings: MediatorSettings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._settings = settings or MediatorSettings.load()
        self._logger = logger or get_logger(__name__)
        self._handlers: dict[type, Registration] = {}
        self._notification_handlers: dict[type, list[Registration]] = {}
        self._behaviors: list[Registration] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Self:
        """Make the registry read-only. Lookups are then safe from any task."""
        self._frozen = True
        return self

    def register(self, *implementations: Any) -> Self:
        """Register each implementation for every contract its generic bases declare.

        The batch is all-or-nothing: every contract is checked before any of
        them is recorded, so a failure leaves the registry unchanged.

        Raises:
            InvalidRegistrationError: If an implementation declares no contract
                or an inconsistent one
            DuplicateHandlerError: If the batch adds a second handler for a
                request type
        """
        pending: list[Registration] = []
        for implementation in implementations:
            contracts = _declared(implementation)
            if not contracts:
                raise InvalidRegistrationError(
                    f"{implementation_name(implementation)} declares no handler or behavior contract",
                    implementation,
                )
            pending.extend(self._prepare(implementation, contract) for contract in contracts)
        self._apply(pending)
        return self

    def add_request_handler(
        self, implementation: Any, *, request_type: type | None = None
    ) -> Self:
        """Register the single handler of a request type.

        Raises:
            DuplicateHandlerError: If the request type already has a handler
                and ``allow_handler_override`` is off
            InvalidRegistrationError: If the request type cannot be determined
        """
        contract = self._single_contract(
            implementation, ContractKind.REQUEST_HANDLER, request_type
        )
        self._apply([self._prepare(implementation, contract)])
        return self

    def add_notification_handler(
        self, implementation: Any, *, notification_type: type | None = None
    ) -> Self:
        """Add a handler for a notification type."""
        contract = self._single_contract(
            implementation, ContractKind.NOTIFICATION_HANDLER, notification_type
        )
        self._apply([self._prepare(implementation, contract)])
        return self

    def add_behavior(
        self, implementation: Any, *, request_type: type | None = None
    ) -> Self:
        """Append a pipeline behavior.

        Without ``request_type`` the behavior's generic bases decide. A bound
        request argument restricts it to that request type and a bound response
        argument to contracts with that response type; type variables (or no
        declaration at all) leave that side open.
        """
        if request_type is not None:
            contract = DeclaredContract(
                ContractKind.PIPELINE_BEHAVIOR, request_type, response_type_of(request_type)
            )
        else:
            declared = [
                c for c in _declared(implementation) if c.kind is ContractKind.PIPELINE_BEHAVIOR
            ]
            if len(declared) > 1:
                raise InvalidRegistrationError(
                    f"{implementation_name(implementation)} declares several behavior contracts; "
                    "use register() or pass request_type",
                    implementation,
                )
            contract = declared[0] if declared else DeclaredContract(
                ContractKind.PIPELINE_BEHAVIOR, None
            )
        self._apply([self._prepare(implementation, contract)])
        return self

    def _single_contract(
        self, implementation: Any, kind: ContractKind, message_type: type | None
    ) -> DeclaredContract:
        if message_type is not None:
            response_type = (
                response_type_of(message_type)
                if kind is ContractKind.REQUEST_HANDLER
                else Any
            )
            return DeclaredContract(kind, message_type, response_type)

        declared = [c for c in _declared(implementation) if c.kind is kind]
        if len(declared) != 1:
            reason = "declares no" if not declared else "declares several"
            raise InvalidRegistrationError(
                f"{implementation_name(implementation)} {reason} {kind.value} contract; "
                "pass the message type explicitly or use register()",
                implementation,
            )
        return declared[0]

    def _prepare(self, implementation: Any, contract: DeclaredContract) -> Registration:
        if self._frozen:
            raise RegistryFrozenError(implementation)

        self._validate(implementation, contract)
        return Registration(
            implementation=implementation,
            factory=_factory_for(implementation),
            kind=contract.kind,
            message_type=contract.message_type,
            response_type=contract.response_type,
        )

    def _apply(self, pending: list[Registration]) -> None:
        """Check a batch of prepared registrations, then record all of them."""
        handlers = dict(self._handlers)
        notification_handlers: list[tuple[type, Registration]] = []
        behaviors: list[Registration] = []

        for registration in pending:
            if registration.kind is ContractKind.PIPELINE_BEHAVIOR:
                behaviors.append(registration)
                continue

            message_type = registration.message_type
            if message_type is None:
                raise InvalidRegistrationError(
                    f"{implementation_name(registration.implementation)} has no "
                    f"{registration.kind.value} message type",
                    registration.implementation,
                )

            if registration.kind is ContractKind.REQUEST_HANDLER:
                existing = handlers.get(message_type)
                if existing is not None and not self._settings.allow_handler_override:
                    raise DuplicateHandlerError(
                        message_type, existing.implementation, registration.implementation
                    )
                handlers[message_type] = registration
            else:
                notification_handlers.append((message_type, registration))

        self._handlers = handlers
        for message_type, registration in notification_handlers:
            self._notification_handlers.setdefault(message_type, []).append(registration)
        self._behaviors.extend(behaviors)

        for registration in pending:
            self._logger.debug(
                "Registered implementation",
                kind=registration.kind.value,
                message_type=(
                    registration.message_type.__name__ if registration.message_type else "*"
                ),
                implementation=implementation_name(registration.implementation),
            )

    def _validate(self, implementation: Any, contract: DeclaredContract) -> None:
        message_type = contract.message_type
        if message_type is None:
            return

        expected_base = (
            Notification if contract.kind is ContractKind.NOTIFICATION_HANDLER else Request
        )
        if not (isinstance(message_type, type) and issubclass(message_type, expected_base)):
            raise InvalidRegistrationError(
                f"{implementation_name(implementation)}: {message_type!r} is not a "
                f"{expected_base.__name__} type",
                implementation,
            )

        if contract.kind is ContractKind.NOTIFICATION_HANDLER:
            return

        declared_response = response_type_of(message_type)
        if (
            contract.response_type is not Any
            and declared_response is not Any
            and contract.response_type != declared_response
        ):
            raise InvalidRegistrationError(
                f"{implementation_name(implementation)} declares response "
                f"{contract.response_type!r} but {message_type.__name__} responds with "
                f"{declared_response!r}",
                implementation,
            )

    # ------------------------------------------------------------------
    # Lookup (HandlerProviderProtocol)
    # ------------------------------------------------------------------

    def get_handler(self, contract: ContractKey) -> Any | None:
        registration = self._handlers.get(contract[0])
        return registration.resolve() if registration is not None else None

    def get_behaviors(self, contract: ContractKey) -> list[Any]:
        return [r.resolve() for r in self._behaviors if r.applies_to(contract)]

    def get_notification_handlers(self, notification_type: type) -> list[Any]:
        return [r.resolve() for r in self._notification_handlers.get(notification_type, ())]
