# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Contract discovery from generic base classes.

Only the generic bases a class declares are inspected (``__orig_bases__``
along its MRO); modules are never scanned.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar, get_args, get_origin

from minimediator.contracts import (
    NotificationHandler,
    PipelineBehavior,
    Request,
    RequestHandler,
)
from minimediator.registry.protocols import ContractKey


class ContractKind(Enum):
    REQUEST_HANDLER = "request_handler"
    NOTIFICATION_HANDLER = "notification_handler"
    PIPELINE_BEHAVIOR = "pipeline_behavior"


_KIND_BY_ORIGIN: dict[Any, ContractKind] = {
    RequestHandler: ContractKind.REQUEST_HANDLER,
    NotificationHandler: ContractKind.NOTIFICATION_HANDLER,
    PipelineBehavior: ContractKind.PIPELINE_BEHAVIOR,
}


@dataclass(frozen=True, slots=True)
class DeclaredContract:
    """A contract an implementation declares through one of its generic bases.

    ``message_type`` is None for a behavior whose request argument is an
    unbound type variable; ``response_type`` is ``Any`` when the response
    argument is unbound. Unbound sides match every request contract.
    """

    kind: ContractKind
    message_type: type | None
    response_type: Any = Any


def generic_bases(cls: type) -> Iterator[Any]:
    """Generic bases (``__orig_bases__``) declared anywhere along the MRO of ``cls``."""
    for klass in cls.__mro__:
        yield from klass.__dict__.get("__orig_bases__", ())


def _bound(arg: Any) -> Any:
    return None if isinstance(arg, TypeVar) else arg


@lru_cache(maxsize=None)
def response_type_of(request_type: type) -> Any:
    """Response type a request class declares via ``Request[T]``, or ``Any``."""
    for base in generic_bases(request_type):
        if get_origin(base) is Request:
            args = get_args(base)
            if args and _bound(args[0]) is not None:
                return args[0]
            return Any
    return Any


def contract_for(request_type: type) -> ContractKey:
    """Contract key ``(request type, response type)`` used for send-side lookups."""
    return (request_type, response_type_of(request_type))


def declared_contracts(cls: type) -> list[DeclaredContract]:
    """Every handler or behavior contract ``cls`` declares, without duplicates.

    Handler bases whose arguments are unbound type variables declare nothing.
    """
    found: list[DeclaredContract] = []

    for base in generic_bases(cls):
        kind = _KIND_BY_ORIGIN.get(get_origin(base))
        if kind is None:
            continue

        args = [_bound(arg) for arg in get_args(base)]
        message_type = args[0] if args else None
        if message_type is None and kind is not ContractKind.PIPELINE_BEHAVIOR:
            continue

        response_type = Any
        if kind is not ContractKind.NOTIFICATION_HANDLER and len(args) > 1:
            response_type = Any if args[1] is None else args[1]

        contract = DeclaredContract(kind, message_type, response_type)
        if contract not in found:
            found.append(contract)

    return found
