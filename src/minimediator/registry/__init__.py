# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Handler and behavior registry.

The mediator depends only on :class:`HandlerProviderProtocol`;
:class:`HandlerRegistry` is the explicit-registration implementation.
"""

from minimediator.registry.errors import (
    DuplicateHandlerError,
    InvalidRegistrationError,
    RegistryFrozenError,
)
from minimediator.registry.introspection import (
    ContractKind,
    DeclaredContract,
    contract_for,
    declared_contracts,
    response_type_of,
)
from minimediator.registry.protocols import ContractKey, HandlerProviderProtocol
from minimediator.registry.registry import HandlerRegistry, Registration

__all__ = [
    # Protocols
    "ContractKey",
    "HandlerProviderProtocol",
    # Implementation
    "HandlerRegistry",
    "Registration",
    # Contract discovery
    "ContractKind",
    "DeclaredContract",
    "contract_for",
    "declared_contracts",
    "response_type_of",
    # Errors
    "DuplicateHandlerError",
    "InvalidRegistrationError",
    "RegistryFrozenError",
]
