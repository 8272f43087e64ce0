# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""Mediator settings loaded from ``MINIMEDIATOR_*`` environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MediatorSettings(BaseSettings):
    """Tunables for the registry and the built-in behaviors."""

    model_config = SettingsConfigDict(
        env_prefix="MINIMEDIATOR_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    slow_request_threshold_ms: float = Field(
        default=500.0,
        gt=0,
        description="Requests slower than this are logged as warnings",
    )
    cache_ttl_seconds: float | None = Field(
        default=300.0,
        gt=0,
        description="Lifetime of cached responses; None disables expiry",
    )
    cache_max_size: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of cached responses",
    )
    allow_handler_override: bool = Field(
        default=False,
        description="Let a later request handler registration replace an earlier one",
    )

    @classmethod
    def load(cls) -> MediatorSettings:
        """Load settings from environment variables or defaults."""
        return cls()
