# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""
Configuration for the minimediator logging system.

Settings are read from ``MINIMEDIATOR_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from minimediator.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """Configuration settings for minimediator loggers."""

    model_config = SettingsConfigDict(
        env_prefix="MINIMEDIATOR_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.name, description="Log level")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: str | None = Field(default=None, description="Path to log file")
    propagate: bool = Field(
        default=False, description="Propagate records to ancestor loggers"
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Normalize names and numeric levels to the canonical level name."""
        if not isinstance(v, (str, int)):
            raise ValueError(f"Log level must be a name or a number, got {type(v).__name__}")
        return LogLevel.parse(v).name

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
