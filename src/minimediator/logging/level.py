# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""Log levels understood by the minimediator logging settings."""

from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels, valued as their standard library counterparts."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def parse(cls, value: LogLevel | str | int) -> LogLevel:
        """Accept a level name in any case (``"debug"``, ``"WARN"``) or number.

        Raises:
            ValueError: If ``value`` names no known level
        """
        if isinstance(value, int):
            return cls(value)

        name = value.strip().upper()
        if name == "WARN":
            name = "WARNING"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Invalid log level: {value}") from None
