# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: minimediator
"""Configuration for minimediator."""

from minimediator.config.settings import MediatorSettings

__all__ = ["MediatorSettings"]
