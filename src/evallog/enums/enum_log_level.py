# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Severity level enum for outbound log records.
"""

from __future__ import annotations

from enum import Enum


class EnumLogLevel(str, Enum):
    """Severity levels accepted by the logs endpoint, ordered by convention."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def parse(cls, value: str | EnumLogLevel) -> EnumLogLevel:
        """Resolve a level case-insensitively.

        Raises:
            ValueError: If the value is not one of the five levels.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


__all__ = [
    "EnumLogLevel",
]
