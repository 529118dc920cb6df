# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Package (category) and stack tags for outbound log records.
"""

from __future__ import annotations

from enum import Enum


class EnumLogPackage(str, Enum):
    """Originating subsystem of a frontend log message."""

    API = "api"
    COMPONENT = "component"
    HOOK = "hook"
    PAGE = "page"
    STATE = "state"
    STYLE = "style"
    AUTH = "auth"
    CONFIG = "config"
    MIDDLEWARE = "middleware"
    UTILS = "utils"

    @classmethod
    def parse(cls, value: str | EnumLogPackage) -> EnumLogPackage:
        """Resolve a package tag case-insensitively.

        Raises:
            ValueError: If the value is not one of the ten package tags.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


class EnumLogStack(str, Enum):
    """Origin tag of a log record. Only the frontend stack is supported."""

    FRONTEND = "frontend"


__all__ = [
    "EnumLogPackage",
    "EnumLogStack",
]
