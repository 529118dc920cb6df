# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Token-bound logger with one coroutine per severity level.

Example:
    ```python
    log = create_logger(token.access_token, client=client)
    await log.warn("api", "API response time exceeded 2 seconds")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from evallog.clients import EvaluationServiceClient, log_to_server
from evallog.enums import EnumLogLevel, EnumLogPackage

if TYPE_CHECKING:
    from evallog.models import ModelLogAcknowledgment


class EvaluationLogger:
    """Binds a bearer token (and optionally a client) for repeated log calls.

    Each level method is equivalent to ``log_to_server`` with that level
    pre-filled; there is no additional state or validation.
    """

    __slots__ = ("_client", "_token")

    def __init__(
        self, token: str, *, client: EvaluationServiceClient | None = None
    ) -> None:
        self._token = token
        self._client = client

    def __repr__(self) -> str:
        return f"EvaluationLogger(client={self._client!r})"

    async def log(
        self,
        level: str | EnumLogLevel,
        package: str | EnumLogPackage,
        message: str,
    ) -> ModelLogAcknowledgment:
        return await log_to_server(
            self._token, level, package, message, client=self._client
        )

    async def debug(
        self, package: str | EnumLogPackage, message: str
    ) -> ModelLogAcknowledgment:
        return await self.log(EnumLogLevel.DEBUG, package, message)

    async def info(
        self, package: str | EnumLogPackage, message: str
    ) -> ModelLogAcknowledgment:
        return await self.log(EnumLogLevel.INFO, package, message)

    async def warn(
        self, package: str | EnumLogPackage, message: str
    ) -> ModelLogAcknowledgment:
        return await self.log(EnumLogLevel.WARN, package, message)

    async def error(
        self, package: str | EnumLogPackage, message: str
    ) -> ModelLogAcknowledgment:
        return await self.log(EnumLogLevel.ERROR, package, message)

    async def fatal(
        self, package: str | EnumLogPackage, message: str
    ) -> ModelLogAcknowledgment:
        return await self.log(EnumLogLevel.FATAL, package, message)


def create_logger(
    token: str, *, client: EvaluationServiceClient | None = None
) -> EvaluationLogger:
    """Return a logger bound to ``token``."""
    return EvaluationLogger(token, client=client)


__all__ = ["EvaluationLogger", "create_logger"]
