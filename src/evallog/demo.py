# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Headless logging demonstration.

Drives the same flow as the interactive demo page: authenticate once, send
canned example logs, and keep the most recent outcomes for display. Every
action returns a ``ModelDemoNotice`` for the caller to show; failures never
escape ``LoggingDemo`` and never clear the held token.

The history is a presentation detail: it keeps the newest entries only and
is not a durable log store.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from datetime import datetime
from typing import TYPE_CHECKING, NamedTuple

from evallog.enums import EnumLogLevel, EnumLogPackage
from evallog.errors import EvalLogError
from evallog.models import ModelDemoNotice, ModelLogEntry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from evallog.clients import EvaluationServiceClient
    from evallog.models import ModelAuthCredentials

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 10
AUTHENTICATED_MESSAGE = "User successfully authenticated"


class LogExample(NamedTuple):
    level: EnumLogLevel
    package: EnumLogPackage
    message: str


LOG_EXAMPLES: tuple[LogExample, ...] = (
    LogExample(
        EnumLogLevel.DEBUG,
        EnumLogPackage.UTILS,
        "Debug trace: Processing user input validation",
    ),
    LogExample(
        EnumLogLevel.INFO,
        EnumLogPackage.COMPONENT,
        "User interface rendered successfully",
    ),
    LogExample(
        EnumLogLevel.WARN,
        EnumLogPackage.API,
        "API response time exceeded 2 seconds",
    ),
    LogExample(
        EnumLogLevel.ERROR,
        EnumLogPackage.AUTH,
        "Failed to refresh authentication token",
    ),
    LogExample(
        EnumLogLevel.FATAL,
        EnumLogPackage.PAGE,
        "Critical error: Application crashed unexpectedly",
    ),
)


class LogHistory:
    """Newest-first list of recent entries, capped at ``maxlen``."""

    def __init__(self, maxlen: int = DEFAULT_HISTORY_SIZE) -> None:
        if maxlen < 1:
            raise ValueError(f"maxlen must be positive, got {maxlen}")
        self._entries: deque[ModelLogEntry] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._entries.maxlen or 0

    def add(self, entry: ModelLogEntry) -> None:
        """Prepend an entry, evicting the oldest when full."""
        self._entries.appendleft(entry)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ModelLogEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> ModelLogEntry:
        return self._entries[index]


class LoggingDemo:
    """Stateful demo session around an ``EvaluationServiceClient``."""

    def __init__(
        self,
        client: EvaluationServiceClient,
        *,
        history_size: int = DEFAULT_HISTORY_SIZE,
        announce_authentication: bool = False,
    ) -> None:
        self._client = client
        self._token: str | None = None
        self._announce_authentication = announce_authentication
        self.history = LogHistory(history_size)

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    async def authenticate(self, credentials: ModelAuthCredentials) -> ModelDemoNotice:
        """Authenticate and hold the token only on success.

        With ``announce_authentication`` set, a successful login is itself
        logged as an ``info``/``auth`` record.
        """
        try:
            token = await self._client.authenticate(credentials)
        except EvalLogError as exc:
            logger.debug("Demo authentication failed: %s", exc)
            return ModelDemoNotice(
                title="Authentication Failed",
                description="Please check your credentials and try again",
                variant="destructive",
            )
        self._token = token.access_token
        if self._announce_authentication:
            await self.send_log(
                EnumLogLevel.INFO, EnumLogPackage.AUTH, AUTHENTICATED_MESSAGE
            )
        return ModelDemoNotice(
            title="Authentication Successful",
            description="You can now send logs to the server",
        )

    async def send_log(
        self,
        level: str | EnumLogLevel,
        package: str | EnumLogPackage,
        message: str,
    ) -> ModelDemoNotice:
        """Send one record and record its outcome in the history."""
        if self._token is None:
            return ModelDemoNotice(
                title="No Authentication Token",
                description="Please authenticate first",
                variant="destructive",
            )

        try:
            parsed_level = EnumLogLevel.parse(level)
            parsed_package = EnumLogPackage.parse(package)
        except ValueError as exc:
            return ModelDemoNotice(
                title="Log Failed",
                description=str(exc),
                variant="destructive",
            )
        if not isinstance(message, str):
            return ModelDemoNotice(
                title="Log Failed",
                description="Log message must be text",
                variant="destructive",
            )
        try:
            ack = await self._client.send_log(
                self._token, parsed_level, parsed_package, message
            )
        except EvalLogError as exc:
            logger.debug("Demo log failed: %s", exc)
            self.history.add(
                ModelLogEntry(
                    entry_id=f"error-{time.time_ns() // 1_000_000}",
                    timestamp=datetime.now(),
                    level=parsed_level,
                    package=parsed_package,
                    message=message,
                    status="error",
                )
            )
            return ModelDemoNotice(
                title="Log Failed",
                description="Failed to send log to server",
                variant="destructive",
            )

        self.history.add(
            ModelLogEntry(
                entry_id=ack.log_id,
                timestamp=datetime.now(),
                level=parsed_level,
                package=parsed_package,
                message=message,
                status="success",
            )
        )
        return ModelDemoNotice(
            title="Log Sent Successfully",
            description=f"{parsed_level.value.upper()} log sent to server",
        )

    async def send_examples(self) -> list[ModelDemoNotice]:
        """Send every canned example in order."""
        return [
            await self.send_log(example.level, example.package, example.message)
            for example in LOG_EXAMPLES
        ]


__all__ = [
    "AUTHENTICATED_MESSAGE",
    "DEFAULT_HISTORY_SIZE",
    "LOG_EXAMPLES",
    "LogExample",
    "LogHistory",
    "LoggingDemo",
]
