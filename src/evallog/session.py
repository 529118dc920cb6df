# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Credential-holding session with an opt-in re-authentication policy.

The session is the two-phase sequence callers otherwise manage by hand:
authenticate once, then send any number of log records with the held token.

With ``reauthenticate_on_unauthorized`` enabled, a 401 from the logs endpoint
triggers one fresh ``authenticate`` and one retry of the same record. Any
other failure, or a second 401, propagates unchanged. The policy is off by
default.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING

from evallog.errors import LogDeliveryError
from evallog.logger_factory import EvaluationLogger, create_logger

if TYPE_CHECKING:
    from evallog.clients import EvaluationServiceClient
    from evallog.enums import EnumLogLevel, EnumLogPackage
    from evallog.models import (
        ModelAuthCredentials,
        ModelAuthToken,
        ModelLogAcknowledgment,
    )

logger = logging.getLogger(__name__)


class AuthenticatedSession:
    """Holds credentials and the current token for one client."""

    def __init__(
        self,
        client: EvaluationServiceClient,
        credentials: ModelAuthCredentials,
        *,
        reauthenticate_on_unauthorized: bool = False,
    ) -> None:
        self._client = client
        self._credentials = credentials
        self._reauthenticate = reauthenticate_on_unauthorized
        self._token: ModelAuthToken | None = None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    @property
    def token(self) -> ModelAuthToken | None:
        return self._token

    async def login(self) -> ModelAuthToken:
        """Authenticate and hold the returned token.

        The previous token, if any, is kept when authentication fails.
        """
        self._token = await self._client.authenticate(self._credentials)
        return self._token

    def logout(self) -> None:
        """Discard the held token."""
        self._token = None

    async def send_log(
        self,
        level: str | EnumLogLevel,
        package: str | EnumLogPackage,
        message: str,
    ) -> ModelLogAcknowledgment:
        """Send one record, logging in first if no token is held."""
        token = self._token or await self.login()
        try:
            return await self._client.send_log(
                token.access_token, level, package, message
            )
        except LogDeliveryError as exc:
            if not (
                self._reauthenticate and exc.status_code == HTTPStatus.UNAUTHORIZED
            ):
                raise
            logger.info("Logs endpoint answered 401, re-authenticating once")

        token = await self.login()
        return await self._client.send_log(token.access_token, level, package, message)

    async def logger(self) -> EvaluationLogger:
        """Return a level-bound logger for the held token, logging in if needed."""
        token = self._token or await self.login()
        return create_logger(token.access_token, client=self._client)


__all__ = ["AuthenticatedSession"]
