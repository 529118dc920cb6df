# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Async HTTP client for the evaluation service auth and logs endpoints.

Two request-shaped operations share one connection pool:

- ``authenticate``: ``POST {base}/auth`` exchanges credentials for a bearer
  token.
- ``send_log``: ``POST {base}/logs`` delivers one log record with the bearer
  token and returns the server acknowledgment.

No retries, batching or token caching happen here. Every error is raised to
the caller as an ``EvalLogError`` subclass; network failures from httpx are
wrapped in ``TransportError``.

Example:
    ```python
    from evallog.clients import EvaluationServiceClient

    async with EvaluationServiceClient() as client:
        token = await client.authenticate(credentials)
        ack = await client.send_log(token.access_token, "info", "api", "hello")
        print(ack.log_id)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from evallog.enums import EnumLogLevel, EnumLogPackage, EnumLogStack
from evallog.errors import (
    AuthenticationError,
    LogDeliveryError,
    LogValidationError,
    TransportError,
)
from evallog.models import (
    ModelAuthCredentials,
    ModelAuthToken,
    ModelEvaluationClientConfig,
    ModelLogAcknowledgment,
    ModelLogRecord,
)

if TYPE_CHECKING:
    from types import TracebackType

    from evallog.protocols import ProtocolDiagnosticSink

logger = logging.getLogger(__name__)

# 2xx range
_HTTP_SUCCESS_MIN = 200
_HTTP_SUCCESS_MAX = 300  # Exclusive

_JSON_HEADERS = {"Content-Type": "application/json"}


def _is_success(status_code: int) -> bool:
    return _HTTP_SUCCESS_MIN <= status_code < _HTTP_SUCCESS_MAX


def _response_text(response: httpx.Response) -> str | None:
    """Best-effort body text of an error response."""
    try:
        text = response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError):
        return None
    return text or None


def build_log_record(
    level: str | EnumLogLevel,
    package: str | EnumLogPackage,
    message: str,
    *,
    stack: EnumLogStack = EnumLogStack.FRONTEND,
) -> ModelLogRecord:
    """Validate inputs locally and build the outbound record.

    Args:
        level: Severity level, any casing.
        package: Package tag, any casing.
        message: Free text; surrounding whitespace is trimmed.

    Raises:
        LogValidationError: On an empty message, or a level/package outside
            the closed enumerations.
    """
    if not isinstance(message, str) or not message.strip():
        raise LogValidationError("Log message is required", field="message")
    try:
        parsed_level = EnumLogLevel.parse(level)
    except ValueError as exc:
        raise LogValidationError(
            f"Unknown log level: {level!r}",
            field="level",
            details={"allowed": [m.value for m in EnumLogLevel]},
        ) from exc
    try:
        parsed_package = EnumLogPackage.parse(package)
    except ValueError as exc:
        raise LogValidationError(
            f"Unknown log package: {package!r}",
            field="package",
            details={"allowed": [m.value for m in EnumLogPackage]},
        ) from exc
    return ModelLogRecord(
        stack=stack, level=parsed_level, package=parsed_package, message=message
    )


class EvaluationServiceClient:
    """Async client for the evaluation service with connection pooling.

    Supports both context manager and manual lifecycle management; the
    operations connect on demand when used without either.

    Args:
        config: Endpoint and timeout configuration. Defaults to the public
            evaluation service.
        sink: Receiver of success/failure diagnostics. Defaults to this
            module's logger.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: ModelEvaluationClientConfig | None = None,
        *,
        sink: ProtocolDiagnosticSink | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ModelEvaluationClientConfig()
        self._sink: ProtocolDiagnosticSink = sink or logger
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._connected = False

    @property
    def config(self) -> ModelEvaluationClientConfig:
        """Return the client configuration."""
        return self._config

    @property
    def client(self) -> httpx.AsyncClient | None:
        """Underlying httpx client, or None while disconnected."""
        return self._client

    @property
    def is_connected(self) -> bool:
        """True if the connection pool is active."""
        return self._connected and self._client is not None

    async def connect(self) -> None:
        """Open the connection pool. Safe to call multiple times (idempotent)."""
        if self._connected:
            return
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout_seconds),
            transport=self._transport,
        )
        self._connected = True
        logger.debug("EvaluationServiceClient connected to %s", self._config.base_url)

    async def close(self) -> None:
        """Close the connection pool. Safe to call multiple times (idempotent)."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._connected = False
        logger.debug("EvaluationServiceClient connection closed")

    async def __aenter__(self) -> EvaluationServiceClient:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def authenticate(self, credentials: ModelAuthCredentials) -> ModelAuthToken:
        """Exchange credentials for a bearer token.

        Every call performs a fresh round trip; tokens are not cached.

        Raises:
            AuthenticationError: On a non-2xx status or a malformed body.
            TransportError: On a network-level failure.
        """
        url = self._config.auth_url
        try:
            response = await self._post(url, credentials.to_payload(), _JSON_HEADERS)
        except TransportError as exc:
            self._sink.error("Authentication failed: %s", exc)
            raise

        if not _is_success(response.status_code):
            error = AuthenticationError(
                f"Authentication failed! status: {response.status_code}",
                status_code=response.status_code,
                response_text=_response_text(response),
            )
            self._sink.error("Authentication failed: %s", error)
            raise error

        try:
            token = ModelAuthToken.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            self._sink.error("Authentication failed: unexpected response format")
            raise AuthenticationError(
                "Unexpected response format from auth endpoint",
                status_code=response.status_code,
            ) from exc

        self._sink.info("Authentication successful (expires in %ss)", token.expires_in)
        return token

    async def send_log(
        self,
        token: str,
        level: str | EnumLogLevel,
        package: str | EnumLogPackage,
        message: str,
    ) -> ModelLogAcknowledgment:
        """Deliver one log record with the given bearer token.

        Args:
            token: Access token from ``authenticate``, used verbatim.
            level: Severity level, any casing.
            package: Package tag, any casing.
            message: Free text; trimmed before sending.

        Returns:
            The acknowledgment carrying the server-issued log id.

        Raises:
            LogValidationError: If the inputs are rejected locally.
            LogDeliveryError: On a non-2xx status or a malformed body.
            TransportError: On a network-level failure.
        """
        if not isinstance(token, str) or not token:
            raise LogValidationError("Valid bearer token is required", field="token")
        record = build_log_record(level, package, message, stack=self._config.stack)

        headers = {**_JSON_HEADERS, "Authorization": f"Bearer {token}"}
        try:
            response = await self._post(
                self._config.logs_url, record.to_payload(), headers
            )
        except TransportError as exc:
            self._sink.error("Failed to send log to server: %s", exc)
            raise

        if not _is_success(response.status_code):
            text = _response_text(response)
            error = LogDeliveryError(
                f"HTTP {response.status_code}: {text}"
                if text
                else f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                response_text=text,
            )
            self._sink.error("Failed to send log to server: %s", error)
            raise error

        try:
            ack = ModelLogAcknowledgment.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            self._sink.error("Failed to send log to server: unexpected response format")
            raise LogDeliveryError(
                "Unexpected response format from logs endpoint",
                status_code=response.status_code,
            ) from exc

        self._sink.info("Log sent successfully: %s", ack.log_id)
        return ack

    async def _post(
        self, url: str, payload: dict[str, Any], headers: dict[str, str]
    ) -> httpx.Response:
        """POST a JSON payload, mapping httpx transport failures.

        Raises:
            TransportError: On DNS, timeout or connection failures.
        """
        if not self._connected:
            await self.connect()
        assert self._client is not None

        try:
            return await self._client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {url} timed out after {self._config.timeout_seconds}s",
                url=url,
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Network error calling {url}: {exc}", url=url) from exc


async def authenticate(
    credentials: ModelAuthCredentials,
    *,
    client: EvaluationServiceClient | None = None,
) -> ModelAuthToken:
    """Authenticate with a one-shot client unless one is supplied."""
    if client is not None:
        return await client.authenticate(credentials)
    async with EvaluationServiceClient() as one_shot:
        return await one_shot.authenticate(credentials)


async def log_to_server(
    token: str,
    level: str | EnumLogLevel,
    package: str | EnumLogPackage,
    message: str,
    *,
    client: EvaluationServiceClient | None = None,
) -> ModelLogAcknowledgment:
    """Send one log record with a one-shot client unless one is supplied."""
    if client is not None:
        return await client.send_log(token, level, package, message)
    async with EvaluationServiceClient() as one_shot:
        return await one_shot.send_log(token, level, package, message)


__all__ = [
    "EvaluationServiceClient",
    "authenticate",
    "build_log_record",
    "log_to_server",
]
