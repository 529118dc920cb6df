# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Exception hierarchy for the evaluation service client.

Every failure surfaces to the immediate caller as an ``EvalLogError``
subclass. Each instance carries an ``EnumErrorCode``, the HTTP status code
when one was received, and a free-form ``details`` dict.

    EvalLogError
    ├── LogValidationError   local input rejected before any request
    ├── AuthenticationError  non-2xx or malformed /auth response
    ├── LogDeliveryError     non-2xx or malformed /logs response
    ├── TransportError       DNS, timeout, connection refused
    └── ConfigurationError   missing or invalid settings
"""

from __future__ import annotations

from typing import Any

from evallog.enums import EnumErrorCode


class EvalLogError(Exception):
    """Base exception for evaluation service client errors."""

    def __init__(
        self,
        message: str,
        error_code: EnumErrorCode,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)


class LogValidationError(EvalLogError):
    """Raised when a log call is rejected locally, before any network I/O."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(
            message,
            error_code=EnumErrorCode.VALIDATION_ERROR,
            details=details,
        )


class AuthenticationError(EvalLogError):
    """Raised when the auth endpoint rejects the credentials or answers garbage."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if response_text:
            details["response_text"] = response_text
        super().__init__(
            message,
            error_code=EnumErrorCode.AUTHENTICATION_FAILED,
            details=details,
            status_code=status_code,
        )

    @property
    def response_text(self) -> str | None:
        return self.details.get("response_text")


class LogDeliveryError(EvalLogError):
    """Raised when the logs endpoint does not accept a record."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if response_text:
            details["response_text"] = response_text
        super().__init__(
            message,
            error_code=EnumErrorCode.LOG_DELIVERY_FAILED,
            details=details,
            status_code=status_code,
        )

    @property
    def response_text(self) -> str | None:
        return self.details.get("response_text")


class TransportError(EvalLogError):
    """Raised on network-level failures surfaced by httpx."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if url:
            details["url"] = url
        super().__init__(
            message,
            error_code=EnumErrorCode.TRANSPORT_ERROR,
            details=details,
        )


class ConfigurationError(EvalLogError):
    """Raised when settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_fields: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if missing_fields:
            details["missing_fields"] = missing_fields
        super().__init__(
            message,
            error_code=EnumErrorCode.CONFIGURATION_ERROR,
            details=details,
        )


__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "EvalLogError",
    "LogDeliveryError",
    "LogValidationError",
    "TransportError",
]
