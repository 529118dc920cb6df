# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Environment-sourced settings for the evaluation service client.

Environment variables:
    EVALLOG_BASE_URL: Evaluation service base URL
    EVALLOG_TIMEOUT_SECONDS: HTTP timeout in seconds (default 30)
    EVALLOG_EMAIL, EVALLOG_NAME, EVALLOG_ROLL_NO, EVALLOG_ACCESS_CODE,
    EVALLOG_CLIENT_ID, EVALLOG_CLIENT_SECRET: Auth credentials
    EVALLOG_REAUTHENTICATE_ON_UNAUTHORIZED: Re-auth once after a 401 (default false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from evallog.errors import ConfigurationError
from evallog.models import (
    DEFAULT_BASE_URL,
    ModelAuthCredentials,
    ModelEvaluationClientConfig,
)
from evallog.session import AuthenticatedSession

if TYPE_CHECKING:
    from evallog.clients import EvaluationServiceClient

_CREDENTIAL_FIELDS = (
    "email",
    "name",
    "roll_no",
    "access_code",
    "client_id",
    "client_secret",
)


class EvaluationServiceSettings(BaseSettings):
    """Pydantic Settings for the client, loaded from ``EVALLOG_*`` variables.

    Credential fields are optional here so that the settings object can be
    built without them; ``to_credentials`` enforces their presence.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVALLOG_",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    reauthenticate_on_unauthorized: bool = Field(default=False)

    email: str | None = Field(default=None)
    name: str | None = Field(default=None)
    roll_no: str | None = Field(default=None)
    access_code: str | None = Field(default=None)
    client_id: str | None = Field(default=None)
    client_secret: SecretStr | None = Field(default=None)

    def to_client_config(self) -> ModelEvaluationClientConfig:
        """Convert to a frozen client configuration."""
        return ModelEvaluationClientConfig(
            base_url=self.base_url,
            timeout_seconds=self.timeout_seconds,
        )

    def missing_credentials(self) -> list[str]:
        """Names of credential fields that are unset or blank."""
        missing = []
        for field in _CREDENTIAL_FIELDS:
            value = getattr(self, field)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            if not value:
                missing.append(field)
        return missing

    def to_credentials(self) -> ModelAuthCredentials:
        """Build the credential set.

        Raises:
            ConfigurationError: Naming every missing credential field.
        """
        missing = self.missing_credentials()
        if missing:
            raise ConfigurationError(
                "Missing evaluation service credentials: "
                + ", ".join(f"EVALLOG_{name.upper()}" for name in missing),
                missing_fields=missing,
            )
        assert self.client_secret is not None
        return ModelAuthCredentials(
            email=self.email,
            name=self.name,
            roll_no=self.roll_no,
            access_code=self.access_code,
            client_id=self.client_id,
            client_secret=self.client_secret.get_secret_value(),
        )

    def create_session(self, client: EvaluationServiceClient) -> AuthenticatedSession:
        """Build a session from these credentials and the re-auth flag."""
        return AuthenticatedSession(
            client,
            self.to_credentials(),
            reauthenticate_on_unauthorized=self.reauthenticate_on_unauthorized,
        )


__all__ = ["EvaluationServiceSettings"]
