# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Configuration model for the evaluation service HTTP client."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from evallog.enums import EnumLogStack

DEFAULT_BASE_URL = "http://20.244.56.144/evaluation-service"


class ModelEvaluationClientConfig(BaseModel):
    """Configuration for the evaluation service HTTP client.

    Attributes:
        base_url: Base URL of the evaluation service; /auth and /logs hang off it.
        timeout_seconds: HTTP request timeout in seconds.
        stack: Origin tag stamped on every log record.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the evaluation service.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP request timeout in seconds.",
    )
    stack: EnumLogStack = Field(
        default=EnumLogStack.FRONTEND,
        description="Origin tag stamped on every log record.",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip surrounding whitespace and any trailing slash."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://, got: {v}")
        return v

    @property
    def auth_url(self) -> str:
        return f"{self.base_url}/auth"

    @property
    def logs_url(self) -> str:
        return f"{self.base_url}/logs"


__all__ = ["DEFAULT_BASE_URL", "ModelEvaluationClientConfig"]
