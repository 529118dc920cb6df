# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Outbound log record and the acknowledgment returned for it."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from evallog.enums import EnumLogLevel, EnumLogPackage, EnumLogStack


class ModelLogRecord(BaseModel):
    """Body of ``POST {base}/logs``.

    Level and package are accepted in any casing and canonicalized to their
    lowercase enum values. The message is trimmed and must not be empty
    afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    stack: EnumLogStack = Field(default=EnumLogStack.FRONTEND)
    level: EnumLogLevel
    package: EnumLogPackage
    message: str = Field(min_length=1)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("package", mode="before")
    @classmethod
    def normalize_package(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("message", mode="before")
    @classmethod
    def trim_message(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body with enum members rendered as strings."""
        return self.model_dump(mode="json")


class ModelLogAcknowledgment(BaseModel):
    """Successful ``POST {base}/logs`` response."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    log_id: str = Field(alias="logID", description="Server-issued log identifier.")
    message: str = Field(default="", description="Message echoed by the server.")


__all__ = ["ModelLogAcknowledgment", "ModelLogRecord"]
