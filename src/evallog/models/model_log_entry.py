# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Local-only records kept by the logging demo."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from evallog.enums import EnumLogLevel, EnumLogPackage


class ModelLogEntry(BaseModel):
    """One row of the demo's recent-logs history.

    ``entry_id`` is the server log id for delivered records and
    ``error-<epoch-ms>`` for failed ones.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entry_id: str
    timestamp: datetime
    level: EnumLogLevel
    package: EnumLogPackage
    message: str
    status: Literal["success", "error"]


class ModelDemoNotice(BaseModel):
    """User-facing notice produced by a demo action."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    description: str
    variant: Literal["default", "destructive"] = Field(default="default")

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


__all__ = ["ModelDemoNotice", "ModelLogEntry"]
