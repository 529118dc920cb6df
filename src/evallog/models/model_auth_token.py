# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Bearer token returned by the auth endpoint."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelAuthToken(BaseModel):
    """Successful ``POST {base}/auth`` response.

    The access token is an opaque capability: it is never inspected, and
    ``expires_in`` is only a hint that this client does not enforce.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    token_type: Literal["Bearer"] = Field(description="Always 'Bearer'.")
    access_token: str = Field(
        min_length=1,
        repr=False,
        description="Opaque bearer token presented on every log call.",
    )
    expires_in: int | float = Field(
        description="Server-side lifetime hint in seconds (not enforced).",
    )

    @property
    def authorization_header(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"{self.token_type} {self.access_token}"


__all__ = ["ModelAuthToken"]
