# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Credential set exchanged with the auth endpoint for a bearer token."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelAuthCredentials(BaseModel):
    """Credentials for ``POST {base}/auth``.

    Values are opaque strings; presence is the only validation. Fields accept
    either the Python name or the camelCase wire alias, and ``to_payload``
    always emits the wire aliases.

    Attributes:
        email: Registered email address.
        name: Display name.
        roll_no: Roll/ID number (wire: ``rollNo``).
        access_code: Access code issued by the service (wire: ``accessCode``).
        client_id: Client identifier (wire: ``clientID``).
        client_secret: Client secret (wire: ``clientSecret``). Never shown in repr.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    email: str = Field(description="Registered email address.")
    name: str = Field(description="Display name.")
    roll_no: str = Field(alias="rollNo", description="Roll/ID number.")
    access_code: str = Field(alias="accessCode", description="Access code.")
    client_id: str = Field(alias="clientID", description="Client identifier.")
    client_secret: str = Field(
        alias="clientSecret",
        repr=False,
        description="Client secret.",
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for the auth request."""
        return self.model_dump(by_alias=True)


__all__ = ["ModelAuthCredentials"]
