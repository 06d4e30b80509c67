"""Response DTO for the credential diagnostics route.

Carries no secret values, only what is needed to tell *where* credentials came
from and which regional hosts the API client will talk to.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from zoho_desk_mcp.models.credentials import ZohoRegion


class ConfigStatus(BaseModel):
    """Return payload for **GET /config/status**."""

    source: Literal["env", "file"] = Field(..., description="Where credentials were resolved from")
    region: ZohoRegion
    org_id: str
    desk_api_url: str = Field(..., description="Zoho Desk REST base URL for the region")
    accounts_url: str = Field(..., description="Zoho Accounts host for OAuth refresh")
    can_refresh: bool = Field(..., description="Client id, secret and refresh token all present")
    config_path: str = Field(..., description="Credential file consulted when env is unset")

    model_config = {"extra": "forbid"}
