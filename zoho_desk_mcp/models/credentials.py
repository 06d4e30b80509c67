"""Pydantic model for the resolved Zoho Desk credential set.

Attribute names are snake_case; the camelCase aliases match the keys used in
*config.json* so a parsed file validates directly into :class:`ZohoConfig`.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field
from pydantic.alias_generators import to_camel


class ZohoRegion(str, Enum):
    """Zoho data centre selecting the regional API and accounts hosts."""

    US = "US"
    EU = "EU"
    IN = "IN"
    AU = "AU"
    JP = "JP"
    CA = "CA"


class ZohoConfig(BaseModel):
    """Credentials used to initialise the Zoho Desk API client."""

    access_token: str = Field(..., min_length=1, repr=False, description="OAuth access token")
    org_id: str = Field(..., min_length=1, description="Zoho Desk organization id")
    client_id: Optional[str] = Field(default=None, description="OAuth client id")
    client_secret: Optional[str] = Field(default=None, repr=False)
    refresh_token: Optional[str] = Field(default=None, repr=False)
    region: ZohoRegion = Field(default=ZohoRegion.US, description="Data centre code")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @computed_field  # type: ignore[misc]
    @property
    def can_refresh(self) -> bool:  # noqa: D401
        """True when every field an OAuth refresh needs is present."""
        return bool(self.client_id and self.client_secret and self.refresh_token)

