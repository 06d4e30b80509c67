"""Regional endpoint tables for Zoho Desk and Zoho Accounts.

Both tables are read‑only and keyed by :class:`ZohoRegion`; the API client
picks its base URLs from them once the credential region is known.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

from zoho_desk_mcp.models.credentials import ZohoRegion

# ---------------------------------------------------------------------------
# Endpoint tables
# ---------------------------------------------------------------------------

ZOHO_DESK_URLS: Mapping[ZohoRegion, str] = MappingProxyType(
    {
        ZohoRegion.US: "https://desk.zoho.com",
        ZohoRegion.EU: "https://desk.zoho.eu",
        ZohoRegion.IN: "https://desk.zoho.in",
        ZohoRegion.AU: "https://desk.zoho.com.au",
        ZohoRegion.JP: "https://desk.zoho.jp",
        ZohoRegion.CA: "https://desk.zohocloud.ca",
    }
)

ZOHO_ACCOUNTS_URLS: Mapping[ZohoRegion, str] = MappingProxyType(
    {
        ZohoRegion.US: "https://accounts.zoho.com",
        ZohoRegion.EU: "https://accounts.zoho.eu",
        ZohoRegion.IN: "https://accounts.zoho.in",
        ZohoRegion.AU: "https://accounts.zoho.com.au",
        ZohoRegion.JP: "https://accounts.zoho.jp",
        ZohoRegion.CA: "https://accounts.zohocloud.ca",
    }
)

_DESK_API_PATH = "/api/v1"
_OAUTH_TOKEN_PATH = "/oauth/v2/token"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class UnknownRegionError(ValueError):
    """Raised when a region code is not one of the supported data centres."""

    def __init__(self, value: str):
        supported = ", ".join(r.value for r in ZohoRegion)
        super().__init__(f"Unsupported Zoho region '{value}'. Supported: {supported}")
        self.value = value


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def parse_region(value: Optional[Union[str, ZohoRegion]]) -> ZohoRegion:
    """Map *value* onto :class:`ZohoRegion`; empty or ``None`` means US.

    Matching ignores case and surrounding whitespace.
    """
    if isinstance(value, ZohoRegion):
        return value
    if value is None or not str(value).strip():
        return ZohoRegion.US
    try:
        return ZohoRegion(str(value).strip().upper())
    except ValueError as exc:
        raise UnknownRegionError(str(value)) from exc


def desk_base_url(region: Union[str, ZohoRegion]) -> str:
    return ZOHO_DESK_URLS[parse_region(region)]


def desk_api_url(region: Union[str, ZohoRegion]) -> str:
    """Base URL for Zoho Desk REST calls, e.g. ``https://desk.zoho.eu/api/v1``."""
    return desk_base_url(region) + _DESK_API_PATH


def accounts_base_url(region: Union[str, ZohoRegion]) -> str:
    return ZOHO_ACCOUNTS_URLS[parse_region(region)]


def oauth_token_url(region: Union[str, ZohoRegion]) -> str:
    """Endpoint the API client posts refresh‑token grants to."""
    return accounts_base_url(region) + _OAUTH_TOKEN_PATH
