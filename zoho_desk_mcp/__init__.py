"""Package root for *zoho_desk_mcp*.

Re‑exports the credential helpers used by the Zoho Desk API client and the
FastAPI ``app`` so you can run::

    uvicorn zoho_desk_mcp:app

from anywhere on PYTHONPATH.
"""
from __future__ import annotations

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("zoho-desk-mcp")  # Works when installed via pip/poetry
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"

from zoho_desk_mcp.config import get_config_path  # noqa: E402
from zoho_desk_mcp.models.credentials import ZohoConfig, ZohoRegion  # noqa: E402
from zoho_desk_mcp.services.persister import persist_access_token  # noqa: E402
from zoho_desk_mcp.services.regions import (  # noqa: E402
    ZOHO_ACCOUNTS_URLS,
    ZOHO_DESK_URLS,
    UnknownRegionError,
)
from zoho_desk_mcp.services.resolver import (  # noqa: E402
    ConfigError,
    MissingCredentialsError,
    load_config,
    load_config_with_source,
)

# Export app for Uvicorn convenience --------------------------------------------------
from zoho_desk_mcp.main import app  # noqa: E402  pylint: disable=wrong-import-position

__all__ = [
    "app",
    "__version__",
    "ConfigError",
    "MissingCredentialsError",
    "UnknownRegionError",
    "ZOHO_ACCOUNTS_URLS",
    "ZOHO_DESK_URLS",
    "ZohoConfig",
    "ZohoRegion",
    "get_config_path",
    "load_config",
    "load_config_with_source",
    "persist_access_token",
]
