"""Zoho Desk credential resolver.

Credentials come from exactly one source, checked in order:

    1. ``ZOHO_ACCESS_TOKEN`` + ``ZOHO_ORG_ID`` environment variables (both set).
    2. The JSON credential file (see :func:`zoho_desk_mcp.config.get_config_path`).

Sources are never merged: once the environment pair is present the file is not
read at all.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, Tuple, Union

from loguru import logger
from pydantic import ValidationError

from zoho_desk_mcp.config import get_config_path
from zoho_desk_mcp.models.credentials import ZohoConfig
from zoho_desk_mcp.services.regions import UnknownRegionError, parse_region

ConfigSource = Literal["env", "file"]

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ENV_ACCESS_TOKEN = "ZOHO_ACCESS_TOKEN"
ENV_ORG_ID = "ZOHO_ORG_ID"
ENV_CLIENT_ID = "ZOHO_CLIENT_ID"
ENV_CLIENT_SECRET = "ZOHO_CLIENT_SECRET"
ENV_REFRESH_TOKEN = "ZOHO_REFRESH_TOKEN"
ENV_REGION = "ZOHO_REGION"

_MISSING_MESSAGE = (
    "Zoho Desk credentials not found. Please set ZOHO_ACCESS_TOKEN and "
    "ZOHO_ORG_ID environment variables, or create a config.json file."
)

_FILE_KEYS = frozenset(
    {"accessToken", "orgId", "clientId", "clientSecret", "refreshToken", "region"}
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(RuntimeError):
    """Base class for credential resolution failures."""


class MissingCredentialsError(ConfigError):
    """Neither the environment nor the credential file yields a token + org id."""

    def __init__(self, message: str = _MISSING_MESSAGE):
        super().__init__(message)


# ---------------------------------------------------------------------------
# Source loaders
# ---------------------------------------------------------------------------


def _from_env(environ: Mapping[str, str]) -> Optional[ZohoConfig]:
    """Build the record from env vars, or ``None`` if the required pair is absent."""
    access_token = environ.get(ENV_ACCESS_TOKEN)
    org_id = environ.get(ENV_ORG_ID)
    if not (access_token and org_id):
        return None

    return ZohoConfig(
        access_token=access_token,
        org_id=org_id,
        client_id=environ.get(ENV_CLIENT_ID) or None,
        client_secret=environ.get(ENV_CLIENT_SECRET) or None,
        refresh_token=environ.get(ENV_REFRESH_TOKEN) or None,
        region=parse_region(environ.get(ENV_REGION)),
    )


def _read_file(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        logger.debug("No credential file at {}", path)
        raise MissingCredentialsError() from exc
    except (OSError, ValueError) as exc:  # ValueError covers JSON + decode errors
        logger.debug("Unreadable credential file {}: {}", path, exc)
        raise MissingCredentialsError() from exc

    if not isinstance(raw, dict):
        logger.debug("Credential file {} does not hold a JSON object", path)
        raise MissingCredentialsError()
    return raw


def _from_file(path: Path) -> ZohoConfig:
    raw = _read_file(path)

    if not (raw.get("accessToken") and raw.get("orgId")):
        raise MissingCredentialsError()

    extra = sorted(set(raw) - _FILE_KEYS)
    if extra:
        logger.debug("Ignoring unknown keys in {}: {}", path, ", ".join(extra))

    region = raw.get("region")
    if region is not None and not isinstance(region, str):
        raise MissingCredentialsError()

    known = {key: value for key, value in raw.items() if key in _FILE_KEYS}
    try:
        return ZohoConfig.model_validate({**known, "region": parse_region(region)})
    except ValidationError as exc:
        logger.debug("Invalid credential file {}: {}", path, exc)
        raise MissingCredentialsError() from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config_with_source(
    *,
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[ZohoConfig, ConfigSource]:
    """Resolve credentials and report which source supplied them.

    Raises:
        MissingCredentialsError: no source yields both access token and org id.
        UnknownRegionError: the selected source names an unsupported region.
    """
    env = os.environ if environ is None else environ

    cfg = _from_env(env)
    if cfg is not None:
        logger.debug("Zoho credentials resolved from environment (region={})", cfg.region.value)
        return cfg, "env"

    path = Path(config_path) if config_path is not None else get_config_path()
    cfg = _from_file(path)
    logger.debug("Zoho credentials resolved from {} (region={})", path, cfg.region.value)
    return cfg, "file"


def load_config(
    *,
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ZohoConfig:  # noqa: D401
    """Return the resolved :class:`ZohoConfig` (environment first, then file)."""
    cfg, _ = load_config_with_source(config_path=config_path, environ=environ)
    return cfg


__all__ = [
    "ConfigError",
    "ConfigSource",
    "MissingCredentialsError",
    "UnknownRegionError",
    "load_config",
    "load_config_with_source",
]
