"""Central configuration object (env‑driven).

Uses Pydantic *BaseSettings* so the process settings can be overridden via
environment variables or a local *.env* file.  Zoho credentials themselves are
**not** settings: they are resolved by :mod:`zoho_desk_mcp.services.resolver`.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# <project root>/config.json – one level above the package directory
_DEFAULT_CONFIG_FILE = Path(__file__).resolve().parent.parent / "config.json"


class Settings(BaseSettings):
    """Load settings from env vars or .env."""

    ZOHO_CONFIG_FILE: str = Field(
        default=str(_DEFAULT_CONFIG_FILE),
        description="Path to the JSON credential file",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum level for the loguru stderr sink",
    )

    # only the fields above are read from .env; ZOHO_* credentials must be real env vars
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# singleton instance ---------------------------------------------------------

settings = Settings()


def get_config_path() -> Path:
    """Return the credential file path shared by resolver and persister."""
    return Path(settings.ZOHO_CONFIG_FILE)
