import json
from pathlib import Path
from typing import Any, Callable

import pytest

from zoho_desk_mcp.config import settings

ZOHO_ENV_VARS = (
    "ZOHO_ACCESS_TOKEN",
    "ZOHO_ORG_ID",
    "ZOHO_CLIENT_ID",
    "ZOHO_CLIENT_SECRET",
    "ZOHO_REFRESH_TOKEN",
    "ZOHO_REGION",
)


@pytest.fixture(autouse=True)
def isolated_credentials(monkeypatch, tmp_path: Path) -> Path:
    """Scrub ZOHO_* env vars and point the default credential file into tmp_path."""
    for name in ZOHO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    default_path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "ZOHO_CONFIG_FILE", str(default_path))
    return default_path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a credential file and return its path."""

    def _write(data: Any, name: str = "config.json", raw: str | None = None) -> Path:
        path = tmp_path / name
        path.write_text(raw if raw is not None else json.dumps(data, indent=2) + "\n", encoding="utf-8")
        return path

    return _write
