"""Process settings and the credential file path."""

from pathlib import Path

import zoho_desk_mcp
from zoho_desk_mcp.config import Settings, get_config_path


def test_default_config_file_sits_above_package(monkeypatch):
    monkeypatch.delenv("ZOHO_CONFIG_FILE", raising=False)

    path = Path(Settings().ZOHO_CONFIG_FILE)

    assert path.name == "config.json"
    assert path.parent == Path(zoho_desk_mcp.__file__).resolve().parent.parent


def test_config_file_overridden_by_env(monkeypatch, tmp_path):
    target = tmp_path / "creds.json"
    monkeypatch.setenv("ZOHO_CONFIG_FILE", str(target))

    assert Settings().ZOHO_CONFIG_FILE == str(target)


def test_get_config_path_follows_settings(isolated_credentials):
    assert get_config_path() == isolated_credentials
