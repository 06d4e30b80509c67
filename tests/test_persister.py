"""
Token persister tests.

The persister rewrites only accessToken, keeps every other key, and reports
failures as False without touching the file.
"""

import json

from zoho_desk_mcp.services.persister import persist_access_token


def test_updates_only_access_token(write_config):
    original = {
        "accessToken": "old",
        "orgId": "o1",
        "clientId": "c",
        "refreshToken": "r",
        "region": "EU",
        "portalName": "acme",
        "nested": {"a": [1, 2, 3]},
    }
    path = write_config(original)

    assert persist_access_token("newtok", config_path=path) is True

    updated = json.loads(path.read_text(encoding="utf-8"))
    assert updated == {**original, "accessToken": "newtok"}


def test_output_format(write_config):
    path = write_config(None, raw='{"orgId":"o1","accessToken":"old"}')

    assert persist_access_token("newtok", config_path=path)

    assert path.read_text(encoding="utf-8") == (
        '{\n  "orgId": "o1",\n  "accessToken": "newtok"\n}\n'
    )


def test_non_ascii_written_verbatim(write_config):
    path = write_config({"accessToken": "old", "orgId": "o1", "portalName": "Zürich"})

    assert persist_access_token("newtok", config_path=path)

    assert "Zürich" in path.read_text(encoding="utf-8")


def test_adds_access_token_when_absent(write_config):
    path = write_config({"orgId": "o1"})

    assert persist_access_token("newtok", config_path=path)

    assert json.loads(path.read_text(encoding="utf-8"))["accessToken"] == "newtok"


def test_missing_file_returns_false(tmp_path):
    path = tmp_path / "config.json"

    assert persist_access_token("newtok", config_path=path) is False
    assert not path.exists()


def test_invalid_json_left_untouched(write_config):
    path = write_config(None, raw="{broken")

    assert persist_access_token("newtok", config_path=path) is False
    assert path.read_text(encoding="utf-8") == "{broken"


def test_non_object_left_untouched(write_config):
    path = write_config(["accessToken"])
    before = path.read_text(encoding="utf-8")

    assert persist_access_token("newtok", config_path=path) is False
    assert path.read_text(encoding="utf-8") == before


def test_directory_path_returns_false(tmp_path):
    assert persist_access_token("newtok", config_path=tmp_path) is False


def test_default_path_comes_from_settings(isolated_credentials):
    isolated_credentials.write_text('{"accessToken": "old", "orgId": "o1"}', encoding="utf-8")

    assert persist_access_token("newtok") is True

    assert json.loads(isolated_credentials.read_text(encoding="utf-8"))["accessToken"] == "newtok"
