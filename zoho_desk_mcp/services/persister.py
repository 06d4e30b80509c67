"""Write a refreshed access token back into the credential file.

Plain read‑modify‑write with no locking or temp‑file swap: callers with more
than one writer must serialise calls themselves.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from zoho_desk_mcp.config import get_config_path


def persist_access_token(
    new_token: str,
    *,
    config_path: Optional[Union[str, Path]] = None,
) -> bool:  # noqa: D401
    """Replace ``accessToken`` in the credential file, keeping every other key.

    Returns ``True`` on success and ``False`` on any I/O or parse failure;
    never raises.  Nothing is written if the existing file cannot be read.
    """
    path = Path(config_path) if config_path is not None else get_config_path()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("credential file does not hold a JSON object")

        data["accessToken"] = new_token
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Could not persist access token to {}: {}", path, exc)
        return False

    logger.debug("Access token persisted to {}", path)
    return True
