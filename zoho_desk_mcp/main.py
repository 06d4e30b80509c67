"""ASGI entry‑point for the Zoho Desk MCP credential layer.

Run in dev mode:
    uvicorn zoho_desk_mcp.main:app --reload

Credentials are resolved exactly once, at startup; a missing or invalid
credential set aborts startup.  Importing this module leaves loguru sinks
alone: the stderr sink is installed only when the app starts.
"""
from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from loguru import logger

from zoho_desk_mcp.config import settings
from zoho_desk_mcp.routes import config_routes
from zoho_desk_mcp.services.resolver import ConfigError, UnknownRegionError, load_config_with_source

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

_sink_id: Optional[int] = None


def configure_logging() -> int:
    """Install (or replace) this app's stderr sink at ``LOG_LEVEL``.

    Sinks added by the host process are left untouched.
    """
    global _sink_id  # noqa: PLW0603

    if _sink_id is not None:
        logger.remove(_sink_id)
    _sink_id = logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())
    return _sink_id


# ---------------------------------------------------------------------------
# Lifespan – resolve credentials once
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    try:
        cfg, source = load_config_with_source()
    except (ConfigError, UnknownRegionError) as exc:
        logger.critical("Cannot start without Zoho credentials: {}", exc)
        raise

    logger.info("Zoho credentials loaded from {} (region={}, org={})", source, cfg.region.value, cfg.org_id)
    app.state.zoho_config = cfg
    app.state.zoho_config_source = source
    yield


app = FastAPI(
    title="Zoho Desk MCP",
    version="0.1.0",
    description="Credential resolution layer for the Zoho Desk MCP server.",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

app.include_router(config_routes.router, prefix="/config")


# ---------------------------------------------------------------------------
# Root & liveness endpoints
# ---------------------------------------------------------------------------

@app.get("/", include_in_schema=False)
async def _root() -> dict[str, str]:
    return {"service": "zoho-desk-mcp", "status": "alive"}
