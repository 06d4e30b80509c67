"""FastAPI routes exposing credential diagnostics.

Exposes two endpoints:
    * GET /config/status   – Where credentials came from and the regional hosts in use.
    * GET /config/ping     – Liveness probe.

Credentials are resolved once during app startup (see ``zoho_desk_mcp.main``);
these handlers only read what the lifespan stored on ``app.state``.
"""

from fastapi import APIRouter, Request, status

from zoho_desk_mcp.config import get_config_path
from zoho_desk_mcp.models.credentials import ZohoConfig
from zoho_desk_mcp.models.status import ConfigStatus
from zoho_desk_mcp.services import regions

router = APIRouter(prefix="", tags=["config"])


# ---------------------------------------------------------------------------
# /config/status
# ---------------------------------------------------------------------------

@router.get(
    "/status",
    response_model=ConfigStatus,
    status_code=status.HTTP_200_OK,
    summary="Describe the resolved Zoho Desk credentials",
    description="Reports the credential source and regional endpoints. Token and secret values are never returned.",
)
async def config_status(request: Request) -> ConfigStatus:
    cfg: ZohoConfig = request.app.state.zoho_config
    return ConfigStatus(
        source=request.app.state.zoho_config_source,
        region=cfg.region,
        org_id=cfg.org_id,
        desk_api_url=regions.desk_api_url(cfg.region),
        accounts_url=regions.accounts_base_url(cfg.region),
        can_refresh=cfg.can_refresh,
        config_path=str(get_config_path()),
    )


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@router.get("/ping", include_in_schema=False)
async def ping() -> dict[str, str]:
    """Simple liveness probe for load balancers and k8s probes."""
    return {"status": "ok"}
