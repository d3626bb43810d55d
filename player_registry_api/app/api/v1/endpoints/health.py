"""
Health endpoint for API v1.

Returns a static payload with the service version so that load
balancers and the client can check the service is up.
"""

from typing import Any, Dict

from fastapi import APIRouter

from player_registry_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_health() -> Dict[str, Any]:
    """Report that the service is running."""
    return {"status": "ok", "name": settings.project_name, "version": settings.api_version}
