"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from adtracker.api.deps import get_store
from adtracker.common.config import get_settings
from adtracker.core import Store
from adtracker.schemas.response import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: Store = Depends(get_store)) -> HealthResponse:
    """
    Health check endpoint.

    Returns service status, storage health and collection sizes.
    """
    settings = get_settings()

    storage_healthy = store.storage.is_writable()

    return HealthResponse(
        status="healthy" if storage_healthy else "degraded",
        version=settings.app_version,
        storage=storage_healthy,
        ads=len(store.list_ads()),
        revenue=len(store.list_revenue()),
    )


@router.get("/ping")
async def ping() -> dict:
    """Simple ping endpoint."""
    return {"pong": True}


@router.get("/live")
async def liveness_check() -> dict:
    """Liveness check."""
    return {"alive": True}
