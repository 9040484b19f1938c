"""Health check endpoints."""

from datetime import datetime, timezone
from uuid import uuid4

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_key_value_store
from core.config import settings
from domain.repositories.key_value_store import IKeyValueStore

router = APIRouter(tags=["health"])

_PROBE_KEY = "__health_probe__"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    storage_backend: str
    storage: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        storage_backend=settings.storage_backend,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    store: IKeyValueStore = Depends(get_key_value_store),
) -> HealthResponse:
    """
    Detailed health check including a storage write/read/remove round trip.

    Use for monitoring dashboards that need to verify all dependencies.
    """
    probe = uuid4().hex
    try:
        await store.set_item(_PROBE_KEY, probe)
        value = await store.get_item(_PROBE_KEY)
        await store.remove_item(_PROBE_KEY)
        storage_status = "healthy" if value == probe else "unhealthy: probe mismatch"
    except Exception as e:
        storage_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if storage_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        storage_backend=settings.storage_backend,
        storage=storage_status,
    )
