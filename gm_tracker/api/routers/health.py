"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: gm_tracker.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from gm_tracker.api.deps.dependencies import get_data_store
from gm_tracker.boundary.store import DataStore


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class StoreHealthResponse(HealthResponse):
    """Store health with the active backend name."""

    backend: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=StoreHealthResponse)
async def health_check_store(store: DataStore = Depends(get_data_store)) -> StoreHealthResponse:
    """Report which data backend is active."""
    mode = "remote backend" if store.backend_name == "remote" else "local fallback"
    return StoreHealthResponse(
        status="healthy",
        message=f"Using {mode}",
        backend=store.backend_name,
    )
