"""
Health check API endpoints.

Routes: GET /health, GET /health/db, GET /health/cache

Dependencies: legalaid.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.api.deps import get_service_cache
from legalaid.boundary.db import get_async_db


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)) -> HealthResponse:
    """Database health check."""
    await db.execute(text("SELECT 1"))
    return HealthResponse(status="healthy", message="Database connection OK")


@router.get("/cache", response_model=HealthResponse)
async def health_check_cache() -> HealthResponse:
    """Cache health check. A missing or unreachable cache is degraded, not failed."""
    redis_cache = get_service_cache().redis_cache
    if not redis_cache.enabled:
        return HealthResponse(status="disabled", message="Cache not configured")
    if await redis_cache.ping():
        return HealthResponse(status="healthy", message="Cache reachable")
    return HealthResponse(status="degraded", message="Cache unreachable")
