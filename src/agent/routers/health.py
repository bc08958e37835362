# =============================================================================
# agent/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and the container platform.
# =============================================================================

import logging
from datetime import datetime, timezone

import redis.asyncio as aioredis
from fastapi import APIRouter
from pydantic import BaseModel

from agent import __version__
from agent.config import Settings
from agent.dependencies import SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual dependency checks."""
    credential: str
    database: str
    cache: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


async def check_cache(settings: Settings) -> str:
    """Ping Redis if REDIS_URL is configured."""
    if not settings.REDIS_URL:
        return "not configured"

    client = None
    try:
        client = aioredis.from_url(settings.REDIS_URL)
        await client.ping()
        return "healthy"
    except Exception as e:
        logger.warning(f"Redis readiness check failed: {e}")
        return f"unhealthy: {str(e)[:50]}"
    finally:
        if client is not None:
            await client.aclose()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(settings: SettingsDep):
    """
    Readiness check endpoint.

    Reports whether the credential and external dependencies are available.
    Unconfigured dependencies don't make the service degraded; failing ones do.
    """
    checks = ChecksResponse(
        credential="configured" if settings.has_api_key else "missing",
        database="configured" if settings.DATABASE_URI else "not configured",
        cache=await check_cache(settings),
    )

    degraded = checks.credential == "missing" or checks.cache.startswith("unhealthy")

    return ReadinessResponse(
        status="degraded" if degraded else "ready",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
