"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search instance
from ..engine_instance import catalog, location_search

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    The catalog must be non-empty and a probe query must resolve.
    """
    dependencies = {
        "catalog": "healthy" if len(catalog) > 0 else "unhealthy",
        "search_engine": "healthy",
    }

    try:
        if location_search.quick_search(catalog.divisions[0].name) is None:
            dependencies["search_engine"] = "degraded"
    except (IndexError, ValueError):
        dependencies["search_engine"] = "unhealthy"

    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    elif any(status == "unhealthy" for status in dependencies.values()):
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Ready once the catalog holds locations."""
    stats = catalog.stats()
    ready = stats.total_divisions > 0

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.utcnow().isoformat(),
            "catalog": {
                "divisions": stats.total_divisions,
                "districts": stats.total_districts,
                "upazilas": stats.total_upazilas,
            }
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
