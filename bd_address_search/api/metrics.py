"""Metrics and monitoring API endpoints."""

import psutil
from fastapi import APIRouter

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the shared catalog
from ..engine_instance import catalog

_process = psutil.Process()


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get process metrics",
    description="Catalog size and resource usage of the service process"
)
async def get_metrics() -> MetricsResponse:
    """
    Get resource metrics for the service.

    Memory is the resident set size of this process.
    """
    memory_usage_mb = _process.memory_info().rss / (1024 * 1024)

    return MetricsResponse(
        total_locations=len(catalog),
        memory_usage_mb=memory_usage_mb,
        cpu_percent=_process.cpu_percent(interval=None)
    )
