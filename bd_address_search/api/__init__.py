"""API endpoints for bd_address_search."""

from .search import router as search_router
from .locations import router as locations_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "locations_router",
    "health_router",
    "metrics_router",
]
