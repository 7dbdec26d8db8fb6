"""Global search instance to avoid circular imports."""

from .config import get_settings
from .core.catalog import get_catalog
from .core.orchestrator import LocationSearch
from .models.options import SearchOptions

# Global search instance over the shared catalog
settings = get_settings()
catalog = get_catalog()
location_search = LocationSearch(
    catalog,
    default_options=SearchOptions(
        limit=settings.default_limit,
        threshold=settings.default_threshold,
    ),
    fuzzy_threshold=settings.fuzzy_threshold,
)
