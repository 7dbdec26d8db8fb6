"""
BD Address Search - fuzzy search over Bangladesh divisions, districts and upazilas.

This package provides ranked multi-field fuzzy search, prefix autocomplete and
first-match lookup over English names, Bengali names and slugs, together with
catalog lookups, relationship traversal and address formatting.
"""

__version__ = "1.0.0"

from .core.catalog import LocationCatalog, get_catalog, load_catalog
from .core.engine import SearchEngine
from .core.fuzzy_matcher import calculate_similarity
from .core.orchestrator import LocationSearch
from .models.options import SearchOptions
from .models.response import AutocompleteEntry, LocationSearchResult, MatchResult

__all__ = [
    "LocationCatalog",
    "LocationSearch",
    "SearchEngine",
    "SearchOptions",
    "MatchResult",
    "LocationSearchResult",
    "AutocompleteEntry",
    "calculate_similarity",
    "get_catalog",
    "load_catalog",
]
