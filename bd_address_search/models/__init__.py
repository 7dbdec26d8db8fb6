"""Data models for bd_address_search."""

from .location import (
    AnyLocation,
    District,
    Division,
    FullAddress,
    Location,
    LocationOption,
    LocationStats,
    LocationType,
    MatchedField,
    Upazila,
)
from .options import SearchOptions
from .request import SearchRequest
from .response import (
    AddressResponse,
    AutocompleteEntry,
    AutocompleteResponse,
    ErrorResponse,
    HealthResponse,
    LocationSearchResult,
    MatchResult,
    MetricsResponse,
    SearchResponse,
)

__all__ = [
    "AnyLocation",
    "Location",
    "Division",
    "District",
    "Upazila",
    "FullAddress",
    "LocationOption",
    "LocationStats",
    "LocationType",
    "MatchedField",
    "SearchOptions",
    "SearchRequest",
    "MatchResult",
    "LocationSearchResult",
    "AutocompleteEntry",
    "SearchResponse",
    "AutocompleteResponse",
    "AddressResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
]
