"""Search API endpoints."""

import time
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ..config import get_settings
from ..models.location import AnyLocation, LocationType
from ..models.request import SearchRequest
from ..models.response import AutocompleteResponse, MatchResult, SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search instance
from ..engine_instance import location_search


def search_params(
    include_english: Optional[bool] = Query(None, description="Search English names"),
    include_bengali: Optional[bool] = Query(None, description="Search Bengali names"),
    include_slug: Optional[bool] = Query(None, description="Search slugs"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum results per tier"),
    threshold: Optional[float] = Query(None, ge=0.0, le=1.0, description="Minimum score (0.0-1.0)"),
    case_sensitive: Optional[bool] = Query(None, description="Case sensitive matching"),
    types: Optional[List[LocationType]] = Query(None, description="Tiers to search")
) -> dict:
    """Collect option overrides given as query parameters."""
    overrides = {
        "include_english": include_english,
        "include_bengali": include_bengali,
        "include_slug": include_slug,
        "limit": limit,
        "threshold": threshold,
        "case_sensitive": case_sensitive,
        "types": types,
    }
    return {k: v for k, v in overrides.items() if v is not None}


def query_param(
    q: str = Query(..., min_length=1, description="Search query")
) -> str:
    """Validate the query string length."""
    if len(q) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )
    return q


def _timed_search(method, query: str, overrides: dict) -> SearchResponse:
    start_time = time.time()
    result = method(query, **overrides)
    return SearchResponse(
        query=query,
        execution_time_ms=(time.time() - start_time) * 1000,
        total_results=result.total_results,
        results=result
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search locations",
    description="Ranked fuzzy search over divisions, districts and upazilas"
)
async def search_locations(
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> SearchResponse:
    """
    Search every enabled tier.

    Each tier is ranked and capped independently.
    """
    return _timed_search(location_search.search, q, overrides)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search using a JSON request body carrying the search options."""
    return _timed_search(location_search.search, request.query, request.option_overrides())


@router.get(
    "/search/quick",
    response_model=AnyLocation,
    summary="Quick search",
    description="Return the single best matching location of any tier"
)
async def quick_search(
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> AnyLocation:
    """Best match across all tiers, 404 when nothing matches."""
    overrides.pop("limit", None)
    location = location_search.quick_search(q, **overrides)
    if location is None:
        raise HTTPException(status_code=404, detail=f"No location matches '{q}'")
    return location


@router.get(
    "/search/fuzzy",
    response_model=SearchResponse,
    summary="Typo tolerant search",
    description="Search using the configured fuzzy threshold"
)
async def fuzzy_search(
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> SearchResponse:
    overrides.pop("threshold", None)
    return _timed_search(location_search.fuzzy_search, q, overrides)


@router.get(
    "/search/english",
    response_model=SearchResponse,
    summary="Search English names",
    description="Search English names only"
)
async def search_english(
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> SearchResponse:
    return _timed_search(location_search.search_english, q, overrides)


@router.get(
    "/search/bengali",
    response_model=SearchResponse,
    summary="Search Bengali names",
    description="Search Bengali names only"
)
async def search_bengali(
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> SearchResponse:
    return _timed_search(location_search.search_bengali, q, overrides)


@router.get(
    "/search/{location_type}",
    response_model=List[MatchResult],
    summary="Search one tier",
    description="Ranked search restricted to divisions, districts or upazilas"
)
async def search_type(
    location_type: LocationType = Path(..., description="Tier to search"),
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> List[MatchResult]:
    overrides.pop("types", None)
    return location_search.search_type(location_type, q, **overrides)


@router.get(
    "/autocomplete",
    response_model=AutocompleteResponse,
    summary="Autocomplete",
    description="Locations whose English or Bengali name starts with the query"
)
async def autocomplete(
    q: str = Depends(query_param),
    overrides: dict = Depends(search_params)
) -> AutocompleteResponse:
    """
    Prefix suggestions for search-as-you-type inputs.

    English name matches are listed before Bengali name matches.
    """
    start_time = time.time()
    suggestions = location_search.autocomplete(q, **overrides)
    return AutocompleteResponse(
        query=q,
        execution_time_ms=(time.time() - start_time) * 1000,
        suggestions=suggestions
    )
