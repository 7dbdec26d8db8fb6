"""Result and response models."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .location import AnyLocation, FullAddress, LocationType, MatchedField


class MatchResult(BaseModel):
    """Individual ranked search result."""

    item: AnyLocation = Field(..., description="The matched location")
    score: float = Field(..., ge=0.0, le=1.0, description="Match score (0-1)")
    matched_field: MatchedField = Field(..., description="Field that produced the best score")


class LocationSearchResult(BaseModel):
    """Ranked results grouped by location tier, each in descending score order."""

    divisions: List[MatchResult] = Field(default_factory=list)
    districts: List[MatchResult] = Field(default_factory=list)
    upazilas: List[MatchResult] = Field(default_factory=list)

    def for_type(self, location_type: LocationType) -> List[MatchResult]:
        """Results for a single tier, empty for an unknown tier."""
        try:
            location_type = LocationType(location_type)
        except ValueError:
            return []
        return getattr(self, location_type.plural)

    def all_results(self) -> List[MatchResult]:
        """All results in tier order (divisions, districts, upazilas)."""
        return [*self.divisions, *self.districts, *self.upazilas]

    @property
    def total_results(self) -> int:
        return len(self.divisions) + len(self.districts) + len(self.upazilas)


class AutocompleteEntry(BaseModel):
    """Prefix match suggestion."""

    name: str = Field(..., description="English name")
    bn_name: str = Field(..., description="Bengali name")
    type: LocationType = Field(..., description="Tier of the suggested location")
    item: AnyLocation = Field(..., description="The suggested location")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results across tiers")
    results: LocationSearchResult = Field(..., description="Results grouped by tier")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class AutocompleteResponse(BaseModel):
    """Response for autocomplete queries."""

    query: str = Field(..., description="Original query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    suggestions: List[AutocompleteEntry] = Field(..., description="Ordered suggestions")


class AddressResponse(BaseModel):
    """Full address with its formatted representations."""

    address: FullAddress
    formatted_en: str = Field(..., description="English address string")
    formatted_bn: str = Field(..., description="Bengali address string")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Process and catalog metrics."""

    total_locations: int = Field(..., description="Locations held in the catalog")
    memory_usage_mb: float = Field(..., description="Resident memory of this process in MB")
    cpu_percent: float = Field(..., description="Process CPU usage percentage")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
