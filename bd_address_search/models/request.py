"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .location import LocationType


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, max_length=100, description="Search query")
    include_english: Optional[bool] = Field(None, description="Search English names")
    include_bengali: Optional[bool] = Field(None, description="Search Bengali names")
    include_slug: Optional[bool] = Field(None, description="Search slugs")
    limit: Optional[int] = Field(
        None, ge=1, le=100, description="Maximum number of results per tier"
    )
    threshold: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Minimum score threshold"
    )
    case_sensitive: Optional[bool] = Field(None, description="Case sensitive matching")
    types: Optional[List[LocationType]] = Field(None, description="Tiers to search")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and normalize query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v.strip()

    def option_overrides(self) -> dict:
        """Option fields explicitly set on this request."""
        return self.model_dump(exclude={"query"}, exclude_none=True)
