"""Per-call search configuration."""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .location import LocationType

ALL_LOCATION_TYPES: Tuple[LocationType, ...] = tuple(LocationType)


class SearchOptions(BaseModel):
    """
    Options controlling a single search or autocomplete call.

    Instances are immutable; use ``merged`` to derive a new set of options
    with some fields overridden. ``threshold`` must lie in [0, 1]; a
    ``limit`` of zero or less is accepted and produces empty results.
    """

    model_config = ConfigDict(frozen=True)

    include_english: bool = Field(default=True, description="Search English names")
    include_bengali: bool = Field(default=True, description="Search Bengali names")
    include_slug: bool = Field(default=True, description="Search slugs")
    limit: int = Field(default=10, description="Maximum results per category")
    threshold: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Minimum score to keep a match"
    )
    case_sensitive: bool = Field(default=False, description="Case sensitive matching")
    types: Tuple[LocationType, ...] = Field(
        default=ALL_LOCATION_TYPES, description="Location tiers to search"
    )

    @field_validator("types", mode="before")
    @classmethod
    def drop_unknown_types(cls, v: Any) -> Tuple[LocationType, ...]:
        """Keep only recognised tiers so unknown names simply match nothing."""
        if isinstance(v, (str, LocationType)):
            v = [v]
        known = {t.value for t in LocationType}
        return tuple(LocationType(t) for t in v if getattr(t, "value", t) in known)

    def merged(self, **overrides: Any) -> "SearchOptions":
        """
        Return a copy with every non-None override applied.

        Args:
            **overrides: Field values to replace

        Returns:
            New validated SearchOptions
        """
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SearchOptions(**values)
