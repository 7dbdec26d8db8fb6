"""Location models for the Bangladesh administrative hierarchy."""

from enum import Enum
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field


class LocationType(str, Enum):
    """Administrative tier of a location, in hierarchy order."""

    DIVISION = "division"
    DISTRICT = "district"
    UPAZILA = "upazila"

    @property
    def plural(self) -> str:
        """Name of the collection holding this tier."""
        return f"{self.value}s"


class MatchedField(str, Enum):
    """Location field that produced a search match."""

    NAME = "name"
    BN_NAME = "bn_name"
    SLUG = "slug"


class Location(BaseModel):
    """Fields shared by every tier."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable location identifier")
    name: str = Field(..., description="English name")
    bn_name: str = Field(..., description="Bengali name")
    slug: str = Field(..., description="Lowercase URL-safe slug")


class Division(Location):
    """One of the eight divisions."""


class District(Location):
    """A district, child of a division."""

    division_id: int = Field(..., description="Parent division identifier")


class Upazila(Location):
    """An upazila (sub-district), child of a district."""

    district_id: int = Field(..., description="Parent district identifier")


AnyLocation = Union[Division, District, Upazila]

LOCATION_MODELS = {
    LocationType.DIVISION: Division,
    LocationType.DISTRICT: District,
    LocationType.UPAZILA: Upazila,
}


class FullAddress(BaseModel):
    """Complete hierarchy for a single upazila."""

    model_config = ConfigDict(frozen=True)

    division: Division
    district: District
    upazila: Upazila


class LocationStats(BaseModel):
    """Catalog size and per-parent child counts."""

    total_divisions: int = Field(..., description="Number of divisions")
    total_districts: int = Field(..., description="Number of districts")
    total_upazilas: int = Field(..., description="Number of upazilas")
    division_district_map: Dict[int, int] = Field(
        ..., description="Division id to number of districts"
    )
    district_upazila_map: Dict[int, int] = Field(
        ..., description="District id to number of upazilas"
    )


class LocationOption(BaseModel):
    """Dropdown entry for a location."""

    value: str = Field(..., description="Location slug")
    label: str = Field(..., description="English label")
    label_bn: str = Field(..., description="Bengali label")
