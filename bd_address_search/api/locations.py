"""Catalog lookup API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query

from ..core.address import format_address_bengali, format_address_english
from ..models.location import (
    AnyLocation,
    District,
    Division,
    LocationOption,
    LocationStats,
    LocationType,
    Upazila,
)
from ..models.response import AddressResponse

router = APIRouter(prefix="/api/v1", tags=["locations"])

# Import the shared catalog
from ..engine_instance import catalog


def _not_found(what: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{what} not found")


@router.get(
    "/divisions",
    response_model=List[Division],
    summary="List divisions"
)
async def list_divisions() -> List[Division]:
    return catalog.get_all(LocationType.DIVISION)


@router.get(
    "/districts",
    response_model=List[District],
    summary="List districts",
    description="All districts, or those of one division"
)
async def list_districts(
    division_id: Optional[int] = Query(None, description="Parent division id")
) -> List[District]:
    if division_id is not None:
        return catalog.districts_by_division(division_id)
    return catalog.get_all(LocationType.DISTRICT)


@router.get(
    "/upazilas",
    response_model=List[Upazila],
    summary="List upazilas",
    description="All upazilas, or those of one district"
)
async def list_upazilas(
    district_id: Optional[int] = Query(None, description="Parent district id")
) -> List[Upazila]:
    if district_id is not None:
        return catalog.upazilas_by_district(district_id)
    return catalog.get_all(LocationType.UPAZILA)


@router.get(
    "/locations/{location_type}/{location_id}",
    response_model=AnyLocation,
    summary="Get a location by id"
)
async def get_location(
    location_type: LocationType = Path(..., description="Location tier"),
    location_id: int = Path(..., description="Location id")
) -> AnyLocation:
    location = catalog.get_by_id(location_type, location_id)
    if location is None:
        raise _not_found(f"{location_type.value.capitalize()} {location_id}")
    return location


@router.get(
    "/locations/{location_type}/slug/{slug}",
    response_model=AnyLocation,
    summary="Get a location by slug"
)
async def get_location_by_slug(
    location_type: LocationType = Path(..., description="Location tier"),
    slug: str = Path(..., description="Location slug")
) -> AnyLocation:
    location = catalog.get_by_slug(location_type, slug)
    if location is None:
        raise _not_found(f"{location_type.value.capitalize()} '{slug}'")
    return location


@router.get(
    "/divisions/{division_id}/upazilas",
    response_model=List[Upazila],
    summary="Upazilas of a division"
)
async def division_upazilas(
    division_id: int = Path(..., description="Division id")
) -> List[Upazila]:
    if not catalog.is_valid(LocationType.DIVISION, division_id):
        raise _not_found(f"Division {division_id}")
    return catalog.upazilas_by_division(division_id)


@router.get(
    "/address/{upazila_id}",
    response_model=AddressResponse,
    summary="Full address",
    description="Resolve an upazila to its district and division"
)
async def full_address(
    upazila_id: int = Path(..., description="Upazila id")
) -> AddressResponse:
    address = catalog.full_address(upazila_id)
    if address is None:
        raise _not_found(f"Upazila {upazila_id}")
    return AddressResponse(
        address=address,
        formatted_en=format_address_english(address),
        formatted_bn=format_address_bengali(address)
    )


@router.get(
    "/options/{location_type}",
    response_model=List[LocationOption],
    summary="Dropdown options"
)
async def location_options(
    location_type: LocationType = Path(..., description="Location tier"),
    parent_id: Optional[int] = Query(None, description="Parent division or district id")
) -> List[LocationOption]:
    return catalog.options(location_type, parent_id)


@router.get(
    "/stats",
    response_model=LocationStats,
    summary="Catalog statistics"
)
async def stats() -> LocationStats:
    return catalog.stats()
