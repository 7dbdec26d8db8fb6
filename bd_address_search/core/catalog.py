"""Read-only catalog of divisions, districts and upazilas."""

import json
from collections import Counter
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import structlog

from ..config import get_settings
from .normalizer import TextNormalizer
from ..models.location import (
    AnyLocation,
    District,
    Division,
    FullAddress,
    LOCATION_MODELS,
    LocationOption,
    LocationStats,
    LocationType,
    Upazila,
)

logger = structlog.get_logger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class LocationCatalog:
    """
    Immutable in-memory catalog.

    Collections are stored as tuples and the id and slug lookup tables are
    built once in the constructor, so a catalog can be shared freely
    between threads after creation.
    """

    def __init__(
        self,
        divisions: Iterable[Division],
        districts: Iterable[District],
        upazilas: Iterable[Upazila]
    ) -> None:
        """
        Initialize the catalog.

        Args:
            divisions: Divisions in catalog order
            districts: Districts in catalog order
            upazilas: Upazilas in catalog order
        """
        self._items: Dict[LocationType, Tuple[AnyLocation, ...]] = {
            LocationType.DIVISION: tuple(divisions),
            LocationType.DISTRICT: tuple(districts),
            LocationType.UPAZILA: tuple(upazilas),
        }
        self._by_id = {
            location_type: {item.id: item for item in items}
            for location_type, items in self._items.items()
        }
        self._by_slug = {
            location_type: {item.slug: item for item in items}
            for location_type, items in self._items.items()
        }

    @property
    def divisions(self) -> Tuple[Division, ...]:
        return self._items[LocationType.DIVISION]

    @property
    def districts(self) -> Tuple[District, ...]:
        return self._items[LocationType.DISTRICT]

    @property
    def upazilas(self) -> Tuple[Upazila, ...]:
        return self._items[LocationType.UPAZILA]

    def categories(
        self,
        types: Optional[Sequence[LocationType]] = None
    ) -> Dict[LocationType, Tuple[AnyLocation, ...]]:
        """
        Ordered mapping of tier to locations, always in hierarchy order.

        Args:
            types: Tiers to include (all if None)

        Returns:
            Dictionary from LocationType to its locations
        """
        wanted = set(LocationType) if types is None else set(types)
        return {t: items for t, items in self._items.items() if t in wanted}

    def __len__(self) -> int:
        return sum(len(items) for items in self._items.values())

    # Lookups

    def get_all(self, location_type: LocationType) -> List[AnyLocation]:
        """All locations of a tier, as a new list."""
        return list(self._items[LocationType(location_type)])

    def get_by_id(self, location_type: LocationType, location_id: int) -> Optional[AnyLocation]:
        """Location of a tier by id, or None."""
        return self._by_id[LocationType(location_type)].get(location_id)

    def get_by_slug(self, location_type: LocationType, slug: str) -> Optional[AnyLocation]:
        """Location of a tier by slug (case-insensitive), or None."""
        return self._by_slug[LocationType(location_type)].get(slug.lower())

    def get_by_name(self, location_type: LocationType, name: str) -> Optional[AnyLocation]:
        """
        Location of a tier by name.

        English names compare case-insensitively, Bengali names exactly.

        Args:
            location_type: Tier to look in
            name: English or Bengali name

        Returns:
            First matching location or None
        """
        lower_name = name.lower()
        for item in self._items[LocationType(location_type)]:
            if item.name.lower() == lower_name or item.bn_name == name:
                return item
        return None

    # Relationships

    def districts_by_division(self, division_id: int) -> List[District]:
        """Districts belonging to a division."""
        return [d for d in self.districts if d.division_id == division_id]

    def districts_by_division_slug(self, division_slug: str) -> List[District]:
        """Districts belonging to the division with the given slug."""
        division = self.get_by_slug(LocationType.DIVISION, division_slug)
        if division is None:
            return []
        return self.districts_by_division(division.id)

    def upazilas_by_district(self, district_id: int) -> List[Upazila]:
        """Upazilas belonging to a district."""
        return [u for u in self.upazilas if u.district_id == district_id]

    def upazilas_by_district_slug(self, district_slug: str) -> List[Upazila]:
        """Upazilas belonging to the district with the given slug."""
        district = self.get_by_slug(LocationType.DISTRICT, district_slug)
        if district is None:
            return []
        return self.upazilas_by_district(district.id)

    def upazilas_by_division(self, division_id: int) -> List[Upazila]:
        """Upazilas in every district of a division."""
        district_ids = {d.id for d in self.districts_by_division(division_id)}
        return [u for u in self.upazilas if u.district_id in district_ids]

    def division_of_district(self, district_id: int) -> Optional[Division]:
        district = self.get_by_id(LocationType.DISTRICT, district_id)
        if district is None:
            return None
        return self.get_by_id(LocationType.DIVISION, district.division_id)

    def district_of_upazila(self, upazila_id: int) -> Optional[District]:
        upazila = self.get_by_id(LocationType.UPAZILA, upazila_id)
        if upazila is None:
            return None
        return self.get_by_id(LocationType.DISTRICT, upazila.district_id)

    def full_address(self, upazila_id: int) -> Optional[FullAddress]:
        """
        Resolve the complete hierarchy of an upazila.

        Args:
            upazila_id: Upazila identifier

        Returns:
            FullAddress, or None if any level is missing
        """
        upazila = self.get_by_id(LocationType.UPAZILA, upazila_id)
        if upazila is None:
            return None

        district = self.get_by_id(LocationType.DISTRICT, upazila.district_id)
        if district is None:
            return None

        division = self.get_by_id(LocationType.DIVISION, district.division_id)
        if division is None:
            return None

        return FullAddress(division=division, district=district, upazila=upazila)

    def full_address_by_slug(self, upazila_slug: str) -> Optional[FullAddress]:
        upazila = self.get_by_slug(LocationType.UPAZILA, upazila_slug)
        if upazila is None:
            return None
        return self.full_address(upazila.id)

    # Statistics

    def stats(self) -> LocationStats:
        """Catalog totals and child counts per parent."""
        return LocationStats(
            total_divisions=len(self.divisions),
            total_districts=len(self.districts),
            total_upazilas=len(self.upazilas),
            division_district_map=dict(Counter(d.division_id for d in self.districts)),
            district_upazila_map=dict(Counter(u.district_id for u in self.upazilas)),
        )

    def district_count(self, division_id: int) -> int:
        return len(self.districts_by_division(division_id))

    def upazila_count(self, district_id: int) -> int:
        return len(self.upazilas_by_district(district_id))

    def upazila_count_by_division(self, division_id: int) -> int:
        return len(self.upazilas_by_division(division_id))

    # Validation

    def is_valid(self, location_type: LocationType, location_id: int) -> bool:
        return self.get_by_id(location_type, location_id) is not None

    def is_district_in_division(self, district_id: int, division_id: int) -> bool:
        district = self.get_by_id(LocationType.DISTRICT, district_id)
        return district is not None and district.division_id == division_id

    def is_upazila_in_district(self, upazila_id: int, district_id: int) -> bool:
        upazila = self.get_by_id(LocationType.UPAZILA, upazila_id)
        return upazila is not None and upazila.district_id == district_id

    def is_upazila_in_division(self, upazila_id: int, division_id: int) -> bool:
        district = self.district_of_upazila(upazila_id)
        return district is not None and district.division_id == division_id

    # List helpers

    def names(self, location_type: LocationType, language: str = "en") -> List[str]:
        """
        Names of every location in a tier.

        Args:
            location_type: Tier to list
            language: 'bn' for Bengali names, anything else for English

        Returns:
            Names in catalog order
        """
        return [
            item.bn_name if language == "bn" else item.name
            for item in self._items[LocationType(location_type)]
        ]

    def options(
        self,
        location_type: LocationType,
        parent_id: Optional[int] = None
    ) -> List[LocationOption]:
        """
        Dropdown options for a tier, optionally limited to one parent.

        Args:
            location_type: Tier to list
            parent_id: Division id for districts, district id for upazilas

        Returns:
            List of LocationOption
        """
        location_type = LocationType(location_type)
        items: Sequence[AnyLocation] = self._items[location_type]

        if parent_id:
            if location_type == LocationType.DISTRICT:
                items = self.districts_by_division(parent_id)
            elif location_type == LocationType.UPAZILA:
                items = self.upazilas_by_district(parent_id)

        return [
            LocationOption(value=item.slug, label=item.name, label_bn=item.bn_name)
            for item in items
        ]

    def slug_mismatches(self) -> List[AnyLocation]:
        """Locations whose slug differs from the slug derived from their English name."""
        normalizer = TextNormalizer()
        return [
            item
            for items in self._items.values()
            for item in items
            if item.slug != normalizer.slugify(item.name)
        ]


def _read_records(path: Path, location_type: LocationType) -> List[AnyLocation]:
    model = LOCATION_MODELS[location_type]
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    return [model.model_validate(record) for record in records]


def load_catalog(data_dir: Optional[Union[str, Path]] = None) -> LocationCatalog:
    """
    Load the catalog from ``<tier>s.json`` files.

    Args:
        data_dir: Directory holding the JSON files (packaged data if None)

    Returns:
        A new LocationCatalog
    """
    data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR

    collections = {
        location_type: _read_records(data_dir / f"{location_type.plural}.json", location_type)
        for location_type in LocationType
    }
    catalog = LocationCatalog(
        divisions=collections[LocationType.DIVISION],
        districts=collections[LocationType.DISTRICT],
        upazilas=collections[LocationType.UPAZILA],
    )

    logger.info(
        "catalog_loaded",
        data_dir=str(data_dir),
        divisions=len(catalog.divisions),
        districts=len(catalog.districts),
        upazilas=len(catalog.upazilas),
    )

    mismatched = catalog.slug_mismatches()
    if mismatched:
        logger.warning(
            "catalog_slug_mismatch",
            count=len(mismatched),
            slugs=[item.slug for item in mismatched],
        )
    return catalog


@lru_cache()
def get_catalog() -> LocationCatalog:
    """Get the shared catalog, loaded once on first use."""
    return load_catalog(get_settings().data_dir)
