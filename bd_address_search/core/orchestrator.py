"""Multi-tier search over the location catalog."""

from typing import Any, Dict, List, Optional

from ..models.location import AnyLocation, LocationType
from ..models.options import SearchOptions
from ..models.response import AutocompleteEntry, LocationSearchResult, MatchResult
from .catalog import LocationCatalog
from .engine import SearchEngine


class LocationSearch:
    """
    Fans queries out over divisions, districts and upazilas.

    Every method takes an optional ``SearchOptions`` plus keyword overrides
    for individual option fields, e.g. ``search("dhaka", limit=3)``.
    Ordinary misses (empty query, no match, unknown tier) give empty
    results rather than errors.
    """

    def __init__(
        self,
        catalog: LocationCatalog,
        default_options: Optional[SearchOptions] = None,
        fuzzy_threshold: float = 0.4,
        engine: Optional[SearchEngine] = None
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            catalog: Catalog to search
            default_options: Options used when a call passes none
            fuzzy_threshold: Threshold applied by ``fuzzy_search``
            engine: Search engine to use (a default one if None)
        """
        self.catalog = catalog
        self.default_options = default_options or SearchOptions()
        self.fuzzy_threshold = fuzzy_threshold
        self.engine = engine or SearchEngine()

    def _resolve(self, options: Optional[SearchOptions], overrides: Dict[str, Any]) -> SearchOptions:
        return (options or self.default_options).merged(**overrides)

    def search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> LocationSearchResult:
        """
        Ranked search in every enabled tier.

        The limit applies to each tier separately.

        Args:
            query: Search query
            options: Base options (instance defaults if None)
            **overrides: Option fields to override

        Returns:
            LocationSearchResult with one ranked list per tier
        """
        opts = self._resolve(options, overrides)

        grouped = {
            location_type.plural: self.engine.ranked_search(items, query, opts)
            for location_type, items in self.catalog.categories(opts.types).items()
        }
        return LocationSearchResult(**grouped)

    def quick_search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> Optional[AnyLocation]:
        """
        Best single match across all enabled tiers.

        Args:
            query: Search query
            options: Base options
            **overrides: Option fields to override

        Returns:
            The top-scoring location, or None
        """
        overrides["limit"] = 1
        result = self.search(query, options, **overrides)

        # Stable: on equal scores the higher tier wins
        candidates = sorted(result.all_results(), key=lambda r: r.score, reverse=True)
        if not candidates:
            return None
        return candidates[0].item

    def search_type(
        self,
        location_type: LocationType,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> List[MatchResult]:
        """
        Ranked search restricted to one tier.

        Args:
            location_type: Tier to search
            query: Search query
            options: Base options
            **overrides: Option fields to override

        Returns:
            Ranked matches for that tier, empty for an unknown tier
        """
        try:
            location_type = LocationType(location_type)
        except ValueError:
            return []
        overrides["types"] = (location_type,)
        return self.search(query, options, **overrides).for_type(location_type)

    def search_divisions(self, query: str, options: Optional[SearchOptions] = None, **overrides: Any) -> List[MatchResult]:
        return self.search_type(LocationType.DIVISION, query, options, **overrides)

    def search_districts(self, query: str, options: Optional[SearchOptions] = None, **overrides: Any) -> List[MatchResult]:
        return self.search_type(LocationType.DISTRICT, query, options, **overrides)

    def search_upazilas(self, query: str, options: Optional[SearchOptions] = None, **overrides: Any) -> List[MatchResult]:
        return self.search_type(LocationType.UPAZILA, query, options, **overrides)

    def fuzzy_search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> LocationSearchResult:
        """Search with the typo-tolerant threshold."""
        overrides["threshold"] = self.fuzzy_threshold
        return self.search(query, options, **overrides)

    def search_english(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> LocationSearchResult:
        """Search English names only."""
        overrides.update(include_english=True, include_bengali=False, include_slug=False)
        return self.search(query, options, **overrides)

    def search_bengali(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> LocationSearchResult:
        """Search Bengali names only."""
        overrides.update(include_english=False, include_bengali=True, include_slug=False)
        return self.search(query, options, **overrides)

    def autocomplete(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
        **overrides: Any
    ) -> List[AutocompleteEntry]:
        """
        Prefix suggestions across the enabled tiers.

        Args:
            query: Prefix typed so far
            options: Base options
            **overrides: Option fields to override

        Returns:
            Suggestions, English-name matches first, capped at the limit
        """
        opts = self._resolve(options, overrides)
        return self.engine.autocomplete(self.catalog.categories(opts.types), query, opts)
