"""Ranked fuzzy search and prefix autocomplete over location collections."""

from typing import Iterable, List, Mapping, Optional, Sequence

from ..models.location import Location, LocationType
from ..models.options import SearchOptions
from ..models.response import AutocompleteEntry, MatchResult
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import TextNormalizer


class SearchEngine:
    """Stateless search engine; every call works on its own buffers."""

    def __init__(self, fuzzy_matcher: Optional[FuzzyMatcher] = None) -> None:
        """
        Initialize the search engine.

        Args:
            fuzzy_matcher: Field matcher to use (a default one if None)
        """
        self.fuzzy_matcher = fuzzy_matcher or FuzzyMatcher()
        self.normalizer = TextNormalizer()

    def ranked_search(
        self,
        items: Iterable[Location],
        query: Optional[str],
        options: Optional[SearchOptions] = None
    ) -> List[MatchResult]:
        """
        Rank locations by their best field score for a query.

        Args:
            items: Locations to scan, in catalog order
            query: Search query
            options: Search options (defaults if None)

        Returns:
            Matches sorted by descending score, ties in catalog order,
            truncated to ``options.limit``
        """
        options = options or SearchOptions()

        query = self.normalizer.clean_query(query)
        if query is None or options.limit <= 0:
            return []

        results = []
        for item in items:
            match = self.fuzzy_matcher.match_entity(item, query, options)
            if match is not None:
                results.append(match)

        # list.sort is stable, so equal scores keep catalog order
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:options.limit]

    def autocomplete(
        self,
        categories: Mapping[LocationType, Sequence[Location]],
        query: Optional[str],
        options: Optional[SearchOptions] = None
    ) -> List[AutocompleteEntry]:
        """
        Suggest locations whose name starts with the query.

        English name prefixes rank before Bengali name prefixes; within
        each group the order of ``categories`` and of each collection is
        kept. Slugs are never considered.

        Args:
            categories: Ordered mapping of tier to its locations
            query: Prefix to complete
            options: Search options (defaults if None)

        Returns:
            At most ``options.limit`` entries across all tiers
        """
        options = options or SearchOptions()

        query = self.normalizer.clean_query(query)
        if query is None or options.limit <= 0:
            return []

        prefix = self.normalizer.fold(query, options.case_sensitive)
        ranked = []

        for location_type, items in categories.items():
            for item in items:
                priority = self._prefix_priority(item, prefix, options)
                if priority is None:
                    continue
                entry = AutocompleteEntry(
                    name=item.name,
                    bn_name=item.bn_name,
                    type=location_type,
                    item=item
                )
                ranked.append((priority, entry))

        ranked.sort(key=lambda pair: pair[0])
        return [entry for _, entry in ranked[:options.limit]]

    def _prefix_priority(
        self,
        item: Location,
        prefix: str,
        options: SearchOptions
    ) -> Optional[int]:
        """Return 1 for an English prefix match, 2 for Bengali, None otherwise."""
        fold = self.normalizer.fold

        if options.include_english and fold(item.name, options.case_sensitive).startswith(prefix):
            return 1
        if options.include_bengali and fold(item.bn_name, options.case_sensitive).startswith(prefix):
            return 2
        return None
