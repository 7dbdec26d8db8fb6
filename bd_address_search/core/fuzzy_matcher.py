"""Similarity scoring and best-field selection for location matching."""

from typing import List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

from ..models.location import Location, MatchedField
from ..models.options import SearchOptions
from ..models.response import MatchResult
from .normalizer import TextNormalizer

_normalizer = TextNormalizer()


def levenshtein_distance(source: str, target: str) -> int:
    """
    Unit-cost edit distance (insert, delete, substitute) over code points.

    Args:
        source: First string
        target: Second string

    Returns:
        Minimum number of single-character edits
    """
    return Levenshtein.distance(source, target)


def calculate_similarity(query: str, target: str, case_sensitive: bool = False) -> float:
    """
    Score how well a query matches a target string.

    Rules are applied in order and the first one that applies wins:
    exact equality scores 1.0, containment scores 0.8 plus up to 0.2 for
    coverage, a prefix scores 0.9, and anything else falls back to
    normalized Levenshtein similarity.

    Args:
        query: Search query
        target: Candidate string
        case_sensitive: Skip case folding when True

    Returns:
        Score between 0 and 1
    """
    q = _normalizer.fold(query, case_sensitive)
    t = _normalizer.fold(target, case_sensitive)

    if q == t:
        return 1.0

    if q in t:
        return 0.8 + (len(q) / len(t)) * 0.2

    # Unreachable after the containment rule; kept so rule order stays fixed
    if t.startswith(q):
        return 0.9

    distance = levenshtein_distance(q, t)
    max_len = max(len(q), len(t))
    return max(0.0, 1.0 - distance / max_len)


class FuzzyMatcher:
    """Selects the best matching field of a location for a query."""

    def __init__(self) -> None:
        """Initialize the fuzzy matcher."""
        self.normalizer = _normalizer

    def score_fields(
        self,
        item: Location,
        query: str,
        options: SearchOptions
    ) -> List[Tuple[float, MatchedField]]:
        """
        Score every enabled field of a location.

        Args:
            item: Location to score
            query: Search query
            options: Search options selecting the fields

        Returns:
            List of (score, field) in evaluation order: name, bn_name, slug
        """
        fields = []
        if options.include_english:
            fields.append((item.name, MatchedField.NAME))
        if options.include_bengali:
            fields.append((item.bn_name, MatchedField.BN_NAME))
        if options.include_slug:
            fields.append((item.slug, MatchedField.SLUG))

        return [
            (calculate_similarity(query, value, options.case_sensitive), field)
            for value, field in fields
        ]

    def match_entity(
        self,
        item: Location,
        query: str,
        options: SearchOptions
    ) -> Optional[MatchResult]:
        """
        Match a location against a query using its best field.

        Args:
            item: Location to match
            query: Search query (already trimmed)
            options: Search options

        Returns:
            MatchResult, or None if no field is enabled or the best score
            is below the threshold
        """
        scores = self.score_fields(item, query, options)
        if not scores:
            return None

        best_score, best_field = scores[0]
        for score, field in scores[1:]:
            # Strictly greater, so ties keep the earlier field
            if score > best_score:
                best_score, best_field = score, field

        if best_score < options.threshold:
            return None

        return MatchResult(item=item, score=best_score, matched_field=best_field)
