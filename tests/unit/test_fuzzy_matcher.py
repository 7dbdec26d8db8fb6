"""Unit tests for similarity scoring and field matching."""

import pytest

from bd_address_search.core.fuzzy_matcher import (
    FuzzyMatcher,
    calculate_similarity,
    levenshtein_distance,
)
from bd_address_search.models.location import Division, MatchedField
from bd_address_search.models.options import SearchOptions


class TestLevenshteinDistance:
    """Test cases for the edit distance helper."""

    def test_identical_strings(self):
        assert levenshtein_distance("dhaka", "dhaka") == 0

    def test_empty_strings(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("", "khulna") == 6
        assert levenshtein_distance("khulna", "") == 6

    def test_transposition_costs_two(self):
        assert levenshtein_distance("dahka", "dhaka") == 2

    def test_single_edits(self):
        assert levenshtein_distance("savar", "saver") == 1  # substitution
        assert levenshtein_distance("savar", "savarr") == 1  # insertion
        assert levenshtein_distance("savar", "sava") == 1  # deletion

    def test_symmetric(self):
        pairs = [("rangpur", "rajshahi"), ("sylhet", "silet"), ("ঢাকা", "ঢাক")]
        for a, b in pairs:
            assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_counts_code_points(self):
        """Bengali characters count as single units, not bytes."""
        assert levenshtein_distance("ঢাকা", "ঢাকি") == 1
        assert levenshtein_distance("", "ঢাকা") == 4


class TestCalculateSimilarity:
    """Test cases for the similarity scorer."""

    def test_exact_match(self):
        assert calculate_similarity("Dhaka", "Dhaka") == 1.0

    def test_exact_match_case_insensitive(self):
        assert calculate_similarity("DHAKA", "dhaka") == 1.0

    def test_identity_for_any_string(self):
        for s in ["", "a", "Cox's Bazar", "ময়মনসিংহ"]:
            assert calculate_similarity(s, s, case_sensitive=True) == 1.0
            assert calculate_similarity(s, s, case_sensitive=False) == 1.0

    def test_prefix_scored_as_containment(self):
        """A prefix is also a substring, so the containment formula applies."""
        assert calculate_similarity("Dha", "Dhaka") == pytest.approx(0.92)

    def test_containment_formula(self):
        cases = [("bazar", "Cox's Bazar"), ("ganj", "Narayanganj"), ("pur", "Rangpur")]
        for query, target in cases:
            expected = 0.8 + 0.2 * len(query) / len(target)
            score = calculate_similarity(query, target)
            assert score == pytest.approx(expected)
            assert 0.8 <= score < 1.0

    def test_levenshtein_fallback(self):
        assert calculate_similarity("Dahka", "Dhaka") == pytest.approx(0.6)

    def test_case_sensitive(self):
        # "dhaka" is neither equal to nor contained in "Dhaka" when case matters
        assert calculate_similarity("dhaka", "Dhaka", case_sensitive=True) == pytest.approx(0.8)
        assert calculate_similarity("dhaka", "Dhaka", case_sensitive=False) == 1.0

    def test_no_similarity_clamps_to_zero(self):
        assert calculate_similarity("xyz", "dhaka") == 0.0
        assert calculate_similarity("dhaka", "") == 0.0

    def test_bengali_containment(self):
        assert calculate_similarity("ঢা", "ঢাকা") == pytest.approx(0.9)

    def test_score_range(self):
        queries = ["d", "dhk", "dhakaa", "xyzzy", "ঢাকা", "  "]
        targets = ["Dhaka", "ঢাকা", "dhaka", "Chapainawabganj", ""]
        for query in queries:
            for target in targets:
                assert 0.0 <= calculate_similarity(query, target) <= 1.0


class TestFuzzyMatcher:
    """Test cases for best-field selection."""

    @pytest.fixture
    def matcher(self):
        return FuzzyMatcher()

    @pytest.fixture
    def dhaka(self):
        return Division(id=6, name="Dhaka", bn_name="ঢাকা", slug="dhaka")

    def test_exact_name_match(self, matcher, dhaka):
        result = matcher.match_entity(dhaka, "Dhaka", SearchOptions())

        assert result is not None
        assert result.score == 1.0
        assert result.matched_field == MatchedField.NAME
        assert result.item is dhaka

    def test_tie_prefers_earlier_field(self, matcher, dhaka):
        """Name and slug both score 1.0; the name is evaluated first."""
        result = matcher.match_entity(dhaka, "dhaka", SearchOptions())
        assert result.matched_field == MatchedField.NAME

    def test_slug_wins_when_name_disabled(self, matcher, dhaka):
        options = SearchOptions(include_english=False)
        result = matcher.match_entity(dhaka, "dhaka", options)

        assert result.matched_field == MatchedField.SLUG
        assert result.score == 1.0

    def test_bengali_match(self, matcher, dhaka):
        result = matcher.match_entity(dhaka, "ঢাকা", SearchOptions())

        assert result.matched_field == MatchedField.BN_NAME
        assert result.score == 1.0

    def test_strictly_higher_score_wins(self, matcher):
        item = Division(id=1, name="Chattogram", bn_name="চট্টগ্রাম", slug="ctg")
        result = matcher.match_entity(item, "ctg", SearchOptions())
        assert result.matched_field == MatchedField.SLUG

    def test_below_threshold(self, matcher, dhaka):
        assert matcher.match_entity(dhaka, "xyz", SearchOptions()) is None

    def test_threshold_boundary_is_inclusive(self, matcher, dhaka):
        assert matcher.match_entity(dhaka, "Dahka", SearchOptions(threshold=0.6)) is not None
        assert matcher.match_entity(dhaka, "Dahka", SearchOptions(threshold=0.61)) is None

    def test_no_fields_enabled(self, matcher, dhaka):
        options = SearchOptions(include_english=False, include_bengali=False, include_slug=False)
        assert matcher.match_entity(dhaka, "Dhaka", options) is None

    def test_score_fields_order(self, matcher, dhaka):
        scores = matcher.score_fields(dhaka, "Dha", SearchOptions())
        assert [field for _, field in scores] == [
            MatchedField.NAME,
            MatchedField.BN_NAME,
            MatchedField.SLUG,
        ]
