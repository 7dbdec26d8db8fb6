"""Performance benchmarks for BD Address Search."""

import random
import string

import pytest

from bd_address_search.core.catalog import LocationCatalog, load_catalog
from bd_address_search.core.orchestrator import LocationSearch
from bd_address_search.models.location import District, Division, Upazila


def _random_name(rng: random.Random) -> str:
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(5, 14))).title()


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture(scope="class")
    def bundled_search(self):
        return LocationSearch(load_catalog())

    @pytest.fixture(scope="class")
    def large_search(self):
        """Search over a synthetic catalog a few thousand locations large."""
        rng = random.Random(42)

        divisions = [
            Division(id=i, name=f"Division {i}", bn_name=f"বিভাগ {i}", slug=f"division-{i}")
            for i in range(1, 9)
        ]
        districts = [
            District(
                id=i, division_id=i % 8 + 1,
                name=f"District {i}", bn_name=f"জেলা {i}", slug=f"district-{i}"
            )
            for i in range(1, 65)
        ]
        upazilas = []
        for i in range(1, 3001):
            name = _random_name(rng)
            upazilas.append(Upazila(
                id=i, district_id=i % 64 + 1,
                name=name, bn_name=f"উপজেলা {i}", slug=name.lower()
            ))
        upazilas.append(Upazila(id=3001, district_id=1, name="Dhamrai", bn_name="ধামরাই", slug="dhamrai"))

        return LocationSearch(LocationCatalog(divisions, districts, upazilas))

    def test_exact_search_performance(self, bundled_search, benchmark):
        result = benchmark(bundled_search.search, "Dhaka")
        assert result.divisions[0].score == 1.0

    def test_fuzzy_search_performance(self, bundled_search, benchmark):
        result = benchmark(bundled_search.fuzzy_search, "Dahka")
        assert result.total_results > 0

    def test_autocomplete_performance(self, bundled_search, benchmark):
        result = benchmark(bundled_search.autocomplete, "Dha")
        assert len(result) == 3

    def test_large_catalog_search(self, large_search, benchmark):
        result = benchmark(large_search.search_upazilas, "Dhamrai")
        assert result[0].item.id == 3001

    def test_large_catalog_quick_search(self, large_search, benchmark):
        location = benchmark(large_search.quick_search, "Dhamria")
        assert location is not None
