"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient

from bd_address_search.main import app


class TestAPI:
    """Integration tests for API endpoints."""

    @pytest.fixture
    def client(self):
        """Create a test client."""
        return TestClient(app)

    def test_root_endpoint(self, client):
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "BD Address Search"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"

    def test_api_info_endpoint(self, client):
        response = client.get("/api")
        assert response.status_code == 200

        data = response.json()
        assert "endpoints" in data
        assert "features" in data
        assert data["search_defaults"]["threshold"] == 0.3

    def test_search(self, client):
        response = client.get("/api/v1/search", params={"q": "Dhaka"})
        assert response.status_code == 200

        data = response.json()
        assert data["query"] == "Dhaka"
        assert data["total_results"] > 0
        top = data["results"]["divisions"][0]
        assert top["item"]["name"] == "Dhaka"
        assert top["score"] == 1.0
        assert top["matched_field"] == "name"
        assert data["results"]["districts"][0]["item"]["division_id"] == 6

    def test_search_with_parameters(self, client):
        response = client.get(
            "/api/v1/search",
            params={"q": "a", "limit": 2, "types": ["district", "upazila"]}
        )
        assert response.status_code == 200

        results = response.json()["results"]
        assert results["divisions"] == []
        assert len(results["districts"]) == 2
        assert len(results["upazilas"]) == 2

    def test_search_invalid_threshold(self, client):
        response = client.get("/api/v1/search", params={"q": "Dhaka", "threshold": 2})
        assert response.status_code == 422

    def test_search_query_too_long(self, client):
        response = client.get("/api/v1/search", params={"q": "x" * 101})
        assert response.status_code == 400

    def test_search_no_match(self, client):
        response = client.get("/api/v1/search", params={"q": "qqqqqqqqqqqq"})
        assert response.status_code == 200
        assert response.json()["total_results"] == 0

    def test_search_with_body(self, client):
        response = client.post("/api/v1/search", json={"query": "  Khulna ", "limit": 1})
        assert response.status_code == 200

        data = response.json()
        assert data["query"] == "Khulna"
        assert len(data["results"]["divisions"]) == 1
        assert data["results"]["divisions"][0]["item"]["slug"] == "khulna"

    def test_search_with_empty_body_query(self, client):
        response = client.post("/api/v1/search", json={"query": "   "})
        assert response.status_code == 422

    def test_quick_search(self, client):
        response = client.get("/api/v1/search/quick", params={"q": "Savar"})
        assert response.status_code == 200
        assert response.json()["name"] == "Savar"

    def test_quick_search_not_found(self, client):
        response = client.get("/api/v1/search/quick", params={"q": "qqqqqqqqqqqq"})
        assert response.status_code == 404

    def test_fuzzy_search(self, client):
        response = client.get("/api/v1/search/fuzzy", params={"q": "Dahka"})
        assert response.status_code == 200

        divisions = response.json()["results"]["divisions"]
        assert any(r["item"]["id"] == 6 for r in divisions)

    def test_language_searches(self, client):
        response = client.get("/api/v1/search/bengali", params={"q": "ঢাকা"})
        assert response.json()["results"]["divisions"][0]["matched_field"] == "bn_name"

        response = client.get("/api/v1/search/english", params={"q": "ঢাকা"})
        assert response.json()["total_results"] == 0

    def test_search_type(self, client):
        response = client.get("/api/v1/search/district", params={"q": "Sylhet"})
        assert response.status_code == 200
        assert response.json()[0]["item"]["id"] == 36

    def test_search_unknown_type(self, client):
        response = client.get("/api/v1/search/village", params={"q": "Sylhet"})
        assert response.status_code == 422

    def test_autocomplete(self, client):
        response = client.get("/api/v1/autocomplete", params={"q": "Dha"})
        assert response.status_code == 200

        suggestions = response.json()["suggestions"]
        assert [s["name"] for s in suggestions] == ["Dhaka", "Dhaka", "Dhamrai"]
        assert [s["type"] for s in suggestions] == ["division", "district", "upazila"]

    def test_list_locations(self, client):
        assert len(client.get("/api/v1/divisions").json()) == 8
        assert len(client.get("/api/v1/districts").json()) == 64
        assert len(client.get("/api/v1/districts", params={"division_id": 5}).json()) == 4
        assert len(client.get("/api/v1/upazilas", params={"district_id": 47}).json()) == 5
        assert len(client.get("/api/v1/divisions/6/upazilas").json()) == 10
        assert client.get("/api/v1/divisions/99/upazilas").status_code == 404

    def test_get_location(self, client):
        response = client.get("/api/v1/locations/division/6")
        assert response.status_code == 200
        assert response.json()["bn_name"] == "ঢাকা"

        response = client.get("/api/v1/locations/district/slug/coxs-bazar")
        assert response.json()["name"] == "Cox's Bazar"

        assert client.get("/api/v1/locations/district/999").status_code == 404
        assert client.get("/api/v1/locations/upazila/slug/nowhere").status_code == 404

    def test_address(self, client):
        response = client.get("/api/v1/address/44")
        assert response.status_code == 200

        data = response.json()
        assert data["formatted_en"] == "Savar, Dhaka, Dhaka"
        assert data["formatted_bn"] == "সাভার, ঢাকা, ঢাকা"
        assert data["address"]["division"]["id"] == 6

        assert client.get("/api/v1/address/999").status_code == 404

    def test_options(self, client):
        response = client.get("/api/v1/options/upazila", params={"parent_id": 47})
        assert [o["value"] for o in response.json()] == [
            "dhamrai", "dohar", "keraniganj", "nawabganj", "savar"
        ]

    def test_stats(self, client):
        data = client.get("/api/v1/stats").json()
        assert data["total_divisions"] == 8
        assert data["total_districts"] == 64

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

        assert client.get("/api/v1/health/ready").json()["status"] == "ready"
        assert client.get("/api/v1/health/live").json()["status"] == "alive"

    def test_metrics(self, client):
        response = client.get("/api/v1/metrics")
        assert response.status_code == 200

        data = response.json()
        assert data["total_locations"] > 72
        assert data["memory_usage_mb"] > 0
