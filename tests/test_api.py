"""Tests for the FastAPI application."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bitebrain.api import create_app
from bitebrain.config import Settings

KANSAS = {"lat": 39.83, "lon": -98.58, "timezone": "America/Chicago"}


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(Settings(_env_file=None)))


class TestInfoEndpoints:
    """Root and health."""

    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "BiteBrain API"

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "BiteBrain API is healthy"
        assert "timestamp" in data

    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/recommend",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"


class TestRecommendEndpoints:
    """GET and POST /recommend."""

    def test_get_defaults(self, client: TestClient) -> None:
        response = client.get("/recommend")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["conditions"]["season"] == "spring"
        assert body["conditions"]["wind"] == "light"
        assert body["data"]
        assert all(0 < r["confidence"] <= 1 for r in body["data"])

    def test_get_with_species(self, client: TestClient) -> None:
        response = client.get(
            "/recommend",
            params={
                "season": "summer",
                "wind": "calm",
                "water_temp_f": 75,
                "species": ["largemouth-bass"],
            },
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert [(r["pattern"], r["confidence"]) for r in data] == [("Deep structure fishing", 0.99)]

    def test_get_simple_engine(self, client: TestClient) -> None:
        response = client.get(
            "/recommend", params={"season": "summer", "temp": 80, "engine": "simple"}
        )
        assert response.status_code == 200
        assert [r["pattern"] for r in response.json()["data"]] == ["Deep structure fishing"]

    def test_get_invalid_wind(self, client: TestClient) -> None:
        response = client.get("/recommend", params={"wind": "gale"})
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_get_unknown_engine(self, client: TestClient) -> None:
        response = client.get("/recommend", params={"engine": "magic"})
        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_get_non_numeric_temp(self, client: TestClient) -> None:
        assert client.get("/recommend", params={"temp": "warm"}).status_code == 422

    def test_post(self, client: TestClient) -> None:
        response = client.post(
            "/recommend",
            json={
                "season": "summer",
                "wind": "calm",
                "water_temp_f": 75,
                "target_species": ["largemouth-bass"],
            },
        )
        assert response.status_code == 200
        assert response.json()["data"][0]["confidence"] == 0.99

    def test_post_simple_engine(self, client: TestClient) -> None:
        response = client.post(
            "/recommend", json={"season": "spring", "wind": "light", "temp": 65, "engine": "simple"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert [(r["pattern"], r["confidence"]) for r in data] == [
            ("Wind-blown secondary points", 0.85)
        ]

    def test_post_wind_from_mph(self, client: TestClient) -> None:
        response = client.post("/recommend", json={"season": "summer", "wind_mph": 25})
        assert response.status_code == 200
        assert response.json()["conditions"]["wind"] == "strong"

    def test_post_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/recommend", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"

    def test_post_missing_season(self, client: TestClient) -> None:
        response = client.post("/recommend", json={"wind": "calm"})
        assert response.status_code == 500
        assert response.json()["success"] is False


class TestSpeciesEndpoints:
    """Species listing and detail."""

    def test_list(self, client: TestClient) -> None:
        data = client.get("/species").json()["data"]
        assert [s["id"] for s in data] == [
            "largemouth-bass",
            "smallmouth-bass",
            "trout",
            "walleye",
            "catfish",
            "panfish",
        ]

    def test_list_for_conditions(self, client: TestClient) -> None:
        data = client.get("/species", params={"season": "summer", "water_temp": 90}).json()["data"]
        assert [s["id"] for s in data] == ["largemouth-bass", "catfish", "panfish"]
        assert all(s["season_match"] is True for s in data)

    def test_list_flags_season_keyword_misses(self, client: TestClient) -> None:
        data = client.get("/species", params={"season": "monsoon"}).json()["data"]
        assert len(data) == 6
        assert all(s["season_match"] is False for s in data)

    def test_list_without_season_has_no_flag(self, client: TestClient) -> None:
        data = client.get("/species").json()["data"]
        assert all(s["season_match"] is None for s in data)

    def test_detail(self, client: TestClient) -> None:
        response = client.get("/species/trout")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Rainbow Trout"
        assert data["optimal_temp_range"] == {"min": 50, "max": 65}
        assert len(data["lure_preferences"]["seasonal"]["spring"]) >= 3

    def test_detail_unknown(self, client: TestClient) -> None:
        response = client.get("/species/pike")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Unknown species: pike"}


class TestSpotEndpoints:
    """Spot listing and detail."""

    def test_list(self, client: TestClient) -> None:
        assert len(client.get("/spots").json()["data"]) == 5

    def test_list_in_radius(self, client: TestClient) -> None:
        params = {"lat": 39.83, "lng": -98.58, "radius_km": 5}
        data = client.get("/spots", params=params).json()["data"]
        assert [s["id"] for s in data] == ["spot-001"]

    def test_list_invalid_latitude(self, client: TestClient) -> None:
        assert client.get("/spots", params={"lat": 100, "lng": 0}).status_code == 422

    def test_detail(self, client: TestClient) -> None:
        data = client.get("/spots/spot-003").json()["data"]
        assert data["name"] == "Hidden Pond"
        assert data["type"] == "pond"

    def test_detail_unknown(self, client: TestClient) -> None:
        response = client.get("/spots/spot-999")
        assert response.status_code == 404
        assert response.json()["error"] == "Unknown spot: spot-999"


class TestSolunarEndpoints:
    """Solunar day, week and current period."""

    def test_day(self, client: TestClient) -> None:
        response = client.get("/solunar/day", params={"date": "2024-06-21", **KANSAS})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["date"] == "2024-06-21"
        assert data["moon_phase"] == "Full Moon"
        assert data["overall_rating"] == 10
        assert len(data["periods"]) == 7

    def test_day_unknown_timezone(self, client: TestClient) -> None:
        response = client.get("/solunar/day", params={"timezone": "Nowhere/Place"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Unknown timezone: Nowhere/Place"}

    def test_week(self, client: TestClient) -> None:
        response = client.get("/solunar/week", params={"start": "2024-06-21", **KANSAS})
        assert response.status_code == 200
        days = response.json()["data"]
        assert [d["date"] for d in days][0] == "2024-06-21"
        assert len(days) == 7

    def test_current(self, client: TestClient) -> None:
        response = client.get("/solunar/current", params=KANSAS)
        assert response.status_code == 200
        data = response.json()["data"]
        assert set(data) == {"period", "impact", "description"}
        assert 0 <= data["impact"] <= 1


class TestConditionsEndpoint:
    """Composite conditions rating."""

    def test_defaults(self, client: TestClient) -> None:
        response = client.get("/conditions", params=KANSAS)
        assert response.status_code == 200
        data = response.json()["data"]
        assert 0 <= data["overall_rating"] <= 10
        assert len(data["factors"]) == 4

    def test_overrides(self, client: TestClient) -> None:
        params = {
            "season": "summer",
            "water_temp_f": 78,
            "wind_speed": 25,
            "pressure": 29.5,
            **KANSAS,
        }
        data = client.get("/conditions", params=params).json()["data"]

        assert data["water_temp"] == 78
        assert data["weather"]["temperature"] == 88
        assert data["weather"]["wind_speed"] == 25
        assert "Weather: challenging" in data["factors"]
        assert "Pressure: falling" in data["factors"]

    def test_estimated_water_temp(self, client: TestClient) -> None:
        params = {"season": "summer", "water_body_type": "pond", **KANSAS}
        data = client.get("/conditions", params=params).json()["data"]
        assert data["water_temp"] == 78

    def test_negative_wind_rejected(self, client: TestClient) -> None:
        assert client.get("/conditions", params={"wind_speed": -1}).status_code == 422
