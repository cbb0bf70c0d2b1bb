"""Tests for fishing spot lookup."""

from __future__ import annotations

import pytest

from bitebrain.schemas import WaterBodyType
from bitebrain.spots import (
    get_fishing_spot_by_id,
    get_fishing_spots,
    get_fishing_spots_in_radius,
    haversine_km,
)


class TestHaversine:
    """Great-circle distance."""

    def test_same_point_is_zero(self) -> None:
        assert haversine_km(39.8283, -98.5795, 39.8283, -98.5795) == 0.0

    def test_symmetric(self) -> None:
        a = haversine_km(34.0522, -118.2437, 47.6062, -122.3321)
        b = haversine_km(47.6062, -122.3321, 34.0522, -118.2437)
        assert a == pytest.approx(b)

    def test_los_angeles_to_seattle(self) -> None:
        assert haversine_km(34.0522, -118.2437, 47.6062, -122.3321) == pytest.approx(1545, rel=0.01)

    def test_one_degree_latitude(self) -> None:
        assert haversine_km(0, 0, 1, 0) == pytest.approx(111.19, rel=0.001)


class TestSpots:
    """Spot listing and filtering."""

    def test_all_spots(self) -> None:
        spots = get_fishing_spots()
        assert [s.id for s in spots] == ["spot-001", "spot-002", "spot-003", "spot-004", "spot-005"]

    def test_returned_list_is_a_copy(self) -> None:
        get_fishing_spots().clear()
        assert len(get_fishing_spots()) == 5

    def test_lookup_by_id(self) -> None:
        spot = get_fishing_spot_by_id("spot-004")
        assert spot is not None
        assert spot.type == WaterBodyType.LAKE
        assert spot.rating == 4.8

    def test_lookup_missing(self) -> None:
        assert get_fishing_spot_by_id("spot-999") is None

    def test_one_km_around_spot_one(self) -> None:
        spots = get_fishing_spots_in_radius(39.8283, -98.5795, 1)
        assert [s.id for s in spots] == ["spot-001"]

    @pytest.mark.parametrize(("lat", "lng"), [(39.8283, -98.5795), (40.0, -100.0), (0.0, 0.0)])
    def test_growing_radius_never_drops_spots(self, lat: float, lng: float) -> None:
        previous: set[str] = set()
        for radius in [0, 1, 10, 100, 500, 1000, 2000, 5000, 20000]:
            found = {s.id for s in get_fishing_spots_in_radius(lat, lng, radius)}
            assert previous <= found
            previous = found
        assert len(previous) == 5

    def test_radius_includes_nearby(self) -> None:
        spots = get_fishing_spots_in_radius(39.83, -98.58, 5)
        assert [s.id for s in spots] == ["spot-001"]

    def test_radius_boundary_inclusive(self) -> None:
        spots = get_fishing_spots_in_radius(40.0150, -105.2705, 0)
        assert [s.id for s in spots] == ["spot-002"]

    def test_radius_nothing_nearby(self) -> None:
        assert get_fishing_spots_in_radius(0.0, 0.0, 100) == []

    def test_huge_radius_returns_all(self) -> None:
        assert len(get_fishing_spots_in_radius(39.83, -98.58, 20000)) == 5
