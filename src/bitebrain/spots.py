"""Fishing spot lookup over the static sample dataset."""

from __future__ import annotations

import math

from bitebrain.reference.spots import SAMPLE_FISHING_SPOTS
from bitebrain.schemas import FishingSpot

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def get_fishing_spots() -> list[FishingSpot]:
    """All sample spots."""
    return list(SAMPLE_FISHING_SPOTS)


def get_fishing_spots_in_radius(lat: float, lng: float, radius_km: float) -> list[FishingSpot]:
    """Spots whose great-circle distance from (lat, lng) is at most ``radius_km``."""
    return [
        spot
        for spot in SAMPLE_FISHING_SPOTS
        if haversine_km(lat, lng, spot.latitude, spot.longitude) <= radius_km
    ]


def get_fishing_spot_by_id(spot_id: str) -> FishingSpot | None:
    """Look up a spot by id."""
    return next((spot for spot in SAMPLE_FISHING_SPOTS if spot.id == spot_id), None)
