"""Sample fishing spots for development and offline demos."""

from __future__ import annotations

from bitebrain.schemas import FishingSpot, WaterBodyType

SAMPLE_FISHING_SPOTS: tuple[FishingSpot, ...] = (
    FishingSpot(
        id="spot-001",
        name="Bass Cove",
        latitude=39.8283,
        longitude=-98.5795,
        type=WaterBodyType.LAKE,
        species=("Largemouth Bass", "Bluegill", "Crappie"),
        rating=4.5,
        description="Excellent bass fishing spot with good structure and cover",
        depth="10-25 feet",
        structure=("fallen trees", "rock piles", "weed beds"),
    ),
    FishingSpot(
        id="spot-002",
        name="Trout Run",
        latitude=40.0150,
        longitude=-105.2705,
        type=WaterBodyType.RIVER,
        species=("Rainbow Trout", "Brown Trout"),
        rating=4.2,
        description="Fast-flowing mountain stream perfect for fly fishing",
        depth="2-8 feet",
        structure=("rapids", "pools", "undercut banks"),
    ),
    FishingSpot(
        id="spot-003",
        name="Hidden Pond",
        latitude=34.0522,
        longitude=-118.2437,
        type=WaterBodyType.POND,
        species=("Bluegill", "Catfish"),
        rating=3.8,
        description="Small urban pond, great for beginners",
        depth="3-12 feet",
        structure=("dock", "lily pads"),
    ),
    FishingSpot(
        id="spot-004",
        name="Eagle Lake",
        latitude=44.9778,
        longitude=-93.2650,
        type=WaterBodyType.LAKE,
        species=("Walleye", "Northern Pike", "Largemouth Bass"),
        rating=4.8,
        description="Premier fishing destination with multiple species",
        depth="15-60 feet",
        structure=("drop-offs", "weed lines", "rocky points"),
    ),
    FishingSpot(
        id="spot-005",
        name="Crystal Creek",
        latitude=47.6062,
        longitude=-122.3321,
        type=WaterBodyType.CREEK,
        species=("Salmon", "Steelhead"),
        rating=4.0,
        description="Seasonal run of salmon and steelhead",
        depth="1-6 feet",
        structure=("gravel beds", "log jams"),
    ),
)
