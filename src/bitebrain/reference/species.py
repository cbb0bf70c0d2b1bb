"""Static fish species profiles.

Temperatures are water temperatures in Fahrenheit. Lure lists are ordered by
preference; the recommendation engine takes the first three of the seasonal
list for the resolved season.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class FishSpecies(StrEnum):
    """Species identifiers used throughout the API."""

    LARGEMOUTH_BASS = "largemouth-bass"
    SMALLMOUTH_BASS = "smallmouth-bass"
    TROUT = "trout"
    WALLEYE = "walleye"
    CATFISH = "catfish"
    PANFISH = "panfish"


@dataclass(frozen=True)
class TempRange:
    """Inclusive water temperature band (°F)."""

    min: float
    max: float

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class LurePreferences:
    """Primary, secondary, and per-season lure lists."""

    primary: tuple[str, ...]
    secondary: tuple[str, ...]
    seasonal: Mapping[str, tuple[str, ...]]


@dataclass(frozen=True)
class SpeciesProfile:
    """Reference data for one species."""

    name: str
    scientific_name: str
    optimal_temp_range: TempRange
    spawn_temp_range: TempRange
    preferred_structure: tuple[str, ...]
    feeding_times: tuple[str, ...]
    seasonal_behavior: Mapping[str, tuple[str, ...]]
    lure_preferences: LurePreferences


def _frozen(mapping: dict[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType(mapping)


LARGEMOUTH_BASS = SpeciesProfile(
    name="Largemouth Bass",
    scientific_name="Micropterus salmoides",
    optimal_temp_range=TempRange(65, 85),
    spawn_temp_range=TempRange(60, 75),
    preferred_structure=("docks", "points", "drop-offs", "brush piles", "rocks"),
    feeding_times=("dawn", "dusk", "midday"),
    seasonal_behavior=_frozen(
        {
            "spring": (
                "Pre-spawn aggression",
                "Moving to spawning areas",
                "Defending territories",
            ),
            "summer": ("Deep structure fishing", "Night feeding activity", "Reaction strikes"),
            "fall": (
                "Post-spawn recovery",
                "Feeding frenzy before winter",
                "Shallow water ambush",
            ),
            "winter": ("Deep water lethargy", "Slow metabolism", "Minimal feeding"),
        }
    ),
    lure_preferences=LurePreferences(
        primary=(
            "Chatterbait 3/8 oz - white/chartreuse",
            "Texas rig creature bait - green pumpkin",
            "Flat-side crankbait - firetiger",
        ),
        secondary=(
            "Ned rig 1/10 oz - green pumpkin",
            "Swim jig 1/4 oz - black/blue",
            'Wacky stick worm - 7" natural colors',
        ),
        seasonal=_frozen(
            {
                "spring": (
                    "Chatterbait 3/8 oz - white/chartreuse + paddletail",
                    "Ned rig 1/10 oz - green pumpkin, shake + dead-stick",
                    "Flat-side crank - red/orange, deflect off rock",
                ),
                "summer": (
                    'Dropshot 1/4 oz - 3" minnow, nose-hooked',
                    "Deep diving crankbait - crawfish colors",
                    "Carolina rig - 1/2 oz, creature bait",
                ),
                "fall": (
                    "Squarebill crankbait - chartreuse/black",
                    "Soft plastic jerkbait - pumpkinseed",
                    "Spinnerbait - white/chartreuse",
                ),
                "winter": (
                    "Dropshot 1/4 oz - finesse worms",
                    "Ned rig 1/10 oz - subtle colors",
                    "Small swimbait - slow presentation",
                ),
            }
        ),
    ),
)

SMALLMOUTH_BASS = SpeciesProfile(
    name="Smallmouth Bass",
    scientific_name="Micropterus dolomieu",
    optimal_temp_range=TempRange(60, 75),
    spawn_temp_range=TempRange(55, 65),
    preferred_structure=("rocks", "current breaks", "drop-offs", "riffles", "points"),
    feeding_times=("dawn", "midday", "dusk"),
    seasonal_behavior=_frozen(
        {
            "spring": (
                "River current feeding",
                "Rock structure ambush",
                "Pre-spawn activity",
            ),
            "summer": ("Deep water refuge", "Night surface activity", "Current break feeding"),
            "fall": ("Shallow rock hunting", "Post-spawn aggression", "Feeding migration"),
            "winter": ("Deep pool holding", "Minimal movement", "Current seam feeding"),
        }
    ),
    lure_preferences=LurePreferences(
        primary=(
            'Tube bait 3" - pumpkin/green',
            "Small crankbait - firetiger",
            "Drop shot rig - finesse plastics",
        ),
        secondary=(
            "Inline spinner - brass colors",
            "Soft jerkbait - shad patterns",
            "Ned rig - subtle presentations",
        ),
        seasonal=_frozen(
            {
                "spring": (
                    'Tube bait 3" - pumpkin/green, drag on rocks',
                    "Small crankbait - firetiger, deflect off current",
                    'Drop shot rig - 3" minnow, nose-hooked',
                ),
                "summer": (
                    'Tube bait 3" - deeper water presentations',
                    "Small swimbait - shad colors, slow retrieve",
                    "Ned rig - finesse approach in current",
                ),
                "fall": (
                    "Topwater plug - walking dog pattern",
                    "Small crankbait - aggressive retrieve",
                    "Soft plastic jerkbait - erratic action",
                ),
                "winter": (
                    "Finesse jig head - 1/16 oz, small plastics",
                    "Small tube bait - subtle colors",
                    "Drop shot - minimal movement",
                ),
            }
        ),
    ),
)

TROUT = SpeciesProfile(
    name="Rainbow Trout",
    scientific_name="Oncorhynchus mykiss",
    optimal_temp_range=TempRange(50, 65),
    spawn_temp_range=TempRange(45, 55),
    preferred_structure=("riffles", "runs", "pools", "undercut banks", "log jams"),
    feeding_times=("dawn", "midday", "dusk"),
    seasonal_behavior=_frozen(
        {
            "spring": ("Spawn-run migration", "Increased aggression", "Shallow water feeding"),
            "summer": ("Deep pool refuge", "Early morning feeding", "Insect hatches"),
            "fall": ("Pre-winter feeding", "Streamer patterns", "Increased activity"),
            "winter": ("Deep water lethargy", "Minimal feeding", "Pool holding"),
        }
    ),
    lure_preferences=LurePreferences(
        primary=(
            "San Juan Worm - red/pink",
            "Pheasant Tail Nymph - size 14-18",
            "Prince Nymph - natural colors",
        ),
        secondary=(
            "Streamer fly - woolly bugger",
            "Small spinner - brass blade",
            "Egg pattern - orange/pink",
        ),
        seasonal=_frozen(
            {
                "spring": (
                    "San Juan Worm - red/pink, drag on bottom",
                    "Pheasant Tail Nymph - size 16, natural drift",
                    "Egg pattern - orange, spawn imitation",
                ),
                "summer": (
                    "Pale Morning Dun - size 16, dry fly",
                    "Prince Nymph - size 14, subsurface",
                    "Woolly Bugger - black/olive, streamer retrieve",
                ),
                "fall": (
                    "Streamer fly - large, aggressive retrieve",
                    "San Juan Worm - larger sizes",
                    "Small crankbait - shad colors",
                ),
                "winter": (
                    "San Juan Worm - smaller sizes, slow presentation",
                    "Egg pattern - subtle colors",
                    "Small jig - minimal movement",
                ),
            }
        ),
    ),
)

WALLEYE = SpeciesProfile(
    name="Walleye",
    scientific_name="Sander vitreus",
    optimal_temp_range=TempRange(55, 70),
    spawn_temp_range=TempRange(40, 50),
    preferred_structure=("drop-offs", "points", "rock piles", "current breaks", "ledges"),
    feeding_times=("dusk", "night", "dawn"),
    seasonal_behavior=_frozen(
        {
            "spring": ("Post-spawn recovery", "Shallow feeding", "Current break positioning"),
            "summer": ("Deep water structure", "Night feeding activity", "Wind-blown points"),
            "fall": ("Shallow water migration", "Pre-winter feeding", "Structure hugging"),
            "winter": ("Deep basin holding", "Minimal movement", "Current seam feeding"),
        }
    ),
    lure_preferences=LurePreferences(
        primary=(
            "Jig head 1/4 oz - minnow/plastic tail",
            "Bottom bouncer rig - spinner/minnow",
            "Slip sinker rig - nightcrawler",
        ),
        secondary=(
            "Crankbait - firetiger pattern",
            "Soft plastic jerkbait - shad colors",
            "Blade bait - silver/gold",
        ),
        seasonal=_frozen(
            {
                "spring": (
                    "Jig head 1/4 oz - minnow tail, hop on bottom",
                    "Crankbait - firetiger, deflect off structure",
                    "Soft plastic jerkbait - erratic action",
                ),
                "summer": (
                    "Bottom bouncer - spinner and minnow, slow troll",
                    "Jig head - finesse plastics, vertical jigging",
                    "Crankbait - deeper diving models",
                ),
                "fall": (
                    "Blade bait - silver, ripping retrieve",
                    "Jig head - larger plastics, aggressive hop",
                    "Crankbait - wounded minnow action",
                ),
                "winter": (
                    "Jig head 1/8 oz - small plastics, subtle movement",
                    "Bottom bouncer - slow presentation",
                    "Vertical jigging - minimal action",
                ),
            }
        ),
    ),
)

CATFISH = SpeciesProfile(
    name="Channel Catfish",
    scientific_name="Ictalurus punctatus",
    optimal_temp_range=TempRange(70, 85),
    spawn_temp_range=TempRange(75, 85),
    preferred_structure=("deep holes", "current breaks", "log jams", "rock piles", "dams"),
    feeding_times=("dusk", "night", "dawn"),
    seasonal_behavior=_frozen(
        {
            "spring": ("Post-winter feeding", "Shallow water activity", "Pre-spawn feeding"),
            "summer": (
                "Deep water refuge",
                "Night feeding activity",
                "Current break positioning",
            ),
            "fall": ("Heavy feeding phase", "Shallow water migration", "Structure hugging"),
            "winter": ("Deep hole holding", "Minimal feeding", "Current seam positioning"),
        }
    ),
    lure_preferences=LurePreferences(
        primary=(
            "Cut bait rig - shad/chicken liver",
            "Nightcrawler rig - slip sinker setup",
            "Stink bait - commercial preparations",
        ),
        secondary=(
            "Minnow rig - live bait presentation",
            "Soft plastic - large creature baits",
            "Spinner - brass blade, slow retrieve",
        ),
        seasonal=_frozen(
            {
                "spring": (
                    "Cut bait rig - fresh shad, bottom presentation",
                    "Nightcrawler - slip sinker, drift with current",
                    "Minnow rig - live presentation",
                ),
                "summer": (
                    "Stink bait - commercial, strong scent trail",
                    "Cut bait - chicken liver, strong presentation",
                    "Nightcrawler - larger size, deep water",
                ),
                "fall": (
                    "Cut bait - shad fillets, aggressive presentation",
                    "Minnow rig - larger minnows",
                    "Soft plastic - large creature baits",
                ),
                "winter": (
                    "Stink bait - strong scent, minimal movement",
                    "Cut bait - smaller pieces, patient presentation",
                    "Nightcrawler - smaller size, subtle movement",
                ),
            }
        ),
    ),
)

PANFISH = SpeciesProfile(
    name="Bluegill/Crappie",
    scientific_name="Lepomis macrochirus",
    optimal_temp_range=TempRange(65, 80),
    spawn_temp_range=TempRange(65, 75),
    preferred_structure=("brush piles", "docks", "lily pads", "drop-offs", "shallow flats"),
    feeding_times=("midday", "dawn", "dusk"),
    seasonal_behavior=_frozen(
        {
            "spring": ("Spawn bed building", "Aggressive feeding", "Shallow water activity"),
            "summer": ("Deep water refuge", "Brush pile feeding", "Midday activity"),
            "fall": ("Post-spawn recovery", "Heavy feeding", "Shallow water migration"),
            "winter": ("Deep water holding", "Minimal feeding", "Structure hugging"),
        }
    ),
    lure_preferences=LurePreferences(
        primary=(
            "Tube jig 1/16 oz - chartreuse/white",
            "Small spinner - brass blade",
            'Worm 3" - red/pink, wacky rig',
        ),
        secondary=(
            "Cricket/minnow - live bait",
            "Small crankbait - shad colors",
            "Soft plastic - small creature baits",
        ),
        seasonal=_frozen(
            {
                "spring": (
                    "Tube jig 1/16 oz - chartreuse, hop on beds",
                    "Small spinner - brass, retrieve over nests",
                    'Worm 3" - red, wacky rig presentation',
                ),
                "summer": (
                    "Tube jig - deeper water, vertical presentation",
                    "Small crankbait - shad, slow retrieve",
                    "Soft plastic - finesse presentation",
                ),
                "fall": (
                    "Small spinner - aggressive retrieve",
                    "Crankbait - firetiger pattern",
                    "Tube jig - larger sizes, fast fall",
                ),
                "winter": (
                    "Tube jig 1/32 oz - subtle colors, slow hop",
                    "Small spinner - minimal flash",
                    "Worm - small sizes, subtle presentation",
                ),
            }
        ),
    ),
)

SPECIES_PROFILES: Mapping[str, SpeciesProfile] = MappingProxyType(
    {
        FishSpecies.LARGEMOUTH_BASS: LARGEMOUTH_BASS,
        FishSpecies.SMALLMOUTH_BASS: SMALLMOUTH_BASS,
        FishSpecies.TROUT: TROUT,
        FishSpecies.WALLEYE: WALLEYE,
        FishSpecies.CATFISH: CATFISH,
        FishSpecies.PANFISH: PANFISH,
    }
)

# Species used when a request names none.
DEFAULT_TARGET_SPECIES: tuple[str, ...] = (
    FishSpecies.LARGEMOUTH_BASS,
    FishSpecies.SMALLMOUTH_BASS,
    FishSpecies.TROUT,
)

# Lure colour guidance by water clarity. Informational only, never scored.
CLARITY_COLOR_NOTES: Mapping[str, str] = MappingProxyType(
    {
        "clear": "Clear water: natural, translucent colors and lighter line",
        "stained": "Stained water: chartreuse, firetiger, or white with some flash",
        "muddy": "Muddy water: dark silhouettes (black/blue) and vibration or rattles",
    }
)
