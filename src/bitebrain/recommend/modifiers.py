"""Confidence modifiers and season resolution.

The constants here are calibrated domain values; changing them changes
every score the engine produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bitebrain.schemas import Season, Sky, Wind

if TYPE_CHECKING:
    from bitebrain.reference.species import SpeciesProfile, TempRange
    from bitebrain.schemas import Conditions

# Spawn phases share spring's behaviour and lure tables.
SPAWN_CYCLE_SEASONS = frozenset({Season.PRE_SPAWN, Season.SPAWN, Season.POST_SPAWN})

# Distance (°F) from the optimal midpoint at which the temperature modifier hits 0.
TEMP_FALLOFF_F = 20.0

WIND_MODIFIERS: dict[str, float] = {Wind.STRONG: 0.7, Wind.CALM: 1.1}
SKY_MODIFIERS: dict[str, float] = {Sky.SUNNY: 0.9, Sky.CLOUDY: 1.1}


def resolve_season(season: str) -> str:
    """Map spawn phases onto spring; other seasons pass through unchanged."""
    if season in SPAWN_CYCLE_SEASONS:
        return Season.SPRING.value
    return season


def temp_modifier(water_temp_f: float, optimal: TempRange) -> float:
    """Linear falloff from 1 at the optimal midpoint to 0 at 20 °F away."""
    return max(0.0, 1 - abs(water_temp_f - optimal.midpoint) / TEMP_FALLOFF_F)


def wind_modifier(wind: str | None) -> float:
    return WIND_MODIFIERS.get(wind, 1.0) if wind else 1.0


def sky_modifier(sky: str | None) -> float:
    return SKY_MODIFIERS.get(sky, 1.0) if sky else 1.0


@dataclass(frozen=True)
class Modifiers:
    """Multiplicative adjustments applied to a rule's base confidence."""

    temperature: float = 1.0
    wind: float = 1.0
    sky: float = 1.0

    def apply(self, base_confidence: float) -> float:
        """Scaled confidence, rounded to two places and capped at 1."""
        scaled = round(base_confidence * self.temperature * self.wind * self.sky, 2)
        return min(1.0, scaled)


def compute_modifiers(conditions: Conditions, profile: SpeciesProfile) -> Modifiers:
    """Modifiers for one species under the given conditions."""
    return Modifiers(
        temperature=temp_modifier(conditions.effective_water_temp, profile.optimal_temp_range),
        wind=wind_modifier(conditions.wind),
        sky=sky_modifier(conditions.sky),
    )
