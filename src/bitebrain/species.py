"""Species profile store.

Read-only accessors over ``reference.species.SPECIES_PROFILES``, plus a
suitability pre-filter that is independent of the recommendation engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bitebrain.reference.species import SPECIES_PROFILES, SpeciesProfile
from bitebrain.schemas import Conditions

# Behaviour keywords that make a species a good fit for each season.
SEASON_KEYWORDS: dict[str, tuple[str, ...]] = {
    "spring": ("spawn", "aggression"),
    "summer": ("deep", "structure"),
    "fall": ("feeding", "migration"),
    "winter": ("deep", "minimal"),
}

# Width of the tolerance band around a species' optimal range.
TEMP_TOLERANCE_F = 10.0


def get_species_profile(species: str) -> SpeciesProfile | None:
    """Return the profile for ``species``, or None if it is unknown."""
    return SPECIES_PROFILES.get(species)


def get_all_species() -> list[str]:
    """All species identifiers, in reference-table order."""
    return [str(s) for s in SPECIES_PROFILES]


def _season_and_water_temp(conditions: Conditions | Mapping[str, Any]) -> tuple[str, float]:
    if isinstance(conditions, Conditions):
        water = conditions.water_temp_f
        return conditions.season, 70.0 if water is None else water

    water = conditions.get("water_temp", conditions.get("water_temp_f"))
    return str(conditions.get("season", "")), 70.0 if water is None else float(water)


def matches_season(profile: SpeciesProfile, season: str) -> bool:
    """Whether any of the profile's behaviours for ``season`` hit a season keyword."""
    keywords = SEASON_KEYWORDS.get(season)
    if not keywords:
        return False
    behaviors = profile.seasonal_behavior.get(season, ())
    return any(k in b.lower() for b in behaviors for k in keywords)


def get_species_for_conditions(conditions: Conditions | Mapping[str, Any]) -> list[str]:
    """Filter species to those plausible for the given conditions.

    A species is dropped only when the water temperature falls more than
    10 °F outside its optimal range. The season keyword match does not
    exclude anything; see ``matches_season`` for that signal.

    Args:
        conditions: ``Conditions`` or a mapping with ``season`` and
            ``water_temp`` (or ``water_temp_f``). Water temperature defaults
            to 70 °F.

    Returns:
        Suitable species identifiers in reference-table order.
    """
    _, water_temp = _season_and_water_temp(conditions)

    suitable: list[str] = []
    for species, profile in SPECIES_PROFILES.items():
        band = profile.optimal_temp_range
        if band.min - TEMP_TOLERANCE_F <= water_temp <= band.max + TEMP_TOLERANCE_F:
            suitable.append(str(species))
    return suitable
