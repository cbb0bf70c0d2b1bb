"""Condition-to-recommendation scoring.

Two engines, exposed under their own names and never blended:

  - ``recommend_by_species``: species-aware, up to 6 results, no fallback.
    This is what ``recommend()`` runs by default.
  - ``recommend_simple``: season/wind/temp only, up to 3 results, always
    returns at least the "Dock shade finesse" fallback.

Modules:
  - modifiers: temperature/wind/sky modifiers, spawn-phase season aliasing
  - rules: per-species rule registry
  - engine: species-aware engine
  - simple: simple engine with fallback
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from bitebrain.recommend.engine import MAX_RECOMMENDATIONS, recommend_by_species
from bitebrain.recommend.modifiers import (
    Modifiers,
    compute_modifiers,
    resolve_season,
    sky_modifier,
    temp_modifier,
    wind_modifier,
)
from bitebrain.recommend.rules import RULES, RecommendationRule, get_rule, register_rule
from bitebrain.recommend.simple import MAX_SIMPLE_RECOMMENDATIONS, recommend_simple

if TYPE_CHECKING:
    from bitebrain.schemas import Conditions, Recommendation


class Engine(StrEnum):
    """Named recommendation engine variants."""

    SPECIES = "species"
    SIMPLE = "simple"


def recommend(conditions: Conditions, engine: str = Engine.SPECIES) -> list[Recommendation]:
    """Run the named engine over ``conditions``.

    Raises:
        ValueError: If ``engine`` is not a known variant.
    """
    if Engine(engine) is Engine.SIMPLE:
        return recommend_simple(conditions)
    return recommend_by_species(conditions)


__all__ = [
    "MAX_RECOMMENDATIONS",
    "MAX_SIMPLE_RECOMMENDATIONS",
    "RULES",
    "Engine",
    "Modifiers",
    "RecommendationRule",
    "compute_modifiers",
    "get_rule",
    "recommend",
    "recommend_by_species",
    "recommend_simple",
    "register_rule",
    "resolve_season",
    "sky_modifier",
    "temp_modifier",
    "wind_modifier",
]
