"""Species-aware recommendation engine.

For each target species: look up the profile, compute temperature, wind and
sky modifiers, and hand off to the species' registered rule. Results from all
species are pooled, ranked by confidence, and capped at ``MAX_RECOMMENDATIONS``.

There is no cross-species fallback: an empty or unmatched species list gives
an empty result. ``recommend.simple`` is the variant that always answers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bitebrain.recommend.modifiers import compute_modifiers, resolve_season
from bitebrain.recommend.rules import get_rule
from bitebrain.reference.species import DEFAULT_TARGET_SPECIES
from bitebrain.species import get_species_profile

if TYPE_CHECKING:
    from bitebrain.schemas import Conditions, Recommendation

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 6


def recommend_by_species(conditions: Conditions) -> list[Recommendation]:
    """Rank fishing patterns for the conditions' target species.

    Args:
        conditions: Caller conditions. ``target_species`` defaults to
            largemouth bass, smallmouth bass and trout.

    Returns:
        Up to six recommendations, highest confidence first.
    """
    species_list = conditions.target_species
    if species_list is None:
        species_list = list(DEFAULT_TARGET_SPECIES)

    season = resolve_season(conditions.season)
    results: list[Recommendation] = []
    for species in species_list:
        profile = get_species_profile(species)
        rule = get_rule(species)
        if profile is None or rule is None:
            logger.debug("No profile or rule for species %r, skipping", species)
            continue

        seasonal_lures = profile.lure_preferences.seasonal.get(season, ())
        modifiers = compute_modifiers(conditions, profile)
        results.extend(rule.generate(conditions, profile, seasonal_lures, modifiers))

    # sorted() is stable, so equal confidences keep species order.
    results = sorted(results, key=lambda r: r.confidence, reverse=True)
    return results[:MAX_RECOMMENDATIONS]
