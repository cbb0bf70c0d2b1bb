"""Per-species pattern rules.

Each species has one rule function that looks at the (resolved) season and,
where it matters, the wind, and picks at most one named pattern. Rules are
partial on purpose: a species with nothing useful to say for a season returns
an empty list.

Adding a species
----------------
1. Add its profile to ``reference/species.py``.
2. Write a rule function here and decorate it with ``@register_rule("id")``::

       @register_rule("pike")
       def pike_rule(conditions, profile, seasonal_lures, modifiers):
           season = resolve_season(conditions.season)
           if season == Season.FALL:
               return _emit(FALL_PIKE, "pike", seasonal_lures, modifiers, conditions)
           return []

The engine looks rules up in ``RULES``; nothing else needs to change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from bitebrain.recommend.modifiers import resolve_season
from bitebrain.reference.species import CLARITY_COLOR_NOTES, FishSpecies
from bitebrain.schemas import Conditions, Recommendation, Season, Wind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from bitebrain.recommend.modifiers import Modifiers
    from bitebrain.reference.species import SpeciesProfile

logger = logging.getLogger(__name__)

MAX_LURES = 3


class RecommendationRule(Protocol):
    """Anything that can turn conditions into recommendations for one species."""

    def generate(
        self,
        conditions: Conditions,
        profile: SpeciesProfile,
        seasonal_lures: Sequence[str],
        modifiers: Modifiers,
    ) -> list[Recommendation]: ...


RuleFunction = Callable[
    [Conditions, "SpeciesProfile", Sequence[str], "Modifiers"], list[Recommendation]
]


@dataclass(frozen=True)
class FunctionRule:
    """Adapts a plain rule function to ``RecommendationRule``."""

    fn: RuleFunction

    def generate(
        self,
        conditions: Conditions,
        profile: SpeciesProfile,
        seasonal_lures: Sequence[str],
        modifiers: Modifiers,
    ) -> list[Recommendation]:
        return self.fn(conditions, profile, seasonal_lures, modifiers)


_registry: dict[str, RecommendationRule] = {}

#: Read-only view of species id -> rule.
RULES: Mapping[str, RecommendationRule] = MappingProxyType(_registry)


def register_rule(species: str) -> Callable[[RuleFunction], RuleFunction]:
    """Decorator registering a rule function for ``species``."""

    def decorator(fn: RuleFunction) -> RuleFunction:
        _registry[species] = FunctionRule(fn)
        return fn

    return decorator


def get_rule(species: str) -> RecommendationRule | None:
    return RULES.get(species)


# =============================================================================
# Pattern catalogue
# =============================================================================


@dataclass(frozen=True)
class PatternAdvice:
    """A named pattern with its base confidence and on-the-water advice."""

    pattern: str
    base_confidence: float
    reasons: tuple[str, ...]
    best_time_of_day: str
    water_depth: str
    technique: str


def _emit(
    advice: PatternAdvice,
    species: str,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
    conditions: Conditions,
) -> list[Recommendation]:
    confidence = modifiers.apply(advice.base_confidence)
    if confidence <= 0:
        logger.debug("Dropping %s for %s: zero confidence", advice.pattern, species)
        return []

    reasons = list(advice.reasons)
    if conditions.clarity:
        reasons.append(CLARITY_COLOR_NOTES[conditions.clarity])

    return [
        Recommendation(
            pattern=advice.pattern,
            lures=list(seasonal_lures[:MAX_LURES]),
            confidence=confidence,
            species=str(species),
            reasons=reasons,
            best_time_of_day=advice.best_time_of_day,
            water_depth=advice.water_depth,
            technique=advice.technique,
        )
    ]


def _is_windy(wind: str | None, *levels: Wind) -> bool:
    return wind is not None and wind in levels


# --- Largemouth bass ---------------------------------------------------------

LMB_WIND_BLOWN_POINTS = PatternAdvice(
    pattern="Wind-blown secondary points",
    base_confidence=0.85,
    reasons=("Wind pushes baitfish onto secondary points", "Pre-spawn fish stage on points"),
    best_time_of_day="Late morning through afternoon",
    water_depth="3-8 feet",
    technique="Cover water with moving baits on the windy side of points",
)
LMB_SHALLOW_FINESSE = PatternAdvice(
    pattern="Shallow water finesse",
    base_confidence=0.75,
    reasons=("Calm water makes fish wary", "Bass moving toward spawning flats"),
    best_time_of_day="Midday when shallows warm",
    water_depth="1-5 feet",
    technique="Slow soft-plastic presentations around cover",
)
LMB_WINDY_BANK = PatternAdvice(
    pattern="Windy bank reaction bite",
    base_confidence=0.80,
    reasons=("Wind breaks up the surface", "Baitfish pushed against wind-blown banks"),
    best_time_of_day="Whenever the wind is up",
    water_depth="4-10 feet",
    technique="Reaction baits parallel to wind-blown banks",
)
LMB_DEEP_STRUCTURE = PatternAdvice(
    pattern="Deep structure fishing",
    base_confidence=0.90,
    reasons=("Summer heat pushes bass to deep structure", "Stable thermocline holds fish"),
    best_time_of_day="Dawn and dusk",
    water_depth="15-25 feet",
    technique="Bottom-contact baits on ledges and humps",
)
LMB_BAITFISH_CHASE = PatternAdvice(
    pattern="Baitfish chase on flats",
    base_confidence=0.85,
    reasons=("Fall feeding frenzy", "Bass follow shad into creek arms and flats"),
    best_time_of_day="Afternoon",
    water_depth="2-8 feet",
    technique="Fast-moving baits that match shad size",
)
LMB_SLOW_DEEP_FINESSE = PatternAdvice(
    pattern="Slow deep finesse",
    base_confidence=0.60,
    reasons=("Cold water slows metabolism", "Fish school tight on deep structure"),
    best_time_of_day="Warmest part of the day",
    water_depth="20-35 feet",
    technique="Dead-slow finesse presentations with long pauses",
)


@register_rule(FishSpecies.LARGEMOUTH_BASS)
def largemouth_bass_rule(
    conditions: Conditions,
    profile: SpeciesProfile,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
) -> list[Recommendation]:
    season = resolve_season(conditions.season)
    if season == Season.SPRING:
        if _is_windy(conditions.wind, Wind.LIGHT, Wind.MODERATE, Wind.STRONG):
            advice = LMB_WIND_BLOWN_POINTS
        else:
            advice = LMB_SHALLOW_FINESSE
    elif season == Season.SUMMER:
        if _is_windy(conditions.wind, Wind.MODERATE, Wind.STRONG):
            advice = LMB_WINDY_BANK
        else:
            advice = LMB_DEEP_STRUCTURE
    elif season == Season.FALL:
        advice = LMB_BAITFISH_CHASE
    elif season == Season.WINTER:
        advice = LMB_SLOW_DEEP_FINESSE
    else:
        return []
    return _emit(advice, FishSpecies.LARGEMOUTH_BASS, seasonal_lures, modifiers, conditions)


# --- Smallmouth bass ---------------------------------------------------------

SMB_CURRENT_POINTS = PatternAdvice(
    pattern="Current-break rocky points",
    base_confidence=0.80,
    reasons=("Wind and current stack baitfish on rock", "Pre-spawn smallmouth feed hard"),
    best_time_of_day="Morning",
    water_depth="4-12 feet",
    technique="Drag and deflect baits off rock in the current seam",
)
SMB_ROCK_FLATS = PatternAdvice(
    pattern="Rock flat dragging",
    base_confidence=0.75,
    reasons=("Smallmouth cruise warming rock flats", "Calm water favours bottom contact"),
    best_time_of_day="Midday",
    water_depth="5-15 feet",
    technique="Slow drag across gravel and rock transitions",
)
SMB_DEEP_HUMPS = PatternAdvice(
    pattern="Deep rock humps",
    base_confidence=0.80,
    reasons=("Summer smallmouth hold on offshore rock", "Cooler water near the bottom"),
    best_time_of_day="Early morning",
    water_depth="15-30 feet",
    technique="Finesse plastics on offshore humps",
)
SMB_TOPWATER_ROCK = PatternAdvice(
    pattern="Topwater over shallow rock",
    base_confidence=0.85,
    reasons=("Fall migration to shallow rock", "Aggressive surface feeding"),
    best_time_of_day="Dawn and overcast afternoons",
    water_depth="2-6 feet",
    technique="Walk topwater plugs over rock shelves",
)


@register_rule(FishSpecies.SMALLMOUTH_BASS)
def smallmouth_bass_rule(
    conditions: Conditions,
    profile: SpeciesProfile,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
) -> list[Recommendation]:
    season = resolve_season(conditions.season)
    if season == Season.SPRING:
        if _is_windy(conditions.wind, Wind.LIGHT, Wind.MODERATE):
            advice = SMB_CURRENT_POINTS
        else:
            advice = SMB_ROCK_FLATS
    elif season == Season.SUMMER:
        advice = SMB_DEEP_HUMPS
    elif season == Season.FALL:
        advice = SMB_TOPWATER_ROCK
    else:
        return []
    return _emit(advice, FishSpecies.SMALLMOUTH_BASS, seasonal_lures, modifiers, conditions)


# --- Trout -------------------------------------------------------------------

TROUT_RIFFLE_NYMPHING = PatternAdvice(
    pattern="Riffle nymphing",
    base_confidence=0.80,
    reasons=("Spawn-run fish feed in riffles", "Rising water temperatures trigger activity"),
    best_time_of_day="Late morning",
    water_depth="1-4 feet",
    technique="Dead-drift nymphs along the riffle seam",
)
TROUT_DRY_FLY = PatternAdvice(
    pattern="Early hatch dry-fly",
    base_confidence=0.75,
    reasons=("Insect hatches bring fish up", "Cooler morning water"),
    best_time_of_day="Dawn",
    water_depth="Surface to 2 feet",
    technique="Match the hatch with drag-free dry flies",
)
TROUT_STREAMERS = PatternAdvice(
    pattern="Streamer stripping",
    base_confidence=0.80,
    reasons=("Pre-winter feeding", "Fish chase larger prey in fall"),
    best_time_of_day="Overcast afternoons",
    water_depth="2-6 feet",
    technique="Strip streamers across pools and undercut banks",
)
TROUT_SLOW_DRIFT = PatternAdvice(
    pattern="Slow deep drift",
    base_confidence=0.60,
    reasons=("Fish hold in deep pools", "Minimal winter feeding"),
    best_time_of_day="Midday",
    water_depth="4-8 feet",
    technique="Slow, deep drifts with small flies through pools",
)


@register_rule(FishSpecies.TROUT)
def trout_rule(
    conditions: Conditions,
    profile: SpeciesProfile,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
) -> list[Recommendation]:
    season = resolve_season(conditions.season)
    advice = {
        Season.SPRING: TROUT_RIFFLE_NYMPHING,
        Season.SUMMER: TROUT_DRY_FLY,
        Season.FALL: TROUT_STREAMERS,
        Season.WINTER: TROUT_SLOW_DRIFT,
    }.get(season)
    if advice is None:
        return []
    return _emit(advice, FishSpecies.TROUT, seasonal_lures, modifiers, conditions)


# --- Walleye -----------------------------------------------------------------

WALLEYE_CURRENT_BREAKS = PatternAdvice(
    pattern="Post-spawn current breaks",
    base_confidence=0.75,
    reasons=("Post-spawn walleye recover near current", "Shallow feeding windows"),
    best_time_of_day="Dusk",
    water_depth="5-12 feet",
    technique="Hop jigs along current breaks",
)
WALLEYE_WIND_POINTS = PatternAdvice(
    pattern="Wind-blown points",
    base_confidence=0.85,
    reasons=("Walleye feed on wind-blown points", "Wave action reduces light penetration"),
    best_time_of_day="Evening into night",
    water_depth="8-15 feet",
    technique="Crankbaits and jigs worked into the wind",
)
WALLEYE_BOTTOM_BOUNCING = PatternAdvice(
    pattern="Deep structure bottom bouncing",
    base_confidence=0.75,
    reasons=("Summer walleye relate to deep structure", "Night feeding activity"),
    best_time_of_day="Night",
    water_depth="18-30 feet",
    technique="Slow-troll bottom bouncers along breaklines",
)
WALLEYE_BLADE_BAITS = PatternAdvice(
    pattern="Blade baits on rock",
    base_confidence=0.80,
    reasons=("Pre-winter feeding", "Fish stack on rock piles"),
    best_time_of_day="Dusk",
    water_depth="10-25 feet",
    technique="Rip blade baits off the bottom",
)


@register_rule(FishSpecies.WALLEYE)
def walleye_rule(
    conditions: Conditions,
    profile: SpeciesProfile,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
) -> list[Recommendation]:
    season = resolve_season(conditions.season)
    if season == Season.SPRING:
        advice = WALLEYE_CURRENT_BREAKS
    elif season == Season.SUMMER:
        if _is_windy(conditions.wind, Wind.MODERATE, Wind.STRONG):
            advice = WALLEYE_WIND_POINTS
        else:
            advice = WALLEYE_BOTTOM_BOUNCING
    elif season == Season.FALL:
        advice = WALLEYE_BLADE_BAITS
    else:
        return []
    return _emit(advice, FishSpecies.WALLEYE, seasonal_lures, modifiers, conditions)


# --- Catfish -----------------------------------------------------------------

CATFISH_SHALLOW_FLATS = PatternAdvice(
    pattern="Shallow flats cut bait",
    base_confidence=0.70,
    reasons=("Post-winter feeding on warming flats", "Pre-spawn feeding"),
    best_time_of_day="Afternoon",
    water_depth="2-6 feet",
    technique="Fresh cut bait on the bottom near flats",
)
CATFISH_NIGHT_SOAK = PatternAdvice(
    pattern="Night deep-hole soak",
    base_confidence=0.85,
    reasons=("Night feeding activity", "Daytime refuge in deep holes"),
    best_time_of_day="Night",
    water_depth="12-25 feet",
    technique="Strong-scent baits soaked at the edge of deep holes",
)
CATFISH_SHAD_MIGRATION = PatternAdvice(
    pattern="Shad migration feeding",
    base_confidence=0.80,
    reasons=("Heavy fall feeding phase", "Catfish follow migrating shad"),
    best_time_of_day="Dusk",
    water_depth="6-15 feet",
    technique="Drift shad fillets through creek channels",
)


@register_rule(FishSpecies.CATFISH)
def catfish_rule(
    conditions: Conditions,
    profile: SpeciesProfile,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
) -> list[Recommendation]:
    season = resolve_season(conditions.season)
    advice = {
        Season.SPRING: CATFISH_SHALLOW_FLATS,
        Season.SUMMER: CATFISH_NIGHT_SOAK,
        Season.FALL: CATFISH_SHAD_MIGRATION,
    }.get(season)
    if advice is None:
        return []
    return _emit(advice, FishSpecies.CATFISH, seasonal_lures, modifiers, conditions)


# --- Panfish -----------------------------------------------------------------

PANFISH_SPAWN_BEDS = PatternAdvice(
    pattern="Spawning bed fishing",
    base_confidence=0.85,
    reasons=("Spawn bed building", "Aggressive defence of nests"),
    best_time_of_day="Midday",
    water_depth="1-4 feet",
    technique="Small jigs hopped over visible beds",
)
PANFISH_BRUSH_PILES = PatternAdvice(
    pattern="Brush pile vertical jigging",
    base_confidence=0.75,
    reasons=("Summer fish hold in brush piles", "Midday activity in shade"),
    best_time_of_day="Midday",
    water_depth="10-20 feet",
    technique="Vertical jigging directly over brush",
)
PANFISH_SHALLOW_FLATS = PatternAdvice(
    pattern="Shallow flats feeding",
    base_confidence=0.70,
    reasons=("Heavy fall feeding", "Migration back to shallow flats"),
    best_time_of_day="Afternoon",
    water_depth="3-8 feet",
    technique="Small spinners and jigs retrieved across flats",
)
PANFISH_DEEP_SLOW = PatternAdvice(
    pattern="Deep structure slow jigging",
    base_confidence=0.60,
    reasons=("Fish hold deep in winter", "Minimal feeding"),
    best_time_of_day="Midday",
    water_depth="15-25 feet",
    technique="Tiny jigs with slow hops near structure",
)


@register_rule(FishSpecies.PANFISH)
def panfish_rule(
    conditions: Conditions,
    profile: SpeciesProfile,
    seasonal_lures: Sequence[str],
    modifiers: Modifiers,
) -> list[Recommendation]:
    season = resolve_season(conditions.season)
    advice = {
        Season.SPRING: PANFISH_SPAWN_BEDS,
        Season.SUMMER: PANFISH_BRUSH_PILES,
        Season.FALL: PANFISH_SHALLOW_FLATS,
        Season.WINTER: PANFISH_DEEP_SLOW,
    }.get(season)
    if advice is None:
        return []
    return _emit(advice, FishSpecies.PANFISH, seasonal_lures, modifiers, conditions)
