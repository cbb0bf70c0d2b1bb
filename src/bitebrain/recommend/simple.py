"""Simple, species-agnostic recommendation engine.

Looks only at season, wind and air temperature and always returns at least
one pattern: when no seasonal rule matches, "Dock shade finesse" is the
fallback.
"""

from __future__ import annotations

from bitebrain.schemas import Conditions, Recommendation, Season, Wind

MAX_SIMPLE_RECOMMENDATIONS = 3

# Summer air temperature above which fish go deep.
DEEP_SUMMER_TEMP_F = 75

WIND_BLOWN_POINTS = Recommendation(
    pattern="Wind-blown secondary points",
    lures=[
        "Chatterbait 3/8 oz - white/chartreuse + paddletail",
        "Flat-side crank - red/orange, deflect off rock",
        "Ned 1/10 oz - green pumpkin, shake + dead-stick",
    ],
    confidence=0.85,
)

SHALLOW_FINESSE = Recommendation(
    pattern="Shallow water finesse",
    lures=[
        'Wacky Stick Worm - 5", natural greens',
        "Texas rig creature - 1/8 oz, green pumpkin",
        "Small swimbait - bluegill colors",
    ],
    confidence=0.75,
)

DEEP_STRUCTURE = Recommendation(
    pattern="Deep structure fishing",
    lures=[
        'Dropshot 1/4 oz - 3" minnow, nose-hooked',
        "Deep diving crankbait - crawfish colors",
        "Carolina rig - 1/2 oz, creature bait",
    ],
    confidence=0.90,
)

DOCK_SHADE_FINESSE = Recommendation(
    pattern="Dock shade finesse",
    lures=[
        'Wacky Stick Worm - 5", natural greens',
        'Dropshot 1/4 oz - 3" minnow, nose-hooked',
        "Swim jig 1/4 oz - bluegill colors, slow roll",
    ],
    confidence=0.65,
)


def recommend_simple(conditions: Conditions) -> list[Recommendation]:
    """Recommend patterns from season, wind and air temperature alone.

    Only spring and pre-spawn are treated as spring here; spawn and
    post-spawn fall through to the fallback.
    """
    recommendations: list[Recommendation] = []

    if conditions.season in (Season.SPRING, Season.PRE_SPAWN):
        if conditions.wind in (Wind.LIGHT, Wind.MODERATE):
            recommendations.append(WIND_BLOWN_POINTS.model_copy(deep=True))
        else:
            recommendations.append(SHALLOW_FINESSE.model_copy(deep=True))

    if conditions.season == Season.SUMMER and (conditions.temp or 0) > DEEP_SUMMER_TEMP_F:
        recommendations.append(DEEP_STRUCTURE.model_copy(deep=True))

    if not recommendations:
        recommendations.append(DOCK_SHADE_FINESSE.model_copy(deep=True))

    return recommendations[:MAX_SIMPLE_RECOMMENDATIONS]
