"""
Domain models for BiteBrain.

Pydantic models for request/response data. Static reference data lives in
``reference/`` as frozen dataclasses; these models are what crosses the API
and CLI boundaries.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Conditions
# =============================================================================


class Season(StrEnum):
    """Calendar seasons plus the three spawn-cycle refinements of spring."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"
    PRE_SPAWN = "pre-spawn"
    SPAWN = "spawn"
    POST_SPAWN = "post-spawn"


class Wind(StrEnum):
    """Categorical wind strength."""

    CALM = "calm"
    LIGHT = "light"
    MODERATE = "moderate"
    STRONG = "strong"


class Sky(StrEnum):
    """Cloud cover category."""

    SUNNY = "sunny"
    CLOUDY = "cloudy"
    MIXED = "mixed"


class Clarity(StrEnum):
    """Water turbidity category."""

    CLEAR = "clear"
    STAINED = "stained"
    MUDDY = "muddy"


class WaterBodyType(StrEnum):
    """Kinds of water a fishing spot can be on."""

    LAKE = "lake"
    RIVER = "river"
    POND = "pond"
    CREEK = "creek"
    RESERVOIR = "reservoir"


def wind_from_mph(mph: float) -> Wind:
    """Bucket a wind speed in mph into a categorical wind."""
    if mph < 3:
        return Wind.CALM
    if mph < 10:
        return Wind.LIGHT
    if mph < 20:
        return Wind.MODERATE
    return Wind.STRONG


class Conditions(BaseModel):
    """Environmental conditions supplied by the caller.

    ``season`` is a free string so that unrecognised seasons flow through the
    engines and simply match no rule.
    """

    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    season: str = Field(..., description="Season or spawn phase")
    water_temp_f: float | None = Field(default=None, description="Water temperature (°F)")
    wind_mph: float | None = Field(default=None, ge=0)
    wind: Wind | None = None
    sky: Sky | None = None
    temp: float | None = Field(default=None, description="Air temperature (°F)")
    clarity: Clarity | None = None
    target_species: list[str] | None = None

    @model_validator(mode="after")
    def _derive_wind(self) -> Conditions:
        if self.wind is None and self.wind_mph is not None:
            self.wind = wind_from_mph(self.wind_mph)
        return self

    @property
    def effective_water_temp(self) -> float:
        """Water temperature used for scoring: water, then air, then 70 °F."""
        if self.water_temp_f is not None:
            return self.water_temp_f
        if self.temp is not None:
            return self.temp
        return 70.0


# =============================================================================
# Recommendations
# =============================================================================


class Recommendation(BaseModel):
    """A ranked fishing pattern."""

    pattern: str
    lures: list[str] = Field(default_factory=list, max_length=3)
    confidence: float = Field(..., gt=0, le=1)
    species: str | None = None
    reasons: list[str] = Field(default_factory=list)
    best_time_of_day: str | None = None
    water_depth: str | None = None
    technique: str | None = None


# =============================================================================
# Fishing spots
# =============================================================================


class FishingSpot(BaseModel):
    """A known fishing location."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    type: WaterBodyType
    species: tuple[str, ...] = ()
    rating: float = Field(..., ge=1, le=5)
    description: str | None = None
    depth: str | None = None
    structure: tuple[str, ...] = ()
    is_public: bool = True
