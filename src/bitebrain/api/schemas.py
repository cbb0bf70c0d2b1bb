"""Pydantic schemas for API request/response bodies.

Every response carries a ``success`` flag; errors use ``ErrorResponse``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from bitebrain.recommend import Engine
from bitebrain.reference.species import SpeciesProfile, TempRange
from bitebrain.schemas import Conditions, Recommendation


class HealthResponse(BaseModel):
    success: bool = True
    message: str = "BiteBrain API is healthy"
    timestamp: datetime


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class RecommendRequest(Conditions):
    """Conditions plus the engine to run them through."""

    engine: Engine = Field(default=Engine.SPECIES, description="species or simple")

    def to_conditions(self) -> Conditions:
        return Conditions.model_validate(self.model_dump(exclude={"engine"}))


class RecommendResponse(BaseModel):
    success: bool = True
    data: list[Recommendation]
    conditions: dict[str, Any]


class DataResponse(BaseModel):
    """Generic success envelope for read endpoints."""

    success: bool = True
    data: Any


class TempRangeOut(BaseModel):
    min: float
    max: float

    @classmethod
    def from_range(cls, temp_range: TempRange) -> TempRangeOut:
        return cls(min=temp_range.min, max=temp_range.max)


class SpeciesSummary(BaseModel):
    id: str
    name: str
    scientific_name: str
    #: Whether the season keywords hit the species' behaviours; None without a season.
    season_match: bool | None = None


class LurePreferencesOut(BaseModel):
    primary: list[str]
    secondary: list[str]
    seasonal: dict[str, list[str]]


class SpeciesDetail(SpeciesSummary):
    optimal_temp_range: TempRangeOut
    spawn_temp_range: TempRangeOut
    preferred_structure: list[str]
    feeding_times: list[str]
    seasonal_behavior: dict[str, list[str]]
    lure_preferences: LurePreferencesOut

    @classmethod
    def from_profile(cls, species_id: str, profile: SpeciesProfile) -> SpeciesDetail:
        lures = profile.lure_preferences
        return cls(
            id=species_id,
            name=profile.name,
            scientific_name=profile.scientific_name,
            optimal_temp_range=TempRangeOut.from_range(profile.optimal_temp_range),
            spawn_temp_range=TempRangeOut.from_range(profile.spawn_temp_range),
            preferred_structure=list(profile.preferred_structure),
            feeding_times=list(profile.feeding_times),
            seasonal_behavior={k: list(v) for k, v in profile.seasonal_behavior.items()},
            lure_preferences=LurePreferencesOut(
                primary=list(lures.primary),
                secondary=list(lures.secondary),
                seasonal={k: list(v) for k, v in lures.seasonal.items()},
            ),
        )
