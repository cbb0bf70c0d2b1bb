"""Combine water temperature, weather and solunar activity into a day outlook.

Weather values arrive already resolved (the caller fetches or mocks them);
nothing here does I/O.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from datetime import date
from typing import TYPE_CHECKING, Any

from bitebrain.reference.water import (
    DEFAULT_BASE_WATER_TEMP,
    MONTHLY_WATER_TEMP_NORMS,
    SEASONAL_BASE_WATER_TEMP,
    WATER_BODY_TEMP_ADJUSTMENT,
    TempNorm,
)
from bitebrain.solunar.models import PeriodType
from bitebrain.solunar.serialization import solunar_period_to_dict

if TYPE_CHECKING:
    from bitebrain.solunar.models import SolunarPeriod


@dataclass
class WeatherConditions:
    """Surface weather at a spot. Temperatures °F, wind mph, pressure inHg."""

    temperature: float
    wind_speed: float
    wind_direction: str
    pressure: float
    humidity: float
    cloud_cover: float
    precipitation: float
    water_temp: float | None = None


@dataclass(frozen=True)
class TemperatureAdvice:
    activity: str  # "high" | "moderate" | "low"
    advice: str
    suggested_depth: str
    metabolism: str


@dataclass(frozen=True)
class SolunarImpact:
    """Effect of the current solunar period on fishing (0 = none, 1 = max)."""

    current_period: SolunarPeriod | None
    impact: float
    description: str
    confidence: float


@dataclass
class ConditionsReport:
    """Composite 0-10 fishing outlook with the factors behind it."""

    weather: WeatherConditions
    water_temp: float
    temperature_advice: TemperatureAdvice
    seasonal_norm: TempNorm
    solunar: SolunarImpact
    overall_rating: float
    factors: list[str] = field(default_factory=list)


# Upper bounds (exclusive) of each water temperature band.
_TEMPERATURE_BANDS: tuple[tuple[float, TemperatureAdvice], ...] = (
    (
        45,
        TemperatureAdvice(
            "low",
            "Fish are sluggish. Use slow presentations and smaller baits.",
            "Deep water, 15-30 feet",
            "Very slow - fish need fewer calories",
        ),
    ),
    (
        55,
        TemperatureAdvice(
            "low",
            "Pre-spawn conditions. Fish are moving but still slow.",
            "Medium depth, 8-15 feet",
            "Slow - use finesse techniques",
        ),
    ),
    (
        65,
        TemperatureAdvice(
            "moderate",
            "Good fishing conditions. Fish are becoming more active.",
            "Shallow to medium, 5-12 feet",
            "Moderate - fish are feeding regularly",
        ),
    ),
    (
        75,
        TemperatureAdvice(
            "high",
            "Excellent fishing! Peak activity for most species.",
            "Shallow water, 2-8 feet",
            "High - aggressive feeding periods",
        ),
    ),
    (
        85,
        TemperatureAdvice(
            "moderate",
            "Hot water - fish early morning and late evening.",
            "Deeper structure, 12-25 feet",
            "High but seeking cooler areas",
        ),
    ),
)
_HOT_WATER_ADVICE = TemperatureAdvice(
    "low",
    "Very hot water. Fish are stressed and inactive.",
    "Deepest available water, 20+ feet",
    "Stressed - fish are conserving energy",
)

ACTIVITY_RATING = {"high": 3.0, "moderate": 1.5, "low": 0.0}
BASE_CONDITIONS_RATING = 5.0


# Stand-in weather by season until a live weather source is wired in.
TYPICAL_WEATHER: dict[str, WeatherConditions] = {
    "default": WeatherConditions(
        temperature=72,
        wind_speed=8,
        wind_direction="SW",
        pressure=29.92,
        humidity=65,
        cloud_cover=30,
        precipitation=0,
        water_temp=68,
    ),
    "winter": WeatherConditions(
        temperature=45,
        wind_speed=15,
        wind_direction="N",
        pressure=30.15,
        humidity=45,
        cloud_cover=80,
        precipitation=0,
        water_temp=52,
    ),
    "summer": WeatherConditions(
        temperature=88,
        wind_speed=5,
        wind_direction="S",
        pressure=29.85,
        humidity=75,
        cloud_cover=10,
        precipitation=0,
        water_temp=78,
    ),
}


def typical_weather(season: str) -> WeatherConditions:
    """A fresh copy of the stand-in weather for ``season``."""
    preset = TYPICAL_WEATHER.get(season, TYPICAL_WEATHER["default"])
    return replace(preset)


def get_temperature_advice(water_temp_f: float) -> TemperatureAdvice:
    """Activity level and depth advice for a water temperature."""
    for upper, advice in _TEMPERATURE_BANDS:
        if water_temp_f < upper:
            return advice
    return _HOT_WATER_ADVICE


def get_seasonal_temp_norms(month: int | None = None) -> TempNorm:
    """Typical water temperature for ``month`` (1-12); current month if omitted or invalid."""
    if month in MONTHLY_WATER_TEMP_NORMS:
        return MONTHLY_WATER_TEMP_NORMS[month]
    return MONTHLY_WATER_TEMP_NORMS[date.today().month]


def season_for_month(month: int) -> str:
    """Meteorological season for a calendar month."""
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "fall"
    return "winter"


def estimate_water_temperature(
    season: str, water_body_type: str, variation: float = 0.0
) -> int:
    """Rough water temperature from season and water body type.

    ``variation`` lets callers add their own jitter; the estimate itself is
    deterministic.
    """
    base = SEASONAL_BASE_WATER_TEMP.get(season, DEFAULT_BASE_WATER_TEMP)
    adjustment = WATER_BODY_TEMP_ADJUSTMENT.get(water_body_type, 0)
    return round(base + adjustment + variation)


def get_solunar_impact(period: SolunarPeriod | None) -> SolunarImpact:
    """Translate the active solunar period into a fishing impact score."""
    if period is None:
        return SolunarImpact(
            current_period=None,
            impact=0.0,
            description="No significant solunar activity",
            confidence=0.5,
        )

    percent = round(period.confidence * 100)
    if period.type is PeriodType.MAJOR:
        impact = period.confidence * 0.8
        description = f"Major solunar period ({percent}% confidence)"
    else:
        impact = period.confidence * 0.4
        description = f"Minor solunar period ({percent}% confidence)"

    # Full and new moons strengthen the period.
    if period.moon_illumination > 0.75 or period.moon_illumination < 0.25:
        impact *= 1.2
        description += " - Strong moon phase"

    return SolunarImpact(
        current_period=period,
        impact=min(1.0, impact),
        description=description,
        confidence=period.confidence,
    )


def rate_fishing_conditions(
    weather: WeatherConditions,
    water_temp_f: float,
    solunar: SolunarImpact,
    month: int | None = None,
) -> ConditionsReport:
    """Score a day from water temperature, solunar activity, wind and pressure.

    Starts from 5 and adds: temperature activity (x0.4), solunar impact (x3),
    wind (+1 under 10 mph, +0.5 under 20, -0.5 otherwise) and barometric
    pressure (+0.5 above 30.0 inHg, -0.5 below 29.8). Clamped to [0, 10].
    """
    advice = get_temperature_advice(water_temp_f)
    factors: list[str] = []

    rating = BASE_CONDITIONS_RATING
    rating += ACTIVITY_RATING[advice.activity] * 0.4
    factors.append(f"Water temp: {advice.activity} activity")

    rating += solunar.impact * 3
    factors.append(f"Solunar: {solunar.description}")

    if weather.wind_speed < 10:
        wind_rating = 1.0
    elif weather.wind_speed < 20:
        wind_rating = 0.5
    else:
        wind_rating = -0.5
    rating += wind_rating
    factors.append(f"Weather: {'favorable' if wind_rating > 0 else 'challenging'}")

    if weather.pressure > 30.0:
        pressure_rating, trend = 0.5, "rising"
    elif weather.pressure < 29.8:
        pressure_rating, trend = -0.5, "falling"
    else:
        pressure_rating, trend = 0.0, "steady"
    rating += pressure_rating
    factors.append(f"Pressure: {trend}")

    return ConditionsReport(
        weather=weather,
        water_temp=water_temp_f,
        temperature_advice=advice,
        seasonal_norm=get_seasonal_temp_norms(month),
        solunar=solunar,
        overall_rating=max(0.0, min(10.0, rating)),
        factors=factors,
    )


def conditions_report_to_dict(report: ConditionsReport) -> dict[str, Any]:
    """Serialize a ConditionsReport to a JSON-compatible dict."""
    period = report.solunar.current_period
    return {
        "overall_rating": round(report.overall_rating, 2),
        "water_temp": report.water_temp,
        "temperature_advice": asdict(report.temperature_advice),
        "seasonal_norm": asdict(report.seasonal_norm),
        "solunar": {
            "impact": round(report.solunar.impact, 2),
            "description": report.solunar.description,
            "confidence": report.solunar.confidence,
            "current_period": solunar_period_to_dict(period) if period is not None else None,
        },
        "weather": asdict(report.weather),
        "factors": list(report.factors),
    }
