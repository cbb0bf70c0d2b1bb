"""
Prefect flow that builds the weekly fishing outlook.

Combines a 7-day solunar forecast, recommendations for the current season and
a conditions report into ``derived/outlook.json``. Weather is the seasonal
stand-in from ``analysis.fishing_conditions.typical_weather``.

Run locally:
    python -m bitebrain.flows.outlook
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from bitebrain.analysis import (
    conditions_report_to_dict,
    estimate_water_temperature,
    get_solunar_impact,
    rate_fishing_conditions,
    season_for_month,
    typical_weather,
)
from bitebrain.config import get_settings
from bitebrain.recommend import recommend
from bitebrain.schemas import Conditions
from bitebrain.solunar import SolunarCalculator, solunar_day_to_dict
from bitebrain.store import DataStore

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

OUTLOOK_PATH = Path("derived/outlook.json")
OUTLOOK_TTL = timedelta(hours=6)

DEFAULT_LAT = 39.8283
DEFAULT_LON = -98.5795
DEFAULT_TIMEZONE = "America/New_York"


@task(name="compute-solunar-week")
def compute_solunar_week(
    lat: float, lon: float, timezone: str, start: date
) -> list[dict[str, Any]]:
    """Seven serialized solunar days starting at ``start``."""
    calculator = SolunarCalculator(lat, lon, timezone)
    return [solunar_day_to_dict(day) for day in calculator.calculate_week(start)]


@task(name="compute-recommendations")
def compute_recommendations(
    season: str,
    water_temp_f: float,
    wind_mph: float,
    air_temp_f: float,
    species: list[str] | None = None,
) -> list[dict[str, Any]]:
    """Species-engine recommendations for the outlook's conditions."""
    conditions = Conditions(
        season=season,
        water_temp_f=water_temp_f,
        wind_mph=wind_mph,
        temp=air_temp_f,
        target_species=species,
    )
    return [rec.model_dump() for rec in recommend(conditions)]


@task(name="compute-conditions")
def compute_conditions(
    lat: float,
    lon: float,
    timezone: str,
    season: str,
    water_temp_f: float,
    now: datetime,
) -> dict[str, Any]:
    """Conditions report for ``now`` using the seasonal stand-in weather."""
    period = SolunarCalculator(lat, lon, timezone).get_current_period(now)
    report = rate_fishing_conditions(
        typical_weather(season),
        water_temp_f,
        get_solunar_impact(period),
        month=now.month,
    )
    return conditions_report_to_dict(report)


@task(name="save-outlook")
def save_outlook(outlook: dict[str, Any], lat: float, lon: float) -> Path:
    """Save the outlook via store."""
    return store.write(
        OUTLOOK_PATH,
        outlook,
        source="bitebrain.flows.outlook",
        valid_until=datetime.now(UTC) + OUTLOOK_TTL,
        location={"lat": lat, "lon": lon},
    )


@flow(name="build-outlook", log_prints=True)
def build_outlook(
    lat: float = DEFAULT_LAT,
    lon: float = DEFAULT_LON,
    timezone: str = DEFAULT_TIMEZONE,
    species: list[str] | None = None,
    water_body_type: str = "lake",
    force: bool = False,
) -> dict[str, Any]:
    """
    Build the weekly outlook for a location.

    Skips the build when the stored outlook is still fresh, unless ``force``.
    """
    if not force and store.is_fresh(OUTLOOK_PATH):
        print("Outlook is fresh, skipping build.")
        return store.read(OUTLOOK_PATH) or {}

    now = datetime.now(UTC)
    today = now.date()
    season = season_for_month(today.month)
    water_temp_f = estimate_water_temperature(season, water_body_type)
    weather = typical_weather(season)

    print(f"Building {season} outlook for ({lat}, {lon}), water ~{water_temp_f}°F...")
    solunar_week = compute_solunar_week(lat, lon, timezone, today)
    recommendations = compute_recommendations(
        season, water_temp_f, weather.wind_speed, weather.temperature, species
    )
    conditions = compute_conditions(lat, lon, timezone, season, water_temp_f, now)

    outlook: dict[str, Any] = {
        "generated_for": today.isoformat(),
        "location": {"lat": lat, "lon": lon, "timezone": timezone},
        "season": season,
        "water_body_type": water_body_type,
        "water_temp_f": water_temp_f,
        "solunar_week": solunar_week,
        "recommendations": recommendations,
        "conditions": conditions,
    }
    output_path = save_outlook(outlook, lat, lon)
    print(
        f"Saved outlook ({len(recommendations)} recommendations, "
        f"{len(solunar_week)} solunar days) to {output_path}"
    )
    return outlook


if __name__ == "__main__":
    result = build_outlook()
    print(f"Flow complete: {result['generated_for']}")
