"""FastAPI application for BiteBrain.

Provides REST API endpoints for:
- Fishing pattern recommendations (species-aware and simple engines)
- Species profiles and fishing spots
- Solunar periods and the composite conditions rating
- Health checks

Example:
    >>> from bitebrain.api import create_app
    >>> app = create_app()
    >>> # Run with: uvicorn bitebrain.api.app:create_app --factory --reload
"""

import json
import logging
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from bitebrain import __version__
from bitebrain.analysis import (
    WeatherConditions,
    conditions_report_to_dict,
    estimate_water_temperature,
    get_solunar_impact,
    rate_fishing_conditions,
    season_for_month,
    typical_weather,
)
from bitebrain.api.schemas import (
    DataResponse,
    ErrorResponse,
    HealthResponse,
    RecommendRequest,
    RecommendResponse,
    SpeciesDetail,
    SpeciesSummary,
)
from bitebrain.config import Settings, get_settings
from bitebrain.recommend import Engine, recommend
from bitebrain.reference.species import SPECIES_PROFILES
from bitebrain.schemas import Conditions, Recommendation
from bitebrain.solunar import SolunarCalculator, solunar_day_to_dict, solunar_period_to_dict
from bitebrain.species import get_species_for_conditions, get_species_profile, matches_season
from bitebrain.spots import get_fishing_spot_by_id, get_fishing_spots, get_fishing_spots_in_radius

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
DEFAULT_RADIUS_KM = 50.0


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _run_recommend(conditions: Conditions, engine: str) -> RecommendResponse:
    recommendations: list[Recommendation] = recommend(conditions, engine)
    return RecommendResponse(
        data=recommendations,
        conditions=conditions.model_dump(mode="json", exclude_none=True),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Settings to use (defaults to ``get_settings()``)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="BiteBrain API",
        description="Fishing pattern recommendations and solunar forecasts",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    def solunar_calculator(
        lat: float | None, lon: float | None, timezone: str | None
    ) -> SolunarCalculator:
        tz_name = timezone or settings.timezone
        try:
            ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            raise HTTPException(status_code=400, detail=f"Unknown timezone: {tz_name}") from None
        return SolunarCalculator(
            settings.lat if lat is None else lat,
            settings.lon if lon is None else lon,
            tz_name,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Render HTTP errors in the standard error envelope."""
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, INTERNAL_ERROR)

    @app.get("/", tags=["info"])
    async def root():
        """Root endpoint with API info."""
        return {"name": "BiteBrain API", "version": __version__, "docs": "/docs"}

    @app.get("/health", response_model=HealthResponse, tags=["info"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(timestamp=datetime.now(UTC))

    @app.get(
        "/recommend",
        response_model=RecommendResponse,
        responses={500: {"model": ErrorResponse}},
        tags=["recommendations"],
    )
    async def recommend_get(
        season: str = "spring",
        wind: str | None = "light",
        temp: float | None = 65,
        clarity: str | None = "clear",
        sky: str | None = None,
        water_temp_f: float | None = None,
        species: list[str] | None = Query(default=None),
        engine: str = Engine.SPECIES.value,
    ):
        """Recommendations from query parameters, with the usual defaults."""
        try:
            conditions = Conditions(
                season=season,
                wind=wind,
                temp=temp,
                clarity=clarity,
                sky=sky,
                water_temp_f=water_temp_f,
                target_species=species,
            )
            return _run_recommend(conditions, engine)
        except (ValidationError, ValueError):
            logger.exception("Recommendation failed for query %s", season)
            return _error(500, INTERNAL_ERROR)

    @app.post(
        "/recommend",
        response_model=RecommendResponse,
        responses={500: {"model": ErrorResponse}},
        tags=["recommendations"],
    )
    async def recommend_post(request: Request):
        """Recommendations from a JSON body of conditions (plus optional ``engine``)."""
        try:
            body = json.loads(await request.body() or b"{}")
            payload = RecommendRequest.model_validate(body)
            return _run_recommend(payload.to_conditions(), payload.engine)
        except (json.JSONDecodeError, ValidationError, ValueError):
            logger.exception("Recommendation failed for request body")
            return _error(500, INTERNAL_ERROR)

    @app.get("/species", response_model=DataResponse, tags=["species"])
    async def list_species(season: str | None = None, water_temp: float | None = None):
        """All species, or the suitable ones when ``season`` is given."""
        if season is not None:
            query = {"season": season, "water_temp": water_temp}
            ids = get_species_for_conditions(query)
        else:
            ids = list(SPECIES_PROFILES)
        data = [
            SpeciesSummary(
                id=str(species_id),
                name=SPECIES_PROFILES[species_id].name,
                scientific_name=SPECIES_PROFILES[species_id].scientific_name,
                season_match=(
                    None
                    if season is None
                    else matches_season(SPECIES_PROFILES[species_id], season)
                ),
            )
            for species_id in ids
        ]
        return DataResponse(data=data)

    @app.get("/species/{species_id}", response_model=DataResponse, tags=["species"])
    async def species_detail(species_id: str):
        profile = get_species_profile(species_id)
        if profile is None:
            raise HTTPException(status_code=404, detail=f"Unknown species: {species_id}")
        return DataResponse(data=SpeciesDetail.from_profile(species_id, profile))

    @app.get("/spots", response_model=DataResponse, tags=["spots"])
    async def list_spots(
        lat: float | None = Query(default=None, ge=-90, le=90),
        lng: float | None = Query(default=None, ge=-180, le=180),
        radius_km: float = Query(default=DEFAULT_RADIUS_KM, ge=0),
    ):
        """All sample spots, or those within ``radius_km`` of (lat, lng)."""
        if lat is not None and lng is not None:
            spots = get_fishing_spots_in_radius(lat, lng, radius_km)
        else:
            spots = get_fishing_spots()
        return DataResponse(data=[s.model_dump(mode="json") for s in spots])

    @app.get("/spots/{spot_id}", response_model=DataResponse, tags=["spots"])
    async def spot_detail(spot_id: str):
        spot = get_fishing_spot_by_id(spot_id)
        if spot is None:
            raise HTTPException(status_code=404, detail=f"Unknown spot: {spot_id}")
        return DataResponse(data=spot.model_dump(mode="json"))

    @app.get("/solunar/day", response_model=DataResponse, tags=["solunar"])
    async def solunar_day(
        day: date | None = Query(default=None, alias="date"),
        lat: float | None = Query(default=None, ge=-90, le=90),
        lon: float | None = Query(default=None, ge=-180, le=180),
        timezone: str | None = None,
    ):
        calculator = solunar_calculator(lat, lon, timezone)
        target = day or datetime.now(calculator.config.tzinfo).date()
        return DataResponse(data=solunar_day_to_dict(calculator.calculate_day(target)))

    @app.get("/solunar/week", response_model=DataResponse, tags=["solunar"])
    async def solunar_week(
        start: date | None = None,
        lat: float | None = Query(default=None, ge=-90, le=90),
        lon: float | None = Query(default=None, ge=-180, le=180),
        timezone: str | None = None,
    ):
        calculator = solunar_calculator(lat, lon, timezone)
        first = start or datetime.now(calculator.config.tzinfo).date()
        days = calculator.calculate_week(first)
        return DataResponse(data=[solunar_day_to_dict(d) for d in days])

    @app.get("/solunar/current", response_model=DataResponse, tags=["solunar"])
    async def solunar_current(
        lat: float | None = Query(default=None, ge=-90, le=90),
        lon: float | None = Query(default=None, ge=-180, le=180),
        timezone: str | None = None,
    ):
        """The solunar period in effect right now (null between periods)."""
        calculator = solunar_calculator(lat, lon, timezone)
        period = calculator.get_current_period()
        impact = get_solunar_impact(period)
        return DataResponse(
            data={
                "period": solunar_period_to_dict(period) if period is not None else None,
                "impact": round(impact.impact, 2),
                "description": impact.description,
            }
        )

    @app.get("/conditions", response_model=DataResponse, tags=["conditions"])
    async def conditions_report(
        water_body_type: str = "lake",
        season: str | None = None,
        water_temp_f: float | None = None,
        air_temp_f: float | None = None,
        wind_speed: float | None = Query(default=None, ge=0),
        pressure: float | None = None,
        lat: float | None = Query(default=None, ge=-90, le=90),
        lon: float | None = Query(default=None, ge=-180, le=180),
        timezone: str | None = None,
    ):
        """Composite 0-10 rating; unspecified weather uses the seasonal stand-in."""
        calculator = solunar_calculator(lat, lon, timezone)
        now = datetime.now(calculator.config.tzinfo)
        season = season or season_for_month(now.month)

        weather: WeatherConditions = typical_weather(season)
        if air_temp_f is not None:
            weather.temperature = air_temp_f
        if wind_speed is not None:
            weather.wind_speed = wind_speed
        if pressure is not None:
            weather.pressure = pressure

        water = (
            water_temp_f
            if water_temp_f is not None
            else estimate_water_temperature(season, water_body_type)
        )
        report = rate_fishing_conditions(
            weather,
            water,
            get_solunar_impact(calculator.get_current_period(now)),
            month=now.month,
        )
        return DataResponse(data=conditions_report_to_dict(report))

    return app
