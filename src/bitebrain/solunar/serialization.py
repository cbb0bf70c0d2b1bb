"""JSON serialization helpers for solunar data structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime

    from bitebrain.solunar.models import SolunarDay, SolunarPeriod


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def solunar_period_to_dict(period: SolunarPeriod) -> dict[str, Any]:
    """Serialize a SolunarPeriod to a JSON-compatible dict."""
    return {
        "type": period.type.value,
        "start_time": period.start_time.isoformat(),
        "end_time": period.end_time.isoformat(),
        "peak_time": period.peak_time.isoformat(),
        "confidence": round(period.confidence, 2),
        "moon_phase": period.moon_phase,
        "moon_illumination": round(period.moon_illumination, 2),
    }


def solunar_day_to_dict(day: SolunarDay) -> dict[str, Any]:
    """Serialize a SolunarDay to a JSON-compatible dict.

    Args:
        day: The SolunarDay to serialize.

    Returns:
        Dict with date, rating, sun/moon times, moon phase and periods.
    """
    return {
        "date": day.date.isoformat(),
        "overall_rating": day.overall_rating,
        "sunrise": day.sunrise.isoformat(),
        "sunset": day.sunset.isoformat(),
        "moonrise": _iso(day.moonrise),
        "moonset": _iso(day.moonset),
        "moon_phase": day.moon_phase.name,
        "moon_illumination": round(day.moon_phase.illumination, 2),
        "best_period": (
            solunar_period_to_dict(day.best_period) if day.best_period is not None else None
        ),
        "periods": [solunar_period_to_dict(p) for p in day.periods],
    }
