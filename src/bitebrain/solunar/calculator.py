"""Solunar period construction and daily rating.

Major periods are two-hour windows centred on sunrise, sunset, moonrise and
moonset. Minor periods are 90-minute windows centred halfway between each
pair of consecutive majors (in reference order, not time order). The day
rating rewards strong periods and a half-lit moon.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any

from bitebrain.solunar.ephemeris import SimplifiedSunMoonProvider, SunMoonTimeProvider
from bitebrain.solunar.models import (
    MoonPhase,
    PeriodType,
    SolunarConfig,
    SolunarDay,
    SolunarPeriod,
)

logger = logging.getLogger(__name__)

MAJOR_HALF_WIDTH = timedelta(hours=1)
MINOR_HALF_WIDTH = timedelta(minutes=45)

# Bonus by position in [sunrise, sunset, moonrise, moonset].
MAJOR_POSITION_BONUS = (0.1, 0.05, 0.08, 0.03)
MAJOR_BASE_CONFIDENCE_BRIGHT = 0.9
MAJOR_BASE_CONFIDENCE_DARK = 0.7
MINOR_CONFIDENCE = 0.6

STRONG_PERIOD_THRESHOLD = 0.8
BASE_RATING = 3
MAX_RATING = 10
MOON_PHASE_BONUS = 2


def major_period_confidence(illumination: float, position: int) -> float:
    """Base confidence from moon brightness plus a fixed bonus by reference position."""
    base = MAJOR_BASE_CONFIDENCE_BRIGHT if illumination > 0.5 else MAJOR_BASE_CONFIDENCE_DARK
    bonus = MAJOR_POSITION_BONUS[position] if position < len(MAJOR_POSITION_BONUS) else 0.0
    return min(1.0, base + bonus)


def build_major_periods(
    references: Sequence[datetime | None], moon: MoonPhase
) -> list[SolunarPeriod]:
    """One major period per defined reference time, in reference order."""
    periods: list[SolunarPeriod] = []
    for position, reference in enumerate(references):
        if reference is None:
            continue
        periods.append(
            SolunarPeriod(
                type=PeriodType.MAJOR,
                start_time=reference - MAJOR_HALF_WIDTH,
                end_time=reference + MAJOR_HALF_WIDTH,
                peak_time=reference,
                confidence=major_period_confidence(moon.illumination, position),
                moon_phase=moon.name,
                moon_illumination=moon.illumination,
            )
        )
    return periods


def build_minor_periods(majors: Sequence[SolunarPeriod], moon: MoonPhase) -> list[SolunarPeriod]:
    """Minor periods at the midpoint of each consecutive pair of majors."""
    minors: list[SolunarPeriod] = []
    for first, second in zip(majors, majors[1:], strict=False):
        peak = first.peak_time + (second.peak_time - first.peak_time) / 2
        minors.append(
            SolunarPeriod(
                type=PeriodType.MINOR,
                start_time=peak - MINOR_HALF_WIDTH,
                end_time=peak + MINOR_HALF_WIDTH,
                peak_time=peak,
                confidence=MINOR_CONFIDENCE,
                moon_phase=moon.name,
                moon_illumination=moon.illumination,
            )
        )
    return minors


def overall_rating(periods: Sequence[SolunarPeriod], illumination: float) -> int:
    """0-10 day rating: 3 + 2 per strong period + 2 for a half-lit moon."""
    strong = sum(1 for p in periods if p.confidence > STRONG_PERIOD_THRESHOLD)
    moon_bonus = MOON_PHASE_BONUS if 0.25 < illumination < 0.75 else 0
    return max(0, min(MAX_RATING, strong * 2 + moon_bonus + BASE_RATING))


def find_best_period(periods: Sequence[SolunarPeriod]) -> SolunarPeriod | None:
    """Highest-confidence period; the earliest wins ties."""
    best: SolunarPeriod | None = None
    for period in periods:
        if best is None or period.confidence > best.confidence:
            best = period
    return best


def local_date(day: date | datetime, config: SolunarConfig) -> date:
    """Calendar date of ``day`` in the configured timezone.

    Naive datetimes are taken to already be local.
    """
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            return day.astimezone(config.tzinfo).date()
        return day.date()
    return day


def calculate_solunar_day(
    day: date | datetime,
    config: SolunarConfig,
    provider: SunMoonTimeProvider | None = None,
) -> SolunarDay:
    """Compute solunar periods and rating for one local day.

    Pure function of its arguments; use this for per-call configuration.
    """
    provider = provider or SimplifiedSunMoonProvider()
    the_date = local_date(day, config)

    moon = provider.moon_phase(the_date)
    sun = provider.sun_times(the_date, config)
    moon_times = provider.moon_times(the_date, config)

    majors = build_major_periods(
        [sun.sunrise, sun.sunset, moon_times.moonrise, moon_times.moonset], moon
    )
    minors = build_minor_periods(majors, moon)
    periods = sorted(majors + minors, key=lambda p: p.start_time)

    return SolunarDay(
        date=the_date,
        periods=tuple(periods),
        overall_rating=overall_rating(periods, moon.illumination),
        sunrise=sun.sunrise,
        sunset=sun.sunset,
        moon_phase=moon,
        best_period=find_best_period(periods),
        moonrise=moon_times.moonrise,
        moonset=moon_times.moonset,
    )


class SolunarCalculator:
    """Solunar calculations bound to a location.

    The location is the only state. ``update_config`` replaces it for all
    later calls; prefer ``calculate_solunar_day`` when several locations are
    in play at once.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        timezone: str = "America/New_York",
        provider: SunMoonTimeProvider | None = None,
    ) -> None:
        self._config = SolunarConfig(latitude=latitude, longitude=longitude, timezone=timezone)
        self.provider = provider or SimplifiedSunMoonProvider()

    @classmethod
    def from_config(
        cls, config: SolunarConfig, provider: SunMoonTimeProvider | None = None
    ) -> SolunarCalculator:
        return cls(config.latitude, config.longitude, config.timezone, provider)

    @property
    def config(self) -> SolunarConfig:
        return self._config

    def update_config(self, **changes: Any) -> SolunarConfig:
        """Replace some of latitude/longitude/timezone; returns the new config."""
        self._config = replace(self._config, **changes)
        logger.debug("Solunar config updated: %s", self._config)
        return self._config

    def calculate_day(self, day: date | datetime) -> SolunarDay:
        return calculate_solunar_day(day, self._config, self.provider)

    def calculate_week(self, start: date | datetime) -> list[SolunarDay]:
        """Seven consecutive days starting at ``start``."""
        first = local_date(start, self._config)
        return [self.calculate_day(first + timedelta(days=i)) for i in range(7)]

    def get_current_period(self, now: datetime | None = None) -> SolunarPeriod | None:
        """The period of today's solunar day that contains ``now``, if any.

        Args:
            now: Moment to test (defaults to the current time). Naive values
                are read in the configured timezone.
        """
        tz = self._config.tzinfo
        if now is None:
            now = datetime.now(tz)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=tz)

        today = self.calculate_day(now)
        return next((p for p in today.periods if p.contains(now)), None)
