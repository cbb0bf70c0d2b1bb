"""Solunar data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from datetime import date, datetime


class PeriodType(StrEnum):
    """Major periods sit on rise/set events, minor ones between them."""

    MAJOR = "major"
    MINOR = "minor"


@dataclass(frozen=True)
class SolunarConfig:
    """Observer location and timezone (IANA name)."""

    latitude: float
    longitude: float
    timezone: str = "America/New_York"

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


@dataclass(frozen=True)
class MoonPhase:
    """Moon phase for a day.

    ``fraction`` is the position in the synodic cycle, 0 = new moon.
    """

    name: str
    illumination: float
    fraction: float


@dataclass(frozen=True)
class SunTimes:
    sunrise: datetime
    sunset: datetime


@dataclass(frozen=True)
class MoonTimes:
    moonrise: datetime | None = None
    moonset: datetime | None = None


@dataclass(frozen=True)
class SolunarPeriod:
    """A window of heightened fish activity."""

    type: PeriodType
    start_time: datetime
    end_time: datetime
    peak_time: datetime
    confidence: float
    moon_phase: str
    moon_illumination: float

    def contains(self, moment: datetime) -> bool:
        """Whether ``moment`` falls inside [start, end]."""
        return self.start_time <= moment <= self.end_time

    @property
    def duration_minutes(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 60


@dataclass(frozen=True)
class SolunarDay:
    """Solunar summary for one local calendar day."""

    date: date
    periods: tuple[SolunarPeriod, ...]
    overall_rating: int
    sunrise: datetime
    sunset: datetime
    moon_phase: MoonPhase
    best_period: SolunarPeriod | None = None
    moonrise: datetime | None = None
    moonset: datetime | None = None

    @property
    def major_periods(self) -> list[SolunarPeriod]:
        return [p for p in self.periods if p.type is PeriodType.MAJOR]

    @property
    def minor_periods(self) -> list[SolunarPeriod]:
        return [p for p in self.periods if p.type is PeriodType.MINOR]
