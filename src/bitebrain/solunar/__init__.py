"""Solunar fishing-period calculator.

Public API:
  - models: SolunarConfig, SolunarPeriod, SolunarDay, PeriodType, MoonPhase,
            SunTimes, MoonTimes
  - ephemeris: SunMoonTimeProvider, SimplifiedSunMoonProvider, moon_phase_for
  - calculator: SolunarCalculator, calculate_solunar_day, overall_rating,
                find_best_period
  - serialization: solunar_day_to_dict, solunar_period_to_dict
"""

from bitebrain.solunar.calculator import (
    SolunarCalculator,
    calculate_solunar_day,
    find_best_period,
    overall_rating,
)
from bitebrain.solunar.ephemeris import (
    SimplifiedSunMoonProvider,
    SunMoonTimeProvider,
    moon_phase_for,
)
from bitebrain.solunar.models import (
    MoonPhase,
    MoonTimes,
    PeriodType,
    SolunarConfig,
    SolunarDay,
    SolunarPeriod,
    SunTimes,
)
from bitebrain.solunar.serialization import solunar_day_to_dict, solunar_period_to_dict

__all__ = [
    "MoonPhase",
    "MoonTimes",
    "PeriodType",
    "SimplifiedSunMoonProvider",
    "SolunarCalculator",
    "SolunarConfig",
    "SolunarDay",
    "SolunarPeriod",
    "SunMoonTimeProvider",
    "SunTimes",
    "calculate_solunar_day",
    "find_best_period",
    "moon_phase_for",
    "overall_rating",
    "solunar_day_to_dict",
    "solunar_period_to_dict",
]
