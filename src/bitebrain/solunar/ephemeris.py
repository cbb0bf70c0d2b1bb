"""Sun and moon event times.

``SunMoonTimeProvider`` is the seam between period construction and the
astronomy. ``SimplifiedSunMoonProvider`` is a low-precision stand-in:

- Moon phase from whole days since a reference new moon, modulo the mean
  synodic month.
- Sunrise/sunset from the sunrise equation with a sinusoidal declination and
  a longitude-based solar noon. No refraction or equation-of-time terms, so
  expect errors of several minutes.
- Moonrise/moonset at fixed local-solar hours. This ignores the moon's daily
  drift entirely.

A precise backend only has to implement the three protocol methods.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time, timedelta
from typing import TYPE_CHECKING, Protocol

from bitebrain.solunar.models import MoonPhase, MoonTimes, SunTimes

if TYPE_CHECKING:
    from bitebrain.solunar.models import SolunarConfig

SYNODIC_MONTH_DAYS = 29.53
REFERENCE_NEW_MOON = date(2024, 3, 10)

# Local-solar hours used for the moonrise/moonset approximation.
MOONRISE_BASE_HOUR = 6
MOONSET_BASE_HOUR = 18


class SunMoonTimeProvider(Protocol):
    """Source of moon phase and rise/set times for a local calendar day."""

    def moon_phase(self, day: date) -> MoonPhase: ...

    def sun_times(self, day: date, config: SolunarConfig) -> SunTimes: ...

    def moon_times(self, day: date, config: SolunarConfig) -> MoonTimes: ...


def moon_phase_for(day: date) -> MoonPhase:
    """Bucket the synodic position into four named phases.

    Illumination is 0 through New Moon, ramps linearly to 1 across First
    Quarter, holds at 1 through Full Moon and ramps back to 0 across Last
    Quarter.
    """
    days_since_new = (day - REFERENCE_NEW_MOON).days
    fraction = (days_since_new % SYNODIC_MONTH_DAYS) / SYNODIC_MONTH_DAYS

    if fraction < 0.125:
        return MoonPhase("New Moon", 0.0, fraction)
    if fraction < 0.375:
        return MoonPhase("First Quarter", (fraction - 0.125) * 4, fraction)
    if fraction < 0.625:
        return MoonPhase("Full Moon", 1.0, fraction)
    if fraction < 0.875:
        return MoonPhase("Last Quarter", (0.875 - fraction) * 4, fraction)
    return MoonPhase("New Moon", 0.0, fraction)


def solar_declination(day_of_year: int) -> float:
    """Approximate solar declination in degrees."""
    return 23.45 * math.sin(math.radians(360 * (284 + day_of_year) / 365))


def _utc_hours(day: date, hours: float) -> datetime:
    return datetime.combine(day, time(), tzinfo=UTC) + timedelta(hours=hours)


class SimplifiedSunMoonProvider:
    """Closed-form approximations; see module docstring for caveats."""

    def moon_phase(self, day: date) -> MoonPhase:
        return moon_phase_for(day)

    def sun_times(self, day: date, config: SolunarConfig) -> SunTimes:
        declination = solar_declination(day.timetuple().tm_yday)
        solar_noon_utc = 12 - config.longitude / 15

        cos_hour_angle = math.tan(math.radians(config.latitude)) * math.tan(
            math.radians(declination)
        )
        # Near the poles the product leaves [-1, 1]; pin it so acos stays defined.
        cos_hour_angle = max(-1.0, min(1.0, cos_hour_angle))
        hour_angle = math.degrees(math.acos(cos_hour_angle)) / 15

        return SunTimes(
            sunrise=_utc_hours(day, solar_noon_utc - hour_angle).astimezone(config.tzinfo),
            sunset=_utc_hours(day, solar_noon_utc + hour_angle).astimezone(config.tzinfo),
        )

    def moon_times(self, day: date, config: SolunarConfig) -> MoonTimes:
        """Moonrise/moonset at 06:00/18:00 local solar time, floored to the hour.

        The UTC hour is ``base - longitude / 15``: local solar time runs
        behind UTC west of Greenwich, so the longitude shift is subtracted,
        not added to a host-local clock.
        """
        offset = -config.longitude / 15
        rise = math.floor(MOONRISE_BASE_HOUR + offset)
        set_ = math.floor(MOONSET_BASE_HOUR + offset)
        return MoonTimes(
            moonrise=_utc_hours(day, rise).astimezone(config.tzinfo),
            moonset=_utc_hours(day, set_).astimezone(config.tzinfo),
        )
