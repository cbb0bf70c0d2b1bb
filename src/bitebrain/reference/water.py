"""Water temperature reference tables (°F)."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class TempNorm:
    """Typical water temperature for a calendar month."""

    typical: float
    min: float
    max: float


# Month number (1-12) -> typical temperate-lake surface temperature.
MONTHLY_WATER_TEMP_NORMS: Mapping[int, TempNorm] = MappingProxyType(
    {
        1: TempNorm(38, 32, 45),
        2: TempNorm(42, 35, 48),
        3: TempNorm(48, 42, 55),
        4: TempNorm(55, 48, 62),
        5: TempNorm(65, 58, 72),
        6: TempNorm(72, 68, 78),
        7: TempNorm(78, 75, 82),
        8: TempNorm(82, 78, 85),
        9: TempNorm(75, 68, 80),
        10: TempNorm(65, 58, 72),
        11: TempNorm(52, 45, 58),
        12: TempNorm(42, 35, 48),
    }
)

SEASONAL_BASE_WATER_TEMP: Mapping[str, float] = MappingProxyType(
    {"spring": 58, "summer": 75, "fall": 62, "winter": 42}
)
DEFAULT_BASE_WATER_TEMP: float = 60

# Shallow water warms faster, moving water runs cooler.
WATER_BODY_TEMP_ADJUSTMENT: Mapping[str, float] = MappingProxyType(
    {"pond": 3, "creek": -2, "river": -1, "reservoir": 1, "lake": 0}
)
