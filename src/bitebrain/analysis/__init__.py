"""Cross-source fishing analysis.

Combines water temperature, weather and solunar output into structures the
API and flows serve directly.

Dependency rule: analysis/ takes already-resolved inputs (weather values,
solunar periods). It never fetches data.

Modules:
  - fishing_conditions: temperature advice, water-temp estimates, solunar
    impact and the composite 0-10 conditions rating
"""

from bitebrain.analysis.fishing_conditions import (
    TYPICAL_WEATHER,
    ConditionsReport,
    SolunarImpact,
    TemperatureAdvice,
    WeatherConditions,
    conditions_report_to_dict,
    estimate_water_temperature,
    get_seasonal_temp_norms,
    get_solunar_impact,
    get_temperature_advice,
    rate_fishing_conditions,
    season_for_month,
    typical_weather,
)

__all__ = [
    "TYPICAL_WEATHER",
    "ConditionsReport",
    "SolunarImpact",
    "TemperatureAdvice",
    "WeatherConditions",
    "conditions_report_to_dict",
    "estimate_water_temperature",
    "get_seasonal_temp_norms",
    "get_solunar_impact",
    "get_temperature_advice",
    "rate_fishing_conditions",
    "season_for_month",
    "typical_weather",
]
