"""Map a weather reading to per-slot warmth targets."""

from __future__ import annotations

from typing import Tuple

from models.weather import Weather, WeatherTarget

# (upper bound °C inclusive, outerwear required, base warmth, outerwear warmth)
TEMPERATURE_BANDS: Tuple[Tuple[float, bool, int, int], ...] = (
    (5, True, 3, 5),
    (12, True, 2, 4),
    (19, False, 2, 3),
)
WARM_BAND = (False, 1, 0)

WINDY_KPH = 20
RAIN_THRESHOLD = 0.4
MAX_WARMTH = 5


def derive_target(weather: Weather) -> WeatherTarget:
    """Return the warmth targets and layering requirements for ``weather``."""

    outer_required, base_warmth, outer_warmth = WARM_BAND
    for upper_bound, required, base, outer in TEMPERATURE_BANDS:
        if weather.temp_c <= upper_bound:
            outer_required, base_warmth, outer_warmth = required, base, outer
            break

    if weather.wind_kph >= WINDY_KPH:
        outer_warmth = min(MAX_WARMTH, outer_warmth + 1)

    return WeatherTarget(
        top_warmth=base_warmth,
        bottom_warmth=base_warmth,
        shoe_warmth=base_warmth,
        outer_warmth=outer_warmth,
        outer_required=outer_required,
        need_waterproof=weather.chance_of_rain >= RAIN_THRESHOLD or bool(weather.is_snow),
    )


__all__ = ["derive_target", "TEMPERATURE_BANDS", "WINDY_KPH", "RAIN_THRESHOLD"]
