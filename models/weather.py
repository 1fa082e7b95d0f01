"""Weather readings and the per-request warmth targets derived from them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Weather:
    """Normalized weather snapshot supplied with each recommendation request."""

    temp_c: float
    chance_of_rain: float
    wind_kph: float
    is_snow: bool = False


@dataclass(frozen=True)
class WeatherTarget:
    """Warmth per slot plus the outerwear and waterproofing requirements."""

    top_warmth: int
    bottom_warmth: int
    shoe_warmth: int
    outer_warmth: int
    outer_required: bool
    need_waterproof: bool


# Used whenever the live forecast cannot be fetched or parsed.
DEFAULT_WEATHER = Weather(temp_c=20.0, chance_of_rain=0.1, wind_kph=8.0, is_snow=False)


__all__ = ["Weather", "WeatherTarget", "DEFAULT_WEATHER"]
