"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.garment import Garment, from_raw_metadata
from models.outfit import OutfitSuggestion, WearLogEntry
from models.weather import DEFAULT_WEATHER, Weather, WeatherTarget

__all__ = [
    "Garment",
    "from_raw_metadata",
    "OutfitSuggestion",
    "WearLogEntry",
    "Weather",
    "WeatherTarget",
    "DEFAULT_WEATHER",
]
