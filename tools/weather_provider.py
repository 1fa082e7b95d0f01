"""Weather provider abstractions and implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import requests
from pydantic import BaseModel, ValidationError

from models.weather import DEFAULT_WEATHER, Weather
from tools.observability import instrument_tool

LOGGER = logging.getLogger(__name__)

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

# WMO weather interpretation codes reporting snowfall or snow showers.
SNOW_WEATHER_CODES = {71, 73, 75, 77, 85, 86}


class _Current(BaseModel):
    temperature_2m: Optional[float] = None
    wind_speed_10m: Optional[float] = None
    weather_code: Optional[int] = None


class _Daily(BaseModel):
    precipitation_probability_max: List[Optional[float]] = []


class _ForecastResponse(BaseModel):
    current: _Current = _Current()
    daily: _Daily = _Daily()


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def fetch_weather(self, latitude: float, longitude: float) -> Weather:
        """Return a normalized weather reading for the coordinates."""


class OpenMeteoWeatherProvider(WeatherProvider):
    """Open-Meteo provider with schema validation and a fixed fallback reading."""

    def __init__(self, timeout_seconds: float = 5.0, session: requests.Session | None = None) -> None:
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def _fallback(self, reason: str) -> Weather:
        LOGGER.warning("Using fallback weather reading", extra={"reason": reason})
        return DEFAULT_WEATHER

    def _to_weather(self, parsed: _ForecastResponse) -> Weather:
        current = parsed.current
        probabilities = parsed.daily.precipitation_probability_max
        first_probability = probabilities[0] if probabilities and probabilities[0] is not None else 0.0
        return Weather(
            temp_c=current.temperature_2m if current.temperature_2m is not None else DEFAULT_WEATHER.temp_c,
            chance_of_rain=min(1.0, max(0.0, first_probability / 100)),
            wind_kph=current.wind_speed_10m if current.wind_speed_10m is not None else DEFAULT_WEATHER.wind_kph,
            is_snow=current.weather_code in SNOW_WEATHER_CODES,
        )

    @instrument_tool("fetch_weather")
    def fetch_weather(self, latitude: float, longitude: float) -> Weather:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "temperature_2m,wind_speed_10m,weather_code",
            "daily": "precipitation_probability_max",
            "wind_speed_unit": "kmh",
            "timezone": "auto",
        }

        try:
            response = self.session.get(OPEN_METEO_URL, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            parsed = _ForecastResponse.model_validate(response.json())
        except requests.RequestException as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            return self._fallback("request_error")
        except ValidationError as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            return self._fallback("schema_validation")
        except ValueError as exc:
            LOGGER.error("Weather payload was not JSON", exc_info=exc)
            return self._fallback("invalid_json")

        weather = self._to_weather(parsed)
        LOGGER.info(
            "Fetched weather",
            extra={"temp_c": weather.temp_c, "chance_of_rain": weather.chance_of_rain, "is_snow": weather.is_snow},
        )
        return weather


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests."""

    def __init__(self, weather: Weather | None = None) -> None:
        self.weather = weather or DEFAULT_WEATHER
        self.calls: List[tuple] = []

    def fetch_weather(self, latitude: float, longitude: float) -> Weather:
        self.calls.append((latitude, longitude))
        LOGGER.info("Returning mock weather reading")
        return self.weather


__all__ = [
    "WeatherProvider",
    "OpenMeteoWeatherProvider",
    "MockWeatherProvider",
    "OPEN_METEO_URL",
    "SNOW_WEATHER_CODES",
]
