"""Closet app bootstrap: wires storage, weather and the outfit engine together."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict, List, Optional

from closet_app.config import ClosetConfig
from closet_app.logging_config import configure_logging, get_logger, log_event, operation_context
from logic.outfit_builder import GenerationLimits, OutfitRecommender, SuggestionOptions
from models.outfit import OutfitSuggestion
from models.weather import DEFAULT_WEATHER, Weather
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore
from tools.wardrobe_tools import WardrobeTools
from tools.weather_provider import OpenMeteoWeatherProvider, WeatherProvider

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SuggestionResponse:
    weather: Weather
    weather_source: str
    suggestions: List[OutfitSuggestion]


class WardrobeApp:
    """Owns the collaborators and runs recommendation requests end to end."""

    def __init__(
        self,
        config: ClosetConfig | None = None,
        store: WardrobeStore | None = None,
        weather_provider: WeatherProvider | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or ClosetConfig.from_env()
        configure_logging()

        self.store = store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.wardrobe_tools = WardrobeTools(self.store)
        self.weather_provider = weather_provider or OpenMeteoWeatherProvider(
            timeout_seconds=self.config.weather_timeout_seconds
        )
        self.recommender = OutfitRecommender(
            rng=rng,
            limits=GenerationLimits(
                candidate_cap=self.config.candidate_cap,
                outerwear_cap=self.config.outerwear_cap,
            ),
        )

    def resolve_weather(
        self,
        weather: Weather | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> tuple[Weather, str]:
        """Pick the reading to recommend against and report where it came from."""

        if weather is not None:
            return weather, "request"
        lat = latitude if latitude is not None else self.config.default_latitude
        lon = longitude if longitude is not None else self.config.default_longitude
        if lat is None or lon is None:
            LOGGER.info("No location available, using default weather")
            return DEFAULT_WEATHER, "default"
        return self.weather_provider.fetch_weather(lat, lon), "forecast"

    def suggest(
        self,
        dress_code: str,
        weather: Weather | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
        days_no_repeat: float | None = None,
        now: datetime | str | None = None,
        max_results: int | None = None,
    ) -> SuggestionResponse:
        """Load the closet, resolve weather and return ranked outfit suggestions."""

        with operation_context("app.suggest", dress_code=dress_code) as correlation_id:
            resolved, source = self.resolve_weather(weather, latitude, longitude)
            garments = self.store.get_all_garments()
            options = SuggestionOptions(
                dress_code=dress_code,
                days_no_repeat=self.config.days_no_repeat if days_no_repeat is None else days_no_repeat,
                now=now,
            )
            result = self.recommender.suggest_with_diagnostics(
                garments, resolved, options, self.config.max_results if max_results is None else max_results
            )
            log_event(
                LOGGER,
                logging.INFO,
                "suggestions_generated",
                correlation_id=correlation_id,
                dress_code=dress_code,
                weather_source=source,
                closet_size=len(garments),
                suggestion_count=len(result.suggestions),
                slot_counts=result.diagnostics.get("filter", {}).get("slot_counts"),
                fallback_used=result.diagnostics.get("fallback_used"),
            )
            return SuggestionResponse(weather=resolved, weather_source=source, suggestions=result.suggestions)

    def wear_outfit(self, suggestion: OutfitSuggestion, dress_code: Optional[str] = None, weather: Weather | None = None) -> Dict[str, object]:
        """Confirm a suggestion as worn; shoes stay clean, everything else goes to laundry."""

        return self.wardrobe_tools.log_wear(
            garment_ids=suggestion.garment_ids,
            dress_code=dress_code,
            weather=asdict(weather) if weather is not None else None,
        )


__all__ = ["WardrobeApp", "SuggestionResponse"]
