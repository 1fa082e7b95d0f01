"""
App wiring tests: configuration loading, structured logging and the
suggest-then-wear flow through :class:`WardrobeApp`.
"""

import json
import logging
import random
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from closet_app.app import WardrobeApp
from closet_app.config import ClosetConfig
from closet_app.logging_config import JsonFormatter, correlation_context, redact_for_log
from models.weather import DEFAULT_WEATHER, Weather
from tools.sample_data import seed_sample_closet
from tools.wardrobe_store import SQLiteWardrobeStore
from tools.weather_provider import MockWeatherProvider

NOW = "2025-03-10T08:00:00+00:00"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "APP_ENV",
        "APP_CONFIG_PATH",
        "CLOSET_CONFIG_DIR",
        "WARDROBE_DB_PATH",
        "DEFAULT_LATITUDE",
        "DEFAULT_LONGITUDE",
        "DAYS_NO_REPEAT",
        "MAX_RESULTS",
        "CANDIDATE_CAP",
        "OUTERWEAR_CAP",
        "WEATHER_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def closet(tmp_path: Path) -> WardrobeApp:
    config = ClosetConfig(wardrobe_db_path=str(tmp_path / "closet.db"))
    store = SQLiteWardrobeStore(config.wardrobe_db_path)
    seed_sample_closet(store)
    weather = Weather(temp_c=9, chance_of_rain=0.1, wind_kph=10)
    return WardrobeApp(config=config, store=store, weather_provider=MockWeatherProvider(weather), rng=random.Random(1))


def test_config_defaults() -> None:
    config = ClosetConfig.from_env()

    assert config.wardrobe_db_path == "data/closet.db"
    assert config.default_latitude is None
    assert config.days_no_repeat == 2
    assert config.max_results == 3
    assert config.candidate_cap == 5
    assert config.outerwear_cap == 3


def test_config_merges_yaml_with_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables win over values from the environment YAML file."""

    config_dir = tmp_path / "environments"
    config_dir.mkdir()
    (config_dir / "staging.yaml").write_text(
        "# staging overrides\n"
        "wardrobe_db_path: \"/srv/closet/closet.db\"\n"
        "default_latitude: 59.33\n"
        "default_longitude: 18.07\n"
        "max_results: 5\n"
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("CLOSET_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("MAX_RESULTS", "4")

    config = ClosetConfig.from_env()

    assert config.environment == "staging"
    assert config.wardrobe_db_path == "/srv/closet/closet.db"
    assert config.default_latitude == 59.33
    assert config.default_longitude == 18.07
    assert config.max_results == 4


def test_redaction_masks_location_and_photos() -> None:
    scrubbed = redact_for_log(
        {
            "latitude": 59.3,
            "nested": {"image_uri": "https://cdn/x.jpg", "note": "mail me at a@b.com"},
            "photo": "data:image/png;base64,AAAA",
            "count": 3,
        }
    )

    assert scrubbed["latitude"] == "[redacted]"
    assert scrubbed["nested"]["image_uri"] == "[redacted]"
    assert scrubbed["nested"]["note"] == "mail me at [redacted-email]"
    assert scrubbed["photo"] == "[redacted-uri]"
    assert scrubbed["count"] == 3


def test_json_formatter_includes_correlation_id() -> None:
    record = logging.LogRecord("closet", logging.INFO, __file__, 1, "hello", None, None)
    record.event = "greeting"
    record.longitude = 18.07

    with correlation_context("abc123"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["correlation_id"] == "abc123"
    assert payload["event"] == "greeting"
    assert payload["message"] == "hello"
    assert payload["longitude"] == 18.07


def test_inline_weather_skips_provider(closet: WardrobeApp) -> None:
    inline = Weather(temp_c=24, chance_of_rain=0.0, wind_kph=3)

    response = closet.suggest(dress_code="casual", weather=inline, now=NOW)

    assert response.weather is inline
    assert response.weather_source == "request"
    assert closet.weather_provider.calls == []
    assert all(outfit.outerwear is None for outfit in response.suggestions)


def test_coordinates_fetch_forecast(closet: WardrobeApp) -> None:
    response = closet.suggest(dress_code="casual", latitude=59.33, longitude=18.07, now=NOW)

    assert response.weather_source == "forecast"
    assert closet.weather_provider.calls == [(59.33, 18.07)]
    assert response.suggestions
    assert all(outfit.outerwear is not None for outfit in response.suggestions)


def test_no_location_uses_default_weather(closet: WardrobeApp) -> None:
    response = closet.suggest(dress_code="casual", now=NOW)

    assert response.weather == DEFAULT_WEATHER
    assert response.weather_source == "default"


def test_wearing_a_suggestion_sends_it_to_laundry(closet: WardrobeApp) -> None:
    inline = Weather(temp_c=24, chance_of_rain=0.0, wind_kph=3)
    outfit = closet.suggest(dress_code="casual", weather=inline, now=NOW, max_results=1).suggestions[0]

    entry = closet.wear_outfit(outfit, dress_code="casual", weather=inline)

    assert entry["garment_ids"] == outfit.garment_ids
    assert entry["weather"]["temp_c"] == 24
    dirty_ids = {garment["id"] for garment in closet.wardrobe_tools.list_laundry()}
    assert dirty_ids == {outfit.top.id, outfit.bottom.id}
    assert closet.store.get_garment(outfit.shoe.id).times_worn == 1


def test_explicit_zero_results_is_respected(closet: WardrobeApp) -> None:
    inline = Weather(temp_c=24, chance_of_rain=0.0, wind_kph=3)

    response = closet.suggest(dress_code="casual", weather=inline, now=NOW, max_results=0)

    assert response.suggestions == []
