"""Lightweight evaluation harness for closet scenarios."""

from __future__ import annotations

import random
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Dict, List

from closet_app.app import WardrobeApp
from closet_app.config import ClosetConfig
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from models.outfit import OutfitSuggestion
from tools.wardrobe_store import SQLiteWardrobeStore
from tools.weather_provider import MockWeatherProvider


def _seed_closet(store: SQLiteWardrobeStore, garments: List[Dict[str, object]]) -> None:
    for garment in garments:
        store.add_garment(dict(garment))


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[OutfitSuggestion]) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    if "min_outfits" in expectations:
        checks["min_outfits"] = len(outfits) >= int(expectations["min_outfits"])
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    if expectations.get("contains"):
        checks["contains"] = any(outfit.key == tuple(expectations["contains"]) for outfit in outfits)
    if expectations.get("no_outerwear"):
        checks["no_outerwear"] = all(outfit.outerwear is None for outfit in outfits)
    if expectations.get("requires_outerwear"):
        checks["requires_outerwear"] = all(outfit.outerwear is not None for outfit in outfits)
    if expectations.get("waterproof"):
        checks["waterproof"] = all(
            outfit.shoe.water_resistant and (outfit.outerwear is None or outfit.outerwear.water_resistant)
            for outfit in outfits
        )
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, seed: int = 7) -> Dict[str, object]:
    with TemporaryDirectory() as tmpdir:
        config = ClosetConfig(wardrobe_db_path=str(Path(tmpdir) / "closet.db"))
        store = SQLiteWardrobeStore(config.wardrobe_db_path)
        _seed_closet(store, scenario.garments)
        closet = WardrobeApp(
            config=config,
            store=store,
            weather_provider=MockWeatherProvider(scenario.weather),
            rng=random.Random(seed),
        )
        response = closet.suggest(
            dress_code=scenario.dress_code,
            weather=scenario.weather,
            days_no_repeat=scenario.days_no_repeat,
            now=scenario.now,
            max_results=scenario.max_results,
        )
        evaluation = _evaluate_expectations(scenario.expectations, response.suggestions)
        return {
            "scenario": scenario.name,
            "passed": evaluation["passed"],
            "checks": evaluation["checks"],
            "outfit_count": len(response.suggestions),
            "outfits": [outfit.garment_ids for outfit in response.suggestions],
        }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
