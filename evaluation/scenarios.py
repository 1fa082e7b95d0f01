"""Evaluation scenarios exercising weather bands, laundry and rotation rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from models.weather import Weather

NOW = "2025-03-10T08:00:00+00:00"


@dataclass
class EvaluationScenario:
    name: str
    description: str
    dress_code: str
    weather: Weather
    garments: List[Dict[str, object]]
    expectations: Dict[str, object]
    now: str = NOW
    max_results: int = 3
    days_no_repeat: float = 2
    notes: List[str] = field(default_factory=list)


def _basic_closet() -> List[Dict[str, object]]:
    return [
        {"id": "top_white", "type": "top", "colors": ["white"], "warmth": 2, "dress_codes": ["casual"]},
        {"id": "bottom_navy", "type": "bottom", "colors": ["navy"], "warmth": 2, "dress_codes": ["casual"]},
        {"id": "shoe_sneaker", "type": "shoe", "colors": ["white"], "warmth": 1, "dress_codes": ["casual"]},
    ]


def _layered_closet() -> List[Dict[str, object]]:
    return [
        {"id": "top_sweater", "type": "top", "colors": ["gray"], "warmth": 3, "dress_codes": ["casual", "business"]},
        {"id": "top_shirt", "type": "top", "colors": ["blue"], "warmth": 2, "dress_codes": ["business"]},
        {"id": "top_tee", "type": "top", "colors": ["white"], "warmth": 1, "dress_codes": ["casual"]},
        {"id": "bottom_wool", "type": "bottom", "colors": ["charcoal"], "warmth": 3, "dress_codes": ["business"]},
        {"id": "bottom_jeans", "type": "bottom", "colors": ["denim"], "warmth": 2, "dress_codes": ["casual"]},
        {"id": "shoe_boots", "type": "shoe", "colors": ["black"], "warmth": 3, "dress_codes": ["casual", "business"], "water_resistant": True},
        {"id": "shoe_loafers", "type": "shoe", "colors": ["brown"], "warmth": 1, "dress_codes": ["business"]},
        {"id": "shoe_canvas", "type": "shoe", "colors": ["white"], "warmth": 1, "dress_codes": ["casual"]},
        {"id": "outer_parka", "type": "outerwear", "colors": ["olive"], "warmth": 5, "dress_codes": ["casual"], "water_resistant": True},
        {"id": "outer_overcoat", "type": "outerwear", "colors": ["navy"], "warmth": 4, "dress_codes": ["business"]},
        {"id": "outer_shell", "type": "outerwear", "colors": ["yellow"], "warmth": 4, "dress_codes": ["casual", "business"], "water_resistant": True},
    ]


SCENARIOS = [
    EvaluationScenario(
        name="warm_casual_day",
        description="Three-piece casual closet on a warm dry day.",
        dress_code="casual",
        weather=Weather(temp_c=20, chance_of_rain=0.05, wind_kph=5, is_snow=False),
        garments=_basic_closet(),
        expectations={
            "min_outfits": 1,
            "contains": ("top_white", "bottom_navy", "shoe_sneaker"),
            "no_outerwear": True,
        },
    ),
    EvaluationScenario(
        name="dirty_top_blocks_outfit",
        description="The only top is in the laundry basket.",
        dress_code="casual",
        weather=Weather(temp_c=20, chance_of_rain=0.05, wind_kph=5, is_snow=False),
        garments=[{**_basic_closet()[0], "is_dirty": True}, *_basic_closet()[1:]],
        expectations={"max_outfits": 0},
    ),
    EvaluationScenario(
        name="freezing_without_outerwear",
        description="Outerwear is mandatory at 0 °C but the closet has none.",
        dress_code="casual",
        weather=Weather(temp_c=0, chance_of_rain=0.0, wind_kph=5, is_snow=False),
        garments=_basic_closet(),
        expectations={"max_outfits": 0},
    ),
    EvaluationScenario(
        name="snowy_commute",
        description="Snow requires water resistant shoes and outerwear.",
        dress_code="casual",
        weather=Weather(temp_c=-2, chance_of_rain=0.2, wind_kph=25, is_snow=True),
        garments=_layered_closet(),
        expectations={"min_outfits": 1, "waterproof": True, "requires_outerwear": True},
    ),
    EvaluationScenario(
        name="rainy_business_day",
        description="Cool rainy office day with one water resistant coat option.",
        dress_code="business",
        weather=Weather(temp_c=9, chance_of_rain=0.7, wind_kph=10, is_snow=False),
        garments=_layered_closet(),
        expectations={"min_outfits": 1, "waterproof": True, "requires_outerwear": True},
    ),
    EvaluationScenario(
        name="recently_worn_is_rested",
        description="The sneaker was worn yesterday, so nothing can be suggested.",
        dress_code="casual",
        weather=Weather(temp_c=20, chance_of_rain=0.05, wind_kph=5, is_snow=False),
        garments=[*_basic_closet()[:2], {**_basic_closet()[2], "last_worn_at": "2025-03-09T08:00:00+00:00"}],
        expectations={"max_outfits": 0},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS", "NOW"]
