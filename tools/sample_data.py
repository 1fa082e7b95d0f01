"""Sample closet used to seed an empty database for demos and evaluation."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from tools.wardrobe_store import WardrobeStore

logger = logging.getLogger(__name__)

SAMPLE_GARMENTS: List[Dict[str, Any]] = [
    {"type": "top", "name": "White T-Shirt", "colors": ["white"], "warmth": 1, "dress_codes": ["casual"]},
    {"type": "top", "name": "Black Dress Shirt", "colors": ["black"], "warmth": 2, "dress_codes": ["business", "smart_casual"]},
    {"type": "top", "name": "Blue Oxford Shirt", "colors": ["blue"], "warmth": 2, "dress_codes": ["business", "smart_casual"]},
    {"type": "top", "name": "Gray Hoodie", "colors": ["gray"], "warmth": 3, "dress_codes": ["casual", "sport"]},
    {"type": "top", "name": "Red Polo", "colors": ["red"], "warmth": 1, "dress_codes": ["casual", "smart_casual"]},
    {"type": "top", "name": "Green Sweater", "colors": ["green"], "warmth": 3, "dress_codes": ["casual", "smart_casual"]},
    {"type": "bottom", "name": "Blue Jeans", "colors": ["denim"], "warmth": 2, "dress_codes": ["casual"]},
    {"type": "bottom", "name": "Black Dress Pants", "colors": ["black"], "warmth": 2, "dress_codes": ["business", "smart_casual"]},
    {"type": "bottom", "name": "Khaki Chinos", "colors": ["khaki"], "warmth": 2, "dress_codes": ["casual", "smart_casual"]},
    {"type": "bottom", "name": "Gray Sweatpants", "colors": ["gray"], "warmth": 2, "dress_codes": ["casual", "sport"]},
    {"type": "bottom", "name": "Navy Shorts", "colors": ["navy"], "warmth": 1, "dress_codes": ["casual", "sport"]},
    {"type": "shoe", "name": "White Sneakers", "colors": ["white"], "warmth": 1, "dress_codes": ["casual", "sport"]},
    {"type": "shoe", "name": "Black Dress Shoes", "colors": ["black"], "warmth": 1, "dress_codes": ["business", "smart_casual"]},
    {"type": "shoe", "name": "Brown Loafers", "colors": ["brown"], "warmth": 1, "dress_codes": ["casual", "smart_casual"]},
    {"type": "shoe", "name": "Running Shoes", "colors": ["gray", "orange"], "warmth": 1, "dress_codes": ["sport", "casual"]},
    {"type": "shoe", "name": "Rubber Boots", "colors": ["black"], "warmth": 3, "dress_codes": ["casual"], "water_resistant": True},
    {"type": "outerwear", "name": "Black Leather Jacket", "colors": ["black"], "warmth": 3, "dress_codes": ["casual", "smart_casual"], "water_resistant": True},
    {"type": "outerwear", "name": "Navy Blazer", "colors": ["navy"], "warmth": 2, "dress_codes": ["business", "smart_casual"]},
    {"type": "outerwear", "name": "Rain Jacket", "colors": ["yellow"], "warmth": 2, "dress_codes": ["casual", "sport"], "water_resistant": True},
    {"type": "outerwear", "name": "Winter Coat", "colors": ["gray"], "warmth": 5, "dress_codes": ["casual", "business"], "water_resistant": True},
]


def seed_sample_closet(store: WardrobeStore) -> int:
    """Add the sample garments to ``store`` and return how many were stored."""

    added = 0
    for garment in SAMPLE_GARMENTS:
        try:
            store.add_garment(dict(garment))
        except ValueError as exc:
            logger.warning("Skipping sample garment %s: %s", garment.get("name"), exc)
            continue
        added += 1
    logger.info("Seeded %s sample garments", added)
    return added


__all__ = ["SAMPLE_GARMENTS", "seed_sample_closet"]
