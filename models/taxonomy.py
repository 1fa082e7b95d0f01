"""Canonical taxonomy definitions for closet garments.

This module centralises the canonical labels for garment types, dress codes
and color aliases. Helper functions keep validation logic consistent across
the engine, the store and the HTTP schemas.
"""

from typing import Dict, Iterable, List


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_").replace("-", "_")


GARMENT_TYPES: List[str] = ["top", "bottom", "outerwear", "shoe", "accessory"]

# Slots an outfit suggestion is built from; accessories never fill a slot.
OUTFIT_SLOTS: List[str] = ["top", "bottom", "outerwear", "shoe"]

DRESS_CODES: List[str] = ["casual", "smart_casual", "business", "sport"]

_TYPE_ALIASES: Dict[str, str] = {
    "shoes": "shoe",
    "tops": "top",
    "bottoms": "bottom",
    "jacket": "outerwear",
    "coat": "outerwear",
    "accessories": "accessory",
}

COLOR_MAP: Dict[str, str] = {
    "navy blue": "navy",
    "light blue": "lightblue",
    "sky blue": "lightblue",
    "baby blue": "lightblue",
    "off white": "white",
    "ivory": "cream",
    "charcoal": "gray",
    "forest green": "forest",
    "olive green": "olive",
    "wine": "burgundy",
}


def validate_garment_type(value: str) -> str:
    """Validate and normalise a garment type.

    Raises a :class:`ValueError` if the type is not part of the canonical
    taxonomy.
    """

    if not isinstance(value, str):
        raise ValueError(f"Garment type must be a string, got {value!r}")
    key = _normalize_key(value)
    key = _TYPE_ALIASES.get(key, key)
    if key not in GARMENT_TYPES:
        raise ValueError(f"Unsupported garment type '{value}'. Allowed: {GARMENT_TYPES}")
    return key


def validate_dress_code(value: str) -> str:
    """Validate a single dress code value."""

    key = _normalize_key(value)
    if key not in DRESS_CODES:
        raise ValueError(f"Unsupported dress code '{value}'. Allowed: {DRESS_CODES}")
    return key


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color name."""

    key = " ".join(raw_string.strip().lower().split())
    return COLOR_MAP.get(key, key)


def normalise_tags(values: Iterable[str], allowed: List[str]) -> List[str]:
    """Normalise and deduplicate tags against an allowed set."""

    normalised = []
    seen = set()
    for value in values:
        key = _normalize_key(str(value))
        if key in allowed and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


__all__ = [
    "GARMENT_TYPES",
    "OUTFIT_SLOTS",
    "DRESS_CODES",
    "COLOR_MAP",
    "validate_garment_type",
    "validate_dress_code",
    "normalize_color_name",
    "normalise_tags",
]
