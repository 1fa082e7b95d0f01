"""Garment data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import (
    DRESS_CODES,
    normalize_color_name,
    normalise_tags,
    validate_garment_type,
)

DEFAULT_WARMTH = 2
MIN_WARMTH = 1
MAX_WARMTH = 5


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _normalise_colors(values: Iterable[str]) -> List[str]:
    """Normalise color names using the canonical taxonomy mapping."""

    normalised = []
    seen = set()
    for value in values:
        key = normalize_color_name(str(value))
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


def _as_bool(value: Any) -> bool:
    # SQLite and older exports store flags as 0/1
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


@dataclass
class Garment:
    """One physical clothing item in the closet."""

    id: str
    type: str
    colors: List[str] = field(default_factory=list)
    warmth: int = DEFAULT_WARMTH
    water_resistant: bool = False
    dress_codes: List[str] = field(default_factory=list)
    name: Optional[str] = None
    image_uri: Optional[str] = None
    last_worn_at: Optional[str] = None
    times_worn: int = 0
    is_dirty: bool = False
    favorite: bool = False

    def __post_init__(self) -> None:
        self.id = str(self.id)
        self.type = validate_garment_type(self.type)
        self.colors = _normalise_colors(_ensure_list(self.colors))
        self.warmth = DEFAULT_WARMTH if self.warmth is None else int(self.warmth)
        if not MIN_WARMTH <= self.warmth <= MAX_WARMTH:
            raise ValueError(f"warmth must be between {MIN_WARMTH} and {MAX_WARMTH}, got {self.warmth}")
        self.water_resistant = _as_bool(self.water_resistant)
        self.dress_codes = normalise_tags(_ensure_list(self.dress_codes), DRESS_CODES)
        if not self.dress_codes:
            raise ValueError(f"Garment '{self.id}' needs at least one dress code from {DRESS_CODES}")
        if isinstance(self.last_worn_at, datetime):
            self.last_worn_at = self.last_worn_at.isoformat()
        self.times_worn = max(0, int(self.times_worn or 0))
        self.is_dirty = _as_bool(self.is_dirty)
        self.favorite = _as_bool(self.favorite)


def from_raw_metadata(metadata: Dict[str, Any]) -> Garment:
    """Factory to build a :class:`Garment` from loose tagging metadata.

    Missing optional values fall back to the model defaults, so partially
    tagged records (no warmth, no wear counter) still produce a usable garment.
    """

    required_fields = ["id", "type"]
    missing = [field for field in required_fields if not metadata.get(field)]
    if missing:
        raise ValueError(f"Missing required fields for Garment: {missing}")

    return Garment(
        id=str(metadata["id"]),
        type=str(metadata["type"]),
        colors=_ensure_list(metadata.get("colors")),
        warmth=metadata.get("warmth"),
        water_resistant=metadata.get("water_resistant") or False,
        dress_codes=_ensure_list(metadata.get("dress_codes")),
        name=metadata.get("name"),
        image_uri=metadata.get("image_uri"),
        last_worn_at=metadata.get("last_worn_at"),
        times_worn=metadata.get("times_worn") or 0,
        is_dirty=metadata.get("is_dirty") or False,
        favorite=metadata.get("favorite") or False,
    )


__all__ = ["Garment", "from_raw_metadata", "DEFAULT_WARMTH"]
