"""Deterministic candidate filtering by cleanliness, dress code, rotation and weather."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from models.garment import DEFAULT_WARMTH, Garment
from models.weather import WeatherTarget

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0
BASE_LAYER_TOLERANCE = 2
OUTERWEAR_TOLERANCE = 1
WATERPROOF_TYPES = {"outerwear", "shoe"}


@dataclass(frozen=True)
class CandidatePools:
    """Per-slot candidate lists plus the reasons garments were dropped.

    ``outerwear`` holds a single ``None`` when the weather does not call for it,
    so the generator can iterate every slot the same way.
    """

    tops: List[Garment]
    bottoms: List[Garment]
    shoes: List[Garment]
    outerwear: List[Optional[Garment]]
    removed: Dict[str, str] = field(default_factory=dict)
    debug: Dict[str, object] = field(default_factory=dict)

    @property
    def outerwear_required(self) -> bool:
        return self.outerwear != [None]

    @property
    def is_viable(self) -> bool:
        return bool(self.tops and self.bottoms and self.shoes)


def parse_timestamp(value: datetime | str | None) -> Optional[datetime]:
    """Parse an ISO-8601 value into an aware datetime; naive values are read as UTC."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def worn_recently(garment: Garment, now: datetime, days_no_repeat: float) -> bool:
    """Return True when the garment was worn less than ``days_no_repeat`` days before ``now``."""

    if not garment.last_worn_at:
        return False
    try:
        last_worn = parse_timestamp(garment.last_worn_at)
    except ValueError:
        logger.warning("Ignoring unparseable last_worn_at %r on garment %s", garment.last_worn_at, garment.id)
        return False
    elapsed_days = (now - last_worn).total_seconds() / SECONDS_PER_DAY
    return elapsed_days < days_no_repeat


def _warmth(garment: Garment) -> int:
    return DEFAULT_WARMTH if garment.warmth is None else garment.warmth


def _times_worn(garment: Garment) -> int:
    return garment.times_worn or 0


def select_slot(pool: List[Garment], garment_type: str, target_warmth: int) -> List[Garment]:
    """Pick garments of one type within the slot's warmth tolerance, least worn first."""

    matching = [garment for garment in pool if garment.type == garment_type]
    if garment_type != "shoe":
        tolerance = OUTERWEAR_TOLERANCE if garment_type == "outerwear" else BASE_LAYER_TOLERANCE
        matching = [garment for garment in matching if abs(_warmth(garment) - target_warmth) <= tolerance]
    return sorted(matching, key=_times_worn)


def filter_candidates(
    garments: List[Garment],
    target: WeatherTarget,
    dress_code: str,
    days_no_repeat: float,
    now: datetime | str | None = None,
) -> CandidatePools:
    """Build per-slot candidate pools for one recommendation request."""

    now_dt = parse_timestamp(now) or datetime.now(timezone.utc)
    removed: Dict[str, str] = {}
    pool: List[Garment] = []

    for garment in garments:
        reason = None
        if garment.is_dirty:
            reason = "dirty"
        elif dress_code not in garment.dress_codes:
            reason = f"not tagged {dress_code}"
        elif worn_recently(garment, now_dt, days_no_repeat):
            reason = f"worn within {days_no_repeat} days"
        elif target.need_waterproof and garment.type in WATERPROOF_TYPES and not garment.water_resistant:
            reason = "not water resistant"
        if reason:
            removed[garment.id] = reason
        else:
            pool.append(garment)

    tops = select_slot(pool, "top", target.top_warmth)
    bottoms = select_slot(pool, "bottom", target.bottom_warmth)
    shoes = select_slot(pool, "shoe", target.shoe_warmth)
    outerwear: List[Optional[Garment]] = (
        list(select_slot(pool, "outerwear", target.outer_warmth)) if target.outer_required else [None]
    )

    debug = {
        "input_count": len(garments),
        "eligible_count": len(pool),
        "removed_count": len(removed),
        "dress_code": dress_code,
        "days_no_repeat": days_no_repeat,
        "outerwear_required": target.outer_required,
        "need_waterproof": target.need_waterproof,
        "slot_counts": {
            "top": len(tops),
            "bottom": len(bottoms),
            "shoe": len(shoes),
            "outerwear": len([g for g in outerwear if g is not None]),
        },
    }
    logger.info("Candidate pools built: %s", debug["slot_counts"])
    return CandidatePools(
        tops=tops,
        bottoms=bottoms,
        shoes=shoes,
        outerwear=outerwear,
        removed=removed,
        debug=debug,
    )


__all__ = [
    "CandidatePools",
    "filter_candidates",
    "parse_timestamp",
    "select_slot",
    "worn_recently",
]
