"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from models.color_theory import NEUTRALS, has_complementary_pair, same_family
from models.garment import Garment

NEUTRAL_BASE_BONUS = 3
SINGLE_ACCENT_BONUS = 2
COMPLEMENTARY_BONUS = 2
SAME_FAMILY_BONUS = 2
CLUTTER_PENALTY = -3
SHOE_NEUTRAL_BONUS = 2
SHOE_ACCENT_BONUS = 1
FAVORITE_BONUS = 2
ROTATION_CEILING = 3


@dataclass(frozen=True)
class OutfitScore:
    """Style and rotation components plus the rules that fired."""

    style: int
    rotation: int
    rules: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.style + self.rotation


def _pooled_colors(items: Iterable[Garment]) -> List[str]:
    pooled: List[str] = []
    for item in items:
        for color in item.colors:
            key = color.lower()
            if key not in pooled:
                pooled.append(key)
    return pooled


def _style_rules(items: List[Garment]) -> List[Tuple[str, int]]:
    colors = _pooled_colors(items)
    neutrals = [color for color in colors if color in NEUTRALS]
    accents = [color for color in colors if color not in NEUTRALS]

    fired = []
    if len(neutrals) >= 2:
        fired.append(("neutral_base", NEUTRAL_BASE_BONUS))
    if len(accents) == 1:
        fired.append(("single_accent", SINGLE_ACCENT_BONUS))
    if has_complementary_pair(colors):
        fired.append(("complementary", COMPLEMENTARY_BONUS))
    if same_family(colors):
        fired.append(("same_family", SAME_FAMILY_BONUS))
    if len(accents) > 2:
        fired.append(("clutter", CLUTTER_PENALTY))

    shoe: Optional[Garment] = next((item for item in items if item.type == "shoe"), None)
    if shoe is not None:
        shoe_colors = [color.lower() for color in shoe.colors]
        if any(color in NEUTRALS for color in shoe_colors):
            fired.append(("shoe_neutral", SHOE_NEUTRAL_BONUS))
        if any(color not in NEUTRALS for color in shoe_colors):
            fired.append(("shoe_accent", SHOE_ACCENT_BONUS))

    for item in items:
        if item.favorite:
            fired.append((f"favorite:{item.id}", FAVORITE_BONUS))
    return fired


def style_score(items: List[Garment]) -> int:
    """Color coherence score for a concrete outfit (missing slots already removed)."""

    return sum(points for _, points in _style_rules(items))


def rotation_bonus(items: List[Garment]) -> int:
    """Reward rarely worn items; saturates at zero once an item is worn three times."""

    return sum(max(0, ROTATION_CEILING - (item.times_worn or 0)) for item in items)


def score_outfit(items: List[Optional[Garment]]) -> OutfitScore:
    """Score an outfit; ``None`` slots are ignored."""

    concrete = [item for item in items if item is not None]
    fired = _style_rules(concrete)
    return OutfitScore(
        style=sum(points for _, points in fired),
        rotation=rotation_bonus(concrete),
        rules=[name for name, _ in fired],
    )


__all__ = ["OutfitScore", "score_outfit", "style_score", "rotation_bonus"]
