"""Lightweight color harmony helpers for outfit scoring."""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from models.taxonomy import normalize_color_name

logger = logging.getLogger(__name__)

NEUTRALS: FrozenSet[str] = frozenset(
    {
        "black",
        "white",
        "gray",
        "grey",
        "navy",
        "tan",
        "beige",
        "olive",
        "khaki",
        "denim",
        "cream",
        "brown",
    }
)

# Near-synonymous hues grouped for complementary and same-family checks.
COLOR_FAMILIES: Dict[str, FrozenSet[str]] = {
    "blue": frozenset({"blue", "lightblue", "navy", "teal", "turquoise", "cyan"}),
    "orange": frozenset({"orange", "rust", "coral", "amber"}),
    "red": frozenset({"red", "maroon", "burgundy", "pink"}),
    "green": frozenset({"green", "olive", "forest"}),
    "yellow": frozenset({"yellow", "mustard", "gold"}),
    "purple": frozenset({"purple", "violet", "lilac", "magenta"}),
}

COMPLEMENTARY_FAMILIES: Tuple[Tuple[str, str], ...] = (
    ("blue", "orange"),
    ("red", "green"),
    ("yellow", "purple"),
)

_FAMILY_BY_COLOR: Dict[str, str] = {
    color: family for family, members in COLOR_FAMILIES.items() for color in members
}


def _normalise_colors(colors: Iterable[str]) -> List[str]:
    return [normalize_color_name(color) for color in colors if color]


def is_neutral(color: str) -> bool:
    return normalize_color_name(color) in NEUTRALS


def color_family(color: str) -> Optional[str]:
    """Return the family bucket a color belongs to, or None for unbucketed colors."""

    return _FAMILY_BY_COLOR.get(normalize_color_name(color))


def split_neutrals(colors: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split colors into (neutrals, accents), preserving order."""

    neutrals: List[str] = []
    accents: List[str] = []
    for color in _normalise_colors(colors):
        (neutrals if color in NEUTRALS else accents).append(color)
    return neutrals, accents


def has_complementary_pair(colors: Iterable[str]) -> bool:
    """Return True when the colors cover both families of a complementary pair.

    Neutrals take part here: navy counts toward blue and olive toward green.
    """

    families = {_FAMILY_BY_COLOR.get(color) for color in _normalise_colors(colors)}
    result = any(first in families and second in families for first, second in COMPLEMENTARY_FAMILIES)
    logger.debug("complementary check %s -> %s", sorted(f for f in families if f), result)
    return result


def same_family(colors: Iterable[str]) -> bool:
    """Return True when the accent colors fall into exactly one family bucket.

    Trivially True with at most one distinct accent. Accents outside every
    bucket are skipped, so teal and silver still count as one family.
    """

    _, accents = split_neutrals(colors)
    distinct = set(accents)
    if len(distinct) <= 1:
        return True
    families = {family for color in distinct if (family := _FAMILY_BY_COLOR.get(color))}
    result = len(families) == 1
    logger.debug("same family check %s -> %s", sorted(distinct), result)
    return result


__all__ = [
    "NEUTRALS",
    "COLOR_FAMILIES",
    "COMPLEMENTARY_FAMILIES",
    "is_neutral",
    "color_family",
    "split_neutrals",
    "has_complementary_pair",
    "same_family",
]
