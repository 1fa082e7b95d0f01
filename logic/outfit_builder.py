"""Outfit suggestion pipeline: filter, generate, score and diversify."""
from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Set, Tuple

from logic.candidate_filter import CandidatePools, filter_candidates, parse_timestamp
from logic.outfit_scoring import score_outfit
from logic.weather_targets import derive_target
from models.garment import Garment
from models.outfit import OutfitSuggestion
from models.weather import Weather

logger = logging.getLogger(__name__)

DEFAULT_DAYS_NO_REPEAT = 2
DEFAULT_MAX_RESULTS = 3

Combination = Tuple[Garment, Garment, Optional[Garment], Garment]


@dataclass(frozen=True)
class SuggestionOptions:
    dress_code: str
    days_no_repeat: float = DEFAULT_DAYS_NO_REPEAT
    now: datetime | str | None = None


@dataclass(frozen=True)
class GenerationLimits:
    """Tunable bounds on combinatorial expansion and ranking noise.

    The per-slot caps only apply to the diversified pass; the fallback pass
    expands the full candidate pools.
    """

    candidate_cap: int = 5
    outerwear_cap: int = 3
    jitter: float = 2.0


@dataclass(frozen=True)
class SuggestionResult:
    suggestions: List[OutfitSuggestion]
    diagnostics: Dict[str, object] = field(default_factory=dict)


def _unused(items: Sequence[Optional[Garment]], used: Set[str]) -> List[Optional[Garment]]:
    return [item for item in items if item is None or item.id not in used]


def _combinations(
    tops: Sequence[Garment],
    bottoms: Sequence[Garment],
    outerwear: Sequence[Optional[Garment]],
    shoes: Sequence[Garment],
) -> List[Combination]:
    return [
        (top, bottom, outer, shoe)
        for top, bottom, shoe, outer in itertools.product(tops, bottoms, shoes, outerwear)
    ]


def _to_suggestion(combo: Combination) -> OutfitSuggestion:
    top, bottom, outer, shoe = combo
    return OutfitSuggestion(top=top, bottom=bottom, shoe=shoe, outerwear=outer)


class OutfitRecommender:
    """Stateless outfit engine configured with a random source and generation limits."""

    def __init__(self, rng: random.Random | None = None, limits: GenerationLimits | None = None) -> None:
        self.rng = rng or random.Random()
        self.limits = limits or GenerationLimits()

    def _rank(self, combos: List[Combination]) -> List[Tuple[float, Combination]]:
        scored = [
            (score_outfit(list(combo)).total + self.rng.random() * self.limits.jitter, combo)
            for combo in combos
        ]
        scored.sort(key=lambda entry: entry[0], reverse=True)
        return scored

    def _diversified(self, pools: CandidatePools, max_results: int) -> Tuple[List[OutfitSuggestion], int]:
        suggestions: List[OutfitSuggestion] = []
        used: Dict[str, Set[str]] = {"top": set(), "bottom": set(), "shoe": set(), "outerwear": set()}
        scored_count = 0
        cap = self.limits.candidate_cap

        for _ in range(max_results):
            tops = _unused(pools.tops, used["top"])
            bottoms = _unused(pools.bottoms, used["bottom"])
            shoes = _unused(pools.shoes, used["shoe"])
            outers = _unused(pools.outerwear, used["outerwear"])
            if not (tops and bottoms and shoes and outers):
                logger.info("Diversified pass stopped after %s suggestions: a slot ran out", len(suggestions))
                break

            combos = _combinations(tops[:cap], bottoms[:cap], outers[: self.limits.outerwear_cap], shoes[:cap])
            scored_count += len(combos)
            _, best = self._rank(combos)[0]
            suggestion = _to_suggestion(best)
            suggestions.append(suggestion)

            used["top"].add(suggestion.top.id)
            used["bottom"].add(suggestion.bottom.id)
            used["shoe"].add(suggestion.shoe.id)
            if suggestion.outerwear is not None:
                used["outerwear"].add(suggestion.outerwear.id)
        return suggestions, scored_count

    def _fill(
        self, pools: CandidatePools, suggestions: List[OutfitSuggestion], max_results: int
    ) -> Tuple[List[OutfitSuggestion], int]:
        combos = _combinations(pools.tops, pools.bottoms, pools.outerwear, pools.shoes)
        seen = {suggestion.key for suggestion in suggestions}
        filled = list(suggestions)
        for _, combo in self._rank(combos):
            if len(filled) >= max_results:
                break
            candidate = _to_suggestion(combo)
            if candidate.key in seen:
                continue
            filled.append(candidate)
            seen.add(candidate.key)
        return filled, len(combos)

    def suggest_with_diagnostics(
        self,
        garments: List[Garment],
        weather: Weather,
        options: SuggestionOptions,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> SuggestionResult:
        """Return ranked, diversified suggestions along with filtering diagnostics."""

        now = parse_timestamp(options.now) or datetime.now(timezone.utc)
        target = derive_target(weather)
        pools = filter_candidates(garments, target, options.dress_code, options.days_no_repeat, now)
        diagnostics: Dict[str, object] = {
            "target": target,
            "filter": pools.debug,
            "removed": pools.removed,
            "combinations_scored": 0,
            "fallback_used": False,
        }

        if max_results <= 0 or not pools.is_viable:
            diagnostics["reason"] = "missing_required_slots" if not pools.is_viable else "no_results_requested"
            logger.info("No suggestions possible: %s", diagnostics["reason"])
            return SuggestionResult(suggestions=[], diagnostics=diagnostics)

        suggestions, scored = self._diversified(pools, max_results)
        diagnostics["combinations_scored"] = scored
        if len(suggestions) < max_results:
            suggestions, scored = self._fill(pools, suggestions, max_results)
            diagnostics["combinations_scored"] = int(diagnostics["combinations_scored"]) + scored
            diagnostics["fallback_used"] = True

        diagnostics["chosen"] = [suggestion.garment_ids for suggestion in suggestions]
        logger.info("Generated %s outfit suggestions", len(suggestions))
        return SuggestionResult(suggestions=suggestions[:max_results], diagnostics=diagnostics)

    def suggest(
        self,
        garments: List[Garment],
        weather: Weather,
        options: SuggestionOptions,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> List[OutfitSuggestion]:
        return self.suggest_with_diagnostics(garments, weather, options, max_results).suggestions


def suggest_outfits(
    garments: List[Garment],
    weather: Weather,
    options: SuggestionOptions,
    max_results: int = DEFAULT_MAX_RESULTS,
    rng: random.Random | None = None,
) -> List[OutfitSuggestion]:
    """Suggest up to ``max_results`` complete outfits for the weather and dress code.

    Returns an empty or short list when the closet cannot fill every slot;
    under-supply is never an error.
    """

    return OutfitRecommender(rng=rng).suggest(garments, weather, options, max_results)


__all__ = [
    "GenerationLimits",
    "OutfitRecommender",
    "SuggestionOptions",
    "SuggestionResult",
    "suggest_outfits",
]
