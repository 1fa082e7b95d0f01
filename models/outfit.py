"""Outfit suggestion and wear log schemas."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from models.garment import Garment


@dataclass
class OutfitSuggestion:
    """One suggested outfit; every slot references a garment from the input closet."""

    top: Garment
    bottom: Garment
    shoe: Garment
    outerwear: Optional[Garment] = None

    @property
    def items(self) -> List[Garment]:
        pieces = [self.top, self.bottom, self.outerwear, self.shoe]
        return [piece for piece in pieces if piece is not None]

    @property
    def key(self) -> Tuple[str, str, str]:
        """Identity used to spot repeated suggestions; outerwear is not part of it."""

        return (self.top.id, self.bottom.id, self.shoe.id)

    @property
    def garment_ids(self) -> List[str]:
        return [item.id for item in self.items]


@dataclass
class WearLogEntry:
    log_id: str
    garment_ids: List[str]
    worn_at: str
    weather: Optional[Dict[str, object]] = None
    dress_code: Optional[str] = None
