"""Instrumented dict-in/dict-out wrappers around closet storage."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from logic.validation import GarmentCreate, LaundryRequest, WearLogRequest
from tools.observability import instrument_tool
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore


def _default_store() -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore()


class WardrobeTools:
    """Thin wrapper exposing WardrobeStore operations with validation and logging."""

    def __init__(self, store: Optional[WardrobeStore] = None) -> None:
        self.store = store or _default_store()

    @instrument_tool("add_garment", input_model=GarmentCreate)
    def add_garment(self, **item_data: Any) -> Dict[str, Any]:
        garment_id = self.store.add_garment(item_data)
        stored = self.store.get_garment(garment_id)
        return asdict(stored)

    @instrument_tool("get_garment")
    def get_garment(self, garment_id: str) -> Optional[Dict[str, Any]]:
        garment = self.store.get_garment(garment_id)
        return asdict(garment) if garment else None

    @instrument_tool("list_garments")
    def list_garments(self) -> List[Dict[str, Any]]:
        return [asdict(garment) for garment in self.store.get_all_garments()]

    @instrument_tool("update_garment")
    def update_garment(self, garment_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        updated = self.store.update_garment(garment_id, fields)
        return asdict(updated) if updated else None

    @instrument_tool("delete_garment")
    def delete_garment(self, garment_id: str) -> bool:
        return self.store.delete_garment(garment_id)

    @instrument_tool("log_wear", input_model=WearLogRequest)
    def log_wear(
        self,
        garment_ids: List[str],
        dress_code: Optional[str] = None,
        weather: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        entry = self.store.log_wear(garment_ids, {"dress_code": dress_code, "weather": weather})
        return asdict(entry)

    @instrument_tool("list_wear_logs")
    def list_wear_logs(self, limit: int = 50) -> List[Dict[str, Any]]:
        return [asdict(entry) for entry in self.store.list_wear_logs(limit)]

    @instrument_tool("mark_clean", input_model=LaundryRequest)
    def mark_clean(self, garment_ids: List[str]) -> int:
        return self.store.mark_clean(garment_ids)

    @instrument_tool("list_laundry")
    def list_laundry(self) -> List[Dict[str, Any]]:
        return [asdict(garment) for garment in self.store.list_dirty_garments()]


__all__ = ["WardrobeTools"]
