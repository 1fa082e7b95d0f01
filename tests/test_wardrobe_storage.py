"""Closet storage, wear logging and laundry tests."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict

import pytest
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from tools.sample_data import SAMPLE_GARMENTS, seed_sample_closet
from tools.wardrobe_store import GarmentNotFoundError, SQLiteWardrobeStore
from tools.wardrobe_tools import WardrobeTools


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "closet.db")


@pytest.fixture()
def outfit_ids(store: SQLiteWardrobeStore) -> Dict[str, str]:
    return {
        "top": store.add_garment({"id": "top", "type": "top", "colors": ["white"], "dress_codes": ["casual"]}),
        "bottom": store.add_garment(
            {"id": "bottom", "type": "bottom", "colors": ["navy"], "dress_codes": ["casual"]}
        ),
        "shoe": store.add_garment({"id": "shoe", "type": "shoe", "colors": ["white"], "dress_codes": ["casual"]}),
    }


def test_add_and_get_round_trip(store: SQLiteWardrobeStore) -> None:
    garment_id = store.add_garment(
        {
            "type": "outerwear",
            "name": "Rain shell",
            "colors": ["Olive Green"],
            "warmth": 4,
            "water_resistant": True,
            "dress_codes": ["casual", "sport"],
            "favorite": True,
        }
    )

    stored = store.get_garment(garment_id)
    assert stored is not None
    assert stored.id == garment_id
    assert stored.type == "outerwear"
    assert stored.colors == ["olive"]
    assert stored.warmth == 4
    assert stored.water_resistant is True
    assert stored.dress_codes == ["casual", "sport"]
    assert stored.favorite is True
    assert stored.times_worn == 0
    assert stored.is_dirty is False
    assert stored.last_worn_at is None


def test_get_missing_garment_returns_none(store: SQLiteWardrobeStore) -> None:
    assert store.get_garment("nope") is None
    assert store.update_garment("nope", {"warmth": 3}) is None
    assert store.delete_garment("nope") is False


def test_update_keeps_id_and_revalidates(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    updated = store.update_garment(outfit_ids["top"], {"id": "other", "warmth": 3, "colors": ["Navy Blue"]})

    assert updated is not None
    assert updated.id == "top"
    assert store.get_garment("top").warmth == 3
    assert store.get_garment("top").colors == ["navy"]
    assert store.get_garment("other") is None

    with pytest.raises(ValueError):
        store.update_garment(outfit_ids["top"], {"warmth": 9})
    with pytest.raises(ValueError):
        store.update_garment(outfit_ids["top"], {"type": None})
    assert store.get_garment("top").warmth == 3
    assert store.get_garment("top").type == "top"


def test_garments_listed_least_worn_first(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    store.log_wear([outfit_ids["top"]])
    store.log_wear([outfit_ids["top"], outfit_ids["bottom"]])

    assert [garment.id for garment in store.get_all_garments()] == ["shoe", "bottom", "top"]


def test_log_wear_updates_counters_and_laundry(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    entry = store.log_wear(list(outfit_ids.values()), {"dress_code": "casual", "weather": {"temp_c": 18.0}})

    top = store.get_garment("top")
    shoe = store.get_garment("shoe")
    assert top.times_worn == 1
    assert top.is_dirty is True
    assert top.last_worn_at == entry.worn_at
    assert shoe.times_worn == 1
    assert shoe.is_dirty is False
    assert [garment.id for garment in store.list_dirty_garments()] == ["bottom", "top"]

    logs = store.list_wear_logs()
    assert len(logs) == 1
    assert logs[0].garment_ids == ["top", "bottom", "shoe"]
    assert logs[0].dress_code == "casual"
    assert logs[0].weather == {"temp_c": 18.0}


def test_log_wear_counts_duplicate_ids_once(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    entry = store.log_wear(["top", "top"])

    assert entry.garment_ids == ["top"]
    assert store.get_garment("top").times_worn == 1


def test_log_wear_with_unknown_id_changes_nothing(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    with pytest.raises(GarmentNotFoundError) as excinfo:
        store.log_wear(["top", "ghost"])

    assert excinfo.value.garment_ids == ["ghost"]
    top = store.get_garment("top")
    assert top.times_worn == 0
    assert top.is_dirty is False
    assert store.list_wear_logs() == []


def test_concurrent_wear_logging_loses_no_updates(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(lambda _: store.log_wear(["shoe"]), range(20)))

    assert store.get_garment("shoe").times_worn == 20
    assert len(store.list_wear_logs(limit=100)) == 20


def test_mark_clean_returns_changed_count(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    store.log_wear(list(outfit_ids.values()))

    assert store.mark_clean(["top", "shoe", "ghost"]) == 1
    assert [garment.id for garment in store.list_dirty_garments()] == ["bottom"]


def test_clear_all_empties_store(store: SQLiteWardrobeStore, outfit_ids: Dict[str, str]) -> None:
    store.log_wear(["top"])
    store.clear_all()

    assert store.get_all_garments() == []
    assert store.list_wear_logs() == []


def test_seed_sample_closet(store: SQLiteWardrobeStore) -> None:
    assert seed_sample_closet(store) == len(SAMPLE_GARMENTS)
    types = {garment.type for garment in store.get_all_garments()}
    assert {"top", "bottom", "shoe", "outerwear"} <= types


def test_wardrobe_tools_validate_and_return_dicts(store: SQLiteWardrobeStore) -> None:
    tools = WardrobeTools(store=store)

    created = tools.add_garment(type="Shoes", colors=["black"], dress_codes=["Business"], water_resistant=True)
    assert created["type"] == "shoe"
    assert created["dress_codes"] == ["business"]
    assert tools.get_garment(created["id"])["water_resistant"] is True
    assert [item["id"] for item in tools.list_garments()] == [created["id"]]

    with pytest.raises(ValidationError):
        tools.add_garment(type="top", colors=[], dress_codes=["casual"])

    logged = tools.log_wear(garment_ids=[created["id"]], dress_code="business")
    assert logged["garment_ids"] == [created["id"]]
    assert tools.list_wear_logs()[0]["log_id"] == logged["log_id"]
    assert tools.list_laundry() == []
    assert tools.delete_garment(created["id"]) is True
