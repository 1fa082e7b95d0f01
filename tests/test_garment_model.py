"""Garment model, taxonomy and color helper tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models import taxonomy
from models.color_theory import color_family, has_complementary_pair, is_neutral, same_family, split_neutrals
from models.garment import Garment, from_raw_metadata


@pytest.fixture()
def sample_metadata() -> Dict[str, object]:
    return {
        "id": "g-1",
        "type": "Top",
        "name": "Oxford shirt",
        "colors": ["Navy Blue", "white"],
        "warmth": 2,
        "water_resistant": 0,
        "dress_codes": ["Smart Casual", "business"],
    }


def test_taxonomy_contains_expected_labels() -> None:
    assert set(taxonomy.GARMENT_TYPES) == {"top", "bottom", "outerwear", "shoe", "accessory"}
    assert set(taxonomy.DRESS_CODES) == {"casual", "smart_casual", "business", "sport"}


def test_validate_garment_type_accepts_aliases() -> None:
    assert taxonomy.validate_garment_type("Shoes") == "shoe"
    assert taxonomy.validate_garment_type("outerwear") == "outerwear"
    with pytest.raises(ValueError):
        taxonomy.validate_garment_type("hat")


def test_normalize_color_name_handles_variants() -> None:
    assert taxonomy.normalize_color_name("navy blue") == "navy"
    assert taxonomy.normalize_color_name("  Light   Blue ") == "lightblue"
    assert taxonomy.normalize_color_name("Teal") == "teal"


def test_garment_construction_normalises_fields(sample_metadata: Dict[str, object]) -> None:
    garment = from_raw_metadata(sample_metadata)
    assert garment.type == "top"
    assert garment.colors == ["navy", "white"]
    assert garment.dress_codes == ["smart_casual", "business"]
    assert garment.water_resistant is False
    assert garment.times_worn == 0
    assert garment.is_dirty is False
    assert garment.favorite is False
    assert garment.last_worn_at is None


def test_missing_optional_values_fall_back_to_defaults(sample_metadata: Dict[str, object]) -> None:
    """Partially tagged records still produce usable garments."""

    raw = {**sample_metadata, "warmth": None, "times_worn": None, "favorite": None, "is_dirty": None}
    garment = from_raw_metadata(raw)
    assert garment.warmth == 2
    assert garment.times_worn == 0
    assert garment.favorite is False
    assert garment.is_dirty is False


def test_invalid_garments_raise(sample_metadata: Dict[str, object]) -> None:
    with pytest.raises(ValueError):
        from_raw_metadata({**sample_metadata, "warmth": 7})
    with pytest.raises(ValueError):
        from_raw_metadata({**sample_metadata, "dress_codes": ["gala"]})
    with pytest.raises(ValueError):
        from_raw_metadata({**sample_metadata, "id": ""})


def test_flags_accept_sqlite_integers() -> None:
    garment = Garment(id="b", type="shoe", colors=["black"], dress_codes=["casual"], water_resistant=1, is_dirty=0)
    assert garment.water_resistant is True
    assert garment.is_dirty is False


def test_neutral_and_family_lookup() -> None:
    assert is_neutral("Grey")
    assert not is_neutral("teal")
    assert color_family("navy") == "blue"
    assert color_family("mustard") == "yellow"
    assert color_family("silver") is None
    assert split_neutrals(["white", "red", "navy"]) == (["white", "navy"], ["red"])


def test_complementary_pairs_use_family_buckets() -> None:
    assert has_complementary_pair(["navy", "coral"])
    assert has_complementary_pair(["burgundy", "olive"])
    assert has_complementary_pair(["gold", "lilac"])
    assert not has_complementary_pair(["red", "orange"])
    assert not has_complementary_pair(["white", "black"])


def test_same_family_rule() -> None:
    assert same_family(["white", "black"])
    assert same_family(["navy", "blue", "white"])
    assert same_family(["blue", "teal", "turquoise"])
    assert not same_family(["red", "blue"])


def test_same_family_skips_unbucketed_accents() -> None:
    assert same_family(["teal", "silver"])
    assert same_family(["blue", "silver", "white"])
    assert not same_family(["silver", "lavender-grey"])
    assert not same_family(["teal", "silver", "coral"])
