"""
Test boat entity construction and validation.

Tests that:
1. The place of a boat follows its extra info variant
2. Names that cannot be stored in a record are rejected
3. Valid Unicode names are accepted
"""

from decimal import Decimal

import pytest

from marina.domain.entities import (
    Boat,
    LandInfo,
    PlaceKind,
    SlipInfo,
    StorageInfo,
    TrailerInfo,
)
from marina.domain.exceptions import ValidationError


def test_place_follows_extra_variant():
    assert Boat("a", 1, SlipInfo(1)).place is PlaceKind.SLIP
    assert Boat("b", 1, LandInfo("A")).place is PlaceKind.LAND
    assert Boat("c", 1, TrailerInfo("T1")).place is PlaceKind.TRAILER
    assert Boat("d", 1, StorageInfo(3)).place is PlaceKind.STORAGE


def test_default_amount_owed_is_zero():
    assert Boat("Fresh", 10, SlipInfo(2)).amount_owed == Decimal("0.00")


def test_place_kind_from_name():
    assert PlaceKind.from_name("STORAGE") is PlaceKind.STORAGE
    assert PlaceKind.from_name("trailor") is PlaceKind.TRAILER
    assert PlaceKind.from_name("trailer") is None


def test_boat_name_validation():
    """Test that names unusable in a record are rejected."""
    problematic_names = [
        "",  # Empty
        "N" * 128,  # Too long
        "Left,Right",  # Field delimiter
        "line\nbreak",  # Newline
        "carriage\rreturn",  # Carriage return
    ]

    for name in problematic_names:
        with pytest.raises(ValidationError):
            Boat(name, 20, SlipInfo(1))

    # Test valid Unicode characters - should succeed
    valid_unicode_names = [
        "Café del Mar",
        "Müller's Yacht",
        "José",
        "N" * 127,
    ]

    for name in valid_unicode_names:
        assert Boat(name, 20, SlipInfo(1)).name == name


def test_extra_info_validation():
    with pytest.raises(ValidationError):
        LandInfo("AB")
    with pytest.raises(ValidationError):
        TrailerInfo("T" * 16)
    assert TrailerInfo("T" * 15).license_tag == "T" * 15
