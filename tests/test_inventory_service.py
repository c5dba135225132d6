from decimal import Decimal
from pathlib import Path

import pytest

from marina.application.inventory_service import (
    add_boat_from_line,
    find_boat,
    open_inventory,
    remove_boat,
    save_inventory,
)
from marina.domain.exceptions import (
    BoatNotFoundError,
    CapacityExceededError,
    DuplicateNameError,
    IncompleteRecordError,
    PersistenceError,
    UnknownPlaceKindError,
)
from marina.domain.registry import BoatRegistry


def test_open_inventory_sorts_loaded_boats(tmp_path: Path):
    """Test loading a small inventory.

    Covers:
    - Records load into name order regardless of file order
    - Comparison ignores case
    """
    path = tmp_path / "boats.csv"
    path.write_text("bob,30,land,A,50.00\nAlice,20,slip,5,100.00\n", encoding="utf-8")

    registry = open_inventory(path)

    assert registry.size() == 2
    assert [boat.name for boat in registry.all()] == ["Alice", "bob"]


def test_open_inventory_missing_file(tmp_path: Path):
    registry = open_inventory(tmp_path / "new.csv", capacity=5)

    assert registry.size() == 0
    assert registry.capacity == 5


def test_open_inventory_skips_duplicate_names(tmp_path: Path):
    path = tmp_path / "boats.csv"
    path.write_text(
        "Osprey,28,trailor,ABC123,40.50\nOSPREY,10,slip,2,1.00\n", encoding="utf-8"
    )

    registry = open_inventory(path)

    assert registry.size() == 1
    assert registry.get("osprey").amount_owed == Decimal("40.50")


def test_open_inventory_respects_capacity(data_file: Path):
    registry = open_inventory(data_file, capacity=2)

    # First two records in file order, then sorted
    assert [boat.name for boat in registry.all()] == ["Big Brother", "Moon Glow"]


def test_add_boat_from_line(registry: BoatRegistry):
    boat = add_boat_from_line(registry, "Aardvark,15,storage,3,0.00")

    assert boat.name == "Aardvark"
    assert registry.find_by_name("aardvark") == 0
    assert registry.size() == 5


def test_add_boat_rejects_bad_records(registry: BoatRegistry):
    with pytest.raises(IncompleteRecordError):
        add_boat_from_line(registry, "OnlyName,40")
    with pytest.raises(UnknownPlaceKindError):
        add_boat_from_line(registry, "Drifter,20,dock,1,0.00")
    assert registry.size() == 4


def test_add_boat_rejects_duplicate(registry: BoatRegistry):
    with pytest.raises(DuplicateNameError):
        add_boat_from_line(registry, "big brother,21,slip,1,0.00")
    assert registry.get("Big Brother").length == 20


def test_add_boat_checks_capacity_before_decoding():
    registry = BoatRegistry(capacity=1)
    add_boat_from_line(registry, "Solo,10,slip,1,0.00")

    # Even an undecodable line reports the full marina first
    with pytest.raises(CapacityExceededError):
        add_boat_from_line(registry, "garbage")


def test_find_and_remove_boat(registry: BoatRegistry):
    assert find_boat(registry, "KNOT AGAIN").name == "Knot Again"

    removed = remove_boat(registry, "knot again")

    assert removed.name == "Knot Again"
    with pytest.raises(BoatNotFoundError):
        find_boat(registry, "Knot Again")
    with pytest.raises(BoatNotFoundError):
        remove_boat(registry, "Knot Again")


def test_save_inventory_writes_sorted_records(tmp_path: Path, data_file: Path):
    registry = open_inventory(data_file)
    path = tmp_path / "saved.csv"

    count = save_inventory(path, registry)

    assert count == 4
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Big Brother,20,slip,27,1200.00",
        "Knot Again,22,storage,12,95.80",
        "Moon Glow,18,land,B,0.00",
        "Osprey,28,trailor,ABC123,40.50",
    ]


def test_save_inventory_reraises_persistence_error(
    tmp_path: Path, registry: BoatRegistry
):
    with pytest.raises(PersistenceError):
        save_inventory(tmp_path / "no-such-dir" / "boats.csv", registry)


def test_open_inventory_duplicates_do_not_use_capacity(tmp_path: Path):
    """Test that a skipped duplicate leaves room for later records.

    Covers:
    - A repeated name is dropped
    - The next distinct record still fills the freed place
    """
    path = tmp_path / "boats.csv"
    path.write_text(
        "Alpha,10,slip,1,0.00\nALPHA,10,slip,2,0.00\nBravo,10,slip,3,0.00\n"
        "Charlie,10,slip,4,0.00\n",
        encoding="utf-8",
    )

    registry = open_inventory(path, capacity=2)

    assert [boat.name for boat in registry.all()] == ["Alpha", "Bravo"]


def test_open_inventory_unreadable_path_starts_empty(tmp_path: Path):
    registry = open_inventory(tmp_path)

    assert registry.size() == 0


def test_open_inventory_then_save_keeps_non_utf8_names(tmp_path: Path):
    path = tmp_path / "boats.csv"
    path.write_bytes(b"zed,1,slip,1,0.00\nCaf\xe9,20,slip,5,1.00\n")

    registry = open_inventory(path)
    save_inventory(path, registry)

    assert registry.size() == 2
    assert path.read_bytes() == b"Caf\xe9,20,slip,5,1.00\nzed,1,slip,1,0.00\n"
