"""Text rendering of boats for the inventory listing."""

from collections.abc import Iterable

from ..constants import FILE_ENCODING, FILE_ENCODING_ERRORS
from ..domain.entities import Boat, LandInfo, SlipInfo, StorageInfo, TrailerInfo


def printable(text: str) -> str:
    """Replace bytes that were not valid UTF-8 in the file with U+FFFD."""
    return text.encode(FILE_ENCODING, FILE_ENCODING_ERRORS).decode(
        FILE_ENCODING, "replace"
    )


def format_place(boat: Boat) -> str:
    match boat.extra:
        case SlipInfo(slip_number=number):
            return f"   slip   # {number}"
        case LandInfo(bay_letter=letter):
            return f"   land      {letter}"
        case TrailerInfo(license_tag=tag):
            return f" trailor {tag}"
        case StorageInfo(storage_space=space):
            return f" storage   # {space}"


def format_boat(boat: Boat) -> str:
    """One inventory line: name, length, location and balance."""
    return (
        f"{boat.name:<20} {boat.length:>2}' "
        + format_place(boat)
        + f"   Owes ${boat.amount_owed:>8.2f}"
    )


def format_inventory(boats: Iterable[Boat]) -> list[str]:
    return [format_boat(boat) for boat in boats]
