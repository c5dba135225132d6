"""Record codec for the inventory file.

One boat per line, five comma-separated fields::

    name,length,place,extra,amount_owed

Numeric fields are parsed permissively: the leading numeric part of the
text is used and text without one reads as zero. Only a missing field or
an unknown place name makes a line undecodable.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Final

from ...domain.constants import (
    FIELD_DELIMITER,
    MAX_NAME_LENGTH,
    MAX_TRAILER_TAG_LENGTH,
    RECORD_FIELD_COUNT,
)
from ...domain.entities import (
    Boat,
    ExtraInfo,
    LandInfo,
    PlaceKind,
    SlipInfo,
    StorageInfo,
    TrailerInfo,
)
from ...domain.exceptions import IncompleteRecordError, UnknownPlaceKindError

CENT: Final = Decimal("0.01")

_INT_PREFIX: Final = re.compile(r"\s*([+-]?\d+)")
_DECIMAL_PREFIX: Final = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_int(text: str) -> int:
    """Parse the leading integer of text, or 0 if there is none."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # more digits than int() accepts from a string
        return 0


def parse_decimal(text: str) -> Decimal:
    """Parse the leading decimal number of text, rounded to cents.

    Text without a number, or whose value cannot be held to the cent,
    reads as 0.
    """
    match = _DECIMAL_PREFIX.match(text)
    if not match:
        return Decimal("0")
    try:
        return Decimal(match.group(1)).quantize(CENT)
    except InvalidOperation:
        return Decimal("0")


def _decode_extra(place: PlaceKind, text: str) -> ExtraInfo:
    match place:
        case PlaceKind.SLIP:
            return SlipInfo(slip_number=parse_int(text))
        case PlaceKind.LAND:
            return LandInfo(bay_letter=text[0])
        case PlaceKind.TRAILER:
            return TrailerInfo(license_tag=text[:MAX_TRAILER_TAG_LENGTH])
        case PlaceKind.STORAGE:
            return StorageInfo(storage_space=parse_int(text))


def _encode_extra(extra: ExtraInfo) -> str:
    match extra:
        case SlipInfo(slip_number=number):
            return str(number)
        case LandInfo(bay_letter=letter):
            return letter
        case TrailerInfo(license_tag=tag):
            return tag
        case StorageInfo(storage_space=space):
            return str(space)


def decode(line: str) -> Boat:
    """Build a Boat from one record line.

    Args:
        line: A record without its line terminator

    Raises:
        IncompleteRecordError: If fewer than five non-empty fields are present
        UnknownPlaceKindError: If the place field is not a known place name
    """
    fields: Final = line.split(FIELD_DELIMITER)[:RECORD_FIELD_COUNT]
    if len(fields) < RECORD_FIELD_COUNT or not all(fields):
        raise IncompleteRecordError(
            f"Expected {RECORD_FIELD_COUNT} fields, got "
            + f"{len([f for f in fields if f])}",
            line,
        )

    name, length, place_name, extra, amount_owed = fields

    place: Final = PlaceKind.from_name(place_name)
    if place is None:
        raise UnknownPlaceKindError(f"Unknown place '{place_name}'", line)

    return Boat(
        name=name[:MAX_NAME_LENGTH],
        length=parse_int(length),
        extra=_decode_extra(place, extra),
        amount_owed=parse_decimal(amount_owed),
    )


def encode(boat: Boat) -> str:
    """Serialize a Boat to its record line, without a line terminator."""
    return FIELD_DELIMITER.join(
        [
            boat.name,
            str(boat.length),
            boat.place.value,
            _encode_extra(boat.extra),
            f"{boat.amount_owed:.2f}",
        ]
    )
