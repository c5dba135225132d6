"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from .constants import FIELD_DELIMITER, MAX_NAME_LENGTH, MAX_TRAILER_TAG_LENGTH
from .exceptions import ValidationError


class PlaceKind(Enum):
    """Kind of location a boat occupies in the marina.

    Values are the canonical lowercase names used in the inventory file.
    "trailor" is the historical spelling kept for file compatibility.
    """

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"

    @classmethod
    def from_name(cls, name: str) -> "PlaceKind | None":
        """Match a place name case-insensitively, or return None."""
        lowered = name.lower()
        for kind in cls:
            if kind.value == lowered:
                return kind
        return None


@dataclass(frozen=True)
class SlipInfo:
    """Boat kept in a slip, numbered 1-85."""

    kind: ClassVar[PlaceKind] = PlaceKind.SLIP

    slip_number: int


@dataclass(frozen=True)
class LandInfo:
    """Boat kept on land in a lettered bay, A-Z."""

    kind: ClassVar[PlaceKind] = PlaceKind.LAND

    bay_letter: str

    def __post_init__(self):
        if len(self.bay_letter) != 1:
            raise ValidationError("Bay letter must be a single character")


@dataclass(frozen=True)
class TrailerInfo:
    """Boat kept on a trailer, identified by its license tag."""

    kind: ClassVar[PlaceKind] = PlaceKind.TRAILER

    license_tag: str

    def __post_init__(self):
        if len(self.license_tag) > MAX_TRAILER_TAG_LENGTH:
            raise ValidationError(
                f"License tag cannot be longer than {MAX_TRAILER_TAG_LENGTH} "
                + "characters"
            )


@dataclass(frozen=True)
class StorageInfo:
    """Boat kept in a storage space, numbered 1-50."""

    kind: ClassVar[PlaceKind] = PlaceKind.STORAGE

    storage_space: int


ExtraInfo = SlipInfo | LandInfo | TrailerInfo | StorageInfo


def validate_boat_name(name: str) -> None:
    """Validate a boat name according to domain business rules.

    Args:
        name: The name to validate

    Raises:
        ValidationError: If name is empty, too long, or cannot be stored
            in a single record field
    """
    if not name:
        raise ValidationError("Boat name cannot be empty")

    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Boat name cannot be longer than {MAX_NAME_LENGTH} characters"
        )

    # The record format has no quoting
    if FIELD_DELIMITER in name:
        raise ValidationError(f"Boat name cannot contain '{FIELD_DELIMITER}'")

    if "\n" in name or "\r" in name:
        raise ValidationError("Boat name cannot contain line breaks")


@dataclass
class Boat:
    """Core business entity representing a boat berthed at the marina."""

    name: str
    length: int
    extra: ExtraInfo
    amount_owed: Decimal = field(default_factory=lambda: Decimal("0.00"))

    def __post_init__(self):
        """Validate boat data after initialization."""
        validate_boat_name(self.name)

    @property
    def place(self) -> PlaceKind:
        """Location kind, determined by the extra info variant."""
        return self.extra.kind

    @property
    def sort_key(self) -> str:
        """Case-insensitive identity and ordering key."""
        return name_key(self.name)


def name_key(name: str) -> str:
    """Return the case-insensitive key used to compare boat names."""
    return name.lower()
