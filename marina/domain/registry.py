"""Sorted, capacity-bounded collection of boats."""

import bisect
from collections.abc import Iterator

from .constants import MAX_BOATS
from .entities import Boat, name_key
from .exceptions import BoatNotFoundError, CapacityExceededError, DuplicateNameError


class BoatRegistry:
    """Registry of Boat objects kept in case-insensitive name order.

    The registry owns the boats it holds. Names are unique under
    case-insensitive comparison and the number of boats never exceeds
    ``capacity``.
    """

    def __init__(self, capacity: int = MAX_BOATS) -> None:
        if capacity < 1:
            raise ValueError("Registry capacity must be at least 1")
        self.capacity = capacity
        self._boats: list[Boat] = []

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return self.all()

    def __repr__(self) -> str:
        return f"BoatRegistry(size={len(self._boats)}, capacity={self.capacity})"

    def size(self) -> int:
        """Return the number of registered boats."""
        return len(self._boats)

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self.capacity

    def insert_sorted(self, boat: Boat) -> None:
        """Insert a boat at the position that keeps names in order.

        Raises:
            CapacityExceededError: If the registry already holds capacity boats
            DuplicateNameError: If a boat with the same name is registered
        """
        if self.is_full:
            raise CapacityExceededError(self.capacity)

        if self._index_of(boat.name) is not None:
            raise DuplicateNameError(f"Boat '{boat.name}' already exists")

        position = bisect.bisect_right(
            self._boats, boat.sort_key, key=lambda b: b.sort_key
        )
        self._boats.insert(position, boat)

    def find_by_name(self, name: str) -> int:
        """Return the index of the boat with the given name.

        Raises:
            BoatNotFoundError: If no boat matches
        """
        index = self._index_of(name)
        if index is None:
            raise BoatNotFoundError(name)
        return index

    def get(self, name: str) -> Boat:
        """Return the boat with the given name."""
        return self._boats[self.find_by_name(name)]

    def remove_by_name(self, name: str) -> Boat:
        """Remove and return the boat with the given name.

        Raises:
            BoatNotFoundError: If no boat matches; the registry is unchanged
        """
        index = self.find_by_name(name)
        return self._boats.pop(index)

    def all(self) -> Iterator[Boat]:
        """Iterate over boats in sorted order.

        This is a live view: do not insert or remove while iterating.
        """
        return iter(self._boats)

    def _index_of(self, name: str) -> int | None:
        key = name_key(name)
        for index, boat in enumerate(self._boats):
            if boat.sort_key == key:
                return index
        return None
