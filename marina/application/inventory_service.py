from contextlib import closing
from pathlib import Path
from typing import Final

from ..domain.constants import MAX_BOATS
from ..domain.entities import Boat
from ..domain.exceptions import (
    BoatNotFoundError,
    CapacityExceededError,
    DecodeError,
    DuplicateNameError,
    PersistenceError,
)
from ..domain.registry import BoatRegistry
from ..infrastructure.storage import gateway
from ..infrastructure.storage.codec import decode
from ..logging_config import get_logger
from ..logging_utils import log_storage_operation, log_user_action, log_validation_error

logger: Final = get_logger(__name__)


def open_inventory(path: Path, capacity: int = MAX_BOATS) -> BoatRegistry:
    """Load an inventory file into a new registry.

    Records that repeat an earlier boat name are skipped, like records
    that fail to decode, and do not count toward capacity.

    Args:
        path: Inventory file; a missing or unreadable file gives an empty
            registry
        capacity: Maximum number of boats

    Returns:
        Registry holding the loaded boats in name order
    """
    logger.debug("Opening inventory", path=str(path), capacity=capacity)

    registry: Final = BoatRegistry(capacity)
    with closing(gateway.open_records(path)) as records:
        for boat in records:
            if registry.is_full:
                logger.info(
                    "Capacity reached, ignoring remaining records", capacity=capacity
                )
                break
            try:
                registry.insert_sorted(boat)
            except DuplicateNameError:
                logger.info("Skipping duplicate record", boat_name=boat.name)

    log_storage_operation(
        operation="load", path=str(path), success=True, boat_count=registry.size()
    )
    logger.info("Inventory opened", path=str(path), boat_count=registry.size())
    return registry


def save_inventory(path: Path, registry: BoatRegistry) -> int:
    """Write the registry back to its inventory file.

    Raises:
        PersistenceError: If the file cannot be written
    """
    logger.debug("Saving inventory", path=str(path), boat_count=registry.size())

    try:
        count: Final = gateway.save(path, registry.all())
    except PersistenceError as e:
        log_storage_operation(
            operation="save", path=str(path), success=False, error=str(e)
        )
        logger.error("Inventory save failed", path=str(path), error=str(e))
        raise

    log_storage_operation(
        operation="save", path=str(path), success=True, boat_count=count
    )
    logger.info("Inventory saved", path=str(path), boat_count=count)
    return count


def add_boat_from_line(registry: BoatRegistry, line: str) -> Boat:
    """Decode a record line and add the boat to the registry.

    Raises:
        CapacityExceededError: If the registry is full (checked before decoding)
        DecodeError: If the line is not a valid record
        DuplicateNameError: If the boat name is already registered
    """
    logger.debug("Adding boat", line=line)

    if registry.is_full:
        logger.warning("Boat add failed - registry full", capacity=registry.capacity)
        raise CapacityExceededError(registry.capacity)

    try:
        boat: Final = decode(line)
    except DecodeError as e:
        log_validation_error("boat_record", line, str(e))
        raise

    try:
        registry.insert_sorted(boat)
    except DuplicateNameError:
        logger.warning("Boat add failed - already exists", boat_name=boat.name)
        raise

    log_user_action("add_boat", boat_name=boat.name, place=boat.place.value)
    logger.info("Boat added successfully", boat_name=boat.name)
    return boat


def find_boat(registry: BoatRegistry, name: str) -> Boat:
    """Look up a boat by case-insensitive name.

    Raises:
        BoatNotFoundError: If no boat matches
    """
    try:
        return registry.get(name)
    except BoatNotFoundError:
        logger.warning("Boat lookup failed - not found", boat_name=name)
        raise


def remove_boat(registry: BoatRegistry, name: str) -> Boat:
    """Remove a boat by case-insensitive name.

    Raises:
        BoatNotFoundError: If no boat matches; the registry is unchanged
    """
    logger.debug("Removing boat", boat_name=name)

    try:
        boat: Final = registry.remove_by_name(name)
    except BoatNotFoundError:
        logger.warning("Boat removal failed - not found", boat_name=name)
        raise

    log_user_action("remove_boat", boat_name=boat.name)
    logger.info("Boat removed successfully", boat_name=boat.name)
    return boat
