"""Infrastructure layer - Inventory file load and save."""

from collections.abc import Iterable, Iterator
from contextlib import closing
from itertools import islice
from pathlib import Path
from typing import Final, TextIO

from ...constants import FILE_ENCODING, FILE_ENCODING_ERRORS
from ...domain.constants import MAX_BOATS
from ...domain.entities import Boat
from ...domain.exceptions import DecodeError, PersistenceError
from ...logging_config import get_logger
from .codec import decode, encode

logger: Final = get_logger(__name__)


def iter_records(lines: Iterable[str]) -> Iterator[Boat]:
    """Decode record lines into boats, in input order.

    Blank lines and lines that fail to decode are skipped.
    """
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line:
            continue

        try:
            yield decode(line)
        except DecodeError as e:
            logger.info(
                "Skipping undecodable record",
                line_number=line_number,
                reason=str(e),
                error_type=type(e).__name__,
            )


def read_records(lines: Iterable[str], capacity: int = MAX_BOATS) -> list[Boat]:
    """Decode at most ``capacity`` boats from record lines."""
    boats: Final = list(islice(iter_records(lines), capacity))
    if len(boats) >= capacity:
        logger.info("Capacity reached, ignoring remaining records", capacity=capacity)
    return boats


def write_records(stream: TextIO, boats: Iterable[Boat]) -> int:
    """Write one encoded line per boat. Returns the number of lines written."""
    count = 0
    for boat in boats:
        stream.write(encode(boat) + "\n")
        count += 1
    return count


def open_records(path: Path) -> Iterator[Boat]:
    """Stream boats from an inventory file.

    A missing file is a fresh inventory and yields nothing. So does a path
    that cannot be opened for reading, such as a directory; that case is
    logged as a warning. Bytes that are not valid UTF-8 are carried through
    as surrogate escapes so that a later save writes them back unchanged.
    """
    try:
        f = path.open("r", encoding=FILE_ENCODING, errors=FILE_ENCODING_ERRORS)
    except FileNotFoundError:
        logger.info("Inventory file not found, starting empty", path=str(path))
        return
    except OSError as e:
        logger.warning(
            "Inventory file unreadable, starting empty",
            path=str(path),
            error=str(e),
            error_type=type(e).__name__,
        )
        return

    with f:
        yield from iter_records(f)


def load(path: Path, capacity: int = MAX_BOATS) -> list[Boat]:
    """Load at most ``capacity`` boats from an inventory file."""
    with closing(open_records(path)) as records:
        boats: Final = read_records(records, capacity)
    logger.debug("Inventory file read", path=str(path), boat_count=len(boats))
    return boats


def save(path: Path, boats: Iterable[Boat]) -> int:
    """Overwrite an inventory file with the given boats.

    Raises:
        PersistenceError: If the file cannot be opened or written
    """
    try:
        with path.open(
            "w",
            encoding=FILE_ENCODING,
            errors=FILE_ENCODING_ERRORS,
            newline="\n",
        ) as f:
            count = write_records(f, boats)
    except OSError as e:
        raise PersistenceError(f"Cannot write inventory file: {e}", path) from e

    logger.debug("Inventory file written", path=str(path), boat_count=count)
    return count
