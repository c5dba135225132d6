"""Centralized error handling for the presentation layer."""

from typing import Final

from ..domain.exceptions import (
    BoatNotFoundError,
    CapacityExceededError,
    DecodeError,
    DuplicateNameError,
    ExceedsOwedError,
    PersistenceError,
    ValidationError,
)

INVALID_BOAT_DATA: Final = "Invalid boat data."
MARINA_FULL: Final = "Marina is full. Cannot add more boats."
BOAT_NOT_FOUND: Final = "No boat with that name"
DUPLICATE_BOAT: Final = "A boat with that name already exists."
SAVE_FAILED: Final = "Error opening file for writing."


class ErrorFormatter:
    """Formats errors for consistent user experience."""

    @staticmethod
    def format_user_friendly_message(error: Exception) -> str:
        """Convert domain errors to the messages shown to the operator."""
        if isinstance(error, CapacityExceededError):
            return MARINA_FULL

        elif isinstance(error, (DecodeError, ValidationError)):
            return INVALID_BOAT_DATA

        elif isinstance(error, DuplicateNameError):
            return DUPLICATE_BOAT

        elif isinstance(error, BoatNotFoundError):
            return BOAT_NOT_FOUND

        elif isinstance(error, ExceedsOwedError):
            return f"That is more than the amount owed, ${error.amount_owed:.2f}"

        elif isinstance(error, PersistenceError):
            return SAVE_FAILED

        else:
            # Fallback for unexpected errors
            return "Something went wrong. Please try again."
