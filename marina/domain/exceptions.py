"""Domain-specific exceptions."""

from decimal import Decimal
from pathlib import Path


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    pass


class DecodeError(DomainError):
    """Raised when a persisted record line cannot be turned into a boat."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line


class IncompleteRecordError(DecodeError):
    """Raised when a record line has fewer than the required fields."""

    pass


class UnknownPlaceKindError(DecodeError):
    """Raised when the place field names no known location type."""

    pass


class CapacityExceededError(DomainError):
    """Raised when adding a boat to a registry that is already full."""

    def __init__(self, capacity: int):
        super().__init__(f"Registry is full ({capacity} boats)")
        self.capacity = capacity


class DuplicateNameError(DomainError):
    """Raised when attempting to add a boat whose name is already registered."""

    pass


class BoatNotFoundError(DomainError):
    """Raised when no registered boat matches a name."""

    def __init__(self, name: str):
        super().__init__(f"No boat named '{name}'")
        self.name = name


class ExceedsOwedError(DomainError):
    """Raised when a payment is larger than the outstanding balance."""

    def __init__(self, amount: Decimal, amount_owed: Decimal):
        super().__init__(
            f"Payment of {amount:.2f} exceeds amount owed {amount_owed:.2f}"
        )
        self.amount = amount
        self.amount_owed = amount_owed


class PersistenceError(DomainError):
    """Raised when the inventory file cannot be written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
