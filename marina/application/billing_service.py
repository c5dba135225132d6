from decimal import Decimal
from typing import Final

from ..domain.entities import Boat, PlaceKind
from ..domain.exceptions import ExceedsOwedError
from ..domain.registry import BoatRegistry
from ..logging_config import get_logger
from ..logging_utils import log_user_action

logger: Final = get_logger(__name__)

# Monthly rate per foot of boat length
RATE_PER_FOOT: Final[dict[PlaceKind, Decimal]] = {
    PlaceKind.SLIP: Decimal("12.50"),
    PlaceKind.LAND: Decimal("14.00"),
    PlaceKind.TRAILER: Decimal("25.00"),
    PlaceKind.STORAGE: Decimal("11.20"),
}


def rate_per_foot(place: PlaceKind) -> Decimal:
    """Monthly charge per foot of length for a location kind."""
    return RATE_PER_FOOT[place]


def monthly_charge(boat: Boat) -> Decimal:
    return boat.length * rate_per_foot(boat.place)


def apply_monthly_charge(registry: BoatRegistry) -> Decimal:
    """Add one month of charges to every boat's balance.

    Each call is one billing period, so calling it twice charges twice.

    Returns:
        Total amount charged across the registry
    """
    total = Decimal("0.00")
    for boat in registry.all():
        charge = monthly_charge(boat)
        boat.amount_owed += charge
        total += charge

    log_user_action("monthly_charge", boat_count=registry.size(), total=str(total))
    logger.info(
        "Monthly charge applied", boat_count=registry.size(), total=str(total)
    )
    return total


def accept_payment(boat: Boat, amount: Decimal) -> Decimal:
    """Apply a payment to a boat's balance.

    Zero and negative amounts are accepted as given.

    Args:
        boat: Boat whose balance is paid down
        amount: Payment amount

    Returns:
        The remaining balance

    Raises:
        ExceedsOwedError: If amount is larger than the balance; the boat is
            left unchanged
    """
    logger.debug("Accepting payment", boat_name=boat.name, amount=str(amount))

    if amount > boat.amount_owed:
        logger.warning(
            "Payment rejected - exceeds amount owed",
            boat_name=boat.name,
            amount=str(amount),
            amount_owed=str(boat.amount_owed),
        )
        raise ExceedsOwedError(amount, boat.amount_owed)

    boat.amount_owed -= amount

    log_user_action(
        "accept_payment",
        boat_name=boat.name,
        amount=str(amount),
        amount_owed=str(boat.amount_owed),
    )
    logger.info(
        "Payment accepted",
        boat_name=boat.name,
        amount=str(amount),
        amount_owed=str(boat.amount_owed),
    )
    return boat.amount_owed
