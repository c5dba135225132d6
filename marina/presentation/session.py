"""Interactive inventory session.

The session is a small state machine: it stays in ``MENU`` reading one
command at a time until the operator exits or input ends, then moves to
``EXIT`` and writes the inventory back to its file.
"""

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Final

from rich.console import Console

from ..application import billing_service, inventory_service
from ..domain.exceptions import DomainError, PersistenceError
from ..domain.registry import BoatRegistry
from ..infrastructure.storage.codec import parse_decimal
from ..logging_config import get_logger
from .error_handlers import ErrorFormatter
from .formatting import format_inventory, printable

logger: Final = get_logger(__name__)

MENU_PROMPT: Final = "\n(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
RECORD_PROMPT: Final = "Please enter the boat data in CSV format                 : "
NAME_PROMPT: Final = "Please enter the boat name                               : "
AMOUNT_PROMPT: Final = "Please enter the amount to be paid                       : "


class SessionState(Enum):
    MENU = "menu"
    EXIT = "exit"


class InventorySession:
    """Reads operator commands and applies them to a registry.

    Args:
        registry: Inventory to operate on
        path: File the inventory is saved to on exit
        console: Output console
        read_line: Prompts and returns one line of input, raising EOFError
            when input ends (defaults to ``console.input``)
    """

    def __init__(
        self,
        registry: BoatRegistry,
        path: Path,
        console: Console,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.registry = registry
        self.path = path
        self.console = console
        self.read_line = read_line or console.input
        self.state = SessionState.MENU
        self._commands: dict[str, Callable[[], SessionState]] = {
            "I": self._show_inventory,
            "A": self._add_boat,
            "R": self._remove_boat,
            "P": self._accept_payment,
            "M": self._apply_month,
            "X": self._exit,
        }

    def run(self) -> bool:
        """Run until exit, then save. Returns True if the save succeeded."""
        self._say("Welcome to the Boat Management System")
        self._say("-------------------------------------")

        while self.state is SessionState.MENU:
            self.state = self.step()

        return self.shutdown()

    def step(self) -> SessionState:
        """Read and execute one menu command, returning the next state."""
        reply = self._read(MENU_PROMPT)
        if reply is None:
            return SessionState.EXIT
        if not reply:
            return SessionState.MENU

        command = self._commands.get(reply[0].upper())
        if command is None:
            self._say(f"Invalid option {reply}")
            return SessionState.MENU

        logger.debug("Executing command", command=reply[0].upper())
        return command()

    def shutdown(self) -> bool:
        self._say("\nExiting the Boat Management System")
        try:
            inventory_service.save_inventory(self.path, self.registry)
        except PersistenceError as e:
            self._report(e)
            return False
        return True

    def _show_inventory(self) -> SessionState:
        for line in format_inventory(self.registry.all()):
            self._say(line)
        return SessionState.MENU

    def _add_boat(self) -> SessionState:
        line = self._read(RECORD_PROMPT)
        if line is None:
            return SessionState.EXIT
        try:
            inventory_service.add_boat_from_line(self.registry, line)
        except DomainError as e:
            self._report(e)
        return SessionState.MENU

    def _remove_boat(self) -> SessionState:
        name = self._read(NAME_PROMPT)
        if name is None:
            return SessionState.EXIT
        try:
            inventory_service.remove_boat(self.registry, name)
        except DomainError as e:
            self._report(e)
        return SessionState.MENU

    def _accept_payment(self) -> SessionState:
        name = self._read(NAME_PROMPT)
        if name is None:
            return SessionState.EXIT
        try:
            boat = inventory_service.find_boat(self.registry, name)
        except DomainError as e:
            self._report(e)
            return SessionState.MENU

        amount_text = self._read(AMOUNT_PROMPT)
        if amount_text is None:
            return SessionState.EXIT
        try:
            billing_service.accept_payment(boat, parse_decimal(amount_text))
        except DomainError as e:
            self._report(e)
        return SessionState.MENU

    def _apply_month(self) -> SessionState:
        billing_service.apply_monthly_charge(self.registry)
        return SessionState.MENU

    def _exit(self) -> SessionState:
        return SessionState.EXIT

    def _read(self, prompt: str) -> str | None:
        """Read one line, or None when input has ended."""
        try:
            return self.read_line(prompt).rstrip("\r\n")
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input ended", prompt=prompt.strip())
            return None

    def _say(self, text: str) -> None:
        self.console.print(
            printable(text),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _report(self, error: Exception) -> None:
        self._say(ErrorFormatter.format_user_friendly_message(error))
