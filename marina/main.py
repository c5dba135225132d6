#!/usr/bin/env python3
"""Marina boat inventory manager"""

from pathlib import Path
from typing import Final

import typer
from rich.console import Console

from .application.inventory_service import open_inventory
from .config import settings
from .logging_config import get_logger, setup_logging
from .presentation.session import InventorySession

app: Final = typer.Typer(
    name="marina",
    help="Track boats, their berths and balances in a marina inventory file.",
    add_completion=False,
)


@app.command()
def main(
    data_file: Path = typer.Argument(
        ..., help="Inventory file (CSV); created on exit if it does not exist"
    ),
) -> None:
    """Open DATA_FILE and run the interactive inventory menu."""
    setup_logging()
    logger = get_logger(__name__)
    logger.info(
        "Application startup",
        app_name=settings.app_name,
        version=settings.version,
        data_file=str(data_file),
    )

    registry = open_inventory(data_file, settings.capacity)
    session = InventorySession(registry, data_file, Console())
    saved = session.run()

    logger.info("Application shutdown completed", saved=saved)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
