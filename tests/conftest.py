import io
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path

import pytest
from rich.console import Console

from marina.domain.entities import Boat, LandInfo, SlipInfo, StorageInfo, TrailerInfo
from marina.domain.registry import BoatRegistry
from marina.presentation.session import InventorySession

SAMPLE_RECORDS = [
    "Big Brother,20,slip,27,1200.00",
    "Moon Glow,18,land,B,0.00",
    "Osprey,28,trailor,ABC123,40.50",
    "Knot Again,22,storage,12,95.80",
]


@pytest.fixture(name="data_file")
def data_file_fixture(tmp_path: Path) -> Path:
    """Inventory file holding the sample records, unsorted."""
    path = tmp_path / "BoatData.csv"
    path.write_text("\n".join(SAMPLE_RECORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture(name="registry")
def registry_fixture() -> BoatRegistry:
    registry = BoatRegistry()
    registry.insert_sorted(Boat("Big Brother", 20, SlipInfo(27), Decimal("1200.00")))
    registry.insert_sorted(Boat("Moon Glow", 18, LandInfo("B"), Decimal("0.00")))
    registry.insert_sorted(Boat("Osprey", 28, TrailerInfo("ABC123"), Decimal("40.50")))
    registry.insert_sorted(Boat("Knot Again", 22, StorageInfo(12), Decimal("95.80")))
    return registry


class ScriptedSession:
    """An InventorySession fed from a list of input lines."""

    def __init__(self, registry: BoatRegistry, path: Path, lines: list[str]):
        self.output = io.StringIO()
        self.console = Console(file=self.output, width=200, color_system=None)
        self._lines = iter(lines)
        self.session = InventorySession(
            registry, path, self.console, read_line=self._read_line
        )

    def _read_line(self, prompt: str) -> str:
        try:
            reply = next(self._lines)
        except StopIteration:
            self.console.print(prompt, markup=False, highlight=False)
            raise EOFError from None
        # Echo the reply the way a terminal would
        self.console.print(prompt + reply, markup=False, highlight=False)
        return reply

    @property
    def text(self) -> str:
        return self.output.getvalue()


@pytest.fixture(name="scripted_session")
def scripted_session_fixture(
    tmp_path: Path,
) -> Callable[..., ScriptedSession]:
    """Factory building a session that reads the given lines."""

    def factory(
        lines: list[str],
        registry: BoatRegistry | None = None,
        path: Path | None = None,
    ) -> ScriptedSession:
        return ScriptedSession(
            registry if registry is not None else BoatRegistry(),
            path or tmp_path / "session.csv",
            lines,
        )

    return factory
