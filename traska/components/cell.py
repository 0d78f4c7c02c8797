"""Cell component.

Describes one grid tile. Only ``FUEL`` cells carry a non-zero ``amount``;
collecting fuel replaces the cell with a plain ``PATH`` cell.
"""

from dataclasses import dataclass

from traska.types import CellKind


@dataclass(frozen=True)
class Cell:
    """Tile descriptor.

    Attributes:
        kind: Tile tag.
        amount: Energy granted on arrival (fuel cells only).
    """

    kind: CellKind
    amount: int = 0

    @property
    def is_fuel(self) -> bool:
        return self.kind == CellKind.FUEL


EMPTY_CELL = Cell(CellKind.EMPTY)
PATH_CELL = Cell(CellKind.PATH)
START_CELL = Cell(CellKind.START)
FINISH_CELL = Cell(CellKind.FINISH)


def fuel_cell(amount: int) -> Cell:
    """Return a fuel cell worth ``amount`` energy."""
    if amount < 0:
        raise ValueError(f"Fuel amount must be non-negative, got {amount}")
    return Cell(CellKind.FUEL, amount)
