"""Immutable square board.

Only non-empty tiles are stored; a missing key reads as ``EMPTY``. Mutation
helpers return new ``Grid`` instances backed by persistent maps, so a grid
can be shared between successive states without copying.
"""

from dataclasses import dataclass
from typing import Iterator, List

from pyrsistent import pmap
from pyrsistent.typing import PMap

from traska.components import EMPTY_CELL, PATH_CELL, Cell, Position
from traska.types import CellKind


@dataclass(frozen=True)
class Grid:
    """Board of ``size`` x ``size`` cells.

    Attributes:
        size: Side length.
        cells: Non-empty tiles keyed by position.
    """

    size: int
    cells: PMap[Position, Cell] = pmap()

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies on the board."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def cell_at(self, pos: Position) -> Cell:
        return self.cells.get(pos, EMPTY_CELL)

    def kind_at(self, pos: Position) -> CellKind:
        return self.cell_at(pos).kind

    def is_open(self, pos: Position) -> bool:
        """In bounds and on the path."""
        return self.in_bounds(pos) and pos in self.cells

    def set(self, pos: Position, cell: Cell) -> "Grid":
        if not self.in_bounds(pos):
            raise IndexError(f"Out of bounds: {pos} for grid {self.size}x{self.size}")
        if cell.kind == CellKind.EMPTY:
            return Grid(self.size, self.cells.discard(pos))
        return Grid(self.size, self.cells.set(pos, cell))

    def consume_fuel(self, pos: Position) -> "Grid":
        """Replace a fuel cell with plain path (no-op for other kinds)."""
        if not self.cell_at(pos).is_fuel:
            return self
        return self.set(pos, PATH_CELL)

    def positions_of(self, kind: CellKind) -> List[Position]:
        return sorted(
            (pos for pos, cell in self.cells.items() if cell.kind == kind),
            key=lambda p: (p.y, p.x),
        )

    def rows(self) -> Iterator[List[Cell]]:
        """Yield rows top to bottom, each as a list of cells left to right."""
        for y in range(self.size):
            yield [self.cell_at(Position(x, y)) for x in range(self.size)]
