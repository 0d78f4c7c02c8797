from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from traska.components import (
    FINISH_CELL,
    PATH_CELL,
    START_CELL,
    Cell,
    Position,
    fuel_cell,
)
from traska.config import RaceConfig
from traska.grid import Grid
from traska.state import GameState, create_initial_state
from traska.types import CellKind

# Glyphs for hand-authored levels. Digits are fuel amounts, '*' is fuel worth
# ten.
GLYPHS: Dict[str, Cell] = {
    "S": START_CELL,
    "F": FINISH_CELL,
    ".": PATH_CELL,
    "*": fuel_cell(10),
}
EMPTY_GLYPH = "#"


def _parse_glyph(glyph: str, pos: Position) -> Optional[Cell]:
    if glyph == EMPTY_GLYPH:
        return None
    if glyph in GLYPHS:
        return GLYPHS[glyph]
    if glyph.isdigit():
        return fuel_cell(int(glyph))
    raise ValueError(f"Unknown glyph {glyph!r} at {(pos.x, pos.y)}")


def grid_from_rows(rows: Sequence[str]) -> Grid:
    """
    Build a square Grid from text rows, top row first.
    'S' start, 'F' finish, '.' path, '#' empty, digit or '*' fuel.
    """
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("Level rows must form a non-empty square")
    grid = Grid(size)
    for y, row in enumerate(rows):
        for x, glyph in enumerate(row):
            pos = Position(x, y)
            cell = _parse_glyph(glyph, pos)
            if cell is not None:
                grid = grid.set(pos, cell)
    if len(grid.positions_of(CellKind.START)) != 1:
        raise ValueError("Level must contain exactly one start 'S'")
    if len(grid.positions_of(CellKind.FINISH)) != 1:
        raise ValueError("Level must contain exactly one finish 'F'")
    return grid


def trace_path(grid: Grid) -> PVector[Position]:
    """
    Walk the non-empty tiles from start to finish.
    Requires a simple (non-branching) route of 4-connected tiles.
    """
    start = grid.positions_of(CellKind.START)[0]
    path: List[Position] = [start]
    visited = {start}
    while grid.kind_at(path[-1]) != CellKind.FINISH:
        current = path[-1]
        neighbours = [
            nxt
            for nxt in (
                Position(current.x + 1, current.y),
                Position(current.x, current.y + 1),
                Position(current.x - 1, current.y),
                Position(current.x, current.y - 1),
            )
            if grid.is_open(nxt) and nxt not in visited
        ]
        if len(neighbours) != 1:
            raise ValueError(f"Route is broken or branches at {(current.x, current.y)}")
        visited.add(neighbours[0])
        path.append(neighbours[0])
    return pvector(path)


def level_from_rows(
    rows: Sequence[str], config: Optional[RaceConfig] = None
) -> Tuple[Grid, PVector[Position]]:
    """Return (grid, path) for a text level."""
    grid = grid_from_rows(rows)
    if config is not None and config.grid_size != grid.size:
        raise ValueError("Level size does not match config grid_size")
    return grid, trace_path(grid)


def state_from_rows(
    rows: Sequence[str], config: Optional[RaceConfig] = None
) -> GameState:
    """Initial race state for a text level (config defaults to the level size)."""
    config = config or RaceConfig(grid_size=len(rows))
    grid, path = level_from_rows(rows, config)
    return create_initial_state(grid, path, config)


def grid_to_rows(grid: Grid) -> List[str]:
    """Inverse of :func:`grid_from_rows` (fuel above 9 renders as '*')."""
    rows: List[str] = []
    for row in grid.rows():
        chars: List[str] = []
        for cell in row:
            if cell.kind == CellKind.EMPTY:
                chars.append(EMPTY_GLYPH)
            elif cell.kind == CellKind.START:
                chars.append("S")
            elif cell.kind == CellKind.FINISH:
                chars.append("F")
            elif cell.is_fuel:
                chars.append(str(cell.amount) if cell.amount <= 9 else "*")
            else:
                chars.append(".")
        rows.append("".join(chars))
    return rows
