"""Procedural race map generation.

The route is a random monotonic lattice walk from the top-left corner to the
bottom-right corner: every step goes one tile right or one tile down, chosen
uniformly among the options that stay on the board. Such a walk never
revisits a tile and always has ``2 * (size - 1) + 1`` tiles.

Fuel is placed on every odd route index between the start and the finish,
so interior tiles alternate fuel / plain path.

Randomness comes from an injected ``random.Random`` so tests can seed it.
"""

import logging
import random
from typing import List, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from traska.components import FINISH_CELL, PATH_CELL, START_CELL, Position, fuel_cell
from traska.config import DEFAULT_CONFIG, FUEL_MAX, FUEL_MIN, RaceConfig
from traska.grid import Grid
from traska.state import GameState, create_initial_state

logger = logging.getLogger(__name__)


def generate_path(size: int, rng: random.Random) -> List[Position]:
    """Random monotonic walk from ``(0, 0)`` to ``(size - 1, size - 1)``."""
    x, y = 0, 0
    path: List[Position] = [Position(x, y)]
    while x < size - 1 or y < size - 1:
        options: List[Tuple[int, int]] = []
        if x < size - 1:
            options.append((x + 1, y))
        if y < size - 1:
            options.append((x, y + 1))
        x, y = rng.choice(options)
        path.append(Position(x, y))
    return path


def generate_map(
    size: int,
    rng: random.Random,
    fuel_min: int = FUEL_MIN,
    fuel_max: int = FUEL_MAX,
) -> Tuple[Grid, PVector[Position]]:
    """Build a board with a decorated route.

    Arguments:
        size: Board side length.
        rng: Random source.
        fuel_min: Smallest fuel amount (inclusive).
        fuel_max: Largest fuel amount (inclusive).

    Returns:
        Tuple of the board and the ordered route (start first, finish last).
    """
    path = generate_path(size, rng)
    cells = {pos: PATH_CELL for pos in path}
    for i in range(1, len(path) - 1, 2):
        cells[path[i]] = fuel_cell(rng.randint(fuel_min, fuel_max))
    cells[path[0]] = START_CELL
    cells[path[-1]] = FINISH_CELL

    grid = Grid(size)
    for pos, cell in cells.items():
        grid = grid.set(pos, cell)
    return grid, pvector(path)


def generate(config: RaceConfig = DEFAULT_CONFIG, seed: Optional[int] = None) -> GameState:
    """Generate a fresh map and return the initial race state.

    ``seed=None`` draws from system entropy; any integer reproduces the map.
    """
    rng = random.Random(seed)
    grid, path = generate_map(config.grid_size, rng, config.fuel_min, config.fuel_max)
    logger.debug(
        "Generated %dx%d map (seed=%s): %d route tiles, %d fuel deposits",
        grid.size,
        grid.size,
        seed,
        len(path),
        sum(1 for cell in grid.cells.values() if cell.is_fuel),
    )
    return create_initial_state(grid, path, config, seed)
