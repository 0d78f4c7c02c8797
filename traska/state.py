"""Immutable ``GameState`` snapshot.

Every reducer in :mod:`traska.step` takes a ``GameState`` and returns a new
one; nothing is mutated in place. ``legal_moves`` is derived data that the
reducers recompute after each transition, never patch.

Design notes:

* ``grid`` is the live board. Collected fuel is plain path for the rest of
  the session, restarts included.
* ``path`` is the ordered generated route, start first and finish last.
* ``vector`` is ``None`` until the first move: no momentum yet.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pset
from pyrsistent.typing import PMap, PSet, PVector

from traska.components import Position, Vector
from traska.config import DEFAULT_CONFIG, RaceConfig
from traska.grid import Grid
from traska.moves import legal_moves
from traska.types import GameStatus


@dataclass(frozen=True)
class GameState:
    """Race snapshot.

    Attributes:
        grid (Grid): Live board.
        path (PVector[Position]): Generated route from start to finish.
        position (Position): Ship coordinate.
        energy (int): Remaining energy, never negative.
        vector (Vector | None): Most recent displacement.
        move_count (int): Completed moves this run.
        legal_moves (PSet[Position]): Targets reachable this turn.
        status (GameStatus): ``ACTIVE`` while racing, ``WON`` after the finish.
        config (RaceConfig): Rule set used for this race.
        seed (int | None): Seed the map was generated from, if any.
    """

    grid: Grid
    path: PVector[Position]
    position: Position
    energy: int
    vector: Optional[Vector] = None
    move_count: int = 0
    legal_moves: PSet[Position] = pset()
    status: GameStatus = GameStatus.ACTIVE
    config: RaceConfig = DEFAULT_CONFIG
    seed: Optional[int] = None

    @property
    def start(self) -> Position:
        return self.path[0]

    @property
    def finish(self) -> Position:
        return self.path[-1]

    @property
    def won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def stranded(self) -> bool:
        """Still racing but no tile is reachable."""
        return self.status == GameStatus.ACTIVE and len(self.legal_moves) == 0

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary of the scalar fields, for logging and debugging."""
        return pmap(
            {
                "position": (self.position.x, self.position.y),
                "energy": self.energy,
                "vector": None
                if self.vector is None
                else (self.vector.dx, self.vector.dy),
                "move_count": self.move_count,
                "legal_moves": len(self.legal_moves),
                "status": str(self.status),
            }
        )


def create_initial_state(
    grid: Grid,
    path: PVector[Position],
    config: RaceConfig = DEFAULT_CONFIG,
    seed: Optional[int] = None,
) -> GameState:
    """Place the ship on the start tile with full energy and no momentum.

    Arguments:
        grid: Board as generated.
        path: Route from start to finish (at least two tiles).
        config: Rule set.
        seed: Seed recorded for reproduction.

    Returns:
        GameState: ``ACTIVE`` state with legal moves computed.
    """
    if len(path) < 2:
        raise ValueError("Path must contain at least a start and a finish tile")
    if grid.size != config.grid_size:
        raise ValueError(
            f"Grid size {grid.size} does not match config grid_size {config.grid_size}"
        )
    start = path[0]
    return GameState(
        grid=grid,
        path=path,
        position=start,
        energy=config.initial_energy,
        legal_moves=legal_moves(
            grid, start, config.initial_energy, None, config.search_radius
        ),
        config=config,
        seed=seed,
    )
