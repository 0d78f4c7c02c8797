"""Race reducers.

Pure functions taking a :class:`traska.state.GameState` and returning a new
one. :func:`attempt_move` is the only gameplay transition; everything else
either builds a fresh state or delegates to it.

Ordering inside a successful move:

1. ``validate_move`` gates the move on bounds, tile kind, reach and momentum
   cost (using the energy held *before* any fuel pickup).
2. ``movement_system`` pays the cost, relocates the ship, stores the vector
   and bumps the move counter.
3. ``fuel_system`` credits the fuel on the destination and clears the tile.
4. ``win_system`` flags the finish.
5. ``legal_moves_system`` recomputes the reachable set.

A rejected move returns the input state object unchanged, so callers can
rely on identity to detect that nothing happened.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from traska.components import Completed, Position
from traska.config import DEFAULT_CONFIG, RaceConfig
from traska.levels.generator import generate
from traska.moves import validate_move
from traska.state import GameState
from traska.systems.fuel import fuel_system
from traska.systems.legal import legal_moves_system
from traska.systems.movement import movement_system
from traska.systems.terminal import win_system
from traska.types import GameStatus, MoveError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move attempt.

    Attributes:
        success: True if the ship moved.
        state: State after the attempt (the input state when rejected,
            ``None`` when no game has been started).
        error: Rejection reason; ``None`` on success and on a silently
            declined inertia move.
        completed: Finish event when this move reached the finish tile.
    """

    success: bool
    state: Optional[GameState]
    error: Optional[MoveError] = None
    completed: Optional[Completed] = None


def new_game(config: RaceConfig = DEFAULT_CONFIG, seed: Optional[int] = None) -> GameState:
    """Generate a new map and place the ship at the start."""
    return generate(config, seed)


def restart(state: GameState) -> GameState:
    """Reset the run on the same map.

    The board is kept as it is: fuel already collected stays consumed. The
    ship goes back to the start with initial energy, no momentum and zero
    moves.
    """
    return legal_moves_system(
        replace(
            state,
            position=state.start,
            energy=state.config.initial_energy,
            vector=None,
            move_count=0,
            status=GameStatus.ACTIVE,
        )
    )


def attempt_move(state: GameState, target: Position) -> MoveResult:
    """Try to move the ship to ``target``.

    Arguments:
        state: Current race state.
        target: Destination tile chosen by the player.

    Returns:
        MoveResult: On rejection ``state`` is returned untouched together
        with the reason.
    """
    if state.won:
        return MoveResult(False, state, MoveError.GAME_OVER)

    error = validate_move(
        state.grid,
        state.position,
        state.energy,
        state.vector,
        target,
        state.config.search_radius,
    )
    if error is not None:
        logger.debug("Move to (%d, %d) rejected: %s", target.x, target.y, error)
        return MoveResult(False, state, error)

    next_state = movement_system(state, target)
    next_state = fuel_system(next_state)
    next_state = win_system(next_state)
    next_state = legal_moves_system(next_state)
    assert next_state.energy >= 0, f"Energy went negative: {next_state.energy}"

    logger.debug("Move %d: %s", next_state.move_count, dict(next_state.description))

    completed: Optional[Completed] = None
    if next_state.won:
        completed = Completed(moves=next_state.move_count, position=next_state.position)
        logger.info("Finish reached in %d moves", next_state.move_count)
    return MoveResult(True, next_state, completed=completed)


def attempt_inertia_move(state: GameState) -> MoveResult:
    """Repeat the previous vector.

    Declined without an error when there is no momentum yet or the projected
    tile is off the board; otherwise identical to :func:`attempt_move`.
    """
    if state.vector is None:
        return MoveResult(False, state)
    target = state.position.offset(state.vector)
    if not state.grid.in_bounds(target):
        logger.debug("Inertia move off the board declined")
        return MoveResult(False, state)
    return attempt_move(state, target)
