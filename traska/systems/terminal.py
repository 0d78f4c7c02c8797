"""Terminal condition system.

Sets ``WON`` exactly once, when the ship stands on the finish tile.
"""

from dataclasses import replace

from traska.state import GameState
from traska.types import CellKind, GameStatus


def win_system(state: GameState) -> GameState:
    if state.won:
        return state
    if state.grid.kind_at(state.position) == CellKind.FINISH:
        return replace(state, status=GameStatus.WON)
    return state
