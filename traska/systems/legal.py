"""Legal move system.

Recomputes the cached legal move set from scratch. A won race has no legal
moves.
"""

from dataclasses import replace

from pyrsistent import pset

from traska.moves import legal_moves
from traska.state import GameState


def legal_moves_system(state: GameState) -> GameState:
    if state.won:
        return replace(state, legal_moves=pset())
    return replace(
        state,
        legal_moves=legal_moves(
            state.grid,
            state.position,
            state.energy,
            state.vector,
            state.config.search_radius,
        ),
    )
