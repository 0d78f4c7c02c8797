"""Movement system.

Applies an already validated move: pays the momentum cost, relocates the
ship, records the new vector and bumps the move counter.
"""

from dataclasses import replace

from traska.components import Position
from traska.momentum import transition_cost, vector_between
from traska.state import GameState


def movement_system(state: GameState, target: Position) -> GameState:
    """Move the ship to ``target`` (caller guarantees legality)."""
    vector = vector_between(state.position, target)
    cost = transition_cost(state.vector, vector)
    return replace(
        state,
        position=target,
        vector=vector,
        energy=state.energy - cost,
        move_count=state.move_count + 1,
    )
