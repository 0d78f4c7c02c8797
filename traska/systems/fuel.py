"""Fuel collection system.

Turns the fuel tile under the ship into plain path and credits its amount to
the ship's energy. Idempotent: a collected tile no longer carries fuel.
"""

from dataclasses import replace

from traska.state import GameState


def fuel_system(state: GameState) -> GameState:
    """Collect fuel at the ship's current position, if any."""
    cell = state.grid.cell_at(state.position)
    if not cell.is_fuel:
        return state
    return replace(
        state,
        grid=state.grid.consume_fuel(state.position),
        energy=state.energy + cell.amount,
    )
