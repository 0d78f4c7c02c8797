"""Legal move enumeration and validation.

``validate_move`` is the single legality predicate. ``legal_moves`` scans the
box of radius ``radius`` around the ship and keeps every target the predicate
accepts, so the highlighted set and the move gate never disagree.

Decisions encoded here:

* The ship's own tile is never a legal target (a zero vector would be a
  no-op move) and is reported as ``INVALID_TARGET``.
* Bounds and tile kind are checked before cost, so an empty tile is always
  ``INVALID_TARGET`` regardless of energy.
* Targets farther than ``radius`` along either axis are ``INVALID_TARGET``
  too. The cost rule alone would accept long jumps once fuel piles up, and
  the highlighted set must match what the gate accepts.
"""

from typing import Optional

from pyrsistent import pset
from pyrsistent.typing import PSet

from traska.components import Position, Vector
from traska.config import SEARCH_RADIUS
from traska.grid import Grid
from traska.momentum import transition_cost, vector_between
from traska.types import MoveError


def validate_move(
    grid: Grid,
    position: Position,
    energy: int,
    prev_vector: Optional[Vector],
    target: Position,
    radius: int = SEARCH_RADIUS,
) -> Optional[MoveError]:
    """Return why moving to ``target`` is illegal, or ``None`` if it is legal."""
    if not grid.in_bounds(target):
        return MoveError.OUT_OF_BOUNDS
    if target == position or not grid.is_open(target):
        return MoveError.INVALID_TARGET
    vector = vector_between(position, target)
    if max(abs(vector.dx), abs(vector.dy)) > radius:
        return MoveError.INVALID_TARGET
    cost = transition_cost(prev_vector, vector)
    if cost > energy:
        return MoveError.INSUFFICIENT_ENERGY
    return None


def legal_moves(
    grid: Grid,
    position: Position,
    energy: int,
    prev_vector: Optional[Vector],
    radius: int = SEARCH_RADIUS,
) -> PSet[Position]:
    """Return every tile reachable in one move under the energy budget.

    Arguments:
        grid: Current board (fuel already collected is plain path).
        position: Ship position.
        energy: Energy available before the move.
        prev_vector: Last displacement (``None`` before the first move).
        radius: Half-width of the scanned box.

    Returns:
        PSet[Position]: Targets accepted by :func:`validate_move`.
    """
    moves: list[Position] = []
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            target = Position(position.x + dx, position.y + dy)
            if validate_move(grid, position, energy, prev_vector, target, radius) is None:
                moves.append(target)
    return pset(moves)
