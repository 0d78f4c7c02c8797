"""Completion event emitted when the ship lands on the finish cell."""

from dataclasses import dataclass

from traska.components.position import Position


@dataclass(frozen=True)
class Completed:
    """Finish event.

    Attributes:
        moves: Move count including the finishing move.
        position: Finish coordinate.
    """

    moves: int
    position: Position
