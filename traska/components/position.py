"""Position component.

Immutable integer grid coordinates of a tile or of the ship.
"""

from dataclasses import dataclass

from traska.components.vector import Vector


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, vector: Vector) -> "Position":
        """Return the position displaced by ``vector``."""
        return Position(self.x + vector.dx, self.y + vector.dy)
