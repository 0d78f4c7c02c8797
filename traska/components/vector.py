"""Vector component.

The most recent displacement of the ship. A missing vector (``None``) means
the ship has not moved yet and carries no momentum.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """Integer displacement.

    Attributes:
        dx: Column delta.
        dy: Row delta.
    """

    dx: int
    dy: int

    @property
    def magnitude(self) -> int:
        """Manhattan length ``|dx| + |dy|``."""
        return abs(self.dx) + abs(self.dy)
