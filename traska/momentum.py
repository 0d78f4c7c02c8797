"""Vector-momentum movement model.

Movement cost depends on how much the displacement *changes* relative to the
previous move, not on the displacement itself. Repeating the last vector
(coasting) is free; the very first move pays the full Manhattan length.
"""

from typing import Optional

from traska.components import Position, Vector


def vector_between(origin: Position, target: Position) -> Vector:
    """Return the displacement from ``origin`` to ``target``."""
    return Vector(target.x - origin.x, target.y - origin.y)


def transition_cost(prev_vector: Optional[Vector], new_vector: Vector) -> int:
    """Energy needed to switch from ``prev_vector`` to ``new_vector``.

    Arguments:
        prev_vector: Last displacement, or ``None`` before the first move.
        new_vector: Requested displacement.

    Returns:
        ``|dx| + |dy|`` of ``new_vector`` when there is no momentum yet,
        otherwise the componentwise Manhattan distance between the vectors.
    """
    if prev_vector is None:
        return new_vector.magnitude
    return abs(new_vector.dx - prev_vector.dx) + abs(new_vector.dy - prev_vector.dy)
