"""Component aggregates.

Immutable dataclasses shared by the generator, the reducer systems and the
presentation layers. State changes are expressed by building new instances.
"""

from .cell import EMPTY_CELL, FINISH_CELL, PATH_CELL, START_CELL, Cell, fuel_cell
from .completed import Completed
from .position import Position
from .score_entry import ScoreEntry
from .vector import Vector

__all__ = [
    "Cell",
    "Completed",
    "EMPTY_CELL",
    "FINISH_CELL",
    "PATH_CELL",
    "Position",
    "ScoreEntry",
    "START_CELL",
    "Vector",
    "fuel_cell",
]
