"""Common type aliases and enumerations.

``CellKind`` tags every grid tile, ``GameStatus`` tracks the session state
machine and ``MoveError`` enumerates the ways a move can be rejected. Move
results carry a ``MoveError`` value instead of raising.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


if TYPE_CHECKING:
    from traska.components import Completed

CompletionHandler = Callable[["Completed"], None]


class CellKind(StrEnum):
    """Tile tags (``EMPTY`` tiles are off the generated path)."""

    EMPTY = auto()
    PATH = auto()
    START = auto()
    FINISH = auto()
    FUEL = auto()


class GameStatus(StrEnum):
    """Session phases: no map yet, racing, or finish reached."""

    IDLE = auto()
    ACTIVE = auto()
    WON = auto()


class MoveError(StrEnum):
    """Reasons a move is rejected. The state is left untouched in every case."""

    INSUFFICIENT_ENERGY = auto()
    INVALID_TARGET = auto()
    OUT_OF_BOUNDS = auto()
    GAME_OVER = auto()
    NO_GAME = auto()
