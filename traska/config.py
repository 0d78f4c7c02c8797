"""Game constants and the ``RaceConfig`` bundle.

Module level constants are the classic rule set. ``RaceConfig`` groups them
so alternative boards (e.g. tiny hand-made levels in tests) can be described
without touching globals. ``search_radius`` bounds the legal-move scan and
must grow together with ``initial_energy`` / ``fuel_max`` if those change.
"""

from dataclasses import dataclass


GRID_SIZE = 10
INITIAL_ENERGY = 5
FUEL_MIN = 2
FUEL_MAX = 10
SEARCH_RADIUS = 2
SCOREBOARD_SIZE = 10


@dataclass(frozen=True)
class RaceConfig:
    """Rule set for a race.

    Attributes:
        grid_size: Side length of the square board.
        initial_energy: Energy at the start of a run.
        fuel_min: Smallest fuel deposit (inclusive).
        fuel_max: Largest fuel deposit (inclusive).
        search_radius: Box radius scanned for legal moves.
        scoreboard_size: Number of runs kept on the scoreboard.
    """

    grid_size: int = GRID_SIZE
    initial_energy: int = INITIAL_ENERGY
    fuel_min: int = FUEL_MIN
    fuel_max: int = FUEL_MAX
    search_radius: int = SEARCH_RADIUS
    scoreboard_size: int = SCOREBOARD_SIZE

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.initial_energy < 0:
            raise ValueError("initial_energy must be non-negative")
        if not 0 <= self.fuel_min <= self.fuel_max:
            raise ValueError(
                f"Invalid fuel range [{self.fuel_min}, {self.fuel_max}]"
            )
        if self.search_radius < 1:
            raise ValueError("search_radius must be at least 1")
        if self.scoreboard_size < 1:
            raise ValueError("scoreboard_size must be at least 1")


DEFAULT_CONFIG = RaceConfig()
