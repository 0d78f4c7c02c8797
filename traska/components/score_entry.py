"""Score entry component (one finished run)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreEntry:
    """Scoreboard row.

    Attributes:
        name: Player supplied label; may be empty.
        moves: Moves taken to reach the finish.
    """

    name: str
    moves: int
