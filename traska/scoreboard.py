"""Top-N scoreboard of finished runs.

Entries are kept ascending by move count. Python's sort is stable, so runs
with the same move count stay in arrival order and a newcomer never displaces
an equal older score.
"""

from dataclasses import dataclass, replace

from pyrsistent import pvector
from pyrsistent.typing import PVector

from traska.components import ScoreEntry
from traska.config import SCOREBOARD_SIZE


@dataclass(frozen=True)
class Scoreboard:
    """Immutable ranked list.

    Attributes:
        entries: Ranked runs, best first.
        capacity: Maximum number of runs kept.
    """

    entries: PVector[ScoreEntry] = pvector()
    capacity: int = SCOREBOARD_SIZE

    def record_completion(self, name: str, moves: int) -> "Scoreboard":
        """Return a scoreboard including the run ``(name, moves)``.

        Any ``name`` is accepted, including an empty string; the same name
        may appear several times.
        """
        ranked = sorted([*self.entries, ScoreEntry(name, moves)], key=lambda e: e.moves)
        return replace(self, entries=pvector(ranked[: self.capacity]))

    @property
    def best(self) -> "ScoreEntry | None":
        return self.entries[0] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)
