"""Caller-owned game session.

``GameSession`` wraps the pure reducers in :mod:`traska.step` with the small
amount of mutable bookkeeping a front-end needs: the current state (``None``
while idle), the scoreboard and completion listeners. Each public method runs
to completion; a session must not be shared between threads without external
locking.
"""

import logging
import random
from typing import List, Optional

from traska.components import Completed, Position, ScoreEntry
from traska.config import DEFAULT_CONFIG, RaceConfig
from traska.scoreboard import Scoreboard
from traska.state import GameState
from traska.step import (
    MoveResult,
    attempt_inertia_move,
    attempt_move,
    new_game,
    restart,
)
from traska.types import CompletionHandler, GameStatus, MoveError

logger = logging.getLogger(__name__)


class GameSession:
    """One player's race and scoreboard.

    Arguments:
        config: Rule set for every map generated by this session.
        rng: Seed source for map generation; pass a seeded ``random.Random``
            for reproducible sequences of maps.
    """

    def __init__(
        self,
        config: RaceConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.rng = rng or random.Random()
        self.state: Optional[GameState] = None
        self.scoreboard = Scoreboard(capacity=config.scoreboard_size)
        self.last_completion: Optional[Completed] = None
        self._completion_handlers: List[CompletionHandler] = []

    @property
    def status(self) -> GameStatus:
        if self.state is None:
            return GameStatus.IDLE
        return self.state.status

    def on_completion(self, handler: CompletionHandler) -> None:
        """Register ``handler`` to be called with each ``Completed`` event."""
        self._completion_handlers.append(handler)

    def new_game(self, seed: Optional[int] = None) -> GameState:
        """Generate a new map and start racing on it."""
        if seed is None:
            seed = self.rng.randrange(2**31)
        self.state = new_game(self.config, seed)
        self.last_completion = None
        logger.debug("New game (seed=%d)", seed)
        return self.state

    def load(self, state: GameState) -> GameState:
        """Race on a prebuilt state (e.g. a hand-authored level)."""
        self.state = state
        self.last_completion = None
        return state

    def restart(self) -> GameState:
        """Reset the current run on the same map."""
        if self.state is None:
            raise ValueError("No game to restart; call new_game() first")
        self.state = restart(self.state)
        self.last_completion = None
        return self.state

    def attempt_move(self, target: Position) -> MoveResult:
        if self.state is None:
            return self._idle_result()
        return self._apply(attempt_move(self.state, target))

    def attempt_inertia_move(self) -> MoveResult:
        if self.state is None:
            return self._idle_result()
        return self._apply(attempt_inertia_move(self.state))

    def record_completion(self, name: str, moves: int) -> tuple[ScoreEntry, ...]:
        """Add a finished run to the scoreboard and return the ranked entries."""
        self.scoreboard = self.scoreboard.record_completion(name, moves)
        logger.info("Recorded run %r in %d moves", name, moves)
        return tuple(self.scoreboard.entries)

    def _apply(self, result: MoveResult) -> MoveResult:
        self.state = result.state
        if result.completed is not None:
            self.last_completion = result.completed
            for handler in self._completion_handlers:
                handler(result.completed)
        return result

    def _idle_result(self) -> MoveResult:
        return MoveResult(False, None, MoveError.NO_GAME)
