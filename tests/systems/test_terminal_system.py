from dataclasses import replace

from traska.components import Position
from traska.systems.legal import legal_moves_system
from traska.systems.terminal import win_system
from traska.types import GameStatus
from tests.test_utils import LINE_3X3, make_state


def test_win_on_finish() -> None:
    state = replace(make_state(LINE_3X3), position=Position(2, 2))
    assert win_system(state).status == GameStatus.WON


def test_no_win_elsewhere() -> None:
    state = replace(make_state(LINE_3X3), position=Position(2, 1))
    assert win_system(state) is state


def test_won_state_has_no_legal_moves() -> None:
    state = win_system(replace(make_state(LINE_3X3), position=Position(2, 2)))
    assert len(legal_moves_system(state).legal_moves) == 0
