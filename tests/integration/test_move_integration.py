import random

import pytest

from traska.components import PATH_CELL, Position, Vector
from traska.config import RaceConfig
from traska.levels.generator import generate
from traska.step import attempt_inertia_move, attempt_move, restart
from traska.types import GameStatus, MoveError
from tests.test_utils import (
    ELBOW_3X3,
    FUEL_3X3,
    LINE_3X3,
    assert_agreement,
    make_state,
    random_walk,
)


def test_example_scenario() -> None:
    state = make_state(LINE_3X3)

    result = attempt_move(state, Position(1, 0))
    assert result.success and result.state is not None
    state = result.state
    assert state.energy == 4
    assert state.vector == Vector(1, 0)
    assert Position(2, 0) in state.legal_moves

    result = attempt_inertia_move(state)
    assert result.success and result.state is not None
    state = result.state
    assert state.position == Position(2, 0)
    assert state.energy == 4
    assert state.move_count == 2

    result = attempt_move(state, Position(2, 1))
    assert result.state is not None
    state = result.state
    assert state.energy == 2
    assert state.vector == Vector(0, 1)

    result = attempt_inertia_move(state)
    assert result.success and result.state is not None
    assert result.state.status == GameStatus.WON
    assert result.completed is not None
    assert result.completed.moves == 4
    assert result.completed.position == Position(2, 2)


def test_failed_move_leaves_state_untouched() -> None:
    state = make_state(LINE_3X3, initial_energy=1)
    result = attempt_move(state, Position(2, 0))
    assert not result.success
    assert result.error == MoveError.INSUFFICIENT_ENERGY
    assert result.state is state
    assert state.position == Position(0, 0)
    assert state.energy == 1
    assert state.vector is None
    assert state.move_count == 0


def test_fuel_nets_after_cost() -> None:
    state = make_state(FUEL_3X3)
    result = attempt_move(state, Position(1, 0))
    assert result.state is not None
    state = result.state
    assert state.energy == 5 - 1 + 5
    assert state.grid.cell_at(Position(1, 0)) == PATH_CELL

    # Coast on, then come back: no second pickup.
    state = attempt_move(state, Position(2, 0)).state
    assert state is not None and state.energy == 9
    state = attempt_move(state, Position(1, 0)).state
    assert state is not None
    assert state.energy == 9 - 2
    assert state.grid.cell_at(Position(1, 0)) == PATH_CELL


def test_fuel_does_not_fund_its_own_move() -> None:
    # Reaching the fuel tile costs 2 but only 1 energy is held before pickup.
    state = make_state(["S.5", "##.", "##F"], initial_energy=1)
    result = attempt_move(state, Position(2, 0))
    assert result.error == MoveError.INSUFFICIENT_ENERGY
    assert result.state is state


def test_own_tile_and_off_board_targets() -> None:
    state = make_state(LINE_3X3)
    assert attempt_move(state, Position(0, 0)).error == MoveError.INVALID_TARGET
    assert attempt_move(state, Position(0, 1)).error == MoveError.INVALID_TARGET
    assert attempt_move(state, Position(-1, 0)).error == MoveError.OUT_OF_BOUNDS


def test_inertia_without_momentum_is_declined_silently() -> None:
    state = make_state(LINE_3X3)
    result = attempt_inertia_move(state)
    assert not result.success
    assert result.error is None
    assert result.state is state


def test_inertia_off_board_is_declined_silently() -> None:
    state = attempt_move(make_state(LINE_3X3), Position(2, 0)).state
    assert state is not None
    result = attempt_inertia_move(state)
    assert not result.success
    assert result.error is None
    assert result.state is state


def test_inertia_into_empty_space_is_rejected() -> None:
    state = attempt_move(make_state(ELBOW_3X3), Position(1, 0)).state
    assert state is not None
    result = attempt_inertia_move(state)
    assert result.error == MoveError.INVALID_TARGET
    assert result.state is state


def test_moves_blocked_after_win() -> None:
    state = attempt_move(make_state(LINE_3X3), Position(2, 2)).state
    assert state is not None and state.won
    assert len(state.legal_moves) == 0
    result = attempt_move(state, Position(2, 1))
    assert result.error == MoveError.GAME_OVER
    assert result.state is state


def test_restart_resets_run_and_keeps_collected_fuel() -> None:
    state = attempt_move(make_state(FUEL_3X3), Position(1, 0)).state
    assert state is not None
    fresh = restart(state)
    assert fresh.position == Position(0, 0)
    assert fresh.energy == 5
    assert fresh.vector is None
    assert fresh.move_count == 0
    assert fresh.grid.cell_at(Position(1, 0)) == PATH_CELL
    assert fresh.grid == state.grid
    assert fresh.legal_moves == make_state(FUEL_3X3).legal_moves


def test_fuel_cannot_be_collected_again_after_restart() -> None:
    state = attempt_move(make_state(FUEL_3X3), Position(1, 0)).state
    assert state is not None and state.energy == 9
    again = attempt_move(restart(state), Position(1, 0)).state
    assert again is not None
    assert again.energy == 5 - 1


def test_restart_after_win_reactivates() -> None:
    state = attempt_move(make_state(LINE_3X3), Position(2, 2)).state
    assert state is not None
    assert restart(state).status == GameStatus.ACTIVE


def test_agreement_on_hand_made_level() -> None:
    state = make_state(FUEL_3X3)
    assert_agreement(state)
    state = attempt_move(state, Position(1, 0)).state
    assert state is not None
    assert_agreement(state)


@pytest.mark.parametrize("seed", range(15))
def test_agreement_and_energy_along_random_walks(seed: int) -> None:
    rng = random.Random(seed)
    states = random_walk(generate(RaceConfig(), seed=seed), rng, max_moves=25)
    for state in states:
        assert state.energy >= 0
        if not state.won:
            assert_agreement(state)
