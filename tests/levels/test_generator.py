import random

import pytest

from traska.components import Position
from traska.config import RaceConfig
from traska.levels.generator import generate, generate_map, generate_path
from traska.types import CellKind, GameStatus


@pytest.mark.parametrize("seed", range(30))
def test_path_is_monotonic_lattice_walk(seed: int) -> None:
    path = generate_path(10, random.Random(seed))
    assert len(path) == 2 * (10 - 1) + 1
    assert path[0] == Position(0, 0)
    assert path[-1] == Position(9, 9)
    assert len(set(path)) == len(path)
    for prev, nxt in zip(path, path[1:]):
        assert (nxt.x - prev.x, nxt.y - prev.y) in ((1, 0), (0, 1))


@pytest.mark.parametrize("seed", range(30))
def test_map_cells_follow_path(seed: int) -> None:
    grid, path = generate_map(10, random.Random(seed))
    assert set(grid.cells.keys()) == set(path)
    assert grid.positions_of(CellKind.START) == [Position(0, 0)]
    assert grid.positions_of(CellKind.FINISH) == [path[-1]]
    for i, pos in enumerate(path[1:-1], start=1):
        cell = grid.cell_at(pos)
        if i % 2 == 1:
            assert cell.kind == CellKind.FUEL
            assert 2 <= cell.amount <= 10
        else:
            assert cell.kind == CellKind.PATH


def test_fuel_range_is_configurable() -> None:
    grid, _ = generate_map(8, random.Random(3), fuel_min=4, fuel_max=4)
    amounts = {cell.amount for cell in grid.cells.values() if cell.is_fuel}
    assert amounts == {4}


def test_smallest_board() -> None:
    grid, path = generate_map(2, random.Random(0))
    assert len(path) == 3
    assert grid.kind_at(path[1]) == CellKind.FUEL


def test_seed_reproduces_layout() -> None:
    a = generate(RaceConfig(), seed=123)
    b = generate(RaceConfig(), seed=123)
    assert a.grid == b.grid
    assert list(a.path) == list(b.path)


def test_generate_returns_initial_state() -> None:
    config = RaceConfig(grid_size=6, initial_energy=7)
    state = generate(config, seed=9)
    assert state.position == Position(0, 0)
    assert state.energy == 7
    assert state.vector is None
    assert state.move_count == 0
    assert state.status == GameStatus.ACTIVE
    assert state.finish == Position(5, 5)
    assert state.seed == 9
    assert len(state.legal_moves) > 0
