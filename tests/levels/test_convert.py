import pytest

from traska.components import Position
from traska.levels.convert import grid_from_rows, grid_to_rows, level_from_rows
from traska.types import CellKind
from tests.test_utils import FUEL_3X3, LINE_3X3


def test_parse_level() -> None:
    grid = grid_from_rows(FUEL_3X3)
    assert grid.kind_at(Position(0, 0)) == CellKind.START
    assert grid.cell_at(Position(1, 0)).amount == 5
    assert grid.kind_at(Position(2, 2)) == CellKind.FINISH
    assert grid.kind_at(Position(0, 1)) == CellKind.EMPTY


def test_trace_path() -> None:
    _, path = level_from_rows(LINE_3X3)
    assert list(path) == [
        Position(0, 0),
        Position(1, 0),
        Position(2, 0),
        Position(2, 1),
        Position(2, 2),
    ]


def test_rows_round_trip() -> None:
    assert grid_to_rows(grid_from_rows(FUEL_3X3)) == FUEL_3X3


@pytest.mark.parametrize(
    "rows",
    [
        ["S.", "."],
        ["S.", ".."],
        ["..", ".F"],
        ["S?", ".F"],
    ],
)
def test_malformed_levels_raise(rows: list[str]) -> None:
    with pytest.raises(ValueError):
        grid_from_rows(rows)


def test_branching_route_raises() -> None:
    with pytest.raises(ValueError):
        level_from_rows(["S..", "...", "..F"])
