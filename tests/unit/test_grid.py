import pytest

from traska.components import PATH_CELL, Position, fuel_cell
from traska.grid import Grid
from traska.types import CellKind


def test_missing_cells_read_as_empty() -> None:
    grid = Grid(3)
    assert grid.kind_at(Position(1, 1)) == CellKind.EMPTY
    assert not grid.is_open(Position(1, 1))


def test_set_returns_new_grid() -> None:
    grid = Grid(3)
    updated = grid.set(Position(1, 1), PATH_CELL)
    assert updated.kind_at(Position(1, 1)) == CellKind.PATH
    assert grid.kind_at(Position(1, 1)) == CellKind.EMPTY


def test_set_out_of_bounds_raises() -> None:
    with pytest.raises(IndexError):
        Grid(3).set(Position(3, 0), PATH_CELL)


def test_consume_fuel_only_touches_fuel() -> None:
    grid = Grid(3).set(Position(0, 0), fuel_cell(4)).set(Position(1, 0), PATH_CELL)
    consumed = grid.consume_fuel(Position(0, 0))
    assert consumed.cell_at(Position(0, 0)) == PATH_CELL
    assert grid.consume_fuel(Position(1, 0)) is grid


def test_negative_fuel_rejected() -> None:
    with pytest.raises(ValueError):
        fuel_cell(-1)


def test_rows_cover_board() -> None:
    grid = Grid(2).set(Position(1, 0), PATH_CELL)
    rows = list(grid.rows())
    assert len(rows) == 2
    assert [cell.kind for cell in rows[0]] == [CellKind.EMPTY, CellKind.PATH]
