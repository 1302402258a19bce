import pytest
from board import Grid, InvalidBoardError
from rules import Cell, InvalidCellStateError


def test_from_rows_shape_and_access():
    grid = Grid.from_rows([[0, 1, 0], [1, 1, 0]])
    assert grid.shape == (2, 3)
    assert grid[0, 1] is Cell.LIVE
    assert grid[1, 2] is Cell.DEAD
    assert grid.row(1) == (Cell.LIVE, Cell.LIVE, Cell.DEAD)
    assert grid.to_rows() == [[0, 1, 0], [1, 1, 0]]
    assert grid.live_count() == 3


def test_flat_buffer_is_row_major():
    grid = Grid.from_rows([[1, 0], [0, 0], [0, 1]])
    assert grid.cells == (Cell.LIVE, Cell.DEAD, Cell.DEAD, Cell.DEAD, Cell.DEAD, Cell.LIVE)


@pytest.mark.parametrize("rows", [[], [[]], [[], []]])
def test_empty_board_rejected(rows):
    with pytest.raises(InvalidBoardError):
        Grid.from_rows(rows)


def test_jagged_rows_rejected():
    with pytest.raises(InvalidBoardError):
        Grid.from_rows([[0, 1, 0], [1, 0]])


def test_bad_cell_value_rejected():
    with pytest.raises(InvalidCellStateError):
        Grid.from_rows([[0, 1], [2, 0]])


def test_direct_constructor_validates():
    with pytest.raises(InvalidBoardError):
        Grid(0, 3, ())
    with pytest.raises(InvalidBoardError):
        Grid(2, 2, (0, 0, 0))
    with pytest.raises(InvalidCellStateError):
        Grid(1, 2, (0, 5))


def test_out_of_bounds_access():
    grid = Grid.dead(2, 2)
    with pytest.raises(IndexError):
        grid[2, 0]
    with pytest.raises(IndexError):
        grid[0, -1]


def test_grid_is_immutable_and_hashable():
    grid = Grid.from_rows([[1, 0], [0, 1]])
    with pytest.raises(AttributeError):
        grid.rows = 3
    assert grid == Grid.from_rows([[True, False], [False, True]])
    assert len({grid, Grid.from_rows([[1, 0], [0, 1]])}) == 1


def test_from_rows_passes_grid_through():
    grid = Grid.dead(3, 4)
    assert Grid.from_rows(grid) is grid
    assert grid.live_count() == 0
