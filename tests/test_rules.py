import numpy as np
import pytest
from rules import Cell, InvalidCellStateError, next_cell_state


@pytest.mark.parametrize(
    "cur_state,neigh,expected",
    [
        (Cell.LIVE, 0, Cell.DEAD),   # under-population
        (Cell.LIVE, 1, Cell.DEAD),
        (Cell.LIVE, 2, Cell.LIVE),   # survives
        (Cell.LIVE, 3, Cell.LIVE),
        (Cell.LIVE, 4, Cell.DEAD),   # over-population
        (Cell.LIVE, 8, Cell.DEAD),
        (Cell.DEAD, 3, Cell.LIVE),   # reproduction
        (Cell.DEAD, 2, Cell.DEAD),
        (Cell.DEAD, 4, Cell.DEAD),
        (Cell.DEAD, 0, Cell.DEAD),
    ],
)
def test_rule_table(cur_state, neigh, expected):
    assert next_cell_state(cur_state, neigh) == expected


def test_rule_accepts_plain_ints():
    assert next_cell_state(1, 2) == Cell.LIVE
    assert next_cell_state(0, 3) == Cell.LIVE


def test_rule_invalid_state():
    """A third state is rejected whatever the neighbor count."""
    with pytest.raises(InvalidCellStateError):
        next_cell_state(2, 3)
    with pytest.raises(InvalidCellStateError):
        next_cell_state(-1, 0)


def test_rule_invalid_neighbor_count():
    with pytest.raises(ValueError):
        next_cell_state(Cell.LIVE, 9)
    with pytest.raises(ValueError):
        next_cell_state(Cell.DEAD, -1)


def test_cell_coerce():
    assert Cell.coerce(0) is Cell.DEAD
    assert Cell.coerce(1) is Cell.LIVE
    assert Cell.coerce(True) is Cell.LIVE
    assert Cell.coerce(Cell.DEAD) is Cell.DEAD

    for bad in (2, -1, "1", 1.0, None):
        with pytest.raises(InvalidCellStateError):
            Cell.coerce(bad)


def test_invalid_cell_state_is_value_error():
    assert issubclass(InvalidCellStateError, ValueError)


def test_cell_coerce_numpy_integers():
    assert Cell.coerce(np.int64(1)) is Cell.LIVE
    assert Cell.coerce(np.uint8(0)) is Cell.DEAD
    with pytest.raises(InvalidCellStateError):
        Cell.coerce(np.int64(2))
    with pytest.raises(InvalidCellStateError):
        Cell.coerce(np.float64(1.0))
