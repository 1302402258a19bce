from __future__ import annotations
import numbers
from enum import IntEnum


NEIGHBOR_COUNT = 8 # Moore neighborhood


class InvalidCellStateError(ValueError):
    """Raised when a cell holds something other than DEAD (0) or LIVE (1)."""


class Cell(IntEnum):
    DEAD = 0
    LIVE = 1

    @classmethod
    def coerce(cls, value: object) -> "Cell":
        """
        Convert a raw board value (int, bool, numpy integer or Cell) into a Cell.
        Anything else is a data-integrity error.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, numbers.Integral) and value in (0, 1):
            return cls(int(value))
        raise InvalidCellStateError(f"state of cell must be either LIVE or DEAD, got {value!r}")


def next_cell_state(cur_state: Cell, live_neighbours: int) -> Cell:
    """
    Standard Life rule (B3/S23):
        LIVE with 2 or 3 live neighbours survives, otherwise dies.
        DEAD with exactly 3 live neighbours becomes LIVE.
    """
    if not (0 <= live_neighbours <= NEIGHBOR_COUNT):
        raise ValueError(f"invalid neighbor count {live_neighbours}")

    if cur_state == Cell.LIVE:
        if live_neighbours < 2:
            return Cell.DEAD  # under-population
        if live_neighbours > 3:
            return Cell.DEAD  # over-population
        return Cell.LIVE
    if cur_state == Cell.DEAD:
        return Cell.LIVE if live_neighbours == 3 else Cell.DEAD
    raise InvalidCellStateError(f"state of cell must be either LIVE or DEAD, got {cur_state!r}")
