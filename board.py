from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from rules import Cell


class InvalidBoardError(ValueError):
    """Raised for boards with no rows, no columns, or rows of unequal length."""


@dataclass(frozen=True)
class Grid:
    """
    Immutable rows x cols board of Cells, stored row-major in one flat tuple:
        cell (r, c) lives at cells[r * cols + c]
    Every generation is a fresh Grid; nothing ever writes into an existing one.
    """
    rows: int
    cols: int
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise InvalidBoardError("board must have a positive number of rows and columns")
        if len(self.cells) != self.rows * self.cols:
            raise InvalidBoardError(
                f"cell buffer length {len(self.cells)} "
                f"does not match {self.rows} x {self.cols}"
            )
        object.__setattr__(self, "cells", tuple(Cell.coerce(value) for value in self.cells))

    @classmethod
    def from_rows(cls, rows: Union["Grid", Sequence[Sequence[int]]]) -> "Grid":
        """
        Build a Grid from nested rows of 0/1 values (ints, bools or Cells).
        Raises InvalidBoardError for empty or jagged input and
        InvalidCellStateError for any other cell value.
        """
        if isinstance(rows, Grid):
            return rows
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidBoardError("board must have a positive number of rows and columns")

        width = len(rows[0])
        flat: List[int] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidBoardError(f"row {r} has {len(row)} columns, expected {width}")
            flat.extend(row)
        return cls(len(rows), width, tuple(flat))

    @classmethod
    def dead(cls, rows: int, cols: int) -> "Grid":
        return cls(rows, cols, (Cell.DEAD,) * (rows * cols))

    def _index(self, r: int, c: int) -> int:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"position ({r}, {c}) outside {self.rows} x {self.cols} board")
        return r * self.cols + c

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        r, c = pos
        return self.cells[self._index(r, c)]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def row(self, r: int) -> Tuple[Cell, ...]:
        start = self._index(r, 0)
        return self.cells[start:start + self.cols]

    def iter_rows(self) -> Iterator[Tuple[Cell, ...]]:
        for r in range(self.rows):
            yield self.row(r)

    def to_rows(self) -> List[List[int]]:
        """Nested lists of plain ints, e.g. for JSON."""
        return [[int(cell) for cell in row] for row in self.iter_rows()]

    def live_count(self) -> int:
        return sum(1 for cell in self.cells if cell == Cell.LIVE)
