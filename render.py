from __future__ import annotations
from typing import Iterable, TextIO

from board import Grid


def render_board(grid: Grid) -> str:
    """
    One line per row, every cell written as its digit followed by a comma:
        0,1,0,
        0,1,0,
    """
    return "".join(
        "".join(f"{int(cell)}," for cell in row) + "\n"
        for row in grid.iter_rows()
    )


def write_board(grid: Grid, fp: TextIO) -> None:
    fp.write(render_board(grid))


def render_run(boards: Iterable[Grid]) -> str:
    """Successive generations separated by a blank line."""
    return "\n".join(render_board(grid) for grid in boards)
