from __future__ import annotations
import concurrent.futures
from typing import Iterator, List, Optional, Sequence, Union

from board import Grid
from rules import Cell, next_cell_state

Board = Union[Grid, Sequence[Sequence[int]]]


def live_neighbours(r: int, c: int, board: Grid) -> int:
    """
    Return number of live neighbors (Moore, eight cells) for cell (r,c).
    The window is clipped at the board edges: cells past the boundary do not
    exist, so corners see 3 neighbors and edges 5.
    """
    board[r, c]  # IndexError for positions off the board
    total = 0
    for rr in range(max(0, r - 1), min(board.rows, r + 2)):
        for cc in range(max(0, c - 1), min(board.cols, c + 2)):
            if rr == r and cc == c:
                continue
            if board.cells[rr * board.cols + cc] == Cell.LIVE:
                total += 1
    return total


def _step_rows(board: Grid, start: int, stop: int) -> List[Cell]:
    out: List[Cell] = []
    for r in range(start, stop):
        for c in range(board.cols):
            out.append(next_cell_state(board.cells[r * board.cols + c], live_neighbours(r, c, board)))
    return out


def next_generation(board: Board, *, workers: int = 1) -> Grid:
    """
    One synchronous Life update (hard edges). Every new cell is computed from
    the input generation only; the input is never modified.

    With workers > 1 the rows are split into bands that are evaluated on a
    thread pool and joined before the new Grid is built.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    grid = Grid.from_rows(board)

    if workers == 1 or grid.rows == 1:
        return Grid(grid.rows, grid.cols, tuple(_step_rows(grid, 0, grid.rows)))

    n_bands = min(workers, grid.rows)
    bounds = [(i * grid.rows // n_bands, (i + 1) * grid.rows // n_bands) for i in range(n_bands)]
    with concurrent.futures.ThreadPoolExecutor(max_workers=n_bands) as executor:
        futures = [executor.submit(_step_rows, grid, start, stop) for start, stop in bounds]
        # keep band order; result() re-raises anything a worker hit
        bands = [future.result() for future in futures]

    cells: List[Cell] = []
    for band in bands:
        cells.extend(band)
    return Grid(grid.rows, grid.cols, tuple(cells))


def iter_generations(board: Board, generations: int, *, workers: int = 1) -> Iterator[Grid]:
    """Yield generations 1..N of `board`, in order."""
    if generations < 0:
        raise ValueError("generations must be non-negative")
    curr = Grid.from_rows(board)
    for _ in range(generations):
        curr = next_generation(curr, workers=workers)
        yield curr


def simulate(board: Board, generations: int = 1, *, workers: int = 1) -> Grid:
    curr = Grid.from_rows(board)
    for curr in iter_generations(curr, generations, workers=workers):
        pass
    return curr


def find_period(board: Board, max_period: int = 16) -> Optional[int]:
    """
    Smallest p in 1..max_period such that p steps return the board to itself
    (1 = still life, 2 = blinker-style oscillator). None if no repeat is seen.
    """
    start = Grid.from_rows(board)
    for p, grid in enumerate(iter_generations(start, max_period), 1):
        if grid == start:
            return p
    return None
