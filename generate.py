from __future__ import annotations
import pathlib
from typing import List, Union

import numpy as np

from board import Grid, InvalidBoardError
from rules import InvalidCellStateError

# Stock demonstration seed.
DEMO_BOARD: List[List[int]] = [
    [0, 0, 0, 0, 0],
    [0, 0, 0, 1, 0],
    [0, 0, 1, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 0, 0, 0, 0],
]


def demo_board() -> Grid:
    return Grid.from_rows(DEMO_BOARD)


class BoardGenerator:
    """
    Random HxW Life seed. Cells are LIVE with probability `density`;
    the same seed always yields the same sequence of boards.
    """
    def __init__(self, height: int, width: int, *, seed: int = 42, density: float = 0.5):
        if height < 1 or width < 1:
            raise ValueError("height and width must be positive")
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be within [0, 1], got {density}")
        self.h = height
        self.w = width
        self.density = density
        self.rng = np.random.default_rng(seed)

    def _make_grid(self) -> List[List[int]]:
        return [
            [int(self.rng.random() < self.density) for _ in range(self.w)]
            for _ in range(self.h)
        ]

    def generate(self) -> Grid:
        return Grid.from_rows(self._make_grid())


def _parse_cell(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidCellStateError(f"line {lineno}: invalid cell value {token!r}") from None


def parse_board(text: str) -> Grid:
    """
    Parse the textual board format written by render.render_board:
        0,1,0,
        1,1,0,
    Trailing commas and surrounding whitespace are ignored, as are blank
    lines and lines starting with '#'.
    """
    rows: List[List[int]] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        tokens = [tok.strip() for tok in line.split(",")]
        if tokens and tokens[-1] == "":
            tokens.pop()
        rows.append([_parse_cell(tok, lineno) for tok in tokens])

    if not rows:
        raise InvalidBoardError("board must have a positive number of rows and columns")
    return Grid.from_rows(rows)


def load_board(path: Union[str, pathlib.Path]) -> Grid:
    return parse_board(pathlib.Path(path).read_text(encoding="utf-8"))
