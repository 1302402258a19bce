from __future__ import annotations

import json
import pathlib
import time

from board import Grid

# Default location of the per-run generation log
LOG_PATH = pathlib.Path("logs") / "generations.jsonl"


def log_generation(generation: int, grid: Grid, *, log_file: pathlib.Path = LOG_PATH) -> None:
    """Append a record of one generation to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - generation: 0 for the seed, then 1, 2, ...
      - rows, cols: board dimensions
      - live: number of LIVE cells
      - board: the cells as nested 0/1 lists
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "generation": generation,
        "rows": grid.rows,
        "cols": grid.cols,
        "live": grid.live_count(),
        "board": grid.to_rows(),
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, separators=(",", ":")) + "\n")
