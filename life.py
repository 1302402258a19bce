#!/usr/bin/env python
"""
life.py

Run Conway's Game of Life on a finite board and print every generation.

With no arguments the stock demonstration runs: 5 generations of the
built-in 5x5 seed, written to stdout.

Examples
-------
python life.py
python life.py --board boards/glider.txt --iterations 20
python life.py --random --height 16 --width 16 --density 0.3 --seed 7 \
       --workers 4 --log logs/run.jsonl
python life.py --config life.yaml
"""

from __future__ import annotations
import argparse, pathlib, sys
from typing import Any, Dict, List, Optional, TextIO

import yaml

from board import Grid, InvalidBoardError
from generate import BoardGenerator, demo_board, load_board
from generation_log import log_generation
from render import write_board
from rules import InvalidCellStateError
from simulate import Board, iter_generations

TITLE = "Conway's GameOfLife"

DEFAULTS: Dict[str, Any] = {
    "iterations": 5,
    "workers": 1,
    "height": 16,
    "width": 16,
    "density": 0.5,
    "seed": 42,
}

CONFIG_KEYS = {"iterations", "board", "workers", "log", "random"}
RANDOM_KEYS = {"height", "width", "density", "seed"}
INT_KEYS = {"iterations", "workers", "height", "width", "seed"}
PATH_KEYS = {"board", "log"}


def _check_value(key: str, value: Any) -> Any:
    """Type-check one config value; ValueError on a mismatch."""
    if key in INT_KEYS:
        # bool is an int subclass, but `iterations: yes` is a mistake
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{key}' must be an integer, got {value!r}")
        return value
    if key == "density":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'density' must be a number, got {value!r}")
        return float(value)
    if key in PATH_KEYS:
        if value is not None and not isinstance(value, str):
            raise ValueError(f"'{key}' must be a path, got {value!r}")
    return value


def run(
    board: Board,
    iterations: int,
    *,
    out: Optional[TextIO] = None,
    workers: int = 1,
    log_file: Optional[pathlib.Path] = None,
    title: Optional[str] = TITLE,
) -> Grid:
    """
    Print the seed and then each of `iterations` generations, a blank line
    between boards. Returns the last generation.
    """
    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    grid = Grid.from_rows(board)
    if out is None:
        out = sys.stdout

    if title:
        out.write(title + "\n")
    write_board(grid, out)
    if log_file is not None:
        log_generation(0, grid, log_file=log_file)

    for gen, grid in enumerate(iter_generations(grid, iterations, workers=workers), 1):
        out.write("\n")
        write_board(grid, out)
        if log_file is not None:
            log_generation(gen, grid, log_file=log_file)
    return grid


def load_config(path: pathlib.Path) -> Dict[str, Any]:
    """
    Read a YAML run config. Recognised keys:
        iterations, board, workers, log,
        random: {height, width, density, seed}
    Unknown keys are reported and ignored.
    """
    spec = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(spec, dict):
        raise ValueError("config must be a mapping")

    cfg: Dict[str, Any] = {}
    for key, value in spec.items():
        if key not in CONFIG_KEYS:
            print(f"[warn] {path}: ignoring unknown key '{key}'", file=sys.stderr)
            continue
        if key == "random":
            value = value or {}
            if not isinstance(value, dict):
                raise ValueError("'random' must be a mapping")
            for rkey, rvalue in value.items():
                if rkey not in RANDOM_KEYS:
                    print(f"[warn] {path}: ignoring unknown key 'random.{rkey}'", file=sys.stderr)
                    continue
                cfg[rkey] = _check_value(rkey, rvalue)
            cfg["random"] = True
        else:
            cfg[key] = _check_value(key, value)
    return cfg


def build_parser() -> argparse.ArgumentParser:
    # Defaults are None so that values from --config can fill the gaps.
    p = argparse.ArgumentParser(description="Run Conway's Game of Life on a finite board.")

    source = p.add_mutually_exclusive_group()
    source.add_argument("--board", type=pathlib.Path, help="Text file with the seed board (rows of 0,1,...).")
    source.add_argument("--random", action="store_true", default=None, help="Start from a random board.")

    p.add_argument("--iterations", type=int, help="Number of generations to compute (default 5).")
    p.add_argument("--height", type=int, help="Random board height (default 16).")
    p.add_argument("--width", type=int, help="Random board width (default 16).")
    p.add_argument("--density", type=float, help="Probability a random cell starts alive (default 0.5).")
    p.add_argument("--seed", type=int, help="RNG seed for the random board (default 42).")
    p.add_argument("--workers", type=int, help="Threads used per generation (default 1).")
    p.add_argument("--log", type=pathlib.Path, help="Append one JSON line per generation to this file.")
    p.add_argument("--config", type=pathlib.Path, help="YAML file with run settings; flags override it.")
    return p


def resolve_settings(args: argparse.Namespace, cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Command-line flags win over the config file, which wins over DEFAULTS."""
    settings: Dict[str, Any] = dict(DEFAULTS)
    settings.update(cfg)
    for key, value in vars(args).items():
        if key != "config" and value is not None:
            settings[key] = value
    # an explicit --board on the command line beats a random block in the config
    if args.board is not None:
        settings["random"] = False
    return settings


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    cfg: Dict[str, Any] = {}
    if args.config is not None:
        try:
            cfg = load_config(args.config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            sys.exit(f"Could not read config {args.config}: {e}")
    settings = resolve_settings(args, cfg)

    try:
        if settings.get("random"):
            board = BoardGenerator(
                settings["height"],
                settings["width"],
                seed=settings["seed"],
                density=settings["density"],
            ).generate()
        elif settings.get("board") is not None:
            board = load_board(settings["board"])
        else:
            board = demo_board()
    except (OSError, UnicodeDecodeError) as e:
        sys.exit(f"Could not read board {settings['board']}: {e}")
    except (InvalidBoardError, InvalidCellStateError) as e:
        sys.exit(f"Invalid board: {e}")
    except ValueError as e:
        sys.exit(f"Invalid settings: {e}")

    log_file = pathlib.Path(settings["log"]) if settings.get("log") else None
    try:
        final = run(
            board,
            settings["iterations"],
            workers=settings["workers"],
            log_file=log_file,
        )
    except (InvalidBoardError, InvalidCellStateError) as e:
        sys.exit(f"Invalid board: {e}")
    except ValueError as e:
        sys.exit(f"Invalid settings: {e}")

    print(
        f"[info] {settings['iterations']} generation(s) on a {final.rows}x{final.cols} board, "
        f"{final.live_count()} live cell(s) at the end",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
