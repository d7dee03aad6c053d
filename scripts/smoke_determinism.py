#!/usr/bin/env python3
"""Smoke-test deterministic behaviour of the solver on sample puzzles."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from orchestrator.orchestrator import solve_grid
from ports.reader_port import read_puzzle
from sudoku.constraints import is_solved

PUZZLE_DIR = ROOT / "puzzles"
RUNS = 3


def _check(path: Path) -> bool:
    puzzle = read_puzzle(path)
    reports = {solve_grid(puzzle, path=str(path)).report() for _ in range(RUNS)}
    if len(reports) != 1:
        print(f"determinism failed for {path.name}: {len(reports)} distinct outputs")
        return False
    outcome = solve_grid(puzzle, path=str(path))
    if outcome.solved and not is_solved(outcome.grid):
        print(f"invalid solution for {path.name}")
        return False
    return True


def main() -> int:
    paths = sorted(PUZZLE_DIR.glob("*.txt"))
    if not paths:
        print(f"no puzzles found under {PUZZLE_DIR}")
        return 1
    if not all([_check(path) for path in paths]):
        return 1
    print(f"Determinism smoke-test passed for {len(paths)} puzzles.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
