"""Solve pipeline: puzzle file → Grid → search → rendered report."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from feature_flags import (
    event_log_dir,
    event_log_max_bytes,
    is_event_log_enabled,
    is_trace_enabled,
)
from ports.printer_port import render_grid
from ports.reader_port import read_puzzle
from project_config import get_section
from sudoku.constraints import find_conflicts
from sudoku.grid import Grid
from sudoku.search import SearchStats, solve
from sudoku.trace import SearchTrace

from .log import SolveEventLog

_LOGGER = logging.getLogger(__name__)

SOLVED_BANNER = "The completed Sudoku puzzle is:"
UNSOLVABLE_MESSAGE = "Sudoku cannot be solved"


@dataclass
class SolveOutcome:
    """Result of running the pipeline for one puzzle file."""

    path: str
    puzzle: Grid
    grid: Grid
    solved: bool
    stats: SearchStats
    elapsed_ms: int
    trace: Optional[SearchTrace] = None
    event_path: Optional[Path] = None
    trace_path: Optional[Path] = None

    def report_lines(self) -> List[str]:
        if not self.solved:
            return [UNSOLVABLE_MESSAGE]
        return [SOLVED_BANNER, render_grid(self.grid).rstrip("\n")]

    def report(self) -> str:
        return "\n".join(self.report_lines()) + "\n"


def make_trace() -> SearchTrace:
    """Create a trace bounded by ``solver.trace_limit``."""

    return SearchTrace(limit=int(get_section("solver.trace_limit")))


def solve_grid(
    puzzle: Grid,
    *,
    path: str = "<memory>",
    trace: Optional[SearchTrace] = None,
) -> SolveOutcome:
    """Solve a copy of ``puzzle`` and measure the search.

    Givens that already repeat a digit within a row, column or box make the
    puzzle unsolvable without running the search.
    """

    working = puzzle.copy()
    stats = SearchStats()
    started = time.perf_counter()
    conflicts = find_conflicts(puzzle)
    if conflicts:
        _LOGGER.info("givens conflict in %s: %s", path, conflicts)
        solved = False
    else:
        solved = solve(working, stats=stats, trace=trace)
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    _LOGGER.info(
        "solved=%s path=%s placements=%d undos=%d elapsed_ms=%d",
        solved,
        path,
        stats.placements,
        stats.undos,
        elapsed_ms,
    )
    return SolveOutcome(
        path=path,
        puzzle=puzzle,
        grid=working,
        solved=solved,
        stats=stats,
        elapsed_ms=elapsed_ms,
        trace=trace,
    )


def run_solve(path: str | Path, *, env: Mapping[str, str] | None = None) -> SolveOutcome:
    """Read ``path``, solve it and optionally record a JSONL event.

    Raises :class:`contracts.errors.PuzzleFileError` or
    :class:`contracts.errors.MalformedPuzzleError` before any search work.
    """

    puzzle = read_puzzle(path)
    trace = make_trace() if is_trace_enabled(env) else None
    outcome = solve_grid(puzzle, path=str(path), trace=trace)

    if is_event_log_enabled(env):
        SolveEventLog(event_log_dir(env), max_bytes=event_log_max_bytes()).record(outcome)
        _LOGGER.debug("recorded solve event in %s", outcome.event_path)

    return outcome


__all__ = [
    "SOLVED_BANNER",
    "UNSOLVABLE_MESSAGE",
    "SolveOutcome",
    "make_trace",
    "run_solve",
    "solve_grid",
]
