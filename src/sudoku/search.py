"""Recursive depth-first backtracking search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .constraints import DIGITS, is_placement_legal
from .grid import UNSOLVED, Grid
from .trace import SearchTrace, TraceOp

_LOGGER = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected over one call to :func:`solve`."""

    calls: int = 0
    placements: int = 0
    undos: int = 0
    max_depth: int = 0

    def to_payload(self) -> dict:
        return {
            "calls": self.calls,
            "placements": self.placements,
            "undos": self.undos,
            "max_depth": self.max_depth,
        }


def _search(grid: Grid, depth: int, stats: SearchStats, trace: Optional[SearchTrace]) -> bool:
    stats.calls += 1
    if depth > stats.max_depth:
        stats.max_depth = depth

    position = grid.find_first_unsolved()
    if position is None:
        return True

    row, col = position.row, position.col
    for digit in DIGITS:
        if not is_placement_legal(grid, digit, row, col):
            continue
        grid.set(row, col, digit)
        stats.placements += 1
        if trace is not None:
            trace.record(TraceOp.PLACE, row, col, digit, depth)

        if _search(grid, depth + 1, stats, trace):
            return True

        grid.set(row, col, UNSOLVED)
        stats.undos += 1
        if trace is not None:
            trace.record(TraceOp.UNDO, row, col, digit, depth)

    return False


def solve(
    grid: Grid,
    *,
    stats: Optional[SearchStats] = None,
    trace: Optional[SearchTrace] = None,
) -> bool:
    """Fill ``grid`` in place with the first solution found.

    Empty cells are visited in row-major order and digits are tried in
    ascending order, so repeated solves of the same input always yield the
    same grid.  On failure every cell the search touched is reset to ``0`` and
    ``grid`` holds only the original givens.

    Parameters
    ----------
    grid:
        Puzzle to solve.  It is mutated in place.
    stats:
        Optional :class:`SearchStats` updated with call/placement/undo counts.
    trace:
        Optional :class:`SearchTrace` receiving every ``PLACE`` and ``UNDO``.

    Returns
    -------
    bool
        ``True`` once the grid is complete, ``False`` if the search space is
        exhausted.
    """

    stats = stats if stats is not None else SearchStats()
    _LOGGER.debug("starting search with %d unsolved cells", grid.count_unsolved())
    solved = _search(grid, 0, stats, trace)
    _LOGGER.debug(
        "search finished solved=%s calls=%d placements=%d undos=%d",
        solved,
        stats.calls,
        stats.placements,
        stats.undos,
    )
    return solved


def solve_copy(
    grid: Grid,
    *,
    stats: Optional[SearchStats] = None,
    trace: Optional[SearchTrace] = None,
) -> Tuple[bool, Grid]:
    """Solve a copy of ``grid`` and return ``(solved, result)``."""

    working = grid.copy()
    solved = solve(working, stats=stats, trace=trace)
    return solved, working


__all__ = ["SearchStats", "solve", "solve_copy"]
