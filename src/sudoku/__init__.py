"""Backtracking solver for the classic 9x9 Sudoku."""

from __future__ import annotations

from .constraints import (
    box_allows,
    candidates,
    col_allows,
    find_conflicts,
    is_placement_legal,
    is_solved,
    row_allows,
)
from .grid import SIZE, UNSOLVED, Grid, Position
from .search import SearchStats, solve, solve_copy
from .trace import SearchTrace, TraceEvent, TraceOp, TraceValidationError

__all__ = [
    "SIZE",
    "UNSOLVED",
    "Grid",
    "Position",
    "SearchStats",
    "SearchTrace",
    "TraceEvent",
    "TraceOp",
    "TraceValidationError",
    "box_allows",
    "candidates",
    "col_allows",
    "find_conflicts",
    "is_placement_legal",
    "is_solved",
    "row_allows",
    "solve",
    "solve_copy",
]
