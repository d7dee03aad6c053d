"""Solve pipeline orchestration and structured event logging."""

from __future__ import annotations

from .orchestrator import SolveOutcome, run_solve, solve_grid

__all__ = ["SolveOutcome", "run_solve", "solve_grid"]
