"""Shared error contracts for the Sudoku solver."""

from __future__ import annotations

from .errors import ConfigError, MalformedPuzzleError, PuzzleFileError, SudokuError, UsageError

__all__ = [
    "ConfigError",
    "MalformedPuzzleError",
    "PuzzleFileError",
    "SudokuError",
    "UsageError",
]
