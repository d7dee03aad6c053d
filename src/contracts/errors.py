"""Error taxonomy for the solver boundary.

Every error here is raised while handling arguments, configuration or the
puzzle file, before the search starts.  An unsolvable puzzle is not an
error.
"""

from __future__ import annotations

from typing import Optional


class SudokuError(RuntimeError):
    """Base class for user-facing failures."""


class UsageError(SudokuError):
    """Raised when the command line does not name exactly one puzzle file."""

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"Usage: {program} <file>")


class PuzzleFileError(SudokuError):
    """Raised when the puzzle file cannot be opened for reading."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not open file {path}")


class MalformedPuzzleError(SudokuError):
    """Raised when puzzle text is not exactly 81 digits plus whitespace."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


class ConfigError(SudokuError):
    """Raised when the project configuration fails validation."""


__all__ = [
    "ConfigError",
    "MalformedPuzzleError",
    "PuzzleFileError",
    "SudokuError",
    "UsageError",
]
