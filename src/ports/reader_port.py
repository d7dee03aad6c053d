"""Puzzle text reader producing a :class:`sudoku.Grid`."""

from __future__ import annotations

from pathlib import Path

from contracts.errors import MalformedPuzzleError, PuzzleFileError
from sudoku.grid import SIZE, Grid

_CELLS = SIZE * SIZE


def parse_puzzle(text: str) -> Grid:
    """Parse 81 digits in row-major order, skipping whitespace.

    Any other character, or a digit count other than 81, raises
    :class:`MalformedPuzzleError`.
    """

    digits: list[int] = []
    for offset, ch in enumerate(text):
        if ch.isspace():
            continue
        if ch not in "0123456789":
            raise MalformedPuzzleError("invalid-character", f"{ch!r} at offset {offset}")
        if len(digits) == _CELLS:
            raise MalformedPuzzleError("too-many-digits", f"more than {_CELLS} digits")
        digits.append(ord(ch) - ord("0"))

    if len(digits) < _CELLS:
        raise MalformedPuzzleError("too-few-digits", f"expected {_CELLS}, got {len(digits)}")

    return Grid([digits[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)])


def read_puzzle(path: str | Path) -> Grid:
    """Read and parse the puzzle stored at ``path``."""

    try:
        with open(path, "r", encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleFileError(str(path)) from exc
    return parse_puzzle(text)


__all__ = ["parse_puzzle", "read_puzzle"]
