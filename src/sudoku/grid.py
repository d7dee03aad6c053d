"""Grid value object for the classic 9x9 Sudoku."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

SIZE = 9
BOX = 3
UNSOLVED = 0


@dataclass(frozen=True)
class Position:
    """Coordinates of a single cell."""

    row: int
    col: int


class Grid:
    """Mutable 9x9 matrix of digits where ``0`` marks an unsolved cell.

    Reads and writes are unchecked: callers stay within ``[0, 8]`` and the
    constraint checker decides whether a digit may be placed.  Only the
    constructors validate shape and value range.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: List[List[int]]) -> None:
        self._cells = cells

    @classmethod
    def empty(cls) -> "Grid":
        return cls([[UNSOLVED] * SIZE for _ in range(SIZE)])

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Grid":
        """Build a grid from nine rows of nine integers in ``[0, 9]``."""

        cells = [list(row) for row in rows]
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise ValueError("grid must be exactly 9x9")
        for r, row in enumerate(cells):
            for c, value in enumerate(row):
                if not isinstance(value, int) or not 0 <= value <= SIZE:
                    raise ValueError(f"cell ({r}, {c}) must be in [0, 9], got {value!r}")
        return cls(cells)

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Parse an 81-character row-major digit string."""

        if len(text) != SIZE * SIZE or not text.isdigit():
            raise ValueError("expected exactly 81 digits")
        values = [int(ch) for ch in text]
        return cls([values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)])

    def get(self, row: int, col: int) -> int:
        return self._cells[row][col]

    def set(self, row: int, col: int, digit: int) -> None:
        self._cells[row][col] = digit

    def find_first_unsolved(self) -> Optional[Position]:
        """Return the first empty cell in row-major order, or ``None``.

        The scan order fixes the traversal order of the search and therefore
        which solution is found first.
        """

        for row in range(SIZE):
            for col in range(SIZE):
                if self._cells[row][col] == UNSOLVED:
                    return Position(row, col)
        return None

    def count_unsolved(self) -> int:
        return sum(row.count(UNSOLVED) for row in self._cells)

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def copy(self) -> "Grid":
        return Grid([row[:] for row in self._cells])

    def to_string(self) -> str:
        return "".join(str(value) for row in self._cells for value in row)

    def digest(self) -> str:
        """Return ``sha256-<hex>`` of the 81-digit string form."""

        return "sha256-" + hashlib.sha256(self.to_string().encode("ascii")).hexdigest()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid.from_string({self.to_string()!r})"


__all__ = ["BOX", "SIZE", "UNSOLVED", "Grid", "Position"]
