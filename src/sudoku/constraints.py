"""Row, column and box rules for digit placement."""

from __future__ import annotations

from typing import List, Tuple

from .grid import BOX, SIZE, UNSOLVED, Grid

DIGITS = range(1, SIZE + 1)

Conflict = Tuple[str, int, int]


def row_allows(grid: Grid, digit: int, row: int) -> bool:
    """Return ``True`` if ``digit`` does not appear anywhere in ``row``."""

    return all(grid.get(row, col) != digit for col in range(SIZE))


def col_allows(grid: Grid, digit: int, col: int) -> bool:
    """Return ``True`` if ``digit`` does not appear anywhere in ``col``."""

    return all(grid.get(row, col) != digit for row in range(SIZE))


def _box_origin(row: int, col: int) -> Tuple[int, int]:
    return row - row % BOX, col - col % BOX


def box_allows(grid: Grid, digit: int, row: int, col: int) -> bool:
    """Return ``True`` if ``digit`` is absent from the 3x3 box of ``(row, col)``."""

    start_row, start_col = _box_origin(row, col)
    for r in range(start_row, start_row + BOX):
        for c in range(start_col, start_col + BOX):
            if grid.get(r, c) == digit:
                return False
    return True


def is_placement_legal(grid: Grid, digit: int, row: int, col: int) -> bool:
    """Return ``True`` if ``digit`` may be written into the empty cell ``(row, col)``.

    A filled cell never accepts a digit, whatever the row, column and box
    contain.
    """

    return (
        grid.get(row, col) == UNSOLVED
        and row_allows(grid, digit, row)
        and col_allows(grid, digit, col)
        and box_allows(grid, digit, row, col)
    )


def candidates(grid: Grid, row: int, col: int) -> List[int]:
    """Digits that may legally occupy ``(row, col)``, ascending."""

    return [digit for digit in DIGITS if is_placement_legal(grid, digit, row, col)]


def _duplicates(values: List[int]) -> List[int]:
    seen: set[int] = set()
    dupes: List[int] = []
    for value in values:
        if value == UNSOLVED:
            continue
        if value in seen and value not in dupes:
            dupes.append(value)
        seen.add(value)
    return dupes


def find_conflicts(grid: Grid) -> List[Conflict]:
    """List ``(kind, index, digit)`` for every digit repeated within a unit.

    ``kind`` is one of ``"row"``, ``"col"`` or ``"box"``; boxes are numbered
    0..8 in row-major order.
    """

    conflicts: List[Conflict] = []
    for row in range(SIZE):
        values = [grid.get(row, col) for col in range(SIZE)]
        conflicts.extend(("row", row, digit) for digit in _duplicates(values))
    for col in range(SIZE):
        values = [grid.get(row, col) for row in range(SIZE)]
        conflicts.extend(("col", col, digit) for digit in _duplicates(values))
    for box in range(SIZE):
        start_row, start_col = (box // BOX) * BOX, (box % BOX) * BOX
        values = [
            grid.get(r, c)
            for r in range(start_row, start_row + BOX)
            for c in range(start_col, start_col + BOX)
        ]
        conflicts.extend(("box", box, digit) for digit in _duplicates(values))
    return conflicts


def is_solved(grid: Grid) -> bool:
    """Return ``True`` for a completely filled grid without repeated digits."""

    return grid.find_first_unsolved() is None and not find_conflicts(grid)


__all__ = [
    "DIGITS",
    "box_allows",
    "candidates",
    "col_allows",
    "find_conflicts",
    "is_placement_legal",
    "is_solved",
    "row_allows",
]
