"""Fixed-width text rendering of a grid."""

from __future__ import annotations

from typing import List

from sudoku.grid import BOX, SIZE, Grid

SEPARATOR = "+-----+-----+-----+"


def _render_row(grid: Grid, row: int) -> str:
    parts: List[str] = []
    for col in range(SIZE):
        if col % BOX == 0:
            parts.append("|")
        parts.append(str(grid.get(row, col)))
        if (col + 1) % BOX != 0:
            parts.append(" ")
    parts.append("|")
    return "".join(parts)


def render_lines(grid: Grid) -> List[str]:
    lines: List[str] = []
    for row in range(SIZE):
        if row % BOX == 0:
            lines.append(SEPARATOR)
        lines.append(_render_row(grid, row))
    lines.append(SEPARATOR)
    return lines


def render_grid(grid: Grid) -> str:
    """Return the boxed text form of ``grid`` ending with a newline."""

    return "\n".join(render_lines(grid)) + "\n"


__all__ = ["SEPARATOR", "render_grid", "render_lines"]
