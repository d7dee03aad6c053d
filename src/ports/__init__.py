"""Presentation adapters between puzzle text and :class:`sudoku.Grid`."""

from __future__ import annotations

from .printer_port import render_grid
from .reader_port import parse_puzzle, read_puzzle

__all__ = ["parse_puzzle", "read_puzzle", "render_grid"]
