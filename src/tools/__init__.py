"""Command line tools for the Sudoku solver."""
