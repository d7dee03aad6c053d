from __future__ import annotations

import pytest

from contracts.errors import MalformedPuzzleError, PuzzleFileError
from ports.printer_port import SEPARATOR, render_grid
from ports.reader_port import parse_puzzle, read_puzzle

PUZZLE_TEXT = """\
5 3 0 0 7 0 0 0 0
6 0 0 1 9 5 0 0 0
0 9 8 0 0 0 0 6 0
8 0 0 0 6 0 0 0 3
4 0 0 8 0 3 0 0 1
7 0 0 0 2 0 0 0 6
0 6 0 0 0 0 2 8 0
0 0 0 4 1 9 0 0 5
0 0 0 0 8 0 0 7 9
"""

SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

RENDERED = """\
+-----+-----+-----+
|5 3 4|6 7 8|9 1 2|
|6 7 2|1 9 5|3 4 8|
|1 9 8|3 4 2|5 6 7|
+-----+-----+-----+
|8 5 9|7 6 1|4 2 3|
|4 2 6|8 5 3|7 9 1|
|7 1 3|9 2 4|8 5 6|
+-----+-----+-----+
|9 6 1|5 3 7|2 8 4|
|2 8 7|4 1 9|6 3 5|
|3 4 5|2 8 6|1 7 9|
+-----+-----+-----+
"""


def test_parse_skips_whitespace_and_wraps_rows() -> None:
    grid = parse_puzzle(PUZZLE_TEXT)
    assert grid.get(0, 0) == 5
    assert grid.get(1, 0) == 6
    assert grid.get(8, 8) == 9
    assert grid.count_unsolved() == 51


def test_parse_accepts_single_line_and_tabs() -> None:
    flat = "".join(PUZZLE_TEXT.split())
    assert parse_puzzle(flat) == parse_puzzle(PUZZLE_TEXT)
    assert parse_puzzle("\t".join(flat) + "\r\n") == parse_puzzle(flat)


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("0" * 80, "too-few-digits"),
        ("0" * 82, "too-many-digits"),
        ("0" * 40 + "x" + "0" * 40, "invalid-character"),
        ("." * 81, "invalid-character"),
    ],
)
def test_parse_rejects_malformed_input(text: str, code: str) -> None:
    with pytest.raises(MalformedPuzzleError) as excinfo:
        parse_puzzle(text)
    assert excinfo.value.code == code


def test_read_puzzle_from_file(tmp_path) -> None:
    path = tmp_path / "puzzle.txt"
    path.write_text(PUZZLE_TEXT, encoding="utf-8")
    assert read_puzzle(path) == parse_puzzle(PUZZLE_TEXT)


def test_read_missing_file(tmp_path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(PuzzleFileError) as excinfo:
        read_puzzle(missing)
    assert str(excinfo.value) == f"Could not open file {missing}"


def test_render_boxed_grid() -> None:
    assert render_grid(parse_puzzle(SOLVED)) == RENDERED
    assert RENDERED.splitlines()[0] == SEPARATOR
