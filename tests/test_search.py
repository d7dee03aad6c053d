"""Behavioural tests for the backtracking search."""

from __future__ import annotations

from typing import Dict, Tuple

from sudoku.constraints import find_conflicts, is_solved
from sudoku.grid import Grid
from sudoku.search import SearchStats, solve, solve_copy
from sudoku.trace import SearchTrace, TraceOp

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

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

FIRST_FROM_EMPTY = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


def _grid_with(givens: Dict[Tuple[int, int], int]) -> Grid:
    grid = Grid.empty()
    for (row, col), digit in givens.items():
        grid.set(row, col, digit)
    return grid


def _dead_end_puzzle() -> Grid:
    # (0, 2) has no candidate, but (0, 0) and (0, 1) are tried first.
    return _grid_with(
        {
            (1, 0): 7,
            (1, 1): 8,
            (2, 0): 9,
            (3, 2): 1,
            (4, 2): 2,
            (5, 2): 3,
            (6, 2): 4,
            (7, 2): 5,
            (8, 2): 6,
        }
    )


def test_solves_published_puzzle() -> None:
    grid = Grid.from_string(PUZZLE)
    assert solve(grid) is True
    assert grid.to_string() == SOLVED
    assert is_solved(grid)


def test_already_solved_grid_returns_immediately() -> None:
    grid = Grid.from_string(SOLVED)
    stats = SearchStats()
    assert solve(grid, stats=stats) is True
    assert grid.to_string() == SOLVED
    assert stats.calls == 1
    assert stats.placements == 0


def test_first_solution_follows_row_major_ascending_order() -> None:
    grid = Grid.empty()
    assert solve(grid) is True
    assert grid.to_string() == FIRST_FROM_EMPTY


def test_repeated_solves_are_deterministic() -> None:
    results = set()
    for _ in range(3):
        solved, grid = solve_copy(Grid.from_string(PUZZLE))
        assert solved
        results.add(grid.to_string())
    assert results == {SOLVED}


def test_solve_copy_leaves_input_untouched() -> None:
    puzzle = Grid.from_string(PUZZLE)
    solved, result = solve_copy(puzzle)
    assert solved is True
    assert puzzle.to_string() == PUZZLE
    assert result.to_string() == SOLVED


def test_failure_undoes_every_placement() -> None:
    grid = _dead_end_puzzle()
    before = grid.rows()
    stats = SearchStats()

    assert solve(grid, stats=stats) is False
    assert grid.rows() == before
    # Six digits fit (0, 0); five of the remaining fit (0, 1) for each.
    assert stats.placements == 36
    assert stats.undos == 36
    assert stats.max_depth == 2


def test_trace_replay_keeps_grid_legal_and_restores_cells() -> None:
    puzzle = Grid.from_string(PUZZLE)
    trace = SearchTrace(limit=None)
    stats = SearchStats()
    solved, _ = solve_copy(puzzle, stats=stats, trace=trace)
    assert solved

    replay = puzzle.copy()
    for event in trace.events:
        if event.op is TraceOp.PLACE:
            assert replay.get(event.row, event.col) == 0
            replay.set(event.row, event.col, event.digit)
            assert find_conflicts(replay) == []
        else:
            assert replay.get(event.row, event.col) == event.digit
            replay.set(event.row, event.col, 0)

    assert replay.to_string() == SOLVED
    assert len(trace.events) == stats.placements + stats.undos
    assert trace.dropped == 0


def test_trace_snapshot_after_failed_branch_matches_pre_attempt_state() -> None:
    grid = _dead_end_puzzle()
    trace = SearchTrace(limit=None)
    solve(grid, trace=trace)

    first_place = trace.events[0]
    assert first_place.op is TraceOp.PLACE
    assert (first_place.row, first_place.col, first_place.digit) == (0, 0, 1)
    undo_of_first = next(
        event
        for event in trace.events
        if event.op is TraceOp.UNDO and (event.row, event.col, event.depth) == (0, 0, 0)
    )
    assert undo_of_first.digit == 1
    assert trace.events[-1].op is TraceOp.UNDO
    assert (trace.events[-1].row, trace.events[-1].col, trace.events[-1].digit) == (0, 0, 6)
