from __future__ import annotations

import json
from pathlib import Path

from tools.reports import solve_report


def _write_events(path: Path, events: list[dict]) -> None:
    lines = [json.dumps(event, sort_keys=True) for event in events]
    path.write_text("\n".join(lines), encoding="utf-8")


def test_aggregate_counts_outcomes(tmp_path):
    events = [
        {
            "event": "solve.completed",
            "solved": True,
            "puzzle_digest": "sha256-a",
            "elapsed_ms": 4,
            "stats": {"placements": 10, "undos": 2},
        },
        {
            "event": "solve.completed",
            "solved": False,
            "puzzle_digest": "sha256-b",
            "elapsed_ms": 2,
            "stats": {"placements": 36, "undos": 36},
        },
        {"event": "something.else"},
    ]
    log_path = tmp_path / "log.jsonl"
    _write_events(log_path, events)

    summary = solve_report.aggregate([log_path], top=1)

    assert summary["total_events"] == 2
    assert summary["outcomes"] == {"solved": 1, "unsolvable": 1}
    assert summary["placements"] == 46
    assert summary["undos"] == 38
    assert summary["mean_elapsed_ms"] == 3.0
    assert summary["hardest"] == [("sha256-b", 36)]
    canonical = json.loads(summary["canonical"])
    assert canonical["hardest"] == [["sha256-b", 36]]


def test_main_prints_summary(tmp_path, capsys):
    day = tmp_path / "20260101"
    day.mkdir()
    _write_events(day / "solve_00.jsonl", [{"event": "solve.completed", "solved": True}])

    assert solve_report.main([str(tmp_path)]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["total_events"] == 1
