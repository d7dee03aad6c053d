"""JSONL record of completed solves, with optional PLACE/UNDO trace files.

Layout below ``base_dir``::

    <YYYYMMDD>/solve_NN.jsonl   one ``solve.completed`` line per puzzle
    traces/<digest16>.json      trace of the last solve of that puzzle

A day file is closed once it reaches ``max_bytes`` and the next ``NN`` is
opened.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from sudoku.grid import SIZE, Grid
from sudoku.trace import SearchTrace

if TYPE_CHECKING:  # pragma: no cover
    from .orchestrator import SolveOutcome

__all__ = ["SOLVE_EVENT", "SolveEventLog", "build_solve_event"]

SOLVE_EVENT = "solve.completed"
_DEFAULT_MAX_BYTES = 100 * 1024 * 1024


def build_solve_event(outcome: "SolveOutcome", *, trace_path: Optional[Path] = None) -> Dict[str, Any]:
    """Describe ``outcome`` as a ``solve.completed`` record."""

    event: Dict[str, Any] = {
        "event": SOLVE_EVENT,
        "path": outcome.path,
        "puzzle_digest": outcome.puzzle.digest(),
        "solution_digest": outcome.grid.digest() if outcome.solved else None,
        "solved": outcome.solved,
        "givens": SIZE * SIZE - outcome.puzzle.count_unsolved(),
        "elapsed_ms": outcome.elapsed_ms,
        "stats": outcome.stats.to_payload(),
    }
    if outcome.trace is not None:
        event["trace"] = {
            "events": len(outcome.trace.events),
            "dropped": outcome.trace.dropped,
            "path": None if trace_path is None else str(trace_path),
        }
    return event


class SolveEventLog:
    """Appends solve records under ``base_dir``; safe to share between threads."""

    def __init__(self, base_dir: str | Path, *, max_bytes: int | None = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or _DEFAULT_MAX_BYTES
        self._lock = threading.Lock()
        self._current: Path | None = None

    @property
    def current_path(self) -> Path | None:
        return self._current

    def trace_path_for(self, puzzle: Grid) -> Path:
        return self.base_dir / "traces" / f"{puzzle.digest().split('-', 1)[1][:16]}.json"

    def write_trace(self, trace: SearchTrace, puzzle: Grid) -> Path:
        path = self.trace_path_for(puzzle)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(trace.to_json(), encoding="utf-8")
        return path

    def record(self, outcome: "SolveOutcome") -> Path:
        """Write the trace (if any) and the event for ``outcome``.

        ``outcome.trace_path`` and ``outcome.event_path`` are filled in.
        """

        if outcome.trace is not None:
            outcome.trace_path = self.write_trace(outcome.trace, outcome.puzzle)
        event = build_solve_event(outcome, trace_path=outcome.trace_path)
        outcome.event_path = self._append(event)
        return outcome.event_path

    def _active_file(self) -> Path:
        day_dir = self.base_dir / datetime.now(timezone.utc).strftime("%Y%m%d")
        day_dir.mkdir(parents=True, exist_ok=True)

        current = self._current
        if current is not None and current.parent == day_dir and current.exists():
            if current.stat().st_size < self.max_bytes:
                return current

        counter = 0
        while True:
            candidate = day_dir / f"solve_{counter:02d}.jsonl"
            if not candidate.exists() or candidate.stat().st_size < self.max_bytes:
                self._current = candidate
                return candidate
            counter += 1

    def _append(self, event: Dict[str, Any]) -> Path:
        payload = dict(event)
        payload.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))
        line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
        with self._lock:
            path = self._active_file()
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path
