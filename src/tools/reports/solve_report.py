"""Aggregation helpers for JSONL solve event logs."""

from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

__all__ = ["aggregate", "main"]


def _load_events(paths: Iterable[Path]) -> Iterable[Mapping[str, object]]:
    for path in paths:
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            yield json.loads(line)


def aggregate(paths: Iterable[Path], *, top: int = 5) -> Mapping[str, object]:
    """Summarise ``solve.completed`` events found in ``paths``.

    The summary holds outcome counts, placement/undo totals and the ``top``
    puzzles that needed the most placements.
    """

    outcomes: Counter[str] = Counter()
    placements = 0
    undos = 0
    elapsed_ms = 0
    hardest: Counter[str] = Counter()
    for event in _load_events(paths):
        if event.get("event") != "solve.completed":
            continue
        outcomes["solved" if event.get("solved") else "unsolvable"] += 1
        stats = event.get("stats")
        if isinstance(stats, Mapping):
            placements += int(stats.get("placements", 0))
            undos += int(stats.get("undos", 0))
            digest = str(event.get("puzzle_digest", "unknown"))
            hardest[digest] = max(hardest[digest], int(stats.get("placements", 0)))
        elapsed_ms += int(event.get("elapsed_ms", 0))

    total = sum(outcomes.values())
    summary = {
        "total_events": total,
        "outcomes": dict(outcomes),
        "placements": placements,
        "undos": undos,
        "mean_elapsed_ms": (elapsed_ms / total) if total else 0.0,
        "hardest": hardest.most_common(top),
    }
    summary["canonical"] = json.dumps(summary, sort_keys=True, separators=(",", ":"))
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Aggregate solve event statistics")
    parser.add_argument("path", help="Directory containing JSONL logs")
    parser.add_argument("--top", type=int, default=5)
    args = parser.parse_args(argv)

    base_dir = Path(args.path)
    files = sorted(base_dir.glob("**/*.jsonl"))
    if not files:
        raise SystemExit(f"No JSONL logs found under {base_dir}")
    summary = aggregate(files, top=args.top)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
