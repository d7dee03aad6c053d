"""Placement/undo trace recorded by the backtracking search."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import List, MutableSequence


class TraceValidationError(ValueError):
    """Raised when a trace event is malformed."""


class TraceOp(str, Enum):
    """Grid mutations performed by the search."""

    PLACE = "PLACE"
    UNDO = "UNDO"

    @classmethod
    def from_value(cls, value: str) -> "TraceOp":
        try:
            return cls(value)
        except ValueError as exc:
            raise TraceValidationError(f"Unsupported trace op: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """Single mutation of the grid during the search."""

    step: int
    op: TraceOp
    row: int
    col: int
    digit: int
    depth: int

    def __post_init__(self) -> None:
        if not isinstance(self.op, TraceOp):
            object.__setattr__(self, "op", TraceOp.from_value(str(self.op)))
        if self.step < 1:
            raise TraceValidationError("step must be >= 1")
        if not (0 <= self.row <= 8 and 0 <= self.col <= 8):
            raise TraceValidationError(f"cell ({self.row}, {self.col}) is out of range")
        if not 1 <= self.digit <= 9:
            raise TraceValidationError(f"digit must be in [1, 9], got {self.digit!r}")
        if self.depth < 0:
            raise TraceValidationError("depth must be >= 0")

    def to_payload(self) -> dict:
        return {
            "step": int(self.step),
            "op": self.op.value,
            "row": int(self.row),
            "col": int(self.col),
            "digit": int(self.digit),
            "depth": int(self.depth),
        }


@dataclass
class SearchTrace:
    """Bounded accumulator of :class:`TraceEvent` records.

    ``limit`` caps how many events are stored; later events are only counted
    in ``dropped`` so long searches keep a bounded memory footprint.  A limit
    of ``None`` stores everything.
    """

    limit: int | None = None
    events: MutableSequence[TraceEvent] = field(default_factory=list)
    dropped: int = 0
    _step: int = field(default=0, init=False, repr=False)

    def record(self, op: TraceOp, row: int, col: int, digit: int, depth: int) -> None:
        self._step += 1
        if self.limit is not None and len(self.events) >= self.limit:
            self.dropped += 1
            return
        self.events.append(TraceEvent(self._step, op, row, col, digit, depth))

    def snapshot(self) -> List[TraceEvent]:
        return list(self.events)

    def to_json(self, *, indent: int | None = None) -> str:
        payload = [event.to_payload() for event in self.events]
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), indent=indent)


__all__ = ["SearchTrace", "TraceEvent", "TraceOp", "TraceValidationError"]
