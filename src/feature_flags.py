"""Runtime feature flag helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from project_config import get_section

__all__ = ["event_log_dir", "event_log_max_bytes", "is_event_log_enabled", "is_trace_enabled"]

_EVENT_LOG_OVERRIDES = (
    "CLI_EVENT_LOG_ENABLED",
    "SUDOKU_EVENT_LOG_ENABLED",
)
_TRACE_OVERRIDES = (
    "CLI_TRACE_ENABLED",
    "SUDOKU_TRACE_ENABLED",
)


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def _env(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def is_event_log_enabled(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when solve events should be appended to the JSONL log.

    Environment overrides win over ``[features] event_log``; the first key in
    ``_EVENT_LOG_OVERRIDES`` holding a recognised boolean decides.
    """

    enabled = bool(get_section("features.event_log", False))
    source = _env(env)
    for key in _EVENT_LOG_OVERRIDES:
        override = _coerce_bool(source.get(key))
        if override is not None:
            return override
    return enabled


def event_log_dir(env: Mapping[str, str] | None = None) -> Path:
    override = _env(env).get("SUDOKU_EVENT_LOG_DIR")
    if override:
        return Path(override)
    return Path(get_section("events.dir"))


def event_log_max_bytes() -> int:
    return int(get_section("events.max_bytes"))


def is_trace_enabled(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when solves should record a PLACE/UNDO trace."""

    source = _env(env)
    for key in _TRACE_OVERRIDES:
        override = _coerce_bool(source.get(key))
        if override is not None:
            return override
    return bool(get_section("features.trace", False))
