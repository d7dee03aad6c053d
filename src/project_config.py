"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

from contracts.errors import ConfigError

_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_CONFIG"

_DEFAULTS: Dict[str, Any] = {
    "solver": {"trace_limit": 10000},
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
    "events": {"dir": "logs/solve", "max_bytes": 100 * 1024 * 1024},
    "features": {"event_log": False, "trace": False},
}

_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "solver": {
            "type": "object",
            "properties": {"trace_limit": {"type": "integer", "minimum": 0}},
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
                "format": {"type": "string", "minLength": 1},
            },
        },
        "events": {
            "type": "object",
            "properties": {
                "dir": {"type": "string", "minLength": 1},
                "max_bytes": {"type": "integer", "minimum": 1},
            },
        },
        "features": {
            "type": "object",
            "properties": {
                "event_log": {"type": "boolean"},
                "trace": {"type": "boolean"},
            },
        },
    },
}


def _config_path() -> Path:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


def _merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate(data: Dict[str, Any], path: Path) -> None:
    try:
        jsonschema.validate(instance=data, schema=_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = ".".join(str(part) for part in exc.absolute_path) or "<root>"
        raise ConfigError(f"Invalid configuration in '{path}' at {location}: {exc.message}") from exc


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary.

    Values from ``config.toml`` (or the file named by ``SUDOKU_CONFIG``) are
    layered over built-in defaults; a missing file yields the defaults.
    """

    path = _config_path()
    try:
        with path.open("rb") as fh:
            loaded = tomllib.load(fh)
    except FileNotFoundError:
        loaded = {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Configuration file '{path}' is not valid TOML: {exc}") from exc

    data = _merge(_DEFAULTS, loaded)
    _validate(data, path)
    return data


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


__all__ = ["get_config", "get_section", "reload"]
