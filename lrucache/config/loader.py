"""
Configuration loader for the cache settings.

A config file holds two optional tables::

    [cache]
    capacity = 256

    [logging]
    level = "debug"

Values from the file replace the matching defaults key by key; tables the file
omits keep their defaults. Shapes are checked here so callers can index
``config["cache"]`` and ``config["logging"]`` without guarding.
"""

from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any

from lrucache.config.defaults import DEFAULTS

LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"[{name}] must be a table, got {value!r}")
    return value


def validate_config(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``raw`` on the defaults, rejecting malformed cache/logging settings."""
    config: dict[str, Any] = copy.deepcopy(DEFAULTS)
    cache_cfg = _section(raw, "cache")
    logging_cfg = _section(raw, "logging")

    capacity = cache_cfg.get("capacity", config["cache"]["capacity"])
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise ValueError(f"cache.capacity must be a positive integer, got {capacity!r}")

    level = logging_cfg.get("level", config["logging"]["level"])
    if not isinstance(level, str) or level.lower() not in LOG_LEVELS:
        raise ValueError(f"logging.level must be one of {sorted(LOG_LEVELS)}, got {level!r}")

    config["cache"].update(cache_cfg, capacity=capacity)
    config["logging"].update(logging_cfg, level=level.lower())
    for key, value in raw.items():
        if key not in config:
            config[key] = copy.deepcopy(value)
    return config


def load_config(path: Path) -> dict[str, Any]:
    """
    Load a TOML config file and validate it over the defaults.
    Missing files return defaults; malformed files or settings raise ValueError.
    """
    if path.is_dir():
        raise IsADirectoryError(f"Config path points to a directory: {path}")

    raw: dict[str, Any] = {}
    if path.exists():
        try:
            with path.open("rb") as fh:
                raw = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid config file {path}: {exc}") from exc

    try:
        return validate_config(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid config file {path}: {exc}") from exc
