"""
Bootstrap helpers.

Responsibilities:
- Locate/load configuration.
- Configure logging.
- Build the cache described by the config.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lrucache.config.loader import load_config
from lrucache.core import LRUCache
from lrucache.logging.setup import setup_logging

ENV_CONFIG_DIR = "LRUCACHE_CONFIG_DIR"

LOGGER = logging.getLogger(__name__)


@dataclass
class CacheContext:
    """Loaded configuration together with the cache built from it."""

    config: dict[str, Any]
    config_path: Path
    cache: LRUCache


def default_config_dir() -> Path:
    """Return the directory to hold config files, honoring env override."""
    override = os.getenv(ENV_CONFIG_DIR)
    if override:
        return Path(override)
    return Path.home() / ".lrucache"


def default_config_path() -> Path:
    return default_config_dir() / "config.toml"


def cache_from_config(config: dict[str, Any]) -> LRUCache:
    """Build an LRUCache from the ``[cache]`` table; bad capacities raise ValueError."""
    cache_cfg = config.get("cache", {})
    if not isinstance(cache_cfg, dict):
        raise ValueError(f"[cache] must be a table, got {cache_cfg!r}")
    return LRUCache(cache_cfg.get("capacity"))


def initialize_cache(config_path: Path | None = None, log_dir: Path | None = None) -> CacheContext:
    """
    Load configuration, set up logging, and return a CacheContext holding a fresh cache.
    """
    config_path = config_path or default_config_path()
    config = load_config(config_path)

    setup_logging(log_dir=log_dir or config_path.parent / "logs", level=config["logging"]["level"])

    cache = cache_from_config(config)
    LOGGER.info("Initialized LRU cache (capacity %d) from %s", cache.capacity, config_path)
    return CacheContext(config=config, config_path=config_path, cache=cache)
