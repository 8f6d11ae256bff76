"""
Default configuration values.
"""

from __future__ import annotations

DEFAULTS: dict[str, object] = {
    "cache": {"capacity": 128},
    "logging": {"level": "info"},
}
