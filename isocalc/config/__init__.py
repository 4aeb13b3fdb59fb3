"""Configuration for the isocalc command line: settings and logging."""

from __future__ import annotations

from isocalc.config.logging import configure_logging
from isocalc.config.settings import IsocalcSettings

__all__: list[str] = [
    "IsocalcSettings",
    "configure_logging",
]
