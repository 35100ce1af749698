"""Typed accessors for each configuration section."""
from __future__ import annotations

from .cli import CliConfig
from .git import GitConfig
from .ios import IosConfig
from .logging import LoggingConfig
from .timeouts import TimeoutsConfig

__all__ = [
    "CliConfig",
    "GitConfig",
    "IosConfig",
    "LoggingConfig",
    "TimeoutsConfig",
]
