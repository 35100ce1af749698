"""Console messages for the operator.

Messages go to stdout except warnings, which go to stderr so that piped
stdout stays clean.
"""
from __future__ import annotations

import sys


def _cli_config():
    from appship.core.config.domains.cli import CliConfig

    return CliConfig()


def info(message: str) -> None:
    print(message)


def blank_line() -> None:
    print()


def warning(message: str) -> None:
    print(message, file=sys.stderr)


def success(message: str) -> None:
    """Print a success message with the configured prefix."""
    prefix = _cli_config().success_prefix
    print(f"{prefix} {message}" if prefix else message)


__all__ = ["info", "blank_line", "warning", "success"]
