from __future__ import annotations

import logging
import sys
from pathlib import Path

_CONFIGURED_LOG_PATH: str | None = None
_FILE_HANDLER: logging.Handler | None = None
_STDERR_HANDLER: logging.Handler | None = None
_NULL_HANDLER: logging.Handler | None = None

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, log_path: Path, level: str = "INFO") -> None:
    """Configure stdlib logging to write to ``log_path``.

    Idempotent per-process: if already configured for the same file, no-op.
    """
    global _CONFIGURED_LOG_PATH, _FILE_HANDLER

    resolved = str(Path(log_path).resolve())
    if _CONFIGURED_LOG_PATH == resolved and _FILE_HANDLER is not None:
        return

    Path(resolved).parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(root.level or logging.WARNING, _level_from_name(level)))

    if _FILE_HANDLER is not None:
        root.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None

    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(_level_from_name(level))
    fh.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(fh)

    _FILE_HANDLER = fh
    _CONFIGURED_LOG_PATH = resolved


def enable_verbose_logging() -> None:
    """Send DEBUG records to stderr (``--verbose``)."""
    global _STDERR_HANDLER

    if _STDERR_HANDLER is not None:
        return
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    _STDERR_HANDLER = handler


def suppress_lastresort_in_json_mode() -> None:
    """Keep logging's lastResort handler from writing to stderr in ``--json`` mode.

    Installs a NullHandler on the root logger when it has no handlers.
    """
    global _NULL_HANDLER

    root = logging.getLogger()
    if root.handlers or _NULL_HANDLER is not None:
        return
    _NULL_HANDLER = logging.NullHandler()
    root.addHandler(_NULL_HANDLER)


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handlers installed by this module."""
    global _CONFIGURED_LOG_PATH, _FILE_HANDLER, _STDERR_HANDLER, _NULL_HANDLER
    root = logging.getLogger()
    for h in (_FILE_HANDLER, _STDERR_HANDLER, _NULL_HANDLER):
        if h is not None:
            root.removeHandler(h)
            h.close()
    root.setLevel(logging.WARNING)
    _CONFIGURED_LOG_PATH = None
    _FILE_HANDLER = None
    _STDERR_HANDLER = None
    _NULL_HANDLER = None


__all__ = [
    "configure_stdlib_logging",
    "enable_verbose_logging",
    "suppress_lastresort_in_json_mode",
    "reset_stdlib_logging_for_tests",
]
