"""Text and JSON output for CLI commands.

Results go to stdout and errors to stderr, in both modes. JSON formatting
follows the ``cli.json`` config section.
"""
from __future__ import annotations

import json
import subprocess
import sys
from typing import Any, Dict, Optional

from appship.core.exceptions import AppshipError

_FALLBACK_JSON_OPTIONS = {"indent": 2, "sort_keys": False, "ensure_ascii": False}


def _cli_settings() -> tuple[Dict[str, Any], str]:
    # Broken configuration falls back to built-in settings.
    try:
        from appship.core.config.domains.cli import CliConfig

        cfg = CliConfig()
        return dict(cfg.json_options), cfg.error_prefix
    except AppshipError:
        return dict(_FALLBACK_JSON_OPTIONS), "Error:"


def _decoded(stream: Any) -> str:
    if isinstance(stream, bytes):
        stream = stream.decode("utf-8", errors="replace")
    return (stream or "").strip()


def describe_error(error: BaseException) -> str:
    """``str(error)``, followed by the captured stderr of a failed command."""
    text = str(error)
    if isinstance(error, subprocess.CalledProcessError):
        stderr = _decoded(error.stderr)
        if stderr:
            text = f"{text}\n{stderr}"
    return text


class OutputFormatter:
    """Prints command results as text or as JSON documents (``--json``)."""

    def __init__(self, json_mode: bool = False, indent: Optional[int] = None):
        self.json_mode = json_mode
        self._options, self._error_prefix = _cli_settings()
        if indent is not None:
            self._options["indent"] = indent

    def _dumps(self, data: Any) -> str:
        return json.dumps(data, default=str, **self._options)

    def success(self, data: Dict[str, Any], message: str, *, status: str = "success") -> None:
        """Print ``message``, or ``{"status": status, **data}`` in JSON mode."""
        if self.json_mode:
            print(self._dumps({"status": status, **data}))
        else:
            print(message)

    def error(self, error: Exception, message: Optional[str] = None, *, error_code: str = "error") -> None:
        """Report ``error`` on stderr.

        In JSON mode the document carries ``error_code`` and, for appship
        errors, the exception class as ``code`` plus its ``context``. A
        failed git command contributes its exit status and stderr instead.
        """
        text = message or describe_error(error)
        if not self.json_mode:
            print(f"{self._error_prefix} {text}" if self._error_prefix else text, file=sys.stderr)
            return

        payload: Dict[str, Any] = {"error": error_code}
        if isinstance(error, AppshipError):
            payload.update(error.to_json_error())
            if not error.context:
                del payload["context"]
        elif isinstance(error, subprocess.CalledProcessError):
            payload["context"] = {"returncode": error.returncode, "stderr": _decoded(error.stderr)}
        payload["message"] = text
        print(self._dumps(payload), file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(self._dumps(data))

    def text(self, message: str) -> None:
        print(message)


__all__ = ["OutputFormatter", "describe_error"]
