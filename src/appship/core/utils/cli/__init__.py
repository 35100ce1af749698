"""Operator-facing helpers: prompts and console messages."""
from __future__ import annotations

from .output import blank_line, info, success, warning
from .prompts import confirm, prompt_text

__all__ = [
    "blank_line",
    "confirm",
    "info",
    "prompt_text",
    "success",
    "warning",
]
