"""Domain-specific configuration for CLI output and prompts."""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict

from ..base import BaseDomainConfig


class CliConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "cli"

    @cached_property
    def json_options(self) -> Dict[str, Any]:
        raw = self.section.get("json") or {}
        return {
            "indent": int(raw.get("indent", 2)),
            "sort_keys": bool(raw.get("sort_keys", False)),
            "ensure_ascii": bool(raw.get("ensure_ascii", False)),
        }

    @cached_property
    def confirm_default(self) -> bool:
        confirm = self.section.get("confirm") or {}
        return bool(confirm.get("default", False))

    @cached_property
    def assume_yes_env(self) -> str:
        confirm = self.section.get("confirm") or {}
        return str(confirm.get("assume_yes_env") or "")

    @cached_property
    def prompt_max_attempts(self) -> int:
        prompts = self.section.get("prompts") or {}
        return max(1, int(prompts.get("max_attempts", 3)))

    @cached_property
    def success_prefix(self) -> str:
        output = self.section.get("output") or {}
        return str(output.get("success_prefix", "✓"))

    @cached_property
    def error_prefix(self) -> str:
        output = self.section.get("output") or {}
        return str(output.get("error_prefix", "Error:"))


__all__ = ["CliConfig"]
