"""Domain-specific configuration for git invocation."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class GitConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "git"

    @cached_property
    def executable(self) -> str:
        return str(self.section.get("executable") or "git")

    @cached_property
    def tarball_format(self) -> str:
        return str(self.section.get("tarball_format") or "tar.gz")

    @cached_property
    def tarball_prefix(self) -> str:
        return str(self.section.get("tarball_prefix", "project/"))

    @cached_property
    def initial_commit_message(self) -> str:
        return str(self.section.get("initial_commit_message") or "Initial commit")


__all__ = ["GitConfig"]
