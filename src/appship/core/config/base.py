"""Typed views over one section of the merged configuration."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Read-only accessor for a top-level config section.

    Subclasses name their section and expose settings as cached properties::

        class GitConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "git"

            @cached_property
            def executable(self) -> str:
                return self.section.get("executable") or "git"

    ``repo_root=None`` means the auto-detected project root.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self._repo_root = Path(repo_root) if repo_root else None
        self._config = get_cached_config(repo_root=self._repo_root)

    @property
    def repo_root(self) -> Path:
        if self._repo_root is not None:
            return self._repo_root

        from appship.core.utils.paths import resolve_project_root

        return resolve_project_root()

    @abstractmethod
    def _config_section(self) -> str:
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        value = self._config.get(self._config_section())
        return value if isinstance(value, dict) else {}


__all__ = ["BaseDomainConfig"]
