"""Centralized configuration caching.

Provides a single source of truth for loaded configuration across all domain
configs.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

_config_cache: Dict[str, Dict[str, Any]] = {}


def _normalize_repo_root(repo_root: Optional[Path]) -> Path:
    if repo_root is None:
        from appship.core.utils.paths import resolve_project_root

        return resolve_project_root()
    return Path(repo_root).expanduser().resolve()


def _cache_key(repo_root: Path, validate: bool) -> str:
    # Keyed on APPSHIP_* env and config file mtimes: edited config is reloaded.
    env_items = sorted((k, v) for k, v in os.environ.items() if k.startswith("APPSHIP_"))
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]

    from appship.core.utils.io import iter_yaml_files
    from appship.core.utils.paths import get_project_config_dir, get_user_config_dir

    files: list[tuple[str, int, int]] = []
    project_dir = get_project_config_dir(repo_root)
    for d in (project_dir / "config", project_dir / "config.local", get_user_config_dir() / "config"):
        for p in iter_yaml_files(d):
            st = p.stat()
            files.append((str(p), int(st.st_mtime_ns), int(st.st_size)))
    cfg_fp = hashlib.sha256(repr(files).encode("utf-8")).hexdigest()[:12]

    return f"{repo_root}:validate={int(validate)}:env={env_fp}:cfg={cfg_fp}"


def get_cached_config(repo_root: Optional[Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Get configuration with caching.

    Returns the same config dict instance for the same repo_root; treat it as
    immutable.
    """
    normalized_root = _normalize_repo_root(repo_root)
    key = _cache_key(normalized_root, validate)

    if key not in _config_cache:
        from .manager import ConfigManager

        manager = ConfigManager(repo_root=normalized_root)
        _config_cache[key] = manager._load_config_uncached(validate=validate)
    return _config_cache[key]


def clear_all_caches() -> None:
    """Clear the configuration cache."""
    _config_cache.clear()


def is_cached(repo_root: Optional[Path] = None, validate: bool = True) -> bool:
    normalized_root = _normalize_repo_root(repo_root)
    return _cache_key(normalized_root, validate) in _config_cache


__all__ = ["get_cached_config", "clear_all_caches", "is_cached"]
