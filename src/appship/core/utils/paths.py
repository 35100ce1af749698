"""Project and user path resolution.

Resolution priority for the project root:
1. APPSHIP_PROJECT_ROOT environment variable
2. Git repository root via ``git rev-parse --show-toplevel``
3. The current working directory
"""
from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional

from appship.core.exceptions import AppshipPathError

PROJECT_ROOT_ENV = "APPSHIP_PROJECT_ROOT"
PROJECT_CONFIG_DIR = ".appship"
USER_CONFIG_DIR_ENV = "APPSHIP_USER_CONFIG_DIR"

# Last resolved project root.
_PROJECT_ROOT_CACHE: Optional[Path] = None


def resolve_project_root() -> Path:
    """Resolve the project root.

    The environment override is always honoured, even when a cached value
    exists. The cached git root is reused only while the caller is still inside
    it.

    Raises:
        AppshipPathError: If the environment override points at a missing path.
    """
    global _PROJECT_ROOT_CACHE

    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.exists():
            raise AppshipPathError(f"{PROJECT_ROOT_ENV} points at missing path: {env_path}")
        if env_path.name == PROJECT_CONFIG_DIR:
            raise AppshipPathError(
                f"{PROJECT_ROOT_ENV} points to {PROJECT_CONFIG_DIR} directory: {env_path}. "
                "It must point to the project root."
            )
        _PROJECT_ROOT_CACHE = env_path
        return env_path

    cwd = Path.cwd().resolve()
    if _PROJECT_ROOT_CACHE is not None:
        if cwd == _PROJECT_ROOT_CACHE or _PROJECT_ROOT_CACHE in cwd.parents:
            return _PROJECT_ROOT_CACHE
        _PROJECT_ROOT_CACHE = None

    # Must not depend on appship config (timeouts etc.): config loading
    # itself needs a resolved project root.
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired):
        result = None

    if result is not None and result.returncode == 0 and result.stdout.strip():
        root = Path(result.stdout.strip()).resolve()
    else:
        root = cwd

    _PROJECT_ROOT_CACHE = root
    return root


def reset_project_root_cache() -> None:
    global _PROJECT_ROOT_CACHE
    _PROJECT_ROOT_CACHE = None


def get_project_config_dir(repo_root: Path) -> Path:
    """Return ``<repo_root>/.appship``."""
    return Path(repo_root) / PROJECT_CONFIG_DIR


def get_user_config_dir() -> Path:
    """Return the user-level config dir (``~/.appship`` unless overridden)."""
    override = os.environ.get(USER_CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / PROJECT_CONFIG_DIR


__all__ = [
    "PROJECT_ROOT_ENV",
    "resolve_project_root",
    "reset_project_root_cache",
    "get_project_config_dir",
    "get_user_config_dir",
]
