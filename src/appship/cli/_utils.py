"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path

from appship.core.utils.paths import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get repository root from ``--repo-root`` or auto-detect."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return resolve_project_root()


def resolve_plist_path(args: argparse.Namespace, repo_root: Path) -> Path:
    """Return ``--plist`` or the Info.plist discovered under ``repo_root``."""
    from appship.core.ios import find_info_plist

    if getattr(args, "plist", None):
        return Path(args.plist).expanduser().resolve()
    return find_info_plist(repo_root)


__all__ = ["get_repo_root", "resolve_plist_path"]
