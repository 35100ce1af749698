"""Shared plumbing for scheme commands that rewrite an Info.plist."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable, Dict

from appship.cli import OutputFormatter, get_repo_root, resolve_plist_path

Edit = Callable[[Dict[str, Any]], Dict[str, Any]]


def apply_plist_edit(
    args: argparse.Namespace,
    edit: Edit,
    *,
    describe: str,
    error_code: str,
) -> int:
    """Load the target Info.plist, apply ``edit`` and write it back when it changed."""
    from appship.core.config.domains.ios import IosConfig
    from appship.core.ios import get_schemes_from_plist, read_info_plist, write_info_plist

    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        repo_root = get_repo_root(args)
        plist_path: Path = resolve_plist_path(args, repo_root)
        before = read_info_plist(plist_path)
        after = edit(before)
        changed = after != before
        if changed and not args.dry_run:
            write_info_plist(plist_path, after, fmt=IosConfig(repo_root=repo_root).plist_format)
    except Exception as e:
        formatter.error(e, error_code=error_code)
        return 1

    schemes = get_schemes_from_plist(after)
    if not changed:
        message = f"{plist_path}: nothing to change"
    elif args.dry_run:
        message = f"{plist_path}: would {describe}"
    else:
        message = f"{plist_path}: {describe}"
    formatter.success(
        {
            "plist": str(plist_path),
            "changed": changed,
            "dry_run": bool(args.dry_run),
            "schemes": schemes,
        },
        message,
    )
    return 0


__all__ = ["apply_plist_edit"]
