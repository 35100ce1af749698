"""
appship git check-clean command.

SUMMARY: Fail when tracked files have uncommitted changes
"""

from __future__ import annotations

import argparse

from appship.cli import OutputFormatter, add_standard_flags, get_repo_root

SUMMARY = "Fail when tracked files have uncommitted changes"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    from appship.core.git import ensure_git_status_is_clean

    try:
        repo_root = get_repo_root(args)
        ensure_git_status_is_clean(repo_root)
    except Exception as e:
        formatter.error(e, error_code="dirty_tree")
        return 1

    formatter.success({"clean": True, "repo_root": str(repo_root)}, "Working tree is clean.")
    return 0
