"""
appship git diff command.

SUMMARY: Show unstaged changes
"""

from __future__ import annotations

import argparse

from appship.cli import OutputFormatter, add_repo_root_flag, get_repo_root

SUMMARY = "Show unstaged changes"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter()

    from appship.core.git import show_diff

    try:
        show_diff(get_repo_root(args))
    except Exception as e:
        formatter.error(e, error_code="git_diff_error")
        return 1
    return 0
