"""
appship git ensure-repo command.

SUMMARY: Make sure the project is a git repository (offers to run git init)
"""

from __future__ import annotations

import argparse
import sys

from appship.cli import OutputFormatter, add_non_interactive_flag, add_repo_root_flag, get_repo_root

SUMMARY = "Make sure the project is a git repository (offers to run git init)"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_non_interactive_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter()

    from appship.core.git import ensure_git_repo_exists

    try:
        ensure_git_repo_exists(get_repo_root(args), non_interactive=args.non_interactive)
    except Exception as e:
        formatter.error(e, error_code="git_repo_error")
        return 1
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
