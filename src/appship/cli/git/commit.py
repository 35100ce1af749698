"""
appship git commit command.

SUMMARY: Review pending changes and commit them interactively
"""

from __future__ import annotations

import argparse
import sys

from appship.cli import OutputFormatter, add_non_interactive_flag, add_repo_root_flag, get_repo_root

SUMMARY = "Review pending changes and commit them interactively"

DEFAULT_MESSAGE = "Update project configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--message",
        "-m",
        default=DEFAULT_MESSAGE,
        help=f"Suggested commit message (default: {DEFAULT_MESSAGE!r})",
    )
    add_non_interactive_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter()

    from appship.core.git import review_and_commit_changes

    try:
        review_and_commit_changes(
            args.message,
            non_interactive=args.non_interactive,
            cwd=get_repo_root(args),
        )
    except Exception as e:
        formatter.error(e, error_code="git_commit_error")
        return 1
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
