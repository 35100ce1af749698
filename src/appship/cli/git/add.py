"""
appship git add command.

SUMMARY: Stage a file (or record the intent to add it)
"""

from __future__ import annotations

import argparse

from appship.cli import OutputFormatter, add_repo_root_flag, get_repo_root

SUMMARY = "Stage a file (or record the intent to add it)"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="File to add, relative to the repository root")
    parser.add_argument(
        "--intent-to-add",
        "-N",
        action="store_true",
        help="Only record that the file will be added later",
    )
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter()

    from appship.core.git import add_file

    try:
        add_file(args.file, intent_to_add=args.intent_to_add, cwd=get_repo_root(args))
    except Exception as e:
        formatter.error(e, error_code="git_add_error")
        return 1
    return 0
