"""
appship git status command.

SUMMARY: Show a summary of the working tree
"""

from __future__ import annotations

import argparse
import sys

from appship.cli import OutputFormatter, add_standard_flags, get_repo_root

SUMMARY = "Show a summary of the working tree"

_MAX_LISTED = 10


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def _print_section(formatter: OutputFormatter, title: str, marker: str, files: list[str]) -> None:
    if not files:
        return
    formatter.text(f"\n{title} ({len(files)} files):")
    for f in files[:_MAX_LISTED]:
        formatter.text(f"  {marker} {f}")
    if len(files) > _MAX_LISTED:
        formatter.text(f"  ... and {len(files) - _MAX_LISTED} more")


def main(args: argparse.Namespace) -> int:
    """Show git status - delegates to the git library."""
    formatter = OutputFormatter(json_mode=args.json)

    from appship.core.git import get_status

    try:
        result = get_status(get_repo_root(args))
    except Exception as e:
        formatter.error(e, error_code="git_status_error")
        return 1

    if args.json:
        formatter.json_output(result)
        return 0

    formatter.text(f"Branch: {result.get('branch') or 'unknown'}")
    formatter.text(f"Clean: {result.get('clean', False)}")
    _print_section(formatter, "Staged", "+", result["staged"])
    _print_section(formatter, "Modified", "M", result["modified"])
    _print_section(formatter, "Untracked", "?", result["untracked"])
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
