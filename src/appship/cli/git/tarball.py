"""
appship git tarball command.

SUMMARY: Archive the committed project (HEAD) into a tarball
"""

from __future__ import annotations

import argparse
import contextlib
import sys
from pathlib import Path

from appship.cli import OutputFormatter, add_standard_flags, get_repo_root

SUMMARY = "Archive the committed project (HEAD) into a tarball"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Output archive path")
    parser.add_argument(
        "--allow-dirty",
        action="store_true",
        help="Skip the clean working tree check",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    from appship.core.git import ensure_git_status_is_clean, make_project_tarball

    try:
        repo_root = get_repo_root(args)
        if not args.allow_dirty:
            ensure_git_status_is_clean(repo_root)
        tar_path = Path(args.path).expanduser().resolve()
        # Progress lines must not mix with the JSON document on stdout.
        progress = contextlib.redirect_stdout(sys.stderr) if args.json else contextlib.nullcontext()
        with progress:
            size = make_project_tarball(tar_path, cwd=repo_root)
    except Exception as e:
        formatter.error(e, error_code="tarball_error")
        return 1

    if args.json:
        formatter.json_output({"path": str(tar_path), "size": size})
    else:
        formatter.text(f"{tar_path} ({size} bytes)")
    return 0
