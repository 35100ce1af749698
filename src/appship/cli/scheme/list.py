"""
appship scheme list command.

SUMMARY: List URL schemes registered in Info.plist
"""

from __future__ import annotations

import argparse

from appship.cli import (
    OutputFormatter,
    add_plist_flag,
    add_standard_flags,
    get_repo_root,
    resolve_plist_path,
)

SUMMARY = "List URL schemes registered in Info.plist"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_plist_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    from appship.core.ios import get_schemes_from_plist, read_info_plist

    try:
        plist_path = resolve_plist_path(args, get_repo_root(args))
        schemes = get_schemes_from_plist(read_info_plist(plist_path))
    except Exception as e:
        formatter.error(e, error_code="scheme_list_error")
        return 1

    if args.json:
        formatter.json_output({"plist": str(plist_path), "schemes": schemes})
    elif schemes:
        for scheme in schemes:
            formatter.text(scheme)
    else:
        formatter.text(f"No URL schemes registered in {plist_path}")
    return 0
