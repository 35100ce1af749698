"""
appship scheme has command.

SUMMARY: Exit 0 when a URL scheme is registered, 1 otherwise
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

SUMMARY = "Exit 0 when a URL scheme is registered, 1 otherwise"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("scheme", help="URL scheme to look for")
    add_plist_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    from appship.core.ios import has_scheme, read_info_plist

    try:
        plist_path = resolve_plist_path(args, get_repo_root(args))
        present = has_scheme(args.scheme, read_info_plist(plist_path))
    except Exception as e:
        formatter.error(e, error_code="scheme_has_error")
        return 1

    if args.json:
        formatter.json_output({"plist": str(plist_path), "scheme": args.scheme, "present": present})
    else:
        state = "is" if present else "is not"
        formatter.text(f"'{args.scheme}' {state} registered in {plist_path}")
    return 0 if present else 1
