"""
appship scheme remove command.

SUMMARY: Unregister a URL scheme from Info.plist
"""

from __future__ import annotations

import argparse

from appship.cli import add_dry_run_flag, add_plist_flag, add_standard_flags

from ._common import apply_plist_edit

SUMMARY = "Unregister a URL scheme from Info.plist"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("scheme", help="URL scheme to remove")
    add_plist_flag(parser)
    add_dry_run_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    from appship.core.ios import remove_scheme

    return apply_plist_edit(
        args,
        lambda info_plist: remove_scheme(args.scheme, info_plist),
        describe=f"removed scheme '{args.scheme}'",
        error_code="scheme_remove_error",
    )
