"""
appship scheme add command.

SUMMARY: Register a URL scheme in Info.plist
"""

from __future__ import annotations

import argparse

from appship.cli import add_dry_run_flag, add_plist_flag, add_standard_flags

from ._common import apply_plist_edit

SUMMARY = "Register a URL scheme in Info.plist"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("scheme", help="URL scheme to register (e.g. myapp)")
    add_plist_flag(parser)
    add_dry_run_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    from appship.core.ios import append_scheme

    return apply_plist_edit(
        args,
        lambda info_plist: append_scheme(args.scheme, info_plist),
        describe=f"added scheme '{args.scheme}'",
        error_code="scheme_add_error",
    )
