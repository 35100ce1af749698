"""
appship scheme set command.

SUMMARY: Replace Info.plist URL schemes with those from the app config
"""

from __future__ import annotations

import argparse
from pathlib import Path

from appship.cli import OutputFormatter, add_dry_run_flag, add_plist_flag, add_standard_flags, get_repo_root

from ._common import apply_plist_edit

SUMMARY = "Replace Info.plist URL schemes with those from the app config"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--app-config",
        type=str,
        help="Path to app.json/app.yaml (default: found in the repository root)",
    )
    parser.add_argument(
        "--no-bundle-identifier",
        action="store_true",
        help="Do not register ios.bundleIdentifier as a scheme",
    )
    add_plist_flag(parser)
    add_dry_run_flag(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    from appship.core.app_config import find_app_config, read_app_config
    from appship.core.config.domains.ios import IosConfig
    from appship.core.exceptions import AppConfigError
    from appship.core.ios import set_scheme

    try:
        repo_root = get_repo_root(args)
        if args.app_config:
            config_path = Path(args.app_config).expanduser().resolve()
        else:
            config_path = find_app_config(repo_root)
            if config_path is None:
                raise AppConfigError(f"No app.json or app.yaml found in {repo_root}")
        app_config = read_app_config(config_path)
        include_bundle_identifier = (
            IosConfig(repo_root=repo_root).include_bundle_identifier and not args.no_bundle_identifier
        )
    except Exception as e:
        OutputFormatter(json_mode=args.json).error(e, error_code="app_config_error")
        return 1

    return apply_plist_edit(
        args,
        lambda info_plist: set_scheme(
            app_config,
            info_plist,
            include_bundle_identifier=include_bundle_identifier,
        ),
        describe=f"set schemes from {config_path.name}",
        error_code="scheme_set_error",
    )
