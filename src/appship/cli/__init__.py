"""
appship CLI package.

Provides the command-line interface with auto-discovery of commands
from subfolders (git/, scheme/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import (
    add_dry_run_flag,
    add_json_flag,
    add_non_interactive_flag,
    add_plist_flag,
    add_repo_root_flag,
    add_standard_flags,
)
from ._utils import get_repo_root, resolve_plist_path

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_plist_flag",
    "add_dry_run_flag",
    "add_non_interactive_flag",
    "add_standard_flags",
    # Utilities
    "get_repo_root",
    "resolve_plist_path",
]
