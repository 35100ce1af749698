"""
Entry point of the ``appship`` command.

Commands are found on disk: every package under ``appship/cli/`` is a domain
and every public module in it is a command exposing ``SUMMARY``,
``register_args(parser)`` and ``main(args) -> int``. Command module
``check_clean.py`` is invoked as ``appship git check-clean`` (the underscore
spelling is accepted as an alias).
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)

_CLI_DIR = Path(__file__).parent


def _is_command_file(path: Path) -> bool:
    return path.suffix == ".py" and not path.name.startswith("_")


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """Map domain name to its package directory (``git``, ``scheme``)."""
    return {
        entry.name: entry
        for entry in sorted(_CLI_DIR.iterdir())
        if entry.is_dir()
        and not entry.name.startswith("_")
        and any(_is_command_file(f) for f in entry.iterdir())
    }


def _command_info(domain: str, module: ModuleType) -> dict[str, Any]:
    name = module.__name__.rsplit(".", 1)[-1]
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", f"{domain} {name}"),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """Import the command modules of ``domain`` keyed by module name.

    A module that fails to import is reported on stderr and skipped.
    """
    commands: dict[str, dict[str, Any]] = {}
    for path in sorted((_CLI_DIR / domain).glob("*.py")):
        if not _is_command_file(path):
            continue
        try:
            module = importlib.import_module(f"appship.cli.{domain}.{path.stem}")
        except ImportError as exc:
            print(f"Warning: Could not import {domain}.{path.stem}: {exc}", file=sys.stderr)
            continue
        commands[path.stem] = _command_info(domain, module)
    return commands


def _version() -> str:
    from appship import __version__

    return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appship",
        description="appship - build helpers for mobile app projects",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information (including every git invocation) to stderr",
    )

    domains = parser.add_subparsers(dest="domain", title="domains", metavar="<domain>")
    for domain, _path in discover_domains().items():
        commands = discover_commands(domain)
        if not commands:
            continue
        domain_parser = domains.add_parser(domain, help=f"{domain.title()} commands")
        command_parsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain} commands",
            metavar="<command>",
        )
        for name, info in commands.items():
            dashed = name.replace("_", "-")
            cmd_parser = command_parsers.add_parser(
                dashed,
                aliases=[name] if dashed != name else [],
                help=info["summary"],
            )
            if info["register_args"] is not None:
                info["register_args"](cmd_parser)
            if info["main"] is not None:
                cmd_parser.set_defaults(_func=info["main"])
        domain_parser.set_defaults(_domain_parser=domain_parser)

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    """Install log handlers for this invocation (file, --verbose, --json)."""
    from appship.core import logs
    from appship.core.exceptions import AppshipError

    if args.verbose:
        logs.enable_verbose_logging()

    try:
        from appship.cli._utils import get_repo_root
        from appship.core.config.domains.logging import LoggingConfig

        log_cfg = LoggingConfig(repo_root=get_repo_root(args))
        if log_cfg.enabled:
            logs.configure_stdlib_logging(log_path=log_cfg.log_path, level=log_cfg.level)
    except (AppshipError, OSError) as exc:
        # Commands report config errors themselves.
        logger.debug("file logging not configured: %s", exc)

    if getattr(args, "json", False):
        logs.suppress_lastresort_in_json_mode()


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv`` (default ``sys.argv[1:]``), run the command, return its exit code.

    No domain prints the help and succeeds; a domain without a command prints
    the domain help and fails. Uncaught errors exit 1, Ctrl-C exits 130.
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if not args.domain:
        parser.print_help()
        return 0

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        args._domain_parser.print_help()
        return 1

    _configure_logging(args)

    command = f"{args.domain} {args.command}"
    logger.debug("running %s", command)
    try:
        return int(func(args))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except Exception as exc:
        from appship.cli._output import describe_error

        logger.debug("%s failed", command, exc_info=True)
        print(f"Error: {describe_error(exc)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
