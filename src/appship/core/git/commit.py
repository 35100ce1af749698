"""Diff display, staging, and the interactive review-and-commit flow."""
from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

from appship.core.exceptions import NonInteractiveError, UserAbortError
from appship.core.utils.cli import blank_line, confirm, info, prompt_text
from appship.core.utils.subprocess import run_git_command

logger = logging.getLogger(__name__)


def show_diff(cwd: Optional[Path | str] = None) -> None:
    """Print the unstaged diff straight to the terminal."""
    sys.stdout.flush()
    run_git_command(
        ["git", "--no-pager", "diff"],
        cwd=cwd,
        check=True,
        stdin=subprocess.DEVNULL,
    )


def add_file(
    file: Path | str,
    *,
    intent_to_add: bool = False,
    cwd: Optional[Path | str] = None,
) -> None:
    """Stage ``file``, or only record the intent to add it."""
    if intent_to_add:
        cmd = ["git", "add", "--intent-to-add", str(file)]
    else:
        cmd = ["git", "add", str(file)]
    run_git_command(cmd, cwd=cwd, capture_output=True, check=True)


def review_and_commit_changes(
    commit_message: str,
    *,
    non_interactive: bool,
    cwd: Optional[Path | str] = None,
) -> None:
    """Show pending changes and commit them once the operator agrees.

    Only tracked files are staged (``git add -u``); new files must have been
    added beforehand, e.g. with :func:`add_file`.

    Args:
        commit_message: Suggested commit message (editable by the operator).
        non_interactive: When True the flow cannot run and raises.
        cwd: Repository directory.

    Raises:
        NonInteractiveError: In non-interactive mode.
        UserAbortError: When the operator declines to commit.
        ValidationError: When no non-empty commit message is given.
    """
    if non_interactive:
        raise NonInteractiveError(
            "Cannot commit changes when --non-interactive is specified. "
            "Run the command in interactive mode to review and commit changes."
        )

    info("Please review the following changes and pass the message to make the commit.")
    blank_line()
    show_diff(cwd)
    blank_line()

    if not confirm("Can we commit these changes for you?"):
        raise UserAbortError("Aborting commit. Please review and commit the changes manually.")

    message = prompt_text(
        "Commit message:",
        initial=commit_message,
        invalid_message="Commit message cannot be empty.",
    )

    run_git_command(["git", "add", "-u"], cwd=cwd, capture_output=True, check=True)
    run_git_command(["git", "commit", "-m", message], cwd=cwd, capture_output=True, check=True)
    logger.info("committed changes: %s", message)


__all__ = ["show_diff", "add_file", "review_and_commit_changes"]
