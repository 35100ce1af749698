"""Git repository detection and interactive initialization."""
from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from appship.core.exceptions import GitNotFoundError, GitRepoRequiredError
from appship.core.utils.cli import confirm, info, prompt_text, warning
from appship.core.utils.subprocess import run_git_command

logger = logging.getLogger(__name__)

REPO_REQUIRED_MESSAGE = (
    "A git repository is required for building your project. "
    "Initialize it and run this command again."
)


def find_git_executable(cwd: Optional[Path | str] = None) -> Optional[str]:
    """Return the absolute path of the configured git executable, or None."""
    from appship.core.config.domains.git import GitConfig

    executable = GitConfig(repo_root=Path(cwd) if cwd else None).executable
    return shutil.which(executable)


def does_git_repo_exist(cwd: Optional[Path | str] = None) -> bool:
    """Return True if ``cwd`` (or the current directory) is inside a git repository.

    Runs ``git rev-parse --git-dir``; any failure to run it counts as "no".
    """
    try:
        run_git_command(
            ["git", "rev-parse", "--git-dir"],
            cwd=cwd,
            capture_output=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError):
        return False
    return True


def ensure_git_repo_exists(
    cwd: Optional[Path | str] = None,
    *,
    non_interactive: bool = False,
) -> None:
    """Make sure a git repository exists, offering to create one.

    When no repository exists the operator is asked whether to run
    ``git init``; on acceptance the repository is initialized and every file is
    committed with a message the operator confirms.

    Raises:
        GitNotFoundError: If git is not installed.
        GitRepoRequiredError: If there is no repository and none was created.
    """
    if find_git_executable(cwd) is None:
        raise GitNotFoundError("git command has not been found, install it before proceeding")

    if does_git_repo_exist(cwd):
        return

    warning("It looks like you haven't initialized the git repository yet.")
    warning("Builds require you to use a git repository for your project.")

    if non_interactive:
        raise GitRepoRequiredError(REPO_REQUIRED_MESSAGE, context={"non_interactive": True})

    if not confirm("Would you like to run 'git init' in the current directory?"):
        raise GitRepoRequiredError(REPO_REQUIRED_MESSAGE)

    run_git_command(["git", "init"], cwd=cwd, capture_output=True, check=True)
    logger.info("initialized git repository in %s", cwd or Path.cwd())

    info("We're going to make an initial commit for your repository.")

    from appship.core.config.domains.git import GitConfig

    message = prompt_text(
        "Commit message:",
        initial=GitConfig(repo_root=Path(cwd) if cwd else None).initial_commit_message,
        invalid_message="Commit message cannot be empty.",
    )
    run_git_command(["git", "add", "-A"], cwd=cwd, capture_output=True, check=True)
    run_git_command(["git", "commit", "-m", message], cwd=cwd, capture_output=True, check=True)


__all__ = [
    "find_git_executable",
    "does_git_repo_exist",
    "ensure_git_repo_exists",
]
