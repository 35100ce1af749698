"""Working-tree status checks."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from appship.core.exceptions import DirtyGitTreeError
from appship.core.utils.subprocess import run_git_command


def ensure_git_status_is_clean(cwd: Optional[Path | str] = None) -> None:
    """Raise if tracked files have uncommitted changes.

    Untracked files are ignored (``git status -s -uno``).

    Raises:
        DirtyGitTreeError: When ``git status`` reports any change.
    """
    result = run_git_command(
        ["git", "status", "-s", "-uno"],
        cwd=cwd,
        capture_output=True,
        check=True,
    )
    changes = result.stdout or ""
    if len(changes) > 0:
        raise DirtyGitTreeError(
            "Please commit all changes before building your project. Aborting...",
            context={"changes": changes.splitlines()},
        )


def _parse_porcelain(lines: List[str]) -> Tuple[List[str], List[str], List[str]]:
    staged: List[str] = []
    modified: List[str] = []
    untracked: List[str] = []

    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            continue
        # Porcelain v1: XY <path> (rename/copy has ->)
        if line.startswith("?? "):
            untracked.append(line[3:])
            continue

        if len(line) < 4:
            continue
        x = line[0]
        y = line[1]
        path = line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[-1]

        if x not in (" ", "?"):
            staged.append(path)
        if y not in (" ", "?"):
            modified.append(path)

    return staged, modified, untracked


def get_status(cwd: Optional[Path | str] = None) -> Dict[str, Any]:
    """
    Return a git status summary:
    - branch: current branch name
    - clean: no staged/modified/untracked files
    - staged: list of staged file paths
    - modified: list of modified (unstaged) file paths
    - untracked: list of untracked file paths
    """
    result = run_git_command(
        ["git", "status", "--porcelain", "--untracked-files=all"],
        cwd=cwd,
        capture_output=True,
        check=True,
    )
    staged, modified, untracked = _parse_porcelain(result.stdout.splitlines())

    branch_result = run_git_command(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        cwd=cwd,
        capture_output=True,
        check=False,
    )
    # A repository without commits has no HEAD yet.
    branch = (branch_result.stdout or "").strip() if branch_result.returncode == 0 else None

    return {
        "branch": branch,
        "clean": not (staged or modified or untracked),
        "staged": staged,
        "modified": modified,
        "untracked": untracked,
    }


__all__ = ["ensure_git_status_is_clean", "get_status"]
