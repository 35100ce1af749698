"""Git repository-state helpers.

This package provides:
- Repository: existence checks and interactive initialization
- Status: clean-tree checks and porcelain status summaries
- Archive: source tarballs of HEAD
- Commit: diff display, staging and the interactive review-and-commit flow
"""
from __future__ import annotations

from .archive import make_project_tarball
from .commit import add_file, review_and_commit_changes, show_diff
from .repository import does_git_repo_exist, ensure_git_repo_exists, find_git_executable
from .status import ensure_git_status_is_clean, get_status

__all__ = [
    # repository
    "find_git_executable",
    "does_git_repo_exist",
    "ensure_git_repo_exists",
    # status
    "ensure_git_status_is_clean",
    "get_status",
    # archive
    "make_project_tarball",
    # commit
    "show_diff",
    "add_file",
    "review_and_commit_changes",
]
