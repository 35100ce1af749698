from __future__ import annotations

from pathlib import Path

import pytest

from appship.core.exceptions import DirtyGitTreeError
from appship.core.git import ensure_git_status_is_clean, get_status
from appship.core.utils.subprocess import run_with_timeout
from helpers.git_helpers import git

pytestmark = pytest.mark.requires_git


def test_clean_tree_passes(isolated_project_env: Path) -> None:
    ensure_git_status_is_clean(isolated_project_env)


def test_untracked_files_are_ignored(isolated_project_env: Path) -> None:
    (isolated_project_env / "notes.txt").write_text("scratch\n", encoding="utf-8")

    ensure_git_status_is_clean(isolated_project_env)


def test_modified_tracked_file_fails(isolated_project_env: Path) -> None:
    (isolated_project_env / "README.md").write_text("changed\n", encoding="utf-8")

    with pytest.raises(DirtyGitTreeError, match="Please commit all changes") as excinfo:
        ensure_git_status_is_clean(isolated_project_env)
    assert excinfo.value.context["changes"] == [" M README.md"]


def test_staged_change_fails(isolated_project_env: Path) -> None:
    (isolated_project_env / "new.txt").write_text("new\n", encoding="utf-8")
    git(isolated_project_env, "add", "new.txt")

    with pytest.raises(DirtyGitTreeError):
        ensure_git_status_is_clean(isolated_project_env)


def test_get_status_summary(isolated_project_env: Path) -> None:
    repo = isolated_project_env
    (repo / "README.md").write_text("changed\n", encoding="utf-8")
    (repo / "staged.txt").write_text("s\n", encoding="utf-8")
    git(repo, "add", "staged.txt")
    (repo / "loose.txt").write_text("u\n", encoding="utf-8")

    status = get_status(repo)

    assert status == {
        "branch": "main",
        "clean": False,
        "staged": ["staged.txt"],
        "modified": ["README.md"],
        "untracked": ["loose.txt"],
    }


def test_get_status_clean(isolated_project_env: Path) -> None:
    status = get_status(isolated_project_env)

    assert status["clean"] is True
    assert status["branch"] == "main"


def test_get_status_without_commits(plain_dir: Path) -> None:
    run_with_timeout(["git", "init"], cwd=plain_dir, check=True, capture_output=True)

    status = get_status(plain_dir)

    assert status["branch"] is None
    assert status["clean"] is True
