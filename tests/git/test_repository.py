from __future__ import annotations

from pathlib import Path

import pytest

from appship.core.exceptions import GitNotFoundError, GitRepoRequiredError
from appship.core.git import does_git_repo_exist, ensure_git_repo_exists, find_git_executable
from helpers.git_helpers import git_log_messages, git_tracked_files

pytestmark = pytest.mark.requires_git


def test_find_git_executable(plain_dir: Path) -> None:
    path = find_git_executable()

    assert path is not None
    assert Path(path).name.startswith("git")


def test_repo_detection(isolated_project_env: Path, plain_dir: Path) -> None:
    assert does_git_repo_exist(isolated_project_env)
    assert does_git_repo_exist(isolated_project_env / ".git")
    assert not does_git_repo_exist(plain_dir)


def test_existing_repo_needs_no_prompt(isolated_project_env: Path, answers) -> None:
    shown = answers()

    ensure_git_repo_exists(isolated_project_env)

    assert shown == []


def test_missing_git_executable(plain_dir: Path, monkeypatch) -> None:
    monkeypatch.setenv("APPSHIP_GIT__EXECUTABLE", "appship-no-such-git")

    with pytest.raises(GitNotFoundError, match="git command has not been found"):
        ensure_git_repo_exists(plain_dir)


def test_non_interactive_refuses_to_init(plain_dir: Path, answers, capsys) -> None:
    shown = answers()

    with pytest.raises(GitRepoRequiredError, match="A git repository is required"):
        ensure_git_repo_exists(plain_dir, non_interactive=True)

    assert shown == []
    assert "haven't initialized the git repository yet" in capsys.readouterr().err
    assert not (plain_dir / ".git").exists()


def test_declining_init_raises(plain_dir: Path, answers) -> None:
    shown = answers("n")

    with pytest.raises(GitRepoRequiredError):
        ensure_git_repo_exists(plain_dir)

    assert shown == ["Would you like to run 'git init' in the current directory? [y/N] "]
    assert not (plain_dir / ".git").exists()


def test_accepting_init_makes_initial_commit(plain_dir: Path, answers, capsys) -> None:
    (plain_dir / "app.json").write_text("{}", encoding="utf-8")
    (plain_dir / "src").mkdir()
    (plain_dir / "src" / "index.js").write_text("export {};\n", encoding="utf-8")
    shown = answers("y", "")

    ensure_git_repo_exists(plain_dir)

    assert shown[1] == "Commit message: (Initial commit) "
    assert git_log_messages(plain_dir) == ["Initial commit"]
    assert sorted(git_tracked_files(plain_dir)) == ["app.json", "src/index.js"]
    assert "initial commit for your repository" in capsys.readouterr().out


def test_custom_initial_commit_message(plain_dir: Path, answers) -> None:
    (plain_dir / "README.md").write_text("hi\n", encoding="utf-8")
    answers("yes", "Start project")

    ensure_git_repo_exists(plain_dir)

    assert git_log_messages(plain_dir) == ["Start project"]
