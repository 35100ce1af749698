import os
import sys
from pathlib import Path

import pytest

# No __pycache__ litter in the source tree.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'appship'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from appship.core.utils.subprocess import run_with_timeout
from helpers.cache_utils import reset_appship_caches


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "requires_git: marks tests that require git operations"
    )


def pytest_collection_modifyitems(config, items):
    import shutil

    if shutil.which("git") is not None:
        return
    skip_git = pytest.mark.skip(reason="git executable not available")
    for item in items:
        if "requires_git" in item.keywords:
            item.add_marker(skip_git)


@pytest.fixture(autouse=True)
def _isolate_appship(tmp_path_factory, monkeypatch):
    """Fresh caches and no leaked APPSHIP_* / user config for every test."""
    for key in list(os.environ):
        if key.startswith("APPSHIP_"):
            monkeypatch.delenv(key, raising=False)
    user_dir = tmp_path_factory.mktemp("appship-user")
    monkeypatch.setenv("APPSHIP_USER_CONFIG_DIR", str(user_dir))

    # Commits in freshly initialized repositories need an identity.
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")

    reset_appship_caches()
    yield
    reset_appship_caches()


@pytest.fixture
def project_env(tmp_path, monkeypatch):
    """A project root without git, for config/prompt/plist tests."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.setenv("APPSHIP_PROJECT_ROOT", str(root))
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """
    Isolated project environment backed by a real git repository.

    The repository lives in ``tmp_path/repo`` on branch ``main`` with one
    committed README.md.
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    monkeypatch.setenv("APPSHIP_PROJECT_ROOT", str(repo))
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.chdir(repo)

    (repo / "README.md").write_text("# Test Project\n", encoding="utf-8")
    for argv in (
        ["git", "init", "-b", "main"],
        ["git", "config", "user.email", "test@example.com"],
        ["git", "config", "user.name", "Test User"],
        ["git", "config", "commit.gpgsign", "false"],
        ["git", "add", "README.md"],
        ["git", "commit", "-m", "Initial commit"],
    ):
        run_with_timeout(argv, cwd=repo, check=True, capture_output=True)
    return repo


@pytest.fixture
def plain_dir(tmp_path, monkeypatch):
    """A directory that is not inside any git repository."""
    d = tmp_path / "plain"
    d.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("APPSHIP_PROJECT_ROOT", str(d))
    monkeypatch.chdir(d)
    return d


@pytest.fixture
def answers(monkeypatch):
    """Script the operator's answers to ``input()`` prompts.

    Usage::

        answers("y", "my message")

    The returned list collects the prompt strings that were shown.
    """
    shown: list[str] = []

    def _script(*responses: str) -> list[str]:
        queue = list(responses)

        def _fake_input(prompt: str = "") -> str:
            shown.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", _fake_input)
        return shown

    return _script
