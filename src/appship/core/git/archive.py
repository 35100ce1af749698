"""Source snapshot archives of HEAD."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from appship.core.utils.cli import info, success
from appship.core.utils.subprocess import run_git_command

logger = logging.getLogger(__name__)


def make_project_tarball(tar_path: Path | str, cwd: Optional[Path | str] = None) -> int:
    """Archive the committed project (``HEAD``) into ``tar_path``.

    Only committed content is included; callers usually run
    :func:`ensure_git_status_is_clean` first. Entries are placed under the
    configured ``git.tarball_prefix`` (``project/`` by default).

    Returns:
        int: Size of the created archive in bytes.
    """
    from appship.core.config.domains.git import GitConfig

    git_config = GitConfig(repo_root=Path(cwd) if cwd else None)
    tar_path = Path(tar_path)
    if not tar_path.is_absolute() and cwd is not None:
        tar_path = Path(cwd) / tar_path

    info("Making project tarball")
    run_git_command(
        [
            "git",
            "archive",
            f"--format={git_config.tarball_format}",
            "--prefix",
            git_config.tarball_prefix,
            "-o",
            str(tar_path),
            "HEAD",
        ],
        cwd=cwd,
        timeout_type="archive_operations",
        capture_output=True,
        check=True,
    )
    success("Project tarball created.")

    size = tar_path.stat().st_size
    logger.info("project tarball %s (%d bytes)", tar_path, size)
    return size


__all__ = ["make_project_tarball"]
