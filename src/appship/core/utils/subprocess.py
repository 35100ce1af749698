"""Running external commands (mostly git) under configured timeouts.

Each command falls into a timeout bucket from the ``timeouts`` config
section: ``git archive`` gets ``archive_operations``, other git commands get
``git_operations`` and anything else gets ``default``. When a command with
captured output overruns, its whole process group is killed so that child
processes such as git hooks or pagers cannot keep the pipes open.
"""
from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
from pathlib import Path
from time import perf_counter
from typing import Any, List, MutableMapping, Optional, Sequence

logger = logging.getLogger(__name__)

_KILL_GRACE_SECONDS = 0.2


def _argv(cmd: Any) -> List[str]:
    if isinstance(cmd, (list, tuple)):
        return [str(part) for part in cmd]
    return shlex.split(str(cmd))


def _bucket_for(argv: Sequence[str]) -> str:
    if argv and Path(argv[0]).name == "git":
        return "archive_operations" if "archive" in argv[1:] else "git_operations"
    return "default"


def configured_timeout(cmd: Any, timeout_type: str | None = None, cwd: Path | str | None = None) -> float:
    """Seconds allowed for ``cmd``.

    ``timeout_type`` names the bucket explicitly; otherwise it is inferred from
    the command. ``cwd`` selects whose project config is read.
    """
    from appship.core.config.domains.timeouts import TimeoutsConfig

    timeouts = TimeoutsConfig(repo_root=Path(cwd).resolve() if cwd is not None else None)
    return timeouts.for_bucket(timeout_type or _bucket_for(_argv(cmd)))


def _new_session_kwargs() -> dict[str, Any]:
    if os.name == "posix":
        return {"start_new_session": True}
    flags = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", None)
    return {"creationflags": flags} if isinstance(flags, int) else {}


def _kill_group(proc: subprocess.Popen[Any]) -> None:
    if proc.poll() is not None:
        return
    if os.name != "posix":
        proc.kill()
        proc.wait(timeout=_KILL_GRACE_SECONDS)
        return

    for sig in (signal.SIGTERM, signal.SIGKILL):
        try:
            os.killpg(proc.pid, sig)
        except OSError:
            proc.kill()
        try:
            proc.wait(timeout=_KILL_GRACE_SECONDS)
            return
        except subprocess.TimeoutExpired:
            continue


def _run_captured(argv: List[str], *, timeout: float, **kwargs: Any) -> subprocess.CompletedProcess:
    """``subprocess.run(capture_output=True)`` that kills the process group on timeout."""
    stdin_data = kwargs.get("input")
    proc = subprocess.Popen(
        argv,
        cwd=kwargs.get("cwd"),
        env=kwargs.get("env"),
        stdin=subprocess.PIPE if stdin_data is not None else subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=bool(kwargs.get("text", True)),
        **_new_session_kwargs(),
    )
    try:
        out, err = proc.communicate(input=stdin_data, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        _kill_group(proc)
        try:
            out, err = proc.communicate(timeout=_KILL_GRACE_SECONDS)
        except subprocess.TimeoutExpired:
            out, err = exc.output, exc.stderr
        raise subprocess.TimeoutExpired(argv, timeout, output=out, stderr=err) from None

    if kwargs.get("check") and proc.returncode != 0:
        raise subprocess.CalledProcessError(proc.returncode, argv, output=out, stderr=err)
    return subprocess.CompletedProcess(argv, proc.returncode, stdout=out, stderr=err)


def run_with_timeout(cmd, timeout_type: str | None = None, **kwargs):
    """Run ``cmd`` like ``subprocess.run`` with the configured timeout.

    An explicit ``timeout=`` keyword wins over the bucket.

    Raises:
        subprocess.TimeoutExpired: When the command overruns.
        subprocess.CalledProcessError: When ``check=True`` and the command fails.
    """
    timeout = kwargs.pop("timeout", None)
    if timeout is None:
        timeout = configured_timeout(cmd, timeout_type=timeout_type, cwd=kwargs.get("cwd"))

    argv = _argv(cmd)
    shown = shlex.join(argv)
    logger.debug("run: %s (cwd=%s, timeout=%ss)", shown, kwargs.get("cwd"), timeout)
    started = perf_counter()

    streams_redirected = "stdout" in kwargs or "stderr" in kwargs
    try:
        if kwargs.get("capture_output") and not streams_redirected:
            result = _run_captured(argv, timeout=float(timeout), **kwargs)
        else:
            result = subprocess.run(cmd, timeout=timeout, **kwargs)
    except subprocess.TimeoutExpired:
        logger.warning("timed out after %ss: %s", timeout, shown)
        raise
    except subprocess.CalledProcessError as exc:
        logger.debug("exit %s after %.1fms: %s", exc.returncode, (perf_counter() - started) * 1000.0, shown)
        raise

    logger.debug("exit %s after %.1fms: %s", result.returncode, (perf_counter() - started) * 1000.0, shown)
    return result


def run_command(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[MutableMapping[str, str]] = None,
    timeout: Optional[float] = None,
    timeout_type: Optional[str] = None,
    capture_output: bool = False,
    text: bool = True,
    check: bool = False,
    input: Any = None,
    **stdio: Any,
) -> subprocess.CompletedProcess:
    """Run an argv list (never through a shell).

    ``stdin``/``stdout``/``stderr`` in ``stdio`` are passed to ``subprocess.run``
    so output can stream to the terminal.
    """
    if input is not None:
        stdio["input"] = input
    return run_with_timeout(
        list(cmd),
        timeout_type=timeout_type,
        cwd=str(cwd) if cwd is not None else None,
        env=env,
        timeout=timeout,
        capture_output=capture_output,
        text=text,
        check=check,
        **stdio,
    )


def run_git_command(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    timeout_type: str = "git_operations",
    **kwargs: Any,
) -> subprocess.CompletedProcess:
    """Run ``git ...`` with the configured ``git.executable``.

    ``cmd[0]`` must be ``"git"``; it is swapped for the configured executable.
    Remaining keywords are those of :func:`run_command`.
    """
    argv = list(cmd)
    if not argv or argv[0] != "git":
        raise ValueError(f"run_git_command expects a git command, got: {argv!r}")

    from appship.core.config.domains.git import GitConfig

    argv[0] = GitConfig(repo_root=Path(cwd) if cwd else None).executable
    return run_command(argv, cwd=cwd, timeout_type=timeout_type, **kwargs)


__all__ = [
    "configured_timeout",
    "run_with_timeout",
    "run_command",
    "run_git_command",
]
