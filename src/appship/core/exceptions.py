from __future__ import annotations

from typing import Any, Dict, Mapping


class AppshipError(Exception):
    """Base exception for appship."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Shallow copy; callers keep their own dict.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class CommandError(AppshipError):
    """Raised when a command cannot proceed as invoked."""


class NonInteractiveError(CommandError):
    """Raised when an interactive step is requested in non-interactive mode."""


class UserAbortError(AppshipError):
    """Raised when the operator declines a confirmation prompt."""


class ValidationError(AppshipError, ValueError):
    """Raised when user input or a document fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        AppshipError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class GitError(AppshipError, RuntimeError):
    """Base class for repository-state failures."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        AppshipError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class GitNotFoundError(GitError):
    """Raised when no git executable is available on PATH."""


class GitRepoRequiredError(GitError):
    """Raised when a git repository is required but none exists."""


class DirtyGitTreeError(GitError):
    """Raised when tracked files have uncommitted changes."""


class InfoPlistError(AppshipError):
    """Raised when an Info.plist file cannot be located, read or decoded."""


class AppConfigError(AppshipError):
    """Raised when the app config (app.json) cannot be read."""


class ConfigError(AppshipError, RuntimeError):
    """Raised when appship configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        AppshipError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class AppshipPathError(AppshipError):
    """Raised when the project root cannot be resolved."""


__all__ = [
    "AppshipError",
    "CommandError",
    "NonInteractiveError",
    "UserAbortError",
    "ValidationError",
    "GitError",
    "GitNotFoundError",
    "GitRepoRequiredError",
    "DirtyGitTreeError",
    "InfoPlistError",
    "AppConfigError",
    "ConfigError",
    "AppshipPathError",
]
