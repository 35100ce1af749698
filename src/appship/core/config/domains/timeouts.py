"""Subprocess timeout buckets (``timeouts`` section)."""
from __future__ import annotations

from functools import cached_property

from appship.core.exceptions import ConfigError

from ..base import BaseDomainConfig

TIMEOUT_BUCKETS = ("git_operations", "archive_operations", "default")


class TimeoutsConfig(BaseDomainConfig):
    """Seconds allowed per timeout bucket.

    Every bucket must be configured; the bundled defaults provide all of them.
    """

    def _config_section(self) -> str:
        return "timeouts"

    def _seconds(self, bucket: str) -> float:
        key = f"{bucket}_seconds"
        if key not in self.section:
            raise ConfigError(f"timeouts.{key} missing from configuration", context={"key": key})
        return float(self.section[key])

    @cached_property
    def git_operations_seconds(self) -> float:
        return self._seconds("git_operations")

    @cached_property
    def archive_operations_seconds(self) -> float:
        """Budget for ``git archive``, which can take long on big projects."""
        return self._seconds("archive_operations")

    @cached_property
    def default_seconds(self) -> float:
        return self._seconds("default")

    def for_bucket(self, bucket: str) -> float:
        """Seconds for ``bucket``; unknown buckets get the default."""
        if bucket not in TIMEOUT_BUCKETS:
            return self.default_seconds
        return self._seconds(bucket)


__all__ = ["TIMEOUT_BUCKETS", "TimeoutsConfig"]
