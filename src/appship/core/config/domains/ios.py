"""Domain-specific configuration for iOS Info.plist handling."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class IosConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "ios"

    @cached_property
    def info_plist_glob(self) -> str:
        return str(self.section.get("info_plist_glob") or "ios/*/Info.plist")

    @cached_property
    def plist_format(self) -> str:
        return str(self.section.get("plist_format") or "xml")

    @cached_property
    def include_bundle_identifier(self) -> bool:
        return bool(self.section.get("include_bundle_identifier", True))


__all__ = ["IosConfig"]
