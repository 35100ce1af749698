"""iOS project helpers: URL-scheme editing and Info.plist file I/O."""
from __future__ import annotations

from .info_plist import find_info_plist, read_info_plist, write_info_plist
from .scheme import (
    append_scheme,
    get_scheme,
    get_schemes_from_plist,
    has_scheme,
    remove_scheme,
    set_scheme,
)

__all__ = [
    "get_scheme",
    "set_scheme",
    "append_scheme",
    "remove_scheme",
    "has_scheme",
    "get_schemes_from_plist",
    "read_info_plist",
    "write_info_plist",
    "find_info_plist",
]
