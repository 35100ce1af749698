"""Info.plist file I/O."""
from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Any, Dict, Optional
from xml.parsers.expat import ExpatError

from appship.core.exceptions import InfoPlistError

logger = logging.getLogger(__name__)

_FORMATS = {
    "xml": plistlib.FMT_XML,
    "binary": plistlib.FMT_BINARY,
}


def read_info_plist(path: Path | str) -> Dict[str, Any]:
    """Load an XML or binary property list whose root is a dictionary.

    Raises:
        InfoPlistError: If the file is missing, undecodable, or not a dictionary.
    """
    path = Path(path)
    if not path.is_file():
        raise InfoPlistError(f"Info.plist not found: {path}", context={"path": str(path)})

    try:
        with open(path, "rb") as f:
            data = plistlib.load(f)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as exc:
        raise InfoPlistError(f"Could not parse {path}: {exc}", context={"path": str(path)}) from exc

    if not isinstance(data, dict):
        raise InfoPlistError(
            f"{path} must contain a dictionary at the top level",
            context={"path": str(path)},
        )
    return data


def write_info_plist(path: Path | str, info_plist: Dict[str, Any], *, fmt: str = "xml") -> None:
    """Write ``info_plist`` to ``path`` keeping key order."""
    if fmt not in _FORMATS:
        raise InfoPlistError(f"Unknown plist format: {fmt}", context={"format": fmt})

    path = Path(path)
    with open(path, "wb") as f:
        plistlib.dump(info_plist, f, fmt=_FORMATS[fmt], sort_keys=False)
    logger.info("wrote %s", path)


def find_info_plist(project_root: Path | str, pattern: Optional[str] = None) -> Path:
    """Locate the project's Info.plist using ``ios.info_plist_glob``.

    Raises:
        InfoPlistError: When no file or more than one file matches.
    """
    root = Path(project_root)
    if pattern is None:
        from appship.core.config.domains.ios import IosConfig

        pattern = IosConfig(repo_root=root).info_plist_glob

    matches = sorted(p for p in root.glob(pattern) if p.is_file())
    if not matches:
        raise InfoPlistError(
            f"No Info.plist matching '{pattern}' under {root}. Pass --plist explicitly.",
            context={"pattern": pattern},
        )
    if len(matches) > 1:
        candidates = ", ".join(str(p.relative_to(root)) for p in matches)
        raise InfoPlistError(
            f"Several Info.plist files match '{pattern}': {candidates}. Pass --plist explicitly.",
            context={"pattern": pattern, "candidates": [str(p) for p in matches]},
        )
    return matches[0]


__all__ = ["read_info_plist", "write_info_plist", "find_info_plist"]
