"""Files shipped inside the appship package: config defaults and JSON schemas."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """Filesystem path of ``appship/data/<subpackage>[/<filename>]``.

    >>> get_data_path("schemas", "config.schema.json").name
    'config.schema.json'
    """
    directory = Path(str(resources.files(__name__) / subpackage))
    return directory / filename if filename else directory


@lru_cache(maxsize=16)
def read_schema(name: str) -> dict[str, Any]:
    """The bundled ``<name>.schema.json``, parsed once per process."""
    with open(get_data_path("schemas", f"{name}.schema.json"), encoding="utf-8") as f:
        return json.load(f)


__all__ = ["get_data_path", "read_schema"]
