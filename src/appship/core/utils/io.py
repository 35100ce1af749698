"""Loading YAML and JSON documents from disk."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from .merge import deep_merge


def _load(path: Path, parse: Callable[[str], Any], errors: tuple, default: Any, raise_on_error: bool) -> Any:
    if not path.is_file():
        if raise_on_error:
            raise FileNotFoundError(f"No such file: {path}")
        return default
    try:
        data = parse(path.read_text(encoding="utf-8"))
    except (OSError, *errors):
        if raise_on_error:
            raise
        return default
    return default if data is None else data


def read_yaml(path: Path | str, default: Any = None, raise_on_error: bool = False) -> Any:
    """Parse a YAML file.

    A missing or unparsable file yields ``default`` unless ``raise_on_error``
    is set, in which case ``FileNotFoundError``/``yaml.YAMLError`` propagate.
    An empty document also yields ``default``.
    """
    return _load(Path(path), yaml.safe_load, (yaml.YAMLError,), default, raise_on_error)


def read_json(path: Path | str, default: Any = None, raise_on_error: bool = False) -> Any:
    """Like :func:`read_yaml`, for JSON (``ValueError`` on bad input)."""
    return _load(Path(path), json.loads, (ValueError,), default, raise_on_error)


def iter_yaml_files(directory: Path | str) -> list[Path]:
    """YAML files of ``directory`` sorted by name.

    ``name.yaml`` shadows ``name.yml``; a missing directory has no files.
    """
    d = Path(directory)
    if not d.is_dir():
        return []
    by_stem: Dict[str, Path] = {}
    for suffix in ("*.yml", "*.yaml"):
        for path in d.glob(suffix):
            by_stem[path.stem] = path
    return [by_stem[stem] for stem in sorted(by_stem)]


def merge_yaml_directory(base: Dict[str, Any], directory: Path | str) -> Dict[str, Any]:
    """Overlay every YAML file of ``directory`` onto ``base``, in name order.

    Raises:
        yaml.YAMLError: On invalid YAML.
        ValueError: When a file's top level is not a mapping.
    """
    merged = dict(base)
    for path in iter_yaml_files(directory):
        layer = read_yaml(path, default={}, raise_on_error=True)
        if not isinstance(layer, dict):
            raise ValueError(f"{path} must contain a YAML mapping at the top level")
        merged = deep_merge(merged, layer)
    return merged


__all__ = [
    "read_yaml",
    "read_json",
    "iter_yaml_files",
    "merge_yaml_directory",
]
