"""App config (``app.json`` / ``app.yaml``) reader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from appship.core.exceptions import AppConfigError
from appship.core.utils.io import read_json, read_yaml

APP_CONFIG_NAMES = ("app.json", "app.yaml", "app.yml")


def find_app_config(project_root: Path | str) -> Optional[Path]:
    root = Path(project_root)
    for name in APP_CONFIG_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def read_app_config(path: Path | str) -> Dict[str, Any]:
    """Read an app config, unwrapping a top-level ``expo`` mapping.

    Raises:
        AppConfigError: If the file is missing, invalid, or not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise AppConfigError(f"App config not found: {path}", context={"path": str(path)})

    try:
        if path.suffix in (".yaml", ".yml"):
            data = read_yaml(path, default={}, raise_on_error=True)
        else:
            data = read_json(path, default={}, raise_on_error=True)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise AppConfigError(f"Could not read {path}: {exc}", context={"path": str(path)}) from exc

    if not isinstance(data, dict):
        raise AppConfigError(f"{path} must contain an object", context={"path": str(path)})

    inner = data.get("expo")
    if isinstance(inner, dict):
        return inner
    return data


__all__ = ["APP_CONFIG_NAMES", "find_app_config", "read_app_config"]
