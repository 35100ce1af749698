"""
appship configuration management (YAML-only).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from appship.core.exceptions import ConfigError
from appship.core.utils.io import merge_yaml_directory
from appship.core.utils.paths import (
    get_project_config_dir,
    get_user_config_dir,
    resolve_project_root,
)
from appship.data import get_data_path, read_schema

logger = logging.getLogger(__name__)

ENV_PREFIX = "APPSHIP_"
# Env vars under the prefix that are not config overrides.
_RESERVED_ENV_KEYS = {"APPSHIP_PROJECT_ROOT", "APPSHIP_USER_CONFIG_DIR", "APPSHIP_ASSUME_YES"}


class ConfigManager:
    """Load, merge, and validate appship configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: APPSHIP_<section>__<key>
    2. Project-local config: <project>/.appship/config.local/*.yaml (uncommitted)
    3. Project config: <project>/.appship/config/*.yaml
    4. User config: ~/.appship/config/*.yaml
    5. Bundled defaults: appship.data/config/*.yaml
    """

    ARRAY_APPEND_MARKER = object()

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root else resolve_project_root()

        project_dir = get_project_config_dir(self.repo_root)
        self.core_config_dir = get_data_path("config")
        self.user_config_dir = get_user_config_dir() / "config"
        self.project_config_dir = project_dir / "config"
        self.project_local_config_dir = project_dir / "config.local"

    # ---- env overrides ----

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str) -> List[Union[str, int, object]]:
        processed: List[Union[str, int, object]] = []
        for seg in raw.split("__"):
            if seg == "":
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.")
            if seg.isdigit():
                processed.append(int(seg))
            elif seg.upper() == "APPEND":
                processed.append(self.ARRAY_APPEND_MARKER)
            else:
                processed.append(seg.lower())
        return processed

    def _iter_env_overrides(self):
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV_KEYS:
                continue
            raw = key[len(ENV_PREFIX):]
            # Only nested keys are config overrides (APPSHIP_git__executable).
            if "__" not in raw:
                continue
            yield self._parse_env_key(raw), self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[Union[str, int, object]], value: Any) -> None:
        cur: Any = root
        for i, part in enumerate(path[:-1]):
            if isinstance(part, int) or part is self.ARRAY_APPEND_MARKER:
                raise ConfigError("Invalid override path: list index/APPEND may only appear at leaf")
            if not isinstance(cur, dict):
                raise ConfigError("Override path traverses a non-mapping value")
            nxt = path[i + 1]
            if part not in cur:
                cur[part] = [] if (isinstance(nxt, int) or nxt is self.ARRAY_APPEND_MARKER) else {}
            cur = cur[part]

        leaf = path[-1]
        if leaf is self.ARRAY_APPEND_MARKER:
            if not isinstance(cur, list):
                raise ConfigError("APPEND requires a list")
            cur.append(value)
        elif isinstance(leaf, int):
            if not isinstance(cur, list):
                raise ConfigError("Index assignment requires a list")
            while len(cur) <= leaf:
                cur.append(None)
            cur[leaf] = value
        else:
            if not isinstance(cur, dict):
                raise ConfigError("Key assignment requires a mapping")
            cur[leaf] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("config env override: %s", path)
            self._set_nested(cfg, path, typed_value)

    # ---- loading ----

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return merge_yaml_directory(cfg, directory)
        except (yaml.YAMLError, ValueError) as exc:
            raise ConfigError(f"Invalid configuration in {directory}: {exc}") from exc

    def validate_schema(self, config: Dict[str, Any]) -> None:
        try:
            jsonschema.validate(instance=config, schema=read_schema("config"))
        except jsonschema.ValidationError as exc:
            where = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Configuration is invalid at {where}: {exc.message}",
                context={"path": where},
            ) from exc

    def _load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from every layer (uncached)."""
        cfg: Dict[str, Any] = {}
        for directory in (
            self.core_config_dir,
            self.user_config_dir,
            self.project_config_dir,
            self.project_local_config_dir,
        ):
            cfg = self._load_directory(directory, cfg)

        self.apply_env_overrides(cfg)

        if validate:
            self.validate_schema(cfg)
        return cfg

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration, served from the shared cache."""
        from .cache import get_cached_config

        return get_cached_config(repo_root=self.repo_root, validate=validate)


__all__ = ["ConfigManager"]
