"""Merging of configuration layers.

A higher layer wins key by key; nested mappings are merged recursively.
Lists are replaced unless the overriding list starts with a marker:

    ``["+", "a"]``  append ``a`` to the lower layer's list
    ``["=", "a"]``  replace the lower layer's list (the default, spelled out)
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

APPEND_MARKER = "+"
REPLACE_MARKER = "="


def merge_arrays(lower: List[Any], upper: List[Any]) -> List[Any]:
    if upper and upper[0] == APPEND_MARKER:
        return list(lower) + list(upper[1:])
    if upper and upper[0] == REPLACE_MARKER:
        return list(upper[1:])
    return list(upper)


def deep_merge(lower: Mapping[str, Any], upper: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Return ``lower`` overlaid with ``upper``; neither input is modified.

    >>> deep_merge({"git": {"executable": "git"}}, {"git": {"tarball_prefix": "app/"}})
    {'git': {'executable': 'git', 'tarball_prefix': 'app/'}}
    """
    merged: Dict[str, Any] = dict(lower)
    for key, value in (upper or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = merge_arrays(current, value)
        else:
            merged[key] = value
    return merged


__all__ = ["deep_merge", "merge_arrays"]
