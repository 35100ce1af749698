from __future__ import annotations

from appship.core.utils.merge import deep_merge, merge_arrays


def test_nested_dicts_merge() -> None:
    base = {"git": {"executable": "git", "tarball_prefix": "project/"}, "ios": {"plist_format": "xml"}}
    override = {"git": {"tarball_prefix": "app/"}}

    merged = deep_merge(base, override)

    assert merged == {
        "git": {"executable": "git", "tarball_prefix": "app/"},
        "ios": {"plist_format": "xml"},
    }
    assert base["git"]["tarball_prefix"] == "project/"


def test_scalar_replaces_mapping() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}


def test_array_markers() -> None:
    assert merge_arrays(["a"], ["b"]) == ["b"]
    assert merge_arrays(["a"], ["+", "b"]) == ["a", "b"]
    assert merge_arrays(["a"], ["=", "b"]) == ["b"]
    assert merge_arrays(["a"], []) == []


def test_arrays_inside_mappings_use_markers() -> None:
    merged = deep_merge({"x": {"items": [1, 2]}}, {"x": {"items": ["+", 3]}})

    assert merged == {"x": {"items": [1, 2, 3]}}
