from __future__ import annotations

import plistlib
from pathlib import Path

import pytest

from appship.core.exceptions import InfoPlistError
from appship.core.ios.info_plist import find_info_plist, read_info_plist, write_info_plist
from helpers.plist_helpers import sample_info_plist, write_plist


def test_write_keeps_key_order(tmp_path: Path) -> None:
    path = tmp_path / "Info.plist"
    doc = {"Zeta": 1, "Alpha": 2, "CFBundleURLTypes": [{"CFBundleURLSchemes": ["a"]}]}

    write_info_plist(path, doc)

    assert list(read_info_plist(path)) == ["Zeta", "Alpha", "CFBundleURLTypes"]
    assert path.read_bytes().startswith(b"<?xml")


def test_binary_format(tmp_path: Path) -> None:
    path = tmp_path / "Info.plist"

    write_info_plist(path, sample_info_plist(["a"]), fmt="binary")

    assert path.read_bytes().startswith(b"bplist00")
    assert read_info_plist(path) == sample_info_plist(["a"])


def test_unknown_format_rejected(tmp_path: Path) -> None:
    with pytest.raises(InfoPlistError, match="Unknown plist format"):
        write_info_plist(tmp_path / "Info.plist", {}, fmt="json")


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InfoPlistError, match="not found"):
        read_info_plist(tmp_path / "nope.plist")


def test_garbage_file(tmp_path: Path) -> None:
    path = tmp_path / "Info.plist"
    path.write_bytes(b"definitely not a plist")

    with pytest.raises(InfoPlistError, match="Could not parse"):
        read_info_plist(path)


def test_truncated_xml_plist(tmp_path: Path) -> None:
    path = tmp_path / "Info.plist"
    path.write_bytes(
        b'<?xml version="1.0" encoding="UTF-8"?>\n'
        b'<plist version="1.0"><dict><key>CFBundleName</key>'
    )

    with pytest.raises(InfoPlistError, match="Could not parse") as excinfo:
        read_info_plist(path)
    assert excinfo.value.context == {"path": str(path)}


def test_root_must_be_a_dictionary(tmp_path: Path) -> None:
    path = tmp_path / "Info.plist"
    with open(path, "wb") as f:
        plistlib.dump(["a", "b"], f)

    with pytest.raises(InfoPlistError, match="dictionary"):
        read_info_plist(path)


class TestFindInfoPlist:
    def test_single_match(self, project_env: Path) -> None:
        expected = write_plist(project_env / "ios" / "MyApp" / "Info.plist", sample_info_plist())

        assert find_info_plist(project_env) == expected

    def test_no_match(self, project_env: Path) -> None:
        with pytest.raises(InfoPlistError, match="No Info.plist"):
            find_info_plist(project_env)

    def test_several_matches(self, project_env: Path) -> None:
        write_plist(project_env / "ios" / "MyApp" / "Info.plist", sample_info_plist())
        write_plist(project_env / "ios" / "Widget" / "Info.plist", sample_info_plist())

        with pytest.raises(InfoPlistError, match="Several") as excinfo:
            find_info_plist(project_env)
        assert len(excinfo.value.context["candidates"]) == 2

    def test_glob_comes_from_config(self, project_env: Path) -> None:
        cfg_dir = project_env / ".appship" / "config"
        cfg_dir.mkdir(parents=True)
        (cfg_dir / "ios.yaml").write_text("ios:\n  info_plist_glob: app/Info.plist\n", encoding="utf-8")
        expected = write_plist(project_env / "app" / "Info.plist", sample_info_plist())

        assert find_info_plist(project_env) == expected
