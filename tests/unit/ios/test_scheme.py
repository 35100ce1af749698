from __future__ import annotations

import copy

import pytest

from appship.core.ios.scheme import (
    append_scheme,
    get_scheme,
    get_schemes_from_plist,
    has_scheme,
    remove_scheme,
    set_scheme,
)
from helpers.plist_helpers import sample_info_plist


class TestGetScheme:
    def test_string_becomes_single_item_list(self) -> None:
        assert get_scheme({"scheme": "myapp"}) == ["myapp"]

    def test_list_keeps_only_non_empty_strings(self) -> None:
        assert get_scheme({"scheme": ["a", 1, None, "", "b"]}) == ["a", "b"]

    @pytest.mark.parametrize("config", [{}, {"scheme": None}, {"scheme": 3}, {"scheme": ""}, None])
    def test_missing_or_invalid_yields_empty(self, config) -> None:
        assert get_scheme(config) == []


class TestSetScheme:
    def test_combines_app_ios_and_bundle_identifier(self) -> None:
        config = {
            "scheme": ["myapp"],
            "ios": {"scheme": "myapp-ios", "bundleIdentifier": "com.example.myapp"},
        }
        result = set_scheme(config, sample_info_plist())

        assert result["CFBundleURLTypes"] == [
            {"CFBundleURLSchemes": ["myapp", "myapp-ios", "com.example.myapp"]}
        ]
        assert result["CFBundleName"] == "MyApp"

    def test_bundle_identifier_can_be_left_out(self) -> None:
        config = {"scheme": "myapp", "ios": {"bundleIdentifier": "com.example.myapp"}}
        result = set_scheme(config, sample_info_plist(), include_bundle_identifier=False)

        assert get_schemes_from_plist(result) == ["myapp"]

    @pytest.mark.parametrize("ios", ["x", ["a"], None, 3])
    def test_non_mapping_ios_section_is_ignored(self, ios) -> None:
        result = set_scheme({"scheme": "myapp", "ios": ios}, sample_info_plist())

        assert get_schemes_from_plist(result) == ["myapp"]

    def test_duplicates_are_dropped(self) -> None:
        config = {"scheme": "myapp", "ios": {"scheme": ["myapp", "other"]}}

        assert get_schemes_from_plist(set_scheme(config, {})) == ["myapp", "other"]

    def test_replaces_existing_groups(self) -> None:
        plist = sample_info_plist(["old"], ["older"])

        result = set_scheme({"scheme": "new"}, plist)

        assert result["CFBundleURLTypes"] == [{"CFBundleURLSchemes": ["new"]}]

    def test_no_schemes_returns_input_unchanged(self) -> None:
        plist = sample_info_plist(["keep"])

        assert set_scheme({}, plist) is plist

    def test_does_not_mutate_input(self) -> None:
        plist = sample_info_plist(["old"])
        snapshot = copy.deepcopy(plist)

        set_scheme({"scheme": "new"}, plist)

        assert plist == snapshot


class TestAppendScheme:
    def test_creates_url_types_when_missing(self) -> None:
        result = append_scheme("myapp", sample_info_plist())

        assert result["CFBundleURLTypes"] == [{"CFBundleURLSchemes": ["myapp"]}]

    def test_appends_new_group_after_existing_ones(self) -> None:
        plist = sample_info_plist(["a", "b"], ["c"])

        result = append_scheme("d", plist)

        assert result["CFBundleURLTypes"] == [
            {"CFBundleURLSchemes": ["a", "b"]},
            {"CFBundleURLSchemes": ["c"]},
            {"CFBundleURLSchemes": ["d"]},
        ]

    def test_never_removes_existing_groups(self) -> None:
        plist = sample_info_plist(["a"], ["b"], ["c"])
        plist["CFBundleURLTypes"][1]["CFBundleURLName"] = "auth"

        result = append_scheme("z", plist)

        assert result["CFBundleURLTypes"][: len(plist["CFBundleURLTypes"])] == plist["CFBundleURLTypes"]

    @pytest.mark.parametrize("url_types", ["ab", {"CFBundleURLSchemes": ["a"]}])
    def test_malformed_url_types_are_replaced(self, url_types) -> None:
        plist = {**sample_info_plist(), "CFBundleURLTypes": url_types}

        result = append_scheme("z", plist)

        assert result["CFBundleURLTypes"] == [{"CFBundleURLSchemes": ["z"]}]
        assert plist["CFBundleURLTypes"] == url_types

    def test_already_registered_scheme_is_a_no_op(self) -> None:
        plist = sample_info_plist(["a"], ["b"])

        assert append_scheme("b", plist) is plist

    @pytest.mark.parametrize("scheme", [None, ""])
    def test_empty_scheme_returns_input(self, scheme) -> None:
        plist = sample_info_plist(["a"])

        assert append_scheme(scheme, plist) is plist

    def test_does_not_mutate_input(self) -> None:
        plist = sample_info_plist(["a"])
        snapshot = copy.deepcopy(plist)

        append_scheme("b", plist)

        assert plist == snapshot


class TestRemoveScheme:
    def test_drops_group_that_becomes_empty(self) -> None:
        plist = sample_info_plist(["a", "b"], ["c"])

        result = remove_scheme("c", plist)

        assert result["CFBundleURLTypes"] == [{"CFBundleURLSchemes": ["a", "b"]}]

    def test_keeps_group_with_remaining_schemes(self) -> None:
        plist = sample_info_plist(["a", "b"], ["c"])
        plist["CFBundleURLTypes"][0]["CFBundleURLName"] = "main"

        result = remove_scheme("a", plist)

        assert result["CFBundleURLTypes"] == [
            {"CFBundleURLSchemes": ["b"], "CFBundleURLName": "main"},
            {"CFBundleURLSchemes": ["c"]},
        ]

    def test_removes_from_every_group(self) -> None:
        plist = sample_info_plist(["a", "shared"], ["shared"])

        result = remove_scheme("shared", plist)

        assert result["CFBundleURLTypes"] == [{"CFBundleURLSchemes": ["a"]}]

    def test_unknown_scheme_leaves_groups_alone(self) -> None:
        plist = sample_info_plist(["a"], [])

        result = remove_scheme("zzz", plist)

        assert result["CFBundleURLTypes"] == [{"CFBundleURLSchemes": ["a"]}, {"CFBundleURLSchemes": []}]

    def test_without_url_types_returns_input(self) -> None:
        plist = sample_info_plist()

        assert remove_scheme("a", plist) is plist

    @pytest.mark.parametrize("url_types", ["ab", {"CFBundleURLSchemes": ["a"]}])
    def test_malformed_url_types_are_left_alone(self, url_types) -> None:
        plist = {**sample_info_plist(), "CFBundleURLTypes": url_types}

        assert remove_scheme("a", plist) is plist

    def test_does_not_mutate_input(self) -> None:
        plist = sample_info_plist(["a", "b"], ["c"])
        snapshot = copy.deepcopy(plist)

        remove_scheme("a", plist)
        remove_scheme("c", plist)

        assert plist == snapshot


class TestHasScheme:
    def test_true_when_in_any_group(self) -> None:
        plist = sample_info_plist(["a"], ["b", "c"])

        assert has_scheme("a", plist)
        assert has_scheme("c", plist)

    def test_false_when_absent(self) -> None:
        assert not has_scheme("x", sample_info_plist(["a"]))

    def test_false_without_url_types(self) -> None:
        assert not has_scheme("a", sample_info_plist())
        assert not has_scheme("a", {"CFBundleURLTypes": "broken"})

    def test_agrees_with_schemes_listing(self) -> None:
        plist = sample_info_plist(["a", "b"], ["c"], [])
        listed = get_schemes_from_plist(plist)

        for candidate in ["a", "b", "c", "d", ""]:
            assert has_scheme(candidate, plist) == (candidate in listed)


class TestGetSchemesFromPlist:
    def test_flattens_groups_in_order(self) -> None:
        plist = sample_info_plist(["a", "b"], ["c"])

        assert get_schemes_from_plist(plist) == ["a", "b", "c"]

    def test_skips_groups_without_scheme_list(self) -> None:
        plist = {
            "CFBundleURLTypes": [
                {"CFBundleURLName": "nameless"},
                {"CFBundleURLSchemes": "not-a-list"},
                {"CFBundleURLSchemes": ["ok"]},
            ]
        }

        assert get_schemes_from_plist(plist) == ["ok"]

    def test_empty_without_url_types(self) -> None:
        assert get_schemes_from_plist({}) == []


@pytest.mark.parametrize("scheme", ["myapp", "com.example.myapp", "exp+my-app"])
def test_set_then_list_returns_scheme(scheme: str) -> None:
    plist = set_scheme({"scheme": scheme}, sample_info_plist(["previous"]))

    assert get_schemes_from_plist(plist) == [scheme]
