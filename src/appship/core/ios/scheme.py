"""URL-scheme editing for Info.plist documents.

An Info.plist registers URL schemes under ``CFBundleURLTypes``, a list of
URL-type records each holding a ``CFBundleURLSchemes`` list::

    {"CFBundleURLTypes": [{"CFBundleURLSchemes": ["myapp", "com.example.myapp"]}]}

Every function here returns a new document and leaves its input untouched.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional

URL_TYPES_KEY = "CFBundleURLTypes"
URL_SCHEMES_KEY = "CFBundleURLSchemes"

InfoPlist = Dict[str, Any]


def _is_scheme(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def get_scheme(config: Optional[Mapping[str, Any]]) -> List[str]:
    """Return the ``scheme`` entry of an app config as a list.

    A list keeps only its non-empty string members, a string becomes a
    one-element list, anything else yields ``[]``.
    """
    if not config:
        return []
    value = config.get("scheme")
    if isinstance(value, (list, tuple)):
        return [item for item in value if _is_scheme(item)]
    if _is_scheme(value):
        return [value]
    return []


def set_scheme(
    config: Mapping[str, Any],
    info_plist: InfoPlist,
    *,
    include_bundle_identifier: bool = True,
) -> InfoPlist:
    """Replace the URL types of ``info_plist`` with the schemes from ``config``.

    Schemes come from ``config["scheme"]``, ``config["ios"]["scheme"]`` and the
    iOS bundle identifier, in that order, without duplicates. When there are
    none the document is returned unchanged.
    """
    ios = config.get("ios")
    if not isinstance(ios, Mapping):
        ios = {}
    candidates = [*get_scheme(config), *get_scheme(ios)]
    # The bundle identifier doubles as a scheme for OAuth redirects (e.g. Google sign-in).
    bundle_identifier = ios.get("bundleIdentifier")
    if include_bundle_identifier and _is_scheme(bundle_identifier):
        candidates.append(bundle_identifier)

    schemes: List[str] = []
    for scheme in candidates:
        if scheme not in schemes:
            schemes.append(scheme)

    if not schemes:
        return info_plist

    return {
        **info_plist,
        URL_TYPES_KEY: [{URL_SCHEMES_KEY: schemes}],
    }


def append_scheme(scheme: Optional[str], info_plist: InfoPlist) -> InfoPlist:
    """Register ``scheme`` in a new URL type after the existing ones.

    Existing URL types are kept as they are. Appending a scheme that is
    already registered is a no-op.
    """
    if not scheme:
        return info_plist

    existing = info_plist.get(URL_TYPES_KEY)
    if not isinstance(existing, list) or not existing:
        return set_scheme({"scheme": scheme}, info_plist)

    if has_scheme(scheme, info_plist):
        return info_plist

    return {
        **info_plist,
        URL_TYPES_KEY: [*copy.deepcopy(existing), {URL_SCHEMES_KEY: [scheme]}],
    }


def remove_scheme(scheme: Optional[str], info_plist: InfoPlist) -> InfoPlist:
    """Unregister ``scheme`` from every URL type.

    A URL type left without schemes by the removal is dropped; other URL types
    are kept unchanged.
    """
    if not scheme:
        return info_plist

    existing = info_plist.get(URL_TYPES_KEY)
    if not isinstance(existing, list) or not existing:
        return info_plist

    url_types: List[Any] = []
    for url_type in existing:
        schemes = url_type.get(URL_SCHEMES_KEY) if isinstance(url_type, Mapping) else None
        if not isinstance(schemes, list) or scheme not in schemes:
            url_types.append(copy.deepcopy(url_type))
            continue
        remaining = [s for s in schemes if s != scheme]
        if not remaining:
            continue
        updated = copy.deepcopy(dict(url_type))
        updated[URL_SCHEMES_KEY] = remaining
        url_types.append(updated)

    return {**info_plist, URL_TYPES_KEY: url_types}


def has_scheme(scheme: str, info_plist: InfoPlist) -> bool:
    existing = info_plist.get(URL_TYPES_KEY)
    if not isinstance(existing, list):
        return False

    return any(
        isinstance(url_type, Mapping)
        and isinstance(url_type.get(URL_SCHEMES_KEY), list)
        and scheme in url_type[URL_SCHEMES_KEY]
        for url_type in existing
    )


def get_schemes_from_plist(info_plist: InfoPlist) -> List[str]:
    """Return every registered scheme, in document order."""
    existing = info_plist.get(URL_TYPES_KEY)
    if not isinstance(existing, list):
        return []

    schemes: List[str] = []
    for url_type in existing:
        if not isinstance(url_type, Mapping):
            continue
        value = url_type.get(URL_SCHEMES_KEY)
        if isinstance(value, list):
            schemes.extend(value)
    return schemes


__all__ = [
    "URL_TYPES_KEY",
    "URL_SCHEMES_KEY",
    "get_scheme",
    "set_scheme",
    "append_scheme",
    "remove_scheme",
    "has_scheme",
    "get_schemes_from_plist",
]
