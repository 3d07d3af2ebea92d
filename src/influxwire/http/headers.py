# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header helpers.

HTTP header field names are case-insensitive (RFC 9110). Transports hand back
plain dicts with whatever casing they use, so lookups go through header_value.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping


def basic_auth_header(username: str, password: str | None) -> str:
    """Return the ``Authorization`` value for HTTP basic auth."""
    token = f"{username}:{password or ''}".encode("utf-8")
    return "Basic " + base64.b64encode(token).decode("ascii")


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    lower = name.lower()
    for key in (name, lower):
        if key in headers:
            value = headers.get(key)
            return default if value is None else str(value).strip()

    for key, value in headers.items():
        if key is not None and str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def merge_headers(computed: Mapping[str, str], extra: Mapping[str, str] | None) -> dict[str, str]:
    """
    Combine configured extra headers with the ones computed for a request.

    Computed headers always win, whatever the casing of the extra header.
    """
    merged: dict[str, str] = {}
    taken = {key.lower() for key in computed}
    for key, value in (extra or {}).items():
        if key and key.lower() not in taken:
            merged[key] = str(value)
    merged.update(computed)
    return merged


__all__ = ["basic_auth_header", "header_value", "merge_headers"]
