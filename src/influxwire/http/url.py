# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for the write and query endpoints."""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import SplitResult, urlsplit

_HOSTNAME_RE = re.compile(r"^[A-Za-z0-9_~-]+(\.[A-Za-z0-9_~-]+)*\.?$")


def parse_absolute_url(url: str) -> SplitResult:
    """
    Parse ``url`` and reject anything that is not a well-formed absolute URL.

    ``urlsplit`` is permissive: it accepts percent escapes in the host and only
    validates the port lazily, so both are checked here explicitly.
    Raises ValueError with a short description of the problem.
    """
    parts = urlsplit(str(url or "").strip())
    if not parts.scheme:
        raise ValueError("missing scheme")
    if not parts.netloc:
        raise ValueError("missing host")

    host = parts.hostname or ""
    if not host:
        raise ValueError("missing host")
    if "[" in parts.netloc:
        try:
            ipaddress.IPv6Address(host.split("%", 1)[0])
        except ValueError as exc:
            raise ValueError(f"invalid IPv6 host {host!r}") from exc
    elif not _HOSTNAME_RE.match(host):
        raise ValueError(f"invalid host {host!r}")

    # Accessing .port validates it.
    _ = parts.port
    return parts


def endpoint_url(base_url: str, name: str) -> str:
    """
    Join an endpoint name onto the base URL, keeping any path prefix.

    Example:
      http://host:8086         + write -> http://host:8086/write
      http://host/influx/      + query -> http://host/influx/query
    """
    parts = urlsplit(str(base_url or ""))
    prefix = parts.path.rstrip("/")
    path = f"{prefix}/{name.lstrip('/')}"
    return parts._replace(path=path, query="", fragment="").geturl()


__all__ = ["endpoint_url", "parse_absolute_url"]
