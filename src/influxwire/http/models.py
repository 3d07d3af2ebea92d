# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models passed between the client and its transport."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]
QueryParams = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request descriptor consumed by HttpClient implementations."""

    url: str
    method: str = "POST"
    params: QueryParams = field(default_factory=dict)
    headers: Headers = field(default_factory=dict)
    # bytes for buffered payloads, an iterable of chunks for streamed ones.
    body: bytes | Iterable[bytes] | None = None
    timeout: float | None = None

    @property
    def is_streamed(self) -> bool:
        return self.body is not None and not isinstance(self.body, (bytes, bytearray))


@dataclass
class HttpResponse:
    """Normalized HTTP response; ``ok`` is False when the exchange itself failed."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def body_snippet(self) -> str:
        """Return a trimmed text body for error messages."""
        return (self.text or "")[:512]


__all__ = ["Headers", "HttpRequest", "HttpResponse", "QueryParams"]
