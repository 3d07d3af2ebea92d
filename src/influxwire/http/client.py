# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport abstraction and factory."""

from typing import Protocol

from ..config import EndpointConfig, load_endpoint_config
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Minimal transport capability: send one request, get status/headers/body back.

    Implementations must not raise for network failures; they report them as
    ``HttpResponse(ok=False, error_message=..., error_type=...)``.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(config: EndpointConfig | None = None) -> HttpClient:
    """Factory for the default httpx-backed transport."""
    from .httpx_client import HttpxClient

    return HttpxClient(config or load_endpoint_config())
