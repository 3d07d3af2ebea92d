# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest, bytes], HttpResponse]


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are keyed by request URL; a callable responder may be registered
    instead of a fixed response. Request bodies are drained the way a real
    transport would, so streamed payloads are consumed and recorded in ``bodies``.
    """

    def __init__(self, responses: dict[str, HttpResponse | Responder] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.bodies: list[bytes] = []
        self.close_calls = 0

    def add(self, url: str, response: HttpResponse | Responder) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        try:
            body = self._drain(request)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(ok=False, error_message=str(exc), error_type=type(exc).__name__)
        self.bodies.append(body)

        configured = self._responses.get(request.url)
        if configured is None:
            return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
        if callable(configured):
            return configured(request, body)
        return replace(configured, headers=dict(configured.headers), meta=dict(configured.meta))

    def close(self) -> None:
        self.close_calls += 1

    @staticmethod
    def _drain(request: HttpRequest) -> bytes:
        if request.body is None:
            return b""
        if isinstance(request.body, (bytes, bytearray)):
            return bytes(request.body)
        return b"".join(request.body)


__all__ = ["Responder", "StubHttpClient"]
