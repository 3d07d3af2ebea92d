# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import DEFAULT_MAX_BODY_BYTES, EndpointConfig, load_endpoint_config
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper. Connection pooling is left to httpx."""

    def __init__(self, config: EndpointConfig | None = None, client: httpx.Client | None = None):
        self.config = config or load_endpoint_config()
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            proxy=self.config.proxy or None,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        try:
            max_body_bytes = self.config.max_body_bytes
            if max_body_bytes <= 0:
                max_body_bytes = DEFAULT_MAX_BODY_BYTES

            timeout = request.timeout if request.timeout is not None else self.config.timeout

            with self._client.stream(
                request.method,
                request.url,
                params=request.params or None,
                headers=request.headers,
                content=request.body,
                timeout=timeout,
            ) as resp:
                content = bytearray()
                truncated = False
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if remaining <= 0:
                        truncated = True
                        break
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        truncated = True
                        break
                    content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=dict(resp.headers),
                text=text,
                content=bytes(content),
                url=str(resp.url),
                meta={
                    "body_truncated": truncated,
                    "body_bytes_read": len(content),
                },
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                url=request.url,
                meta={"error_category": categorize_exception(exc).value},
            )

    def close(self) -> None:
        self._client.close()
