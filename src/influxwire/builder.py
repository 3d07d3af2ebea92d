# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Build write and query request descriptors from config and resolved parameters."""

from __future__ import annotations

from .config import EndpointConfig, WriteParams
from .http.headers import basic_auth_header, merge_headers
from .http.models import HttpRequest
from .http.url import endpoint_url
from .payload import Payload

WRITE_ENDPOINT = "write"
QUERY_ENDPOINT = "query"
LINE_PROTOCOL_CONTENT_TYPE = "text/plain; charset=utf-8"


def _wire_value(value: object) -> str:
    return str(getattr(value, "value", value) or "")


class RequestBuilder:
    """Turns a validated EndpointConfig into per-call HttpRequest descriptors."""

    def __init__(self, config: EndpointConfig):
        self.config = config
        self.write_url = endpoint_url(config.url, WRITE_ENDPOINT)
        self.query_url = endpoint_url(config.url, QUERY_ENDPOINT)

    def _common_headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.config.effective_user_agent}
        if self.config.username:
            headers["Authorization"] = basic_auth_header(self.config.username, self.config.password)
        return headers

    def build_write_request(self, params: WriteParams, payload: Payload) -> HttpRequest:
        """
        Build a POST to ``/write`` for already-resolved parameters.

        ``Content-Length`` is the payload's declared length. Whether the source
        actually delivers that many bytes is the caller's contract, not checked here.
        Empty retention policy and consistency are left out of the query string.
        """
        query = {"db": params.database}
        retention_policy = _wire_value(params.retention_policy)
        if retention_policy:
            query["rp"] = retention_policy
        query["precision"] = _wire_value(params.precision)
        consistency = _wire_value(params.consistency)
        if consistency:
            query["consistency"] = consistency

        headers = self._common_headers()
        headers["Content-Type"] = LINE_PROTOCOL_CONTENT_TYPE
        headers["Content-Length"] = str(payload.length)

        return HttpRequest(
            url=self.write_url,
            method="POST",
            params=query,
            headers=merge_headers(headers, self.config.headers),
            body=payload.body(),
        )

    def build_query_request(self, command: str) -> HttpRequest:
        """Build a POST to ``/query`` carrying the command as the ``q`` parameter."""
        return HttpRequest(
            url=self.query_url,
            method="POST",
            params={"q": command},
            headers=merge_headers(self._common_headers(), self.config.headers),
        )


__all__ = ["LINE_PROTOCOL_CONTENT_TYPE", "QUERY_ENDPOINT", "RequestBuilder", "WRITE_ENDPOINT"]
