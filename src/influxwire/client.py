# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client handle for the /write and /query endpoints."""

from __future__ import annotations

import logging
import threading

from .builder import RequestBuilder
from .config import EndpointConfig, WriteParams
from .errors import ClientClosedError, InfluxWireError
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpRequest, HttpResponse
from .params import resolve_write_params
from .payload import BufferedPayload, Payload, Readable, StreamPayload
from .response import raise_for_response
from .validation import validate_config

logger = logging.getLogger(__name__)


class InfluxHTTPClient:
    """
    Submit line-protocol payloads and administrative queries over HTTP.

    The constructor validates its inputs and raises ConfigError before any
    transport is created, so an invalid client is never handed back. Calls are
    blocking and keep no per-call state on the instance; concurrent calls are
    safe as long as the transport is. No call is ever retried here.
    """

    def __init__(
        self,
        config: EndpointConfig,
        defaults: WriteParams,
        *,
        http_client: HttpClient | None = None,
    ):
        validate_config(config, defaults)
        self.config = config
        self.defaults = defaults
        self._builder = RequestBuilder(config)
        self._http_client = http_client or create_default_http_client(config)
        self._closed = False
        self._close_lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, payload: bytes) -> int:
        """Write a buffered payload with the default parameters; return the bytes sent."""
        return self._write(BufferedPayload(payload), None)

    def write_with_params(self, payload: bytes, params: WriteParams) -> int:
        """Write a buffered payload, overriding the default parameters field by field."""
        return self._write(BufferedPayload(payload), params)

    def write_stream(self, reader: Readable, length: int) -> int:
        """Stream exactly ``length`` bytes from ``reader``; the body is never held in memory."""
        return self._write(StreamPayload(reader, length), None)

    def write_stream_with_params(self, reader: Readable, length: int, params: WriteParams) -> int:
        return self._write(StreamPayload(reader, length), params)

    def query(self, command: str) -> None:
        """Run a command against /query. Only success or failure is reported, rows are not parsed."""
        self._ensure_open()
        request = self._builder.build_query_request(command)
        logger.debug("POST %s q=%r", request.url, command)
        self._send(request)

    def _write(self, payload: Payload, override: WriteParams | None) -> int:
        self._ensure_open()
        params = resolve_write_params(self.defaults, override)
        request = self._builder.build_write_request(params, payload)
        logger.debug(
            "POST %s db=%s rp=%s precision=%s length=%d streamed=%s",
            request.url,
            params.database,
            params.retention_policy or "-",
            request.params.get("precision"),
            payload.length,
            request.is_streamed,
        )
        self._send(request)
        return payload.bytes_sent

    def _send(self, request: HttpRequest) -> HttpResponse:
        response = self._http_client.request(request)
        try:
            raise_for_response(response)
        except InfluxWireError as exc:
            logger.debug("%s %s failed: %s", request.method, request.url, exc)
            raise
        return response

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError()

    def close(self) -> None:
        """Release the transport. Safe to call more than once; in-flight calls are not cancelled."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
        close = getattr(self._http_client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> InfluxHTTPClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["InfluxHTTPClient"]
