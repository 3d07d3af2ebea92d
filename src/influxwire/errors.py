# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class InfluxWireError(Exception):
    """Base class for every error raised by influxwire."""


class ConfigError(InfluxWireError):
    """Construction-time configuration is invalid; no client is created."""


class TransportError(InfluxWireError):
    """The HTTP exchange could not complete (connect, DNS, timeout, malformed response)."""

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
        error_type: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.error_type = error_type


class ClientClosedError(TransportError):
    """Raised when a call is issued on a client whose transport was released."""

    def __init__(self, message: str = "client is closed"):
        super().__init__(message, category=ErrorCategory.CONNECTION_ERROR, error_type=type(self).__name__)


class ApplicationError(InfluxWireError):
    """The server answered with a non-success status."""

    def __init__(self, message: str, *, status_code: int, body: str = ""):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    # httpx wraps ssl and dns failures in ConnectError.
    cause = exc.__cause__ or exc.__context__
    if cause is not None:
        nested = categorize_exception(cause)
        if nested in (ErrorCategory.SSL_ERROR, ErrorCategory.DNS_ERROR):
            return nested

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


_CATEGORY_BY_TYPE_NAME = {
    "ConnectTimeout": ErrorCategory.TIMEOUT,
    "ReadTimeout": ErrorCategory.TIMEOUT,
    "WriteTimeout": ErrorCategory.TIMEOUT,
    "PoolTimeout": ErrorCategory.TIMEOUT,
    "TimeoutException": ErrorCategory.TIMEOUT,
    "ConnectError": ErrorCategory.CONNECTION_ERROR,
    "ReadError": ErrorCategory.CONNECTION_ERROR,
    "WriteError": ErrorCategory.CONNECTION_ERROR,
    "ProxyError": ErrorCategory.CONNECTION_ERROR,
    "RemoteProtocolError": ErrorCategory.PROTOCOL_ERROR,
    "LocalProtocolError": ErrorCategory.PROTOCOL_ERROR,
    "SSLError": ErrorCategory.SSL_ERROR,
    "gaierror": ErrorCategory.DNS_ERROR,
}


def category_from_error_type(error_type: str | None) -> ErrorCategory:
    """Best-effort category for responses that only carry the exception class name."""
    if not error_type:
        return ErrorCategory.UNKNOWN_ERROR
    try:
        return ErrorCategory(error_type)
    except ValueError:
        return _CATEGORY_BY_TYPE_NAME.get(error_type, ErrorCategory.UNKNOWN_ERROR)


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Request timed out",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.PROTOCOL_ERROR: "Malformed HTTP exchange",
        ErrorCategory.UNKNOWN_ERROR: "Network error",
        None: "",
    }
    return mapping.get(category, "Request failed due to network error")


__all__ = [
    "ApplicationError",
    "ClientClosedError",
    "ConfigError",
    "ErrorCategory",
    "InfluxWireError",
    "TransportError",
    "categorize_exception",
    "category_from_error_type",
    "error_category_to_reason",
]
