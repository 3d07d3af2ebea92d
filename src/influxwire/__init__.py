# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
influxwire package entrypoint.

An HTTP client for the line-protocol ``/write`` and administrative ``/query``
endpoints of an InfluxDB 1.x compatible time-series database. HTTP behavior is
abstracted behind an injectable transport interface, and configuration is
modeled with frozen dataclasses.
"""

from .client import InfluxHTTPClient
from .config import (
    Consistency,
    EndpointConfig,
    Precision,
    WriteParams,
    load_endpoint_config,
    load_write_params,
)
from .errors import (
    ApplicationError,
    ClientClosedError,
    ConfigError,
    ErrorCategory,
    InfluxWireError,
    TransportError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .params import resolve_write_params
from .version import __version__

__all__ = [
    "ApplicationError",
    "ClientClosedError",
    "ConfigError",
    "Consistency",
    "EndpointConfig",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "InfluxHTTPClient",
    "InfluxWireError",
    "Precision",
    "StubHttpClient",
    "TransportError",
    "WriteParams",
    "create_default_http_client",
    "load_endpoint_config",
    "load_write_params",
    "resolve_write_params",
    "setup_logging",
    "__version__",
]
