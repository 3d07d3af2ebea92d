# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import basic_auth_header, header_value, merge_headers
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import endpoint_url, parse_absolute_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "basic_auth_header",
    "create_default_http_client",
    "endpoint_url",
    "header_value",
    "merge_headers",
    "parse_absolute_url",
]
