# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Classify transport responses into success, application error or transport error."""

from __future__ import annotations

import json
from enum import Enum

from .errors import ApplicationError, ErrorCategory, TransportError, category_from_error_type
from .http.headers import header_value
from .http.models import HttpResponse

SUCCESS_STATUSES = frozenset({200, 204})
ERROR_HEADER = "X-Influxdb-Error"


class ResponseOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    APPLICATION_ERROR = "APPLICATION_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


def classify_response(response: HttpResponse) -> ResponseOutcome:
    if not response.ok or response.status_code is None:
        return ResponseOutcome.TRANSPORT_ERROR
    if response.status_code in SUCCESS_STATUSES:
        return ResponseOutcome.SUCCESS
    return ResponseOutcome.APPLICATION_ERROR


def extract_error_message(response: HttpResponse) -> str | None:
    """
    Pull the server's error message out of a response, if it has one.

    The JSON envelope's ``error`` field is preferred; the server also mirrors
    it in the ``X-Influxdb-Error`` header, which covers non-JSON bodies.
    """
    text = (response.text or "").strip()
    if text:
        try:
            envelope = json.loads(text)
        except ValueError:
            envelope = None
        if isinstance(envelope, dict):
            message = envelope.get("error")
            if isinstance(message, str) and message:
                return message
    return header_value(response.headers, ERROR_HEADER) or None


def _transport_category(response: HttpResponse) -> ErrorCategory:
    raw = response.meta.get("error_category")
    if raw:
        try:
            return ErrorCategory(raw)
        except ValueError:
            pass
    return category_from_error_type(response.error_type)


def raise_for_response(response: HttpResponse) -> None:
    """Return when the response is a success, raise TransportError or ApplicationError otherwise."""
    outcome = classify_response(response)
    if outcome is ResponseOutcome.SUCCESS:
        return

    if outcome is ResponseOutcome.TRANSPORT_ERROR:
        raise TransportError(
            response.error_message or "HTTP exchange failed",
            category=_transport_category(response),
            error_type=response.error_type,
        )

    status = int(response.status_code or 0)
    message = extract_error_message(response) or f"unexpected status {status}"
    raise ApplicationError(message, status_code=status, body=response.body_snippet)


__all__ = [
    "ERROR_HEADER",
    "ResponseOutcome",
    "SUCCESS_STATUSES",
    "classify_response",
    "extract_error_message",
    "raise_for_response",
]
