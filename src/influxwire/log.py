# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for influxwire."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"

# httpx and httpcore log every request at INFO; only let them through when debugging.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or os.getenv("INFLUXWIRE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    transport_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["setup_logging"]
