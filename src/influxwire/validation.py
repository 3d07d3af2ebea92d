# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Construction-time validation of endpoint config and default write params."""

from __future__ import annotations

from .config import Consistency, EndpointConfig, Precision, WriteParams
from .errors import ConfigError
from .http.url import parse_absolute_url

ALLOWED_SCHEMES = frozenset({"http", "https"})


def validate_config(config: EndpointConfig, defaults: WriteParams) -> None:
    """Raise ConfigError unless the client can be built from these inputs. No network I/O."""
    if not config.url or not config.url.strip():
        raise ConfigError("URL must not be empty")

    try:
        parts = parse_absolute_url(config.url)
    except ValueError as exc:
        raise ConfigError(f"error parsing URL [{config.url}]: {exc}") from exc

    if parts.scheme not in ALLOWED_SCHEMES:
        raise ConfigError(f"unsupported URL scheme {parts.scheme!r} in [{config.url}], expected http or https")

    if not defaults.database:
        raise ConfigError("database name must not be empty")

    if defaults.precision:
        try:
            Precision.parse(defaults.precision)
        except ValueError as exc:
            raise ConfigError(f"invalid precision {defaults.precision!r}") from exc

    if defaults.consistency:
        try:
            Consistency.parse(defaults.consistency)
        except ValueError as exc:
            raise ConfigError(f"invalid consistency level {defaults.consistency!r}") from exc

    if config.timeout is not None and config.timeout < 0:
        raise ConfigError(f"timeout must not be negative, got {config.timeout}")

    if config.proxy:
        try:
            parse_absolute_url(config.proxy)
        except ValueError as exc:
            raise ConfigError(f"error parsing proxy URL [{config.proxy}]: {exc}") from exc


__all__ = ["ALLOWED_SCHEMES", "validate_config"]
