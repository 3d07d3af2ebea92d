# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration models and environment loaders for influxwire."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .version import __version__

DEFAULT_USER_AGENT = f"influxwire/{__version__}"
DEFAULT_TIMEOUT = 5.0
DEFAULT_MAX_BODY_BYTES = 1024 * 1024


class Precision(str, Enum):
    """Timestamp granularity the server assumes for a write payload."""

    NANOSECOND = "ns"
    MICROSECOND = "u"
    MILLISECOND = "ms"
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"

    @classmethod
    def parse(cls, value: Precision | str) -> Precision:
        if isinstance(value, cls):
            return value
        raw = str(value).strip().lower()
        raw = _PRECISION_ALIASES.get(raw, raw)
        return cls(raw)


_PRECISION_ALIASES = {
    "n": "ns",
    "nanosecond": "ns",
    "us": "u",
    "µ": "u",
    "µs": "u",
    "microsecond": "u",
    "millisecond": "ms",
    "second": "s",
    "minute": "m",
    "hour": "h",
}


class Consistency(str, Enum):
    """Replication acknowledgement required before a write is reported done."""

    ONE = "one"
    ANY = "any"
    ALL = "all"
    QUORUM = "quorum"

    @classmethod
    def parse(cls, value: Consistency | str) -> Consistency:
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class EndpointConfig:
    """Where and how to reach the remote database. Immutable once built."""

    url: str = ""
    username: str | None = None
    password: str | None = None
    user_agent: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=dict)
    proxy: str | None = None
    verify_ssl: bool = True
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))

    @property
    def effective_user_agent(self) -> str:
        return self.user_agent or DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> EndpointConfig:
        """Create an endpoint config from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("INFLUXWIRE_HTTP_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)
        if max_body_bytes <= 0:
            max_body_bytes = DEFAULT_MAX_BODY_BYTES
        return cls(
            url=os.getenv("INFLUXWIRE_URL", ""),
            username=_optional_env("INFLUXWIRE_USERNAME"),
            password=os.getenv("INFLUXWIRE_PASSWORD"),
            user_agent=_optional_env("INFLUXWIRE_USER_AGENT"),
            timeout=_float_env("INFLUXWIRE_HTTP_TIMEOUT", DEFAULT_TIMEOUT),
            proxy=_optional_env("INFLUXWIRE_HTTP_PROXY"),
            verify_ssl=_bool_env("INFLUXWIRE_HTTP_VERIFY_SSL", True),
            max_body_bytes=max_body_bytes,
        )


@dataclass(frozen=True)
class WriteParams:
    """
    Routing parameters for a write.

    The same shape serves as client defaults, per-call overrides and the
    resolved parameters of a single call. Empty strings and None mean unset.
    """

    database: str = ""
    retention_policy: str = ""
    precision: Precision | str | None = None
    consistency: Consistency | str | None = None

    @classmethod
    def from_env(cls) -> WriteParams:
        return cls(
            database=os.getenv("INFLUXWIRE_DATABASE", ""),
            retention_policy=os.getenv("INFLUXWIRE_RETENTION_POLICY", ""),
            precision=_optional_env("INFLUXWIRE_PRECISION"),
            consistency=_optional_env("INFLUXWIRE_CONSISTENCY"),
        )


def load_endpoint_config() -> EndpointConfig:
    """Load the endpoint config from environment with sensible defaults."""
    return EndpointConfig.from_env()


def load_write_params() -> WriteParams:
    """Load default write parameters from environment."""
    return WriteParams.from_env()


__all__ = [
    "Consistency",
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "EndpointConfig",
    "Precision",
    "WriteParams",
    "load_endpoint_config",
    "load_write_params",
]
