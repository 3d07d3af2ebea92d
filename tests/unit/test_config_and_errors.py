# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx
import pytest

from influxwire import config
from influxwire.config import (
    DEFAULT_USER_AGENT,
    Consistency,
    EndpointConfig,
    Precision,
    WriteParams,
)
from influxwire.errors import (
    ApplicationError,
    ClientClosedError,
    ErrorCategory,
    TransportError,
    categorize_exception,
    category_from_error_type,
    error_category_to_reason,
)


def test_endpoint_config_env_overrides(monkeypatch):
    monkeypatch.setenv("INFLUXWIRE_URL", "http://db.local:8086")
    monkeypatch.setenv("INFLUXWIRE_USERNAME", "writer")
    monkeypatch.setenv("INFLUXWIRE_PASSWORD", "secret")
    monkeypatch.setenv("INFLUXWIRE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("INFLUXWIRE_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("INFLUXWIRE_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("INFLUXWIRE_HTTP_PROXY", "http://proxy.local:3128")
    monkeypatch.setenv("INFLUXWIRE_HTTP_MAX_BODY_BYTES", "2048")

    cfg = config.load_endpoint_config()

    assert cfg.url == "http://db.local:8086"
    assert cfg.username == "writer"
    assert cfg.password == "secret"
    assert cfg.effective_user_agent == "CustomAgent/1.0"
    assert cfg.timeout == 2.5
    assert cfg.verify_ssl is False
    assert cfg.proxy == "http://proxy.local:3128"
    assert cfg.max_body_bytes == 2048


def test_endpoint_config_invalid_env_falls_back(monkeypatch):
    monkeypatch.setenv("INFLUXWIRE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("INFLUXWIRE_HTTP_MAX_BODY_BYTES", "-5")
    monkeypatch.setenv("INFLUXWIRE_USERNAME", "   ")
    monkeypatch.delenv("INFLUXWIRE_USER_AGENT", raising=False)

    cfg = config.load_endpoint_config()

    assert cfg.timeout == config.DEFAULT_TIMEOUT
    assert cfg.max_body_bytes == config.DEFAULT_MAX_BODY_BYTES
    assert cfg.username is None
    assert cfg.effective_user_agent == DEFAULT_USER_AGENT


def test_write_params_env(monkeypatch):
    monkeypatch.setenv("INFLUXWIRE_DATABASE", "telegraf")
    monkeypatch.setenv("INFLUXWIRE_RETENTION_POLICY", "autogen")
    monkeypatch.setenv("INFLUXWIRE_PRECISION", "ms")
    monkeypatch.delenv("INFLUXWIRE_CONSISTENCY", raising=False)

    params = config.load_write_params()

    assert params == WriteParams(database="telegraf", retention_policy="autogen", precision="ms", consistency=None)


def test_endpoint_config_is_immutable():
    cfg = EndpointConfig(url="http://localhost:8086", headers={"X-Tenant": "a"})
    with pytest.raises(AttributeError):
        cfg.url = "http://elsewhere"  # type: ignore[misc]
    with pytest.raises(TypeError):
        cfg.headers["X-Tenant"] = "b"  # type: ignore[index]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ns", Precision.NANOSECOND),
        ("n", Precision.NANOSECOND),
        ("u", Precision.MICROSECOND),
        ("us", Precision.MICROSECOND),
        ("MS", Precision.MILLISECOND),
        (" s ", Precision.SECOND),
        ("minute", Precision.MINUTE),
        (Precision.HOUR, Precision.HOUR),
    ],
)
def test_precision_parse_accepts_aliases(raw, expected):
    assert Precision.parse(raw) is expected


def test_precision_and_consistency_reject_unknown_values():
    with pytest.raises(ValueError):
        Precision.parse("fortnight")
    with pytest.raises(ValueError):
        Consistency.parse("most")
    assert Consistency.parse("QUORUM") is Consistency.QUORUM


def test_categorize_exception_maps_httpx_and_socket_errors():
    assert categorize_exception(httpx.ReadTimeout("slow")) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.RemoteProtocolError("garbage")) is ErrorCategory.PROTOCOL_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("no such host")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(RuntimeError("boom")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_looks_through_wrapped_dns_failure():
    try:
        try:
            raise socket.gaierror("Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("connect failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR


def test_category_from_error_type_and_reason():
    assert category_from_error_type("ConnectTimeout") is ErrorCategory.TIMEOUT
    assert category_from_error_type("TIMEOUT") is ErrorCategory.TIMEOUT
    assert category_from_error_type("SomethingElse") is ErrorCategory.UNKNOWN_ERROR
    assert category_from_error_type(None) is ErrorCategory.UNKNOWN_ERROR
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failure"
    assert error_category_to_reason(None) == ""


def test_error_types_carry_details():
    app = ApplicationError("database not found: \"nope\"", status_code=404, body="{}")
    assert app.message == 'database not found: "nope"'
    assert "404" in str(app)

    closed = ClientClosedError()
    assert isinstance(closed, TransportError)
    assert closed.category is ErrorCategory.CONNECTION_ERROR


def test_setup_logging_quiets_transport_loggers_unless_debugging(monkeypatch):
    import logging

    from influxwire.log import setup_logging

    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)

    setup_logging("info")
    assert logging.getLogger("httpx").level == logging.WARNING

    setup_logging("debug")
    assert logging.getLogger("httpcore").level == logging.DEBUG

    monkeypatch.setenv("INFLUXWIRE_LOG_LEVEL", "error")
    setup_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
