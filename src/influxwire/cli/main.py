# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""influxwire CLI."""

from __future__ import annotations

import argparse
import logging
import os
import stat
import sys
from dataclasses import replace
from typing import BinaryIO

from ..client import InfluxHTTPClient
from ..config import EndpointConfig, WriteParams, load_endpoint_config, load_write_params
from ..errors import ApplicationError, ConfigError, TransportError, error_category_to_reason
from ..log import setup_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

logger = logging.getLogger(__name__)


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--url", help="Base URL of the database (default: $INFLUXWIRE_URL)")
    common.add_argument("--database", "-d", help="Target database (default: $INFLUXWIRE_DATABASE)")
    common.add_argument("--retention-policy", help="Retention policy for writes")
    common.add_argument("--precision", help="Timestamp precision: ns, u, ms, s, m or h")
    common.add_argument("--consistency", help="Write consistency: one, any, all or quorum")
    common.add_argument("--username", "-u", help="Basic auth user")
    common.add_argument("--password", "-p", help="Basic auth password (prefer $INFLUXWIRE_PASSWORD)")
    common.add_argument("--user-agent", help="User-Agent header value")
    common.add_argument("--timeout", type=float, help="Overall request timeout in seconds")
    common.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed servers)",
    )
    common.add_argument("--log-level", help="Logging level (default: $INFLUXWIRE_LOG_LEVEL or WARNING)")
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(description="Send line protocol and admin queries to an InfluxDB-compatible HTTP API")
    sub = parser.add_subparsers(dest="command", required=True)

    write = sub.add_parser("write", parents=[common], help="Write line protocol from a file or stdin")
    write.add_argument("file", nargs="?", default="-", help="Line-protocol file ('-' for stdin, the default)")

    query = sub.add_parser("query", parents=[common], help="Run an administrative query")
    query.add_argument("statement", help="Query text, e.g. 'CREATE DATABASE telegraf'")
    return parser


def _config_from_args(args: argparse.Namespace) -> tuple[EndpointConfig, WriteParams]:
    config = load_endpoint_config()
    overrides: dict[str, object] = {}
    for name in ("url", "username", "password", "user_agent", "timeout"):
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    if args.ignore_ssl_errors:
        overrides["verify_ssl"] = False
    if overrides:
        config = replace(config, **overrides)

    defaults = load_write_params()
    param_overrides = {
        name: value
        for name, value in (
            ("database", args.database),
            ("retention_policy", args.retention_policy),
            ("precision", args.precision),
            ("consistency", args.consistency),
        )
        if value
    }
    if param_overrides:
        defaults = replace(defaults, **param_overrides)
    return config, defaults


def _write_file(client: InfluxHTTPClient, path: str) -> int:
    if path == "-":
        return client.write(sys.stdin.buffer.read())
    with open(path, "rb") as handle:
        return _write_handle(client, handle)


def _write_handle(client: InfluxHTTPClient, handle: BinaryIO) -> int:
    info = os.fstat(handle.fileno())
    # Pipes and devices have no usable size; buffer them instead of streaming.
    if not stat.S_ISREG(info.st_mode):
        return client.write(handle.read())
    return client.write_stream(handle, info.st_size)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config, defaults = _config_from_args(args)
        client = InfluxHTTPClient(config, defaults)
    except ConfigError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    with client:
        try:
            if args.command == "write":
                sent = _write_file(client, args.file)
                print(f"wrote {sent} bytes to {defaults.database}")
            else:
                client.query(args.statement)
                print("ok")
        except ApplicationError as exc:
            print(f"server error: {exc}", file=sys.stderr)
            return EXIT_FAILURE
        except TransportError as exc:
            reason = error_category_to_reason(exc.category)
            print(f"transport error ({reason}): {exc}", file=sys.stderr)
            return EXIT_FAILURE
        except ConfigError as exc:
            print(f"configuration error: {exc}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        except OSError as exc:
            logger.debug("reading %s failed", args.file, exc_info=True)
            print(f"cannot read {args.file}: {exc}", file=sys.stderr)
            return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
