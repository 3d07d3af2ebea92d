# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Merge client-default write parameters with per-call overrides."""

from __future__ import annotations

from .config import Consistency, Precision, WriteParams
from .errors import ConfigError


def _pick(override: object, default: object) -> object:
    return override if override else default


def resolve_write_params(defaults: WriteParams, override: WriteParams | None = None) -> WriteParams:
    """
    Return the effective parameters for one write call.

    Each field is resolved on its own: a set override field wins, an unset one
    falls back to the default. Precision falls back to nanoseconds when neither
    side sets it. Enumerated fields come back as their enum members.
    """
    override = override or WriteParams()

    precision_raw = _pick(override.precision, defaults.precision) or Precision.NANOSECOND
    try:
        precision = Precision.parse(precision_raw)
    except ValueError as exc:
        raise ConfigError(f"invalid precision {precision_raw!r}") from exc

    consistency: Consistency | None = None
    consistency_raw = _pick(override.consistency, defaults.consistency)
    if consistency_raw:
        try:
            consistency = Consistency.parse(consistency_raw)
        except ValueError as exc:
            raise ConfigError(f"invalid consistency level {consistency_raw!r}") from exc

    return WriteParams(
        database=str(_pick(override.database, defaults.database) or ""),
        retention_policy=str(_pick(override.retention_policy, defaults.retention_policy) or ""),
        precision=precision,
        consistency=consistency,
    )


__all__ = ["resolve_write_params"]
