# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import itertools

import pytest

from influxwire.config import Consistency, Precision, WriteParams
from influxwire.errors import ConfigError
from influxwire.params import resolve_write_params

FIELDS = ("database", "retention_policy", "precision", "consistency")
DEFAULT_VALUES = {"database": "test", "retention_policy": "policy", "precision": "s", "consistency": "one"}
OVERRIDE_VALUES = {"database": "override", "retention_policy": "short", "precision": "ms", "consistency": "all"}


def _normalized(field, value):
    if field == "precision":
        return Precision.parse(value) if value else Precision.NANOSECOND
    if field == "consistency":
        return Consistency.parse(value) if value else None
    return value or ""


@pytest.mark.parametrize("default_mask", list(itertools.product([False, True], repeat=4)))
def test_each_field_resolves_independently(default_mask):
    defaults = WriteParams(**{f: DEFAULT_VALUES[f] for f, on in zip(FIELDS, default_mask) if on})
    for override_mask in itertools.product([False, True], repeat=4):
        override = WriteParams(**{f: OVERRIDE_VALUES[f] for f, on in zip(FIELDS, override_mask) if on})
        effective = resolve_write_params(defaults, override)
        for field, from_default, from_override in zip(FIELDS, default_mask, override_mask):
            if from_override:
                expected = OVERRIDE_VALUES[field]
            elif from_default:
                expected = DEFAULT_VALUES[field]
            else:
                expected = None
            assert getattr(effective, field) == _normalized(field, expected), (field, default_mask, override_mask)


def test_no_override_returns_defaults_with_enums():
    defaults = WriteParams(database="test", retention_policy="policy", precision="ns", consistency="all")
    effective = resolve_write_params(defaults)
    assert effective == WriteParams(
        database="test",
        retention_policy="policy",
        precision=Precision.NANOSECOND,
        consistency=Consistency.ALL,
    )


def test_precision_defaults_to_nanoseconds():
    effective = resolve_write_params(WriteParams(database="test"), WriteParams(database="other"))
    assert effective.precision is Precision.NANOSECOND
    assert effective.consistency is None
    assert effective.retention_policy == ""


def test_resolve_does_not_mutate_inputs():
    defaults = WriteParams(database="test", precision="s")
    override = WriteParams(precision="h")
    resolve_write_params(defaults, override)
    assert defaults == WriteParams(database="test", precision="s")
    assert override == WriteParams(precision="h")


def test_invalid_override_values_raise_config_error():
    defaults = WriteParams(database="test")
    with pytest.raises(ConfigError):
        resolve_write_params(defaults, WriteParams(precision="decade"))
    with pytest.raises(ConfigError):
        resolve_write_params(defaults, WriteParams(consistency="some"))
