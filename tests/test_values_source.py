# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for building YAML value trees."""

from __future__ import annotations

import datetime as dt
import textwrap

import pytest
import yaml

from fdo_util.errors import ValueConversionError
from fdo_util.values import (
    YamlBool,
    YamlMapping,
    YamlNull,
    YamlNumber,
    YamlSequence,
    YamlString,
    compose_yaml,
    from_python,
    from_yaml_node,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("~", YamlNull()),
        ("null", YamlNull()),
        ("true", YamlBool(True)),
        ("false", YamlBool(False)),
        ("42", YamlNumber(42)),
        ("-7", YamlNumber(-7)),
        ("0x1F", YamlNumber(31)),
        ("3.14", YamlNumber(3.14)),
        ("2.0", YamlNumber(2.0)),
        ("hello", YamlString("hello")),
        ("'42'", YamlString("42")),
        ("2024-01-02", YamlString("2024-01-02")),
    ],
)
def test_compose_scalars(text: str, expected: object) -> None:
    assert compose_yaml(text) == expected


def test_compose_float_payload_stays_float() -> None:
    value = compose_yaml("2.0")

    assert isinstance(value, YamlNumber)
    assert isinstance(value.value, float)


def test_compose_empty_document_is_null() -> None:
    assert compose_yaml("") == YamlNull()
    assert from_yaml_node(None) == YamlNull()


def test_compose_sequence_and_mapping_preserve_order() -> None:
    document = textwrap.dedent(
        """
        zeta: 1
        alpha: [1, a, ~]
        """
    )

    assert compose_yaml(document) == YamlMapping(
        (
            (YamlString("zeta"), YamlNumber(1)),
            (
                YamlString("alpha"),
                YamlSequence((YamlNumber(1), YamlString("a"), YamlNull())),
            ),
        )
    )


def test_compose_accepts_complex_mapping_keys() -> None:
    value = compose_yaml("? [1, 2]\n: x\n")

    assert value == YamlMapping(((YamlSequence((YamlNumber(1), YamlNumber(2))), YamlString("x")),))


def test_compose_rejects_invalid_yaml() -> None:
    with pytest.raises(yaml.YAMLError):
        compose_yaml("a: b: c")


def test_from_python_builds_tree() -> None:
    value = from_python({"name": "owner", "ports": (8080, 8081), "tls": None, (1, 2): True, "ratio": 0.5})

    assert value == YamlMapping(
        (
            (YamlString("name"), YamlString("owner")),
            (YamlString("ports"), YamlSequence((YamlNumber(8080), YamlNumber(8081)))),
            (YamlString("tls"), YamlNull()),
            (YamlSequence((YamlNumber(1), YamlNumber(2))), YamlBool(True)),
            (YamlString("ratio"), YamlNumber(0.5)),
        )
    )


def test_from_python_keeps_bool_distinct_from_number() -> None:
    assert from_python(True) == YamlBool(True)
    assert from_python(1) == YamlNumber(1)


def test_from_python_renders_dates_as_iso_text() -> None:
    value = from_python({"day": dt.date(2024, 1, 2), "at": dt.datetime(2024, 1, 2, 3, 4, 5), "time": dt.time(7, 30)})

    assert value == YamlMapping(
        (
            (YamlString("day"), YamlString("2024-01-02")),
            (YamlString("at"), YamlString("2024-01-02T03:04:05")),
            (YamlString("time"), YamlString("07:30:00")),
        )
    )


def test_from_python_rejects_unsupported_types() -> None:
    with pytest.raises(ValueConversionError, match="unsupported value type set"):
        from_python({"tags": {"a", "b"}})


def test_compose_repeated_keys_keep_last_value() -> None:
    value = compose_yaml("a: 1\nb: 2\na: 3\n")

    assert value == YamlMapping(
        (
            (YamlString("a"), YamlNumber(3)),
            (YamlString("b"), YamlNumber(2)),
        )
    )


def test_compose_numerically_equal_keys_of_different_types_stay_distinct() -> None:
    value = compose_yaml("1: int\n1.0: float\ntrue: bool\n")

    assert isinstance(value, YamlMapping)
    assert len(value.entries) == 3
    assert isinstance(value.entries[1][0].value, float)


def test_compose_uses_yaml_1_1_booleans() -> None:
    assert compose_yaml("[yes, off, 1e3]") == YamlSequence((YamlBool(True), YamlBool(False), YamlString("1e3")))
