# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from fdo_util.values import (
    CborArray,
    CborBool,
    CborBytes,
    CborFloat,
    CborInteger,
    CborMap,
    CborNull,
    CborText,
    to_python,
)


def test_to_python_scalars() -> None:
    assert to_python(CborNull()) is None
    assert to_python(CborBool(False)) is False
    assert to_python(CborInteger(-5)) == -5
    assert to_python(CborFloat(1.5)) == 1.5
    assert to_python(CborText("x")) == "x"
    assert to_python(CborBytes(b"\x00\x01")) == b"\x00\x01"


def test_to_python_containers_use_hashable_keys() -> None:
    value = CborMap(
        (
            (CborArray((CborInteger(1), CborInteger(2))), CborText("x")),
            (CborMap(((CborText("k"), CborNull()),)), CborArray((CborBool(True),))),
            (CborText("plain"), CborInteger(3)),
        )
    )

    assert to_python(value) == {
        (1, 2): "x",
        (("k", None),): [True],
        "plain": 3,
    }


def test_value_trees_compare_structurally() -> None:
    assert CborArray((CborInteger(1),)) == CborArray((CborInteger(1),))
    assert CborInteger(1) != CborFloat(1.0)
