# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural conversion from the YAML value tree to the CBOR value tree.

Numbers are tiered: a value that fits an unsigned 64-bit integer is tried
first, then a signed 64-bit integer, then a float. Float-typed input never
becomes an integer, so ``2.0`` stays a float. Mapping keys go through exactly
the same rules as values, key before value, and the first failure anywhere
aborts the whole conversion.
"""

from __future__ import annotations

from typing import Final, assert_never

from ..errors import ValueConversionError
from .source import (
    YamlBool,
    YamlMapping,
    YamlNull,
    YamlNumber,
    YamlSequence,
    YamlString,
    YamlValue,
    compose_yaml,
    from_python,
)
from .wire import CborArray, CborBool, CborFloat, CborInteger, CborMap, CborNull, CborText, CborValue

U64_MAX: Final[int] = 2**64 - 1
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

INVALID_NUMBER_MESSAGE: Final[str] = "Invalid number encountered"


def _as_u64(number: int | float) -> int | None:
    if isinstance(number, int) and 0 <= number <= U64_MAX:
        return number
    return None


def _as_i64(number: int | float) -> int | None:
    if isinstance(number, int) and I64_MIN <= number <= I64_MAX:
        return number
    return None


def _as_f64(number: int | float) -> float | None:
    if isinstance(number, float):
        return number
    try:
        return float(number)
    except OverflowError:
        return None


def _convert_number(number: int | float) -> CborValue:
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise ValueConversionError(INVALID_NUMBER_MESSAGE, value=number)
    if (unsigned := _as_u64(number)) is not None:
        return CborInteger(unsigned)
    if (signed := _as_i64(number)) is not None:
        return CborInteger(signed)
    if (real := _as_f64(number)) is not None:
        return CborFloat(real)
    raise ValueConversionError(INVALID_NUMBER_MESSAGE, value=number)


def yaml_to_cbor(value: YamlValue) -> CborValue:
    """Convert a YAML value tree into the equivalent CBOR value tree.

    Recursion depth follows the input; guard untrusted input before calling.

    Args:
        value: Root of the YAML value tree.

    Returns:
        CborValue: Freshly built CBOR tree.

    Raises:
        ValueConversionError: If a number fits no integer or float representation.
    """

    match value:
        case YamlNull():
            return CborNull()
        case YamlBool(value=flag):
            return CborBool(flag)
        case YamlNumber(value=number):
            return _convert_number(number)
        case YamlString(value=text):
            return CborText(text)
        case YamlSequence(items=items):
            return CborArray(tuple(yaml_to_cbor(item) for item in items))
        case YamlMapping(entries=entries):
            return CborMap(tuple((yaml_to_cbor(key), yaml_to_cbor(item)) for key, item in entries))
        case _:
            assert_never(value)


convert = yaml_to_cbor


def python_to_cbor(value: object) -> CborValue:
    """Convert plain Python data, such as a merged configuration subtree."""

    return yaml_to_cbor(from_python(value))


def yaml_text_to_cbor(text: str) -> CborValue:
    """Parse a YAML document and convert it."""

    return yaml_to_cbor(compose_yaml(text))


__all__ = [
    "I64_MAX",
    "I64_MIN",
    "INVALID_NUMBER_MESSAGE",
    "U64_MAX",
    "convert",
    "python_to_cbor",
    "yaml_text_to_cbor",
    "yaml_to_cbor",
]
