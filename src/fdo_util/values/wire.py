# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CBOR value tree: the compact model carried on the wire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class CborNull:
    """CBOR ``null``."""


@dataclass(frozen=True, slots=True)
class CborBool:
    value: bool


@dataclass(frozen=True, slots=True)
class CborInteger:
    value: int


@dataclass(frozen=True, slots=True)
class CborFloat:
    value: float


@dataclass(frozen=True, slots=True)
class CborText:
    value: str


@dataclass(frozen=True, slots=True)
class CborBytes:
    value: bytes


@dataclass(frozen=True, slots=True)
class CborArray:
    items: tuple[CborValue, ...] = ()


@dataclass(frozen=True, slots=True)
class CborMap:
    """Ordered CBOR map; keys are full values, not just text."""

    entries: tuple[tuple[CborValue, CborValue], ...] = ()


CborValue: TypeAlias = CborNull | CborBool | CborInteger | CborFloat | CborText | CborBytes | CborArray | CborMap


def to_python(value: CborValue) -> Any:
    """Lower a CBOR value tree to plain Python data for an encoder.

    Arrays become lists and maps become dicts. Array and map keys become
    tuples (maps as tuples of key/value pairs) so they stay hashable.
    """

    match value:
        case CborNull():
            return None
        case CborBool() | CborInteger() | CborFloat() | CborText() | CborBytes():
            return value.value
        case CborArray(items=items):
            return [to_python(item) for item in items]
        case CborMap(entries=entries):
            return {_hashable_key(key): to_python(item) for key, item in entries}
    raise TypeError(f"unsupported CBOR value {value!r}")


def _hashable_key(value: CborValue) -> Any:
    match value:
        case CborArray(items=items):
            return tuple(_hashable_key(item) for item in items)
        case CborMap(entries=entries):
            return tuple((_hashable_key(key), _hashable_key(item)) for key, item in entries)
    return to_python(value)


__all__ = [
    "CborArray",
    "CborBool",
    "CborBytes",
    "CborFloat",
    "CborInteger",
    "CborMap",
    "CborNull",
    "CborText",
    "CborValue",
    "to_python",
]
