# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""YAML value tree: the loosely typed model authored by humans.

Numbers carry no integer/float tag of their own; the payload's Python type is
the only distinction. Mapping keys are arbitrary values, so documents such as
``[1, 2]: x`` are representable here even though :func:`yaml.safe_load`
rejects them.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, TypeAlias

import yaml
from yaml.constructor import SafeConstructor
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from ..errors import ValueConversionError

_NULL_TAG: Final[str] = "tag:yaml.org,2002:null"
_BOOL_TAG: Final[str] = "tag:yaml.org,2002:bool"
_INT_TAG: Final[str] = "tag:yaml.org,2002:int"
_FLOAT_TAG: Final[str] = "tag:yaml.org,2002:float"


@dataclass(frozen=True, slots=True)
class YamlNull:
    """YAML ``null``."""


@dataclass(frozen=True, slots=True)
class YamlBool:
    value: bool


@dataclass(frozen=True, slots=True)
class YamlNumber:
    value: int | float


@dataclass(frozen=True, slots=True)
class YamlString:
    value: str


@dataclass(frozen=True, slots=True)
class YamlSequence:
    items: tuple[YamlValue, ...] = ()


@dataclass(frozen=True, slots=True)
class YamlMapping:
    """Ordered mapping whose keys are themselves YAML values."""

    entries: tuple[tuple[YamlValue, YamlValue], ...] = ()


YamlValue: TypeAlias = YamlNull | YamlBool | YamlNumber | YamlString | YamlSequence | YamlMapping


class _ScalarResolver(SafeConstructor):
    """Resolve tagged scalar nodes with PyYAML's safe constructors."""

    def resolve(self, node: ScalarNode) -> YamlValue:
        if node.tag == _NULL_TAG:
            return YamlNull()
        if node.tag == _BOOL_TAG:
            return YamlBool(self.construct_yaml_bool(node))
        if node.tag == _INT_TAG:
            return YamlNumber(self.construct_yaml_int(node))
        if node.tag == _FLOAT_TAG:
            return YamlNumber(self.construct_yaml_float(node))
        # Timestamps, binary and custom tags stay as their source text.
        return YamlString(node.value)


def from_yaml_node(node: Node | None) -> YamlValue:
    """Build a YAML value tree from a composed PyYAML node graph.

    Args:
        node: Root node returned by :func:`yaml.compose`, or ``None`` for an
            empty document.

    Returns:
        YamlValue: Equivalent value tree.
    """

    return _from_node(node, _ScalarResolver())


def _from_node(node: Node | None, resolver: _ScalarResolver) -> YamlValue:
    if node is None:
        return YamlNull()
    if isinstance(node, ScalarNode):
        return resolver.resolve(node)
    if isinstance(node, SequenceNode):
        return YamlSequence(tuple(_from_node(item, resolver) for item in node.value))
    if isinstance(node, MappingNode):
        # Repeated keys keep their first position and take the last value.
        entries: dict[object, tuple[YamlValue, YamlValue]] = {}
        for key_node, value_node in node.value:
            key = _from_node(key_node, resolver)
            entries[_key_identity(key)] = (key, _from_node(value_node, resolver))
        return YamlMapping(tuple(entries.values()))
    raise ValueConversionError("unsupported YAML node", value=node)


def _key_identity(value: YamlValue) -> object:
    """Return a hashable identity that keeps ``1`` and ``1.0`` apart."""

    match value:
        case YamlNumber(number):
            return (YamlNumber, type(number), number)
        case YamlSequence(items):
            return (YamlSequence, tuple(_key_identity(item) for item in items))
        case YamlMapping(entries):
            return (YamlMapping, tuple((_key_identity(key), _key_identity(item)) for key, item in entries))
        case _:
            return value


def compose_yaml(text: str) -> YamlValue:
    """Parse a single YAML document into a value tree.

    Scalars resolve with PyYAML's YAML 1.1 rules: ``yes``/``no``/``on``/``off``
    are booleans and ``1e3`` (no decimal point) is a string. A YAML 1.2 parser
    would read both differently. Repeated mapping keys collapse to one entry
    holding the last value.

    Raises:
        yaml.YAMLError: If ``text`` is not valid YAML.
    """

    return from_yaml_node(yaml.compose(text, Loader=yaml.SafeLoader))


def from_python(value: object) -> YamlValue:
    """Lift plain Python data, such as a merged configuration subtree, into a value tree.

    Dates and times (TOML documents produce them) become ISO 8601 text.

    Raises:
        ValueConversionError: If ``value`` contains a type with no YAML equivalent.
    """

    if value is None:
        return YamlNull()
    if isinstance(value, bool):
        return YamlBool(value)
    if isinstance(value, (int, float)):
        return YamlNumber(value)
    if isinstance(value, str):
        return YamlString(value)
    if isinstance(value, (dt.date, dt.time)):
        return YamlString(value.isoformat())
    if isinstance(value, (list, tuple)):
        return YamlSequence(tuple(from_python(item) for item in value))
    if isinstance(value, Mapping):
        return YamlMapping(tuple((from_python(key), from_python(item)) for key, item in value.items()))
    raise ValueConversionError(f"unsupported value type {type(value).__name__}", value=value)


__all__ = [
    "YamlBool",
    "YamlMapping",
    "YamlNull",
    "YamlNumber",
    "YamlSequence",
    "YamlString",
    "YamlValue",
    "compose_yaml",
    "from_python",
    "from_yaml_node",
]
