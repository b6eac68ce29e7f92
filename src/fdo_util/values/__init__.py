# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""YAML and CBOR value trees and the converter between them."""

from __future__ import annotations

from .converter import convert, python_to_cbor, yaml_text_to_cbor, yaml_to_cbor
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
    from_yaml_node,
)
from .wire import (
    CborArray,
    CborBool,
    CborBytes,
    CborFloat,
    CborInteger,
    CborMap,
    CborNull,
    CborText,
    CborValue,
    to_python,
)

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
    "YamlBool",
    "YamlMapping",
    "YamlNull",
    "YamlNumber",
    "YamlSequence",
    "YamlString",
    "YamlValue",
    "compose_yaml",
    "convert",
    "from_python",
    "from_yaml_node",
    "python_to_cbor",
    "to_python",
    "yaml_text_to_cbor",
    "yaml_to_cbor",
]
