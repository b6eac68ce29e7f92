# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (single files and drop-in globs)."""

from __future__ import annotations

import glob
import json
import logging
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Final

import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode, Node, ScalarNode

from ..errors import ConfigGlobError, ConfigParseError
from ..interfaces.config import ConfigFragment
from .stages import ConfigStage

LOGGER = logging.getLogger(__name__)

_RECURSIVE_WILDCARD: Final[str] = "**"
_PATH_SEPARATORS: Final[frozenset[str]] = frozenset({"/"})
_BOOL_TAG: Final[str] = "tag:yaml.org,2002:bool"


class _ConfigYamlLoader(yaml.SafeLoader):
    """Safe loader producing string-keyed mappings.

    Scalar keys are stringified from their own node, so ``1``, ``1.0`` and
    ``true`` stay distinct keys. Timestamps and binary scalars keep their
    source text.
    """

    def construct_mapping(self, node: Node, deep: bool = False) -> dict[str, Any]:
        if not isinstance(node, MappingNode):
            raise ConstructorError(None, None, f"expected a mapping node, but found {node.id}", node.start_mark)
        self.flatten_mapping(node)
        mapping: dict[str, Any] = {}
        for key_node, value_node in node.value:
            mapping[self._construct_key(node, key_node)] = self.construct_object(value_node, deep=deep)
        return mapping

    def _construct_key(self, node: MappingNode, key_node: Node) -> str:
        if isinstance(key_node, ScalarNode):
            if key_node.tag == _BOOL_TAG:
                return "true" if self.construct_yaml_bool(key_node) else "false"
            key = self.construct_object(key_node)
            if isinstance(key, str):
                return key
            if isinstance(key, (int, float)):
                return str(key)
        raise ConstructorError(
            "while constructing a mapping",
            node.start_mark,
            f"found unsupported mapping key ({key_node.id})",
            key_node.start_mark,
        )


_ConfigYamlLoader.add_constructor("tag:yaml.org,2002:timestamp", _ConfigYamlLoader.construct_yaml_str)
_ConfigYamlLoader.add_constructor("tag:yaml.org,2002:binary", _ConfigYamlLoader.construct_yaml_str)


def _parse_yaml(text: str) -> Any:
    return yaml.load(text, Loader=_ConfigYamlLoader)


def _parse_json(text: str) -> Any:
    return json.loads(text) if text.strip() else None


def _parse_toml(text: str) -> Any:
    return tomllib.loads(text)


_PARSERS: Final[dict[str, Callable[[str], Any]]] = {
    ".yml": _parse_yaml,
    ".yaml": _parse_yaml,
    ".json": _parse_json,
    ".toml": _parse_toml,
}
_PARSE_ERRORS: Final[tuple[type[Exception], ...]] = (
    yaml.YAMLError,
    json.JSONDecodeError,
    tomllib.TOMLDecodeError,
)


class FileConfigSource:
    """Load one configuration document, choosing the parser by file extension."""

    def __init__(self, path: Path, *, required: bool = False) -> None:
        self.path = path
        self.required = required
        self.name = str(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ConfigFragment:
        if not self.exists():
            if self.required:
                raise ConfigParseError("configuration file not found", path=self.path)
            return {}
        parser = _PARSERS.get(self.path.suffix.lower())
        if parser is None:
            raise ConfigParseError(
                f"unsupported configuration format {self.path.suffix or '(none)'!r}",
                path=self.path,
            )
        try:
            text = self.path.read_text(encoding="utf-8")
            document = parser(text)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigParseError(f"unable to read configuration: {exc}", path=self.path) from exc
        except _PARSE_ERRORS as exc:
            raise ConfigParseError(f"invalid configuration document: {exc}", path=self.path) from exc
        if document is None:
            return {}
        if not isinstance(document, Mapping):
            raise ConfigParseError("configuration root must be a mapping", path=self.path)
        LOGGER.debug("Read configuration file %s", self.path)
        return dict(document)

    def describe(self) -> str:
        qualifier = "required" if self.required else "optional"
        return f"{qualifier} configuration file at {self.name}"


def validate_glob_pattern(pattern: str) -> None:
    """Reject glob patterns that are syntactically invalid.

    A pattern is invalid when a ``[`` range is never closed, when more than
    two ``*`` appear in a row, or when ``**`` does not form a whole path
    component.

    Raises:
        ConfigGlobError: If ``pattern`` is malformed.
    """

    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "*":
            run = 1
            while index + run < length and pattern[index + run] == "*":
                run += 1
            if run > len(_RECURSIVE_WILDCARD):
                raise ConfigGlobError(
                    f"wildcards are either regular `*` or recursive `**` (position {index})",
                    stage=ConfigStage.CONF_D,
                    pattern=pattern,
                )
            if run == len(_RECURSIVE_WILDCARD):
                before_ok = index == 0 or pattern[index - 1] in _PATH_SEPARATORS
                after_ok = index + run == length or pattern[index + run] in _PATH_SEPARATORS
                if not (before_ok and after_ok):
                    raise ConfigGlobError(
                        f"recursive wildcards must form a single path component (position {index})",
                        stage=ConfigStage.CONF_D,
                        pattern=pattern,
                    )
            index += run
            continue
        if char == "[":
            start = index + 1
            if start < length and pattern[start] == "!":
                start += 1
            # The first character of a range may itself be a literal "]".
            close = pattern.find("]", start + 1)
            if close == -1:
                raise ConfigGlobError(
                    f"invalid range pattern (position {index})",
                    stage=ConfigStage.CONF_D,
                    pattern=pattern,
                )
            index = close + 1
            continue
        index += 1


class GlobConfigSource:
    """Expand a drop-in glob pattern into required file sources, in sorted order.

    Wildcards match dotfiles too, so ``conf.d/*.yml`` includes ``.local.yml``.
    """

    def __init__(self, pattern: str) -> None:
        validate_glob_pattern(pattern)
        self.pattern = pattern

    def paths(self) -> list[Path]:
        matches = glob.glob(self.pattern, recursive=True, include_hidden=True)
        return [Path(entry) for entry in sorted(matches)]

    def files(self) -> list[FileConfigSource]:
        return [FileConfigSource(path, required=True) for path in self.paths()]


__all__ = [
    "FileConfigSource",
    "GlobConfigSource",
    "validate_glob_pattern",
]
