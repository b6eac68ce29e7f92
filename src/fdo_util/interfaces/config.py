# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading interfaces."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, TypeAlias, runtime_checkable

ConfigFragment: TypeAlias = Mapping[str, Any]
EnvironmentLookup: TypeAlias = Mapping[str, str]


@runtime_checkable
class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    name: str
    """Identifier describing the configuration source."""

    @abstractmethod
    def load(self) -> ConfigFragment:
        """Provide configuration values as a mapping.

        Returns:
            ConfigFragment: Mapping containing configuration values. Sources
            that are optional and absent return an empty mapping.
        """

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the source.

        Returns:
            str: Human-readable description of the source.
        """


__all__ = [
    "ConfigFragment",
    "ConfigSource",
    "EnvironmentLookup",
]
