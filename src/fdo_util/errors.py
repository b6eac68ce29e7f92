# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the configuration and value conversion helpers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config.stages import ConfigStage


class FdoUtilError(Exception):
    """Base class for every error raised by :mod:`fdo_util`."""


class PathValidationError(FdoUtilError, ValueError):
    """Raised when a string cannot be used as an absolute filesystem path."""


class ConfigError(FdoUtilError):
    """Raised when configuration input is invalid."""


class ConfigParseError(ConfigError):
    """Raised when a single configuration document cannot be read or parsed."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigLoadError(ConfigError):
    """Raised when a configuration stage fails while assembling settings.

    Attributes:
        stage: Stage whose source failed to load.
        path: File or pattern that triggered the failure, when known.
    """

    def __init__(self, message: str, *, stage: ConfigStage, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.path = path


class ConfigGlobError(ConfigLoadError):
    """Raised when a drop-in directory pattern is not a valid glob."""

    def __init__(self, message: str, *, stage: ConfigStage, pattern: str) -> None:
        super().__init__(f"invalid glob pattern {pattern!r}: {message}", stage=stage, path=pattern)
        self.pattern = pattern


class ValueConversionError(FdoUtilError):
    """Raised when a YAML value has no CBOR equivalent."""

    def __init__(self, message: str, *, value: object) -> None:
        super().__init__(f"{message}: {value!r}")
        self.value = value


__all__ = [
    "ConfigError",
    "ConfigGlobError",
    "ConfigLoadError",
    "ConfigParseError",
    "FdoUtilError",
    "PathValidationError",
    "ValueConversionError",
]
