# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared configuration and YAML-to-CBOR helpers for FDO servers."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from .config import format_conf_dir_env, format_conf_env, settings_for
from .errors import (
    ConfigError,
    ConfigGlobError,
    ConfigLoadError,
    ConfigParseError,
    FdoUtilError,
    PathValidationError,
    ValueConversionError,
)
from .metadata import OwnershipVoucherStoreMetadataKey
from .paths import AbsolutePath
from .values import convert, yaml_to_cbor

__all__ = [
    "AbsolutePath",
    "ConfigError",
    "ConfigGlobError",
    "ConfigLoadError",
    "ConfigParseError",
    "FdoUtilError",
    "OwnershipVoucherStoreMetadataKey",
    "PathValidationError",
    "ValueConversionError",
    "__version__",
    "convert",
    "format_conf_dir_env",
    "format_conf_env",
    "settings_for",
    "yaml_to_cbor",
]

try:
    __version__ = importlib_metadata.version("fdo-util")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
