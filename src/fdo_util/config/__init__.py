# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Layered configuration loading for FDO components."""

from __future__ import annotations

from .environment import component_env_prefix, conf_path_from_env, format_conf_dir_env, format_conf_env
from .loader import ConfigAssembler, LoadedSource, MergedConfig, settings_for
from .merge import deep_merge
from .sources import FileConfigSource, GlobConfigSource, validate_glob_pattern
from .stages import ConfigLayout, ConfigStage

__all__ = [
    "ConfigAssembler",
    "ConfigLayout",
    "ConfigStage",
    "FileConfigSource",
    "GlobConfigSource",
    "LoadedSource",
    "MergedConfig",
    "component_env_prefix",
    "conf_path_from_env",
    "deep_merge",
    "format_conf_dir_env",
    "format_conf_env",
    "settings_for",
    "validate_glob_pattern",
]
