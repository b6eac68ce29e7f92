# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment variable naming and lookup for component configuration."""

from __future__ import annotations

import os
from typing import Final

from ..interfaces.config import EnvironmentLookup

CONF_ENV_SUFFIX: Final[str] = "_CONF"
CONF_DIR_ENV_SUFFIX: Final[str] = "_CONF_DIR"


def component_env_prefix(component: str) -> str:
    """Return ``component`` upper-cased with ``-`` replaced by ``_``."""

    return component.replace("-", "_").upper()


def format_conf_env(component: str) -> str:
    """Return the variable that overrides the component's configuration file.

    Args:
        component: Component name such as ``"owner-onboarding-server"``.

    Returns:
        str: Variable name, e.g. ``"OWNER_ONBOARDING_SERVER_CONF"``.
    """

    return f"{component_env_prefix(component)}{CONF_ENV_SUFFIX}"


def format_conf_dir_env(component: str) -> str:
    """Return the variable that overrides the component's drop-in glob pattern.

    Args:
        component: Component name such as ``"owner-onboarding-server"``.

    Returns:
        str: Variable name, e.g. ``"OWNER_ONBOARDING_SERVER_CONF_DIR"``.
    """

    return f"{component_env_prefix(component)}{CONF_DIR_ENV_SUFFIX}"


def conf_path_from_env(key: str, env: EnvironmentLookup | None = None) -> str | None:
    """Return the value of ``key`` when it is set to valid text.

    Values carrying undecodable bytes (surrogate escapes from
    :data:`os.environ`) are treated as unset.

    Args:
        key: Environment variable to read.
        env: Mapping to read from. Defaults to :data:`os.environ`.

    Returns:
        str | None: Variable value or ``None`` when unset or not valid text.
    """

    lookup = os.environ if env is None else env
    value = lookup.get(key)
    if value is None:
        return None
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


__all__ = [
    "CONF_DIR_ENV_SUFFIX",
    "CONF_ENV_SUFFIX",
    "component_env_prefix",
    "conf_path_from_env",
    "format_conf_dir_env",
    "format_conf_env",
]
