# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration stages and the filesystem layout they are resolved against."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

DEFAULT_SYSTEM_DIR: Final[Path] = Path("/usr/share/fdo")
DEFAULT_CONFIG_DIR: Final[Path] = Path("/etc/fdo")
DEFAULT_EXTENSION: Final[str] = "yml"


class ConfigStage(str, Enum):
    """Merge stages in ascending precedence order."""

    SYSTEM = "system"
    OVERRIDE = "override"
    CONF_D = "conf.d"


@dataclass(frozen=True, slots=True)
class ConfigLayout:
    """Directories used to derive the default location of each stage.

    Attributes:
        system_dir: Directory holding vendor-shipped defaults.
        config_dir: Directory holding administrator overrides and drop-ins.
        extension: File extension shared by every default location.
    """

    system_dir: Path = field(default=DEFAULT_SYSTEM_DIR)
    config_dir: Path = field(default=DEFAULT_CONFIG_DIR)
    extension: str = DEFAULT_EXTENSION

    def system_file(self, component: str) -> Path:
        return self.system_dir / f"{component}.{self.extension}"

    def override_file(self, component: str) -> Path:
        return self.config_dir / f"{component}.{self.extension}"

    def conf_d_pattern(self, component: str) -> str:
        return str(self.config_dir / f"{component}.conf.d" / f"*.{self.extension}")

    def stage_context(self, stage: ConfigStage) -> str:
        """Return the operator-facing prefix used when ``stage`` fails to load."""

        match stage:
            case ConfigStage.SYSTEM:
                return f"Loading configuration file from {self.system_dir}"
            case ConfigStage.OVERRIDE:
                return f"Loading configuration file from {self.config_dir}"
            case ConfigStage.CONF_D:
                return "Loading configuration files from conf.d"
        raise ValueError(f"unknown configuration stage {stage!r}")


__all__ = [
    "ConfigLayout",
    "ConfigStage",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_EXTENSION",
    "DEFAULT_SYSTEM_DIR",
]
