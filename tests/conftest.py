# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from fdo_util.config import ConfigLayout


@pytest.fixture
def layout(tmp_path: Path) -> ConfigLayout:
    """Return a layout rooted under ``tmp_path`` mirroring /usr/share/fdo and /etc/fdo."""
    system_dir = tmp_path / "usr" / "share" / "fdo"
    config_dir = tmp_path / "etc" / "fdo"
    system_dir.mkdir(parents=True)
    config_dir.mkdir(parents=True)
    return ConfigLayout(system_dir=system_dir, config_dir=config_dir)


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    """Return a helper that writes dedented text, creating parent directories."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write
