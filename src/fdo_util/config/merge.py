# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deep merge helpers for layered configuration documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``override`` overlaid onto ``base``.

    Nested mappings merge key by key; any other value in ``override``
    replaces whatever ``base`` held at that key. Neither input is mutated.

    Args:
        base: Lower-precedence document.
        override: Higher-precedence document.

    Returns:
        dict[str, Any]: New merged document.
    """

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


__all__ = ["deep_merge"]
