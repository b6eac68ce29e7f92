# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Key contracts consumed by the external metadata store abstraction."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetadataLocalKey(Protocol):
    """Symbolic identifier that maps to a fixed metadata key string."""

    def to_key(self) -> str:
        """Return the store key for this identifier.

        Returns:
            str: Dotted key understood by the metadata store.
        """
        ...


__all__ = ["MetadataLocalKey"]
