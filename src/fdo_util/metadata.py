# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Metadata keys shared by the owner-onboarding and manufacturing servers."""

from __future__ import annotations

from enum import Enum

from .interfaces.store import MetadataLocalKey


class OwnershipVoucherStoreMetadataKey(str, Enum):
    """Metadata attached to ownership vouchers held in a store."""

    TO2_PERFORMED = "fdo.to2_performed"
    TO0_ACCEPT_OWNER_WAIT_SECONDS = "fdo.to0_accept_owner_wait_seconds"

    def to_key(self) -> str:
        return self.value


def metadata_key(key: MetadataLocalKey) -> str:
    """Return the store key for ``key``, validating it against the protocol."""

    if not isinstance(key, MetadataLocalKey):
        raise TypeError(f"{key!r} does not implement MetadataLocalKey")
    return key.to_key()


__all__ = ["OwnershipVoucherStoreMetadataKey", "metadata_key"]
