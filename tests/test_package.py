# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import fdo_util
from fdo_util.metadata import OwnershipVoucherStoreMetadataKey


def test_package_exposes_version_string() -> None:
    assert isinstance(fdo_util.__version__, str)
    assert fdo_util.__version__


def test_package_metadata_attribute_is_key_module() -> None:
    assert fdo_util.metadata.OwnershipVoucherStoreMetadataKey is OwnershipVoucherStoreMetadataKey
    assert fdo_util.OwnershipVoucherStoreMetadataKey is OwnershipVoucherStoreMetadataKey
