# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for validated absolute paths."""

from __future__ import annotations

import copy
import os
from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from fdo_util.errors import PathValidationError
from fdo_util.paths import AbsolutePath


@pytest.mark.parametrize("raw", ["/", "/etc/fdo", "/var/lib/fdo/ownership_vouchers/", "/a//b"])
def test_parse_accepts_absolute_paths_and_round_trips(raw: str) -> None:
    parsed = AbsolutePath.parse(raw)

    assert str(parsed) == raw
    assert os.fspath(parsed) == raw
    assert parsed.path == Path(raw)


def test_parse_rejects_empty_string() -> None:
    with pytest.raises(PathValidationError, match="path is empty"):
        AbsolutePath.parse("")


@pytest.mark.parametrize("raw", ["relative", "./here", "../up", "etc/fdo"])
def test_parse_rejects_relative_paths(raw: str) -> None:
    with pytest.raises(PathValidationError, match="is not absolute"):
        AbsolutePath.parse(raw)


def test_parse_rejects_non_strings() -> None:
    with pytest.raises(PathValidationError):
        AbsolutePath.parse(Path("/etc"))  # type: ignore[arg-type]


def test_direct_construction_is_refused() -> None:
    with pytest.raises(TypeError):
        AbsolutePath("/etc/fdo")


def test_instances_are_immutable_and_hashable() -> None:
    parsed = AbsolutePath.parse("/etc/fdo")

    with pytest.raises(AttributeError):
        parsed._raw = "/tmp"  # type: ignore[misc]
    assert parsed == AbsolutePath.parse("/etc/fdo")
    assert len({parsed, AbsolutePath.parse("/etc/fdo")}) == 1
    assert copy.deepcopy(parsed) == parsed


def test_usable_with_filesystem_apis(tmp_path: Path) -> None:
    target = tmp_path / "store"
    target.mkdir()

    parsed = AbsolutePath.parse(str(target))

    assert os.path.isdir(parsed)
    assert Path(parsed) == target


class _Settings(BaseModel):
    store: AbsolutePath


def test_pydantic_field_validates_and_serialises() -> None:
    settings = _Settings.model_validate({"store": "/var/lib/fdo"})

    assert isinstance(settings.store, AbsolutePath)
    assert settings.model_dump() == {"store": "/var/lib/fdo"}
    assert _Settings.model_validate_json('{"store": "/srv"}').store == AbsolutePath.parse("/srv")


@pytest.mark.parametrize("raw", ["", "var/lib/fdo"])
def test_pydantic_field_rejects_invalid_paths(raw: str) -> None:
    with pytest.raises(ValidationError):
        _Settings.model_validate({"store": raw})
