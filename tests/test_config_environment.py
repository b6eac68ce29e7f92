# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for component environment variable naming and lookup."""

from __future__ import annotations

import pytest

from fdo_util.config import component_env_prefix, conf_path_from_env, format_conf_dir_env, format_conf_env


def test_format_env_names_for_owner_onboarding_server() -> None:
    assert format_conf_env("owner-onboarding-server") == "OWNER_ONBOARDING_SERVER_CONF"
    assert format_conf_dir_env("owner-onboarding-server") == "OWNER_ONBOARDING_SERVER_CONF_DIR"


@pytest.mark.parametrize(
    ("component", "expected"),
    [
        ("manufacturing-server", "MANUFACTURING_SERVER"),
        ("rendezvous_server", "RENDEZVOUS_SERVER"),
        ("serviceinfo-api-server", "SERVICEINFO_API_SERVER"),
        ("already-UPPER", "ALREADY_UPPER"),
    ],
)
def test_component_env_prefix(component: str, expected: str) -> None:
    assert component_env_prefix(component) == expected


def test_conf_path_from_env_returns_value() -> None:
    assert conf_path_from_env("X_CONF", {"X_CONF": "/srv/x.yml"}) == "/srv/x.yml"


def test_conf_path_from_env_unset_is_none() -> None:
    assert conf_path_from_env("X_CONF", {}) is None


def test_conf_path_from_env_rejects_undecodable_text() -> None:
    assert conf_path_from_env("X_CONF", {"X_CONF": "/srv/\udcff.yml"}) is None


def test_conf_path_from_env_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FDO_UTIL_TEST_CONF", "/tmp/test.yml")

    assert conf_path_from_env("FDO_UTIL_TEST_CONF") == "/tmp/test.yml"
