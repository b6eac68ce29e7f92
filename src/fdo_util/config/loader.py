# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence and traceability."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigError, ConfigLoadError
from ..interfaces.config import ConfigSource, EnvironmentLookup
from .environment import conf_path_from_env, format_conf_dir_env, format_conf_env
from .merge import deep_merge
from .sources import FileConfigSource, GlobConfigSource
from .stages import ConfigLayout, ConfigStage

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_KEY_SEPARATOR: Final[str] = "."
_MISSING: Final[object] = object()


class LoadedSource(BaseModel):
    """Provenance record for one document merged into a configuration."""

    model_config = ConfigDict(frozen=True)

    stage: ConfigStage
    path: str


class MergedConfig(BaseModel):
    """Container bundling a merged configuration document with its provenance."""

    model_config = ConfigDict(validate_assignment=True)

    component: str
    data: dict[str, Any] = Field(default_factory=dict)
    sources: list[LoadedSource] = Field(default_factory=list)

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Return the value stored at a dotted ``key`` such as ``"service.port"``.

        Args:
            key: Dotted path into the merged document.
            default: Value returned when ``key`` is absent.

        Returns:
            Any: Stored value, or ``default`` when provided and the key is absent.

        Raises:
            KeyError: If ``key`` is absent and no default was supplied.
        """

        current: Any = self.data
        for part in key.split(_KEY_SEPARATOR):
            if not isinstance(current, Mapping) or part not in current:
                if default is _MISSING:
                    raise KeyError(key)
                return default
            current = current[part]
        return current

    def into(self, model: type[ModelT]) -> ModelT:
        """Deserialize the merged document into ``model``.

        Raises:
            ConfigError: If the document does not satisfy ``model``.
        """

        try:
            return model.model_validate(self.data)
        except ValidationError as exc:
            raise ConfigError(f"invalid configuration for {self.component}: {exc}") from exc


class ConfigAssembler:
    """Merge a component's system, override, and drop-in configuration.

    Stages are applied in ascending precedence, so later files win per key.
    """

    def __init__(
        self,
        component: str,
        *,
        env: EnvironmentLookup | None = None,
        layout: ConfigLayout | None = None,
    ) -> None:
        """Initialise an assembler for ``component``.

        Args:
            component: Component name, e.g. ``"owner-onboarding-server"``.
            env: Environment mapping consulted for path overrides. Defaults to
                the process environment.
            layout: Filesystem layout used for default locations.
        """

        if not component:
            raise ValueError("component name must not be empty")
        self._component = component
        self._env = env
        self._layout = layout or ConfigLayout()

    @property
    def component(self) -> str:
        return self._component

    def override_path(self) -> Path:
        """Return the override file, honouring ``<COMPONENT>_CONF``."""

        from_env = conf_path_from_env(format_conf_env(self._component), self._env)
        if from_env is not None:
            return Path(from_env)
        return self._layout.override_file(self._component)

    def conf_d_pattern(self) -> str:
        """Return the drop-in glob pattern, honouring ``<COMPONENT>_CONF_DIR``."""

        from_env = conf_path_from_env(format_conf_dir_env(self._component), self._env)
        if from_env is not None:
            return from_env
        return self._layout.conf_d_pattern(self._component)

    def sources(self) -> list[tuple[ConfigStage, FileConfigSource]]:
        """Return the ordered merge plan.

        Drop-in files are expanded individually so each carries its own
        provenance.

        Raises:
            ConfigGlobError: If the drop-in pattern is malformed.
        """

        plan = [
            (ConfigStage.SYSTEM, FileConfigSource(self._layout.system_file(self._component))),
            (ConfigStage.OVERRIDE, FileConfigSource(self.override_path())),
        ]
        drop_ins = GlobConfigSource(self.conf_d_pattern())
        plan.extend((ConfigStage.CONF_D, source) for source in drop_ins.files())
        return plan

    def assemble(self) -> MergedConfig:
        """Load every source and return the merged configuration.

        Raises:
            ConfigLoadError: If a present file cannot be parsed.
            ConfigGlobError: If the drop-in pattern is malformed.
        """

        LOGGER.debug("Assembling configuration for %s", self._component)
        data: dict[str, Any] = {}
        loaded: list[LoadedSource] = []
        for stage, source in self.sources():
            if not source.required and not source.exists():
                LOGGER.debug("Skipping %s (%s stage): not present", source.describe(), stage.value)
                continue
            LOGGER.debug("Loading %s (%s stage)", source.describe(), stage.value)
            data = deep_merge(data, self._load_stage(stage, source))
            loaded.append(LoadedSource(stage=stage, path=source.name))
        LOGGER.debug(
            "Configuration for %s merged from %d file(s): %s",
            self._component,
            len(loaded),
            ", ".join(entry.path for entry in loaded) or "<none>",
        )
        return MergedConfig(component=self._component, data=data, sources=loaded)

    def _load_stage(self, stage: ConfigStage, source: ConfigSource) -> Mapping[str, Any]:
        try:
            return source.load()
        except ConfigError as exc:
            context = self._layout.stage_context(stage)
            raise ConfigLoadError(f"{context}: {exc}", stage=stage, path=source.name) from exc


def settings_for(
    component: str,
    *,
    env: EnvironmentLookup | None = None,
    layout: ConfigLayout | None = None,
) -> MergedConfig:
    """Return the merged configuration for ``component``.

    Sources, lowest to highest precedence:

    1. ``/usr/share/fdo/<component>.yml``
    2. ``$<COMPONENT>_CONF`` or ``/etc/fdo/<component>.yml``
    3. every match of ``$<COMPONENT>_CONF_DIR`` or
       ``/etc/fdo/<component>.conf.d/*.yml``

    Missing sources are skipped.

    Args:
        component: Component name, e.g. ``"owner-onboarding-server"``.
        env: Environment mapping; defaults to the process environment.
        layout: Filesystem layout; defaults to the FDO locations above.

    Returns:
        MergedConfig: Freshly merged configuration.

    Raises:
        ConfigLoadError: If a present file cannot be parsed.
        ConfigGlobError: If the drop-in pattern is malformed.
    """

    return ConfigAssembler(component, env=env, layout=layout).assemble()


__all__ = [
    "ConfigAssembler",
    "LoadedSource",
    "MergedConfig",
    "settings_for",
]
