# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Validated absolute filesystem paths for configuration models."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import PathValidationError


class AbsolutePath(PathLike[str]):
    """Non-empty, absolute path string that can only be built via :meth:`parse`.

    The original text is preserved verbatim so ``str(AbsolutePath.parse(text))``
    always returns ``text``. Instances are immutable and hashable.
    """

    __slots__ = ("_raw",)

    _raw: str

    def __init__(self, *_args: object, **_kwargs: object) -> None:
        raise TypeError("AbsolutePath instances must be created with AbsolutePath.parse()")

    @classmethod
    def parse(cls, value: str) -> AbsolutePath:
        """Validate ``value`` and wrap it.

        Args:
            value: Candidate path string.

        Returns:
            AbsolutePath: Wrapper around ``value``.

        Raises:
            PathValidationError: If ``value`` is empty or relative.
        """

        if not isinstance(value, str):
            raise PathValidationError(f"path must be a string, not {type(value).__name__}")
        if not value:
            raise PathValidationError("path is empty")
        if not Path(value).is_absolute():
            raise PathValidationError(f"path {value} is not absolute")
        instance = object.__new__(cls)
        object.__setattr__(instance, "_raw", value)
        return instance

    @property
    def path(self) -> Path:
        """Return the wrapped value as a :class:`~pathlib.Path`."""

        return Path(self._raw)

    def __fspath__(self) -> str:
        return self._raw

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"AbsolutePath({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AbsolutePath):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return (type(self).parse, (self._raw,))

    @classmethod
    def __get_pydantic_core_schema__(cls, _source: Any, _handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, _core_schema: Any, _handler: Any) -> JsonSchemaValue:
        return {"type": "string", "format": "path", "description": "Absolute filesystem path"}


__all__ = ["AbsolutePath"]
