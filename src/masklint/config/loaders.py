# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject)."""

from __future__ import annotations

import tomllib
from collections.abc import Callable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from ..errors import ConfigError
from .models import Config

PYPROJECT_FILE: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILE: Final[str] = ".masklint.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "masklint"
MASKFILE_KEY: Final[str] = "maskfile"


class ConfigSource(Protocol):
    """Provide a fragment of configuration data."""

    def load(self) -> Mapping[str, Any]: ...

    def describe(self) -> str: ...


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    def load(self) -> Mapping[str, Any]:
        return Config().model_dump()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> Mapping[str, Any]:
        return self._resolve_paths(self._read())

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"Failed to read configuration at {self._path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        return dict(data)

    def _resolve_paths(self, document: Mapping[str, Any]) -> dict[str, Any]:
        resolved = dict(document)
        maskfile = resolved.get(MASKFILE_KEY)
        if isinstance(maskfile, str) and not Path(maskfile).is_absolute():
            resolved[MASKFILE_KEY] = self._path.parent / maskfile
        return resolved

    def describe(self) -> str:
        return f"TOML configuration at {self._path}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.masklint]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        tool_section = self._read().get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return self._resolve_paths(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self._path})"


def load_config(
    root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    trace: Callable[[str], None] | None = None,
) -> Config:
    """Return the configuration for ``root`` with CLI ``overrides`` applied last.

    Sources are merged in order: built-in defaults, ``[tool.masklint]`` in
    ``pyproject.toml``, ``.masklint.toml``, then ``overrides``. Override
    entries whose value is ``None`` are ignored.

    Args:
        root: Directory searched for configuration files.
        overrides: Values supplied explicitly on the command line.
        trace: Optional callback receiving the description of every source
            that contributed settings.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If a file is unreadable or contains invalid settings.
    """

    sources: tuple[ConfigSource, ...] = (
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILE),
        TomlConfigSource(root / PROJECT_CONFIG_FILE),
    )
    merged: dict[str, Any] = {}
    for source in sources:
        fragment = source.load()
        if fragment and trace is not None:
            trace(f"config source={source.describe()}")
        merged.update(fragment)
    merged.update({key: value for key, value in (overrides or {}).items() if value is not None})
    try:
        return Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = [
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
