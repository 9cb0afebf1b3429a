# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and layered loaders."""

from __future__ import annotations

from ..errors import ConfigError
from .loaders import (
    DefaultConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
    load_config,
)
from .models import DEFAULT_MASKFILE, Config

__all__ = [
    "DEFAULT_MASKFILE",
    "Config",
    "ConfigError",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
