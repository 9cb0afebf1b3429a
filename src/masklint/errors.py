# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the extraction and lint pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .handlers import LanguageHandler


class MasklintError(RuntimeError):
    """Base class for every failure that aborts a masklint run."""


class MaskfileError(MasklintError):
    """Raised when the maskfile cannot be read or parsed."""


class ConfigError(MasklintError):
    """Raised when configuration input is invalid."""


class OutputDirectoryError(MasklintError):
    """Raised when the destination directory cannot be provisioned."""


class MaterializationError(MasklintError):
    """Raised when a script file cannot be written to the output directory."""


class ScriptCollisionError(MaterializationError):
    """Raised when a script file name is already taken in the output directory."""

    def __init__(self, path: Path, qualified_name: str) -> None:
        """Initialise the error with the colliding path.

        Args:
            path: File that already exists in the output directory.
            qualified_name: Qualified command name that mapped onto ``path``.
        """

        super().__init__(f"cannot write script for '{qualified_name}': {path} already exists")
        self.path = path
        self.qualified_name = qualified_name


class LinterNotFoundError(MasklintError):
    """Raised when the executable backing a language handler is not installed."""

    def __init__(self, handler: LanguageHandler) -> None:
        super().__init__(f"executable for {handler} not found in $PATH")
        self.handler = handler


class LinterExecutionError(MasklintError):
    """Raised when a linter could not be executed for any other reason."""

    def __init__(self, handler: LanguageHandler, cause: OSError) -> None:
        super().__init__(f"failed to run {handler}: {cause}")
        self.handler = handler
        self.cause = cause


__all__ = [
    "ConfigError",
    "LinterExecutionError",
    "LinterNotFoundError",
    "MaskfileError",
    "MasklintError",
    "MaterializationError",
    "OutputDirectoryError",
    "ScriptCollisionError",
]
