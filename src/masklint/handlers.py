# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-language strategies for materialising and linting embedded scripts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Final

from .errors import LinterExecutionError, LinterNotFoundError
from .findings import normalize_rubocop, normalize_ruff, normalize_shellcheck
from .maskfile.models import Script
from .process_utils import run_command

NO_LINTER_FINDING: Final[str] = "no linter found for target"


class LanguageHandler(StrEnum):
    """Closed set of handlers keyed by the script's executor tag.

    The string value doubles as the handler's display name in error messages.
    """

    CATCHALL = "catchall"
    SHELLCHECK = "shellcheck"
    RUFF = "ruff"
    RUBOCOP = "rubocop"

    @classmethod
    def for_executor(cls, executor: str) -> LanguageHandler:
        """Return the handler for ``executor``, defaulting to :attr:`CATCHALL`.

        Args:
            executor: Info-string tag of the script's code fence.

        Returns:
            LanguageHandler: Matching handler; unknown tags map to the catchall.
        """

        match executor:
            case "sh" | "bash" | "zsh":
                return cls.SHELLCHECK
            case "py" | "python":
                return cls.RUFF
            case "rb" | "ruby":
                return cls.RUBOCOP
            case _:
                return cls.CATCHALL

    @property
    def file_extension(self) -> str:
        """Return the suffix appended to materialised script files."""

        match self:
            case LanguageHandler.SHELLCHECK:
                return ".sh"
            case LanguageHandler.RUFF:
                return ".py"
            case LanguageHandler.RUBOCOP:
                return ".rb"
            case _:
                return ""

    def transform_content(self, script: Script) -> str:
        """Return the file body written for ``script``.

        Shell scripts gain an interpreter marker line; the ``/bin/usr/env``
        path is emitted as-is for compatibility with earlier dumps.
        """

        if self is LanguageHandler.SHELLCHECK:
            return f"#!/bin/usr/env {script.executor}\n{script.source}"
        return script.source

    def command(self, path: str) -> tuple[str, ...]:
        """Return the linter argv for ``path``; empty for the catchall."""

        match self:
            case LanguageHandler.SHELLCHECK:
                return ("shellcheck", path)
            case LanguageHandler.RUFF:
                return ("ruff", "check", "--output-format=full", "--no-cache", path)
            case LanguageHandler.RUBOCOP:
                return ("rubocop", "--format=clang", "--display-style-guide", path)
            case _:
                return ()

    def normalize(self, stdout: str, path: str) -> str:
        """Rewrite raw linter ``stdout`` into path-free findings."""

        match self:
            case LanguageHandler.SHELLCHECK:
                return normalize_shellcheck(stdout, path)
            case LanguageHandler.RUFF:
                return normalize_ruff(stdout, path)
            case LanguageHandler.RUBOCOP:
                return normalize_rubocop(stdout, path)
            case _:
                return NO_LINTER_FINDING

    def execute(self, path: Path) -> str:
        """Run the handler's linter against ``path`` and return normalised findings.

        Args:
            path: Materialised script file.

        Returns:
            str: Findings text; empty when the linter reported nothing.

        Raises:
            LinterNotFoundError: If the linter executable is not on ``PATH``.
            LinterExecutionError: If the linter could not be started.
        """

        if self is LanguageHandler.CATCHALL:
            return NO_LINTER_FINDING
        target = str(path)
        try:
            completed = run_command(self.command(target), check=False, capture_output=True)
        except FileNotFoundError as exc:
            raise LinterNotFoundError(self) from exc
        except OSError as exc:
            raise LinterExecutionError(self, exc) from exc
        return self.normalize(completed.stdout or "", target)


__all__ = ["NO_LINTER_FINDING", "LanguageHandler"]
