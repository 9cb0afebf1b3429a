# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalise raw linter stdout into compact, path-free findings."""

from __future__ import annotations

from typing import Final

RUFF_CLEAN_MARKER: Final[str] = "All checks passed!"
RUFF_SUMMARY_PREFIX: Final[str] = "Found "
RUBOCOP_SUMMARY_MARKER: Final[str] = "1 file inspected"
LINE_PREFIX: Final[str] = "line "


def _lines(text: str) -> list[str]:
    """Split on newlines only, dropping a trailing carriage return from each line."""

    return [line.removesuffix("\r") for line in text.split("\n")]


def normalize_shellcheck(stdout: str, path: str) -> str:
    """Strip every ``"<path> "`` occurrence from shellcheck's tty output.

    Args:
        stdout: Raw stdout captured from ``shellcheck <path>``.
        path: Path passed to shellcheck on the command line.

    Returns:
        str: Trimmed findings text, empty when shellcheck reported nothing.
    """

    return stdout.strip().replace(f"{path} ", "")


def normalize_ruff(stdout: str, path: str) -> str:
    """Drop ruff's banner lines and rewrite ``"<path>:"`` locations.

    Lines after the ``Found N error(s).`` summary are discarded, which also
    removes the fix hints ruff appends to its report.

    Args:
        stdout: Raw stdout captured from ``ruff check --output-format=full``.
        path: Path passed to ruff on the command line.

    Returns:
        str: Findings with ``line <row>:<col>`` prefixes.
    """

    retained: list[str] = []
    for line in _lines(stdout.strip()):
        if line == RUFF_CLEAN_MARKER:
            continue
        if line.startswith(RUFF_SUMMARY_PREFIX):
            break
        retained.append(line.replace(f"{path}:", LINE_PREFIX))
    return "\n".join(retained).strip()


def normalize_rubocop(stdout: str, path: str) -> str:
    """Remove rubocop's inspection summary and rewrite ``"<path>:"`` locations.

    Args:
        stdout: Raw stdout captured from ``rubocop --format=clang``.
        path: Path passed to rubocop on the command line.

    Returns:
        str: Findings with ``line <row>:<col>`` prefixes.
    """

    kept = [line for line in _lines(stdout) if RUBOCOP_SUMMARY_MARKER not in line]
    return "\n".join(kept).strip().replace(f"{path}:", LINE_PREFIX)


__all__ = [
    "normalize_rubocop",
    "normalize_ruff",
    "normalize_shellcheck",
]
