# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable command tree produced from a maskfile."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Script:
    """Embedded script fragment attached to a command."""

    executor: str
    source: str


@dataclass(slots=True, frozen=True)
class CommandNode:
    """Named command with an optional script and ordered sub-commands."""

    name: str
    script: Script | None = None
    subcommands: tuple[CommandNode, ...] = field(default_factory=tuple)
    description: str = ""


@dataclass(slots=True, frozen=True)
class Maskfile:
    """Parsed maskfile document."""

    title: str = ""
    commands: tuple[CommandNode, ...] = field(default_factory=tuple)


__all__ = ["CommandNode", "Maskfile", "Script"]
