# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Depth-first traversal of the command tree."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from .handlers import LanguageHandler
from .maskfile.models import CommandNode
from .materialize import materialize_script
from .output import OutputContext
from .reporting import Reporter

TraceCallback = Callable[[str], None]


def qualify(name: str, parent: str | None) -> str:
    """Return the qualified name of ``name`` below ``parent``."""

    return f"{parent} {name}" if parent is not None else name


def walk(
    node: CommandNode,
    context: OutputContext,
    *,
    reporter: Reporter | None = None,
    parent: str | None = None,
    trace: TraceCallback | None = None,
) -> list[Path]:
    """Materialise, lint and report ``node`` and then its sub-commands in order.

    Args:
        node: Command to visit.
        context: Output directory and extraction-only flag.
        reporter: Receives findings unless ``context.extract_only`` is set.
            Without a reporter scripts are only materialised.
        parent: Qualified name of the parent command; ``None`` at the root.
        trace: Optional callback receiving debug messages.

    Returns:
        list[Path]: Files written for this node and its descendants, in
        traversal order.

    Raises:
        MasklintError: Any failure aborts the walk immediately.
    """

    qualified_name = qualify(node.name, parent)
    written: list[Path] = []
    if node.script is not None:
        handler = LanguageHandler.for_executor(node.script.executor)
        path = materialize_script(handler, node.script, qualified_name, context.directory)
        written.append(path)
        if trace is not None:
            trace(f"materialized command={qualified_name!r} handler={handler} path={path}")
        if not context.extract_only and reporter is not None:
            if trace is not None:
                trace(f"linting cmd={' '.join(handler.command(str(path))) or '<none>'}")
            reporter.report(qualified_name, handler.execute(path))

    for child in node.subcommands:
        written.extend(walk(child, context, reporter=reporter, parent=qualified_name, trace=trace))
    return written


def walk_commands(
    commands: Iterable[CommandNode],
    context: OutputContext,
    *,
    reporter: Reporter | None = None,
    trace: TraceCallback | None = None,
) -> list[Path]:
    """Walk every root command of a maskfile in declaration order."""

    written: list[Path] = []
    for command in commands:
        written.extend(walk(command, context, reporter=reporter, trace=trace))
    return written


__all__ = ["TraceCallback", "qualify", "walk", "walk_commands"]
