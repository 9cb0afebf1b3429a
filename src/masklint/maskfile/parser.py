# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown parser turning a maskfile into a command tree.

Only the subset of Markdown that mask itself interprets is recognised:

* ATX headings open command sections. Level one is the document title,
  deeper levels nest under the nearest shallower heading.
* The first fenced code block inside a section is the command script and its
  info string names the executor.
* Everything else in a section is kept verbatim as the command description.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..errors import MaskfileError
from .models import CommandNode, Maskfile, Script

_HEADING_RE: Final[re.Pattern[str]] = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
_FENCE_OPEN_RE: Final[re.Pattern[str]] = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>.*)$")
_TITLE_LEVEL: Final[int] = 1
_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


@dataclass(slots=True)
class _PendingCommand:
    """Mutable command accumulated while scanning a section."""

    level: int
    heading: str
    qualified: str
    name: str
    script: Script | None = None
    description: list[str] = field(default_factory=list)
    children: list[_PendingCommand] = field(default_factory=list)

    def freeze(self) -> CommandNode:
        return CommandNode(
            name=self.name,
            script=self.script,
            subcommands=tuple(child.freeze() for child in self.children),
            description="\n".join(self.description).strip(),
        )


@dataclass(slots=True)
class _OpenFence:
    """Fenced code block currently being read."""

    marker: str
    indent: int
    info: str
    start_line: int
    owner: _PendingCommand | None
    lines: list[str] = field(default_factory=list)

    def closes_on(self, line: str) -> bool:
        candidate = line.strip()
        return (
            len(line) - len(line.lstrip(" ")) <= 3
            and len(candidate) >= len(self.marker)
            and set(candidate) == {self.marker[0]}
        )

    def append(self, line: str) -> None:
        strip = min(self.indent, len(line) - len(line.lstrip(" ")))
        self.lines.append(line[strip:])


class _MaskfileParser:
    """Single-pass line scanner building the command hierarchy."""

    def __init__(self) -> None:
        self._title = ""
        self._roots: list[_PendingCommand] = []
        self._stack: list[_PendingCommand] = []
        self._fence: _OpenFence | None = None

    def feed(self, lines: Iterable[str]) -> Maskfile:
        for number, line in enumerate(lines, start=1):
            if self._fence is not None:
                self._consume_fence_line(line)
                continue
            if (opener := _FENCE_OPEN_RE.match(line)) is not None and self._open_fence(opener, number):
                continue
            if (heading := _HEADING_RE.match(line)) is not None:
                self._open_section(len(heading.group(1)), heading.group(2) or "", number)
                continue
            if self._stack:
                self._stack[-1].description.append(line)

        if self._fence is not None:
            raise MaskfileError(f"line {self._fence.start_line}: unterminated code block")
        return Maskfile(title=self._title, commands=tuple(root.freeze() for root in self._roots))

    def _open_fence(self, opener: re.Match[str], number: int) -> bool:
        marker = opener.group("fence")
        info = opener.group("info").strip()
        if marker.startswith("`") and "`" in info:
            return False
        self._fence = _OpenFence(
            marker=marker,
            indent=len(opener.group("indent")),
            info=info,
            start_line=number,
            owner=self._stack[-1] if self._stack else None,
        )
        return True

    def _consume_fence_line(self, line: str) -> None:
        fence = self._fence
        if fence is None:  # pragma: no cover - guarded by caller
            return
        if not fence.closes_on(line):
            fence.append(line)
            return
        self._fence = None
        owner = fence.owner
        if owner is None or owner.script is not None:
            return
        executor = fence.info.split()[0] if fence.info else ""
        owner.script = Script(executor=executor, source="".join(f"{entry}\n" for entry in fence.lines))

    def _open_section(self, level: int, text: str, number: int) -> None:
        while self._stack and self._stack[-1].level >= level:
            self._stack.pop()
        if level == _TITLE_LEVEL:
            self._stack.clear()
            if not self._title:
                self._title = text.strip()
            return

        parent = self._stack[-1] if self._stack else None
        heading = _heading_name(text)
        if not heading:
            raise MaskfileError(f"line {number}: command heading has no name")
        name = _strip_parent_prefix(heading, parent)
        command = _PendingCommand(
            level=level,
            heading=heading,
            qualified=f"{parent.qualified} {name}" if parent is not None else name,
            name=name,
        )
        if parent is None:
            self._roots.append(command)
        else:
            parent.children.append(command)
        self._stack.append(command)


def _heading_name(text: str) -> str:
    """Return the command part of a heading, dropping ``(arg)`` declarations."""

    without_args = text.replace("`", "").split("(", 1)[0]
    return " ".join(without_args.split())


def _strip_parent_prefix(heading: str, parent: _PendingCommand | None) -> str:
    if parent is None:
        return heading
    for prefix in (parent.qualified, parent.heading):
        if heading.startswith(f"{prefix} "):
            return heading[len(prefix) + 1 :]
    return heading


def _split_lines(text: str) -> list[str]:
    """Split on Markdown line endings only; other Unicode breaks stay in the line."""

    lines = _LINE_BREAK_RE.split(text)
    if lines and not lines[-1]:
        lines.pop()
    return lines


def parse_maskfile(text: str) -> Maskfile:
    """Parse maskfile Markdown into a :class:`Maskfile`.

    Args:
        text: Markdown content of the maskfile.

    Returns:
        Maskfile: Title and ordered root commands.

    Raises:
        MaskfileError: If a heading has no command name or a code fence is
            never closed.
    """

    return _MaskfileParser().feed(_split_lines(text))


def load_maskfile(path: Path) -> Maskfile:
    """Read and parse the maskfile stored at ``path``.

    Args:
        path: Location of the maskfile.

    Returns:
        Maskfile: Parsed document.

    Raises:
        MaskfileError: If the file cannot be read, decoded, or parsed.
    """

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MaskfileError(f"maskfile not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MaskfileError(f"failed to read maskfile {path}: {exc}") from exc
    return parse_maskfile(content)


__all__ = ["load_maskfile", "parse_maskfile"]
