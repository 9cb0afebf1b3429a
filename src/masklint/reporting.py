# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting of normalised linter findings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

HEADER_STYLE: Final[str] = "bold cyan underline"


def format_header(qualified_name: str, *, emphasize: bool) -> Text:
    """Return the header line announcing findings for ``qualified_name``.

    Args:
        qualified_name: Space-joined command chain.
        emphasize: Apply :data:`HEADER_STYLE` when ``True``.

    Returns:
        Text: Renderable header.
    """

    header = Text(qualified_name)
    if emphasize:
        header.stylize(HEADER_STYLE)
    return header


@dataclass(slots=True)
class Reporter:
    """Print findings per command in traversal order."""

    console: Console
    emphasize: bool = False

    def report(self, qualified_name: str, findings: str) -> None:
        """Print ``findings`` under a header; commands without findings stay silent."""

        if not findings:
            return
        self.console.print(format_header(qualified_name, emphasize=self.emphasize))
        # Linter output may contain square brackets; keep it out of markup parsing.
        self.console.print(Text(findings))
        self.console.print()


__all__ = ["HEADER_STYLE", "Reporter", "format_header"]
