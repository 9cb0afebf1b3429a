# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the extraction or lint pipeline over a parsed maskfile."""

from __future__ import annotations

from pathlib import Path

from .maskfile.models import Maskfile
from .output import OutputContext, provision_output_dir
from .reporting import Reporter
from .walker import TraceCallback, walk_commands


def process_maskfile(
    maskfile: Maskfile,
    *,
    output_dir: Path | None = None,
    extract_only: bool = False,
    reporter: Reporter | None = None,
    trace: TraceCallback | None = None,
) -> list[Path]:
    """Materialise every script of ``maskfile`` and lint it unless ``extract_only``.

    Without ``output_dir`` the scripts are written to an ephemeral directory
    that is removed before this function returns, including when a command
    fails part-way through the walk.

    Args:
        maskfile: Parsed maskfile.
        output_dir: Persistent destination directory, created when missing.
        extract_only: Skip linting and reporting.
        reporter: Receives findings in traversal order.
        trace: Optional callback receiving debug messages.

    Returns:
        list[Path]: Files written, in traversal order.
    """

    with provision_output_dir(output_dir) as directory:
        if trace is not None:
            trace(f"output directory={directory} extract_only={extract_only}")
        context = OutputContext(directory=directory, extract_only=extract_only)
        return walk_commands(maskfile.commands, context, reporter=reporter, trace=trace)


__all__ = ["process_maskfile"]
