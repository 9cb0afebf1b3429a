# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Destination directory provisioning for materialised scripts."""

from __future__ import annotations

import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import OutputDirectoryError

TEMP_DIR_PREFIX: Final[str] = "masklint-"


@dataclass(slots=True, frozen=True)
class OutputContext:
    """Destination directory plus the extraction-only flag for a run."""

    directory: Path
    extract_only: bool = False


@contextmanager
def provision_output_dir(target: Path | None = None) -> Iterator[Path]:
    """Yield the directory that receives materialised scripts.

    When ``target`` is given it is created recursively and left in place.
    Otherwise an ephemeral directory is created and removed when the context
    exits, whether normally or through an exception.

    Args:
        target: Optional persistent output directory.

    Yields:
        Path: Directory to write scripts into.

    Raises:
        OutputDirectoryError: If the directory cannot be created.
    """

    if target is not None:
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(f"failed to create output directory {target}: {exc}") from exc
        yield target
        return

    try:
        scratch = tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX)
    except OSError as exc:
        raise OutputDirectoryError(f"failed to create temporary directory: {exc}") from exc
    with scratch as tmpdir:
        yield Path(tmpdir)


__all__ = ["OutputContext", "provision_output_dir"]
