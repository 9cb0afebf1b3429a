# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write embedded scripts to uniquely named files."""

from __future__ import annotations

from pathlib import Path

from .errors import MaterializationError, ScriptCollisionError
from .handlers import LanguageHandler
from .maskfile.models import Script


def script_file_name(qualified_name: str, handler: LanguageHandler) -> str:
    """Return the file name used for the script of ``qualified_name``."""

    return f"{qualified_name.replace(' ', '_')}{handler.file_extension}"


def materialize_script(
    handler: LanguageHandler,
    script: Script,
    qualified_name: str,
    directory: Path,
) -> Path:
    """Create the script file for ``qualified_name`` inside ``directory``.

    The file is opened in exclusive-create mode so an existing file is never
    overwritten or appended to.

    Args:
        handler: Handler providing the file extension and content transform.
        script: Script whose source is written.
        qualified_name: Space-joined command chain naming the script.
        directory: Output directory receiving the file.

    Returns:
        Path: Location of the written file.

    Raises:
        ScriptCollisionError: If a file with the same name already exists.
        MaterializationError: If the file cannot be created or written.
    """

    path = directory / script_file_name(qualified_name, handler)
    try:
        with path.open("x", encoding="utf-8", newline="") as handle:
            handle.write(handler.transform_content(script))
    except FileExistsError as exc:
        raise ScriptCollisionError(path, qualified_name) from exc
    except OSError as exc:
        raise MaterializationError(f"failed to write {path}: {exc}") from exc
    return path


__all__ = ["materialize_script", "script_file_name"]
