# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for writing scripts to the output directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from masklint.errors import MaterializationError, ScriptCollisionError
from masklint.handlers import LanguageHandler
from masklint.maskfile import Script
from masklint.materialize import materialize_script, script_file_name


def test_script_file_name_replaces_spaces() -> None:
    assert script_file_name("services start db", LanguageHandler.RUFF) == "services_start_db.py"
    assert script_file_name("docs", LanguageHandler.CATCHALL) == "docs"


def test_materialize_writes_transformed_content(tmp_path: Path) -> None:
    script = Script(executor="bash", source="echo hi\n")

    path = materialize_script(LanguageHandler.SHELLCHECK, script, "services start", tmp_path)

    assert path == tmp_path / "services_start.sh"
    assert path.read_text(encoding="utf-8") == "#!/bin/usr/env bash\necho hi\n"


def test_materialize_writes_line_separators_verbatim(tmp_path: Path) -> None:
    script = Script(executor="py", source="s = 'a\u2028b\r'\n\x0c\n")

    path = materialize_script(LanguageHandler.RUFF, script, "form", tmp_path)

    assert path.read_bytes() == script.source.encode("utf-8")


def test_materialize_refuses_to_overwrite(tmp_path: Path) -> None:
    existing = tmp_path / "build.py"
    existing.write_text("original\n", encoding="utf-8")

    with pytest.raises(ScriptCollisionError) as excinfo:
        materialize_script(LanguageHandler.RUFF, Script(executor="py", source="new\n"), "build", tmp_path)

    assert excinfo.value.path == existing
    assert excinfo.value.qualified_name == "build"
    assert existing.read_text(encoding="utf-8") == "original\n"


def test_materialize_reports_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(MaterializationError) as excinfo:
        materialize_script(LanguageHandler.CATCHALL, Script(executor="", source=""), "x", tmp_path / "absent")

    assert not isinstance(excinfo.value, ScriptCollisionError)
