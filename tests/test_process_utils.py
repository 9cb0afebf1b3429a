# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Unit tests for the subprocess wrapper."""

from __future__ import annotations

from pathlib import Path
from subprocess import CompletedProcess

import pytest

from masklint.process_utils import SubprocessExecutionError, run_command


def test_missing_executable_raises_file_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("masklint.process_utils.shutil.which", lambda name: None)

    with pytest.raises(FileNotFoundError, match="'shellcheck' was not found on PATH"):
        run_command(["shellcheck", "script.sh"], check=False, capture_output=True)


def test_empty_command_is_rejected() -> None:
    with pytest.raises(ValueError, match="at least one argument"):
        run_command([])


def test_resolved_executable_and_lenient_decoding(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_run(args, **kwargs):  # noqa: ANN001, ANN202
        seen["args"] = list(args)
        seen.update(kwargs)
        return CompletedProcess(args=args, returncode=1, stdout="finding\n", stderr="")

    monkeypatch.setattr("masklint.process_utils.shutil.which", lambda name: f"/opt/bin/{name}")
    monkeypatch.setattr("masklint.process_utils.subprocess.run", fake_run)

    completed = run_command(["ruff", "check", "x.py"], check=False, capture_output=True)

    assert completed.stdout == "finding\n"
    assert seen["args"] == ["/opt/bin/ruff", "check", "x.py"]
    assert seen["errors"] == "replace"
    assert seen["check"] is False


def test_check_raises_on_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    binary = tmp_path / "tool"

    def fake_run(args, **kwargs):  # noqa: ANN001, ANN202
        return CompletedProcess(args=args, returncode=2, stdout="", stderr="bad flag")

    monkeypatch.setattr("masklint.process_utils.subprocess.run", fake_run)

    with pytest.raises(SubprocessExecutionError, match="exited with status 2") as excinfo:
        run_command([str(binary), "--oops"], capture_output=True)

    assert excinfo.value.stderr == "bad flag"
    assert excinfo.value.command == (str(binary), "--oops")
