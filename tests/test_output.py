# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for output directory provisioning."""

from __future__ import annotations

from pathlib import Path

import pytest

from masklint.errors import OutputDirectoryError
from masklint.output import provision_output_dir


def test_persistent_directory_is_created_recursively_and_kept(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"

    with provision_output_dir(target) as directory:
        assert directory == target
        assert directory.is_dir()

    assert target.is_dir()


def test_ephemeral_directory_is_removed_after_use() -> None:
    with provision_output_dir() as directory:
        (directory / "build.sh").write_text("echo\n", encoding="utf-8")
        assert directory.is_dir()

    assert not directory.exists()


def test_ephemeral_directory_is_removed_on_error() -> None:
    captured: list[Path] = []
    with pytest.raises(RuntimeError, match="boom"):
        with provision_output_dir() as directory:
            captured.append(directory)
            raise RuntimeError("boom")

    assert not captured[0].exists()


def test_unusable_target_raises_output_directory_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OutputDirectoryError):
        with provision_output_dir(blocker):
            pass
