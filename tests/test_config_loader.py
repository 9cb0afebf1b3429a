# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from masklint.config import DEFAULT_MASKFILE, Config, ConfigError, load_config


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)

    assert cfg == Config()
    assert cfg.maskfile == Path(DEFAULT_MASKFILE)
    assert cfg.color is None
    assert cfg.emoji is True


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "demo"

[tool.masklint]
maskfile = "docs/tasks.md"
emoji = false
""".strip(),
        encoding="utf-8",
    )

    cfg = load_config(tmp_path)

    assert cfg.maskfile == tmp_path / "docs" / "tasks.md"
    assert cfg.emoji is False


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.masklint]\ncolor = true\ndebug = true\n", encoding="utf-8")
    (tmp_path / ".masklint.toml").write_text("color = false\n", encoding="utf-8")

    cfg = load_config(tmp_path)

    assert cfg.color is False
    assert cfg.debug is True


def test_cli_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".masklint.toml").write_text('maskfile = "/abs/maskfile.md"\nemoji = false\n', encoding="utf-8")

    cfg = load_config(tmp_path, overrides={"maskfile": Path("other.md"), "emoji": None})

    assert cfg.maskfile == Path("other.md")
    assert cfg.emoji is False


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".masklint.toml").write_text("jobs = 4\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path)


def test_malformed_toml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".masklint.toml").write_text("color = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to read configuration"):
        load_config(tmp_path)


def test_trace_names_contributing_sources(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    (tmp_path / ".masklint.toml").write_text("emoji = false\n", encoding="utf-8")
    messages: list[str] = []

    load_config(tmp_path, trace=messages.append)

    assert messages == [
        "config source=Built-in defaults",
        f"config source=TOML configuration at {tmp_path / '.masklint.toml'}",
    ]


def test_trace_describes_pyproject_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.masklint]\ndebug = true\n", encoding="utf-8")
    messages: list[str] = []

    load_config(tmp_path, trace=messages.append)

    assert messages[-1] == f"config source=pyproject.toml ({tmp_path / 'pyproject.toml'})"
