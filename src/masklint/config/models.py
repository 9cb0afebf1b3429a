# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic configuration model."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MASKFILE: Final[str] = "maskfile.md"


class Config(BaseModel):
    """Settings shared by the ``run`` and ``dump`` commands."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    maskfile: Path = Field(default_factory=lambda: Path(DEFAULT_MASKFILE))
    color: bool | None = None
    emoji: bool = True
    debug: bool = False


__all__ = ["DEFAULT_MASKFILE", "Config"]
