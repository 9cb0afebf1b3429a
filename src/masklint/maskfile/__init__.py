# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Maskfile data model and Markdown parser."""

from __future__ import annotations

from .models import CommandNode, Maskfile, Script
from .parser import load_maskfile, parse_maskfile

__all__ = ["CommandNode", "Maskfile", "Script", "load_maskfile", "parse_maskfile"]
