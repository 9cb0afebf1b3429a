# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess

import pytest

SAMPLE_MASKFILE = """# Project tasks

## build (target)

> Builds the project

~~~sh
echo "building $target"
~~~

## services

### services start

```bash
docker compose up
```

```bash
echo "ignored second block"
```

#### services start db

```py
import os
```

### services stop

Stops every service.

## docs

```lua
print("hi")
```
"""


@pytest.fixture
def sample_maskfile_text() -> str:
    """Return a maskfile exercising nesting, arguments and several executors."""
    return SAMPLE_MASKFILE


@pytest.fixture
def sample_maskfile(tmp_path: Path) -> Path:
    """Write :data:`SAMPLE_MASKFILE` to disk and return its path."""
    path = tmp_path / "maskfile.md"
    path.write_text(SAMPLE_MASKFILE, encoding="utf-8")
    return path


@dataclass(slots=True)
class FakeLinters:
    """Stand-in for ``run_command`` recording every linter invocation."""

    outputs: dict[str, Callable[[str], str]] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, args: Sequence[str], **kwargs: object) -> CompletedProcess[str]:
        argv = list(args)
        self.calls.append(argv)
        if argv[0] in self.missing:
            raise FileNotFoundError(f"Executable '{argv[0]}' was not found on PATH")
        render = self.outputs.get(argv[0])
        stdout = render(argv[-1]) if render is not None else ""
        return CompletedProcess(args=argv, returncode=1 if stdout else 0, stdout=stdout, stderr="")


@pytest.fixture
def fake_linters(monkeypatch: pytest.MonkeyPatch) -> FakeLinters:
    """Replace linter execution with a recording fake."""
    fake = FakeLinters()
    monkeypatch.setattr("masklint.handlers.run_command", fake)
    return fake
