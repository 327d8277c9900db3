"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_py(tmp_path: Path) -> Callable[..., Path]:
    """Write a Python file under tmp_path and return its path."""

    def _write(content: str, name: str = "sample.py") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
