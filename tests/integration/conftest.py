"""Integration-test fixtures for CLI invocations."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_comment(tmp_path: Path):
    """Return a helper writing one raw comment to a temporary file."""

    def _write(raw: str, name: str = "comment.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(raw.encode("utf-8"))
        return path

    return _write
