"""Shared pytest fixtures for the full doccomment test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import javadoc_golden_fixture_path as resolve_javadoc_golden_fixture_path


@pytest.fixture
def javadoc_golden_fixture_path() -> Path:
    """Provide the javac golden-case fixture path."""

    return resolve_javadoc_golden_fixture_path()


@pytest.fixture(autouse=True)
def _isolate_doccomment_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep `DOCCOMMENT_*` variables from the host environment out of tests."""

    for key in (
        "DOCCOMMENT_POLICY",
        "DOCCOMMENT_MAX_SPACES_AFTER_ASTERISK",
        "DOCCOMMENT_TAB_WIDTH",
        "DOCCOMMENT_DROP_BLANK_FIRST_LINE",
    ):
        monkeypatch.delenv(key, raising=False)
