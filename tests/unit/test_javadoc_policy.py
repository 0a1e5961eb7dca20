"""Unit tests reproducing javac doc comment extraction with the javadoc preset."""

from __future__ import annotations

from pathlib import Path

import pytest

from doccomment import JAVADOC_POLICY, CommentNormalizer, normalize
from doccomment.golden import load_golden_suite


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/**\n     * Totality */", " Totality "),
        ("/** \t \n     * Totality\n     */", " Totality\n"),
        ("/**\n     * tail */", " tail "),
        ("/**\n   ****/", ""),
        ("/**\n     */", ""),
        ("/**   Totality */", "Totality "),
        ("/** Totality \n     */", "Totality \n"),
    ],
)
def test_javadoc_policy_matches_javac_extraction(raw: str, expected: str) -> None:
    """Spaces after the asterisk run are content and a blank first line is dropped."""

    assert normalize(raw, JAVADOC_POLICY) == expected


def test_javadoc_policy_report_flags_dropped_first_line() -> None:
    """Dropping a blank first line is visible in the report."""

    report = CommentNormalizer(JAVADOC_POLICY).normalize_with_report("/**\n * x\n */")

    assert report.text == " x\n"
    assert report.dropped_first_line is True
    assert report.collapsed_final_line is True
    assert report.retained_line_count == 1


def test_javadoc_golden_fixture_passes_under_its_declared_policy(
    javadoc_golden_fixture_path: Path,
) -> None:
    """Every case in the javac fixture normalizes to its expected text."""

    suite = load_golden_suite(javadoc_golden_fixture_path)
    assert suite.config is not None
    normalizer = CommentNormalizer(suite.config.resolved_policy())

    for case in suite.cases:
        assert normalizer.normalize(case.raw) == case.expected, case.name
