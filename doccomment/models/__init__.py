"""Shared typed data models for doccomment.

This package contains dataclasses used across normalization modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    CaseOutcome,
    CommentNormalizationReport,
    DecorationScan,
    GoldenCase,
    GoldenReport,
    LinePosition,
    TaggedLine,
)

__all__ = [
    "CaseOutcome",
    "CommentNormalizationReport",
    "DecorationScan",
    "GoldenCase",
    "GoldenReport",
    "LinePosition",
    "TaggedLine",
]
