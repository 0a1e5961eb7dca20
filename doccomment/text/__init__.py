"""Comment text processing components.

This package provides delimiter stripping, positional line tagging,
decoration scanning, and the comment normalizer built on them.
"""

from .decoration import (
    DEFAULT_POLICY,
    JAVADOC_POLICY,
    POLICY_PRESETS,
    DecorationPolicy,
    is_decoration_only,
    resolve_policy_preset,
    scan_decoration,
    strip_leading_whitespace,
)
from .delimiters import (
    CLOSING_DELIMITER,
    OPENING_DELIMITER,
    split_tagged_lines,
    strip_delimiters,
)
from .normalizer import CommentNormalizer, normalize

__all__ = [
    "CLOSING_DELIMITER",
    "CommentNormalizer",
    "DEFAULT_POLICY",
    "DecorationPolicy",
    "JAVADOC_POLICY",
    "OPENING_DELIMITER",
    "POLICY_PRESETS",
    "is_decoration_only",
    "normalize",
    "resolve_policy_preset",
    "scan_decoration",
    "split_tagged_lines",
    "strip_delimiters",
    "strip_leading_whitespace",
]
