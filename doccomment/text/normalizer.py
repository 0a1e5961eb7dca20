"""Documentation comment normalization.

Responsibilities:
- Convert a raw `/** ... */` comment into the documentation text associated
  with the following declaration.
- Keep normalization pure and deterministic for a given decoration policy.
"""

from __future__ import annotations

from typing import Iterable

from ..models.datatypes import CommentNormalizationReport, LinePosition, TaggedLine
from .decoration import (
    DEFAULT_POLICY,
    DecorationPolicy,
    is_decoration_only,
    scan_decoration,
    strip_leading_whitespace,
)
from .delimiters import split_tagged_lines, strip_delimiters


class CommentNormalizer:
    """Normalize raw documentation comments under one decoration policy.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, policy: DecorationPolicy | None = None) -> None:
        """Initialize with a validated decoration policy."""

        self.policy = policy or DEFAULT_POLICY
        self.policy.validate()

    def normalize(self, raw: str) -> str:
        """Return normalized documentation text for one raw comment.

        Raises:
            InvalidCommentFormat: If the comment delimiters are missing.
        """

        return self.normalize_with_report(raw).text

    def normalize_all(self, raws: Iterable[str]) -> list[str]:
        """Normalize several comments, preserving input order."""

        return [self.normalize(raw) for raw in raws]

    def normalize_with_report(self, raw: str) -> CommentNormalizationReport:
        """Normalize one raw comment and return text with line diagnostics."""

        lines = split_tagged_lines(strip_delimiters(raw))

        pieces: list[str] = []
        retained = 0
        collapsed_final_line = False
        dropped_first_line = False
        has_content = False
        for line in lines:
            if line.position is LinePosition.LAST and is_decoration_only(line.text):
                collapsed_final_line = True
                continue
            content = self._line_content(line)
            if (
                line.position is LinePosition.FIRST
                and not content
                and self.policy.drop_blank_first_line
            ):
                dropped_first_line = True
                continue

            retained += 1
            has_content = has_content or bool(content)
            pieces.append(content + "\n" if line.terminated else content)

        return CommentNormalizationReport(
            text="".join(pieces) if has_content else "",
            line_count=len(lines),
            retained_line_count=retained if has_content else 0,
            collapsed_final_line=collapsed_final_line,
            dropped_first_line=dropped_first_line,
        )

    def _line_content(self, line: TaggedLine) -> str:
        """Apply the stripping rule selected by the line position."""

        if line.position in (LinePosition.ONLY, LinePosition.FIRST):
            return strip_leading_whitespace(line.text)
        return scan_decoration(line.text, self.policy).content


def normalize(raw: str, policy: DecorationPolicy | None = None) -> str:
    """Normalize one raw documentation comment.

    Args:
        raw: Comment text starting with `/**` and ending with `*/`.
        policy: Decoration policy, `DEFAULT_POLICY` when omitted.

    Returns:
        Content lines joined by `\\n`; `""` when every line is empty or omitted.

    Raises:
        InvalidCommentFormat: If either delimiter is missing.
    """

    return CommentNormalizer(policy).normalize(raw)
