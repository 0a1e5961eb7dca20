"""Core datatypes shared across doccomment modules.

Responsibilities:
- Represent immutable records exchanged between splitting, scanning, and
  normalization steps.
- Provide explicit typing for golden-case verification results.

Key types:
- `LinePosition`, `TaggedLine`, `DecorationScan`,
  `CommentNormalizationReport`, `GoldenCase`, `CaseOutcome`, and `GoldenReport`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LinePosition(str, Enum):
    """Position of a line inside the comment interior.

    The position decides which stripping rule applies to the line.
    """

    ONLY = "only"
    FIRST = "first"
    INTERIOR = "interior"
    LAST = "last"


@dataclass(frozen=True, slots=True)
class TaggedLine:
    """One line of the comment interior tagged with its position.

    Attributes:
        index: 0-based line index inside the interior.
        position: Which stripping rule applies.
        text: Line text without its terminator.
    """

    index: int
    position: LinePosition
    text: str

    @property
    def terminated(self) -> bool:
        """Return whether a line terminator followed this line in the source."""

        return self.position in (LinePosition.FIRST, LinePosition.INTERIOR)


@dataclass(frozen=True, slots=True)
class DecorationScan:
    """Result of a left-anchored decoration scan over one line.

    Attributes:
        prefix_length: Number of source characters consumed as decoration.
        content: Retained text. Equal to `line[prefix_length:]` unless a tab was
            only partially consumed, in which case its leftover columns are
            prepended as spaces.
        asterisks: Length of the consumed asterisk run, `0` when none was found.
    """

    prefix_length: int
    content: str
    asterisks: int = 0

    @property
    def is_blank(self) -> bool:
        """Return whether nothing but decoration was present."""

        return not self.content


@dataclass(frozen=True, slots=True)
class CommentNormalizationReport:
    """Normalized comment text with line-level diagnostics."""

    text: str
    line_count: int
    retained_line_count: int
    collapsed_final_line: bool
    dropped_first_line: bool = False


@dataclass(frozen=True, slots=True)
class GoldenCase:
    """A raw comment paired with the documentation text it must produce."""

    name: str
    raw: str
    expected: str


@dataclass(frozen=True, slots=True)
class CaseOutcome:
    """Verification result for one golden case."""

    case: GoldenCase
    actual: str | None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.case.expected

    @property
    def length_mismatch(self) -> bool:
        """Return whether actual and expected texts differ in length."""

        if self.actual is None:
            return False
        return len(self.actual) != len(self.case.expected)


@dataclass(frozen=True, slots=True)
class GoldenReport:
    """Aggregated golden-case verification results in input order."""

    outcomes: tuple[CaseOutcome, ...]

    @property
    def failures(self) -> tuple[CaseOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.passed)

    @property
    def passed(self) -> bool:
        return not self.failures
