"""Comment delimiter stripping and positional line tagging.

Responsibilities:
- Validate and remove the `/**` opening and `*/` closing delimiters.
- Split the interior on line terminators and tag every line with the
  position that selects its stripping rule.
"""

from __future__ import annotations

import re

from ..errors import InvalidCommentFormat
from ..models.datatypes import LinePosition, TaggedLine

OPENING_DELIMITER = "/**"
CLOSING_DELIMITER = "*/"

_LINE_TERMINATOR_RE = re.compile(r"\r\n|\r|\n")


def strip_delimiters(raw: str) -> str:
    """Return the comment interior between the opening and closing delimiters.

    Raises:
        InvalidCommentFormat: If either delimiter is missing or the two overlap
            (`/**/`).
    """

    if not isinstance(raw, str):
        raise InvalidCommentFormat(f"expected text, got `{type(raw).__name__}`")
    if not raw.startswith(OPENING_DELIMITER):
        raise InvalidCommentFormat(f"missing opening delimiter `{OPENING_DELIMITER}`", raw)
    if not raw.endswith(CLOSING_DELIMITER):
        raise InvalidCommentFormat(f"missing closing delimiter `{CLOSING_DELIMITER}`", raw)
    if len(raw) < len(OPENING_DELIMITER) + len(CLOSING_DELIMITER):
        raise InvalidCommentFormat("opening and closing delimiters overlap", raw)
    return raw[len(OPENING_DELIMITER) : len(raw) - len(CLOSING_DELIMITER)]


def split_tagged_lines(interior: str) -> tuple[TaggedLine, ...]:
    """Split a comment interior into lines tagged First/Interior/Last or Only.

    `\\r\\n`, `\\r`, and `\\n` each count as exactly one line boundary.
    """

    pieces = _LINE_TERMINATOR_RE.split(interior)
    if len(pieces) == 1:
        return (TaggedLine(index=0, position=LinePosition.ONLY, text=pieces[0]),)

    last_index = len(pieces) - 1
    tagged: list[TaggedLine] = []
    for index, text in enumerate(pieces):
        if index == 0:
            position = LinePosition.FIRST
        elif index == last_index:
            position = LinePosition.LAST
        else:
            position = LinePosition.INTERIOR
        tagged.append(TaggedLine(index=index, position=position, text=text))
    return tuple(tagged)
