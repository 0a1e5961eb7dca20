"""Left-anchored decoration scanning for comment body lines.

Responsibilities:
- Hold the whitespace-run / asterisk-run / bounded-whitespace branching in one
  pure function shared by interior and final lines.
- Expose the tab and post-asterisk whitespace handling as a policy object.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models.datatypes import DecorationScan

HORIZONTAL_WHITESPACE = frozenset({" ", "\t"})
DECORATION_ASTERISK = "*"


@dataclass(frozen=True, slots=True)
class DecorationPolicy:
    """Configurable points of decoration stripping.

    Attributes:
        max_spaces_after_asterisk: Whitespace units consumed after an asterisk run.
        tab_width: `None` counts a tab as one whitespace unit; an integer expands
            a tab to the next multiple of `tab_width` columns before consumption.
        drop_blank_first_line: Omit a blank first line together with its line feed.
    """

    max_spaces_after_asterisk: int = 1
    tab_width: int | None = None
    drop_blank_first_line: bool = False

    def validate(self) -> None:
        """Validate policy values and raise `ValueError` on invalid settings."""

        if isinstance(self.max_spaces_after_asterisk, bool) or self.max_spaces_after_asterisk < 0:
            raise ValueError("`max_spaces_after_asterisk` must be a non-negative integer.")
        if self.tab_width is not None and (
            isinstance(self.tab_width, bool) or self.tab_width <= 0
        ):
            raise ValueError("`tab_width` must be a positive integer when set.")


DEFAULT_POLICY = DecorationPolicy()
JAVADOC_POLICY = DecorationPolicy(max_spaces_after_asterisk=0, drop_blank_first_line=True)

POLICY_PRESETS: dict[str, DecorationPolicy] = {
    "default": DEFAULT_POLICY,
    "javadoc": JAVADOC_POLICY,
}


def resolve_policy_preset(name: str) -> DecorationPolicy:
    """Return the named policy preset.

    Raises:
        ValueError: If the preset name is unknown.
    """

    key = name.strip().lower()
    try:
        return POLICY_PRESETS[key]
    except KeyError:
        supported = ", ".join(sorted(POLICY_PRESETS))
        raise ValueError(
            f"Unknown decoration policy `{name}`. Supported policies: {supported}."
        ) from None


def strip_leading_whitespace(line: str) -> str:
    """Remove leading spaces and tabs, keeping everything after them verbatim."""

    index = _skip_whitespace(line, 0)
    return line[index:]


def is_decoration_only(line: str) -> bool:
    """Return whether `line` holds nothing but spaces, tabs, and asterisks."""

    return all(
        character in HORIZONTAL_WHITESPACE or character == DECORATION_ASTERISK
        for character in line
    )


def scan_decoration(line: str, policy: DecorationPolicy = DEFAULT_POLICY) -> DecorationScan:
    """Scan leading decoration from an interior or final comment line.

    The scan consumes a whitespace run, then an asterisk run if present, then at
    most `policy.max_spaces_after_asterisk` whitespace units. Without an asterisk
    run only the leading whitespace is consumed.
    """

    star_start = _skip_whitespace(line, 0)
    index = star_start
    while index < len(line) and line[index] == DECORATION_ASTERISK:
        index += 1

    asterisks = index - star_start
    if asterisks == 0:
        return DecorationScan(prefix_length=star_start, content=line[star_start:])

    budget = policy.max_spaces_after_asterisk
    column = _visual_width(line[:index], policy.tab_width)
    leftover = ""
    while budget > 0 and index < len(line) and line[index] in HORIZONTAL_WHITESPACE:
        width = _character_width(line[index], column, policy.tab_width)
        index += 1
        column += width
        if width > budget:
            leftover = " " * (width - budget)
            break
        budget -= width

    return DecorationScan(
        prefix_length=index,
        content=leftover + line[index:],
        asterisks=asterisks,
    )


def _skip_whitespace(line: str, start: int) -> int:
    index = start
    while index < len(line) and line[index] in HORIZONTAL_WHITESPACE:
        index += 1
    return index


def _character_width(character: str, column: int, tab_width: int | None) -> int:
    """Return the number of columns `character` occupies at `column`."""

    if character == "\t" and tab_width is not None:
        return tab_width - (column % tab_width)
    return 1


def _visual_width(text: str, tab_width: int | None) -> int:
    column = 0
    for character in text:
        column += _character_width(character, column, tab_width)
    return column
