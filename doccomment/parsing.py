"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


_BOOLEAN_TOKENS: dict[str, bool] = {
    **dict.fromkeys(("1", "true", "yes", "on"), True),
    **dict.fromkeys(("0", "false", "no", "off"), False),
}


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when it is missing or blank."""

    text = "" if value is None else str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse `true`/`false`, `1`/`0`, `yes`/`no`, or `on`/`off` case-insensitively.

    Real booleans pass through; anything else, blanks included, yields `None`.
    """

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    return None if token is None else _BOOLEAN_TOKENS.get(token.lower())


def parse_bounded_int(value: object, field_name: str, minimum: int) -> int:
    """Parse an integer token that must be at least `minimum`.

    Args:
        value: Integer or textual integer value.
        field_name: Field name for an actionable validation error message.
        minimum: Smallest accepted value.

    Raises:
        ValueError: If the value is not an integer or is below `minimum`.
    """

    if minimum == 0:
        expectation = "a non-negative integer"
    elif minimum == 1:
        expectation = "a positive integer"
    else:
        expectation = f"an integer >= {minimum}"
    message = f"`{field_name}` must be {expectation}."

    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(message)
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(message) from exc

    if parsed < minimum:
        raise ValueError(message)
    return parsed
