"""Unit tests for null-address precondition guards."""

from __future__ import annotations

import pytest

from doccomment.errors import NullAddressError
from doccomment.guards import (
    NULL_ADDRESS,
    OPERATION_GET_UTF8_STRING,
    OPERATION_INVOKE_DOWNCALL,
    OPERATION_LINK_DOWNCALL,
    OPERATION_SET_UTF8_STRING,
    check_address,
    require_address,
)


@pytest.mark.parametrize(
    "operation",
    [
        OPERATION_LINK_DOWNCALL,
        OPERATION_INVOKE_DOWNCALL,
        OPERATION_GET_UTF8_STRING,
        OPERATION_SET_UTF8_STRING,
    ],
)
def test_require_address_rejects_null_for_every_operation(operation: str) -> None:
    """The null sentinel fails with an `IllegalArgument`-class error."""

    with pytest.raises(ValueError, match="address is NULL") as exc_info:
        require_address(NULL_ADDRESS, operation)

    assert isinstance(exc_info.value, NullAddressError)
    assert exc_info.value.operation == operation


def test_require_address_returns_valid_address_unchanged() -> None:
    """Non-null addresses pass through."""

    assert require_address(0x7FFF_0000, OPERATION_LINK_DOWNCALL) == 0x7FFF_0000


@pytest.mark.parametrize(
    ("address", "failure"),
    [
        (None, "address must be an integer, got `NoneType`"),
        (False, "address must be an integer, got `bool`"),
        ("0x10", "address must be an integer, got `str`"),
        (-8, "address is negative"),
        (0, "address is NULL"),
    ],
)
def test_check_address_returns_tagged_failure(address: object, failure: str) -> None:
    """Invalid handles produce a tagged failure instead of raising."""

    check = check_address(address, OPERATION_GET_UTF8_STRING)

    assert check.ok is False
    assert check.failure == failure
    assert check.operation == OPERATION_GET_UTF8_STRING


def test_check_address_accepts_positive_integer() -> None:
    """Positive integers are valid addresses."""

    check = check_address(16, OPERATION_SET_UTF8_STRING)

    assert check.ok is True
    assert check.failure is None
