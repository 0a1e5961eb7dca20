"""Null-address precondition guards for native-linking entry points.

Any API that accepts an address-like handle for linking or memory access must
reject the null sentinel before a native call or dereference is attempted.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import NullAddressError

NULL_ADDRESS = 0

OPERATION_LINK_DOWNCALL = "link_downcall"
OPERATION_INVOKE_DOWNCALL = "invoke_downcall"
OPERATION_GET_UTF8_STRING = "get_utf8_string"
OPERATION_SET_UTF8_STRING = "set_utf8_string"


@dataclass(frozen=True, slots=True)
class AddressCheck:
    """Tagged outcome of an address precondition check."""

    address: object
    operation: str
    failure: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def check_address(address: object, operation: str) -> AddressCheck:
    """Check an address handle without raising."""

    if isinstance(address, bool) or not isinstance(address, int):
        return AddressCheck(
            address=address,
            operation=operation,
            failure=f"address must be an integer, got `{type(address).__name__}`",
        )
    if address == NULL_ADDRESS:
        return AddressCheck(address=address, operation=operation, failure="address is NULL")
    if address < 0:
        return AddressCheck(address=address, operation=operation, failure="address is negative")
    return AddressCheck(address=address, operation=operation)


def require_address(address: object, operation: str) -> int:
    """Return `address` unchanged or raise `NullAddressError` for invalid handles."""

    check = check_address(address, operation)
    if check.failure is not None:
        raise NullAddressError(operation, check.failure)
    return address  # type: ignore[return-value]
