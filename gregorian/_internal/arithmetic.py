"""Checked signed 64-bit arithmetic.

Python integers never overflow, so day-count arithmetic checks every
result against the signed 64-bit range and raises instead of growing
past it.

This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.constants import INT64_MAX, INT64_MIN
from gregorian.errors import ArithmeticOverflowError


def _check(value: int, operation: str) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise ArithmeticOverflowError(f"{operation} overflows a signed 64-bit integer")
    return value


def checked_int64(value: int) -> int:
    """Return value unchanged, raising if it lies outside the 64-bit range."""
    return _check(value, str(value))


def checked_add(a: int, b: int) -> int:
    """Return a + b, raising if the sum leaves the 64-bit range.

    Raises:
        ArithmeticOverflowError: If the sum does not fit.

    Examples:
        >>> checked_add(1, 2)
        3
        >>> checked_add(2**63 - 1, 1)
        Traceback (most recent call last):
        ...
        ArithmeticOverflowError: 9223372036854775807 + 1 overflows a signed 64-bit integer
    """
    return _check(a + b, f"{a} + {b}")


def checked_sub(a: int, b: int) -> int:
    """Return a - b, raising if the difference leaves the 64-bit range."""
    return _check(a - b, f"{a} - {b}")


def checked_mul(a: int, b: int) -> int:
    """Return a * b, raising if the product leaves the 64-bit range."""
    return _check(a * b, f"{a} * {b}")


def checked_increment(a: int) -> int:
    return checked_add(a, 1)


def checked_decrement(a: int) -> int:
    return checked_sub(a, 1)


def checked_negate(a: int) -> int:
    """Return -a; only INT64_MIN has no 64-bit negation."""
    return _check(-a, f"-({a})")


__all__ = [
    "checked_int64",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "checked_increment",
    "checked_decrement",
    "checked_negate",
]
