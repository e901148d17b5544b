"""Gregorian exception hierarchy.

All Gregorian-specific exceptions inherit from GregorianError. Every
error kind is raised synchronously where the violation is detected and
is never recovered internally.
"""

from __future__ import annotations


class GregorianError(Exception):
    """Base exception for all Gregorian errors."""

    pass


class ValidationError(GregorianError):
    """Invalid input values.

    Base class for every error raised because a caller supplied a value
    outside the domain of an operation.
    """

    pass


class InvalidDateError(ValidationError):
    """A (year, month, day) combination is not a valid Gregorian date.

    Examples:
        - Day 0, or day 30 in February
        - Feb 29 in a non-leap year
        - Any year at or before 1582
    """

    pass


class InvalidMonthError(ValidationError):
    """A raw month number outside 1-12 was supplied."""

    pass


class InvalidWeekdayIndexError(ValidationError):
    """A raw weekday index outside 0-6 was supplied."""

    pass


class InvalidYearError(ValidationError):
    """A leap-year query was made for a year at or before 1582."""

    pass


class InvalidOffsetError(ValidationError):
    """A negative offset was given to future_date() or past_date()."""

    pass


class ArithmeticOverflowError(GregorianError):
    """Day-count arithmetic exceeded the signed 64-bit range.

    Examples:
        - Adding an offset that pushes the year past 2**63 - 1
        - Adding 2**63 - 1 days to any date
    """

    pass


__all__ = [
    "GregorianError",
    "ValidationError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidWeekdayIndexError",
    "InvalidYearError",
    "InvalidOffsetError",
    "ArithmeticOverflowError",
]
