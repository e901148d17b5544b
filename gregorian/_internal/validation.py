"""Validation utilities for Gregorian.

This module provides the date validity predicate and the helpers that
turn a failed check into the matching exception.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregorian._internal.constants import GREGORIAN_START_YEAR, INT64_MAX
from gregorian.errors import InvalidDateError, InvalidOffsetError, InvalidYearError

if TYPE_CHECKING:
    from gregorian.units.month import Month


def is_int(value: object) -> bool:
    """Return True for ints, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_year(year: int) -> bool:
    """Return True if year lies after 1582 and fits in 64 bits."""
    return GREGORIAN_START_YEAR < year <= INT64_MAX


def validate_year(year: int) -> None:
    """Validate that a year belongs to the Gregorian calendar.

    Args:
        year: The year to validate.

    Raises:
        InvalidYearError: If year is 1582 or earlier, or exceeds 2**63 - 1.
    """
    if not is_valid_year(year):
        raise InvalidYearError(
            f"year must be after {GREGORIAN_START_YEAR} and at most {INT64_MAX}, "
            f"got {year}"
        )


def is_valid(year: int, month: Month, day: int) -> bool:
    """Return True if (year, month, day) is a valid Gregorian date.

    Never raises: a year outside the calendar, or a year or day that is
    not an int, just yields False. For a Month argument the result is
    True exactly when GregorianDate(year, month, day) would succeed.

    Examples:
        >>> from gregorian.units.month import Month
        >>> is_valid(2024, Month.FEBRUARY, 29)
        True
        >>> is_valid(1900, Month.FEBRUARY, 29)
        False
        >>> is_valid(1582, Month.DECEMBER, 31)
        False
    """
    from gregorian._internal.calendar import days_in_month
    from gregorian.units.month import Month

    if not isinstance(month, Month) or not is_int(year) or not is_int(day):
        return False
    if not is_valid_year(year):
        return False
    return 1 <= day <= days_in_month(month, year)


def validate_date(year: int, month: Month, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        InvalidDateError: If the date is invalid.
    """
    from gregorian._internal.calendar import days_in_month

    if not is_valid_year(year):
        raise InvalidDateError(
            f"year must be after {GREGORIAN_START_YEAR} and at most {INT64_MAX}, "
            f"got {year}"
        )

    max_day = days_in_month(month, year)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year}-{month.value:02d}, "
            f"got {day}"
        )


def validate_offset(offset: int) -> None:
    """Validate that a day offset is not negative.

    Raises:
        InvalidOffsetError: If offset is less than zero.
    """
    if offset < 0:
        raise InvalidOffsetError(f"offset must not be negative, got {offset}")


__all__ = [
    "is_int",
    "is_valid_year",
    "validate_year",
    "is_valid",
    "validate_date",
    "validate_offset",
]
