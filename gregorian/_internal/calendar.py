"""Calendar utilities for Gregorian.

This module provides internal functions for calendar calculations:
the leap-year rule, month and year lengths, year-day conversions, the
day count since the year-zero epoch and the Gauss day-of-week index.

Every function here is defined only for years after 1582 and raises
InvalidYearError otherwise.

This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.arithmetic import checked_add, checked_mul
from gregorian._internal.constants import (
    CENTURY_INTERVAL,
    CENTURY_WEEKDAY_SHIFT,
    DAYS_IN_COMMON_YEAR,
    DAYS_IN_WEEK,
    LEAP_CENTURY_INTERVAL,
    LEAP_YEAR_INTERVAL,
)
from gregorian._internal.validation import validate_year
from gregorian.errors import InvalidDateError
from gregorian.units.month import Month


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (must be after 1582).

    Returns:
        True if the year is a leap year.

    Raises:
        InvalidYearError: If year is 1582 or earlier.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(1904)
        True
    """
    validate_year(year)
    return (
        year % LEAP_YEAR_INTERVAL == 0 and year % CENTURY_INTERVAL != 0
    ) or year % LEAP_CENTURY_INTERVAL == 0


def leap_day_count(year: int) -> int:
    """Return 1 for a leap year, 0 otherwise."""
    return 1 if is_leap_year(year) else 0


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return DAYS_IN_COMMON_YEAR + leap_day_count(year)


def days_in_month(month: Month, year: int) -> int:
    """Return the number of days in a given month.

    Args:
        month: The month.
        year: The year (needed for February in leap years).

    Returns:
        Number of days in the month.
    """
    if month is Month.FEBRUARY:
        return month.length_in_days + leap_day_count(year)
    return month.length_in_days


def year_day(year: int, month: Month, day: int) -> int:
    """Return the 1-based day of the year for a date.

    Months after February are pushed forward by the leap day.

    Examples:
        >>> year_day(1843, Month.DECEMBER, 31)
        365
        >>> year_day(1600, Month.JULY, 15)
        197
    """
    result = month.accumulated_days_before + day
    if month.is_after_february:
        result += leap_day_count(year)
    return result


def month_day_from_year_day(year: int, ordinal: int) -> tuple[Month, int]:
    """Convert a day of the year back to month and day.

    Scans backward from December until the ordinal falls inside the
    candidate month. The leap adjustment only applies while the
    candidate is after February.

    Args:
        year: The year (for leap year calculation).
        ordinal: Day of year (1-365, or 1-366 in a leap year).

    Returns:
        Tuple of (month, day).

    Raises:
        InvalidDateError: If ordinal is outside the year.
    """
    total = days_in_year(year)
    if ordinal < 1 or ordinal > total:
        raise InvalidDateError(
            f"year day must be between 1 and {total} for {year}, got {ordinal}"
        )

    month = Month.DECEMBER
    leap = leap_day_count(year)
    while ordinal <= month.accumulated_days_before + leap:
        month = month.previous()
        if not month.is_after_february:
            leap = 0
    return month, ordinal - month.accumulated_days_before - leap


def leap_days_through(year: int) -> int:
    """Return the number of leap days in years 1 through ``year``."""
    return (
        year // LEAP_YEAR_INTERVAL
        - year // CENTURY_INTERVAL
        + year // LEAP_CENTURY_INTERVAL
    )


def days_since_epoch(year: int, month: Month, day: int) -> int:
    """Return the number of days from the year-zero epoch to a date.

    Year zero counts as a full leap year of 366 days, then every
    elapsed year adds 365 plus its leap days.

    Raises:
        ArithmeticOverflowError: If the count leaves the 64-bit range.
    """
    positive = 1 if year > 0 else 0
    elapsed = year - positive
    total = positive * (DAYS_IN_COMMON_YEAR + 1)
    total = checked_add(total, checked_mul(elapsed, DAYS_IN_COMMON_YEAR))
    total = checked_add(total, leap_days_through(elapsed))
    return checked_add(total, year_day(year, month, day))


def weekday_index(year: int, month: Month, day: int) -> int:
    """Return the day-of-week index (0=Sunday) using Gauss's method.

    January and February count as part of the previous year so that
    the leap day falls at the end of the counted year. Python's // and
    % floor toward negative infinity, which the formula relies on.

    Examples:
        >>> weekday_index(2000, Month.DECEMBER, 15)  # Friday
        5
    """
    counted_year = year if month.is_after_february else year - 1
    century = counted_year // CENTURY_INTERVAL
    century_offset = CENTURY_WEEKDAY_SHIFT * (century % LEAP_YEAR_INTERVAL)

    remainder = counted_year % CENTURY_INTERVAL
    remainder_offset = remainder + remainder // LEAP_YEAR_INTERVAL

    month_offset = month.accumulated_days_before
    if month.is_after_february:
        month_offset -= 1

    return (day + century_offset + month_offset + remainder_offset) % DAYS_IN_WEEK


__all__ = [
    "is_leap_year",
    "leap_day_count",
    "days_in_year",
    "days_in_month",
    "year_day",
    "month_day_from_year_day",
    "leap_days_through",
    "days_since_epoch",
    "weekday_index",
]
