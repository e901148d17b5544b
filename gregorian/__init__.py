"""Gregorian: a Gregorian calendar date value type.

Gregorian validates (year, month, day) triples against the Gregorian
calendar from 1583 onward and computes weekdays, days of the year,
day offsets with month and year rollover, and distances between dates.

Core Types:
    GregorianDate: Immutable, validated calendar date

Units:
    Month: The twelve months with their lengths and accumulated days
    Weekday: Day of the week, Sunday first

Functions:
    is_leap_year: Gregorian leap-year rule for years after 1582

Exceptions:
    GregorianError: Base exception
    ValidationError: Base for invalid input values
    InvalidDateError: Invalid (year, month, day) combination
    InvalidMonthError: Month number outside 1-12
    InvalidWeekdayIndexError: Weekday index outside 0-6
    InvalidYearError: Leap-year query for a year before 1583
    InvalidOffsetError: Negative offset for future/past dates
    ArithmeticOverflowError: Day count beyond the 64-bit range

Example:
    >>> from gregorian import GregorianDate, Month
    >>> d = GregorianDate.of(2000, Month.DECEMBER, 15)
    >>> d.day_of_week()
    <Weekday.FRIDAY: 5>
    >>> d.add_days(17)
    GregorianDate(2001, 1, 1)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from gregorian.core.date import GregorianDate

# Units
from gregorian.units.month import Month
from gregorian.units.weekday import Weekday

# Functions
from gregorian._internal.calendar import is_leap_year

# Exceptions
from gregorian.errors import (
    ArithmeticOverflowError,
    GregorianError,
    InvalidDateError,
    InvalidMonthError,
    InvalidOffsetError,
    InvalidWeekdayIndexError,
    InvalidYearError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "GregorianDate",
    # Units
    "Month",
    "Weekday",
    # Functions
    "is_leap_year",
    # Exceptions
    "GregorianError",
    "ValidationError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidWeekdayIndexError",
    "InvalidYearError",
    "InvalidOffsetError",
    "ArithmeticOverflowError",
]
