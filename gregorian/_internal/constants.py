"""Internal constants for Gregorian.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Calendar adoption boundary: only years strictly after this are valid
GREGORIAN_START_YEAR: int = 1582

DAYS_IN_COMMON_YEAR: int = 365
DAYS_IN_LEAP_YEAR: int = 366
DAYS_IN_WEEK: int = 7
MONTHS_IN_YEAR: int = 12

# Leap-year rule intervals
LEAP_YEAR_INTERVAL: int = 4
CENTURY_INTERVAL: int = 100
LEAP_CENTURY_INTERVAL: int = LEAP_YEAR_INTERVAL * CENTURY_INTERVAL

# Each century moves the weekday by 5 (mod 7) within a 400-year cycle
CENTURY_WEEKDAY_SHIFT: int = 5

# Signed 64-bit range for day-count arithmetic
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Days in each month (non-leap year), indexed by ordinal 0-11
DAYS_IN_MONTH: tuple[int, ...] = (
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


def _accumulate(lengths: tuple[int, ...]) -> tuple[int, ...]:
    total = 0
    table = [total]
    for length in lengths:
        total += length
        table.append(total)
    return tuple(table)


# Days before each month in a non-leap year, indexed by ordinal 0-11.
# Index 12 is the 365 sentinel closing the table.
DAYS_BEFORE_MONTH: tuple[int, ...] = _accumulate(DAYS_IN_MONTH)


__all__ = [
    "GREGORIAN_START_YEAR",
    "DAYS_IN_COMMON_YEAR",
    "DAYS_IN_LEAP_YEAR",
    "DAYS_IN_WEEK",
    "MONTHS_IN_YEAR",
    "LEAP_YEAR_INTERVAL",
    "CENTURY_INTERVAL",
    "LEAP_CENTURY_INTERVAL",
    "CENTURY_WEEKDAY_SHIFT",
    "INT64_MIN",
    "INT64_MAX",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
]
