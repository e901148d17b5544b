"""Month enumeration for the Gregorian calendar.

This module provides the Month enum, the catalog of the twelve months
with their non-leap lengths and the number of days accumulated before
each one.
"""

from __future__ import annotations

from enum import Enum

from gregorian._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    MONTHS_IN_YEAR,
)
from gregorian.errors import InvalidMonthError


class Month(Enum):
    """Calendar month, numbered 1 (January) through 12 (December).

    Lengths are those of a common year; callers that care about
    February 29 adjust for leap years themselves (see
    gregorian._internal.calendar.days_in_month).

    Examples:
        >>> Month.FEBRUARY.length_in_days
        28

        >>> Month.MARCH.accumulated_days_before
        59

        >>> Month.from_number(12)
        <Month.DECEMBER: 12>

        >>> Month.DECEMBER.next()
        <Month.JANUARY: 1>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Return the month with the given number.

        Args:
            number: The month number (1-12).

        Returns:
            The matching Month.

        Raises:
            InvalidMonthError: If number is outside 1-12.

        Examples:
            >>> Month.from_number(1)
            <Month.JANUARY: 1>
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidMonthError(f"month must be an int, got {type(number).__name__}")
        if number < 1 or number > MONTHS_IN_YEAR:
            raise InvalidMonthError(
                f"month must be between 1 and {MONTHS_IN_YEAR}, got {number}"
            )
        return _MONTHS[number - 1]

    @staticmethod
    def months_in_year() -> int:
        return MONTHS_IN_YEAR

    @property
    def ordinal(self) -> int:
        """Zero-based position of this month (January is 0)."""
        return self.value - 1

    @property
    def length_in_days(self) -> int:
        """Return the length of this month in a common year.

        Returns:
            28 for February, otherwise 30 or 31.
        """
        return DAYS_IN_MONTH[self.ordinal]

    @property
    def accumulated_days_before(self) -> int:
        """Return the days in a common year before the first of this month.

        Examples:
            >>> Month.JANUARY.accumulated_days_before
            0
            >>> Month.DECEMBER.accumulated_days_before
            334
        """
        return DAYS_BEFORE_MONTH[self.ordinal]

    @property
    def is_after_february(self) -> bool:
        """Return True for March through December.

        The leap day is inserted at the end of February, so only these
        months are shifted by it.
        """
        return self.value > Month.FEBRUARY.value

    def to_number(self) -> int:
        """Return the month number (1-12)."""
        return self.value

    def offset(self, months: int) -> Month:
        """Return the month a number of months away, wrapping around.

        Args:
            months: Number of months to move (can be negative).

        Returns:
            The resulting Month.

        Examples:
            >>> Month.DECEMBER.offset(12)
            <Month.DECEMBER: 12>
            >>> Month.JANUARY.offset(-1)
            <Month.DECEMBER: 12>
        """
        return _MONTHS[(self.ordinal + months) % MONTHS_IN_YEAR]

    def next(self) -> Month:
        return self.offset(1)

    def previous(self) -> Month:
        return self.offset(-1)


_MONTHS: tuple[Month, ...] = tuple(Month)


__all__ = ["Month"]
