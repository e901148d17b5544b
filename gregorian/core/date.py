"""GregorianDate class representing a calendar date.

This module provides the GregorianDate value type: a validated
(year, month, day) triple in the Gregorian calendar, starting with the
year 1583, together with the day-of-week, year-day, day-offset and
day-distance computations built on it.
"""

from __future__ import annotations

import logging
from typing import overload

from gregorian._internal.arithmetic import (
    checked_add,
    checked_decrement,
    checked_increment,
    checked_int64,
    checked_negate,
    checked_sub,
)
from gregorian._internal import calendar
from gregorian._internal.constants import GREGORIAN_START_YEAR, INT64_MAX
from gregorian._internal.validation import (
    is_int,
    is_valid,
    is_valid_year,
    validate_date,
    validate_offset,
)
from gregorian.errors import InvalidDateError, InvalidMonthError
from gregorian.units.month import Month
from gregorian.units.weekday import Weekday

logger = logging.getLogger(__name__)


def _to_month(month: Month | int) -> Month:
    if isinstance(month, Month):
        return month
    if is_int(month):
        return Month.from_number(month)
    raise InvalidMonthError(f"month must be a Month or an int, got {type(month).__name__}")


def _check_int(name: str, value: object) -> None:
    if not is_int(value):
        raise InvalidDateError(f"{name} must be an int, got {type(value).__name__}")


def _check_offset(offset: object) -> int:
    if not is_int(offset):
        raise TypeError(f"offset must be an int, got {type(offset).__name__}")
    return checked_int64(offset)


class GregorianDate:
    """A calendar date in the Gregorian calendar.

    GregorianDate holds a year, a Month and a day of month. Only years
    after 1582, the year the calendar was adopted, are accepted; there
    is no proleptic extension and no Julian fallback.

    Instances are immutable. Every operation that produces a date, such
    as next_day() or add_days(), returns a new validated instance.

    Attributes:
        year: The year (1583 or later).
        month: The Month.
        day: The day of the month (1-31).

    Examples:
        >>> d = GregorianDate.of(2000, Month.DECEMBER, 15)
        >>> d.day_of_week()
        <Weekday.FRIDAY: 5>

        >>> str(GregorianDate.of(1600, 2, 1).add_days(2110))
        '(1605, 11, 11)'

        >>> GregorianDate.of(1582, 2, 15)
        Traceback (most recent call last):
        ...
        InvalidDateError: year must be after 1582 and at most 9223372036854775807, got 1582
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: Month | int, day: int) -> None:
        """Create a GregorianDate from year, month, and day.

        Args:
            year: The year (must be after 1582).
            month: A Month, or its number (1-12).
            day: The day of the month.

        Raises:
            InvalidMonthError: If month is a number outside 1-12.
            InvalidDateError: If the combination is not a valid date.
        """
        _check_int("year", year)
        _check_int("day", day)
        month = _to_month(month)
        validate_date(year, month, day)

        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def of(cls, year: int, month: Month | int, day: int) -> GregorianDate:
        """Create a validated date.

        Accepts the month either as a Month or as its number.

        Examples:
            >>> GregorianDate.of(1843, Month.DECEMBER, 31)
            GregorianDate(1843, 12, 31)
            >>> GregorianDate.of(1843, 12, 31)
            GregorianDate(1843, 12, 31)
        """
        return cls(year, month, day)

    @classmethod
    def from_year_day(cls, year: int, ordinal: int) -> GregorianDate:
        """Create a date from a year and a 1-based day of that year.

        Args:
            year: The year (must be after 1582).
            ordinal: Day of year (1-365, or 1-366 in a leap year).

        Returns:
            The corresponding GregorianDate.

        Raises:
            InvalidDateError: If the year or the ordinal is out of range.

        Examples:
            >>> GregorianDate.from_year_day(1843, 365)
            GregorianDate(1843, 12, 31)
            >>> GregorianDate.from_year_day(1853, 44)
            GregorianDate(1853, 2, 13)
        """
        _check_int("year", year)
        _check_int("ordinal", ordinal)
        if not is_valid_year(year):
            raise InvalidDateError(
                f"year must be after {GREGORIAN_START_YEAR} and at most {INT64_MAX}, "
                f"got {year}"
            )
        month, day = calendar.month_day_from_year_day(year, ordinal)
        return cls(year, month, day)

    @staticmethod
    def is_valid(year: int, month: Month, day: int) -> bool:
        """Return True if (year, month, day) is a valid date."""
        return is_valid(year, month, day)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Check if a year is a leap year.

        Raises:
            InvalidYearError: If year is 1582 or earlier.
        """
        return calendar.is_leap_year(year)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def replace(
        self,
        year: int | None = None,
        month: Month | int | None = None,
        day: int | None = None,
    ) -> GregorianDate:
        """Return a new date with specified components replaced.

        Raises:
            InvalidDateError: If the resulting date is invalid.

        Examples:
            >>> GregorianDate.of(2024, 1, 15).replace(month=6)
            GregorianDate(2024, 6, 15)
        """
        return GregorianDate(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def year_day_of(self) -> int:
        """Return the day of the year.

        Returns:
            Day of year (1-366).

        Examples:
            >>> GregorianDate.of(1843, 2, 15).year_day_of()
            46
            >>> GregorianDate.of(1600, 7, 15).year_day_of()
            197
        """
        return calendar.year_day(self._year, self._month, self._day)

    def day_of_week(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> GregorianDate.of(2001, 12, 15).day_of_week()
            <Weekday.SATURDAY: 6>
        """
        return Weekday.of_index(
            calendar.weekday_index(self._year, self._month, self._day)
        )

    def add_days(self, offset: int) -> GregorianDate:
        """Return a new date offset by the given number of days.

        Rolls over month and year boundaries one year at a time, so the
        cost grows with abs(offset) / 365.

        Args:
            offset: Number of days to add (can be negative).

        Returns:
            A new GregorianDate.

        Raises:
            TypeError: If offset is not an int.
            ArithmeticOverflowError: If the offset, the day count or the
                year leaves the signed 64-bit range.
            InvalidDateError: If the result falls in or before 1582.

        Examples:
            >>> GregorianDate.of(1600, 2, 1).add_days(-2110)
            GregorianDate(1594, 4, 23)
            >>> GregorianDate.of(1843, 2, 15).add_days(319)
            GregorianDate(1843, 12, 31)
        """
        offset = _check_offset(offset)
        total = checked_add(self.year_day_of(), offset)
        year = self._year

        length = calendar.days_in_year(year)
        while total > length:
            total -= length
            year = checked_increment(year)
            length = calendar.days_in_year(year)

        while total <= 0:
            year = checked_decrement(year)
            if not is_valid_year(year):
                raise InvalidDateError(
                    f"{self} offset by {offset} days falls before the Gregorian calendar"
                )
            total += calendar.days_in_year(year)

        if year != self._year:
            logger.debug(
                "add_days(%s, %d) rolled over %d years", self, offset, year - self._year
            )
        return GregorianDate.from_year_day(year, total)

    def next_day(self) -> GregorianDate:
        """Return the following day."""
        return self.add_days(1)

    def previous_day(self) -> GregorianDate:
        """Return the preceding day."""
        return self.add_days(-1)

    def future_date(self, offset: int) -> GregorianDate:
        """Return the date a non-negative number of days later.

        Raises:
            InvalidOffsetError: If offset is negative.
            TypeError: If offset is not an int.
            ArithmeticOverflowError: If offset exceeds the 64-bit range.

        Examples:
            >>> GregorianDate.of(1843, 9, 15).future_date(5667)
            GregorianDate(1859, 3, 22)
        """
        validate_offset(_check_offset(offset))
        return self.add_days(offset)

    def past_date(self, offset: int) -> GregorianDate:
        """Return the date a non-negative number of days earlier.

        Raises:
            InvalidOffsetError: If offset is negative.
            TypeError: If offset is not an int.
            ArithmeticOverflowError: If offset exceeds the 64-bit range.

        Examples:
            >>> GregorianDate.of(1843, 9, 15).past_date(5667)
            GregorianDate(1828, 3, 10)
        """
        validate_offset(_check_offset(offset))
        return self.add_days(checked_negate(offset))

    def days_since_epoch(self) -> int:
        """Return the number of days since the year-zero epoch.

        Raises:
            ArithmeticOverflowError: If the count leaves the 64-bit range.
        """
        return calendar.days_since_epoch(self._year, self._month, self._day)

    def days_between(self, other: GregorianDate) -> int:
        """Return the absolute number of days between two dates.

        Examples:
            >>> a = GregorianDate.of(1601, 7, 15)
            >>> b = GregorianDate.of(3000, 7, 15)
            >>> a.days_between(b)
            510974
        """
        return abs(checked_sub(other.days_since_epoch(), self.days_since_epoch()))

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month.value, self._day)

    def __add__(self, other: object) -> GregorianDate:
        """Add a number of days to this date.

        Examples:
            >>> GregorianDate.of(2024, 1, 15) + 10
            GregorianDate(2024, 1, 25)
        """
        if not is_int(other):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    __radd__ = __add__

    @overload
    def __sub__(self, other: int) -> GregorianDate: ...

    @overload
    def __sub__(self, other: GregorianDate) -> int: ...

    def __sub__(self, other: object) -> GregorianDate | int:
        """Subtract a number of days or another date.

        Subtracting a date returns the signed day difference.

        Examples:
            >>> GregorianDate.of(2024, 1, 25) - 10
            GregorianDate(2024, 1, 15)
            >>> GregorianDate.of(2024, 1, 15) - GregorianDate.of(2024, 1, 25)
            -10
        """
        if isinstance(other, GregorianDate):
            return checked_sub(self.days_since_epoch(), other.days_since_epoch())
        if not is_int(other):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(checked_negate(_check_offset(other)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'GregorianDate(2000, 12, 15)'.
        """
        return f"GregorianDate({self._year}, {self._month.value}, {self._day})"

    def __str__(self) -> str:
        """Return the '(YYYY, MM, DD)' rendering used in logs.

        Examples:
            >>> str(GregorianDate.of(1843, 2, 5))
            '(1843, 02, 05)'
        """
        return f"({self._year:04d}, {self._month.value:02d}, {self._day:02d})"

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["GregorianDate"]
