"""Weekday enumeration.

This module provides the Weekday enum returned by
GregorianDate.day_of_week(). Indexing starts at Sunday.
"""

from __future__ import annotations

from enum import Enum

from gregorian._internal.constants import DAYS_IN_WEEK
from gregorian.errors import InvalidWeekdayIndexError


class Weekday(Enum):
    """Day of the week, SUNDAY (0) through SATURDAY (6).

    Examples:
        >>> Weekday.of_index(5)
        <Weekday.FRIDAY: 5>

        >>> Weekday.SATURDAY.next()
        <Weekday.SUNDAY: 0>
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of_index(cls, index: int) -> Weekday:
        """Return the weekday at the given index.

        Args:
            index: The weekday index (0=Sunday, 6=Saturday).

        Returns:
            The matching Weekday.

        Raises:
            InvalidWeekdayIndexError: If index is outside 0-6.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidWeekdayIndexError(
                f"weekday index must be an int, got {type(index).__name__}"
            )
        if index < 0 or index >= DAYS_IN_WEEK:
            raise InvalidWeekdayIndexError(
                f"weekday index must be between 0 and {DAYS_IN_WEEK - 1}, got {index}"
            )
        return _WEEKDAYS[index]

    @staticmethod
    def days_in_week() -> int:
        return DAYS_IN_WEEK

    @property
    def index(self) -> int:
        return self.value

    def next(self) -> Weekday:
        return _WEEKDAYS[(self.value + 1) % DAYS_IN_WEEK]


_WEEKDAYS: tuple[Weekday, ...] = tuple(Weekday)


__all__ = ["Weekday"]
