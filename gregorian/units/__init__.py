"""Calendar units and enumerations.

This module provides:
    - Month: the twelve-month catalog with lengths and accumulated days
    - Weekday: Sunday-based day-of-week enum
"""

from __future__ import annotations

from gregorian.units.month import Month
from gregorian.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "Weekday",
]
