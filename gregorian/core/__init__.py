"""Core calendar types.

This module provides:
    - GregorianDate: Validated calendar date with day arithmetic
"""

from __future__ import annotations

from gregorian.core.date import GregorianDate

__all__: list[str] = [
    "GregorianDate",
]
