"""Internal utilities for Gregorian.

This module contains private implementation details:
    - Constants and limits
    - Checked 64-bit arithmetic
    - Calendar calculations (leap years, year days, weekdays)
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

__all__: list[str] = []
