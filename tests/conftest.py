"""Pytest configuration and fixtures for Gregorian tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so gregorian can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

LEAP_YEAR = 2000
COMMON_YEAR = 2001


@pytest.fixture(params=[COMMON_YEAR, LEAP_YEAR], ids=["common", "leap"])
def year(request: pytest.FixtureRequest) -> int:
    """A non-leap and a leap year."""
    return request.param
