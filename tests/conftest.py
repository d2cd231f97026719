"""Pytest configuration and fixtures for yearmonth tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so yearmonth can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from yearmonth import GregorianCalendar, ISO8601Calendar, PlainYearMonth  # noqa: E402


@pytest.fixture
def iso() -> ISO8601Calendar:
    """The ISO 8601 calendar."""
    return ISO8601Calendar()


@pytest.fixture
def gregory() -> GregorianCalendar:
    """The Gregorian calendar with eras."""
    return GregorianCalendar()


@pytest.fixture
def march_2021() -> PlainYearMonth:
    """2021-03 in the ISO calendar."""
    return PlainYearMonth(2021, 3)
