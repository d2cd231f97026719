"""Internal constants for yearmonth.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Representable year-month range (inclusive)
MIN_YEAR_MONTH: tuple[int, int] = (-271821, 4)
MAX_YEAR_MONTH: tuple[int, int] = (275760, 9)

# Representable ISO date range (inclusive)
MIN_DATE: tuple[int, int, int] = (-271821, 4, 19)
MAX_DATE: tuple[int, int, int] = (275760, 9, 13)

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
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

ISO8601_CALENDAR_ID: str = "iso8601"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_YEAR_MONTH",
    "MAX_YEAR_MONTH",
    "MIN_DATE",
    "MAX_DATE",
    "DAYS_IN_MONTH",
    "ISO8601_CALENDAR_ID",
]
