"""yearmonth: calendar-aware year-month values with duration arithmetic.

Core Types:
    PlainYearMonth: A year and month in a specific calendar
    PlainDate: A calendar date
    Duration: Signed years, months, weeks, days and time fields

Calendars:
    ISO8601Calendar: Proleptic Gregorian calendar without eras ("iso8601")
    GregorianCalendar: ISO arithmetic with ce/bce eras ("gregory")

Options:
    DifferenceSettings: Validated options for until() and since()
    Overflow: constrain or reject out-of-range fields
    RoundingMode: The nine rounding modes
    ShowCalendar: When to print the calendar annotation
    TimeUnit: Duration units, years through nanoseconds

Exceptions:
    TemporalError: Base exception
    RangeError: Value or option out of range
    FieldError: Missing, unknown or wrongly typed field

Example:
    >>> from yearmonth import PlainYearMonth
    >>> ym = PlainYearMonth(2021, 3)
    >>> ym.add({"months": 1})
    PlainYearMonth(2021, 4)
    >>> ym.until(PlainYearMonth(2023, 5))
    Duration(years=2, months=2)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from yearmonth.core.date import PlainDate
from yearmonth.core.duration import Duration
from yearmonth.core.year_month import PlainYearMonth

# Calendars
from yearmonth.calendars import (
    Calendar,
    GregorianCalendar,
    ISO8601Calendar,
    get_calendar,
    register_calendar,
)

# Options
from yearmonth.options import DifferenceSettings
from yearmonth.units import Overflow, RoundingMode, ShowCalendar, TimeUnit

# Exceptions
from yearmonth.errors import FieldError, RangeError, TemporalError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "PlainDate",
    "PlainYearMonth",
    # Calendars
    "Calendar",
    "GregorianCalendar",
    "ISO8601Calendar",
    "get_calendar",
    "register_calendar",
    # Options
    "DifferenceSettings",
    "Overflow",
    "RoundingMode",
    "ShowCalendar",
    "TimeUnit",
    # Exceptions
    "FieldError",
    "RangeError",
    "TemporalError",
]
