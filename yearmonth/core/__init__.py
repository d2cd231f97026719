"""Core value types.

This module provides the fundamental types:
    - PlainYearMonth: A year and month in a calendar
    - PlainDate: A calendar date, produced by calendars and to_plain_date()
    - Duration: Signed years, months, weeks, days and time fields
"""

from __future__ import annotations

from yearmonth.core.date import PlainDate
from yearmonth.core.duration import Duration
from yearmonth.core.year_month import PlainYearMonth

__all__: list[str] = [
    "Duration",
    "PlainDate",
    "PlainYearMonth",
]
