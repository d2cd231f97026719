"""Serialization of calendar-qualified values.

Functions:
    format_year_month: Format a PlainYearMonth as ISO 8601.
    format_date: Format a PlainDate as ISO 8601.
    format_calendar_annotation: Build the [u-ca=...] suffix.
    iso_year_string: Format an ISO year with expanded-year support.
"""

from __future__ import annotations

from yearmonth.format.iso8601 import (
    format_calendar_annotation,
    format_date,
    format_year_month,
    iso_year_string,
)

__all__: list[str] = [
    "format_calendar_annotation",
    "format_date",
    "format_year_month",
    "iso_year_string",
]
