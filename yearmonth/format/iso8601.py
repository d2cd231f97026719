"""ISO 8601 serialization of calendar-qualified values.

Year-months:
    - YYYY-MM for the ISO 8601 calendar
    - YYYY-MM-DD for other calendars (the reference ISO day is needed
      to recover the calendar month)
    - followed by [u-ca=<id>] depending on the calendar display option

Years outside 0..9999 use a sign and six digits (+010000, -000044).

Examples:
    >>> from yearmonth.core.year_month import PlainYearMonth
    >>> format_year_month(PlainYearMonth(2021, 3))
    '2021-03'
    >>> format_year_month(PlainYearMonth(2021, 3, "gregory"))
    '2021-03-01[u-ca=gregory]'
    >>> format_year_month(PlainYearMonth(2021, 3), "always")
    '2021-03[u-ca=iso8601]'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yearmonth._internal.constants import ISO8601_CALENDAR_ID
from yearmonth.units.overflow import ShowCalendar

if TYPE_CHECKING:
    from yearmonth.core.date import PlainDate
    from yearmonth.core.year_month import PlainYearMonth


def iso_year_string(year: int) -> str:
    """Format an ISO year.

    Examples:
        >>> iso_year_string(2021)
        '2021'
        >>> iso_year_string(-44)
        '-000044'
        >>> iso_year_string(12345)
        '+012345'
    """
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):06d}"


def format_calendar_annotation(
    calendar_id: str, show_calendar: ShowCalendar | str = ShowCalendar.AUTO
) -> str:
    """Return the calendar annotation suffix, or an empty string.

    Examples:
        >>> format_calendar_annotation("iso8601")
        ''
        >>> format_calendar_annotation("gregory", "never")
        ''
    """
    show_calendar = ShowCalendar.from_value(show_calendar)
    if show_calendar is ShowCalendar.NEVER:
        return ""
    if show_calendar is ShowCalendar.AUTO and calendar_id == ISO8601_CALENDAR_ID:
        return ""
    return f"[u-ca={calendar_id}]"


def format_year_month(
    year_month: PlainYearMonth,
    show_calendar: ShowCalendar | str = ShowCalendar.AUTO,
) -> str:
    """Format a year-month value.

    Args:
        year_month: The value to format.
        show_calendar: When to include the calendar annotation.

    Returns:
        The ISO 8601 string.
    """
    calendar_id = year_month.calendar.id
    result = f"{iso_year_string(year_month.iso_year)}-{year_month.iso_month:02d}"
    if calendar_id != ISO8601_CALENDAR_ID:
        result += f"-{year_month.iso_day:02d}"
    return result + format_calendar_annotation(calendar_id, show_calendar)


def format_date(
    date: PlainDate, show_calendar: ShowCalendar | str = ShowCalendar.AUTO
) -> str:
    """Format a date as YYYY-MM-DD plus the calendar annotation.

    Examples:
        >>> from yearmonth.core.date import PlainDate
        >>> format_date(PlainDate(2021, 3, 31))
        '2021-03-31'
    """
    result = (
        f"{iso_year_string(date.iso_year)}-{date.iso_month:02d}-{date.iso_day:02d}"
    )
    return result + format_calendar_annotation(date.calendar.id, show_calendar)


__all__ = [
    "iso_year_string",
    "format_calendar_annotation",
    "format_year_month",
    "format_date",
]
