"""Equality and ordering of year-month values.

Comparison Rules:
    - equals: same ISO year, month and reference day, and the same
      calendar identity
    - compare: ISO year, then month, then reference day; calendar
      identifier breaks a remaining tie, so the order is total
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yearmonth.calendars.base import calendar_equals, compare_calendars

if TYPE_CHECKING:
    from yearmonth.core.year_month import PlainYearMonth


def _iso_key(value: PlainYearMonth) -> tuple[int, int, int]:
    return (value.iso_year, value.iso_month, value.iso_day)


def equals(one: PlainYearMonth, two: PlainYearMonth) -> bool:
    """Return True if both values have identical ISO fields and calendar.

    Examples:
        >>> from yearmonth.core.year_month import PlainYearMonth
        >>> equals(PlainYearMonth(2021, 3), PlainYearMonth(2021, 3))
        True
        >>> equals(PlainYearMonth(2021, 3), PlainYearMonth(2021, 3, "gregory"))
        False
    """
    if _iso_key(one) != _iso_key(two):
        return False
    return calendar_equals(one.calendar, two.calendar)


def compare(one: PlainYearMonth, two: PlainYearMonth) -> int:
    """Return -1, 0 or 1 ordering two year-month values.

    Examples:
        >>> from yearmonth.core.year_month import PlainYearMonth
        >>> compare(PlainYearMonth(2021, 3), PlainYearMonth(2020, 12))
        1
        >>> compare(PlainYearMonth(2021, 3, "gregory"), PlainYearMonth(2021, 3))
        -1
    """
    key_one = _iso_key(one)
    key_two = _iso_key(two)
    if key_one != key_two:
        return -1 if key_one < key_two else 1
    return compare_calendars(one.calendar, two.calendar)


__all__ = ["equals", "compare"]
