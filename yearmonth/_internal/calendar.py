"""ISO 8601 calendar math for yearmonth.

This module provides the proleptic Gregorian calculations that the
reference calendars build on: leap years, month lengths, ordinal day
numbers and month-granular date arithmetic.

Ordinal 1 = 0001-01-01. Years use astronomical numbering (year 0 = 1 BCE).

This module is not part of the public API.
"""

from __future__ import annotations

from yearmonth._internal.constants import DAYS_IN_MONTH, DAYS_PER_WEEK, MONTHS_PER_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Days in 400, 100 and 4 year cycles
_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1 and for 0000-12-31 is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # floor division keeps the leap-day count right for negative years
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Works for any integer ordinal: the 400-year cycle is exact, so a
    floored divmod places negative ordinals in the right cycle.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    n400, n = divmod(ordinal - 1, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def balance_year_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Examples:
        >>> balance_year_month(2021, 13)
        (2022, 1)
        >>> balance_year_month(2021, 0)
        (2020, 12)
    """
    years, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    return (year + years, month_index + 1)


def compare_iso_date(
    one: tuple[int, int, int], two: tuple[int, int, int]
) -> int:
    """Compare two (year, month, day) tuples, returning -1, 0 or 1."""
    if one == two:
        return 0
    return -1 if one < two else 1


def add_iso_months(
    year: int, month: int, day: int, months: int, constrain: bool = True
) -> tuple[int, int, int]:
    """Add calendar months to an ISO date.

    The day is clamped to the length of the target month when
    `constrain` is True; otherwise an overflowing day raises ValueError.

    Examples:
        >>> add_iso_months(2024, 1, 31, 1)
        (2024, 2, 29)
        >>> add_iso_months(2021, 3, 31, -13)
        (2020, 2, 29)
    """
    new_year, new_month = balance_year_month(year, month + months)
    max_day = days_in_month(new_year, new_month)
    if day > max_day:
        if not constrain:
            raise ValueError(
                f"day {day} does not exist in {new_year}-{new_month:02d}"
            )
        day = max_day
    return (new_year, new_month, day)


def add_iso_date(
    year: int,
    month: int,
    day: int,
    years: int,
    months: int,
    weeks: int,
    days: int,
    constrain: bool = True,
) -> tuple[int, int, int]:
    """Add a years/months/weeks/days offset to an ISO date.

    Years and months are applied first (with day clamping or rejection),
    then weeks and days as an exact day count.
    """
    y, m, d = add_iso_months(year, month, day, years * MONTHS_PER_YEAR + months, constrain)
    total_days = weeks * DAYS_PER_WEEK + days
    if total_days == 0:
        return (y, m, d)
    return ordinal_to_ymd(ymd_to_ordinal(y, m, d) + total_days)


def difference_iso_months(
    one: tuple[int, int, int], two: tuple[int, int, int]
) -> tuple[int, int]:
    """Return (whole months, remaining days) from `one` to `two`.

    The whole-month count is the largest count (toward zero) whose
    constrained addition to `one` does not pass `two`; the days are
    what remains after that addition.

    Examples:
        >>> difference_iso_months((2021, 1, 31), (2021, 2, 28))
        (1, 0)
        >>> difference_iso_months((2021, 3, 15), (2021, 1, 20))
        (-1, -26)
    """
    sign = -compare_iso_date(one, two)
    if sign == 0:
        return (0, 0)

    y1, m1, d1 = one
    months = (two[0] * MONTHS_PER_YEAR + two[1]) - (y1 * MONTHS_PER_YEAR + m1)
    mid = add_iso_months(y1, m1, d1, months)
    while compare_iso_date(mid, two) == sign:
        months -= sign
        mid = add_iso_months(y1, m1, d1, months)

    days = ymd_to_ordinal(*two) - ymd_to_ordinal(*mid)
    return (months, days)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "balance_year_month",
    "compare_iso_date",
    "add_iso_months",
    "add_iso_date",
    "difference_iso_months",
]
