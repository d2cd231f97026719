"""Rounding of calendar durations.

Years and months have no fixed length, so a leftover part of a year or
month is turned into an exact fraction by measuring it in days against
the actual span of the next year or month from a relative anchor date.
All fractions are `fractions.Fraction`; nothing passes through floats.

Rounding modes:
    ceil / floor: toward positive / negative infinity
    expand / trunc: away from / toward zero
    half-*: to the nearest increment, using the named direction on a tie
    half-even: to the nearest increment, ties to an even increment count
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import TYPE_CHECKING, NamedTuple

from yearmonth.errors import RangeError
from yearmonth.units.overflow import Overflow
from yearmonth.units.rounding_mode import RoundingMode
from yearmonth.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from yearmonth.core.date import PlainDate
    from yearmonth.core.duration import Duration

logger = logging.getLogger(__name__)


class RoundedYearsMonths(NamedTuple):
    """Years and months after rounding."""

    years: int
    months: int


def round_number_to_increment(
    quantity: Fraction | int,
    increment: int,
    mode: RoundingMode | str,
) -> int:
    """Round an exact quantity to a multiple of `increment`.

    Args:
        quantity: The value to round.
        increment: Positive integer step.
        mode: The rounding mode.

    Returns:
        The rounded value, a multiple of increment.

    Examples:
        >>> round_number_to_increment(Fraction(5, 2), 1, "half-even")
        2
        >>> round_number_to_increment(Fraction(-5, 2), 1, "half-ceil")
        -2
        >>> round_number_to_increment(7, 5, "expand")
        10
    """
    mode = RoundingMode.from_value(mode)
    quotient = Fraction(quantity) / increment
    floor = math.floor(quotient)
    ceil = math.ceil(quotient)
    if floor == ceil:
        return floor * increment

    toward_zero = floor if quotient > 0 else ceil
    away_from_zero = ceil if quotient > 0 else floor

    if mode is RoundingMode.CEIL:
        rounded = ceil
    elif mode is RoundingMode.FLOOR:
        rounded = floor
    elif mode is RoundingMode.TRUNC:
        rounded = toward_zero
    elif mode is RoundingMode.EXPAND:
        rounded = away_from_zero
    else:
        distance = quotient - floor
        if distance < Fraction(1, 2):
            rounded = floor
        elif distance > Fraction(1, 2):
            rounded = ceil
        else:
            rounded = _break_tie(mode, floor, ceil, toward_zero, away_from_zero)
    return rounded * increment


def _break_tie(
    mode: RoundingMode, floor: int, ceil: int, toward_zero: int, away_from_zero: int
) -> int:
    if mode is RoundingMode.HALF_CEIL:
        return ceil
    if mode is RoundingMode.HALF_FLOOR:
        return floor
    if mode is RoundingMode.HALF_EXPAND:
        return away_from_zero
    if mode is RoundingMode.HALF_TRUNC:
        return toward_zero
    # half-even
    return floor if floor % 2 == 0 else ceil


def _add(date: PlainDate, duration: Duration) -> PlainDate:
    return date.calendar.date_add(date, duration, Overflow.CONSTRAIN)


def _days_between(start: PlainDate, end: PlainDate) -> int:
    return start.calendar.date_until(start, end, TimeUnit.DAY).days


def round_duration(
    years: int,
    months: int,
    increment: int,
    unit: TimeUnit | str,
    mode: RoundingMode | str,
    relative_to: PlainDate,
    days: int = 0,
) -> RoundedYearsMonths:
    """Round a years/months(/days) duration measured from an anchor date.

    For YEAR the months and days past the whole years become a fraction
    of the year that follows; for MONTH the days past the whole months
    become a fraction of the month that follows. Rounding to YEAR always
    leaves months at zero.

    Args:
        years: Whole years.
        months: Whole months.
        increment: Positive integer step of `unit`.
        unit: YEAR or MONTH.
        mode: The rounding mode.
        relative_to: Anchor date the duration starts from.
        days: Leftover days below a month, if any.

    Returns:
        The rounded years and months.

    Raises:
        RangeError: If unit is not YEAR or MONTH.

    Examples:
        >>> from yearmonth.core.date import PlainDate
        >>> round_duration(2, 2, 1, "years", "half-expand", PlainDate(2021, 3, 1))
        RoundedYearsMonths(years=2, months=0)
        >>> round_duration(2, 7, 1, "years", "half-expand", PlainDate(2021, 3, 1))
        RoundedYearsMonths(years=3, months=0)
    """
    from yearmonth.core.duration import Duration

    unit = TimeUnit.from_value(unit)
    mode = RoundingMode.from_value(mode)
    calendar = relative_to.calendar

    if unit is TimeUnit.YEAR:
        target = _add(relative_to, Duration(years=years, months=months, days=days))
        anchor = _add(relative_to, Duration(years=years))
        # months may hold whole years when the caller did not balance them
        years += calendar.date_until(anchor, target, TimeUnit.YEAR).years
        anchor = _add(relative_to, Duration(years=years))
        leftover = _days_between(anchor, target)
        sign = -1 if leftover < 0 else 1
        one_year = abs(_days_between(anchor, _add(anchor, Duration(years=sign))))
        quantity = years + Fraction(leftover, one_year)
        result = RoundedYearsMonths(
            round_number_to_increment(quantity, increment, mode), 0
        )
    elif unit is TimeUnit.MONTH:
        anchor = _add(relative_to, Duration(years=years, months=months))
        sign = -1 if days < 0 else 1
        one_month = _days_between(anchor, _add(anchor, Duration(months=sign)))
        while abs(days) >= abs(one_month):
            months += sign
            days -= one_month
            anchor = _add(anchor, Duration(months=sign))
            one_month = _days_between(anchor, _add(anchor, Duration(months=sign)))
        quantity = months + Fraction(days, abs(one_month))
        result = RoundedYearsMonths(
            years, round_number_to_increment(quantity, increment, mode)
        )
    else:
        raise RangeError(f"cannot round a year-month difference to {unit.plural}")

    logger.debug(
        "rounded %s to %s (increment %d, %s) from %s",
        quantity, result, increment, mode.value, relative_to,
    )
    return result


def balance_years_months(
    years: int,
    months: int,
    largest_unit: TimeUnit | str,
    relative_to: PlainDate,
) -> RoundedYearsMonths:
    """Re-express years and months under a largest unit.

    Rounding months up can leave a full year of months (1 year 12
    months); measuring the span again from the anchor folds it back.

    Examples:
        >>> from yearmonth.core.date import PlainDate
        >>> balance_years_months(1, 12, "years", PlainDate(2020, 1, 1))
        RoundedYearsMonths(years=2, months=0)
        >>> balance_years_months(1, 2, "months", PlainDate(2020, 1, 1))
        RoundedYearsMonths(years=0, months=14)
    """
    from yearmonth.core.duration import Duration

    unit = TimeUnit.from_value(largest_unit)
    if years == 0 and months == 0:
        return RoundedYearsMonths(0, 0)
    calendar = relative_to.calendar
    end = _add(relative_to, Duration(years=years, months=months))
    balanced = calendar.date_until(relative_to, end, unit)
    return RoundedYearsMonths(balanced.years, balanced.months)


__all__ = [
    "RoundedYearsMonths",
    "round_number_to_increment",
    "round_duration",
    "balance_years_months",
]
