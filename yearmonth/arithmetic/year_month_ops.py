"""Calendar-anchored arithmetic for year-month values.

A year-month has no day, but calendars only add to and measure between
dates. Every operation therefore builds an anchor date from the
year-month's calendar fields, lets the calendar do the work, and reads
the year and month back out.

Anchoring:
    Adding a non-negative duration anchors on day 1. Adding a negative
    duration anchors on the last day of the month, so that subtracting
    whole months never skids across a shorter neighbouring month.
    Differences always anchor both ends on day 1.

Examples:
    2021-03 + 1 month  -> anchor 2021-03-01 -> 2021-04-01 -> 2021-04
    2021-03 - 1 month  -> anchor 2021-03-31 -> 2021-02-28 -> 2021-02
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from yearmonth.arithmetic.balance import balance_into_days
from yearmonth.arithmetic.rounding import balance_years_months, round_duration
from yearmonth.arithmetic.signs import duration_sign
from yearmonth.calendars.base import calendar_equals
from yearmonth.errors import RangeError
from yearmonth.options import DifferenceSettings
from yearmonth.units.overflow import Overflow
from yearmonth.units.rounding_mode import RoundingMode

if TYPE_CHECKING:
    from yearmonth.calendars.base import Calendar, ISOFields
    from yearmonth.core.date import PlainDate
    from yearmonth.core.duration import Duration
    from yearmonth.core.year_month import PlainYearMonth

logger = logging.getLogger(__name__)

YEAR_MONTH_FIELDS: tuple[str, ...] = ("month", "month_code", "year")


def prepare_fields(
    calendar: Calendar, value: ISOFields, field_names: Iterable[str]
) -> dict[str, Any]:
    """Read calendar fields of a value through its calendar.

    Fields the calendar reports as None (e.g. era in ISO) are left out.

    Examples:
        >>> from yearmonth.core.year_month import PlainYearMonth
        >>> ym = PlainYearMonth(2021, 3)
        >>> prepare_fields(ym.calendar, ym, ["year", "month"])
        {'year': 2021, 'month': 3}
    """
    fields = {}
    for name in calendar.fields(field_names):
        value_of_field = getattr(calendar, name)(value)
        if value_of_field is not None:
            fields[name] = value_of_field
    return fields


def anchor_date(year_month: PlainYearMonth, day: int) -> PlainDate:
    """Build a date in the year-month's calendar on the given day."""
    calendar = year_month.calendar
    fields = prepare_fields(calendar, year_month, YEAR_MONTH_FIELDS)
    fields["day"] = day
    return calendar.date_from_fields(fields, Overflow.CONSTRAIN)


def add_duration(
    year_month: PlainYearMonth,
    duration: Duration | Mapping[str, object],
    overflow: Overflow | str = Overflow.CONSTRAIN,
) -> PlainYearMonth:
    """Add a duration to a year-month.

    Sub-day fields are balanced into whole days first; whatever is left
    below a day cannot move a month and is dropped.

    Args:
        year_month: The value to add to.
        duration: A Duration or duration-like mapping.
        overflow: Policy for the calendar's date addition.

    Returns:
        A new PlainYearMonth in the same calendar.

    Raises:
        RangeError: If the duration mixes signs or the result is out of range.
        FieldError: If the duration is malformed.
    """
    from yearmonth.core.duration import Duration

    duration = Duration.from_fields(duration)
    overflow = Overflow.from_value(overflow)
    days = balance_into_days(
        duration.days,
        duration.hours,
        duration.minutes,
        duration.seconds,
        duration.milliseconds,
        duration.microseconds,
        duration.nanoseconds,
    )
    date_duration = Duration(
        years=duration.years,
        months=duration.months,
        weeks=duration.weeks,
        days=days,
    )

    calendar = year_month.calendar
    sign = duration_sign(*date_duration.fields())
    day = calendar.days_in_month(year_month) if sign < 0 else 1
    start = anchor_date(year_month, day)
    added = calendar.date_add(start, date_duration, overflow)
    logger.debug("added %s to anchor %s: %s", date_duration, start, added)

    fields = prepare_fields(calendar, added, YEAR_MONTH_FIELDS)
    return calendar.year_month_from_fields(fields, overflow)


def subtract_duration(
    year_month: PlainYearMonth,
    duration: Duration | Mapping[str, object],
    overflow: Overflow | str = Overflow.CONSTRAIN,
) -> PlainYearMonth:
    """Subtract a duration from a year-month by adding its negation."""
    from yearmonth.core.duration import Duration

    return add_duration(year_month, Duration.from_fields(duration).negated(), overflow)


def _raw_difference(
    year_month: PlainYearMonth,
    other: PlainYearMonth,
    settings: DifferenceSettings,
    rounding_mode: RoundingMode,
) -> Duration:
    from yearmonth.core.duration import Duration

    calendar = year_month.calendar
    if not calendar_equals(calendar, other.calendar):
        raise RangeError(
            f"cannot compute difference between months of {calendar.id} "
            f"and {other.calendar.id} calendars"
        )

    this_date = anchor_date(year_month, 1)
    other_date = anchor_date(other, 1)
    result = calendar.date_until(this_date, other_date, settings.largest_unit)
    logger.debug("raw difference %s -> %s: %s", this_date, other_date, result)
    if settings.is_exact:
        return Duration(years=result.years, months=result.months)

    years, months = round_duration(
        result.years,
        result.months,
        settings.rounding_increment,
        settings.smallest_unit,
        rounding_mode,
        this_date,
        days=result.days,
    )
    years, months = balance_years_months(
        years, months, settings.largest_unit, this_date
    )
    return Duration(years=years, months=months)


def difference(
    year_month: PlainYearMonth,
    other: PlainYearMonth,
    settings: DifferenceSettings | None = None,
) -> Duration:
    """Return the years and months from `year_month` until `other`.

    Args:
        year_month: Start of the span.
        other: End of the span, in the same calendar.
        settings: Units and rounding; defaults to years and months with
            no rounding.

    Returns:
        A Duration with only years and months set.

    Raises:
        RangeError: If the calendars differ.

    Examples:
        >>> from yearmonth.core.year_month import PlainYearMonth
        >>> difference(PlainYearMonth(2021, 3), PlainYearMonth(2023, 5))
        Duration(years=2, months=2)
    """
    settings = settings or DifferenceSettings()
    return _raw_difference(year_month, other, settings, settings.rounding_mode)


def difference_since(
    year_month: PlainYearMonth,
    other: PlainYearMonth,
    settings: DifferenceSettings | None = None,
) -> Duration:
    """Return the years and months from `other` until `year_month`.

    The span is measured and anchored exactly as `difference` measures
    it, rounded with the sign-mirrored rounding mode, and only then
    negated.

    Examples:
        >>> from yearmonth.core.year_month import PlainYearMonth
        >>> difference_since(PlainYearMonth(2021, 3), PlainYearMonth(2023, 5))
        Duration(years=-2, months=-2)
    """
    settings = settings or DifferenceSettings()
    return _raw_difference(
        year_month, other, settings, settings.rounding_mode.negated()
    ).negated()


__all__ = [
    "YEAR_MONTH_FIELDS",
    "prepare_fields",
    "anchor_date",
    "add_duration",
    "subtract_duration",
    "difference",
    "difference_since",
]
