"""Balancing of sub-day duration fields.

Converts days, hours, minutes, seconds and sub-second fields into an
exact nanosecond total and redistributes it so that no unit below the
requested largest unit overflows. Python ints are arbitrary precision,
so multi-century totals never lose nanoseconds.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from yearmonth.arithmetic.signs import reject_duration_sign
from yearmonth.errors import RangeError
from yearmonth.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)

# Exact units from largest to smallest
_EXACT_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
    TimeUnit.MICROSECOND,
    TimeUnit.NANOSECOND,
)


class BalancedTime(NamedTuple):
    """Day and sub-day fields after balancing."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0
    microseconds: int = 0
    nanoseconds: int = 0


def total_nanoseconds(
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
    microseconds: int,
    nanoseconds: int,
) -> int:
    """Return the exact nanosecond total of the day and sub-day fields."""
    total = 0
    for unit, value in zip(
        _EXACT_UNITS,
        (days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds),
    ):
        total += value * unit.nanoseconds
    return total


def balance_duration(
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
    microseconds: int,
    nanoseconds: int,
    largest_unit: TimeUnit | str = TimeUnit.DAY,
) -> BalancedTime:
    """Redistribute day and sub-day fields under a largest unit.

    Every unit from `largest_unit` down is filled greedily from the
    magnitude of the total; units above it stay zero. The sign of the
    total is re-applied to every field, so results truncate toward zero.

    Args:
        days: Day count.
        hours: Hours.
        minutes: Minutes.
        seconds: Seconds.
        milliseconds: Milliseconds.
        microseconds: Microseconds.
        nanoseconds: Nanoseconds.
        largest_unit: DAY or any smaller unit.

    Returns:
        The balanced fields.

    Raises:
        RangeError: If the fields mix signs or largest_unit is a
            calendar unit.

    Examples:
        >>> balance_duration(0, 25, 0, 0, 0, 0, 0).days
        1
        >>> balance_duration(0, -25, 0, 0, 0, 0, 0)
        BalancedTime(days=-1, hours=-1, minutes=0, seconds=0, milliseconds=0, microseconds=0, nanoseconds=0)
        >>> balance_duration(2, 0, 0, 0, 0, 0, 0, "hours").hours
        48
    """
    unit = TimeUnit.from_value(largest_unit)
    if unit.is_calendar_unit:
        raise RangeError(f"cannot balance sub-day fields into {unit.plural}")

    reject_duration_sign(
        days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds
    )
    total = total_nanoseconds(
        days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds
    )
    sign = -1 if total < 0 else 1
    remaining = abs(total)

    balanced = {}
    for field_unit in _EXACT_UNITS:
        if field_unit.rank > unit.rank:
            balanced[field_unit.plural] = 0
            continue
        quotient, remaining = divmod(remaining, field_unit.nanoseconds)
        balanced[field_unit.plural] = sign * quotient

    logger.debug("balanced %d ns under %s: %s", total, unit.plural, balanced)
    return BalancedTime(**balanced)


def balance_into_days(
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
    microseconds: int,
    nanoseconds: int,
) -> int:
    """Fold sub-day fields into whole days, dropping the remainder.

    Only whole days can move a calendar date, so the sub-day part left
    after balancing is discarded.

    Examples:
        >>> balance_into_days(1, 47, 59, 0, 0, 0, 0)
        2
        >>> balance_into_days(0, 0, 0, -86_400, 0, 0, -1)
        -1
    """
    return balance_duration(
        days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds,
        TimeUnit.DAY,
    ).days


__all__ = [
    "BalancedTime",
    "total_nanoseconds",
    "balance_duration",
    "balance_into_days",
]
