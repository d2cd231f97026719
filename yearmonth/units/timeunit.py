"""TimeUnit enumeration for duration units.

This module provides the TimeUnit enum representing the ten duration
units from nanoseconds to years, ordered by size.
"""

from __future__ import annotations

from enum import Enum

from yearmonth._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from yearmonth.errors import FieldError, RangeError


class TimeUnit(Enum):
    """Duration units for temporal operations.

    Units are ranked from largest (YEAR) to smallest (NANOSECOND). YEAR,
    MONTH and WEEK are calendar units whose length depends on the date
    they are measured from; DAY and below are treated as exact.

    Examples:
        >>> TimeUnit.from_value("months")
        <TimeUnit.MONTH: 'month'>

        >>> TimeUnit.YEAR.rank > TimeUnit.MONTH.rank
        True

        >>> TimeUnit.DAY.nanoseconds
        86400000000000
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def from_value(cls, value: TimeUnit | str) -> TimeUnit:
        """Resolve a unit from an enum member or a singular/plural name.

        Args:
            value: A TimeUnit, or a name such as "month" or "months".

        Returns:
            The matching TimeUnit.

        Raises:
            FieldError: If value is neither a TimeUnit nor a string.
            RangeError: If the name is not a known unit.
        """
        if isinstance(value, TimeUnit):
            return value
        if not isinstance(value, str):
            raise FieldError(f"unit must be a string, got {type(value).__name__}")
        name = value.lower()
        if name.endswith("s"):
            name = name[:-1]
        try:
            return cls(name)
        except ValueError:
            raise RangeError(f"invalid unit: {value!r}") from None

    @property
    def rank(self) -> int:
        """Position in the unit order; larger units rank higher."""
        return _UNIT_ORDER.index(self)

    @property
    def plural(self) -> str:
        """Plural field name, as used for Duration fields."""
        return f"{self.value}s"

    @property
    def is_calendar_unit(self) -> bool:
        """Return True for units whose length varies by calendar date."""
        return self in (TimeUnit.YEAR, TimeUnit.MONTH, TimeUnit.WEEK)

    @property
    def nanoseconds(self) -> int | None:
        """Exact length in nanoseconds, or None for calendar units."""
        return _UNIT_NANOSECONDS.get(self)


_UNIT_ORDER: tuple[TimeUnit, ...] = (
    TimeUnit.NANOSECOND,
    TimeUnit.MICROSECOND,
    TimeUnit.MILLISECOND,
    TimeUnit.SECOND,
    TimeUnit.MINUTE,
    TimeUnit.HOUR,
    TimeUnit.DAY,
    TimeUnit.WEEK,
    TimeUnit.MONTH,
    TimeUnit.YEAR,
)

_UNIT_NANOSECONDS: dict[TimeUnit, int] = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.DAY: NANOS_PER_DAY,
}


__all__ = ["TimeUnit"]
