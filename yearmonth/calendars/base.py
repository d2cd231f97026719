"""Calendar capability interface.

A calendar decides what "year", "month" and "day" mean; the arithmetic
engine only ever talks to it through the operations below and never
inspects calendar internals. Values hold their calendar by reference,
so any object satisfying the protocol can be plugged in.

Implementations must be free of side effects and reentrant: the value
types are shared freely between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from yearmonth.core.date import PlainDate
    from yearmonth.core.duration import Duration
    from yearmonth.core.year_month import PlainYearMonth
    from yearmonth.units.overflow import Overflow
    from yearmonth.units.timeunit import TimeUnit


class ISOFields(Protocol):
    """Anything carrying an ISO year, month and day."""

    @property
    def iso_year(self) -> int: ...

    @property
    def iso_month(self) -> int: ...

    @property
    def iso_day(self) -> int: ...


@runtime_checkable
class Calendar(Protocol):
    """Operations a calendar must provide to the arithmetic engine."""

    @property
    def id(self) -> str:
        """Identifier compared for calendar equality and ordering."""
        ...

    def fields(self, field_names: Iterable[str]) -> list[str]:
        """Return the field names this calendar needs for `field_names`.

        A calendar may add derived fields, such as era and era_year
        alongside year.
        """
        ...

    def merge_fields(
        self, fields: Mapping[str, Any], additional_fields: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Merge an override record into a base field record.

        The calendar decides precedence, e.g. dropping stale derived
        fields from the base when the override supplies related ones.
        """
        ...

    def date_from_fields(
        self, fields: Mapping[str, Any], overflow: Overflow
    ) -> PlainDate:
        """Build a date from calendar fields.

        Raises FieldError for missing fields and RangeError for values
        out of range under the overflow policy.
        """
        ...

    def year_month_from_fields(
        self, fields: Mapping[str, Any], overflow: Overflow
    ) -> PlainYearMonth:
        """Build a year-month from calendar fields."""
        ...

    def date_add(
        self, date: PlainDate, duration: Duration, overflow: Overflow
    ) -> PlainDate:
        """Add the years, months, weeks and days of a duration to a date."""
        ...

    def date_until(
        self, one: PlainDate, two: PlainDate, largest_unit: TimeUnit
    ) -> Duration:
        """Return the unrounded signed difference such that one + result ~ two."""
        ...

    def year(self, value: ISOFields) -> int: ...

    def month(self, value: ISOFields) -> int: ...

    def month_code(self, value: ISOFields) -> str: ...

    def day(self, value: ISOFields) -> int: ...

    def era(self, value: ISOFields) -> str | None: ...

    def era_year(self, value: ISOFields) -> int | None: ...

    def days_in_month(self, value: ISOFields) -> int: ...

    def days_in_year(self, value: ISOFields) -> int: ...

    def months_in_year(self, value: ISOFields) -> int: ...

    def in_leap_year(self, value: ISOFields) -> bool: ...


def calendar_equals(one: Calendar, two: Calendar) -> bool:
    """Return True if two calendars have the same identity."""
    return one is two or one.id == two.id


def compare_calendars(one: Calendar, two: Calendar) -> int:
    """Order two calendars by identifier, returning -1, 0 or 1."""
    if one.id == two.id:
        return 0
    return -1 if one.id < two.id else 1


__all__ = [
    "Calendar",
    "ISOFields",
    "calendar_equals",
    "compare_calendars",
]
