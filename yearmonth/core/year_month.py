"""PlainYearMonth class representing a calendar year and month.

This module provides the PlainYearMonth value type: a year and month in
some calendar, anchored to an ISO date whose day is a reference used
only for calendar lookups.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from yearmonth._internal.validation import (
    to_integer,
    validate_iso_date,
    validate_year_month_range,
)
from yearmonth.arithmetic import comparisons, year_month_ops
from yearmonth.arithmetic.year_month_ops import YEAR_MONTH_FIELDS, prepare_fields
from yearmonth.calendars import get_calendar
from yearmonth.errors import FieldError
from yearmonth.options import DifferenceSettings
from yearmonth.units.overflow import Overflow, ShowCalendar

if TYPE_CHECKING:
    from yearmonth.calendars.base import Calendar
    from yearmonth.core.date import PlainDate
    from yearmonth.core.duration import Duration
    from yearmonth.units.rounding_mode import RoundingMode
    from yearmonth.units.timeunit import TimeUnit


class PlainYearMonth:
    """A year and month in a specific calendar.

    The value is stored as ISO year, month and reference day plus a
    calendar. For the ISO 8601 calendar the reference day is 1; other
    calendars may need a different ISO day to land inside the calendar
    month. Calendar-facing fields (year, month, era, ...) are computed
    by the calendar.

    Values are immutable; every operation returns a new PlainYearMonth.
    There is no ordering operator: use PlainYearMonth.compare().

    Attributes:
        iso_year: ISO year of the anchor.
        iso_month: ISO month of the anchor.
        iso_day: Reference ISO day of the anchor.
        calendar: The calendar.

    Examples:
        >>> ym = PlainYearMonth(2021, 3)
        >>> ym.add({"months": 1})
        PlainYearMonth(2021, 4)
        >>> ym.subtract({"months": 1})
        PlainYearMonth(2021, 2)
        >>> ym.until(PlainYearMonth(2023, 5))
        Duration(years=2, months=2)
        >>> str(ym)
        '2021-03'
    """

    __slots__ = ("_iso_year", "_iso_month", "_iso_day", "_calendar")

    def __init__(
        self,
        iso_year: int,
        iso_month: int,
        calendar: Calendar | str | None = None,
        reference_iso_day: int = 1,
    ) -> None:
        """Create a PlainYearMonth from ISO fields.

        Args:
            iso_year: ISO year.
            iso_month: ISO month (1-12).
            calendar: Calendar object or identifier; ISO 8601 if omitted.
            reference_iso_day: ISO day anchoring calendar lookups.

        Raises:
            RangeError: If the ISO date is invalid, the year-month is
                outside -271821-04 .. 275760-09, or the calendar is unknown.
            FieldError: If a field is not a number.
        """
        iso_year = to_integer(iso_year, "iso_year")
        iso_month = to_integer(iso_month, "iso_month")
        reference_iso_day = to_integer(reference_iso_day, "reference_iso_day")
        validate_iso_date(iso_year, iso_month, reference_iso_day)
        validate_year_month_range(iso_year, iso_month)

        self._iso_year = iso_year
        self._iso_month = iso_month
        self._iso_day = reference_iso_day
        self._calendar = get_calendar(calendar)

    @classmethod
    def from_fields(
        cls,
        item: PlainYearMonth | Mapping[str, Any],
        overflow: Overflow | str = Overflow.CONSTRAIN,
    ) -> PlainYearMonth:
        """Create a PlainYearMonth from calendar fields.

        Args:
            item: Another PlainYearMonth (copied) or a mapping of calendar
                fields with an optional "calendar" key.
            overflow: "constrain" clamps the month, "reject" raises.

        Returns:
            The PlainYearMonth.

        Raises:
            FieldError: If item is not a mapping or lacks year or month.
            RangeError: If a field is out of range under `overflow`.

        Examples:
            >>> PlainYearMonth.from_fields({"year": 2021, "month": 13})
            PlainYearMonth(2021, 12)
            >>> PlainYearMonth.from_fields({"year": 2021, "month_code": "M07"})
            PlainYearMonth(2021, 7)
        """
        overflow = Overflow.from_value(overflow)
        if isinstance(item, PlainYearMonth):
            return cls(item.iso_year, item.iso_month, item.calendar, item.iso_day)
        if isinstance(item, str):
            raise FieldError(
                "year-month strings are not parsed; pass a mapping of fields"
            )
        if not isinstance(item, Mapping):
            raise FieldError(
                f"expected a PlainYearMonth or mapping, got {type(item).__name__}"
            )
        calendar = get_calendar(item.get("calendar"))
        field_names = calendar.fields(YEAR_MONTH_FIELDS)
        fields = {name: item[name] for name in field_names if name in item}
        return calendar.year_month_from_fields(fields, overflow)

    @staticmethod
    def compare(one: PlainYearMonth | Mapping[str, Any], two: PlainYearMonth | Mapping[str, Any]) -> int:
        """Return -1, 0 or 1 ordering two year-months.

        Examples:
            >>> PlainYearMonth.compare(PlainYearMonth(2021, 3), PlainYearMonth(2021, 4))
            -1
        """
        return comparisons.compare(
            PlainYearMonth.from_fields(one), PlainYearMonth.from_fields(two)
        )

    @property
    def iso_year(self) -> int:
        return self._iso_year

    @property
    def iso_month(self) -> int:
        return self._iso_month

    @property
    def iso_day(self) -> int:
        """Reference ISO day; not a calendar day-of-month."""
        return self._iso_day

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def year(self) -> int:
        return self._calendar.year(self)

    @property
    def month(self) -> int:
        return self._calendar.month(self)

    @property
    def month_code(self) -> str:
        return self._calendar.month_code(self)

    @property
    def era(self) -> str | None:
        return self._calendar.era(self)

    @property
    def era_year(self) -> int | None:
        return self._calendar.era_year(self)

    @property
    def days_in_month(self) -> int:
        return self._calendar.days_in_month(self)

    @property
    def days_in_year(self) -> int:
        return self._calendar.days_in_year(self)

    @property
    def months_in_year(self) -> int:
        return self._calendar.months_in_year(self)

    @property
    def in_leap_year(self) -> bool:
        return self._calendar.in_leap_year(self)

    def fields_for(self, field_names: Iterable[str]) -> dict[str, Any]:
        """Return calendar fields of this value.

        The calendar may add derived fields (era and era_year with year
        in the Gregorian calendar).

        Examples:
            >>> PlainYearMonth(2021, 3).fields_for(["year", "month"])
            {'year': 2021, 'month': 3}
        """
        return prepare_fields(self._calendar, self, field_names)

    def with_fields(
        self,
        partial: Mapping[str, Any],
        overflow: Overflow | str = Overflow.CONSTRAIN,
    ) -> PlainYearMonth:
        """Return a new PlainYearMonth with some calendar fields replaced.

        Args:
            partial: Fields to replace, e.g. {"month": 6}.
            overflow: "constrain" clamps, "reject" raises.

        Raises:
            FieldError: If partial is not a mapping, contains a calendar,
                or contains no recognized field.

        Examples:
            >>> PlainYearMonth(2021, 3).with_fields({"year": 1999})
            PlainYearMonth(1999, 3)
        """
        if not isinstance(partial, Mapping):
            raise FieldError(f"expected a mapping, got {type(partial).__name__}")
        if "calendar" in partial:
            raise FieldError("with_fields() does not support a calendar field")

        calendar = self._calendar
        field_names = calendar.fields(YEAR_MONTH_FIELDS)
        props = {
            name: partial[name]
            for name in field_names
            if partial.get(name) is not None
        }
        if not props:
            raise FieldError("invalid year-month-like: no recognized fields")

        fields = calendar.merge_fields(prepare_fields(calendar, self, field_names), props)
        return calendar.year_month_from_fields(fields, Overflow.from_value(overflow))

    def add(
        self,
        duration: Duration | Mapping[str, object],
        overflow: Overflow | str = Overflow.CONSTRAIN,
    ) -> PlainYearMonth:
        """Return this year-month moved forward by a duration.

        Raises:
            RangeError: If the duration mixes signs or the result is out
                of range.
        """
        return year_month_ops.add_duration(self, duration, overflow)

    def subtract(
        self,
        duration: Duration | Mapping[str, object],
        overflow: Overflow | str = Overflow.CONSTRAIN,
    ) -> PlainYearMonth:
        """Return this year-month moved back by a duration."""
        return year_month_ops.subtract_duration(self, duration, overflow)

    def until(
        self,
        other: PlainYearMonth | Mapping[str, Any],
        *,
        largest_unit: TimeUnit | str | None = None,
        smallest_unit: TimeUnit | str | None = None,
        rounding_increment: int = 1,
        rounding_mode: RoundingMode | str = "trunc",
    ) -> Duration:
        """Return the years and months from this value until `other`.

        Args:
            other: End of the span, in the same calendar.
            largest_unit: "years" (default) or "months".
            smallest_unit: "months" (default) or "years".
            rounding_increment: Round to multiples of this many units.
            rounding_mode: How to round; "trunc" by default.

        Raises:
            RangeError: If the calendars differ or an option is invalid.

        Examples:
            >>> PlainYearMonth(2021, 3).until(
            ...     PlainYearMonth(2023, 5), smallest_unit="years", rounding_mode="half-expand"
            ... )
            Duration(years=2)
        """
        settings = DifferenceSettings.from_options(
            largest_unit, smallest_unit, rounding_increment, rounding_mode
        )
        return year_month_ops.difference(
            self, PlainYearMonth.from_fields(other), settings
        )

    def since(
        self,
        other: PlainYearMonth | Mapping[str, Any],
        *,
        largest_unit: TimeUnit | str | None = None,
        smallest_unit: TimeUnit | str | None = None,
        rounding_increment: int = 1,
        rounding_mode: RoundingMode | str = "trunc",
    ) -> Duration:
        """Return the years and months from `other` until this value.

        Takes the same options as until().

        Examples:
            >>> PlainYearMonth(2021, 3).since(PlainYearMonth(2023, 5))
            Duration(years=-2, months=-2)
        """
        settings = DifferenceSettings.from_options(
            largest_unit, smallest_unit, rounding_increment, rounding_mode
        )
        return year_month_ops.difference_since(
            self, PlainYearMonth.from_fields(other), settings
        )

    def equals(self, other: PlainYearMonth | Mapping[str, Any]) -> bool:
        """Return True if ISO fields and calendar identity are the same."""
        return comparisons.equals(self, PlainYearMonth.from_fields(other))

    def to_plain_date(self, item: Mapping[str, Any]) -> PlainDate:
        """Combine this year-month with a day.

        Args:
            item: Mapping with a "day" field.

        Raises:
            FieldError: If item has no day.
            RangeError: If the day does not exist in this month.

        Examples:
            >>> PlainYearMonth(2021, 2).to_plain_date({"day": 28})
            PlainDate(2021, 2, 28)
        """
        if not isinstance(item, Mapping):
            raise FieldError(f"expected a mapping, got {type(item).__name__}")
        if item.get("day") is None:
            raise FieldError("day is required")
        fields = prepare_fields(self._calendar, self, YEAR_MONTH_FIELDS)
        fields["day"] = item["day"]
        return self._calendar.date_from_fields(fields, Overflow.REJECT)

    def iso_fields(self) -> dict[str, Any]:
        """Return the ISO fields and calendar backing this value."""
        return {
            "calendar": self._calendar,
            "iso_day": self._iso_day,
            "iso_month": self._iso_month,
            "iso_year": self._iso_year,
        }

    def to_string(self, show_calendar: ShowCalendar | str = ShowCalendar.AUTO) -> str:
        """Return the ISO 8601 representation.

        Examples:
            >>> PlainYearMonth(2021, 3).to_string(show_calendar="always")
            '2021-03[u-ca=iso8601]'
        """
        from yearmonth.format.iso8601 import format_year_month

        return format_year_month(self, show_calendar)

    def to_json(self) -> dict:
        """Return a JSON-serializable dictionary.

        Examples:
            >>> PlainYearMonth(2021, 3).to_json()
            {'_type': 'PlainYearMonth', 'value': '2021-03'}
        """
        return {"_type": "PlainYearMonth", "value": self.to_string()}

    def __add__(self, other: object) -> PlainYearMonth:
        from yearmonth.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> PlainYearMonth:
        from yearmonth.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainYearMonth):
            return NotImplemented
        return comparisons.equals(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._iso_year, self._iso_month, self._iso_day, self._calendar.id))

    def __repr__(self) -> str:
        """Return a string like 'PlainYearMonth(2021, 3)'."""
        args = [str(self._iso_year), str(self._iso_month)]
        if self._calendar.id != "iso8601" or self._iso_day != 1:
            args.append(repr(self._calendar.id))
        if self._iso_day != 1:
            args.append(str(self._iso_day))
        return f"PlainYearMonth({', '.join(args)})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["PlainYearMonth"]
