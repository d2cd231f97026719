"""The ISO 8601 calendar.

The proleptic Gregorian calendar with ISO field names. It is the
default reference calendar: values in it serialize without a
reference day or calendar annotation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from yearmonth._internal import calendar as iso
from yearmonth._internal.constants import (
    DAYS_PER_WEEK,
    ISO8601_CALENDAR_ID,
    MONTHS_PER_YEAR,
)
from yearmonth._internal.validation import to_integer, validate_iso_date
from yearmonth.errors import FieldError, RangeError
from yearmonth.units.overflow import Overflow
from yearmonth.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from yearmonth.calendars.base import ISOFields
    from yearmonth.core.date import PlainDate
    from yearmonth.core.duration import Duration
    from yearmonth.core.year_month import PlainYearMonth

_MONTH_CODE = re.compile(r"^M(\d{2})$")


class ISO8601Calendar:
    """Proleptic Gregorian calendar with ISO 8601 fields.

    Fields: year, month, month_code ("M01".."M12") and day.

    Examples:
        >>> cal = ISO8601Calendar()
        >>> cal.date_from_fields({"year": 2021, "month": 2, "day": 31}, Overflow.CONSTRAIN)
        PlainDate(2021, 2, 28)
    """

    _field_names: frozenset[str] = frozenset({"year", "month", "month_code", "day"})

    @property
    def id(self) -> str:
        return ISO8601_CALENDAR_ID

    def fields(self, field_names: Iterable[str]) -> list[str]:
        """Return the requested field names after checking they are known.

        Raises:
            RangeError: If a name is not a field of this calendar.
        """
        result = []
        for name in field_names:
            if name not in self._field_names:
                raise RangeError(f"invalid field name for {self.id}: {name!r}")
            if name not in result:
                result.append(name)
        return result

    def merge_fields(
        self, fields: Mapping[str, Any], additional_fields: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Merge field records; month and month_code replace each other.

        Examples:
            >>> ISO8601Calendar().merge_fields(
            ...     {"year": 2021, "month": 3, "month_code": "M03"}, {"month": 5}
            ... )
            {'year': 2021, 'month': 5}
        """
        merged = {
            name: value for name, value in fields.items() if value is not None
        }
        additional = {
            name: value
            for name, value in additional_fields.items()
            if value is not None
        }
        if "month" in additional or "month_code" in additional:
            merged.pop("month", None)
            merged.pop("month_code", None)
        merged.update(additional)
        return merged

    def date_from_fields(
        self, fields: Mapping[str, Any], overflow: Overflow = Overflow.CONSTRAIN
    ) -> PlainDate:
        """Build a date from year, month (or month_code) and day.

        Raises:
            FieldError: If a required field is missing.
            RangeError: If a value is out of range under `overflow`.
        """
        from yearmonth.core.date import PlainDate

        overflow = Overflow.from_value(overflow)
        year = self._resolve_year(fields)
        month = self._resolve_month(fields)
        day = _require_integer(fields, "day")
        year, month, day = self._regulate_date(year, month, day, overflow)
        return PlainDate(year, month, day, self)

    def year_month_from_fields(
        self, fields: Mapping[str, Any], overflow: Overflow = Overflow.CONSTRAIN
    ) -> PlainYearMonth:
        """Build a year-month from year and month (or month_code).

        Any day field is ignored; the reference day is always 1.

        Raises:
            FieldError: If year or month is missing.
            RangeError: If a value is out of range under `overflow`.
        """
        from yearmonth.core.year_month import PlainYearMonth

        overflow = Overflow.from_value(overflow)
        year = self._resolve_year(fields)
        month = self._resolve_month(fields)
        year, month, _ = self._regulate_date(year, month, 1, overflow)
        return PlainYearMonth(year, month, self, 1)

    def date_add(
        self,
        date: PlainDate,
        duration: Duration,
        overflow: Overflow = Overflow.CONSTRAIN,
    ) -> PlainDate:
        """Add years and months (clamping or rejecting the day), then weeks and days.

        Sub-day fields of the duration are ignored.

        Examples:
            >>> from yearmonth.core.date import PlainDate
            >>> from yearmonth.core.duration import Duration
            >>> ISO8601Calendar().date_add(PlainDate(2021, 1, 31), Duration(months=1))
            PlainDate(2021, 2, 28)
        """
        from yearmonth.core.date import PlainDate

        overflow = Overflow.from_value(overflow)
        try:
            year, month, day = iso.add_iso_date(
                date.iso_year,
                date.iso_month,
                date.iso_day,
                duration.years,
                duration.months,
                duration.weeks,
                duration.days,
                constrain=overflow is Overflow.CONSTRAIN,
            )
        except ValueError as e:
            raise RangeError(str(e)) from e
        return PlainDate(year, month, day, self)

    def date_until(
        self,
        one: PlainDate,
        two: PlainDate,
        largest_unit: TimeUnit | str = TimeUnit.DAY,
    ) -> Duration:
        """Return the difference from `one` to `two` in calendar units.

        Units smaller than a day are treated as days.

        Examples:
            >>> from yearmonth.core.date import PlainDate
            >>> ISO8601Calendar().date_until(
            ...     PlainDate(2021, 3, 1), PlainDate(2023, 5, 1), TimeUnit.YEAR
            ... )
            Duration(years=2, months=2)
        """
        from yearmonth.core.duration import Duration

        unit = TimeUnit.from_value(largest_unit)
        start = (one.iso_year, one.iso_month, one.iso_day)
        end = (two.iso_year, two.iso_month, two.iso_day)

        if unit in (TimeUnit.YEAR, TimeUnit.MONTH):
            months, days = iso.difference_iso_months(start, end)
            years = 0
            if unit is TimeUnit.YEAR:
                sign = -1 if months < 0 else 1
                years, months = divmod(abs(months), MONTHS_PER_YEAR)
                years, months = sign * years, sign * months
            return Duration(years=years, months=months, days=days)

        days = iso.ymd_to_ordinal(*end) - iso.ymd_to_ordinal(*start)
        weeks = 0
        if unit is TimeUnit.WEEK:
            sign = -1 if days < 0 else 1
            weeks, days = divmod(abs(days), DAYS_PER_WEEK)
            weeks, days = sign * weeks, sign * days
        return Duration(weeks=weeks, days=days)

    def year(self, value: ISOFields) -> int:
        return value.iso_year

    def month(self, value: ISOFields) -> int:
        return value.iso_month

    def month_code(self, value: ISOFields) -> str:
        return f"M{value.iso_month:02d}"

    def day(self, value: ISOFields) -> int:
        return value.iso_day

    def era(self, value: ISOFields) -> str | None:
        return None

    def era_year(self, value: ISOFields) -> int | None:
        return None

    def days_in_month(self, value: ISOFields) -> int:
        return iso.days_in_month(value.iso_year, value.iso_month)

    def days_in_year(self, value: ISOFields) -> int:
        return iso.days_in_year(value.iso_year)

    def months_in_year(self, value: ISOFields) -> int:
        return MONTHS_PER_YEAR

    def in_leap_year(self, value: ISOFields) -> bool:
        return iso.is_leap_year(value.iso_year)

    def _resolve_year(self, fields: Mapping[str, Any]) -> int:
        return _require_integer(fields, "year")

    def _resolve_month(self, fields: Mapping[str, Any]) -> int:
        month = fields.get("month")
        month_code = fields.get("month_code")
        if month is None and month_code is None:
            raise FieldError("month or month_code is required")
        if month_code is None:
            return to_integer(month, "month")

        if not isinstance(month_code, str):
            raise FieldError(
                f"month_code must be a string, got {type(month_code).__name__}"
            )
        match = _MONTH_CODE.match(month_code)
        if not match or not 1 <= int(match.group(1)) <= MONTHS_PER_YEAR:
            raise RangeError(f"invalid month_code: {month_code!r}")
        code_month = int(match.group(1))
        if month is not None and to_integer(month, "month") != code_month:
            raise RangeError(
                f"month {month} does not match month_code {month_code!r}"
            )
        return code_month

    def _regulate_date(
        self, year: int, month: int, day: int, overflow: Overflow
    ) -> tuple[int, int, int]:
        if month < 1:
            raise RangeError(f"month must be a positive integer, got {month}")
        if day < 1:
            raise RangeError(f"day must be a positive integer, got {day}")
        if overflow is Overflow.REJECT:
            validate_iso_date(year, month, day)
            return (year, month, day)
        month = min(month, MONTHS_PER_YEAR)
        day = min(day, iso.days_in_month(year, month))
        return (year, month, day)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.id


def _require_integer(fields: Mapping[str, Any], name: str) -> int:
    value = fields.get(name)
    if value is None:
        raise FieldError(f"{name} is required")
    return to_integer(value, name)


__all__ = ["ISO8601Calendar"]
