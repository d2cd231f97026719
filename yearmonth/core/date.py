"""PlainDate: a calendar-qualified ISO date.

Dates are what calendars add to and measure between. The year-month
arithmetic builds them as anchors: a year-month plus a chosen day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yearmonth._internal.validation import (
    to_integer,
    validate_date_range,
    validate_iso_date,
)

if TYPE_CHECKING:
    from yearmonth.calendars.base import Calendar


class PlainDate:
    """An ISO year, month and day tagged with a calendar.

    The ISO fields are validated on construction; calendar-facing
    fields (year, month, day, ...) are computed by the calendar.

    Examples:
        >>> d = PlainDate(2021, 3, 31)
        >>> d.calendar.id
        'iso8601'
        >>> d.month_code
        'M03'

        >>> PlainDate(2021, 2, 29)
        Traceback (most recent call last):
        ...
        yearmonth.errors.RangeError: day must be between 1 and 28 for 2021-02, got 29
    """

    __slots__ = ("_iso_year", "_iso_month", "_iso_day", "_calendar")

    def __init__(
        self,
        iso_year: int,
        iso_month: int,
        iso_day: int,
        calendar: Calendar | str | None = None,
    ) -> None:
        """Create a PlainDate.

        Raises:
            RangeError: If the date is invalid or outside
                -271821-04-19 .. 275760-09-13, or the calendar is unknown.
        """
        from yearmonth.calendars import get_calendar

        iso_year = to_integer(iso_year, "iso_year")
        iso_month = to_integer(iso_month, "iso_month")
        iso_day = to_integer(iso_day, "iso_day")
        validate_iso_date(iso_year, iso_month, iso_day)
        validate_date_range(iso_year, iso_month, iso_day)

        self._iso_year = iso_year
        self._iso_month = iso_month
        self._iso_day = iso_day
        self._calendar = get_calendar(calendar)

    @property
    def iso_year(self) -> int:
        return self._iso_year

    @property
    def iso_month(self) -> int:
        return self._iso_month

    @property
    def iso_day(self) -> int:
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
    def day(self) -> int:
        return self._calendar.day(self)

    @property
    def era(self) -> str | None:
        return self._calendar.era(self)

    @property
    def era_year(self) -> int | None:
        return self._calendar.era_year(self)

    @property
    def days_in_month(self) -> int:
        return self._calendar.days_in_month(self)

    def iso_fields(self) -> dict[str, object]:
        """Return the ISO fields and calendar of this date."""
        return {
            "calendar": self._calendar,
            "iso_day": self._iso_day,
            "iso_month": self._iso_month,
            "iso_year": self._iso_year,
        }

    def __eq__(self, other: object) -> bool:
        """Dates are equal if their ISO fields and calendar ids match."""
        if not isinstance(other, PlainDate):
            return NotImplemented
        return (
            self._iso_year == other._iso_year
            and self._iso_month == other._iso_month
            and self._iso_day == other._iso_day
            and self._calendar.id == other._calendar.id
        )

    def __hash__(self) -> int:
        return hash((self._iso_year, self._iso_month, self._iso_day, self._calendar.id))

    def __repr__(self) -> str:
        """Return a string like 'PlainDate(2021, 3, 31)'."""
        text = f"PlainDate({self._iso_year}, {self._iso_month}, {self._iso_day}"
        if self._calendar.id != "iso8601":
            text += f", {self._calendar.id!r}"
        return text + ")"

    def __str__(self) -> str:
        from yearmonth.format.iso8601 import format_date

        return format_date(self)


__all__ = ["PlainDate"]
