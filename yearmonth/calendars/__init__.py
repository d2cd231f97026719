"""Calendars for yearmonth.

Calendars are looked up by identifier when a value is built from a
string calendar name; values then hold the calendar object itself.

Shipped calendars:
    iso8601: ISO 8601 proleptic Gregorian (the default)
    gregory: Gregorian with CE/BCE eras
"""

from __future__ import annotations

from yearmonth.calendars.base import (
    Calendar,
    calendar_equals,
    compare_calendars,
)
from yearmonth.calendars.gregorian import GregorianCalendar
from yearmonth.calendars.iso8601 import ISO8601Calendar
from yearmonth.errors import FieldError, RangeError

_ISO8601 = ISO8601Calendar()

_REGISTRY: dict[str, Calendar] = {
    _ISO8601.id: _ISO8601,
    "gregory": GregorianCalendar(),
}


def default_calendar() -> Calendar:
    """Return the ISO 8601 reference calendar."""
    return _ISO8601


def register_calendar(calendar: Calendar) -> None:
    """Make a calendar available by its identifier.

    Raises:
        FieldError: If `calendar` does not implement the Calendar protocol.
    """
    if not isinstance(calendar, Calendar):
        raise FieldError(
            f"{type(calendar).__name__} does not implement the Calendar protocol"
        )
    _REGISTRY[calendar.id] = calendar


def get_calendar(calendar: Calendar | str | None = None) -> Calendar:
    """Resolve a calendar object or identifier.

    Args:
        calendar: A calendar, an identifier such as "gregory", or None
            for the default calendar.

    Returns:
        The calendar.

    Raises:
        RangeError: If the identifier is unknown.
        FieldError: If the argument is neither a calendar nor a string.
    """
    if calendar is None:
        return _ISO8601
    if isinstance(calendar, str):
        try:
            return _REGISTRY[calendar.lower()]
        except KeyError:
            raise RangeError(f"unknown calendar: {calendar!r}") from None
    if isinstance(calendar, Calendar):
        return calendar
    raise FieldError(
        f"expected a calendar or calendar identifier, got {type(calendar).__name__}"
    )


__all__: list[str] = [
    "Calendar",
    "GregorianCalendar",
    "ISO8601Calendar",
    "calendar_equals",
    "compare_calendars",
    "default_calendar",
    "get_calendar",
    "register_calendar",
]
