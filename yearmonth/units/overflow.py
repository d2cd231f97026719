"""Overflow and calendar display options."""

from __future__ import annotations

from enum import Enum

from yearmonth.errors import FieldError, RangeError


class Overflow(Enum):
    """Policy for out-of-range fields when building a date.

    CONSTRAIN clamps a month or day to the nearest valid value; REJECT
    raises RangeError instead.
    """

    CONSTRAIN = "constrain"
    REJECT = "reject"

    @classmethod
    def from_value(cls, value: Overflow | str) -> Overflow:
        return _from_value(cls, value, "overflow")


class ShowCalendar(Enum):
    """When to append the calendar annotation to serialized output.

    AUTO omits it for the ISO 8601 calendar only.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_value(cls, value: ShowCalendar | str) -> ShowCalendar:
        return _from_value(cls, value, "calendar display")


def _from_value(cls, value, label):
    if isinstance(value, cls):
        return value
    if not isinstance(value, str):
        raise FieldError(f"{label} must be a string, got {type(value).__name__}")
    try:
        return cls(value)
    except ValueError:
        raise RangeError(f"invalid {label} option: {value!r}") from None


__all__ = ["Overflow", "ShowCalendar"]
