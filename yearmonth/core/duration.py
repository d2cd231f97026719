"""Duration class representing a ten-field signed time quantity.

This module provides the Duration class: years, months, weeks and days
(calendar-relative) plus hours down to nanoseconds (exact), stored as-is
without normalization.
"""

from __future__ import annotations

from collections.abc import Mapping

from yearmonth._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from yearmonth._internal.validation import to_integer
from yearmonth.arithmetic.signs import duration_sign, reject_duration_sign
from yearmonth.errors import FieldError

DURATION_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
)


class Duration:
    """An immutable signed quantity of calendar and clock units.

    Unlike an exact time span, a Duration keeps each unit separately:
    Duration(months=14) stays 14 months because the length of a month
    depends on where it is applied. All non-zero fields must share one
    sign.

    Attributes:
        years, months, weeks, days: Calendar units.
        hours, minutes, seconds, milliseconds, microseconds, nanoseconds:
            Exact units.

    Examples:
        >>> d = Duration(years=1, months=2)
        >>> d.sign
        1
        >>> str(d)
        'P1Y2M'

        >>> -Duration(days=3)
        Duration(days=-3)

        >>> Duration(months=1, days=-1)
        Traceback (most recent call last):
        ...
        yearmonth.errors.RangeError: mixed-sign values not allowed as duration fields
    """

    __slots__ = tuple(f"_{name}" for name in DURATION_FIELDS)

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from its ten fields.

        Raises:
            FieldError: If a field is not a number.
            RangeError: If a field is not an integer, or fields mix signs.
        """
        values = [
            to_integer(value, name)
            for name, value in zip(
                DURATION_FIELDS,
                (
                    years, months, weeks, days, hours, minutes, seconds,
                    milliseconds, microseconds, nanoseconds,
                ),
            )
        ]
        reject_duration_sign(*values)
        for name, value in zip(DURATION_FIELDS, values):
            setattr(self, f"_{name}", value)

    @classmethod
    def from_fields(cls, item: Duration | Mapping[str, object]) -> Duration:
        """Create a Duration from a duration-like mapping.

        Keys other than the ten field names are ignored, but at least one
        field name must be present.

        Args:
            item: A Duration (returned unchanged) or a mapping of fields.

        Returns:
            The Duration.

        Raises:
            FieldError: If item is not a mapping or has no duration field.
            RangeError: If a value is not an integer or fields mix signs.

        Examples:
            >>> Duration.from_fields({"months": 1})
            Duration(months=1)
        """
        if isinstance(item, Duration):
            return item
        if not isinstance(item, Mapping):
            raise FieldError(
                f"expected a Duration or mapping, got {type(item).__name__}"
            )
        present = {name: item[name] for name in DURATION_FIELDS if name in item}
        if not present:
            raise FieldError("duration-like mapping has no duration fields")
        return cls(**present)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    @property
    def microseconds(self) -> int:
        return self._microseconds

    @property
    def nanoseconds(self) -> int:
        return self._nanoseconds

    def fields(self) -> tuple[int, ...]:
        """Return all ten fields, largest unit first."""
        return tuple(getattr(self, f"_{name}") for name in DURATION_FIELDS)

    def as_dict(self) -> dict[str, int]:
        """Return the fields as a name -> value dict."""
        return dict(zip(DURATION_FIELDS, self.fields()))

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return duration_sign(*self.fields())

    @property
    def blank(self) -> bool:
        """Return True if every field is zero."""
        return self.sign == 0

    def negated(self) -> Duration:
        """Return a Duration with every field negated."""
        return Duration(*(-value for value in self.fields()))

    def abs(self) -> Duration:
        """Return a Duration with every field non-negative."""
        return Duration(*(abs(value) for value in self.fields()))

    def with_fields(self, **changes: int) -> Duration:
        """Return a new Duration with the given fields replaced.

        Raises:
            FieldError: If a keyword is not a duration field.

        Examples:
            >>> Duration(years=1, months=5).with_fields(months=0)
            Duration(years=1)
        """
        unknown = set(changes) - set(DURATION_FIELDS)
        if unknown:
            raise FieldError(f"unknown duration fields: {sorted(unknown)}")
        values = self.as_dict()
        values.update(changes)
        return Duration(**values)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.blank

    def __eq__(self, other: object) -> bool:
        """Two Durations are equal if every field is equal.

        Duration(months=12) != Duration(years=1): fields are compared
        directly because their lengths depend on context.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.fields() == other.fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self.fields())

    def __repr__(self) -> str:
        parts = [
            f"{name}={value}"
            for name, value in zip(DURATION_FIELDS, self.fields())
            if value != 0
        ]
        return f"Duration({', '.join(parts)})"

    def __str__(self) -> str:
        """Return the ISO 8601 duration representation.

        Sub-second fields are folded into fractional seconds.

        Examples:
            >>> str(Duration(years=-1, months=-2))
            '-P1Y2M'
            >>> str(Duration(seconds=1, milliseconds=500))
            'PT1.5S'
            >>> str(Duration())
            'PT0S'
        """
        if self.blank:
            return "PT0S"

        a = self.abs()
        date_part = "".join(
            f"{value}{designator}"
            for value, designator in (
                (a.years, "Y"), (a.months, "M"), (a.weeks, "W"), (a.days, "D"),
            )
            if value
        )

        time_part = "".join(
            f"{value}{designator}"
            for value, designator in ((a.hours, "H"), (a.minutes, "M"))
            if value
        )
        sub_second = (
            a.milliseconds * NANOS_PER_MILLISECOND
            + a.microseconds * NANOS_PER_MICROSECOND
            + a.nanoseconds
        )
        whole_seconds = a.seconds + sub_second // NANOS_PER_SECOND
        fraction = sub_second % NANOS_PER_SECOND
        if whole_seconds or fraction:
            seconds_text = str(whole_seconds)
            if fraction:
                seconds_text += "." + f"{fraction:09d}".rstrip("0")
            time_part += f"{seconds_text}S"

        text = "P" + date_part
        if time_part:
            text += "T" + time_part
        return ("-" if self.sign < 0 else "") + text


__all__ = ["Duration", "DURATION_FIELDS"]
