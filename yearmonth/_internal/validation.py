"""Validation utilities for yearmonth.

This module provides the range checks and numeric coercion shared by
the value types and the calendars.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from yearmonth._internal.constants import (
    MAX_DATE,
    MAX_YEAR_MONTH,
    MIN_DATE,
    MIN_YEAR_MONTH,
)
from yearmonth.errors import FieldError, RangeError


def to_integer(value: object, name: str) -> int:
    """Coerce a numeric field value to an exact integer.

    Integral floats are accepted; fractional or non-finite numbers are
    out of range and anything else is the wrong shape.

    Args:
        value: The value to coerce.
        name: Field name used in error messages.

    Returns:
        The value as an int.

    Raises:
        FieldError: If value is not a number.
        RangeError: If value is not finite or not integral.

    Examples:
        >>> to_integer(3.0, "months")
        3
        >>> to_integer(1.5, "months")
        Traceback (most recent call last):
        ...
        yearmonth.errors.RangeError: months must be an integer, got 1.5
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FieldError(
            f"{name} must be a number, got {type(value).__name__}"
        )
    if isinstance(value, int):
        return value
    if not math.isfinite(value) or not value.is_integer():
        raise RangeError(f"{name} must be an integer, got {value}")
    return int(value)


def to_positive_integer(value: object, name: str) -> int:
    """Coerce a value to an integer that must be at least 1."""
    result = to_integer(value, name)
    if result < 1:
        raise RangeError(f"{name} must be a positive integer, got {result}")
    return result


def validate_iso_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid ISO calendar date.

    Raises:
        RangeError: If month or day is out of range.
    """
    from yearmonth._internal.calendar import days_in_month

    if month < 1 or month > 12:
        raise RangeError(f"month must be between 1 and 12, got {month}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise RangeError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_year_month_range(year: int, month: int) -> None:
    """Validate that a year-month lies in the representable range.

    Raises:
        RangeError: If (year, month) is before -271821-04 or after 275760-09.
    """
    if not MIN_YEAR_MONTH <= (year, month) <= MAX_YEAR_MONTH:
        raise RangeError(
            f"year-month {year}-{month:02d} is outside the representable range"
        )


def validate_date_range(year: int, month: int, day: int) -> None:
    """Validate that an ISO date lies in the representable range.

    Raises:
        RangeError: If the date is before -271821-04-19 or after 275760-09-13.
    """
    if not MIN_DATE <= (year, month, day) <= MAX_DATE:
        raise RangeError(
            f"date {year}-{month:02d}-{day:02d} is outside the representable range"
        )


__all__ = [
    "to_integer",
    "to_positive_integer",
    "validate_iso_date",
    "validate_year_month_range",
    "validate_date_range",
]
