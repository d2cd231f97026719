"""yearmonth exception hierarchy.

All yearmonth-specific exceptions inherit from TemporalError.
"""

from __future__ import annotations


class TemporalError(Exception):
    """Base exception for all yearmonth errors."""

    pass


class RangeError(TemporalError):
    """Value outside the representable or permitted range.

    Raised when a temporal value or option cannot be accepted.

    Examples:
        - Year-month outside -271821-04 to 275760-09
        - Duration with mixed positive and negative fields
        - Unit not allowed for the operation, or largest unit smaller
          than smallest unit
        - Operands in different calendars
        - Day 31 in April with overflow="reject"
    """

    pass


class FieldError(TemporalError):
    """Malformed input shape.

    Raised when an argument does not have the structure an operation
    requires.

    Examples:
        - Mapping without any recognized field
        - Missing year or month when building a year-month
        - Field value that is not a number
    """

    pass


__all__ = [
    "TemporalError",
    "RangeError",
    "FieldError",
]
