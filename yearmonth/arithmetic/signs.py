"""Sign rules for duration fields.

A duration is only meaningful in calendar arithmetic when every non-zero
field points the same way: "add 2 months, subtract 3 days" has no single
answer, so such vectors are rejected where they enter the library.
"""

from __future__ import annotations

from yearmonth.errors import RangeError


def duration_sign(*fields: int) -> int:
    """Return the sign of a sign-consistent list of duration fields.

    The first non-zero field decides; an all-zero list has sign 0.

    Examples:
        >>> duration_sign(0, -2, 0)
        -1
        >>> duration_sign(0, 0)
        0
    """
    for value in fields:
        if value < 0:
            return -1
        if value > 0:
            return 1
    return 0


def reject_duration_sign(*fields: int) -> None:
    """Raise if the fields mix positive and negative values.

    Zero fields impose no constraint.

    Raises:
        RangeError: If one field is positive while another is negative.

    Examples:
        >>> reject_duration_sign(1, 0, 3)
        >>> reject_duration_sign(1, -1)
        Traceback (most recent call last):
        ...
        yearmonth.errors.RangeError: mixed-sign values not allowed as duration fields
    """
    sign = duration_sign(*fields)
    for value in fields:
        if (value < 0 and sign > 0) or (value > 0 and sign < 0):
            raise RangeError("mixed-sign values not allowed as duration fields")


__all__ = ["duration_sign", "reject_duration_sign"]
