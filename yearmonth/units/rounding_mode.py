"""RoundingMode enumeration.

This module provides the RoundingMode enum used when rounding a
computed duration to an increment of its smallest unit.
"""

from __future__ import annotations

from enum import Enum

from yearmonth.errors import FieldError, RangeError


class RoundingMode(Enum):
    """How a fractional quantity is rounded to a whole increment.

    The directional modes always move the same way; the half modes pick
    the nearest increment and use their direction only to break an
    exact tie.

    Examples:
        >>> RoundingMode.from_value("halfExpand")
        <RoundingMode.HALF_EXPAND: 'half-expand'>

        >>> RoundingMode.CEIL.negated()
        <RoundingMode.FLOOR: 'floor'>
    """

    CEIL = "ceil"  # toward positive infinity
    FLOOR = "floor"  # toward negative infinity
    EXPAND = "expand"  # away from zero
    TRUNC = "trunc"  # toward zero
    HALF_CEIL = "half-ceil"
    HALF_FLOOR = "half-floor"
    HALF_EXPAND = "half-expand"
    HALF_TRUNC = "half-trunc"
    HALF_EVEN = "half-even"

    @classmethod
    def from_value(cls, value: RoundingMode | str) -> RoundingMode:
        """Resolve a mode from an enum member or its name.

        Accepts "half-expand", "half_expand" and "halfExpand" spellings.

        Raises:
            FieldError: If value is neither a RoundingMode nor a string.
            RangeError: If the name is not a known rounding mode.
        """
        if isinstance(value, RoundingMode):
            return value
        if not isinstance(value, str):
            raise FieldError(
                f"rounding mode must be a string, got {type(value).__name__}"
            )
        name = value.replace("_", "-").lower()
        if name.startswith("half") and not name.startswith("half-"):
            name = "half-" + name[4:]
        try:
            return cls(name)
        except ValueError:
            raise RangeError(f"invalid rounding mode: {value!r}") from None

    def negated(self) -> RoundingMode:
        """Return the mode that rounds a negated quantity the same way.

        Only the modes tied to the sign of the number line (ceil, floor
        and their half variants) change; the rest are symmetric.
        """
        return _NEGATED.get(self, self)


_NEGATED: dict[RoundingMode, RoundingMode] = {
    RoundingMode.CEIL: RoundingMode.FLOOR,
    RoundingMode.FLOOR: RoundingMode.CEIL,
    RoundingMode.HALF_CEIL: RoundingMode.HALF_FLOOR,
    RoundingMode.HALF_FLOOR: RoundingMode.HALF_CEIL,
}


def negate_rounding_mode(mode: RoundingMode | str) -> RoundingMode:
    """Return the sign-mirrored rounding mode for `mode`."""
    return RoundingMode.from_value(mode).negated()


__all__ = ["RoundingMode", "negate_rounding_mode"]
