"""Per-call option handling.

Options arrive as keyword arguments holding strings or enum members and
are normalised here. Difference options are collected into an immutable
DifferenceSettings record that validates itself on creation.
"""

from __future__ import annotations

from dataclasses import dataclass

from yearmonth._internal.validation import to_positive_integer
from yearmonth.errors import RangeError
from yearmonth.units.rounding_mode import RoundingMode
from yearmonth.units.timeunit import TimeUnit

YEAR_MONTH_UNITS: frozenset[TimeUnit] = frozenset({TimeUnit.YEAR, TimeUnit.MONTH})


@dataclass(frozen=True)
class DifferenceSettings:
    """Resolution and rounding for a year-month difference.

    Attributes:
        largest_unit: Largest unit in the result (years folds 12 months
            into a year, months keeps everything in months).
        smallest_unit: Unit the result is rounded to.
        rounding_increment: Round to multiples of this many smallest units.
        rounding_mode: How to round the leftover fraction.

    Examples:
        >>> DifferenceSettings.from_options(smallest_unit="years").largest_unit
        <TimeUnit.YEAR: 'year'>

        >>> DifferenceSettings("years", "months", rounding_mode="ceil").rounding_mode
        <RoundingMode.CEIL: 'ceil'>

        >>> DifferenceSettings(TimeUnit.MONTH, TimeUnit.YEAR)
        Traceback (most recent call last):
        ...
        yearmonth.errors.RangeError: largest unit months must not be smaller than smallest unit years
    """

    largest_unit: TimeUnit | str = TimeUnit.YEAR
    smallest_unit: TimeUnit | str = TimeUnit.MONTH
    rounding_increment: int = 1
    rounding_mode: RoundingMode | str = RoundingMode.TRUNC

    def __post_init__(self) -> None:
        # frozen: normalised values are stored through object.__setattr__
        object.__setattr__(self, "largest_unit", TimeUnit.from_value(self.largest_unit))
        object.__setattr__(
            self, "smallest_unit", TimeUnit.from_value(self.smallest_unit)
        )
        object.__setattr__(
            self,
            "rounding_increment",
            to_positive_integer(self.rounding_increment, "rounding_increment"),
        )
        object.__setattr__(
            self, "rounding_mode", RoundingMode.from_value(self.rounding_mode)
        )

        for label, unit in (
            ("largest", self.largest_unit),
            ("smallest", self.smallest_unit),
        ):
            if unit not in YEAR_MONTH_UNITS:
                raise RangeError(
                    f"{label} unit {unit.plural} is not allowed; use years or months"
                )
        if self.largest_unit.rank < self.smallest_unit.rank:
            raise RangeError(
                f"largest unit {self.largest_unit.plural} must not be smaller "
                f"than smallest unit {self.smallest_unit.plural}"
            )

    @classmethod
    def from_options(
        cls,
        largest_unit: TimeUnit | str | None = None,
        smallest_unit: TimeUnit | str | None = None,
        rounding_increment: int = 1,
        rounding_mode: RoundingMode | str = RoundingMode.TRUNC,
    ) -> DifferenceSettings:
        """Build settings from loosely typed options.

        None or "auto" selects the default unit. Unit names may be
        singular or plural.

        Raises:
            RangeError: For unknown or disallowed values.
            FieldError: For values of the wrong type.
        """
        largest = _unit_or_default(largest_unit, TimeUnit.YEAR)
        smallest = _unit_or_default(smallest_unit, TimeUnit.MONTH)
        return cls(
            largest_unit=largest,
            smallest_unit=smallest,
            rounding_increment=to_positive_integer(
                rounding_increment, "rounding_increment"
            ),
            rounding_mode=RoundingMode.from_value(rounding_mode),
        )

    @property
    def is_exact(self) -> bool:
        """True when no rounding is needed (month resolution, step 1)."""
        return self.smallest_unit is TimeUnit.MONTH and self.rounding_increment == 1


def _unit_or_default(value: TimeUnit | str | None, default: TimeUnit) -> TimeUnit:
    if value is None or value == "auto":
        return default
    return TimeUnit.from_value(value)


__all__ = ["DifferenceSettings", "YEAR_MONTH_UNITS"]
