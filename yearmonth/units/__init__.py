"""Unit and option enumerations for yearmonth."""

from __future__ import annotations

from yearmonth.units.overflow import Overflow, ShowCalendar
from yearmonth.units.rounding_mode import RoundingMode, negate_rounding_mode
from yearmonth.units.timeunit import TimeUnit

__all__: list[str] = [
    "Overflow",
    "RoundingMode",
    "ShowCalendar",
    "TimeUnit",
    "negate_rounding_mode",
]
