"""Duration arithmetic for calendar-qualified values.

The functions in this module are the canonical implementations behind
the PlainYearMonth methods.

Sign rules (from yearmonth.arithmetic.signs):
    - duration_sign: Sign of a list of duration fields
    - reject_duration_sign: Reject mixed-sign duration fields

Balancing (from yearmonth.arithmetic.balance):
    - balance_duration: Redistribute day and sub-day fields
    - balance_into_days: Fold sub-day fields into whole days

Rounding (from yearmonth.arithmetic.rounding):
    - round_number_to_increment: Round an exact fraction
    - round_duration: Round years/months against an anchor date
    - balance_years_months: Re-express years/months under a largest unit

Year-month operations (from yearmonth.arithmetic.year_month_ops):
    - add_duration, subtract_duration: Calendar-anchored addition
    - difference, difference_since: Calendar-anchored differences

Comparison (from yearmonth.arithmetic.comparisons):
    - equals, compare
"""

from __future__ import annotations

from yearmonth.arithmetic.signs import duration_sign, reject_duration_sign
from yearmonth.arithmetic.balance import (
    BalancedTime,
    balance_duration,
    balance_into_days,
)
from yearmonth.arithmetic.rounding import (
    RoundedYearsMonths,
    balance_years_months,
    round_duration,
    round_number_to_increment,
)
from yearmonth.arithmetic.year_month_ops import (
    add_duration,
    difference,
    difference_since,
    subtract_duration,
)
from yearmonth.arithmetic.comparisons import compare, equals

__all__ = [
    # Sign rules
    "duration_sign",
    "reject_duration_sign",
    # Balancing
    "BalancedTime",
    "balance_duration",
    "balance_into_days",
    # Rounding
    "RoundedYearsMonths",
    "round_number_to_increment",
    "round_duration",
    "balance_years_months",
    # Year-month operations
    "add_duration",
    "subtract_duration",
    "difference",
    "difference_since",
    # Comparison
    "equals",
    "compare",
]
