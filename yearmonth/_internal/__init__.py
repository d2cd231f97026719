"""Internal utilities for yearmonth.

This module contains private implementation details:
    - Constants and magic numbers
    - ISO calendar math
    - Range validation and numeric coercion

Note: This module is not part of the public API.
"""

from __future__ import annotations

from yearmonth._internal.validation import (
    to_integer,
    to_positive_integer,
    validate_date_range,
    validate_iso_date,
    validate_year_month_range,
)

__all__: list[str] = [
    "to_integer",
    "to_positive_integer",
    "validate_date_range",
    "validate_iso_date",
    "validate_year_month_range",
]
