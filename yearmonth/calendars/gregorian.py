"""The Gregorian calendar with eras.

Same months and days as ISO 8601, but years can also be given as an
era ("ce" or "bce") plus a year of era. Year 0 is 1 BCE.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from yearmonth._internal.validation import to_integer
from yearmonth.calendars.iso8601 import ISO8601Calendar
from yearmonth.errors import FieldError, RangeError

if TYPE_CHECKING:
    from yearmonth.calendars.base import ISOFields

_ERA_FIELDS = ("year", "era", "era_year")


class GregorianCalendar(ISO8601Calendar):
    """Gregorian calendar ("gregory") with era and era_year fields.

    Examples:
        >>> cal = GregorianCalendar()
        >>> ym = cal.year_month_from_fields({"era": "bce", "era_year": 44, "month": 3})
        >>> ym.iso_year
        -43
        >>> cal.era(ym), cal.era_year(ym)
        ('bce', 44)
    """

    _field_names: frozenset[str] = ISO8601Calendar._field_names | {"era", "era_year"}

    @property
    def id(self) -> str:
        return "gregory"

    def fields(self, field_names: Iterable[str]) -> list[str]:
        """Return the requested names, adding era and era_year with year."""
        result = super().fields(field_names)
        if "year" in result:
            for name in ("era", "era_year"):
                if name not in result:
                    result.append(name)
        return result

    def merge_fields(
        self, fields: Mapping[str, Any], additional_fields: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Merge field records; any of year/era/era_year replaces all three.

        Examples:
            >>> GregorianCalendar().merge_fields(
            ...     {"year": 2021, "era": "ce", "era_year": 2021, "month": 3},
            ...     {"year": 1999},
            ... )
            {'month': 3, 'year': 1999}
        """
        base = dict(fields)
        if any(additional_fields.get(name) is not None for name in _ERA_FIELDS):
            for name in _ERA_FIELDS:
                base.pop(name, None)
        return super().merge_fields(base, additional_fields)

    def era(self, value: ISOFields) -> str | None:
        return "ce" if value.iso_year > 0 else "bce"

    def era_year(self, value: ISOFields) -> int | None:
        year = value.iso_year
        return year if year > 0 else 1 - year

    def _resolve_year(self, fields: Mapping[str, Any]) -> int:
        era = fields.get("era")
        era_year = fields.get("era_year")
        year = fields.get("year")

        if era is None and era_year is None:
            if year is None:
                raise FieldError("year, or era and era_year, is required")
            return to_integer(year, "year")
        if era is None or era_year is None:
            raise FieldError("era and era_year must be given together")

        era_year = to_integer(era_year, "era_year")
        if era == "ce":
            resolved = era_year
        elif era == "bce":
            resolved = 1 - era_year
        else:
            raise RangeError(f"invalid era for gregory: {era!r}")

        if year is not None and to_integer(year, "year") != resolved:
            raise RangeError(
                f"year {year} does not match era {era!r} year {era_year}"
            )
        return resolved


__all__ = ["GregorianCalendar"]
