"""Tests for ISO calendar math and the ISO8601Calendar."""

import pytest

from yearmonth import (
    Calendar,
    Duration,
    FieldError,
    ISO8601Calendar,
    Overflow,
    PlainDate,
    PlainYearMonth,
    RangeError,
    TimeUnit,
    get_calendar,
    register_calendar,
)
from yearmonth._internal import calendar as iso


# =============================================================================
# ISO Calendar Math Tests
# =============================================================================


class TestIsoMath:
    """Tests for the proleptic Gregorian helpers."""

    @pytest.mark.parametrize(
        ("year", "leap"),
        [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-4, True), (-100, False)],
    )
    def test_is_leap_year(self, year, leap):
        """Test the Gregorian leap rule, including non-positive years."""
        assert iso.is_leap_year(year) is leap

    def test_days_in_month(self):
        """Test month lengths."""
        assert iso.days_in_month(2021, 2) == 28
        assert iso.days_in_month(2024, 2) == 29
        assert iso.days_in_month(2021, 4) == 30
        assert iso.days_in_month(2021, 12) == 31

    def test_days_in_month_invalid(self):
        """Test invalid months raise ValueError."""
        with pytest.raises(ValueError):
            iso.days_in_month(2021, 13)

    @pytest.mark.parametrize(
        "ymd",
        [(1, 1, 1), (2021, 3, 31), (2000, 2, 29), (0, 12, 31), (-1, 1, 1), (-271821, 4, 19), (275760, 9, 13)],
    )
    def test_ordinal_inverse(self, ymd):
        """Test ordinal conversion is its own inverse across eras."""
        assert iso.ordinal_to_ymd(iso.ymd_to_ordinal(*ymd)) == ymd

    def test_ordinal_is_contiguous(self):
        """Test consecutive ordinals are consecutive days across year 0."""
        assert iso.ymd_to_ordinal(1, 1, 1) == 1
        assert iso.ymd_to_ordinal(0, 12, 31) == 0
        assert iso.ordinal_to_ymd(-365) == (0, 1, 1)

    def test_add_iso_months_clamps(self):
        """Test adding months clamps the day."""
        assert iso.add_iso_months(2024, 1, 31, 1) == (2024, 2, 29)
        assert iso.add_iso_months(2021, 3, 31, -1) == (2021, 2, 28)

    def test_add_iso_months_rejects(self):
        """Test adding months can reject an overflowing day."""
        with pytest.raises(ValueError):
            iso.add_iso_months(2021, 1, 31, 1, constrain=False)

    def test_add_iso_date_days_after_months(self):
        """Test days are added after months."""
        assert iso.add_iso_date(2021, 1, 31, 0, 1, 0, 1) == (2021, 3, 1)
        assert iso.add_iso_date(2021, 3, 1, 0, 0, 1, 0) == (2021, 3, 8)

    @pytest.mark.parametrize(
        ("one", "two", "expected"),
        [
            ((2021, 3, 1), (2023, 5, 1), (26, 0)),
            ((2021, 1, 31), (2021, 2, 28), (1, 0)),
            ((2021, 1, 31), (2021, 3, 1), (1, 1)),
            ((2021, 3, 15), (2021, 1, 20), (-1, -26)),
            ((2021, 3, 1), (2021, 3, 1), (0, 0)),
        ],
    )
    def test_difference_iso_months(self, one, two, expected):
        """Test month differences with leftover days."""
        assert iso.difference_iso_months(one, two) == expected


# =============================================================================
# ISO8601Calendar Tests
# =============================================================================


class TestISO8601Calendar:
    """Tests for the ISO8601Calendar collaborator methods."""

    def test_id_and_protocol(self, iso):
        """Test the identifier and Calendar protocol support."""
        assert iso.id == "iso8601"
        assert isinstance(iso, Calendar)
        assert str(iso) == "iso8601"

    def test_fields(self, iso):
        """Test fields() returns the requested names once each."""
        assert iso.fields(["year", "month", "year"]) == ["year", "month"]

    def test_fields_unknown(self, iso):
        """Test fields() rejects names the calendar does not have."""
        with pytest.raises(RangeError):
            iso.fields(["era"])

    def test_merge_fields_month_replaces_month_code(self, iso):
        """Test month and month_code replace each other."""
        merged = iso.merge_fields({"year": 2021, "month": 3, "month_code": "M03"}, {"month_code": "M07"})
        assert merged == {"year": 2021, "month_code": "M07"}

    def test_merge_fields_keeps_month_for_year(self, iso):
        """Test replacing the year keeps month fields."""
        merged = iso.merge_fields({"year": 2021, "month": 3}, {"year": 2000})
        assert merged == {"year": 2000, "month": 3}

    def test_date_from_fields_constrain(self, iso):
        """Test constrain clamps month and day."""
        date = iso.date_from_fields({"year": 2021, "month": 13, "day": 40}, Overflow.CONSTRAIN)
        assert date == PlainDate(2021, 12, 31)

    def test_date_from_fields_reject(self, iso):
        """Test reject raises on an invalid day."""
        with pytest.raises(RangeError):
            iso.date_from_fields({"year": 2021, "month": 2, "day": 29}, Overflow.REJECT)

    def test_date_from_fields_missing(self, iso):
        """Test missing fields raise FieldError."""
        with pytest.raises(FieldError):
            iso.date_from_fields({"year": 2021, "day": 1})
        with pytest.raises(FieldError):
            iso.date_from_fields({"month": 1, "day": 1})

    def test_month_zero_always_rejected(self, iso):
        """Test month 0 is invalid even with constrain."""
        with pytest.raises(RangeError):
            iso.year_month_from_fields({"year": 2021, "month": 0})

    def test_month_code(self, iso):
        """Test month_code resolves and must agree with month."""
        ym = iso.year_month_from_fields({"year": 2021, "month_code": "M07"})
        assert ym == PlainYearMonth(2021, 7)
        with pytest.raises(RangeError):
            iso.year_month_from_fields({"year": 2021, "month": 6, "month_code": "M07"})
        with pytest.raises(RangeError):
            iso.year_month_from_fields({"year": 2021, "month_code": "M13"})
        with pytest.raises(FieldError):
            iso.year_month_from_fields({"year": 2021, "month_code": 7})

    def test_year_month_from_fields_ignores_day(self, iso):
        """Test the reference day of ISO year-months is 1."""
        ym = iso.year_month_from_fields({"year": 2021, "month": 3, "day": 15})
        assert ym.iso_day == 1

    def test_date_add(self, iso):
        """Test date_add clamps with constrain and rejects with reject."""
        start = PlainDate(2021, 1, 31)
        assert iso.date_add(start, Duration(months=1)) == PlainDate(2021, 2, 28)
        with pytest.raises(RangeError):
            iso.date_add(start, Duration(months=1), Overflow.REJECT)

    def test_date_until_units(self, iso):
        """Test date_until in each supported largest unit."""
        one = PlainDate(2021, 3, 1)
        two = PlainDate(2023, 5, 1)
        assert iso.date_until(one, two, TimeUnit.YEAR) == Duration(years=2, months=2)
        assert iso.date_until(one, two, TimeUnit.MONTH) == Duration(months=26)
        assert iso.date_until(one, two, TimeUnit.DAY) == Duration(days=791)
        assert iso.date_until(one, two, TimeUnit.WEEK) == Duration(weeks=113)

    def test_date_until_negative(self, iso):
        """Test backwards differences are negative in every field."""
        result = iso.date_until(PlainDate(2023, 5, 1), PlainDate(2021, 3, 1), TimeUnit.YEAR)
        assert result == Duration(years=-2, months=-2)

    def test_accessors(self, iso):
        """Test field accessors on a year-month."""
        ym = PlainYearMonth(2024, 2)
        assert iso.year(ym) == 2024
        assert iso.month(ym) == 2
        assert iso.month_code(ym) == "M02"
        assert iso.era(ym) is None
        assert iso.era_year(ym) is None
        assert iso.days_in_month(ym) == 29
        assert iso.days_in_year(ym) == 366
        assert iso.months_in_year(ym) == 12
        assert iso.in_leap_year(ym) is True


# =============================================================================
# Registry Tests
# =============================================================================


class TestCalendarRegistry:
    """Tests for calendar lookup and registration."""

    def test_default(self):
        """Test None resolves to the ISO calendar."""
        assert get_calendar().id == "iso8601"

    def test_lookup_is_case_insensitive(self):
        """Test identifiers are case-insensitive."""
        assert get_calendar("GREGORY").id == "gregory"

    def test_unknown(self):
        """Test unknown identifiers raise RangeError."""
        with pytest.raises(RangeError):
            get_calendar("hebrew")

    def test_wrong_type(self):
        """Test non-calendars raise FieldError."""
        with pytest.raises(FieldError):
            get_calendar(42)
        with pytest.raises(FieldError):
            register_calendar(object())

    def test_calendar_object_passthrough(self, iso):
        """Test a calendar object is used as given."""
        assert get_calendar(iso) is iso

    def test_register_custom_calendar(self):
        """Test a registered calendar can be looked up by its id."""

        class ProlepticCalendar(ISO8601Calendar):
            @property
            def id(self):
                return "proleptic-test"

        calendar = ProlepticCalendar()
        register_calendar(calendar)
        assert get_calendar("proleptic-test") is calendar
        assert PlainYearMonth(2021, 3, "proleptic-test").calendar is calendar
