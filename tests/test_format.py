"""Tests for ISO 8601 formatting."""

import pytest

from yearmonth import PlainDate, PlainYearMonth, RangeError, ShowCalendar
from yearmonth.format import (
    format_calendar_annotation,
    format_date,
    format_year_month,
    iso_year_string,
)


class TestIsoYearString:
    """Tests for year formatting."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2021, "2021"),
            (0, "0000"),
            (9999, "9999"),
            (10000, "+010000"),
            (-1, "-000001"),
            (-271821, "-271821"),
            (275760, "+275760"),
        ],
    )
    def test_year(self, year, expected):
        """Test four digits inside 0..9999, sign and six digits outside."""
        assert iso_year_string(year) == expected


class TestCalendarAnnotation:
    """Tests for the calendar annotation."""

    @pytest.mark.parametrize(
        ("calendar_id", "show", "expected"),
        [
            ("iso8601", "auto", ""),
            ("iso8601", "always", "[u-ca=iso8601]"),
            ("iso8601", "never", ""),
            ("gregory", "auto", "[u-ca=gregory]"),
            ("gregory", ShowCalendar.ALWAYS, "[u-ca=gregory]"),
            ("gregory", ShowCalendar.NEVER, ""),
        ],
    )
    def test_annotation(self, calendar_id, show, expected):
        """Test the three display options."""
        assert format_calendar_annotation(calendar_id, show) == expected

    def test_invalid_option(self):
        """Test unknown display options raise RangeError."""
        with pytest.raises(RangeError):
            format_calendar_annotation("iso8601", "sometimes")


class TestFormatYearMonth:
    """Tests for format_year_month."""

    def test_iso(self):
        """Test ISO year-months omit the day."""
        assert format_year_month(PlainYearMonth(2021, 3)) == "2021-03"

    def test_non_iso_includes_reference_day(self):
        """Test other calendars include the reference day."""
        assert format_year_month(PlainYearMonth(2021, 3, "gregory")) == "2021-03-01[u-ca=gregory]"
        assert format_year_month(PlainYearMonth(2021, 3, "gregory"), "never") == "2021-03-01"

    def test_extended_years(self):
        """Test years outside four digits."""
        assert format_year_month(PlainYearMonth(-271821, 4)) == "-271821-04"
        assert format_year_month(PlainYearMonth(12345, 12)) == "+012345-12"


class TestFormatDate:
    """Tests for format_date."""

    def test_date(self):
        """Test YYYY-MM-DD."""
        assert format_date(PlainDate(2021, 3, 31)) == "2021-03-31"
        assert str(PlainDate(2021, 3, 1, "gregory")) == "2021-03-01[u-ca=gregory]"
