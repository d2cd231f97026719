"""Tests for the GregorianCalendar and its era fields."""

import pytest

from yearmonth import FieldError, GregorianCalendar, PlainYearMonth, RangeError


class TestGregorianEras:
    """Tests for era and era_year."""

    @pytest.mark.parametrize(
        ("iso_year", "era", "era_year"),
        [(2021, "ce", 2021), (1, "ce", 1), (0, "bce", 1), (-43, "bce", 44)],
    )
    def test_era_fields(self, gregory, iso_year, era, era_year):
        """Test astronomical years map to era and year of era."""
        ym = PlainYearMonth(iso_year, 3, gregory)
        assert ym.era == era
        assert ym.era_year == era_year
        assert ym.year == iso_year

    def test_fields_adds_era_fields(self, gregory):
        """Test requesting year also yields era and era_year."""
        assert gregory.fields(["month", "year"]) == ["month", "year", "era", "era_year"]

    def test_fields_without_year(self, gregory):
        """Test era fields are only added alongside year."""
        assert gregory.fields(["month"]) == ["month"]


class TestGregorianFromFields:
    """Tests for resolving years from era fields."""

    def test_from_era(self, gregory):
        """Test bce era_year 44 is ISO year -43."""
        ym = gregory.year_month_from_fields({"era": "bce", "era_year": 44, "month": 3})
        assert ym.iso_year == -43
        assert ym.calendar is gregory

    def test_from_year(self, gregory):
        """Test a plain year is accepted."""
        ym = gregory.year_month_from_fields({"year": 2021, "month": 3})
        assert (ym.iso_year, ym.iso_month) == (2021, 3)

    def test_consistent_year_and_era(self, gregory):
        """Test matching year and era fields are accepted."""
        ym = gregory.year_month_from_fields(
            {"year": 2021, "era": "ce", "era_year": 2021, "month": 3}
        )
        assert ym.iso_year == 2021

    def test_inconsistent_year_and_era(self, gregory):
        """Test a year contradicting the era fields is rejected."""
        with pytest.raises(RangeError):
            gregory.year_month_from_fields(
                {"year": 2020, "era": "ce", "era_year": 2021, "month": 3}
            )

    def test_era_without_era_year(self, gregory):
        """Test era and era_year must come together."""
        with pytest.raises(FieldError):
            gregory.year_month_from_fields({"era": "ce", "month": 3})

    def test_unknown_era(self, gregory):
        """Test unknown eras raise RangeError."""
        with pytest.raises(RangeError):
            gregory.year_month_from_fields({"era": "ad", "era_year": 1, "month": 3})

    def test_missing_year(self, gregory):
        """Test a year source is required."""
        with pytest.raises(FieldError):
            gregory.year_month_from_fields({"month": 3})


class TestGregorianMerge:
    """Tests for merge_fields precedence."""

    def test_year_replaces_era_fields(self, gregory):
        """Test a new year drops stale era fields."""
        merged = gregory.merge_fields(
            {"year": 2021, "era": "ce", "era_year": 2021, "month": 3}, {"year": 1999}
        )
        assert merged == {"month": 3, "year": 1999}

    def test_era_replaces_year(self, gregory):
        """Test new era fields drop the stale year."""
        merged = gregory.merge_fields(
            {"year": 2021, "era": "ce", "era_year": 2021, "month": 3},
            {"era": "bce", "era_year": 10},
        )
        assert merged == {"month": 3, "era": "bce", "era_year": 10}

    def test_with_fields_through_year_month(self):
        """Test with_fields on a Gregorian value uses era-aware merging."""
        ym = PlainYearMonth(2021, 3, "gregory")
        assert ym.with_fields({"era": "bce", "era_year": 1}).iso_year == 0
        assert ym.with_fields({"year": 1999}).era_year == 1999

    def test_is_distinct_from_iso(self):
        """Test the Gregorian calendar is not the ISO calendar."""
        assert GregorianCalendar().id != "iso8601"
        assert not PlainYearMonth(2021, 3, "gregory").equals(PlainYearMonth(2021, 3))
