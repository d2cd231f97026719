"""Tests for option enums and DifferenceSettings."""

import dataclasses

import pytest

from yearmonth import (
    DifferenceSettings,
    FieldError,
    Overflow,
    RangeError,
    RoundingMode,
    ShowCalendar,
    TimeUnit,
)


# =============================================================================
# Enum Parsing Tests
# =============================================================================


class TestTimeUnit:
    """Tests for TimeUnit."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("year", TimeUnit.YEAR), ("years", TimeUnit.YEAR), ("Months", TimeUnit.MONTH), (TimeUnit.DAY, TimeUnit.DAY)],
    )
    def test_from_value(self, value, expected):
        """Test singular, plural and enum inputs."""
        assert TimeUnit.from_value(value) is expected

    def test_unknown(self):
        """Test unknown names raise RangeError."""
        with pytest.raises(RangeError):
            TimeUnit.from_value("decades")

    def test_wrong_type(self):
        """Test non-strings raise FieldError."""
        with pytest.raises(FieldError):
            TimeUnit.from_value(1)

    def test_order(self):
        """Test ranks increase with unit size."""
        ranks = [u.rank for u in (TimeUnit.NANOSECOND, TimeUnit.SECOND, TimeUnit.DAY, TimeUnit.MONTH, TimeUnit.YEAR)]
        assert ranks == sorted(ranks)

    def test_calendar_units(self):
        """Test which units vary by calendar."""
        assert TimeUnit.MONTH.is_calendar_unit
        assert not TimeUnit.DAY.is_calendar_unit
        assert TimeUnit.MONTH.nanoseconds is None
        assert TimeUnit.HOUR.nanoseconds == 3_600_000_000_000
        assert TimeUnit.MONTH.plural == "months"


class TestOverflowAndShowCalendar:
    """Tests for Overflow and ShowCalendar."""

    def test_overflow(self):
        """Test overflow parsing."""
        assert Overflow.from_value("reject") is Overflow.REJECT
        assert Overflow.from_value(Overflow.CONSTRAIN) is Overflow.CONSTRAIN
        with pytest.raises(RangeError):
            Overflow.from_value("balance")
        with pytest.raises(FieldError):
            Overflow.from_value(None)

    def test_show_calendar(self):
        """Test calendar display parsing."""
        assert ShowCalendar.from_value("never") is ShowCalendar.NEVER
        with pytest.raises(RangeError):
            ShowCalendar.from_value("critical")


# =============================================================================
# DifferenceSettings Tests
# =============================================================================


class TestDifferenceSettings:
    """Tests for DifferenceSettings."""

    def test_defaults(self):
        """Test the defaults are years/months, increment 1, trunc."""
        settings = DifferenceSettings()
        assert settings.largest_unit is TimeUnit.YEAR
        assert settings.smallest_unit is TimeUnit.MONTH
        assert settings.rounding_increment == 1
        assert settings.rounding_mode is RoundingMode.TRUNC
        assert settings.is_exact

    def test_from_options(self):
        """Test string options are normalised."""
        settings = DifferenceSettings.from_options("months", "months", 3, "halfEven")
        assert settings.largest_unit is TimeUnit.MONTH
        assert settings.rounding_increment == 3
        assert settings.rounding_mode is RoundingMode.HALF_EVEN
        assert not settings.is_exact

    def test_auto(self):
        """Test auto and None select defaults."""
        settings = DifferenceSettings.from_options("auto", None)
        assert settings.largest_unit is TimeUnit.YEAR
        assert settings.smallest_unit is TimeUnit.MONTH

    def test_smallest_years_not_exact(self):
        """Test rounding to years is never the exact path."""
        assert not DifferenceSettings.from_options(smallest_unit="years").is_exact

    def test_disallowed_unit(self):
        """Test day units are rejected."""
        with pytest.raises(RangeError):
            DifferenceSettings(TimeUnit.YEAR, TimeUnit.DAY)

    def test_unit_order(self):
        """Test largest must not be smaller than smallest."""
        with pytest.raises(RangeError, match="must not be smaller"):
            DifferenceSettings(TimeUnit.MONTH, TimeUnit.YEAR)

    def test_increment(self):
        """Test the increment must be a positive integer."""
        with pytest.raises(RangeError):
            DifferenceSettings(rounding_increment=0)
        with pytest.raises(FieldError):
            DifferenceSettings.from_options(rounding_increment="2")

    def test_frozen(self):
        """Test settings are immutable."""
        settings = DifferenceSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.rounding_increment = 2

    def test_direct_strings_normalised(self):
        """Test a record built directly from strings holds enum members."""
        settings = DifferenceSettings("years", "months", 2.0, "ceil")
        assert settings.largest_unit is TimeUnit.YEAR
        assert settings.smallest_unit is TimeUnit.MONTH
        assert settings.rounding_increment == 2
        assert type(settings.rounding_increment) is int
        assert settings.rounding_mode is RoundingMode.CEIL
        assert settings == DifferenceSettings(TimeUnit.YEAR, TimeUnit.MONTH, 2, RoundingMode.CEIL)

    def test_direct_disallowed_unit_string(self):
        """Test a disallowed unit given as a string raises RangeError."""
        with pytest.raises(RangeError, match="weeks is not allowed"):
            DifferenceSettings("weeks", "months")

    def test_direct_unknown_mode(self):
        """Test an unknown rounding mode is rejected on construction."""
        with pytest.raises(RangeError):
            DifferenceSettings(rounding_mode="bogus")
        with pytest.raises(FieldError):
            DifferenceSettings(rounding_mode=None)
