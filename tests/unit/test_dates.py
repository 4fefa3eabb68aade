"""
Unit tests for calendar validation.
"""

from datetime import date

from sweid.identity.dates import coordination_date, is_valid_date, to_date


class TestToDate:
    """Tests for building dates from components."""

    def test_valid_date(self):
        assert to_date("19", "81", "12", "18") == date(1981, 12, 18)

    def test_month_out_of_range(self):
        assert to_date("19", "81", "00", "18") is None
        assert to_date("19", "81", "13", "18") is None
        assert to_date("19", "55", "60", "36") is None

    def test_day_out_of_range(self):
        assert to_date("19", "81", "12", "00") is None
        assert to_date("19", "81", "12", "32") is None

    def test_day_per_month(self):
        """April has 30 days."""
        assert to_date("19", "81", "04", "30") is not None
        assert to_date("19", "81", "04", "31") is None

    def test_non_numeric(self):
        assert to_date("19", "8x", "12", "18") is None


class TestLeapYears:
    """Tests for 29 February."""

    def test_leap_year(self):
        assert is_valid_date("20", "24", "02", "29")

    def test_common_year(self):
        assert not is_valid_date("20", "23", "02", "29")

    def test_century_not_leap(self):
        assert not is_valid_date("19", "00", "02", "29")
        assert not is_valid_date("21", "00", "02", "29")

    def test_four_hundred_years_leap(self):
        assert is_valid_date("20", "00", "02", "29")


class TestCoordinationDate:
    """Tests for samordningsnummer dates (day + 60)."""

    def test_day_offset(self):
        assert coordination_date("19", "81", "12", "78") == date(1981, 12, 18)

    def test_last_day_of_month(self):
        assert coordination_date("19", "81", "12", "91") == date(1981, 12, 31)
        assert coordination_date("19", "81", "12", "92") is None

    def test_day_below_offset(self):
        assert coordination_date("19", "81", "12", "18") is None
        assert coordination_date("19", "81", "12", "60") is None

    def test_leap_day(self):
        assert coordination_date("20", "00", "02", "89") == date(2000, 2, 29)
        assert coordination_date("19", "00", "02", "89") is None

    def test_non_numeric_day(self):
        assert coordination_date("19", "81", "12", "7x") is None
