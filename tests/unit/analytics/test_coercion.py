"""
Unit tests for the lenient coercion helpers.
"""

import math

import pytest

from shopstats.analytics import (
    UNKNOWN,
    average,
    display_name,
    full_name,
    round2,
    same_id,
    to_float,
    to_int_or_float,
    to_month,
    to_number,
    to_timestamp,
)
from shopstats.db import User


class TestToNumber:
    """Test numeric parsing"""

    @pytest.mark.parametrize(
        "value, expected",
        [(5, 5.0), ("10.00", 10.0), (" 3 ", 3.0), (-2.5, -2.5), ("1e3", 1000.0)],
    )
    def test_parses_numbers_and_numeric_strings(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "abc", "Infinity", "nan", math.inf, True, [], {}]
    )
    def test_rejects_missing_unparseable_and_non_finite(self, value):
        assert to_number(value) is None

    @pytest.mark.parametrize("value", ["1_000", "1_0.5", "_5"])
    def test_rejects_digit_separators(self, value):
        assert to_number(value) is None
        assert to_float(value) == 0.0

    def test_to_float_falls_back_to_zero(self):
        assert to_float("abc") == 0.0
        assert to_float(None) == 0.0
        assert to_float("7.5") == 7.5


class TestIds:
    """Test id comparison and output formatting"""

    def test_same_id_compares_numerically(self):
        assert same_id("3", 3)
        assert same_id(3.0, 3)
        assert not same_id(4, 3)

    def test_same_id_never_matches_missing_values(self):
        assert not same_id(None, 3)
        assert not same_id(3, None)
        assert not same_id("x", None)

    def test_integral_floats_become_ints(self):
        assert to_int_or_float(3.0) == 3
        assert isinstance(to_int_or_float(3.0), int)
        assert to_int_or_float(2.5) == 2.5


class TestRounding:
    """Test 2-decimal rounding and averages"""

    @pytest.mark.parametrize(
        "value, expected",
        [(1.005, 1.01), (2.675, 2.68), (150.0, 150.0), (-1.005, -1.01), (16 / 3, 5.33)],
    )
    def test_round2_rounds_half_away_from_zero(self, value, expected):
        assert round2(value) == expected

    def test_round2_maps_non_finite_to_zero(self):
        assert round2(math.inf) == 0.0
        assert round2(math.nan) == 0.0

    @pytest.mark.parametrize("value", [1e26, 1e30, -3.5e40, 1.7e308])
    def test_round2_keeps_very_large_values(self, value):
        assert round2(value) == value

    def test_average(self):
        assert average([10.0, 20.0]) == 15.0
        assert average([1.0, 2.0, 2.0]) == 1.67

    def test_average_of_nothing_is_zero(self):
        assert average([]) == 0


class TestToTimestamp:
    """Test timestamp conversion"""

    def test_epoch_millis_pass_through(self):
        assert to_timestamp(1700000000000) == 1700000000000
        assert to_timestamp("1700000000000") == 1700000000000

    def test_iso_strings_are_converted(self):
        assert to_timestamp("2023-11-14T22:13:20Z") == 1700000000000
        assert to_timestamp("2023-11-14T22:13:20+00:00") == 1700000000000

    def test_naive_iso_strings_are_utc(self):
        assert to_timestamp("2023-11-14T22:13:20") == 1700000000000

    @pytest.mark.parametrize("value", [None, "", "yesterday", {"$date": 1}])
    def test_anything_else_is_epoch_zero(self, value):
        assert to_timestamp(value) == 0

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1700000000000, "2023-11"),
            ("2024-02-29T23:59:59Z", "2024-02"),
            ("2024-03-01T00:30:00+02:00", "2024-02"),
            (0, "1970-01"),
        ],
    )
    def test_month_is_utc(self, value, expected):
        assert to_month(value) == expected

    @pytest.mark.parametrize("value", [None, "", "yesterday", 1e300])
    def test_month_of_undatable_values(self, value):
        assert to_month(value) is None


class TestNames:
    """Test user name helpers"""

    def test_full_name_keeps_blank_parts(self):
        assert full_name(User(first_name="Ada", last_name="Lovelace")) == "Ada Lovelace"
        assert full_name(User(first_name="Ada")) == "Ada "

    def test_display_name_prefers_name(self):
        assert display_name(User(first_name="Ada", last_name="Lovelace", email="a@x")) == "Ada Lovelace"

    def test_display_name_falls_back_to_email(self):
        assert display_name(User(first_name="", last_name=None, email="a@x")) == "a@x"

    def test_display_name_of_missing_user(self):
        assert display_name(None) == UNKNOWN
