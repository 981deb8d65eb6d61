"""
Unit tests for API settings and request parameter parsing.
"""

import pytest

from shopstats.api.config import get_settings, reset_settings
from shopstats.api.dependencies import (
    get_category_filter,
    get_threshold,
    parse_count,
    parse_path_id,
    parse_seller_id,
)
from shopstats.api.errors import InvalidRequestError


@pytest.fixture
def clean_settings():
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    """Test environment-driven settings"""

    def test_defaults(self, clean_settings, monkeypatch):
        monkeypatch.delenv("API_TRENDING_WINDOW_DAYS", raising=False)
        monkeypatch.delenv("DATABASE_FILE", raising=False)

        settings = get_settings()

        assert settings.trending_window_days == 7
        assert settings.database_file == "database.json"
        assert get_settings() is settings

    def test_environment_overrides(self, clean_settings, monkeypatch):
        monkeypatch.setenv("API_TRENDING_WINDOW_DAYS", "30")
        monkeypatch.setenv("DATABASE_FILE", "/data/shop.json")

        settings = get_settings()

        assert settings.trending_window_days == 30
        assert settings.database_file == "/data/shop.json"

    def test_cors_origins_comma_separated(self, clean_settings, monkeypatch):
        monkeypatch.setenv("API_CORS_ORIGINS", "http://a.test, http://b.test")
        assert get_settings().cors_origins == ["http://a.test", "http://b.test"]


class TestParameterParsing:
    """Test path and query parameter coercion"""

    def test_path_id(self):
        assert parse_path_id("12") == 12
        assert parse_path_id("1.5") == 1.5
        with pytest.raises(InvalidRequestError):
            parse_path_id("twelve")

    def test_blank_ids_read_as_zero(self):
        assert parse_path_id("  ") == 0
        assert parse_seller_id(" ") == 0

    def test_seller_id(self):
        assert parse_seller_id("2") == 2
        with pytest.raises(InvalidRequestError) as exc_info:
            parse_seller_id("1_000")
        assert exc_info.value.message == "invalid seller id"

    @pytest.mark.parametrize(
        "value, expected", [(None, 10), ("abc", 10), ("0", 10), ("3", 3), ("2.9", 2), ("Infinity", 10)]
    )
    def test_counts_fall_back_to_default(self, value, expected):
        assert parse_count(value, 10) == expected

    @pytest.mark.parametrize("value, expected", [(None, 10), ("", 10), ("   ", 10), ("0", 0), ("7.5", 7.5)])
    def test_threshold(self, value, expected):
        assert get_threshold(value) == expected

    @pytest.mark.parametrize("value", ["-0.1", "NaN", "ten", "1_0"])
    def test_threshold_rejects_invalid_values(self, value):
        with pytest.raises(InvalidRequestError) as exc_info:
            get_threshold(value)
        assert exc_info.value.message == "invalid threshold"

    def test_category_filter(self):
        assert get_category_filter(None) is None
        assert get_category_filter("") is None
        assert get_category_filter(" ") == 0
        assert get_category_filter("4") == 4
        with pytest.raises(InvalidRequestError):
            get_category_filter("four")
