"""Tests for date range and minute parsing."""

from datetime import date

import pytest

from tallysheet import ValidationError
from tallysheet.utils.date_parser import (
    default_window,
    parse_date,
    parse_date_range,
    parse_minutes,
)


class TestParseDateRange:
    """Test parse_date_range formats."""

    def test_explicit_range(self):
        assert parse_date_range("2022-07-01 - 2022-07-14") == (
            date(2022, 7, 1),
            date(2022, 7, 14),
        )

    def test_single_day(self):
        assert parse_date_range(" 2022-07-12 ") == (date(2022, 7, 12), date(2022, 7, 12))

    def test_month(self):
        assert parse_date_range("2022-02") == (date(2022, 2, 1), date(2022, 2, 28))

    @pytest.mark.parametrize(
        "text", ["yesterday", "2022-13", "2022-07-32", "2022/07/12", "2022-07-01 - x"]
    )
    def test_invalid(self, text):
        """Test that unsupported input raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_date_range(text)


class TestHelpers:
    """Test the remaining parsing helpers."""

    def test_parse_date(self):
        assert parse_date("2022-07-12") == date(2022, 7, 12)

    def test_default_window(self):
        """Test the default two-week window starting today."""
        assert default_window(date(2022, 7, 12)) == (date(2022, 7, 12), date(2022, 7, 26))
        assert default_window(date(2022, 7, 12), days=0) == (
            date(2022, 7, 12),
            date(2022, 7, 12),
        )

    def test_parse_minutes(self):
        assert parse_minutes("90") == 90.0
        assert parse_minutes(" 12.5 ") == 12.5

    def test_parse_minutes_falls_back_to_zero(self):
        """Test that text that is not a number counts as zero minutes."""
        assert parse_minutes("ninety") == 0.0
        assert parse_minutes("") == 0.0
