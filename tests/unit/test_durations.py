"""Tests for duration formatting."""

from datetime import timedelta

from tallysheet.utils.durations import format_duration, format_duration_hours


class TestFormatDuration:
    """Test format_duration."""

    def test_units(self):
        assert format_duration(timedelta(days=1, hours=3, minutes=5)) == "1d:3h"
        assert format_duration(timedelta(hours=1, minutes=30)) == "1h:30m"
        assert format_duration(timedelta(minutes=2, seconds=5)) == "2m:5s"
        assert format_duration(timedelta(seconds=42)) == "42s"
        assert format_duration(timedelta(0)) == "0s"

    def test_negative(self):
        assert format_duration(timedelta(minutes=-90)) == "-1h:30m"


class TestFormatDurationHours:
    """Test format_duration_hours."""

    def test_decimal_hours(self):
        assert format_duration_hours(timedelta(hours=1, minutes=30)) == "1.50"
        assert format_duration_hours(timedelta(days=1, hours=2)) == "26.00"
        assert format_duration_hours(timedelta(0)) == "0.00"
