"""Tests for relative duration parsing."""

from datetime import datetime, timezone

import pytest
from dateutil.relativedelta import relativedelta

from meilisearch_keys.durations import format_zulu, parse_duration, resolve_expiry

NOW = datetime(2024, 1, 31, 12, 30, 15, 123456, tzinfo=timezone.utc)


class TestParseDuration:
    """Test duration text parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 hour", relativedelta(hours=1)),
            ("6 months", relativedelta(months=6)),
            ("10 years", relativedelta(years=10)),
            ("30 minutes", relativedelta(minutes=30)),
            ("2 weeks", relativedelta(days=14)),
            ("1 Day", relativedelta(days=1)),
            ("+1 day", relativedelta(days=1)),
            ("45s", relativedelta(seconds=45)),
            ("1 year, 2 months and 3 days", relativedelta(years=1, months=2, days=3)),
        ],
    )
    def test_valid_durations(self, text, expected):
        """Test that supported units and separators are parsed."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["soon", "1 fortnight", "hour", "1 hour later", "   "])
    def test_invalid_durations(self, text):
        """Test that anything but <number> <unit> terms is rejected."""
        with pytest.raises(ValueError):
            parse_duration(text)


class TestResolveExpiry:
    """Test conversion to Meilisearch expiresAt values."""

    def test_one_hour(self):
        """Test that one hour is added and formatted with a trailing Z."""
        assert resolve_expiry("1 hour", now=NOW) == "2024-01-31T13:30:15Z"

    def test_month_uses_calendar_arithmetic(self):
        """Test that adding a month clamps to the end of the month."""
        assert resolve_expiry("1 month", now=NOW) == "2024-02-29T12:30:15Z"

    @pytest.mark.parametrize("text", [None, "", "  "])
    def test_blank_means_no_expiry(self, text):
        """Test that a blank duration leaves the key without expiry."""
        assert resolve_expiry(text, now=NOW) is None

    @pytest.mark.parametrize("text", ["9999999 days", "20000 years", "-3000 years"])
    def test_out_of_range_is_value_error(self, text):
        """Test that durations past the supported calendar raise ValueError."""
        with pytest.raises(ValueError, match="out of the supported date range"):
            resolve_expiry(text, now=NOW)

    def test_format_converts_to_utc(self):
        """Test that non-UTC datetimes are converted before formatting."""
        from datetime import timedelta

        paris = timezone(timedelta(hours=1))
        moment = datetime(2024, 6, 1, 10, 0, 0, tzinfo=paris)
        assert format_zulu(moment) == "2024-06-01T09:00:00Z"
