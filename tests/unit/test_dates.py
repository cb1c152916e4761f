"""
Unit tests for timestamp parsing (timew_line.dates).
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timew_line.dates import parse_date


class TestParseDate:
    """Tests for parse_date()."""

    def test_valid_token(self):
        assert parse_date("20001011T133055Z") == datetime(
            2000, 10, 11, 13, 30, 55, tzinfo=timezone.utc
        )

    def test_result_is_utc(self):
        parsed = parse_date("20001011T133055Z")
        assert parsed.tzinfo == timezone.utc
        assert parsed.utcoffset().total_seconds() == 0

    def test_leap_day(self):
        assert parse_date("20000229T000000Z") == datetime(2000, 2, 29, tzinfo=timezone.utc)

    # -----------------------------------------------------------------
    # Zone marker
    # -----------------------------------------------------------------

    @pytest.mark.parametrize("token", [
        "20001011T133055CEST",
        "20001011T133055UTC",
        "20001011T133055+0000",
        "20001011T133055z",
        "20001011T133055",
    ])
    def test_only_z_accepted(self, token):
        assert parse_date(token) is None

    # -----------------------------------------------------------------
    # Shape and calendar
    # -----------------------------------------------------------------

    @pytest.mark.parametrize("token", [
        "",
        "Z",
        "2000111T133055Z",
        "200010110T133055Z",
        "20001011 133055Z",
        "20001011T13305Z",
        "2000-10-11T13:30:55Z",
        "2000101aT133055Z",
        "sdsadsad",
    ])
    def test_wrong_shape(self, token):
        assert parse_date(token) is None

    @pytest.mark.parametrize("token", [
        "20001311T133055Z",  # month 13
        "20000230T133055Z",  # Feb 30
        "20010229T000000Z",  # not a leap year
        "20001011T243055Z",  # hour 24
        "20001011T136055Z",  # minute 60
    ])
    def test_invalid_calendar_values(self, token):
        assert parse_date(token) is None

    def test_non_ascii_digits_rejected(self):
        """Arabic-Indic digits for the year."""
        assert parse_date("٢٠٠٠1011T133055Z") is None
