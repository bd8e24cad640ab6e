"""Test suite for timestamp extraction and temporal predicates."""

import pytest

from mkfind.search.text.timestamps import MS_PER_DAY, extract_timestamp, future, past, today
from tests.test_utils import FIXED_NOW, local_ms


class TestExtractTimestamp:
    """Test date and time extraction."""

    def test_date_with_time(self):
        """Test a date followed by a 12-hour time."""
        assert extract_timestamp("Meeting 03/15/2026 10:00 AM sharp") == local_ms(2026, 3, 15, 10, 0)

    def test_date_with_seconds(self):
        """Test a time that includes seconds."""
        assert extract_timestamp("03/15/2026 9:05:30 PM") == local_ms(2026, 3, 15, 21, 5, 30)

    def test_date_only_is_midnight(self):
        """Test that a missing time defaults to midnight."""
        assert extract_timestamp("Due 3/5/2026.") == local_ms(2026, 3, 5)

    def test_two_digit_year(self):
        """Test that two-digit years are in the 2000s."""
        assert extract_timestamp("03/15/26") == local_ms(2026, 3, 15)

    def test_meridiem_is_case_insensitive(self):
        """Test lower-case am/pm and no space before it."""
        assert extract_timestamp("03/15/2026 10:00pm") == local_ms(2026, 3, 15, 22, 0)

    @pytest.mark.parametrize(
        ("text", "hour"),
        [("12:00 AM", 0), ("12:00 PM", 12), ("1:00 AM", 1), ("11:00 PM", 23)],
    )
    def test_twelve_hour_conversion(self, text: str, hour: int):
        """Test conversion of 12-hour clock values."""
        assert extract_timestamp(f"01/01/2026 {text}") == local_ms(2026, 1, 1, hour, 0)

    def test_time_without_meridiem_is_ignored(self):
        """Test that a time without AM/PM is not part of the token."""
        assert extract_timestamp("03/15/2026 10:00") == local_ms(2026, 3, 15)

    def test_only_first_date_is_used(self):
        """Test that later dates are ignored."""
        assert extract_timestamp("from 01/02/2026 to 03/04/2026") == local_ms(2026, 1, 2)

    def test_no_date_returns_zero(self):
        """Test the not-found sentinel."""
        assert extract_timestamp("no dates here, only 10:00 AM") == 0
        assert extract_timestamp("") == 0

    def test_impossible_date_returns_zero(self):
        """Test that a date that does not exist yields the sentinel."""
        assert extract_timestamp("02/30/2026") == 0
        assert extract_timestamp("03/15/2026 13:00 PM") == 0


class TestTemporalPredicates:
    """Test past, future and today."""

    def test_past(self):
        """Test plain past checks."""
        assert past(FIXED_NOW - 1, now=FIXED_NOW)
        assert not past(FIXED_NOW, now=FIXED_NOW)
        assert not past(FIXED_NOW + 1, now=FIXED_NOW)

    def test_past_with_lookback(self):
        """Test that the lookback window is inclusive of its start."""
        assert past(FIXED_NOW - 7 * MS_PER_DAY, 7, now=FIXED_NOW)
        assert not past(FIXED_NOW - 7 * MS_PER_DAY - 1, 7, now=FIXED_NOW)
        assert past(FIXED_NOW - MS_PER_DAY, 7, now=FIXED_NOW)

    def test_future(self):
        """Test plain future checks."""
        assert future(FIXED_NOW + 1, now=FIXED_NOW)
        assert not future(FIXED_NOW, now=FIXED_NOW)
        assert not future(FIXED_NOW - 1, now=FIXED_NOW)

    def test_future_with_lookahead(self):
        """Test that the lookahead window is inclusive of its end."""
        assert future(FIXED_NOW + 3 * MS_PER_DAY, 3, now=FIXED_NOW)
        assert not future(FIXED_NOW + 3 * MS_PER_DAY + 1, 3, now=FIXED_NOW)

    def test_today(self):
        """Test same-day checks."""
        assert today(local_ms(2026, 3, 15, 0, 0), now=FIXED_NOW)
        assert today(local_ms(2026, 3, 15, 23, 59), now=FIXED_NOW)
        assert not today(local_ms(2026, 3, 14, 23, 59), now=FIXED_NOW)
        assert not today(local_ms(2026, 3, 16), now=FIXED_NOW)

    def test_zero_is_never_matched(self):
        """Test that the not-found sentinel fails every predicate."""
        assert not past(0, now=FIXED_NOW)
        assert not past(0, 100_000, now=FIXED_NOW)
        assert not future(0, now=FIXED_NOW)
        assert not today(0, now=FIXED_NOW)
