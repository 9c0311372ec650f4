"""Tests for explicit date rules."""

from datetime import datetime

from typeguess.deciders.base import DeciderOptions
from typeguess.deciders.explicit_dates import CompactDateRule, FormatListRule, match_explicit_date


class TestFormatListRule:
    """Tests for caller supplied formats."""

    def test_matches_any_format(self):
        """Test that each format is tried in turn."""
        rule = FormatListRule(("%d%m%Y", "%Y/%m"))
        assert rule.match("15012024") == datetime(2024, 1, 15)
        assert rule.match("2024/03") == datetime(2024, 3, 1)
        assert rule.match("hello") is None


class TestCompactDateRule:
    """Tests for yyyymmdd recognition."""

    def test_valid_dates(self):
        """Test real calendar dates in range."""
        assert CompactDateRule().match("20240115") == datetime(2024, 1, 15)

    def test_invalid_dates(self):
        """Test impossible dates, wrong lengths and out of range years."""
        rule = CompactDateRule()
        assert rule.match("20241301") is None
        assert rule.match("2024011") is None
        assert rule.match("18000101") is None
        assert rule.match("12345678") is None

    def test_year_range_configurable(self):
        """Test custom year bounds."""
        assert CompactDateRule(min_year=1700).match("18000101") == datetime(1800, 1, 1)


class TestMatchExplicitDate:
    """Tests for combining rules."""

    def test_first_match_wins(self):
        """Test rule order."""
        rules = (FormatListRule(("%Y%d%m",)), CompactDateRule())
        assert match_explicit_date("20241201", rules) == datetime(2024, 1, 12)

    def test_options_without_rules(self):
        """Test that no rules means no explicit dates."""
        assert DeciderOptions().explicit_date("20240115") is None
