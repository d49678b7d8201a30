"""Unit tests for human-readable rule descriptions."""

from __future__ import annotations

from datetime import date

import pytest

from taskrecur.core.formatter import (
    day_name,
    describe,
    format_end_condition,
    format_long_date,
    format_pattern,
    ordinal,
)
from taskrecur.models.pattern import PatternConfig


class TestFormatPattern:
    @pytest.mark.parametrize(
        "kind, interval, expected",
        [
            ("daily", 1, "Daily"),
            ("daily", 3, "Every 3 days"),
            ("weekly", 1, "Weekly"),
            ("weekly", 2, "Every 2 weeks"),
            ("monthly", 1, "Monthly"),
            ("monthly", 6, "Every 6 months"),
            ("yearly", 1, "Yearly"),
            ("yearly", 2, "Every 2 years"),
        ],
    )
    def test_interval_phrases(self, kind, interval, expected):
        assert format_pattern(PatternConfig(kind=kind, interval=interval)) == expected

    def test_weekly_on_days(self, weekly_mwf):
        assert format_pattern(weekly_mwf) == "Weekly on Mon, Wed, Fri"

    def test_monthly_on_days(self):
        config = PatternConfig(kind="monthly", custom_month_days=[15, 1])
        assert format_pattern(config) == "Monthly on day 1, 15"

    def test_monthly_positional(self):
        config = PatternConfig(
            kind="monthly", custom_month_position="last", custom_month_weekday="friday"
        )
        assert format_pattern(config) == "Monthly on the last friday"

    @pytest.mark.parametrize(
        "frequency, expected",
        [
            ("weekdays", "Weekdays (Mon-Fri)"),
            ("biweekly", "Bi-weekly"),
            ("quarterly", "Quarterly"),
            ("daily", "Daily"),
            ("monthly", "Monthly"),
        ],
    )
    def test_custom_frequencies(self, frequency, expected):
        config = PatternConfig(kind="custom", frequency=frequency)
        assert format_pattern(config) == expected

    def test_custom_daily_interval(self):
        config = PatternConfig(kind="custom", frequency="daily", interval=2)
        assert format_pattern(config) == "Every 2 days"

    def test_custom_weekly_days(self):
        config = PatternConfig(kind="custom", frequency="weekly", custom_weekdays=[0, 6])
        assert format_pattern(config) == "Weekly on Sun, Sat"

    def test_custom_without_frequency(self):
        assert format_pattern(PatternConfig(kind="custom")) == "Custom pattern"

    def test_never_raises(self):
        assert format_pattern(None) == "Custom pattern"


class TestFormatEndCondition:
    def test_never(self):
        assert format_end_condition(PatternConfig(kind="daily")) == "Never ends"

    def test_on_date(self):
        config = PatternConfig(
            kind="daily", end_condition="on_date", end_date=date(2025, 1, 5)
        )
        assert format_end_condition(config) == "Ends on January 5th, 2025"

    def test_after_occurrences(self):
        config = PatternConfig(
            kind="daily", end_condition="after_occurrences", max_occurrences=5
        )
        assert format_end_condition(config) == "Ends after 5 occurrences"

    def test_zero_occurrences_falls_back(self):
        config = PatternConfig(
            kind="daily", end_condition="after_occurrences", max_occurrences=0
        )
        assert format_end_condition(config) == "Custom end condition"

    def test_never_raises(self):
        assert format_end_condition(None) == "Custom end condition"


class TestDescribe:
    def test_never_ending(self):
        assert describe(PatternConfig(kind="weekly")) == "Weekly, never ends"

    def test_with_end(self):
        config = PatternConfig(
            kind="daily", end_condition="after_occurrences", max_occurrences=3
        )
        assert describe(config) == "Daily, ends after 3 occurrences"


class TestHelpers:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (31, "31st"),
            (111, "111th"),
        ],
    )
    def test_ordinal(self, n, expected):
        assert ordinal(n) == expected

    def test_format_long_date(self):
        assert format_long_date(date(2024, 3, 22)) == "March 22nd, 2024"

    def test_day_name(self):
        assert day_name(0) == "Sunday"
        assert day_name(5) == "Friday"

    def test_day_name_out_of_range(self):
        assert day_name(9) == "Sunday"
        assert day_name(-1) == "Sunday"
