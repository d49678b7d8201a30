"""Unit tests for end condition evaluation."""

from __future__ import annotations

from datetime import date

from taskrecur.core.end_conditions import (
    SAFETY_HORIZON_YEARS,
    safety_horizon,
    should_stop,
    stop_reason,
)
from taskrecur.models.pattern import PatternConfig


class TestSafetyHorizon:
    def test_ten_years_from_today(self):
        assert SAFETY_HORIZON_YEARS == 10
        assert safety_horizon(date(2024, 1, 1)) == date(2034, 1, 1)

    def test_leap_day(self):
        assert safety_horizon(date(2024, 2, 29)) == date(2034, 2, 28)


class TestShouldStop:
    def test_never_ending_continues_inside_horizon(self, today):
        config = PatternConfig(kind="daily")
        assert not should_stop(date(2030, 1, 1), config, 500, today=today)

    def test_never_ending_stops_past_horizon(self, today):
        config = PatternConfig(kind="daily")
        assert should_stop(date(2034, 1, 2), config, 0, today=today)
        assert stop_reason(date(2034, 1, 2), config, 0, today=today) == "safety_horizon"

    def test_horizon_day_itself_is_allowed(self, today):
        config = PatternConfig(kind="daily")
        assert not should_stop(date(2034, 1, 1), config, 0, today=today)

    def test_end_date_is_inclusive(self, today):
        config = PatternConfig(
            kind="daily", end_condition="on_date", end_date=date(2024, 3, 1)
        )
        assert not should_stop(date(2024, 3, 1), config, 0, today=today)
        assert should_stop(date(2024, 3, 2), config, 0, today=today)
        assert stop_reason(date(2024, 3, 2), config, 0, today=today) == "end_date"

    def test_max_occurrences_counts_generated_only(self, today):
        config = PatternConfig(
            kind="daily", end_condition="after_occurrences", max_occurrences=3
        )
        assert not should_stop(date(2024, 1, 4), config, 2, today=today)
        assert should_stop(date(2024, 1, 5), config, 3, today=today)
        assert stop_reason(date(2024, 1, 5), config, 3, today=today) == "max_occurrences"

    def test_horizon_applies_to_bounded_rules(self, today):
        config = PatternConfig(
            kind="yearly", end_condition="after_occurrences", max_occurrences=100
        )
        assert stop_reason(date(2040, 1, 1), config, 5, today=today) == "safety_horizon"

    def test_continue_returns_no_reason(self, today):
        config = PatternConfig(kind="weekly")
        assert stop_reason(date(2024, 1, 8), config, 0, today=today) is None
