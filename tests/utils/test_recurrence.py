"""Unit tests for recurrence utilities."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from dateutil.rrule import rrulestr

from taskrecur.core.instances import generate
from taskrecur.core.presets import presets
from taskrecur.models.pattern import PatternConfig
from taskrecur.utils.recurrence import (
    BYDAY_CODES,
    RECURRENCE_PATTERNS,
    VALID_PATTERNS,
    describe_rrule,
    resolve_rrule,
    to_rrule,
)


class TestResolveRrule:
    def test_daily(self):
        assert resolve_rrule("daily") == "FREQ=DAILY"

    def test_weekdays(self):
        assert resolve_rrule("weekdays") == "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR"

    def test_weekly(self):
        assert resolve_rrule("weekly") == "FREQ=WEEKLY"

    def test_bi_weekly(self):
        assert resolve_rrule("bi-weekly") == "FREQ=WEEKLY;INTERVAL=2"
        assert resolve_rrule("biweekly") == "FREQ=WEEKLY;INTERVAL=2"

    def test_monthly(self):
        assert resolve_rrule("monthly") == "FREQ=MONTHLY"

    def test_quarterly(self):
        assert resolve_rrule("quarterly") == "FREQ=MONTHLY;INTERVAL=3"

    def test_yearly(self):
        assert resolve_rrule("yearly") == "FREQ=YEARLY"

    def test_case_insensitive(self):
        assert resolve_rrule("DAILY") == "FREQ=DAILY"
        assert resolve_rrule("Weekly") == "FREQ=WEEKLY"

    def test_unknown_returns_none(self):
        assert resolve_rrule("hourly") is None
        assert resolve_rrule("") is None


class TestDescribeRrule:
    def test_known_rrule(self):
        assert describe_rrule("FREQ=DAILY") == "daily"
        assert describe_rrule("FREQ=WEEKLY;INTERVAL=2") == "biweekly"
        assert describe_rrule("FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR") == "weekdays"

    def test_unknown_rrule_returns_rrule_itself(self):
        """Unknown RRULE strings are returned as-is."""
        custom = "FREQ=DAILY;INTERVAL=3"
        assert describe_rrule(custom) == custom


class TestConstants:
    def test_valid_patterns_match_keys(self):
        assert set(VALID_PATTERNS) == set(RECURRENCE_PATTERNS)

    def test_byday_codes_start_on_sunday(self):
        assert BYDAY_CODES[0] == "SU"
        assert BYDAY_CODES[5] == "FR"


class TestToRrule:
    @pytest.mark.parametrize("preset", presets(), ids=lambda p: p.id)
    def test_presets_render_their_catalog_rrule(self, preset):
        assert describe_rrule(to_rrule(preset.config)) == preset.id

    def test_weekly_days(self, weekly_mwf):
        assert to_rrule(weekly_mwf) == "FREQ=WEEKLY;BYDAY=MO,WE,FR"

    def test_last_friday(self):
        config = PatternConfig(
            kind="monthly", custom_month_position="last", custom_month_weekday="friday"
        )
        assert to_rrule(config) == "FREQ=MONTHLY;BYDAY=-1FR"

    def test_second_tuesday(self):
        config = PatternConfig(
            kind="monthly", custom_month_position="second", custom_month_weekday="tuesday"
        )
        assert to_rrule(config) == "FREQ=MONTHLY;BYDAY=2TU"

    def test_month_days_with_count(self):
        config = PatternConfig(
            kind="monthly",
            custom_month_days=[15, 1],
            end_condition="after_occurrences",
            max_occurrences=4,
        )
        assert to_rrule(config) == "FREQ=MONTHLY;BYMONTHDAY=1,15;COUNT=5"

    def test_interval_with_until(self):
        config = PatternConfig(
            kind="daily",
            interval=3,
            end_condition="on_date",
            end_date=date(2025, 1, 5),
        )
        assert to_rrule(config) == "FREQ=DAILY;INTERVAL=3;UNTIL=20250105"

    def test_custom_without_frequency_is_weekly(self):
        assert to_rrule(PatternConfig(kind="custom", interval=2)) == "FREQ=WEEKLY;INTERVAL=2"


def _expand(config: PatternConfig, start: date) -> list[date]:
    rule = rrulestr(to_rrule(config), dtstart=datetime.combine(start, datetime.min.time()))
    return [moment.date() for moment in rule]


def _generated(config: PatternConfig, start: date) -> list[date]:
    return [i.date for i in generate(start, config, max_instances=50, today=start)]


class TestRruleMatchesGenerate:
    @pytest.mark.parametrize(
        "config, start",
        [
            (
                PatternConfig(kind="daily", end_condition="after_occurrences", max_occurrences=3),
                date(2024, 1, 1),
            ),
            (
                PatternConfig(
                    kind="weekly",
                    custom_weekdays=[1, 3, 5],
                    end_condition="after_occurrences",
                    max_occurrences=6,
                ),
                date(2024, 1, 1),
            ),
            (
                PatternConfig(
                    kind="monthly",
                    custom_month_days=[1, 15],
                    end_condition="after_occurrences",
                    max_occurrences=4,
                ),
                date(2024, 1, 1),
            ),
            (
                PatternConfig(
                    kind="daily", interval=3, end_condition="on_date", end_date=date(2024, 1, 10)
                ),
                date(2024, 1, 1),
            ),
            (
                PatternConfig(
                    kind="monthly",
                    custom_month_position="last",
                    custom_month_weekday="friday",
                    end_condition="after_occurrences",
                    max_occurrences=3,
                ),
                date(2024, 1, 26),
            ),
        ],
        ids=["daily-count", "weekly-days", "month-days", "interval-until", "last-friday"],
    )
    def test_same_dates(self, config, start):
        assert _expand(config, start) == _generated(config, start)

    def test_count_includes_start_date(self):
        config = PatternConfig(kind="daily", end_condition="after_occurrences", max_occurrences=3)
        assert _expand(config, date(2024, 1, 1)) == [
            date(2024, 1, 1),
            date(2024, 1, 2),
            date(2024, 1, 3),
            date(2024, 1, 4),
        ]

    def test_positional_rule_can_fire_in_start_month(self):
        """Generation skips to the next month; the RRULE does not."""
        config = PatternConfig(
            kind="monthly",
            custom_month_position="last",
            custom_month_weekday="friday",
            end_condition="after_occurrences",
            max_occurrences=3,
        )
        start = date(2024, 1, 15)
        assert _expand(config, start)[0] == date(2024, 1, 26)
        assert _generated(config, start)[1] == date(2024, 2, 23)
