"""Recurrence rule data models.

This module defines the immutable value types the occurrence generator works
with:

- ``PatternConfig`` describes a recurrence rule (kind, interval, custom day
  sets, positional rule and end condition)
- ``RecurringInstance`` is one generated occurrence

Value ranges (interval, occurrence count, weekday and month-day numbers) are
user input and are reported by :func:`taskrecur.core.validator.validate`.
Field combinations that cannot describe a rule at all are rejected when the
model is built.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_Date = date


class PatternKind(str, Enum):
    """Primary recurrence kinds."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class Frequency(str, Enum):
    """Sub-variants used when the kind is ``custom``."""

    DAILY = "daily"
    WEEKDAYS = "weekdays"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class MonthPosition(str, Enum):
    """Ordinal used by positional monthly rules ("first Monday")."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    LAST = "last"

    @property
    def week_offset(self) -> int:
        """Whole weeks after the first matching weekday (``last`` has none)."""
        return {"first": 0, "second": 1, "third": 2, "fourth": 3}.get(self.value, -1)


class Weekday(str, Enum):
    """Weekday names, numbered 0=Sunday..6=Saturday."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def number(self) -> int:
        return list(Weekday).index(self)

    @classmethod
    def from_index(cls, number: int) -> Weekday:
        return list(cls)[number]


class EndCondition(str, Enum):
    """How a recurrence terminates."""

    NEVER = "never"
    ON_DATE = "on_date"
    AFTER_OCCURRENCES = "after_occurrences"


def sunday_based_weekday(value: date) -> int:
    """Return the weekday of *value* with 0=Sunday..6=Saturday."""
    return (value.weekday() + 1) % 7


class PatternConfig(BaseModel):
    """Immutable recurrence rule.

    Attributes:
        kind: Primary recurrence kind
        frequency: Sub-variant, only meaningful for ``custom`` rules
        interval: Every N units (days, weeks, months, years)
        custom_weekdays: Weekdays (0=Sunday..6=Saturday) for weekly rules
        custom_month_days: Days of month (1..31) for monthly rules
        custom_month_position: Ordinal of a positional monthly rule
        custom_month_weekday: Weekday of a positional monthly rule
        end_condition: How the rule terminates
        end_date: Last allowed date (``on_date`` only)
        max_occurrences: Number of generated occurrences (``after_occurrences`` only)
    """

    model_config = ConfigDict(frozen=True)

    kind: PatternKind
    frequency: Frequency | None = None
    interval: int = 1
    custom_weekdays: tuple[int, ...] | None = None
    custom_month_days: tuple[int, ...] | None = None
    custom_month_position: MonthPosition | None = None
    custom_month_weekday: Weekday | None = None
    end_condition: EndCondition = EndCondition.NEVER
    end_date: date | None = None
    max_occurrences: int | None = None

    @field_validator("custom_weekdays", "custom_month_days", mode="before")
    @classmethod
    def normalize_day_set(cls, v: Any) -> Any:
        """Store day sets sorted and de-duplicated; an empty set means unset."""
        if v is None:
            return None
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError(f"day set must be a list of numbers, got {type(v).__name__}")
        values = sorted({int(d) for d in v})
        return tuple(values) if values else None

    @field_validator("custom_month_position", "custom_month_weekday", mode="before")
    @classmethod
    def lowercase_names(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @model_validator(mode="after")
    def check_structure(self) -> PatternConfig:
        has_position = self.custom_month_position is not None
        has_weekday = self.custom_month_weekday is not None
        if has_position != has_weekday:
            raise ValueError(
                "custom_month_position and custom_month_weekday must be set together"
            )

        populated = [
            name
            for name, present in (
                ("custom_weekdays", self.custom_weekdays is not None),
                ("custom_month_days", self.custom_month_days is not None),
                ("custom_month_position", has_position),
            )
            if present
        ]
        if len(populated) > 1:
            raise ValueError(
                f"Only one custom day rule may be set, got: {', '.join(populated)}"
            )

        if self.custom_weekdays is not None and not self.is_weekly:
            raise ValueError("custom_weekdays requires a weekly pattern")
        if (self.custom_month_days is not None or has_position) and not self.is_monthly:
            raise ValueError("custom month rules require a monthly pattern")

        if (self.end_date is not None) != (self.end_condition == EndCondition.ON_DATE):
            raise ValueError("end_date is required if and only if end_condition is 'on_date'")
        if (self.max_occurrences is not None) != (
            self.end_condition == EndCondition.AFTER_OCCURRENCES
        ):
            raise ValueError(
                "max_occurrences is required if and only if end_condition is 'after_occurrences'"
            )
        return self

    @property
    def is_weekly(self) -> bool:
        """Whether the weekly rule applies (directly or via a custom frequency)."""
        return self.kind == PatternKind.WEEKLY or (
            self.kind == PatternKind.CUSTOM and self.frequency == Frequency.WEEKLY
        )

    @property
    def is_monthly(self) -> bool:
        """Whether the monthly rule applies (directly or via a custom frequency)."""
        return self.kind == PatternKind.MONTHLY or (
            self.kind == PatternKind.CUSTOM and self.frequency == Frequency.MONTHLY
        )

    @property
    def is_positional(self) -> bool:
        return self.custom_month_position is not None and self.custom_month_weekday is not None


class RecurringInstance(BaseModel):
    """One generated occurrence of a recurring task.

    Attributes:
        id: ``"original"`` for the seed, otherwise ``"instance-{n}"``
        date: Occurrence date
        is_generated: False only for the seed occurrence
        original_date: Caller-supplied start date of the sequence
        occurrence_number: 0 for the seed, then 1, 2, 3...
    """

    model_config = ConfigDict(frozen=True)

    id: str
    date: _Date
    is_generated: bool
    original_date: _Date
    occurrence_number: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Pure setters
# ---------------------------------------------------------------------------


def _replace(config: PatternConfig, **changes: Any) -> PatternConfig:
    data = config.model_dump()
    data.update(changes)
    return PatternConfig.model_validate(data)


def with_interval(config: PatternConfig, interval: int) -> PatternConfig:
    """Return a copy of *config* repeating every *interval* units."""
    return _replace(config, interval=interval)


def with_end_date(config: PatternConfig, end_date: date) -> PatternConfig:
    """Return a copy of *config* ending on *end_date*."""
    return _replace(
        config,
        end_condition=EndCondition.ON_DATE,
        end_date=end_date,
        max_occurrences=None,
    )


def with_max_occurrences(config: PatternConfig, max_occurrences: int) -> PatternConfig:
    """Return a copy of *config* ending after *max_occurrences* occurrences."""
    return _replace(
        config,
        end_condition=EndCondition.AFTER_OCCURRENCES,
        end_date=None,
        max_occurrences=max_occurrences,
    )


def with_never_ending(config: PatternConfig) -> PatternConfig:
    return _replace(
        config, end_condition=EndCondition.NEVER, end_date=None, max_occurrences=None
    )


def with_custom_weekdays(config: PatternConfig, weekdays: list[int]) -> PatternConfig:
    return _replace(config, custom_weekdays=weekdays)


def with_custom_month_days(config: PatternConfig, days: list[int]) -> PatternConfig:
    return _replace(config, custom_month_days=days)


def with_month_position(
    config: PatternConfig, position: MonthPosition | str, weekday: Weekday | str
) -> PatternConfig:
    """Return a copy of *config* anchored to e.g. the last Friday of the month."""
    return _replace(config, custom_month_position=position, custom_month_weekday=weekday)
