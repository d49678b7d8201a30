"""Data models for taskrecur."""

from taskrecur.models.pattern import (
    EndCondition,
    Frequency,
    MonthPosition,
    PatternConfig,
    PatternKind,
    RecurringInstance,
    Weekday,
)

__all__ = [
    "EndCondition",
    "Frequency",
    "MonthPosition",
    "PatternConfig",
    "PatternKind",
    "RecurringInstance",
    "Weekday",
]
