"""Human-readable descriptions of recurrence rules.

Presentation only: these functions never raise and fall back to a generic
label when a rule is missing the fields a description needs.
"""

from __future__ import annotations

import logging
from datetime import date

from taskrecur.models.pattern import EndCondition, Frequency, PatternConfig, PatternKind

logger = logging.getLogger(__name__)

DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

GENERIC_PATTERN = "Custom pattern"
GENERIC_END_CONDITION = "Custom end condition"

_UNITS = {
    PatternKind.DAILY: ("Daily", "days"),
    PatternKind.WEEKLY: ("Weekly", "weeks"),
    PatternKind.MONTHLY: ("Monthly", "months"),
    PatternKind.YEARLY: ("Yearly", "years"),
}


def day_name(day_number: int) -> str:
    """Return the English weekday name for 0=Sunday..6=Saturday."""
    if isinstance(day_number, int) and 0 <= day_number < len(DAY_NAMES):
        return DAY_NAMES[day_number]
    return DAY_NAMES[0]


def ordinal(n: int) -> str:
    """Return *n* with its English ordinal suffix (1st, 2nd, 11th...)."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_long_date(value: date) -> str:
    """Format a date like ``January 5th, 2025``."""
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"


def format_pattern(config: PatternConfig) -> str:
    """Describe how often *config* repeats, e.g. ``Every 2 weeks``."""
    try:
        return _format_pattern(config)
    except (AttributeError, TypeError, ValueError, KeyError):
        logger.debug("falling back to generic pattern label", exc_info=True)
        return GENERIC_PATTERN


def format_end_condition(config: PatternConfig) -> str:
    """Describe when *config* stops repeating, e.g. ``Ends after 5 occurrences``."""
    try:
        condition = config.end_condition
        if condition is None or condition == EndCondition.NEVER:
            return "Never ends"
        if condition == EndCondition.ON_DATE and config.end_date:
            return f"Ends on {format_long_date(config.end_date)}"
        if condition == EndCondition.AFTER_OCCURRENCES and config.max_occurrences:
            return f"Ends after {config.max_occurrences} occurrences"
    except (AttributeError, TypeError, ValueError):
        logger.debug("falling back to generic end condition label", exc_info=True)
    return GENERIC_END_CONDITION


def describe(config: PatternConfig) -> str:
    """Return pattern and end condition as one phrase: ``Weekly, never ends``."""
    end = format_end_condition(config)
    return f"{format_pattern(config)}, {end[0].lower()}{end[1:]}"


def _every(interval: int, label: str, unit: str) -> str:
    if interval == 1:
        return label
    return f"Every {interval} {unit}"


def _format_pattern(config: PatternConfig) -> str:
    kind = config.kind
    if kind == PatternKind.CUSTOM:
        return _format_custom(config)
    if kind not in _UNITS:
        return GENERIC_PATTERN

    if kind == PatternKind.WEEKLY and config.custom_weekdays:
        return _weekly_on(config)
    if kind == PatternKind.MONTHLY:
        monthly = _monthly_on(config)
        if monthly:
            return monthly

    label, unit = _UNITS[kind]
    return _every(config.interval, label, unit)


def _format_custom(config: PatternConfig) -> str:
    frequency = config.frequency
    if frequency is None:
        return GENERIC_PATTERN

    if frequency == Frequency.DAILY:
        return _every(config.interval, "Daily", "days")
    if frequency == Frequency.WEEKDAYS:
        return "Weekdays (Mon-Fri)"
    if frequency == Frequency.WEEKLY:
        if config.custom_weekdays:
            return _weekly_on(config)
        return _every(config.interval, "Weekly", "weeks")
    if frequency == Frequency.BIWEEKLY:
        return "Bi-weekly"
    if frequency == Frequency.MONTHLY:
        return _monthly_on(config) or _every(config.interval, "Monthly", "months")
    if frequency == Frequency.QUARTERLY:
        return "Quarterly"
    if frequency == Frequency.YEARLY:
        return _every(config.interval, "Yearly", "years")
    return GENERIC_PATTERN


def _weekly_on(config: PatternConfig) -> str:
    names = [day_name(day)[:3] for day in config.custom_weekdays]
    return f"Weekly on {', '.join(names)}"


def _monthly_on(config: PatternConfig) -> str | None:
    if config.custom_month_days:
        days = ", ".join(str(day) for day in config.custom_month_days)
        return f"Monthly on day {days}"
    if config.custom_month_position and config.custom_month_weekday:
        return (
            f"Monthly on the {config.custom_month_position.value} "
            f"{config.custom_month_weekday.value}"
        )
    return None
