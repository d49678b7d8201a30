"""Date sequence generator.

``next_date`` advances a cursor date to the following occurrence of a rule.
All arithmetic is on calendar dates; month and year steps use
``dateutil.relativedelta``, which clamps to the last day of shorter months.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from taskrecur.models.pattern import (
    Frequency,
    MonthPosition,
    PatternConfig,
    PatternKind,
    Weekday,
    sunday_based_weekday,
)

# Saturday and Sunday in 0=Sunday numbering
WEEKEND = frozenset({0, 6})


def next_date(current: date, config: PatternConfig) -> date:
    """Return the occurrence that follows *current* under *config*.

    Args:
        current: Cursor date (the previous occurrence)
        config: Recurrence rule

    Returns:
        The next occurrence date, always strictly after *current*
    """
    kind = config.kind
    if kind == PatternKind.DAILY:
        return _next_daily(current, config.interval)
    if kind == PatternKind.WEEKLY:
        return _next_weekly(current, config)
    if kind == PatternKind.MONTHLY:
        return _next_monthly(current, config)
    if kind == PatternKind.YEARLY:
        return current + relativedelta(years=config.interval)
    if kind == PatternKind.CUSTOM:
        return _next_custom(current, config)
    raise ValueError(f"Unknown pattern kind: {kind!r}")


def _next_daily(current: date, interval: int) -> date:
    return current + timedelta(days=interval)


def _next_weekly(current: date, config: PatternConfig) -> date:
    if not config.custom_weekdays:
        return current + timedelta(weeks=config.interval)

    # Every listed weekday of every week; interval does not apply here.
    weekday = sunday_based_weekday(current)
    later = [day for day in config.custom_weekdays if day > weekday]
    if later:
        return current + timedelta(days=later[0] - weekday)
    return current + timedelta(days=7 - weekday + config.custom_weekdays[0])


def _next_monthly(current: date, config: PatternConfig) -> date:
    if config.custom_month_days:
        return next_month_day(current, config.custom_month_days)
    if config.is_positional:
        return next_positional_date(
            current, config.custom_month_position, config.custom_month_weekday
        )
    return current + relativedelta(months=config.interval)


def _next_custom(current: date, config: PatternConfig) -> date:
    frequency = config.frequency
    if frequency == Frequency.DAILY:
        return _next_daily(current, config.interval)
    if frequency == Frequency.WEEKDAYS:
        return next_weekday(current)
    if frequency == Frequency.WEEKLY:
        return _next_weekly(current, config)
    if frequency == Frequency.BIWEEKLY:
        return current + timedelta(weeks=2)
    if frequency == Frequency.MONTHLY:
        return _next_monthly(current, config)
    if frequency == Frequency.QUARTERLY:
        return current + relativedelta(months=3)
    if frequency == Frequency.YEARLY:
        return current + relativedelta(years=config.interval)
    return current + timedelta(weeks=config.interval)


def next_weekday(current: date) -> date:
    """Return the first Monday-Friday date after *current*."""
    candidate = current + timedelta(days=1)
    while sunday_based_weekday(candidate) in WEEKEND:
        candidate += timedelta(days=1)
    return candidate


def next_month_day(current: date, days: tuple[int, ...]) -> date:
    """Return the first listed day of month after *current*.

    Days that do not exist in a month (e.g. 31 in April) are skipped for that
    month rather than rolled over, so the result is always a listed day.
    """
    last_day = calendar.monthrange(current.year, current.month)[1]
    for day in days:
        if current.day < day <= last_day:
            return current.replace(day=day)

    month_start = current.replace(day=1)
    # A listed day of at most 31 always exists within two months.
    for step in range(1, 3):
        month = month_start + relativedelta(months=step)
        last_day = calendar.monthrange(month.year, month.month)[1]
        for day in days:
            if day <= last_day:
                return month.replace(day=day)
    raise ValueError(f"No valid day of month in {days!r}")


def positional_date_in_month(
    year: int, month: int, position: MonthPosition, weekday: Weekday
) -> date:
    """Return e.g. the third Thursday or the last Friday of a month."""
    target = weekday.number
    if position == MonthPosition.LAST:
        day = date(year, month, calendar.monthrange(year, month)[1])
        while sunday_based_weekday(day) != target:
            day -= timedelta(days=1)
        return day

    first = date(year, month, 1)
    first += timedelta(days=(target - sunday_based_weekday(first)) % 7)
    return first + timedelta(weeks=position.week_offset)


def next_positional_date(
    current: date, position: MonthPosition, weekday: Weekday
) -> date:
    """Return the positional date in the month following *current*'s month.

    The month of *current* is treated as already occupied by the cursor, so a
    positional rule yields exactly one occurrence per calendar month.
    """
    month = current.replace(day=1) + relativedelta(months=1)
    candidate = positional_date_in_month(month.year, month.month, position, weekday)
    while candidate <= current:
        month += relativedelta(months=1)
        candidate = positional_date_in_month(month.year, month.month, position, weekday)
    return candidate
