"""End condition evaluation for occurrence generation."""

from __future__ import annotations

from datetime import date

from dateutil.relativedelta import relativedelta

from taskrecur.models.pattern import EndCondition, PatternConfig

# Hard cutoff for rules that never end, counted from today.
SAFETY_HORIZON_YEARS = 10


def safety_horizon(today: date | None = None) -> date:
    """Return the last date generation may reach."""
    return (today or date.today()) + relativedelta(years=SAFETY_HORIZON_YEARS)


def should_stop(
    candidate: date,
    config: PatternConfig,
    occurrences_so_far: int,
    today: date | None = None,
) -> bool:
    """Decide whether *candidate* must not be emitted.

    Args:
        candidate: Next date proposed by the generator
        config: Recurrence rule
        occurrences_so_far: Generated (non-seed) occurrences already emitted
        today: Reference date for the safety horizon, defaults to today

    Returns:
        True when the rule's own end condition or the safety horizon is reached
    """
    return stop_reason(candidate, config, occurrences_so_far, today) is not None


def stop_reason(
    candidate: date,
    config: PatternConfig,
    occurrences_so_far: int,
    today: date | None = None,
) -> str | None:
    """Return why generation stops at *candidate*, or None to continue."""
    if (
        config.end_condition == EndCondition.AFTER_OCCURRENCES
        and config.max_occurrences is not None
        and occurrences_so_far >= config.max_occurrences
    ):
        return "max_occurrences"

    if (
        config.end_condition == EndCondition.ON_DATE
        and config.end_date is not None
        and candidate > config.end_date
    ):
        return "end_date"

    if candidate > safety_horizon(today):
        return "safety_horizon"

    return None
