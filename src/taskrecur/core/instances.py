"""Instance factory: expands a recurrence rule into numbered instances."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date

from pydantic import BaseModel, ConfigDict

from taskrecur.core.end_conditions import stop_reason
from taskrecur.core.generator import next_date
from taskrecur.models.pattern import PatternConfig, RecurringInstance

logger = logging.getLogger(__name__)

DEFAULT_MAX_INSTANCES = 20
SEED_ID = "original"


def instance_id(occurrence_number: int) -> str:
    """Return the id of the n-th occurrence (0 is the seed)."""
    if occurrence_number == 0:
        return SEED_ID
    return f"instance-{occurrence_number}"


def iter_occurrence_dates(
    start_date: date,
    config: PatternConfig,
    max_instances: int = DEFAULT_MAX_INSTANCES,
    today: date | None = None,
) -> Iterator[date]:
    """Yield the seed date followed by up to *max_instances* generated dates."""
    if not isinstance(config, PatternConfig):
        raise TypeError(f"config must be a PatternConfig, got {type(config).__name__}")
    if max_instances < 0:
        raise ValueError(f"max_instances must be >= 0, got {max_instances}")

    yield start_date

    cursor = start_date
    count = 0
    while True:
        if count >= max_instances:
            logger.debug("generation stopped: max_instances=%d reached", max_instances)
            return
        candidate = next_date(cursor, config)
        reason = stop_reason(candidate, config, count, today)
        if reason is not None:
            logger.debug("generation stopped at %s: %s", candidate.isoformat(), reason)
            return
        yield candidate
        cursor = candidate
        count += 1


def generate(
    start_date: date,
    config: PatternConfig,
    max_instances: int = DEFAULT_MAX_INSTANCES,
    today: date | None = None,
) -> list[RecurringInstance]:
    """Generate the occurrences of a recurring task.

    The seed occurrence (*start_date*) is always first; generated occurrences
    follow in strictly increasing date order. The rule is expected to have
    passed :func:`taskrecur.core.validator.validate` already.

    Args:
        start_date: Date of the original task
        config: Recurrence rule
        max_instances: Hard cap on generated (non-seed) occurrences
        today: Reference date for the safety horizon, defaults to today

    Returns:
        At most ``max_instances + 1`` instances

    Raises:
        TypeError: If config is not a PatternConfig
        ValueError: If max_instances is negative
    """
    return [
        RecurringInstance(
            id=instance_id(number),
            date=occurrence,
            is_generated=number > 0,
            original_date=start_date,
            occurrence_number=number,
        )
        for number, occurrence in enumerate(
            iter_occurrence_dates(start_date, config, max_instances, today)
        )
    ]


def next_occurrence(
    start_date: date, config: PatternConfig, today: date | None = None
) -> date | None:
    """Return the first generated date after *start_date*, if any."""
    instances = generate(start_date, config, max_instances=1, today=today)
    if len(instances) > 1:
        return instances[1].date
    return None


class InstanceSummary(BaseModel):
    """Aggregate view over a generated instance list."""

    model_config = ConfigDict(frozen=True)

    total: int
    generated: int
    first_date: date | None = None
    last_date: date | None = None
    next_date: date | None = None


def summarize(
    instances: list[RecurringInstance], today: date | None = None
) -> InstanceSummary:
    """Summarize *instances*; ``next_date`` is the earliest date after today."""
    if not instances:
        return InstanceSummary(total=0, generated=0)

    today = today or date.today()
    dates = sorted(instance.date for instance in instances)
    upcoming = [d for d in dates if d > today]
    return InstanceSummary(
        total=len(instances),
        generated=sum(1 for instance in instances if instance.is_generated),
        first_date=dates[0],
        last_date=dates[-1],
        next_date=upcoming[0] if upcoming else None,
    )
