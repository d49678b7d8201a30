"""Recurrence rule validation.

``validate`` reports every problem with a rule at once so the caller can show
them together before a recurring task is created. It accepts either a built
``PatternConfig`` or a raw mapping of field values (e.g. form or CLI input),
and never raises for malformed user input.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from taskrecur.exceptions import InvalidPatternError
from taskrecur.models.pattern import EndCondition, PatternConfig, PatternKind

KIND_VALUES = [kind.value for kind in PatternKind]

LARGE_INTERVAL = 100
LARGE_OCCURRENCE_COUNT = 100
DAILY_OCCURRENCE_LIMIT = 365
LONG_DURATION_YEARS = 5
MAX_COMPLEXITY = 10.0

_KIND_COMPLEXITY = {
    PatternKind.DAILY: 1,
    PatternKind.WEEKLY: 2,
    PatternKind.MONTHLY: 3,
    PatternKind.YEARLY: 4,
    PatternKind.CUSTOM: 5,
}


class ValidationResult(BaseModel):
    """Outcome of validating a recurrence rule.

    Warnings never affect ``valid``; they flag rules that are allowed but
    likely to produce more occurrences than intended.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def validate(
    config: PatternConfig | Mapping[str, Any], today: date | None = None
) -> ValidationResult:
    """Validate a recurrence rule.

    Checks, in order: kind, interval, max occurrences, end date, custom
    weekdays, custom month days. For raw mappings the structural rules of
    ``PatternConfig`` are checked last.

    Args:
        config: Rule to check
        today: Reference date for the end-date check, defaults to today

    Returns:
        ValidationResult with ``valid`` True iff no errors were found;
        warnings are only collected for valid rules

    Raises:
        TypeError: If config is None or of an unsupported type
    """
    if config is None:
        raise TypeError("config is required")
    if isinstance(config, PatternConfig):
        fields: Mapping[str, Any] = dict(config)
    elif isinstance(config, Mapping):
        fields = config
    else:
        raise TypeError(
            f"config must be a PatternConfig or a mapping, got {type(config).__name__}"
        )

    today = today or date.today()
    errors: list[str] = []

    kind = fields.get("kind")
    if kind is None or kind == "":
        errors.append("Pattern is required")
    elif _value_of(kind) not in KIND_VALUES:
        errors.append(f"Pattern must be one of: {', '.join(KIND_VALUES)}")

    interval = fields.get("interval")
    if interval is not None and not _is_at_least(interval, 1):
        errors.append("Interval must be at least 1")

    max_occurrences = fields.get("max_occurrences")
    if max_occurrences is not None and not _is_at_least(max_occurrences, 1):
        errors.append("Maximum occurrences must be at least 1")

    end_date = fields.get("end_date")
    if end_date is not None:
        parsed = _as_date(end_date)
        if parsed is None:
            errors.append(f"End date is not a valid date: {end_date}")
        elif parsed < today:
            errors.append("End date cannot be in the past")

    weekdays = fields.get("custom_weekdays")
    if weekdays is not None and not _is_day_list(weekdays):
        errors.append("Custom days must be a list")
    elif weekdays and not all(_in_range(day, 0, 6) for day in weekdays):
        errors.append("Custom days must be between 0 (Sunday) and 6 (Saturday)")

    month_days = fields.get("custom_month_days")
    if month_days is not None and not _is_day_list(month_days):
        errors.append("Custom month days must be a list")
    elif month_days and not all(_in_range(day, 1, 31) for day in month_days):
        errors.append("Custom month days must be between 1 and 31")

    pattern = config if isinstance(config, PatternConfig) else None
    if not errors and pattern is None:
        try:
            pattern = PatternConfig.model_validate(dict(fields))
        except ValidationError as e:
            errors.extend(_describe_validation_error(e))

    if errors:
        return ValidationResult(valid=False, errors=errors)
    return ValidationResult(valid=True, warnings=pattern_warnings(pattern, today=today))


def pattern_warnings(config: PatternConfig, today: date | None = None) -> list[str]:
    """List the reasons a valid rule may generate more than intended."""
    today = today or date.today()
    warnings = []
    if config.interval > LARGE_INTERVAL:
        warnings.append("Large interval values may cause performance issues")
    if config.max_occurrences is not None and config.max_occurrences > LARGE_OCCURRENCE_COUNT:
        warnings.append("Large number of occurrences may impact performance")
    if config.end_date is not None and config.end_date > today + relativedelta(
        years=LONG_DURATION_YEARS
    ):
        warnings.append("Long recurring duration - consider an earlier end date")
    if (
        config.kind == PatternKind.DAILY
        and config.interval == 1
        and config.end_condition != EndCondition.ON_DATE
        and (config.max_occurrences or math.inf) > DAILY_OCCURRENCE_LIMIT
    ):
        warnings.append("Daily pattern may generate too many instances - consider adding limits")
    return warnings


def is_complex_pattern(config: PatternConfig) -> bool:
    """True for rules with listed days, positions, intervals or a custom kind."""
    return bool(
        config.custom_weekdays
        or config.custom_month_days
        or config.custom_month_position is not None
        or config.interval > 1
        or config.kind == PatternKind.CUSTOM
    )


def complexity_score(config: PatternConfig) -> float:
    """Rough 0-10 measure of how involved a rule is.

    The kind sets the base (daily 1 up to custom 5). Each listed day adds half
    a point, a positional rule adds 3 and intervals above 1 add up to 5 on a
    log scale.
    """
    score = float(_KIND_COMPLEXITY[config.kind])
    score += 0.5 * len(config.custom_weekdays or ())
    score += 0.5 * len(config.custom_month_days or ())
    if config.custom_month_position is not None:
        score += 2
    if config.custom_month_weekday is not None:
        score += 1
    if config.interval > 1:
        score += min(5.0, math.log(config.interval) * 2)
    return min(MAX_COMPLEXITY, score)


def ensure_valid(
    config: PatternConfig | Mapping[str, Any], today: date | None = None
) -> PatternConfig:
    """Validate *config* and return it as a PatternConfig.

    Raises:
        InvalidPatternError: If the rule has any validation errors
    """
    result = validate(config, today=today)
    if not result.valid:
        raise InvalidPatternError(result.errors)
    if isinstance(config, PatternConfig):
        return config
    return PatternConfig.model_validate(dict(config))


def _value_of(value: Any) -> Any:
    return getattr(value, "value", value)


def _is_at_least(value: Any, minimum: int) -> bool:
    try:
        return int(value) >= minimum
    except (TypeError, ValueError):
        return False


def _is_day_list(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _in_range(value: Any, low: int, high: int) -> bool:
    try:
        return low <= int(value) <= high
    except (TypeError, ValueError):
        return False


def _as_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _describe_validation_error(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        message = item.get("msg", "Invalid value")
        # pydantic prefixes messages raised from validators
        message = message.removeprefix("Value error, ")
        location = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{location}: {message}" if location else message)
    return messages
