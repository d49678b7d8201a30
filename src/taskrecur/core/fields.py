"""Mapping between ``PatternConfig`` and the task custom-fields map.

Tasks store their recurrence rule as flat, string-keyed custom fields. The
key names are fixed by the task storage format.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from taskrecur.exceptions import InvalidPatternError
from taskrecur.models.pattern import EndCondition, Frequency, PatternConfig, PatternKind

FIELD_KEYS = (
    "pattern",
    "frequency",
    "endCondition",
    "endDate",
    "maxOccurrences",
    "interval",
    "customDays",
    "customMonthDays",
    "customMonthPosition",
    "customMonthDay",
)


def to_fields(config: PatternConfig) -> dict[str, Any]:
    """Flatten *config* into a custom-fields map.

    Enum values become their string values, dates become ``YYYY-MM-DD``
    strings and day sets become lists. Unset values are ``None``.
    """
    return {
        "pattern": config.kind.value,
        "frequency": config.frequency.value if config.frequency else None,
        "endCondition": config.end_condition.value,
        "endDate": config.end_date.isoformat() if config.end_date else None,
        "maxOccurrences": config.max_occurrences,
        "interval": config.interval,
        "customDays": list(config.custom_weekdays) if config.custom_weekdays else None,
        "customMonthDays": (
            list(config.custom_month_days) if config.custom_month_days else None
        ),
        "customMonthPosition": (
            config.custom_month_position.value if config.custom_month_position else None
        ),
        "customMonthDay": (
            config.custom_month_weekday.value if config.custom_month_weekday else None
        ),
    }


def fields_to_config_data(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a custom-fields map into ``PatternConfig`` field values.

    Missing values take the storage defaults: weekly pattern, never ending,
    interval 1, and a weekly frequency for custom rules. The end condition is
    inferred from ``endDate`` or ``maxOccurrences`` when it is not stored
    explicitly.
    """
    end_date = _parse_date(fields.get("endDate"))
    max_occurrences = fields.get("maxOccurrences") or None

    end_condition = fields.get("endCondition")
    if not end_condition:
        if end_date is not None:
            end_condition = EndCondition.ON_DATE.value
        elif max_occurrences is not None:
            end_condition = EndCondition.AFTER_OCCURRENCES.value
        else:
            end_condition = EndCondition.NEVER.value

    # Only the value matching the end condition is kept.
    if end_condition != EndCondition.ON_DATE.value:
        end_date = None
    if end_condition != EndCondition.AFTER_OCCURRENCES.value:
        max_occurrences = None

    kind = fields.get("pattern") or PatternKind.WEEKLY.value
    frequency = fields.get("frequency") or None
    if frequency is None and kind == PatternKind.CUSTOM:
        frequency = Frequency.WEEKLY.value

    interval = fields.get("interval")
    return {
        "kind": kind,
        "frequency": frequency,
        "end_condition": end_condition,
        "end_date": end_date,
        "max_occurrences": max_occurrences,
        "interval": 1 if interval is None or interval == "" else interval,
        "custom_weekdays": fields.get("customDays") or None,
        "custom_month_days": fields.get("customMonthDays") or None,
        "custom_month_position": fields.get("customMonthPosition") or None,
        "custom_month_weekday": fields.get("customMonthDay") or None,
    }


def from_fields(fields: Mapping[str, Any]) -> PatternConfig:
    """Rebuild a ``PatternConfig`` from a custom-fields map.

    Raises:
        pydantic.ValidationError: If the stored fields cannot form a rule
        InvalidPatternError: If the stored end date is not an ISO date
    """
    return PatternConfig.model_validate(fields_to_config_data(fields))


def _parse_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value)
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError as e:
        raise InvalidPatternError([f"End date is not a valid date: {value}"]) from e
