"""iCalendar RRULE helpers for recurrence rules."""

from __future__ import annotations

from taskrecur.models.pattern import (
    EndCondition,
    Frequency,
    MonthPosition,
    PatternConfig,
    PatternKind,
)

# Maps preset ids to iCalendar RRULE strings.
RECURRENCE_PATTERNS: dict[str, str] = {
    "daily": "FREQ=DAILY",
    "weekdays": "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR",
    "weekly": "FREQ=WEEKLY",
    "biweekly": "FREQ=WEEKLY;INTERVAL=2",
    "monthly": "FREQ=MONTHLY",
    "quarterly": "FREQ=MONTHLY;INTERVAL=3",
    "yearly": "FREQ=YEARLY",
}

VALID_PATTERNS = list(RECURRENCE_PATTERNS.keys())

# RRULE weekday codes indexed 0=Sunday..6=Saturday
BYDAY_CODES = ["SU", "MO", "TU", "WE", "TH", "FR", "SA"]

_POSITION_PREFIX = {
    MonthPosition.FIRST: "1",
    MonthPosition.SECOND: "2",
    MonthPosition.THIRD: "3",
    MonthPosition.FOURTH: "4",
    MonthPosition.LAST: "-1",
}

_KIND_FREQ = {
    PatternKind.DAILY: "DAILY",
    PatternKind.WEEKLY: "WEEKLY",
    PatternKind.MONTHLY: "MONTHLY",
    PatternKind.YEARLY: "YEARLY",
}


def resolve_rrule(pattern: str) -> str | None:
    """Convert a preset name to an RRULE string.

    Args:
        pattern: Preset name (e.g., "daily", "bi-weekly")

    Returns:
        RRULE string, or None if pattern is not recognized
    """
    return RECURRENCE_PATTERNS.get(pattern.lower().replace("-", ""))


def describe_rrule(rrule: str) -> str:
    """Convert an RRULE string back to a preset name.

    Args:
        rrule: iCalendar RRULE string

    Returns:
        Preset name, or the RRULE itself when it matches no preset
    """
    reverse = {v: k for k, v in RECURRENCE_PATTERNS.items()}
    return reverse.get(rrule, rrule)


def _freq_and_interval(config: PatternConfig) -> tuple[str, int, list[str]]:
    if config.kind != PatternKind.CUSTOM:
        return _KIND_FREQ[config.kind], config.interval, []

    frequency = config.frequency
    if frequency == Frequency.WEEKDAYS:
        return "WEEKLY", 1, ["BYDAY=MO,TU,WE,TH,FR"]
    if frequency == Frequency.BIWEEKLY:
        return "WEEKLY", 2, []
    if frequency == Frequency.QUARTERLY:
        return "MONTHLY", 3, []
    if frequency in (Frequency.DAILY, Frequency.MONTHLY, Frequency.YEARLY):
        return frequency.value.upper(), config.interval, []
    return "WEEKLY", config.interval, []


def to_rrule(config: PatternConfig) -> str:
    """Render *config* as an iCalendar RRULE string.

    Rules pinned to custom weekdays, month days or a month position are
    emitted without INTERVAL since they step one week or month at a time.
    COUNT includes the start date, so it is one more than ``max_occurrences``.

    Expanded from a start date that fits the rule, the RRULE yields the same
    dates as ``generate`` with two exceptions. Positional rules (``BYDAY=-1FR``)
    may also fire later in the start month, which ``generate`` skips. Plain
    monthly and yearly steps from the 29th-31st skip short months instead of
    clamping to their last day.
    """
    freq, interval, extra = _freq_and_interval(config)
    parts = [f"FREQ={freq}"]

    if config.custom_weekdays:
        parts.append("BYDAY=" + ",".join(BYDAY_CODES[d] for d in config.custom_weekdays))
    elif config.custom_month_days:
        parts.append("BYMONTHDAY=" + ",".join(str(d) for d in config.custom_month_days))
    elif config.is_positional:
        prefix = _POSITION_PREFIX[config.custom_month_position]
        parts.append(f"BYDAY={prefix}{BYDAY_CODES[config.custom_month_weekday.number]}")
    else:
        if interval != 1:
            parts.append(f"INTERVAL={interval}")
        parts.extend(extra)

    if config.end_condition == EndCondition.ON_DATE and config.end_date:
        parts.append(f"UNTIL={config.end_date.strftime('%Y%m%d')}")
    elif config.end_condition == EndCondition.AFTER_OCCURRENCES and config.max_occurrences:
        parts.append(f"COUNT={config.max_occurrences + 1}")

    return ";".join(parts)
