"""Command 'validate' of taskrecur - check a recurrence rule."""

from pathlib import Path

from taskrecur.core.formatter import describe
from taskrecur.core.validator import ensure_valid, pattern_warnings
from taskrecur.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper
from .rule_options import (
    COUNT_OPTION,
    DAYS_OPTION,
    FIELDS_OPTION,
    FREQUENCY_OPTION,
    INTERVAL_OPTION,
    KIND_OPTION,
    MONTH_DAYS_OPTION,
    POSITION_OPTION,
    PRESET_OPTION,
    UNTIL_OPTION,
    WEEKDAY_OPTION,
    build_rule,
)


@command_wrapper
def validate_command(
    preset: str | None = PRESET_OPTION,
    kind: str | None = KIND_OPTION,
    frequency: str | None = FREQUENCY_OPTION,
    interval: int | None = INTERVAL_OPTION,
    days: str | None = DAYS_OPTION,
    month_days: str | None = MONTH_DAYS_OPTION,
    position: str | None = POSITION_OPTION,
    weekday: str | None = WEEKDAY_OPTION,
    until: str | None = UNTIL_OPTION,
    count: int | None = COUNT_OPTION,
    fields: Path | None = FIELDS_OPTION,
) -> None:
    """Check a recurrence rule and report every problem found.

    A valid rule may still print warnings, e.g. a daily rule with no end.
    """
    rule = build_rule(
        preset=preset,
        kind=kind,
        frequency=frequency,
        interval=interval,
        days=days,
        month_days=month_days,
        position=position,
        weekday=weekday,
        until=until,
        count=count,
        fields_file=fields,
    )
    config = ensure_valid(rule)
    format_success(f"Valid rule: {describe(config)}")
    for warning in pattern_warnings(config):
        format_warning(warning)
