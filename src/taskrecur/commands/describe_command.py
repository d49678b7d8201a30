"""Command 'describe' of taskrecur - render a rule for display or storage."""

import json
from pathlib import Path

import typer

from taskrecur.core.fields import to_fields
from taskrecur.core.formatter import format_end_condition, format_pattern
from taskrecur.core.validator import complexity_score, ensure_valid
from taskrecur.utils.recurrence import to_rrule
from taskrecur.utils.ui.console import get_console

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

console = get_console(highlight=False)


@command_wrapper
def describe_command(
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
    rrule: bool = typer.Option(False, "--rrule", help="Also print the iCalendar RRULE"),
    fields_out: bool = typer.Option(
        False, "--fields-out", help="Print the task custom-fields map as JSON"
    ),
) -> None:
    """Describe a recurrence rule in words."""
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

    if fields_out:
        print(json.dumps(to_fields(config), indent=2))
        return

    console.print(f"[cyan]Pattern:[/cyan] {format_pattern(config)}")
    console.print(f"[cyan]Ends:[/cyan] {format_end_condition(config)}")
    console.print(f"[cyan]Complexity:[/cyan] {complexity_score(config):.1f}/10")
    if rrule:
        console.print(f"[cyan]RRULE:[/cyan] {to_rrule(config)}")
