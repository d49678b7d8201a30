"""Command 'preview' of taskrecur - list upcoming occurrences of a rule."""

from pathlib import Path

import typer

from taskrecur.core.formatter import describe
from taskrecur.core.instances import generate
from taskrecur.core.validator import ensure_valid
from taskrecur.services.config_service import get_config_service
from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS
from taskrecur.utils.ui.console import get_console, set_color
from taskrecur.utils.ui.formatters import format_output, format_warning

from .decorators import AppError, command_wrapper
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
    parse_date,
)

console = get_console()


@command_wrapper
def preview_command(
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
    start: str = typer.Option("today", "--start", "-s", help="Start date (YYYY-MM-DD)"),
    max_instances: int | None = typer.Option(
        None, "--max", "-n", help="Maximum generated occurrences"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Preview the occurrences a recurrence rule generates.

    Examples:
      taskrecur preview --preset weekdays --start 2024-06-01 --max 5
      taskrecur preview --kind weekly --days mon,wed,fri --count 6
      taskrecur preview --kind monthly --position last --weekday friday
    """
    settings = get_config_service().config
    limit = settings.generation.max_instances_limit
    if max_instances is None:
        max_instances = settings.generation.default_max_instances
    if max_instances < 0 or max_instances > limit:
        raise AppError(f"--max must be between 0 and {limit}", ERROR_INVALID_ARGS)

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
    start_date = parse_date(start, "start date")

    instances = generate(start_date, config, max_instances)
    output_format = output or settings.output.format
    if not settings.output.color:
        set_color(False)

    if output_format == "pretty":
        console.print(f"[bold cyan]{describe(config)}[/bold cyan]")
        console.print()
        if len(instances) == 1 and max_instances > 0:
            format_warning("The rule ends before any occurrence after the start date")
    format_output(
        [instance.model_dump() for instance in instances],
        output_format,
        date_format=settings.output.date_format,
    )
