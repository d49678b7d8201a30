"""Shared command-line options for describing a recurrence rule.

Commands collect the options into a raw field mapping which is then checked
by :func:`taskrecur.core.validator.validate`, so every problem with the rule
is reported together.
"""

from __future__ import annotations

import json
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import typer

from taskrecur.commands.decorators import AppError
from taskrecur.core.fields import fields_to_config_data
from taskrecur.core.presets import get_preset
from taskrecur.models.pattern import EndCondition, Weekday
from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

PRESET_OPTION = typer.Option(
    None, "--preset", "-p", help="Start from a preset (daily, weekdays, weekly, ...)"
)
KIND_OPTION = typer.Option(
    None, "--kind", "-k", help="Pattern kind (daily/weekly/monthly/yearly/custom)"
)
FREQUENCY_OPTION = typer.Option(
    None, "--frequency", "-f", help="Frequency for custom patterns"
)
INTERVAL_OPTION = typer.Option(None, "--interval", "-i", help="Repeat every N units")
DAYS_OPTION = typer.Option(
    None, "--days", help="Weekdays for weekly patterns (e.g. mon,wed,fri or 1,3,5)"
)
MONTH_DAYS_OPTION = typer.Option(
    None, "--month-days", help="Days of month for monthly patterns (e.g. 1,15)"
)
POSITION_OPTION = typer.Option(
    None, "--position", help="Month position (first/second/third/fourth/last)"
)
WEEKDAY_OPTION = typer.Option(
    None, "--weekday", help="Weekday used with --position (e.g. friday)"
)
UNTIL_OPTION = typer.Option(None, "--until", help="End date (YYYY-MM-DD)")
COUNT_OPTION = typer.Option(None, "--count", help="End after N occurrences")
FIELDS_OPTION = typer.Option(
    None, "--fields", help="JSON file holding a task custom-fields map"
)

_WEEKDAY_ABBREVIATIONS = {day.value[:3]: day.number for day in Weekday}


def parse_date(text: str, option: str = "date") -> date:
    """Parse ``today``, ``tomorrow`` or an ISO ``YYYY-MM-DD`` date."""
    value = text.strip().lower()
    if value == "today":
        return date.today()
    if value == "tomorrow":
        return date.today() + timedelta(days=1)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"Invalid {option}: {text} (expected YYYY-MM-DD)", ERROR_INVALID_ARGS
        ) from e


def parse_weekdays(text: str) -> list[int]:
    """Parse ``mon,wed,fri`` or ``1,3,5`` into weekday numbers (0=Sunday)."""
    days = []
    for token in _split(text):
        if token.lstrip("-").isdigit():
            days.append(int(token))
        elif token[:3] in _WEEKDAY_ABBREVIATIONS:
            days.append(_WEEKDAY_ABBREVIATIONS[token[:3]])
        else:
            raise AppError(f"Unknown weekday: {token}", ERROR_INVALID_ARGS)
    return days


def parse_int_list(text: str, option: str) -> list[int]:
    try:
        return [int(token) for token in _split(text)]
    except ValueError as e:
        raise AppError(f"Invalid {option}: {text}", ERROR_INVALID_ARGS) from e


def _split(text: str) -> list[str]:
    return [token.strip().lower() for token in text.split(",") if token.strip()]


def load_fields_file(path: Path) -> dict[str, Any]:
    """Read a custom-fields map from a JSON file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise AppError(f"Fields file not found: {path}", ERROR_NOT_FOUND) from e
    except json.JSONDecodeError as e:
        raise AppError(f"Fields file is not valid JSON: {e}", ERROR_INVALID_ARGS) from e
    if not isinstance(data, dict):
        raise AppError("Fields file must contain a JSON object", ERROR_INVALID_ARGS)
    return data


def build_rule(
    preset: str | None = None,
    kind: str | None = None,
    frequency: str | None = None,
    interval: int | None = None,
    days: str | None = None,
    month_days: str | None = None,
    position: str | None = None,
    weekday: str | None = None,
    until: str | None = None,
    count: int | None = None,
    fields_file: Path | None = None,
) -> dict[str, Any]:
    """Combine command-line options into raw ``PatternConfig`` field values.

    A preset or a fields file provides the base rule; individual options
    override it. The result is not validated here.
    """
    if preset and fields_file:
        raise AppError("Use either --preset or --fields, not both", ERROR_INVALID_ARGS)
    if until and count is not None:
        raise AppError("Use either --until or --count, not both", ERROR_INVALID_ARGS)

    if preset:
        rule: dict[str, Any] = get_preset(preset).config.model_dump()
    elif fields_file:
        rule = fields_to_config_data(load_fields_file(fields_file))
    elif kind:
        rule = {}
    else:
        raise AppError(
            "Describe the rule with --preset, --kind or --fields", ERROR_INVALID_ARGS
        )

    if kind:
        rule["kind"] = kind.lower()
    if frequency:
        rule["frequency"] = frequency.lower()
    if interval is not None:
        rule["interval"] = interval
    if days:
        rule["custom_weekdays"] = parse_weekdays(days)
    if month_days:
        rule["custom_month_days"] = parse_int_list(month_days, "month days")
    if position:
        rule["custom_month_position"] = position.lower()
    if weekday:
        rule["custom_month_weekday"] = weekday.lower()

    if until:
        rule["end_condition"] = EndCondition.ON_DATE.value
        rule["end_date"] = parse_date(until, "end date")
        rule["max_occurrences"] = None
    elif count is not None:
        rule["end_condition"] = EndCondition.AFTER_OCCURRENCES.value
        rule["max_occurrences"] = count
        rule["end_date"] = None

    return rule
