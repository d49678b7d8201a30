"""Output formatters for occurrences, presets and settings.

``format_output`` renders plain data (dicts and lists of dicts) in one of the
CLI output formats: ``pretty``, ``table``, ``json``, ``yaml`` or ``quiet``.
Occurrence lists (items carrying ``occurrence_number``) get their own layout
in pretty and table modes.
"""

import json
from datetime import date
from typing import Any

import yaml
from rich.table import Table

from taskrecur.utils.ui.console import get_console

console = get_console()

STATUS_ICONS = {
    "seed": "📌",
    "generated": "🔄",
}

# Column headings that read better than the title-cased key
_COLUMN_LABELS = {
    "id": "ID",
    "rrule": "RRULE",
    "occurrence_number": "#",
    "is_generated": "Generated",
}


def format_output(data: Any, output_format: str = "pretty", date_format: str = "%Y-%m-%d") -> None:
    """Render *data* in *output_format*; unknown formats fall back to pretty."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=_json_default))
    elif output_format == "yaml":
        print(yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False))
    elif output_format in ("table", "wide"):
        format_table(data, date_format=date_format)
    elif output_format == "quiet":
        format_quiet(data, date_format=date_format)
    else:
        format_pretty(data, date_format=date_format)


def _json_default(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _plain(data: Any) -> Any:
    """Convert dates to ISO strings so yaml emits plain scalars."""
    if isinstance(data, dict):
        return {k: _plain(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(v) for v in data]
    if isinstance(data, date):
        return data.isoformat()
    return data


def _cell(value: Any, date_format: str) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, date):
        return value.strftime(date_format)
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def _label(key: str) -> str:
    return _COLUMN_LABELS.get(key, key.replace("_", " ").title())


def _is_instance_list(data: Any) -> bool:
    return (
        isinstance(data, list)
        and bool(data)
        and isinstance(data[0], dict)
        and "occurrence_number" in data[0]
    )


# ============================================================================
# Status lines
# ============================================================================


def _status(label: str, style: str, message: str) -> None:
    console.print(f"[bold {style}]{label}:[/bold {style}] {message}")


def format_error(message: str) -> None:
    _status("Error", "red", message)


def format_success(message: str) -> None:
    _status("Success", "green", message)


def format_warning(message: str) -> None:
    _status("Warning", "yellow", message)


# ============================================================================
# Table format
# ============================================================================


def format_table(data: Any, date_format: str = "%Y-%m-%d") -> None:
    """Render a list of rows or a single mapping as a table."""
    if not data:
        console.print("[yellow]Nothing to show[/yellow]")
    elif _is_instance_list(data):
        format_instances_table(data, date_format=date_format)
    elif isinstance(data, list) and isinstance(data[0], dict):
        format_dict_table(data, date_format=date_format)
    elif isinstance(data, dict):
        format_key_value_table(data, date_format=date_format)
    else:
        for item in data if isinstance(data, list) else [data]:
            console.print(item)


def format_dict_table(rows: list[dict], date_format: str = "%Y-%m-%d") -> None:
    """One column per key of the first row."""
    columns = list(rows[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(_label(column))
    for row in rows:
        table.add_row(*[_cell(row.get(column), date_format) for column in columns])
    console.print(table)


def format_key_value_table(item: dict, date_format: str = "%Y-%m-%d") -> None:
    """Two-column setting/value table, keys shown as given."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in item.items():
        table.add_row(key, _cell(value, date_format))
    console.print(table)


def format_instances_table(instances: list[dict], date_format: str = "%Y-%m-%d") -> None:
    """Occurrences as #, date, weekday and generated flag."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Date")
    table.add_column("Day")
    table.add_column("Generated", justify="center")
    for item in instances:
        occurrence = item["date"]
        table.add_row(
            str(item["occurrence_number"]),
            _cell(occurrence, date_format),
            occurrence.strftime("%a") if isinstance(occurrence, date) else "",
            _cell(bool(item.get("is_generated")), date_format),
        )
    console.print(table)


# ============================================================================
# Pretty format
# ============================================================================


def format_pretty(data: Any, date_format: str = "%Y-%m-%d") -> None:
    """Render *data* as coloured lines."""
    if not data:
        console.print("[yellow]Nothing to show[/yellow]")
    elif _is_instance_list(data):
        format_instances_pretty(data, date_format=date_format)
    elif isinstance(data, list) and isinstance(data[0], dict):
        format_named_list_pretty(data)
    elif isinstance(data, dict):
        for key, value in data.items():
            console.print(f"[cyan]{key}:[/cyan] {_cell(value, date_format)}")
    else:
        for item in data if isinstance(data, list) else [data]:
            console.print(f"• {item}")


def format_instances_pretty(instances: list[dict], date_format: str = "%Y-%m-%d") -> None:
    """One line per occurrence followed by a generated count."""
    for item in instances:
        occurrence = item["date"]
        icon = STATUS_ICONS["generated" if item.get("is_generated") else "seed"]
        when = _cell(occurrence, date_format)
        weekday = occurrence.strftime("%a") if isinstance(occurrence, date) else ""
        number = item["occurrence_number"]
        console.print(f"{icon} [dim]#{number:<3}[/dim] [bold]{when}[/bold] [dim]{weekday}[/dim]")

    generated = sum(1 for item in instances if item.get("is_generated"))
    console.print()
    console.print(f"[dim]{generated} generated occurrence(s) after the original[/dim]")


def format_named_list_pretty(items: list[dict]) -> None:
    """Bullet list of ``name (id) - description`` entries."""
    for item in items:
        label = f"[bold]{item.get('name', item.get('id', 'Item'))}[/bold]"
        if "name" in item and "id" in item:
            label += f" [dim]({item['id']})[/dim]"
        if "description" in item:
            label += f" - {item['description']}"
        console.print(f"• {label}")


# ============================================================================
# Quiet format
# ============================================================================


def format_quiet(data: Any, date_format: str = "%Y-%m-%d") -> None:
    """Print only occurrence dates or ids, one per line."""
    items = data if isinstance(data, list) else [data]
    for item in items:
        if not isinstance(item, dict):
            continue
        if isinstance(item.get("date"), date):
            print(item["date"].strftime(date_format))
        elif "id" in item:
            print(item["id"])
