"""Command 'presets' of taskrecur - list the built-in recurrence presets."""

import typer

from taskrecur.core.formatter import format_pattern
from taskrecur.core.presets import presets
from taskrecur.utils.recurrence import to_rrule
from taskrecur.utils.ui.formatters import format_output

from .decorators import command_wrapper


@command_wrapper
def presets_command(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List the built-in recurrence presets."""
    rows = [
        {
            "id": preset.id,
            "name": preset.name,
            "description": format_pattern(preset.config),
            "rrule": to_rrule(preset.config),
        }
        for preset in presets()
    ]
    format_output(rows, output)
