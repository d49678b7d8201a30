"""Configuration management commands."""

import typer

from taskrecur.services.config_service import get_config_service
from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskrecur.utils.typer_helpers import SuggestingGroup
from taskrecur.utils.ui.console import get_console
from taskrecur.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console(highlight=False)


@app.command("list")
@command_wrapper
def list_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show every setting."""
    format_output(get_config_service().as_flat_dict(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e
    format_success(f"Set {key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?"):
        console.print("[yellow]Cancelled.[/yellow]")
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
