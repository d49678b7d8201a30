"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS
from taskrecur.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Return up to three command names that resemble *attempted*."""
    return get_close_matches(attempted, available, n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF)


class SuggestingGroup(TyperGroup):
    """Typer group that answers a mistyped command with close matches.

    ``taskrecur previw`` prints ``Did you mean this?  preview`` and exits with
    ERROR_INVALID_ARGS. Without a close match click's own usage error is kept.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            suggestions = suggest_commands(args[0], list(self.commands))
            if not suggestions:
                raise
            _print_suggestions(ctx.info_name, args[0], suggestions)
            raise typer.Exit(ERROR_INVALID_ARGS) from e


def _print_suggestions(program: str, attempted: str, suggestions: list[str]) -> None:
    console = get_console()
    console.print(f'[red]Error:[/red] unknown command "{attempted}" for "{program}"')
    console.print()
    if len(suggestions) == 1:
        console.print("[yellow]Did you mean this?[/yellow]")
    else:
        console.print("[yellow]Did you mean one of these?[/yellow]")
    for suggestion in suggestions:
        console.print(f"        {suggestion}")
    console.print()
    console.print(f"[dim]Run '{program} --help' for the list of commands.[/dim]")
